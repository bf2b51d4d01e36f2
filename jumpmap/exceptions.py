"""Custom exceptions for jumpmap."""


class JumpMapError(Exception):
    """Base exception for jumpmap."""

    pass


class ConfigurationError(JumpMapError):
    """Configuration-related errors."""

    pass


class ValidationError(JumpMapError):
    """Invalid user input (empty alias, unknown shell, ...)."""

    pass


class BookmarkError(JumpMapError):
    """Bookmark lookup errors reported back to the user."""

    def __init__(self, message: str, alias: str):
        super().__init__(message)
        self.alias = alias


class AliasNotFoundError(BookmarkError):
    """Alias is not present in the bookmark map."""

    def __init__(self, alias: str):
        super().__init__(
            f"No bookmark named '{alias}'. "
            f"Run 'jump' to list bookmarks or 'setjump {alias}' to create it.",
            alias,
        )


class StaleTargetError(BookmarkError):
    """Alias points at a directory that no longer exists."""

    def __init__(self, alias: str, path: str):
        super().__init__(
            f"Bookmark '{alias}' points to '{path}', which no longer exists. "
            f"Remove it with 'deljump {alias}'.",
            alias,
        )
        self.path = path


class StoreError(JumpMapError):
    """Backing file errors."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class CorruptStoreError(StoreError):
    """Backing file exists but does not hold a valid bookmark map."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Bookmark store '{path}' is corrupt: {reason}", path)
        self.reason = reason


class PersistenceError(StoreError):
    """Backing file could not be written."""

    def __init__(self, path: str, message: str):
        super().__init__(f"Could not save bookmarks to '{path}': {message}", path)
