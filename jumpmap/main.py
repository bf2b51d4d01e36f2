"""Main entry point for jumpmap."""

from pathlib import Path

import typer
from rich.console import Console

from jumpmap import commands
from jumpmap.completion import AliasCompleter
from jumpmap.config import Config, get_config, set_config
from jumpmap.context import CommandResult, ShellContext
from jumpmap.exceptions import (
    BookmarkError,
    ConfigurationError,
    JumpMapError,
    PersistenceError,
    ValidationError,
)
from jumpmap.logging import configure_logging, log
from jumpmap.shell import render_init_script, supported_shells
from jumpmap.store import BookmarkStore

app = typer.Typer(help="jumpmap - directory bookmarks for your shell", no_args_is_help=True)


def _console(stderr: bool = False) -> Console:
    return Console(
        stderr=stderr,
        highlight=False,
        emoji=False,
        soft_wrap=True,
        no_color=not get_config().display.colors,
    )


def _report_error(error: JumpMapError) -> None:
    _console(stderr=True).print(f"Error: {error}", style="red", markup=False)


def _render(result: CommandResult) -> None:
    """Print warnings to stderr and result lines to stdout."""
    err = _console(stderr=True)
    for warning in result.warnings:
        err.print(f"Warning: {warning}", style="yellow", markup=False)

    out = _console()
    if result.entries:
        for entry, line in zip(result.entries, result.lines):
            out.print(line, style="green" if entry.exists else "red", markup=False)
        return
    for line in result.lines:
        out.print(line, markup=False)


def _execute(handler, *args, **kwargs) -> CommandResult | None:
    """Run a command handler, reporting user-facing failures.

    Bookmark and input errors are reported and the command ends normally;
    a failed save aborts with exit code 1.
    """
    try:
        return handler(*args, **kwargs)
    except (BookmarkError, ValidationError) as e:
        _report_error(e)
        return None
    except PersistenceError as e:
        _report_error(e)
        log.debug("save failed", path=e.path, exc_info=True)
        raise typer.Exit(code=1) from e


def _store(ctx: typer.Context) -> BookmarkStore:
    if isinstance(ctx.obj, BookmarkStore):
        return ctx.obj
    return BookmarkStore(get_config().store_path())


def _complete_alias(ctx: typer.Context, incomplete: str) -> list[tuple[str, str]]:
    """Typer completion callback offering known aliases.

    The group callback does not run during shell completion, so the
    root command's ``--config``/``--store`` values are read from its params.
    """
    params = ctx.find_root().params
    try:
        cfg = Config.from_yaml(Path(params["config"])) if params.get("config") else get_config()
        configure_logging("CRITICAL")
    except ConfigurationError:
        return []
    if params.get("store"):
        cfg = cfg.model_copy(deep=True)
        cfg.store.path = params["store"]
    return AliasCompleter(BookmarkStore(cfg.store_path())).click_items(incomplete)


@app.callback()
def main(
    ctx: typer.Context,
    config: str = typer.Option("", "-c", "--config", help="Path to config file"),
    store: str = typer.Option("", "--store", help="Override bookmark file path"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging"),
) -> None:
    """Load configuration, set up logging and open the bookmark store."""
    try:
        cfg = Config.from_yaml(Path(config)) if config else Config.load()
    except ConfigurationError as e:
        set_config(Config())
        _report_error(e)
        raise typer.Exit(code=2) from e

    if store:
        cfg.store.path = store
    set_config(cfg)

    if ctx.invoked_subcommand == "complete":
        configure_logging("CRITICAL")
    else:
        configure_logging("DEBUG" if verbose else None)

    ctx.obj = BookmarkStore(cfg.store_path())


@app.command("jump")
def jump_command(
    ctx: typer.Context,
    alias: str = typer.Argument(
        "",
        help="Bookmark to jump to; omit to list bookmarks",
        autocompletion=_complete_alias,
    ),
    emit_path: bool = typer.Option(
        False, "--emit-path", help="Print only the target directory (for shell wrappers)"
    ),
) -> None:
    """List bookmarks, or resolve ALIAS to its directory."""
    store = _store(ctx)
    shell_ctx = ShellContext.from_process()

    if not alias:
        display = get_config().display
        result = commands.list_bookmarks(
            shell_ctx,
            store,
            exists_marker=display.exists_marker,
            missing_marker=display.missing_marker,
        )
        _render(result)
        return

    result = _execute(commands.jump, shell_ctx, store, alias)
    if result is None:
        return
    if emit_path:
        typer.echo(str(result.context.cwd))
        return
    _render(result)


@app.command("setjump")
def setjump_command(
    ctx: typer.Context,
    alias: str = typer.Argument(
        ..., help="Name for the current directory", autocompletion=_complete_alias
    ),
) -> None:
    """Bookmark the current directory as ALIAS."""
    result = _execute(commands.set_jump, ShellContext.from_process(), _store(ctx), alias)
    if result is not None:
        _render(result)


@app.command("deljump")
def deljump_command(
    ctx: typer.Context,
    alias: str = typer.Argument(..., help="Bookmark to remove", autocompletion=_complete_alias),
) -> None:
    """Remove the bookmark ALIAS."""
    result = _execute(commands.remove_jump, ShellContext.from_process(), _store(ctx), alias)
    if result is not None:
        _render(result)


@app.command("complete", hidden=True)
def complete_command(
    ctx: typer.Context,
    prefix: str = typer.Argument("", help="Alias prefix typed so far"),
) -> None:
    """Print ``alias<TAB>path`` completion candidates."""
    for line in AliasCompleter(_store(ctx)).lines(prefix):
        typer.echo(line)


@app.command("init")
def init_command(
    shell: str = typer.Argument(..., help=f"One of: {', '.join(supported_shells())}"),
    exe: str = typer.Option("jumpmap", "--exe", help="Command the snippet should invoke"),
) -> None:
    """Print shell integration (jump/setjump/deljump functions and completion)."""
    try:
        script = render_init_script(shell, exe=exe)
    except ValidationError as e:
        _report_error(e)
        raise typer.Exit(code=2) from e
    typer.echo(script, nl=False)


@app.command("where")
def where_command(ctx: typer.Context) -> None:
    """Print the bookmark file path."""
    typer.echo(str(_store(ctx).path))


@app.command("version")
def version_command() -> None:
    """Show version information."""
    from jumpmap import __version__

    typer.echo(f"jumpmap v{__version__}")


if __name__ == "__main__":
    app()
