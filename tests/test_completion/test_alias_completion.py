from pathlib import Path

from jumpmap.completion import AliasCandidate, AliasCompleter, complete_aliases
from jumpmap.store import BookmarkStore

BOOKMARKS = {"work": "/w", "workshop": "/shop", "docs": "/d"}


def test_complete_prefix_filters_and_sorts():
    assert complete_aliases("wo", BOOKMARKS) == [
        AliasCandidate("work", "/w"),
        AliasCandidate("workshop", "/shop"),
    ]


def test_complete_empty_prefix_returns_everything_sorted():
    assert [c.alias for c in complete_aliases("", BOOKMARKS)] == ["docs", "work", "workshop"]


def test_complete_no_match_returns_empty():
    assert complete_aliases("zz", BOOKMARKS) == []


def test_complete_is_case_sensitive():
    assert complete_aliases("WO", BOOKMARKS) == []


def test_completer_reads_store_on_every_call(tmp_path: Path):
    store = BookmarkStore(tmp_path / ".jumpmap.json")
    completer = AliasCompleter(store)
    store.save({"docs": "/d"})
    assert [c.alias for c in completer.candidates()] == ["docs"]

    store.save({"docs": "/d", "dl": "/downloads"})

    assert [c.alias for c in completer.candidates("d")] == ["dl", "docs"]


def test_completer_missing_store_returns_empty(tmp_path: Path):
    completer = AliasCompleter(BookmarkStore(tmp_path / "absent.json"))

    assert completer.candidates("w") == []


def test_completer_corrupt_store_returns_empty(tmp_path: Path):
    path = tmp_path / ".jumpmap.json"
    path.write_text("}}not json", encoding="utf-8")

    assert AliasCompleter(BookmarkStore(path)).candidates("") == []


def test_completer_adapters_carry_path_hint(tmp_path: Path):
    store = BookmarkStore(tmp_path / ".jumpmap.json")
    store.save(BOOKMARKS)
    completer = AliasCompleter(store)

    assert completer.click_items("work") == [("work", "/w"), ("workshop", "/shop")]
    assert completer.lines("d") == ["docs\t/d"]


def test_completer_with_unstatable_store_offers_nothing(tmp_path: Path):
    completer = AliasCompleter(BookmarkStore(tmp_path / ("y" * 300 + ".json")))

    assert completer.candidates("") == []
