import pathlib

import pytest

from wiki_paths import CONTENT_SELECTOR, Options, PathMapper, is_html

SRC = pathlib.Path("/exports/site")
OUT = pathlib.Path("/wiki")


def test_destination_path_reroots_onto_output():
    mapper = PathMapper(SRC, OUT)
    assert mapper.destination_path(SRC / "guides" / "setup.html") == OUT / "guides" / "setup.html"


def test_rename_replaces_only_the_basename():
    mapper = PathMapper(SRC, OUT, {"index.html": "Home.md"})
    assert mapper.destination_path(SRC / "index.html") == OUT / "Home.md"
    assert mapper.destination_path(SRC / "docs" / "index.html") == OUT / "docs" / "Home.md"


def test_rename_never_touches_directory_names():
    mapper = PathMapper(SRC, OUT, {"index.html": "Home.md"})
    assert mapper.destination_path(SRC / "index.html" / "x.png") == OUT / "index.html" / "x.png"


def test_path_outside_source_root_is_rejected():
    # Fixed behaviour: the old prefix substitution silently returned the path unchanged.
    mapper = PathMapper(SRC, OUT)
    with pytest.raises(ValueError, match="is not under"):
        mapper.destination_path(pathlib.Path("/elsewhere/page.html"))


@pytest.mark.parametrize("name, expected", [
    ("page.html", "page.md"),
    ("page.HTML", "page.md"),
    ("page.htm", "page.md"),
    # Fixed behaviour: only a real .html/.htm extension is swapped.
    ("page.xhtml", "page.xhtml"),
    ("oldhtml", "oldhtml"),
])
def test_destination_markdown_path_swaps_html_extension_only(name, expected):
    mapper = PathMapper(SRC, OUT)
    assert mapper.destination_markdown_path(SRC / name) == OUT / expected


def test_destination_markdown_path_keeps_renamed_markdown_name():
    mapper = PathMapper(SRC, OUT, {"index.html": "Home.md", "start.html": "Start.html"})
    assert mapper.destination_markdown_path(SRC / "index.html") == OUT / "Home.md"
    assert mapper.destination_markdown_path(SRC / "start.html") == OUT / "Start.md"


def test_rename_is_reported_in_debug_mode(capsys):
    PathMapper(SRC, OUT, {"index.html": "Home.md"}, debug_enabled=True).destination_path(SRC / "index.html")
    assert "replacing index.html w/ Home.md" in capsys.readouterr().out


def test_is_html():
    assert is_html(pathlib.Path("a.HTM"))
    assert not is_html(pathlib.Path("a.xhtml"))
    assert not is_html(pathlib.Path("html"))


def test_options_defaults_and_from_mapping():
    opts = Options.from_mapping({"create_sidebars": True, "unknown": 1})
    assert opts.create_sidebars is True
    assert opts.content_selector == CONTENT_SELECTOR
    assert opts.fall_back_content_selector == "body"
    assert dict(opts.replace_page_paths) == {}
    assert Options.from_mapping(None) == Options()
