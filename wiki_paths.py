"""
wiki_paths.py – options, errors and source → output path mapping.

A page at  site/guides/setup.html  lands at  wiki/guides/setup.md ;
a basename listed in ``replace_page_paths`` keeps its folder but takes the
mapped name instead (e.g. index.html → Home.md).
"""
import pathlib
from dataclasses import dataclass, field, fields
from typing import Mapping, Optional

# ── 0.  Config -----------------------------------------------------------
CONTENT_SELECTOR           = ".sites-layout-name-one-column"   # exported column
FALL_BACK_CONTENT_SELECTOR = "body"
HTML_SUFFIXES              = {".html", ".htm"}
STRIP_TAGS                 = ("script", "style")
HEADING_STYLE              = "ATX"


# ── 1.  Errors -----------------------------------------------------------
class SiteToWikiError(Exception):
    """Base class for conversion failures."""


class ContentNotFoundError(SiteToWikiError):
    """Neither the content selector nor the fall-back matched a page."""

    def __init__(self, page: pathlib.Path, selectors: tuple):
        self.page = page
        self.selectors = selectors
        super().__init__(f"no element matches {' or '.join(map(repr, selectors))} in {page}")


# ── 2.  Options / debug printer -----------------------------------------
@dataclass(frozen=True)
class Options:
    content_selector: str = CONTENT_SELECTOR
    fall_back_content_selector: str = FALL_BACK_CONTENT_SELECTOR
    create_sidebars: bool = False
    replace_page_paths: Mapping[str, str] = field(default_factory=dict)
    debug: bool = False
    strip_tags: tuple = STRIP_TAGS
    heading_style: str = HEADING_STYLE

    @classmethod
    def from_mapping(cls, opts: Optional[Mapping]) -> "Options":
        """Build options from a plain dict; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (opts or {}).items() if k in known})


def debug(enabled: bool, *msg: object) -> None:
    if enabled:
        print("[site-to-wiki]", *msg)


# ── 3.  Path mapping -----------------------------------------------------
def is_html(path: pathlib.Path) -> bool:
    return path.suffix.lower() in HTML_SUFFIXES


class PathMapper:
    """Maps paths under ``source_root`` onto ``output_root``."""

    def __init__(self, source_root, output_root, rename: Optional[Mapping[str, str]] = None,
                 debug_enabled: bool = False):
        self.source_root = pathlib.Path(source_root)
        self.output_root = pathlib.Path(output_root)
        self.rename = dict(rename or {})
        self.debug_enabled = debug_enabled

    def destination_path(self, source_path) -> pathlib.Path:
        """
        Re-root *source_path* onto the output tree, then apply the basename
        override if one is configured.  Only the last segment is ever renamed.

        Raises ValueError for a path outside the source root.
        """
        source_path = pathlib.Path(source_path)
        try:
            rel = source_path.relative_to(self.source_root)
        except ValueError as e:
            raise ValueError(f"{source_path} is not under {self.source_root}") from e

        dest = self.output_root / rel
        new_name = self.rename.get(source_path.name)
        if new_name:
            debug(self.debug_enabled, f"replacing {source_path.name} w/ {new_name}")
            dest = dest.with_name(new_name)
        return dest

    def destination_markdown_path(self, source_path) -> pathlib.Path:
        dest = self.destination_path(source_path)
        if is_html(dest):
            return dest.with_suffix(".md")
        return dest
