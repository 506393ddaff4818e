#!/usr/bin/env python3
"""
site_to_wiki.py – turn an exported static site into a GitHub-style wiki tree.

    site/                         wiki/
    ├─ index.html          →      ├─ Home.md            (--rename index.html=Home.md)
    ├─ img/logo.png        →      ├─ img/logo.png
    └─ my-section/                └─ my-section/
       ├─ a.html           →         ├─ a.md
       └─ b-c.html         →         ├─ b-c.md
                                     └─ _Sidebar.md     (--sidebars)

Usage:
    python site_to_wiki.py ./site ./wiki --sidebars --rename index.html=Home.md

Pages are converted first, then assets are copied, then sidebars written.
Nothing is rolled back: a failed page or asset copy stops the run and leaves
what was already written on disk.
"""
import argparse, enum, pathlib, shutil, sys
from typing import Callable, List, Optional, Tuple

from html_to_md import page_to_markdown
from sidebar import SidebarIndex, render_sidebars
from wiki_paths import (CONTENT_SELECTOR, FALL_BACK_CONTENT_SELECTOR,
                        ContentNotFoundError, Options, PathMapper, debug, is_html)


# ── 1.  Walk -------------------------------------------------------------
def iter_tree(root: pathlib.Path):
    """Depth-first, pre-order, siblings in name order."""
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        yield entry
        if entry.is_dir() and not entry.is_symlink():
            yield from iter_tree(entry)


def walk_site(source_root: pathlib.Path, mapper: PathMapper,
              index: SidebarIndex) -> Tuple[List[pathlib.Path], List[pathlib.Path]]:
    """Split the tree into (pages, assets) and record every page in *index*."""
    pages, assets = [], []
    for path in iter_tree(source_root):
        if path.is_file() and is_html(path):
            pages.append(path)
            index.add(mapper.destination_path(path).parent, path.stem)
        else:
            assets.append(path)
    return pages, assets


# ── 2.  Writer -----------------------------------------------------------
class Writer:
    def __init__(self, debug_enabled: bool = False):
        self.debug_enabled = debug_enabled
        self.copied = 0

    def ensure_parent_dir(self, dest: pathlib.Path) -> None:
        dest.parent.mkdir(parents=True, exist_ok=True)

    def write_text(self, dest: pathlib.Path, content: str) -> None:
        dest.write_text(content, encoding="utf-8")

    def copy_asset(self, src: pathlib.Path, dest: pathlib.Path) -> bool:
        if src.is_dir():
            return False
        try:
            shutil.copy2(src, dest)
        except OSError:
            debug(self.debug_enabled, "copy_asset path:", src)
            debug(self.debug_enabled, "copy_asset destination:", dest)
            raise
        self.copied += 1
        return True


# ── 3.  Pipeline ---------------------------------------------------------
class PipelineState(enum.Enum):
    UNCOLLECTED      = "uncollected"
    COLLECTED        = "collected"
    PAGES_WRITTEN    = "pages written"
    ASSETS_WRITTEN   = "assets written"
    SIDEBARS_WRITTEN = "sidebars written"
    DONE             = "done"


class Converter:
    """
    Converts ``source_dir`` into ``output_dir``.

    The source tree is walked once per instance; ``page_paths``,
    ``file_paths`` and ``sidebar_index`` are stable after ``collect()``.
    ``on_page`` is called with each Markdown file written.
    """

    def __init__(self, source_dir, output_dir, options: Optional[Options] = None,
                 on_page: Optional[Callable[[pathlib.Path], None]] = None):
        if not isinstance(options, Options):
            options = Options.from_mapping(options)
        self.source_path = pathlib.Path(source_dir)
        self.output_path = pathlib.Path(output_dir)
        self.options = options
        self.on_page = on_page
        self.mapper = PathMapper(self.source_path, self.output_path,
                                 options.replace_page_paths, options.debug)
        self.writer = Writer(options.debug)
        self.sidebar_index = SidebarIndex()
        self.page_paths: List[pathlib.Path] = []
        self.file_paths: List[pathlib.Path] = []
        self.state = PipelineState.UNCOLLECTED

    def collect(self) -> None:
        if self.state is not PipelineState.UNCOLLECTED:
            return
        self.page_paths, self.file_paths = walk_site(
            self.source_path, self.mapper, self.sidebar_index)
        self.state = PipelineState.COLLECTED

    def convert(self) -> None:
        self.collect()
        self._write_pages()
        self._write_assets()
        if self.options.create_sidebars:
            self._write_sidebars()
        self.state = PipelineState.DONE

    def _write_pages(self) -> None:
        for path in self.page_paths:
            md_txt = page_to_markdown(path, self.source_path, self.options)
            dest = self.mapper.destination_markdown_path(path)
            self.writer.ensure_parent_dir(dest)
            self.writer.write_text(dest, md_txt)
            if self.on_page:
                self.on_page(dest)
        self.state = PipelineState.PAGES_WRITTEN

    def _write_assets(self) -> None:
        for path in self.file_paths:
            dest = self.mapper.destination_path(path)
            self.writer.ensure_parent_dir(dest)
            self.writer.copy_asset(path, dest)
        self.state = PipelineState.ASSETS_WRITTEN

    def _write_sidebars(self) -> None:
        for dest, content in render_sidebars(self.sidebar_index, self.output_path):
            self.writer.ensure_parent_dir(dest)
            self.writer.write_text(dest, content)
        self.state = PipelineState.SIDEBARS_WRITTEN


# ── 4.  CLI --------------------------------------------------------------
def rename_pair(value: str) -> Tuple[str, str]:
    old, sep, new = value.partition("=")
    if not sep or not old or not new:
        raise argparse.ArgumentTypeError(f"expected OLD=NEW, got {value!r}")
    return old, new


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert an exported static site into a Markdown wiki tree.")
    parser.add_argument("source", type=pathlib.Path, help="Exported site folder")
    parser.add_argument("output", type=pathlib.Path, help="Folder for the wiki pages")
    parser.add_argument("--content-selector", default=CONTENT_SELECTOR,
                        help=f"CSS selector of the page content (default: {CONTENT_SELECTOR})")
    parser.add_argument("--fall-back-content-selector", default=FALL_BACK_CONTENT_SELECTOR,
                        help="Selector used when the content selector matches nothing")
    parser.add_argument("--sidebars", action="store_true",
                        help="Write a _Sidebar.md into every folder holding pages")
    parser.add_argument("--rename", type=rename_pair, action="append", default=[],
                        metavar="OLD=NEW", help="Rename a page basename, e.g. index.html=Home.md")
    parser.add_argument("--debug", action="store_true", help="Print diagnostics")
    parser.add_argument("--quiet", action="store_true", help="Don't list converted pages")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    source: pathlib.Path = args.source.expanduser()
    output: pathlib.Path = args.output.expanduser()
    if not source.is_dir():
        raise SystemExit(f"Source directory not found: {source}")

    options = Options(
        content_selector=args.content_selector,
        fall_back_content_selector=args.fall_back_content_selector,
        create_sidebars=args.sidebars,
        replace_page_paths=dict(args.rename),
        debug=args.debug,
    )
    on_page = None if args.quiet else (lambda dest: print(f"✓ {dest.relative_to(output)}"))
    converter = Converter(source, output, options, on_page=on_page)

    try:
        converter.convert()
    except ContentNotFoundError as e:
        sys.exit(f"✗ {e}")
    except OSError as e:
        sys.exit(f"✗ {e.filename or converter.source_path} – {e}")

    print(f"\nFinished: {len(converter.page_paths)} pages converted, "
          f"{converter.writer.copied} assets copied.")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit("\nInterrupted by user.")
