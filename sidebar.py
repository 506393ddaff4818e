"""
sidebar.py – per-folder navigation for the generated wiki (_Sidebar.md).
"""
import pathlib
from typing import Dict, Iterator, List, Tuple

SIDEBAR_NAME = "_Sidebar.md"


def clean(word: str) -> str:
    """my-section → My section"""
    return word.replace("-", " ").capitalize()


class SidebarIndex:
    """Page slugs per destination folder, in the order they were seen."""

    def __init__(self):
        self._folders: Dict[pathlib.Path, List[str]] = {}

    def add(self, folder: pathlib.Path, slug: str) -> None:
        self._folders.setdefault(pathlib.Path(folder), []).append(slug)

    def pages(self, folder) -> List[str]:
        return list(self._folders.get(pathlib.Path(folder), []))

    def items(self) -> Iterator[Tuple[pathlib.Path, List[str]]]:
        for folder, slugs in self._folders.items():
            yield folder, list(slugs)

    def __contains__(self, folder) -> bool:
        return pathlib.Path(folder) in self._folders

    def __len__(self) -> int:
        return len(self._folders)


def sidebar_content(folder: pathlib.Path, pages: List[str], output_root: pathlib.Path) -> str:
    lines = [] if folder == output_root else [clean(folder.name)]
    lines += [f"* [{clean(page)}]({page})" for page in pages]
    return "\n".join(lines) + "\n"


def render_sidebars(index: SidebarIndex, output_root) -> Iterator[Tuple[pathlib.Path, str]]:
    output_root = pathlib.Path(output_root)
    for folder, pages in index.items():
        yield folder / SIDEBAR_NAME, sidebar_content(folder, pages, output_root)
