"""
Convert one exported site page (*.html) to wiki Markdown.

Only the content column is kept; same-site page links become bare wiki
names (guides/setup.html → setup).

Dependencies:
    pip install beautifulsoup4 lxml markdownify
"""
import pathlib, re
from bs4 import BeautifulSoup, Tag
from markdownify import markdownify as md

from wiki_paths import ContentNotFoundError, Options, debug

BLANK_LINES_RE = re.compile(r"\n{3,}")
HTML_EXT_RE    = re.compile(r"\.html?$", re.I)


def select_content(soup: BeautifulSoup, page: pathlib.Path, options: Options) -> Tag:
    contents = soup.select_one(options.content_selector)
    if contents is None:
        debug(options.debug, f"Content not found for {page} Converting whole page")
        contents = soup.select_one(options.fall_back_content_selector)
    if contents is None:
        raise ContentNotFoundError(
            page, (options.content_selector, options.fall_back_content_selector))
    return contents


def rewrite_links(contents: Tag) -> int:
    """Point  foo/bar.html  links at the wiki page  bar .  Queries are left alone."""
    rewritten = 0
    for link in contents.find_all("a", href=True):
        href = link["href"]
        if href.endswith(".html") and "?" not in href:
            link["href"] = pathlib.PurePosixPath(href).name[: -len(".html")]
            rewritten += 1
    return rewritten


def link_self_references(md_txt: str, page: pathlib.Path, source_root: pathlib.Path) -> str:
    """
    A page  docs/Foo.html  usually fronts a  docs/Foo/  folder; its own
    "Foo/..." links are rewritten to "docs/Foo/..." so they resolve from the
    flat wiki root.
    """
    filename = page.stem
    replace = HTML_EXT_RE.sub("/", page.relative_to(source_root).as_posix())
    token = re.compile(rf"(?<![\w./-]){re.escape(filename)}/")
    return token.sub(lambda _: replace, md_txt)


def normalise(md_txt: str) -> str:
    return BLANK_LINES_RE.sub("\n\n", md_txt).strip() + "\n"


def page_to_markdown(page: pathlib.Path, source_root: pathlib.Path, options: Options) -> str:
    # bytes, so bs4 can honour the page's declared charset
    soup = BeautifulSoup(page.read_bytes(), "lxml")

    # 1. Pick the content column (or the fall-back)
    contents = select_content(soup, page, options)

    # 2. Drop scripts, styles, …
    for tag in contents.find_all(list(options.strip_tags)):
        tag.decompose()

    # 3. Internal links → wiki names
    debug(options.debug, f"{page}: {rewrite_links(contents)} links rewritten")

    # 4. Convert → Markdown
    md_txt = md(contents.decode_contents(), heading_style=options.heading_style)

    # 5. "Foo/" links inside Foo.html
    md_txt = link_self_references(md_txt, page, source_root)

    return normalise(md_txt)
