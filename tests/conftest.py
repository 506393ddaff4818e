"""
Shared fixtures: small exported-site trees written under tmp_path.
"""
import pathlib

import pytest

PAGE = """<html><head><title>{title}</title></head>
<body>
<div class="sites-header">Site header</div>
<div class="sites-layout-name-one-column">{body}</div>
</body></html>
"""


def page(body: str, title: str = "Page") -> str:
    return PAGE.format(title=title, body=body)


@pytest.fixture
def make_site(tmp_path):
    """Write {relative path: str | bytes} under tmp_path/site and return the root."""

    def _make(files: dict) -> pathlib.Path:
        root = tmp_path / "site"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def sample_site(make_site):
    return make_site({
        "index.html": page('<h1>Welcome</h1><p>Go to <a href="about.html">the about page</a></p>'),
        "about.html": page("<p>About us</p>"),
        "my-section/a.html": page('<p>See <a href="b-c.html">B and C</a></p>'),
        "my-section/b-c.html": page("<p>Second page</p>"),
        "img/logo.png": b"\x89PNG\r\n\x1a\n\x00\x01binary\xff",
        "style.css": "body { color: red; }\n",
    })
