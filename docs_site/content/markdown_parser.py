r"""Split Markdown page files into front matter, title, and body.

Pages may open with a YAML front matter block delimited by ``---`` lines. The
page title comes from the front matter ``title`` key, then from the first
level-one heading, and finally from the slug itself.

Example
-------
>>> from docs_site.content.markdown_parser import parse_document
>>> doc = parse_document("# Installing\nRun the installer.\n", slug="setup/install")
>>> doc.title
'Installing'
>>> parse_document("Body only", slug="setup/first-steps").title
'First Steps'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import ContentFormatError

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL
)
TITLE_PATTERN = re.compile(r"^#[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)


@dc.dataclass(slots=True)
class MarkdownDocument:
    """A page file split into its parts.

    Attributes
    ----------
    title : str
        Resolved page title.
    body : str
        Markdown with the front matter removed.
    meta : dict[str, typ.Any]
        Parsed front matter, empty when the file has none.
    """

    title: str
    body: str
    meta: dict[str, typ.Any]


def _clean_heading(text: str) -> str:
    """Return a cleaned heading, removing escapes and whitespace."""
    return text.replace("\\", "").strip()


def title_from_slug(slug: str) -> str:
    """Derive a readable title from the last segment of ``slug``."""
    leaf = slug.rstrip("/").rsplit("/", 1)[-1]
    return leaf.replace("-", " ").replace("_", " ").title()


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed front matter mapping and the remaining markdown."""
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text
    loader = YAML(typ="safe")
    try:
        meta = loader.load(match.group(1)) or {}
    except YAMLError as exc:
        msg = f"Invalid front matter: {exc}"
        raise ContentFormatError(msg) from exc
    if not isinstance(meta, dict):
        msg = "Front matter must be a mapping."
        raise ContentFormatError(msg)
    return dict(meta), text[match.end() :]


def parse_document(text: str, *, slug: str) -> MarkdownDocument:
    """Split ``text`` into front matter, title, and body for ``slug``."""
    meta, body = split_front_matter(text)
    title = str(meta.get("title") or "").strip()
    if not title:
        heading = TITLE_PATTERN.search(body)
        if heading:
            title = _clean_heading(heading.group(1))
    return MarkdownDocument(title=title or title_from_slug(slug), body=body, meta=meta)


__all__ = [
    "MarkdownDocument",
    "parse_document",
    "split_front_matter",
    "title_from_slug",
]
