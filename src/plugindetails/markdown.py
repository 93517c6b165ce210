"""README Markdown → HTML conversion and section extraction.

The converter handles the small Markdown subset plugin READMEs use. It is an
ordered pipeline of independent string transforms, applied once each and
never recursively. Order matters: ``wrap_paragraphs`` only leaves lines alone
that earlier stages have already turned into block-level tags.

Ordered list items become ``<li>`` elements but are not wrapped in ``<ol>``.
Unordered lists are wrapped in ``<ul>``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

import structlog

from plugindetails.models.readme import SECTION_HEADINGS, ReadmeSections

log = structlog.get_logger()

_H3_RE = re.compile(r"^### (.+)$", re.MULTILINE)
_H2_RE = re.compile(r"^## (.+)$", re.MULTILINE)
_H1_RE = re.compile(r"^# (.+)$", re.MULTILINE)
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")
_CODE_RE = re.compile(r"`([^`]+)`")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_UL_ITEM_RE = re.compile(r"^- (.+)$", re.MULTILINE)
# Greedy and dot-all: spans from the first <li> to the last </li>.
_UL_RUN_RE = re.compile(r"(<li>.*</li>\n?)+", re.DOTALL)
_OL_ITEM_RE = re.compile(r"^\d+\. (.+)$", re.MULTILINE)
# Opening or closing block-level tag at the start of a line.
_BLOCK_TAG_RE = re.compile(r"^</?(h[1-6]|ul|ol|li|p|div|pre|code|blockquote)")


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------


def normalize_line_endings(text: str) -> str:
    """``\\r\\n`` → ``\\n``, then any remaining ``\\r`` → ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def convert_headers(text: str) -> str:
    """``### x`` → ``<h3>x</h3>``, then ``## x`` → ``<h2>``, then ``# x`` → ``<h1>``."""
    text = _H3_RE.sub(r"<h3>\1</h3>", text)
    text = _H2_RE.sub(r"<h2>\1</h2>", text)
    return _H1_RE.sub(r"<h1>\1</h1>", text)


def convert_bold(text: str) -> str:
    """``**x**`` → ``<strong>x</strong>`` (non-greedy, single line)."""
    return _BOLD_RE.sub(r"<strong>\1</strong>", text)


def convert_italic(text: str) -> str:
    """``*x*`` → ``<em>x</em>``. Must run after ``convert_bold``."""
    return _ITALIC_RE.sub(r"<em>\1</em>", text)


def convert_inline_code(text: str) -> str:
    """A backtick-quoted span → ``<code>…</code>``."""
    return _CODE_RE.sub(r"<code>\1</code>", text)


def convert_links(text: str) -> str:
    """``[text](url)`` → ``<a href="url" target="_blank">text</a>``."""
    return _LINK_RE.sub(r'<a href="\2" target="_blank">\1</a>', text)


def convert_unordered_lists(text: str) -> str:
    """``- x`` → ``<li>x</li>``, then the run of items is wrapped once in ``<ul>``."""
    text = _UL_ITEM_RE.sub(r"<li>\1</li>", text)
    return _UL_RUN_RE.sub(r"<ul>\g<0></ul>", text)


def convert_ordered_list_items(text: str) -> str:
    """``1. x`` → ``<li>x</li>``. No ``<ol>`` wrapper is added."""
    return _OL_ITEM_RE.sub(r"<li>\1</li>", text)


def wrap_paragraphs(text: str) -> str:
    """Join runs of plain-text lines into ``<p>`` blocks.

    A blank line closes the open paragraph. A line starting with a block-level
    tag closes it too and is emitted unchanged. Every line is stripped.
    """
    result: list[str] = []
    in_paragraph = False

    for raw_line in text.split("\n"):
        line = raw_line.strip()

        if not line:
            if in_paragraph:
                result.append("</p>")
                in_paragraph = False
            continue

        if _BLOCK_TAG_RE.match(line):
            if in_paragraph:
                result.append("</p>")
                in_paragraph = False
            result.append(line)
            continue

        if not in_paragraph:
            result.append("<p>" + line)
            in_paragraph = True
        else:
            result.append(" " + line)

    if in_paragraph:
        result.append("</p>")

    return "\n".join(result)


TRANSFORMS: tuple[Callable[[str], str], ...] = (
    normalize_line_endings,
    convert_headers,
    convert_bold,
    convert_italic,
    convert_inline_code,
    convert_links,
    convert_unordered_lists,
    convert_ordered_list_items,
    wrap_paragraphs,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def markdown_to_html(markdown: str) -> str:
    """Convert README Markdown to HTML by running every transform in order."""
    html = markdown
    for transform in TRANSFORMS:
        html = transform(html)
    return html


def extract_section(html: str, name: str) -> str:
    """Return the HTML between ``<h2>name</h2>`` and the next ``<h2`` or end of input.

    The heading match is case-insensitive. Returns ``""`` when the heading is absent.
    """
    pattern = r"<h2[^>]*>" + re.escape(name) + r"</h2>(.*?)(?=<h2|$)"
    match = re.search(pattern, html, re.IGNORECASE | re.DOTALL)
    if match is None:
        return ""
    return match.group(1).strip()


def parse_readme_text(markdown: str) -> ReadmeSections:
    if not markdown:
        return ReadmeSections()

    html = markdown_to_html(markdown)
    return ReadmeSections(
        **{field: extract_section(html, heading) for field, heading in SECTION_HEADINGS.items()}
    )


def parse_readme(path: str | Path) -> ReadmeSections:
    """Read and parse the README at ``path``.

    A missing, unreadable or empty file yields empty sections. Never raises.
    """
    path = Path(path)
    if not path.is_file():
        log.info("readme_missing", path=str(path))
        return ReadmeSections()

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        log.warning("readme_read_error", path=str(path), exc_info=True)
        return ReadmeSections()

    return parse_readme_text(content)
