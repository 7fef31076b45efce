"""Renders analysis reports as HTML from a safe markdown subset.

Raw HTML in the report is escaped instead of passed through, and link or image
URLs outside http, https and mailto are removed.
"""

import html
import re
import xml.etree.ElementTree as etree
from urllib.parse import urlsplit

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from markdown.util import ETX, STX

_EXTENSIONS = ["tables", "sane_lists", "nl2br"]
_SAFE_SCHEMES = frozenset({"", "http", "https", "mailto"})
_URL_ATTRIBUTES = ("href", "src")
_ESCAPED_CHAR_RE = re.compile(f"{STX}([0-9]+){ETX}")
_IGNORED_URL_CHARS_RE = re.compile(r"[\x00-\x20\x7f]")


def is_safe_url(url: str) -> bool:
    unescaped = _ESCAPED_CHAR_RE.sub(lambda m: chr(int(m.group(1))), url)
    # Browsers decode character references in attributes before reading the scheme.
    decoded = html.unescape(unescaped)
    cleaned = _IGNORED_URL_CHARS_RE.sub("", decoded)
    try:
        scheme = urlsplit(cleaned).scheme
    except ValueError:
        return False
    return scheme.lower() in _SAFE_SCHEMES


class _SafeUrlTreeprocessor(Treeprocessor):
    def run(self, root: etree.Element) -> None:
        for element in root.iter():
            for attribute in _URL_ATTRIBUTES:
                value = element.get(attribute)
                if value is not None and not is_safe_url(value):
                    del element.attrib[attribute]


class SafeMarkdownExtension(Extension):
    """Disables raw HTML and strips unsafe URLs."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:  # noqa: N802
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")
        md.treeprocessors.register(_SafeUrlTreeprocessor(md), "safe_urls", 5)


def render_report(text: str) -> str:
    """Convert report markdown to HTML safe for display."""
    md = markdown.Markdown(extensions=[*_EXTENSIONS, SafeMarkdownExtension()])
    return md.convert(text)
