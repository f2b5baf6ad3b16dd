"""Best-effort HTML minification.

Comments are removed and whitespace is collapsed, except inside
elements whose text is whitespace-sensitive.
"""

from __future__ import annotations

import re

_PRESERVED_BLOCK = re.compile(
    r"(<(pre|textarea|script|style)\b[^>]*>.*?</\2\s*>)",
    flags=re.S | re.I,
)
_COMMENT = re.compile(r"<!--.*?-->", flags=re.S)
_BETWEEN_TAGS = re.compile(r">\s+<")
_WHITESPACE_RUN = re.compile(r"\s+")


def minify_html(text: str) -> str:
    """Minify an HTML document or fragment.

    Args:
        text: HTML source, which need not be well formed.

    Returns:
        Minified HTML. This never fails.
    """
    pieces = _PRESERVED_BLOCK.split(text)
    output: list[str] = []
    # split() yields text, block, tag-name triples; tag names are dropped.
    for index in range(0, len(pieces), 3):
        output.append(_minify_fragment(pieces[index]))
        if index + 1 < len(pieces):
            output.append(pieces[index + 1])
    return "".join(output).strip()


def _minify_fragment(fragment: str) -> str:
    fragment = _COMMENT.sub("", fragment)
    fragment = _BETWEEN_TAGS.sub("><", fragment)
    return _WHITESPACE_RUN.sub(" ", fragment)
