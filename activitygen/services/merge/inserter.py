"""
Tag-scoped text insertion.

Inserts a text fragment inside a named XML tag without parsing or re-serializing
the document, so everything outside the insertion point is preserved byte for
byte. The search is not nesting-aware: the first opening tag and the first
matching closing tag after it are used. Resource files and manifests never nest
<resources> or <application>.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ...core.exceptions import TagNotFoundError
from ...models.resources import InsertPosition


@dataclass(frozen=True)
class TagSpan:
    """Offsets of an element's opening and closing tags in a text."""

    open_start: int
    open_end: int  # index just past the ">" of the opening tag
    close_start: int
    close_end: int


def _opening_tag_end(text: str, start: int) -> int:
    """Find the ">" ending the tag that starts at ``start``, skipping quoted values."""
    quote: str | None = None
    for index in range(start, len(text)):
        char = text[index]
        if quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == ">":
            return index
    return -1


def locate_tag(full_text: str, tag_name: str, path: str = "") -> TagSpan:
    """Locate the first ``tag_name`` element.

    Args:
        full_text: Document text
        tag_name: Element name, e.g. "resources"
        path: File the text came from, used in error messages

    Returns:
        TagSpan of the element

    Raises:
        TagNotFoundError: If the element, the end of its opening tag, or its
            closing tag cannot be found, or the element is self-closing.
    """
    opening = re.search(rf"<{re.escape(tag_name)}(?=[\s>/])", full_text)
    if opening is None:
        raise TagNotFoundError(
            message=f"no <{tag_name}> tag found",
            path=path,
            tag_name=tag_name,
        )

    gt = _opening_tag_end(full_text, opening.end())
    if gt < 0:
        raise TagNotFoundError(
            message=f"opening <{tag_name}> tag is never closed with '>'",
            path=path,
            tag_name=tag_name,
        )
    if full_text[gt - 1] == "/":
        raise TagNotFoundError(
            message=f"<{tag_name}/> is self-closing, nothing can be inserted into it",
            path=path,
            tag_name=tag_name,
        )

    closing = re.compile(rf"</{re.escape(tag_name)}\s*>").search(full_text, gt + 1)
    if closing is None:
        raise TagNotFoundError(
            message=f"no </{tag_name}> closing tag found",
            path=path,
            tag_name=tag_name,
        )

    return TagSpan(
        open_start=opening.start(),
        open_end=gt + 1,
        close_start=closing.start(),
        close_end=closing.end(),
    )


def insertion_point(full_text: str, span: TagSpan, position: InsertPosition) -> int:
    """Offset at which a whole-line fragment should be inserted.

    Before the closing tag, the point moves back to the start of the closing
    tag's line when only spaces or tabs precede the tag on that line. After the
    opening tag, the point moves past a line break that directly follows it.
    """
    if position == InsertPosition.BEFORE_CLOSE:
        index = span.close_start
        line_start = full_text.rfind("\n", 0, index) + 1
        if line_start >= span.open_end and full_text[line_start:index].strip(" \t") == "":
            return line_start
        return index

    index = span.open_end
    if full_text.startswith("\r\n", index):
        return index + 2
    if full_text.startswith("\n", index):
        return index + 1
    return index


def insert_into_tag(
    full_text: str,
    tag_name: str,
    fragment: str,
    position: InsertPosition = InsertPosition.BEFORE_CLOSE,
    path: str = "",
) -> str:
    """Insert ``fragment`` inside the first ``tag_name`` element.

    The fragment is inserted as given; callers pass whole, newline-terminated
    lines with their own indentation.

    Args:
        full_text: Document text
        tag_name: Element to insert into
        fragment: Text to insert
        position: Before the closing tag or after the opening tag
        path: File the text came from, used in error messages

    Returns:
        The updated text

    Raises:
        TagNotFoundError: If the element cannot be located.
    """
    span = locate_tag(full_text, tag_name, path)
    index = insertion_point(full_text, span, position)
    return full_text[:index] + fragment + full_text[index:]
