"""Delimiter scanning for math spans.

Pure functions over strings: they decide whether a math span starts at a
position, where it ends, and what it captures. They never touch parser
state, so the markdown-it-py rules in mathspan.rules can run them in
silent mode and in normal mode alike.

Two granularities:
- scan_block: a display span starting a line, possibly running over many
  lines, closing cleanly (nothing but whitespace after the right marker)
- scan_inline: a span opening and closing within the current line

Both use literal str.startswith/str.find matching. scan_inline never reads
past the current line, so each attempt costs O(line length x delimiter
count); an unterminated block opener costs at most the remaining lines.

"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from mathspan.config import Delimiter


@dataclass(frozen=True, slots=True)
class BlockMatch:
    """A display span found by scan_block.

    Attributes:
        delimiter: The pair that matched
        start_line: Line holding the left marker
        end_line: One past the line holding the right marker
        content: Raw text between the markers, lines joined with newlines

    """

    delimiter: Delimiter
    start_line: int
    end_line: int
    content: str


@dataclass(frozen=True, slots=True)
class InlineMatch:
    """An inline span found by scan_inline.

    Attributes:
        delimiter: The pair that matched
        start: Offset of the left marker
        end: Offset just past the right marker
        content: Raw text between the markers (never contains a newline)

    """

    delimiter: Delimiter
    start: int
    end: int
    content: str


def scan_block(
    line_at: Callable[[int], str],
    start_line: int,
    end_line: int,
    delimiters: Sequence[Delimiter],
) -> BlockMatch | None:
    """Find a display span whose left marker starts ``start_line``.

    The first delimiter whose left marker prefixes the line is selected.
    If that pair never closes cleanly, there is no match; other pairs are
    not retried.

    Args:
        line_at: Returns a line's text with leading indentation stripped
        start_line: Line to test
        end_line: Exclusive bound for the closing search
        delimiters: Display delimiters in precedence order

    Returns:
        BlockMatch, or None if no span opens here, none closes before
        ``end_line``, or the closing line has trailing content.
    """
    line = line_at(start_line)

    delimiter = None
    for candidate in delimiters:
        if line.startswith(candidate.left):
            delimiter = candidate
            break
    if delimiter is None:
        return None

    right = delimiter.right
    rest = line[len(delimiter.left) :]

    close = rest.find(right)
    if close != -1:
        if rest[close + len(right) :].strip():
            return None
        return BlockMatch(delimiter, start_line, start_line + 1, rest[:close])

    parts = [rest, "\n"]
    next_line = start_line + 1
    while next_line < end_line:
        text = line_at(next_line)
        close = text.find(right)
        if close == -1:
            parts.append(text)
            parts.append("\n")
            next_line += 1
            continue

        if text[close + len(right) :].strip():
            return None
        parts.append(text[:close])
        return BlockMatch(delimiter, start_line, next_line + 1, "".join(parts))

    return None


def scan_inline(
    src: str,
    pos: int,
    pos_max: int,
    delimiters: Sequence[Delimiter],
) -> InlineMatch | None:
    """Find an inline span whose left marker is at ``pos``.

    Delimiters are tried in order at the same position. A pair whose right
    marker is missing before the next newline (or ``pos_max``) is skipped
    and the next pair is tried.

    Args:
        src: Inline source text
        pos: Candidate start offset
        pos_max: Exclusive end of the scannable region
        delimiters: All delimiters in precedence order

    Returns:
        InlineMatch, or None if no pair opens and closes on this line.
    """
    for delimiter in delimiters:
        if not src.startswith(delimiter.left, pos, pos_max):
            continue

        content_start = pos + len(delimiter.left)
        line_end = src.find("\n", content_start, pos_max)
        if line_end == -1:
            line_end = pos_max
        close = src.find(delimiter.right, content_start, line_end)
        if close == -1:
            continue

        return InlineMatch(
            delimiter,
            pos,
            close + len(delimiter.right),
            src[content_start:close],
        )

    return None


__all__ = [
    "BlockMatch",
    "InlineMatch",
    "scan_block",
    "scan_inline",
]
