"""
Terminal text utilities for querent.

Display width, grapheme clusters and truncation. Widths are measured in
terminal cells, not code points: wide East Asian characters take two cells,
combining marks take none.
"""

import re
import unicodedata

import grapheme

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*m')

VS16 = '\ufe0f'


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub('', text)


def _char_width(ch: str) -> int:
    """Width of a single code point in terminal cells."""
    if ch in ('\u200d', VS16, '\ufe0e'):
        return 0
    category = unicodedata.category(ch)
    if category in ('Mn', 'Me', 'Cf', 'Cc'):
        return 0
    if unicodedata.east_asian_width(ch) in ('W', 'F'):
        return 2
    return 1


def _is_regional_indicator(ch: str) -> bool:
    return '\U0001f1e6' <= ch <= '\U0001f1ff'


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return list(grapheme.graphemes(text))


def grapheme_width(cluster: str) -> int:
    """Width of one grapheme cluster in terminal cells."""
    if not cluster:
        return 0
    # A pair of regional indicators is drawn as one flag
    if len(cluster) > 1 and _is_regional_indicator(cluster[0]):
        return 2
    width = _char_width(cluster[0])
    # Emoji presentation selector widens text-default symbols
    if VS16 in cluster and width == 1:
        return 2
    return width


def text_width(text: str) -> int:
    """Width of text in terminal cells (ANSI codes are ignored)."""
    return sum(grapheme_width(g) for g in graphemes(strip_ansi(text)))


def grapheme_boundaries(text: str) -> list[int]:
    """Code point indices where grapheme clusters start, plus len(text)."""
    bounds = [0]
    for cluster in graphemes(text):
        bounds.append(bounds[-1] + len(cluster))
    return bounds


def truncate_text(text: str, max_width: int, suffix: str = "...") -> str:
    """Truncate text to max_width cells, adding suffix if truncated. Returns plain text (no ANSI)."""
    text = strip_ansi(text)  # Strip first - colors should be added after truncation, not before
    if text_width(text) <= max_width:
        return text
    suffix_width = text_width(suffix)
    if max_width <= suffix_width:
        return take_width(text, max_width)
    return take_width(text, max_width - suffix_width) + suffix


def take_width(text: str, max_width: int) -> str:
    """Longest prefix of text (in whole graphemes) that fits in max_width cells."""
    result = []
    used = 0
    for cluster in graphemes(text):
        w = grapheme_width(cluster)
        if used + w > max_width:
            break
        result.append(cluster)
        used += w
    return ''.join(result)
