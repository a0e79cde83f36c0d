"""Random letter-case transform."""

from __future__ import annotations

import random

from PySide6.QtCore import QTextBoundaryFinder

PLACEHOLDER_TEXT = "rAndOmIZeD rEsULt AppEArS hERe"

_SYSTEM_RANDOM = random.SystemRandom()


def graphemes(text: str) -> list[str]:
    """Split text into user-perceived characters (grapheme clusters).

    Qt reports boundaries in UTF-16 code units, so they are mapped back to
    Python string indices before slicing.
    """
    if not text:
        return []

    utf16_to_index: dict[int, int] = {}
    offset = 0
    for index, ch in enumerate(text):
        utf16_to_index[offset] = index
        offset += 2 if ord(ch) > 0xFFFF else 1
    utf16_to_index[offset] = len(text)

    finder = QTextBoundaryFinder(QTextBoundaryFinder.BoundaryType.Grapheme, text)
    clusters: list[str] = []
    start = 0
    while True:
        boundary = finder.toNextBoundary()
        if boundary < 0:
            break
        end = utf16_to_index.get(boundary)
        if end is None or end <= start:
            continue
        clusters.append(text[start:end])
        start = end
    if start < len(text):
        clusters.append(text[start:])
    return clusters


def _recase(cluster: str, upper: bool) -> str:
    changed = cluster.upper() if upper else cluster.lower()
    # "ß" -> "SS" adds a character; "İ" -> "i" + U+0307 is still one cluster.
    if len(graphemes(changed)) != 1:
        return cluster
    return changed


def randomize(text: str, *, rng: random.Random | None = None) -> str:
    """Return text with each character independently upper- or lower-cased.

    Each grapheme cluster gets a fair coin flip. Characters without case
    (digits, punctuation, whitespace, most emoji) come back unchanged, and
    the output always has as many clusters as the input.
    """
    if not text:
        return ""
    source = rng if rng is not None else _SYSTEM_RANDOM
    return "".join(_recase(cluster, source.random() < 0.5) for cluster in graphemes(text))
