"""Text puzzles: shared letters, keyboard shifts, rotation, quotes and frequencies."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from string import ascii_lowercase

_KEYBOARD_ROWS = (
    "1234567890-=",
    "qwertyuiop[]",
    "asdfghjkl;'",
    "zxcvbnm,./",
)
_SHIFT_BACK = {
    key: row[index - 2]
    for row in _KEYBOARD_ROWS
    for index, key in enumerate(row)
    if index >= 2
}
_KEYBOARD_KEYS = frozenset("".join(_KEYBOARD_ROWS))


def common_permutation(a: str, b: str) -> str:
    """Return the longest letter string, in alphabetical order, that both inputs contain."""
    counts_a, counts_b = Counter(a), Counter(b)
    return "".join(
        letter * min(counts_a[letter], counts_b[letter]) for letter in ascii_lowercase
    )


def decode_mad_man(line: str) -> str:
    """Decode text typed two keys to the right of the intended keys."""
    decoded = []
    for char in line:
        if char == " ":
            decoded.append(" ")
            continue
        key = char.lower()
        if key in _SHIFT_BACK:
            decoded.append(_SHIFT_BACK[key])
        elif key not in _KEYBOARD_KEYS:
            continue
    return "".join(decoded)


def rotate_sentences(lines: Iterable[str]) -> list[str]:
    """Rotate text 90 degrees clockwise, padding short lines with spaces."""
    sentences = list(lines)
    width = max((len(sentence) for sentence in sentences), default=0)
    padded = [sentence.ljust(width) for sentence in sentences]
    return [
        "".join(sentence[column] for sentence in reversed(padded))
        for column in range(width)
    ]


def tex_quotes(text: str) -> str:
    """Replace straight double quotes with alternating TeX opening and closing quotes."""
    pieces = []
    opening = True
    for char in text:
        if char == '"':
            pieces.append("``" if opening else "''")
            opening = not opening
        else:
            pieces.append(char)
    return "".join(pieces)


def letter_frequencies(lines: Iterable[str]) -> list[tuple[str, int]]:
    """Count letters case-insensitively; most frequent first, ties alphabetical."""
    counts = Counter(
        char.upper()
        for line in lines
        for char in line
        if char.isascii() and char.isalpha()
    )
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))