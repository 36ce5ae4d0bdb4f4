"""Reading whitespace-separated words from a text stream."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

MAX_WORD_LEN = 255
WHITESPACE = frozenset(" \t\n\v\f\r")
TRUNCATION_MESSAGE = "Maximum chars in one line"


class _OnceNotice:
    """Writes a message to stderr the first time it is triggered."""

    def __init__(self, message: str) -> None:
        self.message = message
        self.fired = False

    def __call__(self) -> None:
        if not self.fired:
            print(self.message, file=sys.stderr)
            self.fired = True


_report_truncation = _OnceNotice(TRUNCATION_MESSAGE)


def read_word(stream: TextIO, max_len: int = MAX_WORD_LEN) -> str | None:
    """Read the next word from *stream*, or return None at end of input.

    Words longer than *max_len* characters are cut to that length and the
    rest of the word is discarded; the first such cut is reported on stderr.
    """
    if max_len < 1:
        raise ValueError("max_len must be at least 1")
    ch = stream.read(1)
    while ch and ch in WHITESPACE:
        ch = stream.read(1)
    if not ch:
        return None
    chars: list[str] = []
    truncated = False
    while ch and ch not in WHITESPACE:
        if len(chars) < max_len:
            chars.append(ch)
        else:
            truncated = True
        ch = stream.read(1)
    if truncated:
        _report_truncation()
    return "".join(chars)


def iter_words(stream: TextIO, max_len: int = MAX_WORD_LEN) -> Iterator[str]:
    """Yield every word of *stream* in order, as read by read_word."""
    while (word := read_word(stream, max_len)) is not None:
        yield word