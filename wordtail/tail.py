"""Print the last lines of a file or of standard input."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple, TextIO

DEFAULT_COUNT = 10
MAX_LINE_LEN = 4095
LONG_LINE_MESSAGE = "Over 4095 chars in one line"
_DIGITS = frozenset("0123456789")


class UsageError(Exception):
    """Raised for invalid command-line arguments."""


class TailOptions(NamedTuple):
    count: int
    path: str | None


class CircularBuffer:
    """Keeps the most recent *size* items put into it."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("buffer size must be at least 1")
        self._items: deque[str] = deque(maxlen=size)

    @property
    def size(self) -> int:
        return self._items.maxlen or 0

    def put(self, line: str) -> None:
        """Store *line*, dropping the oldest item when full."""
        self._items.append(line)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class _LongLineNotice:
    fired = False

    @classmethod
    def trigger(cls) -> None:
        if not cls.fired:
            print(LONG_LINE_MESSAGE, file=sys.stderr)
            cls.fired = True


def parse_args(argv: Sequence[str]) -> TailOptions:
    """Parse ``[-n COUNT] [FILE]`` arguments.

    A count of 0 stops parsing at once. The last file named wins.
    """
    count = DEFAULT_COUNT
    path: str | None = None
    args = iter(argv)
    for arg in args:
        if arg == "-n":
            value = next(args, None)
            if value is None:
                raise UsageError("Missing number after -n")
            if not set(value) <= _DIGITS:
                raise UsageError("Char after -n")
            count = int(value) if value else 0
            if count == 0:
                return TailOptions(0, path)
        else:
            path = arg
    return TailOptions(count, path)


def read_lines(stream: Iterable[str], max_len: int = MAX_LINE_LEN) -> Iterator[str]:
    """Yield the lines of *stream*, cutting any longer than *max_len* characters.

    A cut line keeps its newline; the first cut is reported on stderr.
    """
    for line in stream:
        ended = line.endswith("\n")
        body = line[:-1] if ended else line
        if len(body) > max_len:
            _LongLineNotice.trigger()
            line = body[:max_len] + ("\n" if ended else "")
        yield line


def tail_lines(stream: Iterable[str], n: int = DEFAULT_COUNT) -> list[str]:
    """Return the last *n* lines of *stream*."""
    buffer = CircularBuffer(n)
    for line in read_lines(stream):
        buffer.put(line)
    return list(buffer)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the last lines of a file or of standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_args(args)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    if options.count == 0:
        return 0
    if options.path is None:
        lines = tail_lines(sys.stdin, options.count)
    else:
        try:
            stream = open(
                options.path, encoding="utf-8", errors="surrogateescape", newline="\n"
            )
        except OSError:
            print("Cannot open file", file=sys.stderr)
            return 1
        with stream:
            lines = tail_lines(stream, options.count)
    sys.stdout.write("".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())