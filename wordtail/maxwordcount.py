"""Report the most frequent words of a text together with their counts."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from wordtail.htab import HashTable, Pair
from wordtail.wordio import MAX_WORD_LEN, iter_words

TABLE_SIZE_HINT = 50000


def count_words(
    stream: TextIO,
    table: HashTable | None = None,
    max_len: int = MAX_WORD_LEN,
) -> HashTable:
    """Count every whitespace-separated word of *stream* into *table*.

    A new table sized for a large vocabulary is created when none is given.
    Words longer than *max_len* characters are counted in truncated form.
    """
    if table is None:
        table = HashTable(TABLE_SIZE_HINT)
    for word in iter_words(stream, max_len):
        table.lookup_add(word)
    return table


def find_max(table: HashTable) -> list[Pair]:
    """Return every pair whose count is the largest, in table order."""
    best: list[Pair] = []
    best_value = 0
    for pair in table:
        if pair.value > best_value:
            best_value = pair.value
            best = [pair]
        elif pair.value == best_value:
            best.append(pair)
    return best


def _report(table: HashTable, out: TextIO) -> None:
    for pair in find_max(table):
        out.write(f"{pair.key}\t{pair.value}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Print the most frequent words of a file (or standard input)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        try:
            stream = open(args[0], encoding="utf-8", errors="surrogateescape")
        except OSError:
            print("File cannot be opened", file=sys.stderr)
            return 1
        with stream:
            table = count_words(stream)
    else:
        table = count_words(sys.stdin)
    _report(table, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())