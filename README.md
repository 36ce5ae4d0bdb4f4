# wordtail

Two small text filters, plus the hash table that one of them uses.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install .[test]
pytest
```

## Commands

### wordtail-tail

This command prints the last lines of a file, or of standard input when no file is given. By default it prints the last 10 lines.

```
wordtail-tail notes.txt
wordtail-tail -n 3 notes.txt
cat notes.txt | wordtail-tail -n 5
```

- `-n COUNT` takes a string of decimal digits only.
- `-n 0`, or an empty count, prints nothing and exits at once with status 0.
- If more than one file is named, the last one is used.
- These cases are errors: a missing number after `-n`, a number that contains anything other than digits, and a file that cannot be opened. In each case the command writes a message to standard error (`Missing number after -n`, `Char after -n` or `Cannot open file`) and exits with status 1.
- Lines longer than 4095 characters are cut to 4095 characters. A cut line keeps its newline. The first time a line is cut, `Over 4095 chars in one line` is written to standard error.
- Files are read as UTF-8. Bytes that are not valid UTF-8 are passed through unchanged.

The same command is available as `python -m wordtail.tail`.

### maxwordcount

This command reads whitespace-separated words from the file named as its first argument, or from standard input when no file is named. It prints every word that shares the highest count, one per line, as `word<TAB>count`. Words are printed in the order in which the hash table holds them.

```
maxwordcount words.txt
maxwordcount < words.txt
```

- Words longer than 255 characters are cut to their first 255 characters, and the rest of the word is dropped. The first time a word is cut, `Maximum chars in one line` is written to standard error.
- A file that cannot be opened makes the command print `File cannot be opened` to standard error and exit with status 1.
- Empty input prints nothing.

The same command is available as `python -m wordtail.maxwordcount`.

## Library use

### Hash table: `wordtail.htab`

`HashTable` maps string keys to integer counters. It uses separate chaining and a fixed number of buckets.

```python
from wordtail.htab import HashTable, hash_function

table = HashTable(100)          # 120 buckets: the size hint plus 20%, rounded up
for word in "a b a c a b".split():
    table.lookup_add(word)      # inserts with count 1, or increments

pair = table.find("a")          # a Pair, or None if the key is absent
print(pair.key, pair.value)     # a 3
print(len(table))               # 3
print(table.bucket_count())     # 120
print(table.erase("c"))         # True
print(table.erase("c"))         # False
for pair in table:              # bucket by bucket
    print(pair.key, pair.value)
table.for_each(print)           # calls a function on every Pair
table.clear()                   # removes all entries, keeps the buckets
```

- `HashTable(n)` raises `ValueError` if `n` is negative, or if `n` is so small that the table would have no buckets (`n == 0`).
- `Pair` is a dataclass with `key` and `value` fields.
- `hash_function(key)` returns a 32-bit hash of a `str` (encoded as UTF-8) or of `bytes`. Each step computes `h = 65599 * h + byte`, modulo 2**32.

### Reading words: `wordtail.wordio`

- `read_word(stream, max_len=255)` returns the next word, or `None` at the end of input. It raises `ValueError` if `max_len` is less than 1.
- `iter_words(stream, max_len=255)` yields every word in order.

### Word counting: `wordtail.maxwordcount`

- `count_words(stream, table=None, max_len=255)` counts the words of a stream into a `HashTable`. If no table is given, it creates one sized for 50,000 entries. It returns the table.
- `find_max(table)` returns the list of `Pair`s that share the largest count.
- `main(argv=None)` runs the `maxwordcount` command and returns its exit status.

### Tail: `wordtail.tail`

- `CircularBuffer(size)` keeps the last `size` items given to `put`. It supports iteration from oldest to newest and `len`. It raises `ValueError` if `size` is less than 1.
- `parse_args(argv)` parses `[-n COUNT] [FILE]` into a named tuple with fields `count` and `path`. It raises `UsageError` on bad input.
- `read_lines(stream, max_len=4095)` yields lines, cutting any line that is too long.
- `tail_lines(stream, n=10)` returns the last `n` lines as a list.
- `main(argv=None)` runs the `wordtail-tail` command and returns its exit status.

## What it does not do

`wordtail-tail` only prints the last lines of its input. It does not follow a growing file, it does not count bytes instead of lines, and it does not accept `+N` offsets. `maxwordcount` prints only the words with the top count, not a full frequency list.