# ftkit

A small library of low-level helpers: ASCII character tests, operations on
byte buffers, string utilities, bounded searching and copying, a singly
linked list, line-by-line reading from file descriptors or file objects,
simple output to text streams, and a minimal printf-style formatter.

It has no dependencies beyond the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`. Each takes an integer code or a one-character string. The
predicates return `bool`. The case converters only touch ASCII letters and
give back the same kind of value they were given (`to_upper("a") == "A"`,
`to_upper(97) == 65`). `is_print` is true for codes 32 to 126.

### `ftkit.memory`

Operations on `bytearray` and other byte sequences: `memset`, `bzero`,
`memcpy`, `memmove(buffer, dest, src, n)` (offsets within one buffer,
overlap-safe), `memchr` (index or `None`), `memcmp` (difference of the first
unequal bytes) and `calloc(count, size)`. `calloc` returns a single zero byte
when either argument is 0, and raises `MemoryError` above 2147483647 bytes.
Counts that are negative or run past a buffer raise `ValueError`.

### `ftkit.text`

- `atoi(s)`: skips leading whitespace, takes one optional sign, then digits.
  Returns 0 when there are no digits.
- `itoa(n)`
- `split(s, sep)`: splits on one character and drops empty words.
- `trim(s, charset)`
- `substr(s, start, length)`
- `join(first, second)`
- `map_indexed(s, func)`: `func(index, char)` must return one character.

### `ftkit.search`

- `find_bounded(haystack, needle, length)`: the needle must lie wholly in the
  first `length` characters. An empty needle is found at 0.
- `find_char(s, c)` and `rfind_char(s, c)`: searching for NUL gives `len(s)`.
- `compare_n(first, second, n)`
- `copy_bounded(src, size)` and `concat_bounded(dst, src, size)`: each returns
  `(text, length)`. `length` is what the untruncated result would measure, so
  a caller can detect truncation.

### `ftkit.linked`

`Node` (a dataclass with `content` and `next`) and `LinkedList`:
`push_front`, `push_back`, `last`, `clear(delete)`, `for_each(func)`,
`map(func, delete)`, `len()` and iteration over contents. `clear` and
`for_each` skip `None` contents. If `func` raises in `map`, the contents
produced so far are passed to `delete` and the exception propagates.

### `ftkit.lines`

`LineReader(fd, buffer_size=42)` reads from a file descriptor, or from any
object with a `read` method returning bytes or str. It returns lines with
their trailing newline. `read_line()` returns `None` at the end of input,
and iterating over the reader yields every line.

`get_next_line(fd)` keeps one reader per descriptor (0 to 1023) between
calls. It drops that reader at the end of input or when a read fails.

### `ftkit.output`

`put_char`, `put_str`, `put_endl`, `put_nbr`. Each writes to the given text
stream, or to standard output when none is given. `put_str` and `put_endl`
write nothing for `None`.

### `ftkit.formatting`

A formatter for `%c %s %p %d %i %u %x %X %%`. Integers wrap as C 32-bit
`int` and `unsigned int` do. `%s` prints `(null)` for `None`. `%p` prints
`(nil)` for `None` or 0, and `0x...` for anything else.

- `format_printf(fmt, *args)` and `printf(fmt, *args, stream=None)`: an
  unknown `%x` sequence keeps the character after the `%`.
- `format_printf_fd(fmt, *args)` and `printf_fd(stream, fmt, *args)`: an
  unknown sequence is dropped entirely. `stream` may be a file descriptor or
  a text stream.

The writing functions return the number of characters written. A lone `%`
at the end of a format is dropped.

## Examples

```python
from ftkit.text import split, trim, itoa
from ftkit.linked import LinkedList
from ftkit.formatting import format_printf

split("  hello  world ", " ")       # ['hello', 'world']
trim("xxhixx", "x")                 # 'hi'
itoa(-42)                           # '-42'

items = LinkedList([1, 2, 3])
list(items.map(lambda v: v * 2, None))      # [2, 4, 6]

format_printf("%d items, %x hex", 3, 255)   # '3 items, ff hex'
```

Reading lines from a file descriptor:

```python
import os
from ftkit.lines import LineReader

fd = os.open("map.txt", os.O_RDONLY)
for line in LineReader(fd, 42):
    print(line, end="")
os.close(fd)
```

## What it does not do

ftkit is only a library. It has no command-line program, no window or
graphics output, and no map-file parser. Anything of that kind has to be
built on top of these helpers.