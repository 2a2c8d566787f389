# ftkit

Small, dependency-free helpers for ASCII characters, strings, byte
buffers, printf-style formatting, reading a stream line by line and
singly linked lists. Requires Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`. Each takes a one-character string or an integer code point;
`to_upper` and `to_lower` return the same kind of value they were given.
Only ASCII ranges count: other characters are never letters and are
returned unchanged by the case conversions. A string of any other length
raises `ValueError`.

### `ftkit.output`

`put_char(c, stream)`, `put_str(s, stream)`, `put_endl(s, stream)` and
`put_nbr(n, stream)` write a character, a string, a string plus newline,
or an integer in decimal to any text stream.

### `ftkit.memory`

Operations on bytes-like buffers; buffers written to must be mutable
(`bytearray` or a writable `memoryview`). Byte values are reduced to
their low eight bits, and a size larger than a buffer raises `ValueError`.

- `memset(buffer, value, size)` and `bzero(buffer, size)` fill the start of a buffer.
- `memcpy(dst, src, size)` copies between buffers.
- `memmove(buffer, dst_offset, src_offset, size)` copies within one buffer; the
  regions may overlap.
- `memchr(data, value, size)` returns the index of a byte, or `None`.
- `memcmp(first, second, size)` returns the difference of the first differing
  bytes, or 0.
- `calloc(count, size)` returns a zero-filled `bytearray` and raises
  `OverflowError` when `count * size` is too large.

### `ftkit.printf`

`format_string(fmt, *args)` handles `%c %s %p %d %i %u %x %X %%`.
`%d`/`%i` treat the argument as a signed 32-bit integer, `%u`/`%x`/`%X`
as unsigned 32-bit, `%p` as an unsigned 64-bit address (`0` or `None`
prints `(nil)`); `%s` with `None` prints `(null)`. An unknown conversion
prints nothing and consumes no argument; too few arguments raise
`TypeError`. `printf(fmt, *args)` writes the result to standard output
and returns the number of characters written. `to_base(n, digits)` writes
a non-negative integer in the base given by the digit alphabet.

There are no flags, field widths or precisions.

### `ftkit.search`

`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup` on `str`.
Searches return an index or `None`; searching for `"\0"` returns
`len(s)`. `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` write
into a mutable sequence (a list of characters or a `bytearray`) and
return the length the untruncated result would have had.

### `ftkit.lines`

`LineReader(stream, buffer_size=42)` reads a text or binary stream in
chunks of `buffer_size`. `read_line()` returns the next line with its
newline (the last line may lack one), or `None` at the end; iterating
over the reader yields every line.

### `ftkit.transform`

- `atoi(s)` parses a leading integer after whitespace and one optional sign,
  wrapping to signed 32 bits; no digits gives 0.
- `itoa(n)` returns the decimal form of `n`.
- `split(s, sep)` splits on one character and drops empty pieces.
- `striteri(chars, f)` calls `f(index, char)` on a mutable sequence of
  characters, replacing each one for which `f` returns a string.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `strjoin(first, second)`, `strtrim(s, charset)` and `substr(s, start, length)`.

### `ftkit.linkedlist`

`Node(content, next=None)`, `LinkedList(items=())` and
`delete_one(node, delete=None)`. A `LinkedList` has `head`,
`push_front(node)`, `push_back(node)`, `last()`, `len()`, iteration over
contents, `clear(delete)` (calls `delete` on every content, last node
first), `for_each(f)` and `map(f, delete)`, which returns a new list and,
if `f` raises, passes the contents already produced to `delete` before
re-raising.

## Example

```python
import io

from ftkit.printf import format_string
from ftkit.transform import split, strtrim
from ftkit.lines import LineReader

format_string("%d items at %p, hex %x", 3, 0, 255)
# '3 items at (nil), hex ff'

split("Hello World 42 School", " ")
# ['Hello', 'World', '42', 'School']

strtrim("--**C Programming**--", "-*")
# 'C Programming'

for line in LineReader(io.StringIO("a\nb\nc"), 4):
    print(repr(line))
# 'a\n'
# 'b\n'
# 'c'
```

## What it does not do

ftkit is a library only: it installs no command-line program.