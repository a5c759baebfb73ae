# ftlib

A small collection of general-purpose helpers with plain, predictable
semantics. It has no dependencies outside the standard library.

## Modules

- `ftlib.chars`: ASCII character classification and case conversion:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`,
  `to_lower`, `to_upper`. Each accepts a one-character string or an integer
  code; the case converters return the same kind of value they were given.
- `ftlib.memory`: operations on `bytearray` and other bytes-like buffers:
  `bzero(buf, n)`, `calloc(nmemb, size)`, `memset(buf, value, count)`,
  `memcpy(dest, src, n)`, `memmove(buf, dest, src, n)` (offsets within one
  buffer, overlap allowed), `memchr(buf, c, n)` (index or `None`) and
  `memcmp(a, b, n)`. Counts that reach past the end of a buffer raise
  `ValueError`.
- `ftlib.text`: number parsing and formatting and string searching:
  `atoi` (wraps to 32 bits), `atol` (wraps to 64 bits), `itoa`, `strchr`,
  `strrchr`, `strcmp`, `strncmp`, `strnstr`, `strndup`. Searches return an
  index or `None`.
- `ftlib.splitting`: `split`, `split_quotes`, `strtrim`, `substr`,
  `strlcpy`, `strlcat`, `strmapi`, `striteri`. `strlcpy` and `strlcat`
  return a `(text, length)` pair, where the length is what the full result
  would have been.
- `ftlib.linkedlist`: a singly linked list, `LinkedList`, built from `Node`
  objects. `add_front` and `add_back` return the new node, which can later
  be passed to `remove`. It also has `last`, `clear`, `for_each`, `map`,
  `len()` and iteration over contents.
- `ftlib.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, each
  writing to a given text stream or to standard output when it is `None`.
- `ftlib.printf`: a small printf supporting `%c %s %p %d %i %u %x %X %%`:
  `format_printf` returns the text, `printf` writes it to standard output
  and `dprintf` writes it to a given stream; both return the number of
  characters written. Integers wrap like 32-bit C values (`%p` like a 64-bit
  address); an unknown conversion is dropped and consumes no argument.
- `ftlib.linereader`: reading a file descriptor one line at a time.
  `LineReader(fd, buffer_size=1024)` offers `read_line()` and iteration;
  `get_next_line(fd)` keeps one reader per descriptor. Lines are `bytes`
  and keep their trailing newline; `None` marks the end of input.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftlib.text import atoi, itoa
from ftlib.splitting import split, split_quotes
from ftlib.printf import format_printf
from ftlib.linkedlist import LinkedList

atoi("   -42abc")                     # -42
itoa(-7)                              # "-7"
split("  a  b c ", " ")               # ["a", "b", "c"]
split_quotes("echo 'hi there'", " ")  # ["echo", "hi there"]
format_printf("%d is %x", 255, 255)   # "255 is ff"

items = LinkedList(["a", "b"])
items.add_front("z")
list(items)                           # ["z", "a", "b"]
```

Reading lines from a file descriptor:

```python
import os
from ftlib.linereader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd):
    print(line.decode(), end="")
os.close(fd)
```

## What it does not do

`ftlib` is a library only: it installs no command-line program, and it
does not interpret or run shell commands itself.