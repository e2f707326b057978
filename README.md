# libft

A small library of the familiar C-library helpers as plain Python
functions: ASCII character classes, byte-buffer operations, string
utilities, a minimal `printf`, and a buffered line reader over file
descriptors. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

- `libft.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_lower`, `to_upper`. Each accepts a one-character string or an integer
  code; the case converters give back the same kind they were given.
- `libft.memory`: `memset`, `bzero`, `memcpy`, `memchr`, `memcmp`, `calloc`
  work on `bytearray`/`bytes` buffers and raise `IndexError` when a buffer is
  too short. `memmove(buf, dest, src, n)` moves bytes between offsets of one
  buffer, overlap allowed. `memchr` returns an index or `None`.
- `libft.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write
  to an open file descriptor. `putstr_fd` and `putendl_fd` write nothing for
  `None` or descriptor 0.
- `libft.strings`: `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi`, `striteri`, `atoi`, `itoa`. Search functions return an index or
  `None`. `strlcpy` and `strlcat` fill NUL-terminated `bytearray` buffers and
  return the length they tried to create. `atoi` wraps to a signed 32-bit
  integer.
- `libft.formatting`: `render` builds a string from a format using the
  conversions `%c %s %d %i %u %p %x %X %%` (unknown conversions produce
  nothing; too few arguments raise `TypeError`), and `printf` writes it to
  standard output and returns the number of bytes written. The
  single-conversion helpers `format_char`, `format_str`, `format_decimal`,
  `format_unsigned`, `format_pointer` and `format_hex` are also available.
- `libft.lines`: `LineReader(fd, buffer_size=BUFFER_SIZE)` reads a file
  descriptor one line at a time, each line keeping its trailing newline;
  `read_line()` returns `None` at the end, and the reader is iterable.
  `get_next_line(fd)` is the stateful one-call form, keeping unread data per
  descriptor. `BUFFER_SIZE` is 5.

## Example

```python
from libft.strings import split, atoi, itoa
from libft.formatting import render
from libft.lines import LineReader

split("  hello  world ", " ")       # ['hello', 'world']
atoi("   -42abc")                   # -42
itoa(-2147483648)                   # '-2147483648'
render("%d in hex is %x", 255, 255) # '255 in hex is ff'

import os
fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 5):
    print(line, end="")
os.close(fd)
```

## What it does not do

This is a library only: it provides no command-line program, and `printf`
supports no flags, widths or precisions.

## Running the tests

```
pip install .[test]
pytest
```