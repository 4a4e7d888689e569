# ftkit

A small library of C-library-style helpers: character classification,
byte-buffer operations, string utilities that stop at the first NUL, a singly
linked list, output to file descriptors and a minimal `printf`.

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

- `ftkit.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`. Each takes a one-character string or an integer
  code; `toupper` and `tolower` return a value of the same kind, and only
  change ASCII letters.
- `ftkit.memory`: `memset`, `bzero`, `memcpy`, `memchr`, `memcmp`, `calloc`
  work on byte buffers. `memmove(buf, dst, src, n)` copies `n` bytes inside
  one `bytearray` from offset `src` to offset `dst`, overlap allowed.
  `memchr` returns an offset or `None`; `calloc` returns a zero-filled
  `bytearray`. Lengths that are negative or run past a buffer raise
  `ValueError`.
- `ftkit.strings`: `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `atoi`, `strdup`, `substr`, `strjoin`, `strtrim`,
  `split`, `itoa`, `strmapi`, `striteri`. Text is treated as ending at its
  first NUL. `strlcpy` and `strlcat` write into a `bytearray` and return the
  length they tried to create. The search functions return an index or
  `None`. `atoi` wraps like a 32-bit signed int.
- `ftkit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` write to an
  integer file descriptor.
- `ftkit.linkedlist`: `Node` and `LinkedList`. `LinkedList` has `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration.
- `ftkit.printf`: `printf` and `sformat`, and the `format_char`, `format_str`,
  `format_int`, `format_unsigned`, `format_hex` and `format_pointer` helpers
  that each render one conversion.

## printf

The supported conversions are `%c`, `%s`, `%d`, `%i`, `%u`, `%x`, `%X`, `%p`
and `%%`. Flags, width and precision are not supported. When `%` is followed by
any other character, that character is consumed and nothing is printed. A lone
`%` at the end of the format is printed as it is. Formatting stops at the first
NUL in the format. Too few arguments raise `TypeError`.

`%d`, `%i` and `%u` wrap their argument to 32 bits, and so do `%x` and `%X`.
`%s` with `None` prints `(null)`. `%p` prints `0x` followed by lowercase hex,
and `None` counts as 0.

`printf` writes to standard output and returns the number of characters it
wrote. `sformat` returns the text instead.

```python
from ftkit.printf import printf, sformat

count = printf("%s is %d years old\n", "Ada", 36)   # writes to stdout, returns 20
text = sformat("%x %X %u", 255, 255, 42)            # "ff FF 42"
sformat("%s", None)                                  # "(null)"
sformat("%p", 0)                                     # "0x0"
```

## Strings

```python
from ftkit.strings import split, strtrim, itoa, atoi

split("  hello  world ", " ")   # ["hello", "world"]
strtrim("xxhixx", "x")          # "hi"
itoa(-2147483648)               # "-2147483648"
atoi("   -42abc")               # -42
```

## Linked list

```python
from ftkit.linkedlist import LinkedList

items = LinkedList(["a", "b"])
items.push_front("z")
list(items)                      # ["z", "a", "b"]
upper = items.map(str.upper, lambda content: None)
list(upper)                      # ["Z", "A", "B"]
```

If the function given to `map` raises, the delete callback is called on every
value produced so far and the exception propagates.

## What it does not do

ftkit is a library only. It installs no command-line tool.