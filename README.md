# fmtprint

`fmtprint` is a compact printf-style formatter. It also ships the small toolkit
that the formatter is built on: character classification, number parsing and
base conversion, byte-buffer helpers, string helpers, a singly linked list and
file-descriptor output helpers. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Formatting

`format_string` returns the formatted text. `printf` writes it to a text
stream (standard output unless `file=` is given) and returns the number of
characters written.

```python
from fmtprint.printf import format_string, printf, is_valid_format, FormatError

format_string("%5d|%-5s|%.3x", 42, "ab", 255)   # '   42|ab   |0ff'
format_string("%05d", -42)                      # '-0042'
format_string("%*.*s", 6, 2, "hello")           # '    he'
format_string("%p", 255)                        # '0xff'

count = printf("%c%c\n", "o", "k")              # writes "ok\n" and returns 3

is_valid_format("%d%%")   # True
is_valid_format("%q")     # False
```

A format string with a malformed directive raises `FormatError` (a subclass of
`ValueError`). Too few arguments raise `TypeError`; surplus arguments are
ignored.

### Supported conversions

| Spec | Meaning                                                     |
|------|-------------------------------------------------------------|
| `%c` | a single character (a one-character string or a code)       |
| `%s` | a string (`None` prints as `(null)`)                        |
| `%d` / `%i` | a signed integer, taken as a 32-bit value            |
| `%u` | an unsigned integer, taken as a 32-bit value                |
| `%x` / `%X` | unsigned 32-bit hexadecimal, lower/upper case        |
| `%p` | an address, as `0x` plus hexadecimal (`None` is `0x0`)      |
| `%%` | a literal percent sign                                      |

The flags are `-` (left-justify) and `0` (zero-pad). Width and precision may be
given as digits or as `*`, which takes the value from the next argument. A
negative `*` width means left-justify; a negative `*` precision is ignored.
A precision of zero with a value of zero prints no digits.

### Lower-level pieces

- `fmtprint.spec.parse_spec(fmt, pos, args)` reads the directive at `fmt[pos]`
  into a frozen `ConversionSpec` (with a `Conversion` enum member) and returns
  it with the index just past the directive.
- `fmtprint.convert.render(spec, args)` renders one parsed directive, and
  `fmtprint.convert.pad(text, spec)` applies truncation and width padding.

## The toolkit

- `fmtprint.chars`: `is_alpha`, `is_lower`, `is_upper`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`. Each accepts an
  integer code or a one-character string; the case converters return the same
  type they were given.
- `fmtprint.numbers`: `atoi`, `natoi` (parse from at most a given number of
  characters), `itoa`, and `to_base`, which writes a number as an unsigned
  64-bit value in the base given by a digit set.
- `fmtprint.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memccpy`,
  `memchr`, `memcmp`, `memmove`, working on `bytearray` and `bytes`. Searches
  return an offset or `None`; counts beyond a buffer raise `ValueError`.
- `fmtprint.strutil`: `chr_pos`, `strndup`, `strchr`, `strrchr`, `strncmp`,
  `strlcpy`, `strlcat`, `strnstr`, `strjoin`, `strmapi`, `split`, `strtrim`,
  `substr`. `strlcpy` and `strlcat` return the resulting text together with
  the length they would have produced without the size limit.
- `fmtprint.linkedlist`: `Node` and `LinkedList`, with `push_front`, `append`,
  `last`, `clear`, `remove_first`, `for_each`, `map`, `len()` and iteration.
- `fmtprint.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to
  a file descriptor.

```python
from fmtprint.numbers import to_base
from fmtprint.strutil import split
from fmtprint.linkedlist import LinkedList

to_base(255, "0123456789abcdef")   # 'ff'
split("  a b  c ", " ")            # ['a', 'b', 'c']

items = LinkedList()
items.append(1)
items.append(2)
items.push_front(0)
list(items)                        # [0, 1, 2]
```

## What it does not do

`fmtprint` is a library only; it installs no command-line tool. The formatter
knows only the conversions and flags listed above: there are no length
modifiers, no floating-point conversions, and no `+`, space or `#` flags.