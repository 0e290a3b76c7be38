# minishell

Building blocks for a small interactive shell. The package covers string
handling, byte buffers, number formatting, a printf-style formatter, a linked
list, environment table copies, the data model for tokens and commands, and the
error messages the shell prints.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `minishell.charclass`: ASCII character tests (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`) taking a one-character string or a code
  point, case mapping (`to_lower`, `to_upper`), and `is_number` /
  `is_big_number` for checking that text is a signed integer that fits in
  64 bits.
- `minishell.numfmt`: `itoa`, `utoa` (unsigned 32-bit), `to_hex` (unsigned
  32-bit, lower case), `to_hex_address` (unsigned 64-bit) and `str_to_upper`,
  which upper-cases ASCII letters only.
- `minishell.output`: `put_char_fd`, `put_str_fd`, `put_endl_fd` and
  `put_nbr_fd` write to a raw file descriptor and return the number of bytes
  written; nothing is written to a negative descriptor.
- `minishell.strsearch`: `atoi` (wraps like a signed 32-bit integer),
  `strncmp`, `strchr`, `strrchr`, `strnstr` and `strstr`. Strings end at their
  first NUL character; searches return an index or `None`. `strstr` only
  recognises a match at the very start of the string.
- `minishell.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc` on `bytearray` and `memoryview` buffers. Lengths past
  the end of a buffer raise `ValueError`; `calloc` raises `MemoryError` above
  2147483647 bytes.
- `minishell.strtools`: `substr`, `strtrim`, `split` (drops empty words),
  `strjoin`, `strlcpy` and `strlcat` (each returning the resulting text and the
  length it tried to create), `strmapi` and `striteri`.
- `minishell.envtable`: `copy_env`, `copy_env_with_uid` and `get_uid`, which
  builds a `UID=` entry from the first run of digits in `XDG_RUNTIME_DIR`.
- `minishell.linkedlist`: `Node` and `LinkedList` with `add_front`,
  `add_back`, `last`, `for_each`, `map` and `clear`; the list is iterable and
  has a length.
- `minishell.printf`: `format_printf` builds a string from the
  `%c %s %p %d %i %u %x %X %%` conversions and raises `TypeError` when
  arguments run out; `print_formatted` writes it to standard output and
  returns the number of bytes written.
- `minishell.models`: `TokenType`, `Token`, `Command` and `ShellState`.
  `ShellState.release(full)` drops the per-line state and deletes temporary
  here-document files; with `full` true it also drops the environment and
  raises `SystemExit(0)`.
- `minishell.diagnostics`: the shell's error messages, such as `export_fail`,
  `perm_or_file_missing` and `report_missing_commands`, which reports every
  command whose program was not found and sets the status to 127.
- `minishell.heredoc_flag`: `consume_interrupt_flag` reads the flag file
  `libft/fuck130` under `ShellState.first_path`; when it holds `1` it resets
  it to `0` and sets the status to 130.

## Example

```python
from minishell.strtools import split
from minishell.printf import format_printf

words = split("  ls  -la  /tmp ", " ")
print(format_printf("%d words, first is %s", len(words), words[0]))
# 3 words, first is ls
```

## What this package does not do

There is no shell to run: no prompt or read loop, no tokenizer or parser that
fills `Token` and `Command`, no variable expansion, no built-in commands and no
execution of pipelines or redirections. The package provides the helpers and
data structures such a shell is built from.