# nextline

`nextline` reads from a file descriptor one line at a time. Each call returns
the next line as `bytes`, with its trailing newline if it has one. The last
line may have no newline. When the input is exhausted, the call returns
`None`. Bytes that were read past the end of a line are kept for the next
call. Each descriptor has its own pending bytes, so you can read several
descriptors in turn without their lines mixing.

Data is read in chunks of a fixed size. The default chunk size is 5 bytes.
A chunk is used only up to its first NUL byte, and anything after that NUL
in the chunk is dropped. If a read fails with an `OSError`, the reader
treats it as the end of input.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Library use

```python
import os
import sys
from nextline.reader import LineReader, get_next_line

fd = os.open("notes.txt", os.O_RDONLY)
try:
    while (line := get_next_line(fd)) is not None:
        sys.stdout.buffer.write(line)
finally:
    os.close(fd)
```

A descriptor can be passed as an `int` or as any object that has a
`fileno()` method, such as an open file.

`get_next_line` uses one shared reader with the default settings. To use a
different chunk size or a different limit on descriptor numbers, create your
own `LineReader`:

```python
reader = LineReader(buffer_size=64, max_fd=1024)
for line in reader.lines(fd):
    ...
```

- `LineReader(buffer_size=5, max_fd=1024)` raises `ValueError` if either value
  is not positive.
- `LineReader.read_line(fd)` returns the next line, or `None` at end of input.
  It raises `ValueError` if the descriptor number is not in `0 .. max_fd - 1`.
- `LineReader.lines(fd)` yields lines until the input is exhausted.

The module `nextline.buffer` has the helpers that work on the pending bytes.
Each one also accepts `None`:

- `found_new_line(remainder)` returns whether the bytes contain a newline.
- `extract_line(remainder)` returns the first line with its newline, or
  `None` if the bytes are empty.
- `update_remainder(remainder)` returns the bytes that follow the first line,
  or `None` if nothing follows it.

## Command line

Print a file line by line:

```
nextline notes.txt
```

If you give no file, the command reads `tester1.txt` in the current
directory. If that file cannot be read, the command prints nothing and exits
with status 0.

If you give two files, their lines are interleaved. Each line starts with
`file1: ` or `file2: `. When one file runs out, the rest of the other file is
printed. If either file cannot be opened, the command prints
`Error opening files` and exits with status 1.

```
nextline first.txt second.txt
```

Use `--buffer-size N` to set the chunk size. The value must be positive. The
command accepts at most two files.

The functions `print_file(path, out=None)` and
`print_interleaved(first, second, out=None)` in `nextline.cli` do the same
work with the default chunk size. They write `bytes` to a binary stream,
which is standard output unless you pass another. They do not catch errors
from opening the files.