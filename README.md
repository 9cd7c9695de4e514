# drills

A collection of small, self-contained programs, each solving one classic
programming drill. Every module is usable as a library, and all but
`drills.offsets` come with a command that runs a short demonstration.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it does |
| --- | --- |
| `drills.citation` | `Citation` ordered by author, then year; `lesser` returns the smaller of two |
| `drills.offsets` | `offset_differences`: wrap-around differences between list elements |
| `drills.packages` | `PackageBuilder` for `Package` descriptions with `Dependency` and `Language` |
| `drills.verbosity` | `StderrLogger` and a `VerbosityFilter` that drops messages above a level |
| `drills.widgets` | Text-mode `Window`, `Label` and `Button` widgets drawn with ASCII borders |
| `drills.expressions` | `evaluate` for trees of `Op` and `Value`; division truncates toward zero |
| `drills.vectors` | `magnitude` and `normalize` (returns a new list) for vectors of any length |
| `drills.matrix` | `transpose` of a rectangular matrix |
| `drills.fibonacci` | `fib(n)`, with `fib(n) == 1` for `n <= 2` |
| `drills.protobuf` | Decoding protobuf wire format: varints, tags, fields and messages (`Person`, `PhoneNumber`) |
| `drills.bintree` | `BinaryTree`, a set that stores each value once, with `insert`, `has`, `in` and `len` |
| `drills.rot` | `rotate` and `RotDecoder`, a readable binary stream applying a ROT-n cipher to ASCII letters |
| `drills.counter` | `ValueCounter`, counting how often each value was seen |
| `drills.elevator` | Events of an elevator controller and functions that build them |
| `drills.dirlist` | `DirectoryIterator`, listing directory entries with `.` and `..` first |
| `drills.philosophers` | Dining philosophers with threads; `dine` returns all thoughts |
| `drills.philosophers_async` | Dining philosophers with asyncio tasks; `dine` is a coroutine |
| `drills.linkcheck` | `check_links`, a multi-threaded crawler returning the URLs that failed |
| `drills.chat_server` / `drills.chat_client` | A broadcast chat over WebSockets |

## Library examples

```python
from drills.offsets import offset_differences
from drills.fibonacci import fib
from drills.matrix import transpose
from drills.bintree import BinaryTree

offset_differences(1, [1, 3, 5, 7])      # [2, 2, 2, -6]
fib(20)                                  # 6765
transpose([[1, 2, 3], [4, 5, 6]])        # [[1, 4], [2, 5], [3, 6]]

tree = BinaryTree()
tree.insert(2)
tree.insert(1)
tree.insert(2)
len(tree)                                # 2
tree.has(1)                              # True
```

Decoding a protobuf message:

```python
from drills.protobuf import Person, parse_message

person = parse_message(bytes([0x0A, 0x03, 0x62, 0x6F, 0x62, 0x10, 0x2A]), Person)
# Person(name='bob', id=42, phone=[])
```

Errors are raised as exceptions: `drills.expressions.EvaluationError` for
division by zero, `drills.protobuf.ProtobufError` for malformed input,
`drills.dirlist.DirectoryError` for directories that cannot be opened and
`drills.linkcheck.BadResponse` for pages answered with a non-success status.

## Commands

Each demonstration can be run from the shell:

```
drills-fib [N]                 # prints fib(N), N defaults to 20
drills-eval
drills-widgets
drills-protobuf
drills-rot
drills-listdir [PATH]          # PATH defaults to the current directory
drills-philosophers
drills-philosophers-async
drills-linkcheck [START_URL]   # START_URL defaults to https://www.google.org
```

The chat consists of a server and a client. Start the server first, then one
or more clients in other terminals, and type lines to broadcast them to every
connected client:

```
drills-chat-server [PORT]      # listens on 127.0.0.1, PORT defaults to 2000
drills-chat-client [URI]       # URI defaults to ws://127.0.0.1:2000
```

The remaining commands, `drills-citation`, `drills-packages`,
`drills-verbosity`, `drills-vectors`, `drills-transpose`, `drills-bintree`,
`drills-counter` and `drills-elevator`, print a short demonstration of their
module.

## Limits

- `drills.protobuf` only decodes; it understands the varint, length-delimited
  and 32-bit wire types and rejects varints longer than 7 bytes. It cannot
  encode messages.
- The chat server keeps no history and has no user names or authentication;
  a client that falls more than 16 messages behind loses the oldest ones.
- The link checker follows links only on pages in the start URL's domain and
  does not honour robots.txt or rate limits.