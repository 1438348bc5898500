# tadkit

A small pure-Python toolkit of classic data structures and text helpers. It
has no dependencies outside the standard library.

Comparators used throughout follow the three-way convention: a function
`cmp(a, b)` returning a negative number, zero or a positive number.

## Modules

### Text and numbers

- `tadkit.numbers`: `get_digit(n, i)` (digit of `|n|` at position `i`, 0 being
  the units), `digit_count(n)`, and the comparators `cmp_int` and `cmp_double`
  (the latter truncates the difference, so values less than one apart compare
  equal).
- `tadkit.validations`: ASCII character tests `is_digit`, `is_letter`,
  `is_upper_case`, `is_lower_case`, and `to_upper_case` / `to_lower_case`,
  which shift a character by 32 without checking it.
- `tadkit.text`: string helpers such as `index_of`, `last_index_of`,
  `index_of_n`, `substring`, `insert_at`, `remove_at`, `ltrim` / `rtrim` /
  `trim` (spaces only), `lpad` / `rpad` / `cpad`, `replicate`, `spaces`,
  `to_upper_case` / `to_lower_case`, `cmp_string` and `char_at`.
- `tadkit.conversions`: `char_to_int` / `int_to_char` (digits 0-9 then letters
  for 10-35), `string_to_int(s, base=10)`, `int_to_string`,
  `double_to_string` (six decimals with trailing zeros removed, so `3.0`
  becomes `"3."`), `string_to_double`, and small character/string helpers.

### Token strings

`tadkit.tokens` treats a string such as `"a|b|c"` as a sequence of tokens split
on one separator character. The functions return new strings:
`token_count`, `add_token`, `get_token_at`, `remove_token_at`, `set_token_at`,
`find_token` and `empty_tstring`. Out-of-range indexes raise `IndexError`.

### Sequences

- `tadkit.arrays`: in-place helpers for Python lists: `add`, `insert`,
  `remove`, `find`, `ordered_insert` and a stable `sort`, all driven by
  comparators.
- `tadkit.dynarray.Array`: a growable array with `add`, `get`, `set`,
  `insert`, `remove`, `remove_all`, `find`, `ordered_insert`, `discover`
  (return the matching element or append it), `sort` and `display`.
- `tadkit.coll.Coll`: a collection stored as one token string. Elements are
  converted with `to_string` / `from_string` (both `str` by default; the
  separator defaults to `"|"`). It has `add`, `get_at`, `set_at`,
  `remove_at`, `remove_all`, `find`, `sort`, a cursor (`has_next`, `next`,
  `reset`), `len()`, `str()` and iteration.
- `tadkit.matrix.Matrix`: a `rows` by `cols` grid kept row by row in a `Coll`,
  with `index_of`, `get_at` and `set_at`.

### Linked structures

- `tadkit.nodes`: `Node`, `NodeList` (add, remove, find, ordered insert,
  `search_and_insert` returning `(node, found)`, sort, stack and queue
  operations, `display`) and `CircularQueue`, a ring reached through its tail.
- `tadkit.linkedlist.LinkedList`: a linked list that counts its elements and
  keeps a cursor (`reset`, `has_next`, `next`).
- `tadkit.stack.Stack` and `tadkit.fifo.Queue`: LIFO and FIFO containers;
  popping or dequeuing an empty one raises `IndexError`.

### Maps

`tadkit.mapping.Map` keeps keys and values side by side in insertion order,
matching keys with `cmp_tt` (which uses only `<`). It offers `get` (returns
`None` for an absent key), `put`, `contains`, `remove` (raises `KeyError`),
`remove_all`, `discover`, key and value cursors (`has_next`, `next_key`,
`next_value`, `reset`), stable `sort_by_keys` / `sort_by_values`, and
`display`, which prints one line per entry.

### Binary files

- `tadkit.files`: fixed-size records in a seekable binary file, each described
  by a `struct` format: `write`, `read` (raises `EOFError` on a short record),
  `seek`, `file_size` and `file_pos`, all counted in records.
- `tadkit.bits`: `BitReader` reads a file one bit at a time, most significant
  bit first; `BitWriter` queues bits (`0`, `1` or strings such as `"1011"`)
  and `flush` pads them with zeros to whole bytes and appends them to the end
  of the file. `bin_to_string(value, width=8)` renders the low bits of an
  integer.

## Examples

```python
import io

from tadkit.text import cpad
from tadkit.conversions import string_to_int
from tadkit.tokens import add_token, get_token_at, remove_token_at
from tadkit.stack import Stack
from tadkit.mapping import Map, cmp_tt
from tadkit.bits import BitReader, BitWriter
from tadkit import files

cpad("ab", 6, "*")                    # "**ab**"
string_to_int("ff", 16)               # 255

s = add_token("a|b", "|", "c")        # "a|b|c"
get_token_at(s, "|", 1)               # "b"
remove_token_at(s, "|", 1)            # "a|c"

st = Stack()
st.push(1)
st.push(2)
st.pop()                              # 2

m = Map()
m.put("b", 2)
m.put("a", 1)
m.sort_by_keys(cmp_tt)
m.next_key()                          # "a"

buf = io.BytesIO()
writer = BitWriter(buf)
writer.write("101")
writer.write(1)
writer.flush()                        # buf now holds b"\xb0"
buf.seek(0)
reader = BitReader(buf)
[reader.read() for _ in range(4)]     # [1, 0, 1, 1]

records = io.BytesIO()
files.write(records, "<i", 42)
files.write(records, "<i", 7)
files.file_size(records, "<i")        # 2
files.seek(records, "<i", 1)
files.read(records, "<i")             # 7
```

## What it does not do

tadkit is a library only: it installs no command-line program, and its
containers live in memory. The only storage it handles is what `tadkit.files`
and `tadkit.bits` read from and write to file objects you open yourself.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```