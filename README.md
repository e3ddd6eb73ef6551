# kpworks

Small console programs and the library code behind them:

- `kpworks.taylor` – a table of the Maclaurin series of
  f(x) = (3x − 5)/(x² − 4x + 3) against f itself on [0, 0.5].
- `kpworks.roots` – roots of x² − ln(1 + x) − 3 = 0 and 2x·sin(x) − cos(x) = 0
  by dichotomy, simple iterations and Newton's method.
- `kpworks.sparse` / `kpworks.sparse_cli` – sparse integer matrices read from
  text files, added and checked for a symmetric nonzero pattern.
- `kpworks.ringlist` / `kpworks.ringlist_cli` – a ring of single characters
  with an interactive menu.
- `kpworks.table` / `kpworks.table_cli` – a keyed table read from a text file,
  shaker-sorted, searched by key and written back.
- `kpworks.person` / `kpworks.person_table` – computer configuration records:
  a text-to-binary converter and a table printer.

The interactive programs print their menus and messages in Russian.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Commands

```
kpworks-taylor [N]                   # value table with N steps; asks for N if not given
kpworks-roots                        # roots found by each method, or a note that it does not apply
kpworks-sparse A.txt B.txt           # adds two matrices, prints the sum and whether it is symmetric
kpworks-ringlist                     # menu over a ring of characters, read from standard input
kpworks-table poem.txt               # menu: sort / search / print / rewrite the file
kpworks-person-dump base.txt base.bin
kpworks-person-table base.bin -f     # print every record
kpworks-person-table base.bin -p     # print Intel machines running Windows 7, 8, 10 or 11
```

`kpworks-table` searches only a table whose keys are in ascending or
descending order; otherwise it asks to sort first.

### Input formats

A matrix file holds whitespace-separated integers: the number of values on
each line, the number of lines, then the values. Zeros are not stored. Two
matrices can be added only when both sizes match.

A table file has one entry per line: a key of at most five non-blank
characters, then the rest of the line as its text.

A configuration record line is semicolon separated:

```
Surname;2;2;4;1;4;0;2;1024;1;0
```

The fields are surname, CPU cores, CPU type (0 INTEL, 1 AMD, 2 ARM,
3 ELBRUS), RAM in GB, video card type (0 EMBEDDED, 1 EXTERNAL, 2 VIDEO_BUS),
video memory in GB, disk type (0 SAS, 1 SATA), disk count, disk size in GB,
peripheral count and operating system (0 LINUX, 1 MAC_OS, 2 WINDOWS_7,
3 WINDOWS_8, 4 WINDOWS_10, 5 WINDOWS_11). Blank lines are skipped; reading
stops at the first malformed line. The surname must take 1 to 39 bytes in
UTF-8. Each record is stored as a fixed-size little-endian block
(`Person.pack()` / `Person.unpack()`).

## Library use

```python
from kpworks.roots import MethodNotApplicable, dichotomy, f9, machine_epsilon

eps = machine_epsilon()
root = dichotomy(f9, 2.0, 3.0, eps ** 0.5, eps)
```

`dichotomy`, `iterations` and `newton` raise `MethodNotApplicable` when their
starting condition fails.

```python
from kpworks.table import Entry, binary_search, shake_sort

entries = [Entry("b", "second"), Entry("a", "first")]
shake_sort(entries)
print(binary_search(entries, "a"))
```

```python
from kpworks.ringlist import RingList

ring = RingList("abc")
ring.insert(1, "x")
ring.drop_last(2)
print(ring.render())   # (a, x)
```

```python
from kpworks.sparse import read_matrix

total = read_matrix("A.txt").add(read_matrix("B.txt"))
print(total.to_dense(), total.is_symmetric())
```