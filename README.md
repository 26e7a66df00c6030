# viagens-hash

A hash table of trip records. Each record pairs a short alphabetic key, such
as `BELRIO`, with an integer trip code. The table has 127 buckets and uses
multiplicative hashing. Collisions go into a chained list, and one key may
hold several codes.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Library use

```python
from viagens_hash.table import HashTable, is_valid_key, normalize_key

table = HashTable()
key = normalize_key("belrio")          # "BELRIO"
assert is_valid_key(key)
table.insert(key, 100001)
table.insert(key, 100002)

table.search(key)                      # 100002, the newest code, or None if absent
table.search_all(key)                  # every Viagem under the key, newest first
table.remove_pair(key, 100001)         # remove that exact record
table.remove(key)                      # remove the newest record for the key
len(table)                             # number of records stored
print(table.format_table())
```

`remove` and `remove_pair` return the removed `Viagem` and raise `KeyError`
when nothing matches.

`hash_key(key)` returns the bucket index, in `range(127)`, for a key of
upper-case ASCII letters; only the first six letters count, and any other
character raises `ValueError`. `is_valid_key` accepts keys made only of ASCII
letters, and `normalize_key` turns ASCII letters to upper case.

`HashTable.occupied_buckets()` yields `(index, bucket)` for every non-empty
bucket in order. `HashTable.clear()` empties the table.

The buckets are `ChainedList` objects from `viagens_hash.chained_list`. Each
holds frozen `Viagem` records (fields `chave` and `codigo`) with the newest at
the head, so lookups and removals find the most recent match first.

## Generating a trip file

```
viagens-gerar
```

This writes `viagens.txt` with 1000 lines of the form `ORIGDEST<TAB>CODE`.
Origin and destination are different three-letter codes from `BEL`, `MAN`,
`PAL`, `BOA`, `RIO`, `MAC` and `POR`, and the codes run upwards from 100001.

Options:

- `-o`, `--output`: file to write (default `viagens.txt`)
- `-n`, `--count`: number of lines (default 1000)
- `--seed`: seed for the random generator, for repeatable output

`generate_trips(count, rng)` and `write_trips(path, count, rng)` in
`viagens_hash.generator` do the same work from code; `rng` is an optional
`random.Random`.

## Interactive menu

```
viagens-hash
```

The menu (its prompts are in Portuguese) reads its choices from standard
input. A table must be created with option 1 before the others can be used.

| Option | Action |
|--------|--------|
| 1 | create a new table |
| 2 | insert one key and code |
| 3 | insert records from a file (key and code on each line) |
| 4 | remove the newest record for a key |
| 5 | empty the table |
| 6 | print every occurrence of a key |
| 7 | print the whole table |
| 8 | print and count the occurrences of a key |
| 9 | remove the key and code pairs listed in a file |
| 0 | quit |

Keys typed at the menu are turned to upper case and must be letters only, at
most six of them. Options 3 and 9 ask for a file name and the number of
records to read, so they work directly on the output of `viagens-gerar`; they
stop at the first record that cannot be read, has an invalid key, or (for
option 9) is not in the table. The menu also ends when its input runs out.

`MenuSession(stdin, stdout).run()` in `viagens_hash.cli` runs the same menu
over any pair of text streams.

## What it does not do

The table lives only in memory. Nothing is saved between runs of the menu;
to keep data, write it to a file in the `KEY CODE` format and load it again
with option 3.