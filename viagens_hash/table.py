"""Hash table of trips using multiplicative hashing and chained buckets."""

from __future__ import annotations

import string
from typing import Iterator

from viagens_hash.chained_list import ChainedList, Viagem

TABLE_SIZE = 127
MULTIPLIER = 0.6180339887
HEADER = "--- Imprimindo TABELA HASH ---"

_UPPER = frozenset(string.ascii_uppercase)
_LETTERS = frozenset(string.ascii_letters)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def hash_key(chave: str) -> int:
    """Map an upper-case key to a bucket index in range(TABLE_SIZE).

    Each letter is weighted by a power of 26 by position; only the first
    six letters contribute. Raises ValueError for any character that is
    not an ASCII upper-case letter.
    """
    if not all(c in _UPPER for c in chave):
        raise ValueError(f"key must contain only letters A-Z: {chave!r}")
    k = sum((ord(c) - ord("A")) * 26 ** (5 - i) for i, c in enumerate(chave[:6]))
    product = k * MULTIPLIER
    fraction = product - int(product)
    return int(TABLE_SIZE * fraction)


def is_valid_key(chave: str) -> bool:
    """True when the key holds only ASCII letters."""
    return all(c in _LETTERS for c in chave)


def normalize_key(chave: str) -> str:
    """Return the key with ASCII letters turned to upper case."""
    return chave.translate(_TO_UPPER)


class HashTable:
    """Fixed-size hash table of trips; duplicate keys are kept."""

    def __init__(self) -> None:
        self._buckets: list[ChainedList] = [ChainedList() for _ in range(TABLE_SIZE)]

    def _bucket(self, chave: str) -> ChainedList:
        return self._buckets[hash_key(chave)]

    def insert(self, chave: str, valor: int) -> None:
        """Store a trip under its key."""
        self._bucket(chave).insert(Viagem(chave, valor))

    def search(self, chave: str) -> int | None:
        """Return the code of the newest trip with the key, or None."""
        return self._bucket(chave).find(chave)

    def search_all(self, chave: str) -> list[Viagem]:
        """Return every trip stored under the key, newest first."""
        return self._bucket(chave).find_all(chave)

    def remove(self, chave: str) -> Viagem:
        """Remove the newest trip with the key; KeyError if there is none."""
        return self._bucket(chave).remove(chave)

    def remove_pair(self, chave: str, codigo: int) -> Viagem:
        """Remove the trip with this key and code; KeyError if absent."""
        return self._bucket(chave).remove_pair(chave, codigo)

    def occupied_buckets(self) -> Iterator[tuple[int, ChainedList]]:
        """Yield (index, bucket) for every non-empty bucket in order."""
        for index, bucket in enumerate(self._buckets):
            if not bucket.is_empty():
                yield index, bucket

    def format_table(self) -> str:
        """Render the whole table as the listing text."""
        parts = [HEADER + "\n"]
        for index, bucket in self.occupied_buckets():
            parts.append(f"\nImprimindo itens na posicao {index} da tabela:\n")
            parts.extend(line + "\n" for line in bucket.format_lines())
        return "".join(parts)

    def clear(self) -> None:
        """Drop every stored trip."""
        self._buckets = [ChainedList() for _ in range(TABLE_SIZE)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)