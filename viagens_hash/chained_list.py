"""Singly chained bucket of trips, newest entry first."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Viagem:
    """A trip: a route key and its numeric code."""

    chave: str
    codigo: int


class ChainedList:
    """A bucket that stores trips with the newest at the head.

    Lookups and removals scan from the head, so they act on the most
    recently inserted matching trip first.
    """

    def __init__(self) -> None:
        self._items: list[Viagem] = []

    def insert(self, viagem: Viagem) -> None:
        """Place a trip at the head of the bucket."""
        self._items.insert(0, viagem)

    def _pop_first(self, predicate) -> Viagem:
        for position, viagem in enumerate(self._items):
            if predicate(viagem):
                return self._items.pop(position)
        raise KeyError

    def remove(self, chave: str) -> Viagem:
        """Remove and return the first trip with the given key.

        Raises KeyError when no trip has that key.
        """
        try:
            return self._pop_first(lambda v: v.chave == chave)
        except KeyError:
            raise KeyError(chave) from None

    def remove_pair(self, chave: str, codigo: int) -> Viagem:
        """Remove and return the first trip with the given key and code.

        Raises KeyError when no such trip exists.
        """
        try:
            return self._pop_first(
                lambda v: v.chave == chave and v.codigo == codigo
            )
        except KeyError:
            raise KeyError((chave, codigo)) from None

    def find(self, chave: str) -> int | None:
        """Return the code of the first trip with the key, or None."""
        return next((v.codigo for v in self._items if v.chave == chave), None)

    def find_all(self, chave: str) -> list[Viagem]:
        """Return every trip with the key, head first."""
        return [v for v in self._items if v.chave == chave]

    def is_empty(self) -> bool:
        return not self._items

    def format_lines(self) -> list[str]:
        """Describe every trip, one line each, head first."""
        return [f"A chave {v.chave} tem o codigo {v.codigo}" for v in self._items]

    def __iter__(self) -> Iterator[Viagem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)