"""Generate a file of random trips between capitals, one per line."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Iterator

from viagens_hash.chained_list import Viagem

CAPITALS = ("BEL", "MAN", "PAL", "BOA", "RIO", "MAC", "POR")
FIRST_CODE = 100001
TOTAL_LINES = 1000
DEFAULT_OUTPUT = "viagens.txt"


def generate_trips(
    count: int = TOTAL_LINES, rng: random.Random | None = None
) -> Iterator[Viagem]:
    """Yield ``count`` trips with distinct origin and destination.

    Codes are consecutive, starting at FIRST_CODE.
    """
    rng = rng if rng is not None else random.Random()
    for codigo in range(FIRST_CODE, FIRST_CODE + count):
        origin = rng.randrange(len(CAPITALS))
        destination = rng.randrange(len(CAPITALS))
        while destination == origin:
            destination = rng.randrange(len(CAPITALS))
        yield Viagem(CAPITALS[origin] + CAPITALS[destination], codigo)


def write_trips(
    path: str | Path = DEFAULT_OUTPUT,
    count: int = TOTAL_LINES,
    rng: random.Random | None = None,
) -> int:
    """Write ``count`` random trips to ``path`` as ``KEY<TAB>CODE`` lines.

    Returns the number of lines written. Raises OSError if the file
    cannot be created.
    """
    written = 0
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        for viagem in generate_trips(count, rng):
            handle.write(f"{viagem.chave}\t{viagem.codigo}\n")
            written += 1
    return written


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a file of random trips.")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    parser.add_argument("-n", "--count", type=int, default=TOTAL_LINES)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    try:
        written = write_trips(args.output, args.count, rng)
    except OSError as error:
        print(f"Erro ao criar o arquivo {args.output}: {error}", file=sys.stderr)
        return 1

    print(f"Arquivo {args.output} com {written} registros gerado com sucesso.")
    return 0


if __name__ == "__main__":
    sys.exit(main())