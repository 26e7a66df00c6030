"""Interactive menu for exercising the trip hash table."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, TextIO

from viagens_hash.table import HashTable, is_valid_key, normalize_key

MAX_KEY_LENGTH = 6

MENU = (
    "\n----Testando implementação da nossa TABELA HASH----\n"
    "1. Criar uma nova tabela hash.\n"
    "2. Inserir um novo elemento na tabela.\n"
    "3. Inserir novos elementos através de um arquivo.\n"
    "4. Remover um elemento da tabela hash.\n"
    "5. Apagar todos elementos da tabela hash.\n"
    "6. Imprimir um elemento da tabela hash.\n"
    "7. Imprimir todos elementos da tabela hash.\n"
    "8. Buscar ocorrencias de um elemento da tabela hash.\n"
    "9. Remover elementos através de um arquivo.\n"
    "0. Sair.\n"
    "Escolha uma das opções.\n"
)

NO_TABLE = "Tabela não criada. Por favor, crie a tabela primeiro (opção 1).\n"
INVALID_KEY = "Chave invalida! Use apenas letras (sem números ou símbolos).\n"
KEY_TOO_LONG = "Chave muito grande! Máximo permitido: 6 caracteres.\n"
KEY_READ_ERROR = "Erro na leitura da chave.\n"
PAUSE = "\nPressione enter tecla para continuar...\n"

_INT = re.compile(r"[+-]?\d+")


class _Scanner:
    """Whitespace-token and character reader over a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buf = ""
        self._pos = 0

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._buf = self._buf[self._pos:] + line
        self._pos = 0
        return True

    def _skip_whitespace(self) -> bool:
        while True:
            while self._pos < len(self._buf) and self._buf[self._pos].isspace():
                self._pos += 1
            if self._pos < len(self._buf):
                return True
            if not self._fill():
                return False

    def token(self) -> str | None:
        """Return the next whitespace-delimited word, or None at end of input."""
        if not self._skip_whitespace():
            return None
        start = self._pos
        while self._pos < len(self._buf) and not self._buf[self._pos].isspace():
            self._pos += 1
        return self._buf[start:self._pos]

    def read_int(self) -> int | None:
        """Read a leading integer; on failure consume nothing and return None."""
        if not self._skip_whitespace():
            return None
        match = _INT.match(self._buf, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return int(match.group())

    def getchar(self) -> str:
        """Return the next character, or an empty string at end of input."""
        if self._pos >= len(self._buf) and not self._fill():
            return ""
        char = self._buf[self._pos]
        self._pos += 1
        return char


class MenuSession:
    """One run of the numbered menu, reading commands from ``stdin``."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._input = _Scanner(stdin)
        self._out = stdout
        self.table: HashTable | None = None
        self._actions: dict[int, Callable[[], None]] = {
            1: self._create,
            2: self._insert_one,
            3: self._insert_from_file,
            4: self._remove_one,
            5: self._clear,
            6: self._print_key,
            7: self._print_table,
            8: self._count_key,
            9: self._remove_from_file,
        }

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _pause(self) -> None:
        self._write(PAUSE)
        self._input.getchar()
        char = self._input.getchar()
        while char not in ("\n", ""):
            char = self._input.getchar()

    def run(self) -> int:
        """Process menu choices until the user exits; return the exit status."""
        while True:
            self._write(MENU)
            option = self._input.read_int()
            if option is None:
                if self._input.token() is None:
                    self.table = None
                    return 0
                option = -1
            if option == 0:
                self.table = None
                self._write("Finalizando programa.")
                return 0
            self._actions.get(option, self._invalid_option)()

    def _invalid_option(self) -> None:
        self._write("Opção inválida, por favor escolha novamente.\n")
        self._pause()

    def _require_table(self) -> bool:
        if self.table is None:
            self._write(NO_TABLE)
            self._pause()
            return False
        return True

    def _read_key(self, prompt: str, length_first: bool) -> str | None:
        self._write(prompt)
        raw = self._input.token()
        if raw is None:
            self._write(KEY_READ_ERROR)
            self._pause()
            return None
        chave = normalize_key(raw)
        checks = [
            (len(chave) <= MAX_KEY_LENGTH, KEY_TOO_LONG),
            (is_valid_key(chave), INVALID_KEY),
        ]
        if not length_first:
            checks.reverse()
        for passed, message in checks:
            if not passed:
                self._write(message)
                self._pause()
                return None
        return chave

    def _create(self) -> None:
        self.table = HashTable()
        self._write("A tabela hash foi criada com sucesso.\n")
        self._pause()

    def _insert_one(self) -> None:
        if not self._require_table():
            return
        chave = self._read_key(
            "Digite uma chave de até 6 caracteres para a viagem:\n", length_first=True
        )
        if chave is None:
            return
        self._write("Digite o código da viagem:\n")
        codigo = self._input.read_int()
        if codigo is None:
            self._write("Entrada inválida para o código.\n")
            self._pause()
            return
        self.table.insert(chave, codigo)
        self._write("Inserção feita com sucesso.\n")
        self._pause()

    def _read_file_spec(self, prompt: str) -> tuple[str, int] | None:
        self._write(prompt)
        name = self._input.token()
        if name is None:
            self._write("Erro ao ler o nome do arquivo.\n")
            self._pause()
            return None
        self._write("Digite a quantidades de linhas desse arquivo.\n")
        lines = self._input.read_int()
        if lines is None or lines <= 0:
            self._write("Número de linhas inválido.\n")
            self._pause()
            return None
        return name, lines

    def _process_file(
        self, name: str, lines: int, action: Callable[[str, int], bool]
    ) -> bool | None:
        """Apply ``action`` to each record; None if the file cannot be opened."""
        try:
            handle = open(name, encoding="utf-8")
        except OSError:
            self._write(
                f"Erro ao abrir o arquivo '{name}'. Verifique se o nome está "
                "correto e se o arquivo existe.\n"
            )
            self._pause()
            return None
        with handle:
            records = _Scanner(handle)
            for line_number in range(1, lines + 1):
                raw = records.token()
                codigo = records.read_int() if raw is not None else None
                if raw is None or codigo is None:
                    self._write(
                        f"Erro na leitura da linha {line_number} do arquivo. "
                        "Verificar se o formato esta certo. \n"
                    )
                    return False
                chave = normalize_key(raw)
                if not is_valid_key(chave):
                    self._write(INVALID_KEY)
                    self._pause()
                    return False
                if not action(chave, codigo):
                    self._write(f"Erro ao inserir chave '{chave}' com codigo {codigo}.\n")
                    return False
        return True

    def _insert_from_file(self) -> None:
        if not self._require_table():
            return
        spec = self._read_file_spec("Digite o nome do arquivo que contem os elementos:\n")
        if spec is None:
            return

        def insert(chave: str, codigo: int) -> bool:
            self.table.insert(chave, codigo)
            return True

        result = self._process_file(*spec, insert)
        if result is None:
            return
        if result:
            self._write("A inserção pelo arquivo feita com sucesso.\n")
        else:
            self._write("A inserção pelo arquivo interrompida em decorrencia de erro.\n")
        self._pause()

    def _remove_from_file(self) -> None:
        if not self._require_table():
            return
        spec = self._read_file_spec(
            "Digite o nome do arquivo que contem os elementos a serem removidos:\n"
        )
        if spec is None:
            return

        def remove(chave: str, codigo: int) -> bool:
            try:
                self.table.remove_pair(chave, codigo)
            except KeyError:
                return False
            return True

        result = self._process_file(*spec, remove)
        if result is None:
            return
        if result:
            self._write("A remocao por arquivo foi feita com sucesso.\n")
        else:
            self._write("A remocao por arquivo foi interrompida em decorrencia de erro.\n")
        self._pause()

    def _remove_one(self) -> None:
        if not self._require_table():
            return
        chave = self._read_key(
            "Digite uma chave do elemento que deseja remover:\n", length_first=False
        )
        if chave is None:
            return
        try:
            self.table.remove(chave)
        except KeyError:
            self._write("Erro ao remover, tente novamente.\n")
        else:
            self._write("Remoção feita com sucesso.\n")
        self._pause()

    def _clear(self) -> None:
        if not self._require_table():
            return
        self.table.clear()
        self._write("A tabela hash foi esvaziada com sucesso.\n")
        self._pause()

    def _print_occurrences(self, chave: str) -> int:
        found = self.table.search_all(chave)
        for viagem in found:
            self._write(f"Chave: {viagem.chave} | Código: {viagem.codigo}\n")
        return len(found)

    def _print_key(self) -> None:
        if not self._require_table():
            return
        chave = self._read_key(
            "Digite uma chave de até 6 caracteres para a viagem que deseja imprimir:\n",
            length_first=False,
        )
        if chave is None:
            return
        self._print_occurrences(chave)
        self._pause()

    def _print_table(self) -> None:
        if not self._require_table():
            return
        self._write(self.table.format_table())
        self._pause()

    def _count_key(self) -> None:
        if not self._require_table():
            return
        chave = self._read_key(
            "Digite uma chave de até 6 caracteres para a viagem que deseja buscar:\n",
            length_first=False,
        )
        if chave is None:
            return
        total = self._print_occurrences(chave)
        if total == 0:
            self._write(f"Nenhuma ocorrência encontrada para a chave '{chave}'.\n")
        else:
            self._write(f"Total de ocorrências encontradas: {total}\n")
        self._pause()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive trip hash table menu.")
    parser.parse_args(argv)
    return MenuSession(sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    sys.exit(main())