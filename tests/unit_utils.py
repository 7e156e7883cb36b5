from pathlib import Path

from intcode.runtime.memory import Program
from intcode.source.reader import load_file


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_text(filename: str) -> str:
    return find_file(filename).read_text()


def load_program(name: str) -> Program:
    return Program(load_file(find_file(f'testdata/programs/{name}.txt')))
