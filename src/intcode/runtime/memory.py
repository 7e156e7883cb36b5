# Intcode program memory: code and data share one positional address space

from typing import Iterable

from intcode.common.errors import ProgramPositionOutOfBounds, ArgumentPositionOutOfBounds


class Program:
    int_code: list[int]

    def __init__(self, int_code: Iterable[int]):
        self.int_code = list(int_code)
        assert self.int_code, 'Program memory must not be empty'

    def __len__(self) -> int:
        return len(self.int_code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Program):
            return NotImplemented

        return self.int_code == other.int_code

    def __repr__(self) -> str:
        return f'Program({self.int_code})'

    def clone(self) -> 'Program':
        return Program(self.int_code)

    def dump(self) -> str:
        return ','.join(str(cell) for cell in self.int_code)

    # - Accessors - #

    def read_cell(self, position: int) -> int:
        # Reading exactly at len() passes this check and fails on access
        if position < 0 or position > len(self.int_code):
            raise ProgramPositionOutOfBounds(position)

        return self.int_code[position]

    def read_operand(self, position: int) -> int:
        address = self.read_cell(position)

        if address < 0 or address >= len(self.int_code):
            raise ArgumentPositionOutOfBounds(position, address)

        return self.int_code[address]

    def write_cell(self, address: int, value: int):
        self.int_code[address] = value
