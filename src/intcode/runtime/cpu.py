import logging as lg
from typing import Callable

import intcode.common.ops as ops
from intcode.common.conf import INSTRUCTION_SIZE, WORD_BITS
from intcode.common.errors import UnknownOpcode, ModifyPositionOutOfBounds
from intcode.runtime.memory import Program


class Halt(Exception):
    pass


def wrap_word(value: int) -> int:
    # Two's complement wrap to a signed machine word
    half = 1 << (WORD_BITS - 1)
    return ((value + half) % (1 << WORD_BITS)) - half


class CPU():
    ip: int  # Instruction pointer

    def __init__(self, program: Program):
        self.program = program  # Ref. to memory
        self.ip = 0             # Execution starts at the first cell

    # - Helpers - #

    def debug_dump(self):
        cells = self.program.int_code[self.ip:self.ip + INSTRUCTION_SIZE]
        name = ops.NAMES.get(cells[0], '???') if cells else '???'
        lg.debug(f'IP:{self.ip} {name} {cells}')

    def target_address(self) -> int:
        address = self.program.read_cell(self.ip + 3)

        if address < 0 or address > len(self.program):
            raise ModifyPositionOutOfBounds(address)

        return address

    def arithm_pair(self, op: Callable[[int, int], int]):
        address = self.target_address()
        a = self.program.read_operand(self.ip + 1)
        b = self.program.read_operand(self.ip + 2)
        self.program.write_cell(address, wrap_word(op(a, b)))

    # - Operations - #

    def add(self):
        self.arithm_pair(lambda a, b: a + b)

    def mul(self):
        self.arithm_pair(lambda a, b: a * b)

    def hlt(self):
        raise Halt()

    HANDLERS = {
        ops.ADD: add,
        ops.MUL: mul,
        ops.HLT: hlt
    }

    # -- Implementation -- #

    def exec_step(self, position: int):
        self.ip = position
        op = self.program.read_cell(position)
        handler = self.HANDLERS.get(op)

        if handler is None:
            raise UnknownOpcode(op, position)

        self.debug_dump()
        handler(self)

    def exec_next(self):
        self.exec_step(self.ip)
        self.ip += INSTRUCTION_SIZE

    def run(self):
        # Trailing cells that cannot hold a whole instruction are never decoded
        length = len(self.program)
        bound = length - length % INSTRUCTION_SIZE

        while self.ip < bound:
            self.exec_next()
