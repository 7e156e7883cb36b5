class IntcodeError(Exception):
    pass


class UnknownOpcode(IntcodeError):
    def __init__(self, opcode: int, position: int):
        super().__init__(f'Unknown opcode {opcode} at position {position}')
        self.opcode = opcode
        self.position = position


class ProgramPositionOutOfBounds(IntcodeError):
    def __init__(self, position: int):
        super().__init__(f'Program position {position} out of bounds')
        self.position = position


class ModifyPositionOutOfBounds(IntcodeError):
    def __init__(self, address: int):
        super().__init__(f'Modify position {address} out of bounds')
        self.address = address


class ArgumentPositionOutOfBounds(IntcodeError):
    def __init__(self, position: int, address: int):
        super().__init__(
            f'Argument at position {position} points out of bounds to {address}'
        )
        self.position = position
        self.address = address


class NoSolutionFound(IntcodeError):
    def __init__(self, target: int):
        super().__init__(f'No noun/verb pair produces {target}')
        self.target = target


class SourceError(IntcodeError):
    pass
