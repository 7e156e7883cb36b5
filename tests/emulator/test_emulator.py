import pytest

import intcode.runtime.emulator as emulator
from intcode.runtime.memory import Program
from intcode.common.errors import ProgramPositionOutOfBounds, UnknownOpcode

import unit_utils
from fixtures import linear_program  # noqa: F401


@pytest.mark.parametrize('source, expected', [
    (
        [1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50],
        [3500, 9, 10, 70, 2, 3, 11, 0, 99, 30, 40, 50]
    ),
    ([1, 0, 0, 0, 99], [2, 0, 0, 0, 99]),
    ([2, 3, 0, 3, 99], [2, 3, 0, 6, 99]),
    ([2, 4, 4, 5, 99, 0], [2, 4, 4, 5, 99, 9801]),
    ([1, 1, 1, 4, 99, 5, 6, 0, 99], [30, 1, 1, 4, 2, 5, 6, 0, 99]),
])
def test_execute(source: list[int], expected: list[int]):
    assert emulator.execute(Program(source)) == Program(expected)


def test_execute_file():
    program = emulator.execute(unit_utils.load_program('sample'))
    assert program.read_cell(0) == 3500


def test_execute_stops_at_halt():
    # The instruction after halt would fail if decoded
    program = Program([1, 0, 0, 0, 99, 0, 0, 0, 7, 0, 0, 0])
    assert emulator.execute(program) == Program([2, 0, 0, 0, 99, 0, 0, 0, 7, 0, 0, 0])


def test_execute_propagates_errors():
    with pytest.raises(UnknownOpcode):
        emulator.execute(Program([1, 0, 0, 0, 7, 0, 0, 0, 99]))


def test_run_with_parameters():
    program = Program([1, 0, 0, 0, 99])
    assert emulator.run_with_parameters(program, 4, 1) == 103


def test_run_with_parameters_overwrites_cells():
    program = Program([1, 77, 88, 0, 99])
    emulator.run_with_parameters(program, 0, 4)

    assert program == Program([100, 0, 4, 0, 99])


@pytest.mark.parametrize('source', [[99], [1, 0, 0], [1, 0, 0, 0]])
def test_run_with_parameters_too_short(source: list[int]):
    program = Program(source)

    with pytest.raises(ProgramPositionOutOfBounds) as exc:
        emulator.run_with_parameters(program, 0, 0)

    assert exc.value.position == len(source)
    assert program == Program(source)


def test_run_with_parameters_linear(linear_program):  # noqa: F811
    assert emulator.run_with_parameters(linear_program, 12, 2) == 8602


def test_runs_are_deterministic(linear_program):  # noqa: F811
    first = emulator.run_with_parameters(linear_program.clone(), 31, 7)
    second = emulator.run_with_parameters(linear_program.clone(), 31, 7)

    assert first == second == 5000 + 300 * 31 + 7
