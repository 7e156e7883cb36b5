import sys
from pathlib import Path
import logging as lg
import traceback

import click

from intcode.common.conf import RESULT_ADDR, NOUN_ADDR, VERB_ADDR, MIN_PARAM_PROGRAM, WORD_MIN, WORD_MAX
from intcode.common.errors import IntcodeError, SourceError, ProgramPositionOutOfBounds
from intcode.common.settings import load_settings
from intcode.runtime.memory import Program
from intcode.source.reader import load_file
import intcode.runtime.cpu as cpu


EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_SOURCE_ERROR = 2
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


def execute(program: Program) -> Program:
    proc = cpu.CPU(program)

    try:
        proc.run()
    except cpu.Halt:
        lg.debug(f'Execution halted at {proc.ip}')

    return program


def run_with_parameters(program: Program, noun: int, verb: int) -> int:
    length = len(program)

    if length <= MIN_PARAM_PROGRAM:
        raise ProgramPositionOutOfBounds(length)

    program.write_cell(NOUN_ADDR, noun)
    program.write_cell(VERB_ADDR, verb)
    execute(program)
    return program.read_cell(RESULT_ADDR)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-n', '--noun', type=click.IntRange(WORD_MIN, WORD_MAX), help='Value for cell 1')
@click.option('-b', '--verb', type=click.IntRange(WORD_MIN, WORD_MAX), help='Value for cell 2')
@click.option('-c', '--config', type=Path, help='TOML settings file')
@click.option('--dump', is_flag=True, help='Print the whole memory after halt')
@click.argument('program_filename', type=Path)
def run(
    verbose: bool,
    noun: int | None,
    verb: int | None,
    config: Path | None,
    dump: bool,
    program_filename: Path
):
    try:
        settings = load_settings(config).update(noun=noun, verb=verb)
        settings.update(verbose=settings.verbose or verbose)
        lg.basicConfig(level=lg.DEBUG if settings.verbose else lg.INFO)
        lg.info('INTCODE')

        program = Program(load_file(program_filename))
        result = run_with_parameters(program, settings.noun, settings.verb)
        lg.info('Execution halted gracefully')
        click.echo(program.dump() if dump else result)

    except SourceError as e:
        lg.error(f'Cannot load program: {e}')
        sys.exit(EXIT_SOURCE_ERROR)

    except IntcodeError as e:
        lg.error(f'Execution halted on error: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)

    sys.exit(EXIT_OK)


if __name__ == '__main__':
    run()
