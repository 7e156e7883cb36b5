import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Sequence

import click

from intcode.common.conf import PARAM_LIMIT, SEARCH_BASE
from intcode.common.errors import IntcodeError, SourceError, NoSolutionFound
from intcode.common.settings import load_settings
from intcode.runtime.memory import Program
from intcode.source.reader import load_file
import intcode.runtime.emulator as emulator


def find_parameters(int_code: Sequence[int], target: int, limit: int = PARAM_LIMIT) -> int:
    '''
    Finds the first (noun, verb) pair, noun-major, for which the program leaves
    target in cell 0 and returns it encoded as SEARCH_BASE * noun + verb.

    Every attempt runs on a fresh copy of int_code. Engine errors abort the
    whole search.
    '''
    base = Program(int_code)
    lg.info(f'Searching {limit}x{limit} parameters for {target}')

    for noun in range(limit):
        for verb in range(limit):
            result = emulator.run_with_parameters(base.clone(), noun, verb)
            lg.debug(f'noun:{noun} verb:{verb} -> {result}')

            if result == target:
                lg.info(f'Found noun:{noun} verb:{verb}')
                return SEARCH_BASE * noun + verb

    raise NoSolutionFound(target)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-t', '--target', type=int, help='Expected value of cell 0')
@click.option('-l', '--limit', type=click.IntRange(min=1), help='Upper bound for noun and verb')
@click.option('-c', '--config', type=Path, help='TOML settings file')
@click.argument('program_filename', type=Path)
def search(
    verbose: bool,
    target: int | None,
    limit: int | None,
    config: Path | None,
    program_filename: Path
):
    try:
        settings = load_settings(config).update(target=target, limit=limit)
        settings.update(verbose=settings.verbose or verbose)
        lg.basicConfig(level=lg.DEBUG if settings.verbose else lg.INFO)
        lg.info('INTCODE SEARCH')

        int_code = load_file(program_filename)
        click.echo(find_parameters(int_code, settings.target, settings.limit))

    except SourceError as e:
        lg.error(f'Cannot load program: {e}')
        sys.exit(emulator.EXIT_SOURCE_ERROR)

    except NoSolutionFound as e:
        lg.error(str(e))
        sys.exit(emulator.EXIT_NO_SOLUTION)

    except IntcodeError as e:
        lg.error(f'Search halted on error: {e}')
        sys.exit(emulator.EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Search halted by the user')
        sys.exit(emulator.EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Search halted on general error {e}')
        traceback.print_exc()
        sys.exit(emulator.EXIT_EXEC_ERROR)

    sys.exit(emulator.EXIT_OK)


if __name__ == '__main__':
    search()
