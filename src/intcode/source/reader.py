from pathlib import Path
import logging as lg

import pyparsing as pp

import intcode.source.grammar as grammar
from intcode.common.errors import SourceError


def parse_source(text: str) -> list[int]:
    try:
        cells = grammar.program.parse_string(text, parse_all=True)
    except pp.ParseException as e:
        raise SourceError(f'Malformed program text: {e}') from e

    return list(cells)


def load_file(filepath: str | Path) -> list[int]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading program {filepath}')

    try:
        text = filepath.read_text()
    except OSError as e:
        raise SourceError(f'Cannot read {filepath}: {e}') from e

    cells = parse_source(text)
    lg.debug(f'Loaded {len(cells)} cells')
    return cells
