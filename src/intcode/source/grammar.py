''' Program text grammar: comma-separated signed integers '''

import pyparsing as pp

from intcode.common.conf import WORD_MIN, WORD_MAX


cell = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))
cell.add_condition(
    lambda r: WORD_MIN <= r[0] <= WORD_MAX,
    message=f'cell outside [{WORD_MIN}, {WORD_MAX}]'
)
separator = pp.Suppress(',')

program = cell + pp.ZeroOrMore(separator + cell)
