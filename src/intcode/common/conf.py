''' Machine layout and defaults '''

INSTRUCTION_SIZE = 4    # opcode + three address cells
MIN_PARAM_PROGRAM = 4   # run_with_parameters needs more cells than this

RESULT_ADDR = 0
NOUN_ADDR = 1
VERB_ADDR = 2

WORD_BITS = 64
WORD_MIN = -(1 << (WORD_BITS - 1))
WORD_MAX = (1 << (WORD_BITS - 1)) - 1

# Search space for noun and verb, [0, PARAM_LIMIT)
PARAM_LIMIT = 100
SEARCH_BASE = 100       # answer = SEARCH_BASE * noun + verb

DEFAULT_NOUN = 12
DEFAULT_VERB = 2
DEFAULT_TARGET = 19690720

SETTINGS_TABLE = 'intcode'
