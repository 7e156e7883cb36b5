# type: ignore
import pytest

import unit_utils


@pytest.fixture
def linear_program():
    # cell 0 <- 5000 + 300 * noun + verb
    yield unit_utils.load_program('linear')


@pytest.fixture
def short_program():
    # verbs past 7 point outside memory
    yield unit_utils.load_program('short')
