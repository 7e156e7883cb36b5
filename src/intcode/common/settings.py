from pathlib import Path
import tomllib

import intcode.common.conf as conf
from intcode.common.errors import SourceError


class RunSettings:
    noun: int
    verb: int
    target: int
    limit: int
    verbose: bool

    def __init__(self):
        self.noun = conf.DEFAULT_NOUN
        self.verb = conf.DEFAULT_VERB
        self.target = conf.DEFAULT_TARGET
        self.limit = conf.PARAM_LIMIT
        self.verbose = False

    def update(
        self,
        noun: int | None = None,
        verb: int | None = None,
        target: int | None = None,
        limit: int | None = None,
        verbose: bool | None = None
    ):
        if noun is not None:
            self.noun = noun

        if verb is not None:
            self.verb = verb

        if target is not None:
            self.target = target

        if limit is not None:
            self.limit = limit

        if verbose is not None:
            self.verbose = verbose

        return self


def load_settings(filepath: Path | None) -> RunSettings:
    settings = RunSettings()

    if filepath is None:
        return settings

    try:
        config = tomllib.loads(filepath.read_text())
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise SourceError(f'Cannot load settings from {filepath}: {e}') from e

    table = config.get(conf.SETTINGS_TABLE, {})
    unknown = set(table) - set(RunSettings.__annotations__)

    if unknown:
        raise SourceError(f'Unknown settings {sorted(unknown)} in {filepath}')

    for key, value in table.items():
        check_value(key, value, filepath)

    return settings.update(**table)


def check_value(key: str, value: object, filepath: Path):
    expected = RunSettings.__annotations__[key]

    # bool is an int subclass, so compare exact types
    if type(value) is not expected:
        raise SourceError(
            f'Setting {key} in {filepath} must be {expected.__name__}, got {value!r}'
        )

    if expected is int and not conf.WORD_MIN <= value <= conf.WORD_MAX:
        raise SourceError(f'Setting {key} in {filepath} out of range: {value}')
