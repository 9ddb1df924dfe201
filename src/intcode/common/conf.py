from dataclasses import dataclass, field
from pathlib import Path
import logging as lg
import tomllib


SEPARATOR = ','

NOUN_OFFSET = 1
VERB_OFFSET = 2

SEARCH_LIMIT = 100              # Nouns and verbs are taken from [0, SEARCH_LIMIT)
MAX_SEARCH_ATTEMPTS = 1_000_000


@dataclass
class RunConfig:
    program: Path | None = None
    inputs: list[int] = field(default_factory=list)
    noun: int | None = None
    verb: int | None = None

    def update(
        self,
        program: Path | None = None,
        inputs: list[int] | None = None,
        noun: int | None = None,
        verb: int | None = None
    ):
        if program is not None:
            self.program = program

        if inputs:
            self.inputs = list(inputs)

        if noun is not None:
            self.noun = noun

        if verb is not None:
            self.verb = verb

        return self


def load_config(config_path: Path) -> RunConfig:
    lg.debug(f'Loading run configuration {config_path}')

    try:
        config = tomllib.loads(config_path.read_text())
    except tomllib.TOMLDecodeError as e:
        raise UserWarning(f'Malformed run configuration {config_path}: {e}')

    if 'machine' not in config:
        raise UserWarning(f'No [machine] section in {config_path}')

    machine = config['machine']

    if not isinstance(machine, dict):
        raise UserWarning(f'[machine] must be a table in {config_path}')

    run_config = RunConfig()

    if 'program' in machine:
        if not isinstance(machine['program'], str):
            raise UserWarning(f'Program must be a path string, got {machine["program"]}')

        # Program paths are relative to the configuration file
        run_config.program = config_path.parent / Path(machine['program'])

    inputs = machine.get('inputs', [])

    if not isinstance(inputs, list):
        raise UserWarning(f'Inputs must be a list, got {inputs}')

    if not all(isinstance(v, int) and not isinstance(v, bool) for v in inputs):
        raise UserWarning(f'Inputs must be integers, got {inputs}')

    run_config.inputs = list(inputs)

    for key in ('noun', 'verb'):
        value = machine.get(key)

        if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
            raise UserWarning(f'{key} must be an integer, got {value}')

    run_config.noun = machine.get('noun')
    run_config.verb = machine.get('verb')

    return run_config
