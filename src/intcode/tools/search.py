import sys
from pathlib import Path
import logging as lg

import click

from intcode.common.conf import SEARCH_LIMIT, MAX_SEARCH_ATTEMPTS
from intcode.common.errors import IntcodeError, ParseError, SearchTimeout, NoSolutionFound
from intcode.loader.parser import collect_file
from intcode.runtime.emulator import run_intcode_to_halt, EXIT_PARSE_ERROR, EXIT_EXEC_ERROR
from intcode.runtime.memory import patch


EXIT_FOUND = 0
EXIT_NOT_FOUND = 4


def run_patched(template: list[int], noun: int, verb: int) -> list[int]:
    ''' Runs a fresh copy of the template and returns its final memory '''
    intcode = list(template)
    patch(intcode, noun, verb)
    run_intcode_to_halt(intcode)
    return intcode


def find_noun_verb(
    template: list[int],
    target: int,
    limit: int = SEARCH_LIMIT,
    max_attempts: int = MAX_SEARCH_ATTEMPTS
) -> tuple[int, int]:
    attempts = 0

    for noun in range(limit):
        for verb in range(limit):
            if attempts == max_attempts:
                raise SearchTimeout(attempts)

            attempts += 1
            result = run_patched(template, noun, verb)[0]
            lg.debug(f'noun={noun} verb={verb} -> {result}')

            if result == target:
                lg.info(f'Found after {attempts} attempts')
                return (noun, verb)

    raise NoSolutionFound(target)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-t', '--target', type=int, required=True, help='Expected value of cell 0')
@click.option('--limit', type=int, default=SEARCH_LIMIT, show_default=True)
@click.option('--max-attempts', type=int, default=MAX_SEARCH_ATTEMPTS, show_default=True)
@click.argument('program', type=Path)
def search(verbose: bool, target: int, limit: int, max_attempts: int, program: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('INTCODE SEARCH')

    try:
        template = collect_file(program)
        (noun, verb) = find_noun_verb(template, target, limit, max_attempts)
        click.echo(100 * noun + verb)
        sys.exit(EXIT_FOUND)

    except ParseError as e:
        lg.error(f'Program rejected: {e}')
        sys.exit(EXIT_PARSE_ERROR)

    except (SearchTimeout, NoSolutionFound) as e:
        lg.error(str(e))
        sys.exit(EXIT_NOT_FOUND)

    except IntcodeError as e:
        lg.error(f'Execution halted on error: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except OSError as e:
        lg.error(f'Cannot read program: {e}')
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    search()
