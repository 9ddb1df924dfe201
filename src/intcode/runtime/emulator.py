import sys
from collections import deque
from enum import Enum
from pathlib import Path
from typing import Iterable
import logging as lg
import traceback

import click

from intcode.common.conf import RunConfig, load_config
from intcode.common.errors import IntcodeError, ParseError, NoInputFound, NoOutputFound
from intcode.loader.parser import collect_file
from intcode.runtime.memory import Memory, patch
import intcode.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_PARSE_ERROR = 2
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


class State(Enum):
    RUNNING = 'running'
    AWAITING_INPUT = 'awaiting-input'
    HALTED = 'halted'
    FAILED = 'failed'


class Machine:
    ''' A single run of an intcode program

    Input is a queue. Running dry on an open queue suspends the machine
    (AWAITING_INPUT) with the pointer left on the input instruction, so
    feeding a value and calling run() again resumes it. Running dry on a
    closed queue is a NoInputFound failure.
    '''

    state: State
    error: IntcodeError | None
    outputs: list[int]

    def __init__(self, intcode: list[int], inputs: Iterable[int] = (), closed: bool = False):
        self.memory = Memory(intcode)
        self.inputs: deque[int] = deque(inputs)
        self.outputs = []
        self.closed = closed

        self.state = State.RUNNING
        self.error = None

        self.proc = cpu.CPU(self.memory, self.inputs, self.outputs)

    @property
    def ip(self) -> int:
        return self.proc.ip

    def feed(self, *values: int):
        if self.closed:
            raise UserWarning('Input is closed')

        self.inputs.extend(values)

        if self.state == State.AWAITING_INPUT:
            self.state = State.RUNNING

    def close_input(self):
        self.closed = True

        if self.state == State.AWAITING_INPUT:
            self.state = State.RUNNING

    def fail(self, e: IntcodeError):
        lg.debug(f'Machine failed at IP:{self.proc.ip}: {e}')
        self.state = State.FAILED
        self.error = e
        raise e

    def step(self) -> State:
        if self.state == State.FAILED:
            assert self.error is not None
            raise self.error

        if self.state in (State.HALTED, State.AWAITING_INPUT):
            return self.state

        try:
            self.proc.exec_next()

        except cpu.Halt:
            lg.debug('Execution halted gracefully')
            self.state = State.HALTED

        except cpu.InputRequired:
            if self.closed:
                self.fail(NoInputFound())

            lg.debug(f'Awaiting input at IP:{self.proc.ip}')
            self.state = State.AWAITING_INPUT

        except IntcodeError as e:
            self.fail(e)

        return self.state

    def run(self) -> State:
        if self.state == State.AWAITING_INPUT and self.inputs:
            self.state = State.RUNNING

        while self.step() == State.RUNNING:
            pass

        return self.state

    def last_output(self) -> int:
        if not self.outputs:
            raise NoOutputFound()

        return self.outputs[-1]


def run_intcode_to_halt(intcode: list[int], input: int | None = None) -> list[int]:
    ''' Runs a program in place with at most one input value

    Returns the output sequence; the first error is raised to the caller.
    '''

    inputs = [] if input is None else [input]
    machine = Machine(intcode, inputs, closed=True)
    machine.run()
    return machine.outputs


# - Command line - #


def prompt_input(machine: Machine):
    value = click.prompt(f'Input at {machine.ip}', type=int, err=True)
    machine.feed(value)


def report_outputs(machine: Machine, reported: int) -> int:
    for value in machine.outputs[reported:]:
        click.echo(value)

    return len(machine.outputs)


def execute(machine: Machine):
    reported = 0

    try:
        while machine.run() == State.AWAITING_INPUT:
            reported = report_outputs(machine, reported)
            prompt_input(machine)

    finally:
        # Outputs produced before a failure are still reported
        report_outputs(machine, reported)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-c', '--config', type=click.Path(exists=True, path_type=Path),
              help='TOML run configuration')
@click.option('-i', '--input', 'inputs', type=int, multiple=True, help='Input value, repeatable')
@click.option('--noun', type=int, help='Value patched into cell 1')
@click.option('--verb', type=int, help='Value patched into cell 2')
@click.option('--dump', is_flag=True, help='Print final memory')
@click.option('--interactive', is_flag=True, help='Prompt when input runs out')
@click.argument('program', type=Path, required=False)
def run(
    verbose: bool,
    config: Path | None,
    inputs: tuple[int, ...],
    noun: int | None,
    verb: int | None,
    dump: bool,
    interactive: bool,
    program: Path | None
):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('INTCODE')

    try:
        run_config = load_config(config) if config is not None else RunConfig()
        run_config.update(program=program, inputs=list(inputs), noun=noun, verb=verb)

        if run_config.program is None:
            raise click.UsageError('No program given')

        intcode = collect_file(run_config.program)

        patch(intcode, run_config.noun, run_config.verb)

        machine = Machine(intcode, run_config.inputs, closed=not interactive)
        execute(machine)

        if dump:
            click.echo(machine.memory.dump())

        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except ParseError as e:
        lg.error(f'Program rejected: {e}')
        sys.exit(EXIT_PARSE_ERROR)

    except IntcodeError as e:
        lg.error(f'Execution halted on error: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except click.Abort:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except UserWarning as e:
        lg.error(f'Configuration rejected: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except OSError as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
