import pytest

from intcode.common.errors import NoInputFound, NoOutputFound, UnexpectedEndOfIntcode, UnknownOpcode
from intcode.runtime.emulator import Machine, State

from fixtures import compare8  # noqa: F401


ECHO_TWICE = [3, 0, 4, 0, 3, 0, 4, 0, 99]


def test_runs_to_halt():
    machine = Machine([104, 42, 99])

    assert machine.run() == State.HALTED
    assert machine.outputs == [42]
    assert machine.last_output() == 42


def test_halted_machine_stays_halted():
    machine = Machine([104, 42, 99])
    machine.run()

    assert machine.run() == State.HALTED
    assert machine.step() == State.HALTED
    assert machine.outputs == [42]


def test_step():
    machine = Machine([1101, 2, 3, 5, 99, 0])

    assert machine.step() == State.RUNNING
    assert machine.ip == 4
    assert machine.memory.cells[5] == 5
    assert machine.step() == State.HALTED


def test_suspends_on_missing_input():
    machine = Machine(list(ECHO_TWICE), [1])

    assert machine.run() == State.AWAITING_INPUT
    assert machine.outputs == [1]
    assert machine.ip == 4

    machine.feed(2)

    assert machine.run() == State.HALTED
    assert machine.outputs == [1, 2]


def test_resume_without_feed_stays_suspended():
    machine = Machine(list(ECHO_TWICE))

    assert machine.run() == State.AWAITING_INPUT
    assert machine.run() == State.AWAITING_INPUT
    assert machine.ip == 0


def test_queued_inputs_are_consumed_in_order():
    machine = Machine(list(ECHO_TWICE), [5, 6], closed=True)

    assert machine.run() == State.HALTED
    assert machine.outputs == [5, 6]


def test_closed_input_fails():
    machine = Machine(list(ECHO_TWICE), [5], closed=True)

    with pytest.raises(NoInputFound):
        machine.run()

    assert machine.state == State.FAILED
    assert isinstance(machine.error, NoInputFound)
    assert machine.outputs == [5]


def test_close_while_suspended():
    machine = Machine(list(ECHO_TWICE), [5])
    assert machine.run() == State.AWAITING_INPUT

    machine.close_input()

    with pytest.raises(NoInputFound):
        machine.run()


def test_feed_after_close():
    machine = Machine(list(ECHO_TWICE))
    machine.close_input()

    with pytest.raises(UserWarning):
        machine.feed(1)


def test_failed_machine_keeps_outputs():
    machine = Machine([104, 1, 104, 2, 42])

    with pytest.raises(UnknownOpcode):
        machine.run()

    assert machine.state == State.FAILED
    assert machine.outputs == [1, 2]


def test_failed_machine_does_not_retry():
    machine = Machine([104, 1])

    with pytest.raises(UnexpectedEndOfIntcode) as first:
        machine.run()

    with pytest.raises(UnexpectedEndOfIntcode) as second:
        machine.run()

    assert first.value is second.value
    assert machine.outputs == [1]


def test_empty_program():
    machine = Machine([])

    with pytest.raises(UnexpectedEndOfIntcode):
        machine.run()


def test_no_output():
    machine = Machine([99])
    machine.run()

    with pytest.raises(NoOutputFound):
        machine.last_output()


def test_fed_later(compare8):  # noqa: F811
    machine = Machine(compare8)
    assert machine.run() == State.AWAITING_INPUT

    machine.feed(8)

    assert machine.run() == State.HALTED
    assert machine.last_output() == 1000


def test_chained_feedback():
    # Two echo machines passing a value back and forth
    first = Machine(list(ECHO_TWICE), [1])
    second = Machine(list(ECHO_TWICE))

    first.run()
    second.feed(first.outputs[-1] + 1)
    second.run()
    first.feed(second.outputs[-1] + 1)
    first.run()
    second.feed(first.outputs[-1] + 1)

    assert first.state == State.HALTED
    assert second.run() == State.HALTED
    assert first.outputs == [1, 3]
    assert second.outputs == [2, 4]
