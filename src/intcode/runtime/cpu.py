import logging as lg
from collections import deque
from typing import Callable

from intcode.runtime.decoder import Opcode, Instruction, decode
from intcode.runtime.memory import Memory


class Halt(Exception):
    pass


class InputRequired(Exception):
    ''' Input instruction reached with an empty input queue '''
    pass


class CPU():
    ip: int                 # Instruction pointer
    instr: Instruction      # Instruction being executed
    inputs: deque[int]
    outputs: list[int]

    def __init__(self, memory: Memory, inputs: deque[int], outputs: list[int]):
        self.memory = memory    # Ref. to memory
        self.inputs = inputs    # Ref. to input queue
        self.outputs = outputs  # Ref. to output sequence

        self.ip = 0

    # - Helpers - #

    def debug_dump(self):
        window = self.memory.cells[self.ip:self.ip + self.instr.width]
        lg.debug(f'IP:{self.ip} {self.instr} {window} OUT:{len(self.outputs)}')

    def get_param(self, n: int) -> int:
        return self.memory.resolve(self.instr.modes[n - 1], self.ip + n)

    def set_param(self, n: int, val: int):
        self.memory.store(self.instr.modes[n - 1], self.ip + n, val)

    def advance(self):
        self.ip += self.instr.width

    def arithm_pair(self, op: Callable[[int, int], int]):
        a = self.get_param(1)
        b = self.get_param(2)
        self.set_param(3, op(a, b))
        self.advance()

    def jump_if(self, cond: Callable[[int], bool]):
        if not cond(self.get_param(1)):
            self.advance()
            return

        self.ip = self.get_param(2)

    # - Operations - #

    def hlt(self):
        raise Halt()

    def add(self):
        self.arithm_pair(lambda a, b: a + b)

    def mul(self):
        self.arithm_pair(lambda a, b: a * b)

    def inp(self):
        # Parameter cell must exist before the queue is consulted
        self.memory.check(self.ip + 1)

        if not self.inputs:
            raise InputRequired()

        self.set_param(1, self.inputs.popleft())
        self.advance()

    def out(self):
        self.outputs.append(self.get_param(1))
        self.advance()

    def jit(self):
        self.jump_if(lambda v: v != 0)

    def jif(self):
        self.jump_if(lambda v: v == 0)

    def lth(self):
        self.arithm_pair(lambda a, b: 1 if a < b else 0)

    def equ(self):
        self.arithm_pair(lambda a, b: 1 if a == b else 0)

    HANDLERS = {
        Opcode.ADD: add,
        Opcode.MUL: mul,
        Opcode.INP: inp,
        Opcode.OUT: out,
        Opcode.JIT: jit,
        Opcode.JIF: jif,
        Opcode.LTH: lth,
        Opcode.EQU: equ,
        Opcode.HLT: hlt
    }

    # -- Implementation -- #

    def exec_next(self):
        self.instr = decode(self.memory.load(self.ip))

        if lg.getLogger().isEnabledFor(lg.DEBUG):
            self.debug_dump()

        handler = self.HANDLERS[self.instr.op]
        handler(self)
