from dataclasses import dataclass
from enum import IntEnum

import intcode.common.ops as ops
from intcode.common.errors import NegativeInstruction, UnknownOpcode, UnknownMode


class Opcode(IntEnum):
    ADD = ops.ADD
    MUL = ops.MUL
    INP = ops.INP
    OUT = ops.OUT
    JIT = ops.JIT
    JIF = ops.JIF
    LTH = ops.LTH
    EQU = ops.EQU
    HLT = ops.HLT

    @property
    def arity(self) -> int:
        return ops.ARITY[self.value]


class Mode(IntEnum):
    POSITION = ops.MODE_POSITION
    IMMEDIATE = ops.MODE_IMMEDIATE


@dataclass(frozen=True)
class Instruction:
    op: Opcode
    modes: tuple[Mode, ...]

    @property
    def width(self) -> int:
        ''' Instruction word plus its parameters '''
        return 1 + len(self.modes)

    def __str__(self) -> str:
        modes = ','.join(m.name for m in self.modes)
        return f'{self.op.name}({modes})'


def decode_mode(digit: int) -> Mode:
    try:
        return Mode(digit)
    except ValueError:
        raise UnknownMode(digit)


def decode(word: int) -> Instruction:
    if word < 0:
        raise NegativeInstruction()

    opcode = word % ops.OPCODE_BASE

    # Hundreds, thousands, ten thousands; all checked even if unused
    modes = []
    rest = word // ops.OPCODE_BASE

    for _ in range(ops.MODE_DIGITS):
        modes.append(decode_mode(rest % 10))
        rest //= 10

    try:
        op = Opcode(opcode)
    except ValueError:
        raise UnknownOpcode(opcode)

    return Instruction(op, tuple(modes[:op.arity]))
