# Operations
ADD = 1             # P1 + P2 -> P3
MUL = 2             # P1 * P2 -> P3
INP = 3             # input -> P1
OUT = 4             # P1 -> output
JIT = 5             # if P1 .ne 0 jmp P2
JIF = 6             # if P1 .eq 0 jmp P2
LTH = 7             # P1 .lt P2 -> P3
EQU = 8             # P1 .eq P2 -> P3
HLT = 99

# Operand count per operation
ARITY = {
    ADD: 3,
    MUL: 3,
    INP: 1,
    OUT: 1,
    JIT: 2,
    JIF: 2,
    LTH: 3,
    EQU: 3,
    HLT: 0
}

# Addressing modes
MODE_POSITION = 0   # M[P]
MODE_IMMEDIATE = 1  # P

# Instruction word layout
OPCODE_BASE = 100
MODE_DIGITS = 3
