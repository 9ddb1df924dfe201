from intcode.common.conf import NOUN_OFFSET, VERB_OFFSET
from intcode.common.errors import UnexpectedEndOfIntcode
from intcode.runtime.decoder import Mode


class Memory():
    ''' Fixed size view over the program's cells

    Wraps the caller's list without copying, so the caller sees the final
    state after a run. Every access is bounds-checked; negative addresses
    never wrap around.
    '''

    cells: list[int]

    def __init__(self, cells: list[int]):
        self.cells = cells

    def __len__(self) -> int:
        return len(self.cells)

    def check(self, addr: int):
        if addr < 0 or addr >= len(self.cells):
            raise UnexpectedEndOfIntcode(addr)

    def load(self, addr: int) -> int:
        self.check(addr)
        return self.cells[addr]

    def poke(self, addr: int, val: int):
        self.check(addr)
        self.cells[addr] = val

    # - Operands - #

    def resolve(self, mode: Mode, offset: int) -> int:
        param = self.load(offset)

        if mode == Mode.IMMEDIATE:
            return param

        return self.load(param)

    def store(self, mode: Mode, offset: int, val: int):
        # Immediate destinations are written into the parameter cell itself
        if mode == Mode.IMMEDIATE:
            self.poke(offset, val)
            return

        self.poke(self.load(offset), val)

    def dump(self) -> str:
        return ','.join(str(v) for v in self.cells)


def patch(intcode: list[int], noun: int | None = None, verb: int | None = None):
    ''' Writes noun and verb into their cells before a run '''
    memory = Memory(intcode)

    if noun is not None:
        memory.poke(NOUN_OFFSET, noun)

    if verb is not None:
        memory.poke(VERB_OFFSET, verb)
