class IntcodeError(Exception):
    ''' Base of all errors terminating a run '''


class ParseError(IntcodeError):
    def __init__(self, token: str):
        super().__init__(f'Failed to parse intcode as integer: {token}')
        self.token = token


class NegativeInstruction(IntcodeError):
    def __init__(self):
        super().__init__('First value of instruction cannot be negative')


class UnknownOpcode(IntcodeError):
    def __init__(self, opcode: int):
        super().__init__(f'Unknown Opcode: {opcode}')
        self.opcode = opcode


class UnknownMode(IntcodeError):
    def __init__(self, mode: int):
        super().__init__(f'Unknown Mode: {mode}')
        self.mode = mode


class NoInputFound(IntcodeError):
    def __init__(self):
        super().__init__('Input expected but was not found')


class UnexpectedEndOfIntcode(IntcodeError):
    def __init__(self, address: int | None = None):
        if address is None:
            super().__init__('Unexpected end of Intcode')
        else:
            super().__init__(f'Unexpected end of Intcode at address {address}')

        self.address = address


class NoOutputFound(IntcodeError):
    def __init__(self):
        super().__init__('Intcode did not output a value')


class SearchTimeout(IntcodeError):
    def __init__(self, attempts: int):
        super().__init__(f'Timed out after {attempts:,} iterations')
        self.attempts = attempts


class NoSolutionFound(IntcodeError):
    def __init__(self, target: int):
        super().__init__(f'No noun/verb pair produces {target}')
        self.target = target
