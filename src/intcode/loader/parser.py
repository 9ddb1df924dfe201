''' Intcode program text parser '''

from pathlib import Path
import logging as lg

import pyparsing as pp

from intcode.common.conf import SEPARATOR
from intcode.common.errors import ParseError


s_dec_const = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))

# Surrounding whitespace is not part of a valid token
word = (s_dec_const + pp.StringEnd()).leave_whitespace()


def parse_token(token: str) -> int:
    try:
        (value,) = word.parse_string(token)
    except pp.ParseException:
        raise ParseError(token)

    return value


def parse_intcode(text: str) -> list[int]:
    return [parse_token(token) for token in text.split(SEPARATOR)]


def collect_file(filepath: str | Path) -> list[int]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Collecting program {filepath}')
    return parse_intcode(filepath.read_text().strip())
