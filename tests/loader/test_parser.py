import pytest

from intcode.common.errors import ParseError
from intcode.loader.parser import parse_intcode, collect_file

import unit_utils
from fixtures import program_file  # noqa: F401


def test_parse_simple():
    assert parse_intcode('1,0,0,0,99') == [1, 0, 0, 0, 99]


def test_parse_signed():
    assert parse_intcode('3,-1,+4,0') == [3, -1, 4, 0]


def test_parse_keeps_large_values():
    assert parse_intcode('104,1125899906842624,99') == [104, 1125899906842624, 99]


@pytest.mark.parametrize('source, token', [
    ('1,a,99', 'a'),
    ('1,2,', ''),
    (',1', ''),
    ('', ''),
    ('1, 2', ' 2'),
    ('1,2 ', '2 '),
    ('1,2.5', '2.5'),
    ('1,--2', '--2'),
])
def test_parse_rejects(source: str, token: str):
    with pytest.raises(ParseError) as e:
        parse_intcode(source)

    assert e.value.token == token
    assert token in str(e.value)


def test_parse_reports_first_bad_token():
    with pytest.raises(ParseError) as e:
        parse_intcode('1,x,y')

    assert e.value.token == 'x'


def test_collect_file_strips_newline():
    program = collect_file(unit_utils.find_file('testdata/gravity.txt'))
    assert program == [1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50]


def test_collect_file_accepts_str(program_file):  # noqa: F811
    path = program_file('104,7,99\n')
    assert collect_file(str(path)) == [104, 7, 99]


def test_collect_broken_file():
    with pytest.raises(ParseError) as e:
        unit_utils.load_program('broken')

    assert e.value.token == 'a'
