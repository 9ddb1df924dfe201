# type: ignore
import pytest

import unit_utils


@pytest.fixture
def compare8():
    yield unit_utils.load_program('compare8')


@pytest.fixture
def nounverb():
    yield unit_utils.load_program('nounverb')


@pytest.fixture
def program_file(tmp_path):
    def write(source: str):
        path = tmp_path / 'program.txt'
        path.write_text(source)
        return path

    yield write
