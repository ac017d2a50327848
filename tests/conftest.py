import logging

import pytest


@pytest.fixture
def logger():
    """A quiet logger that still propagates to caplog"""
    lg = logging.getLogger("intsort.test")
    lg.setLevel(logging.DEBUG)
    return lg


@pytest.fixture
def sample_input(tmp_path):
    """The canonical four-line sample: two valid lists, a blank and a bad line"""
    path = tmp_path / "input.txt"
    path.write_text("5 3 1 4 2\n\n2 2 1\nbad line\n", encoding="utf-8")
    return path
