import copy

import pytest

from fft_paint import config
from fft_paint.canvas import Canvas


@pytest.fixture(autouse=True)
def clean_config():
    saved = copy.deepcopy(config.con_dict)
    yield
    config.con_dict.clear()
    config.con_dict.update(saved)


@pytest.fixture
def canvas():
    return Canvas.create(900, 400)
