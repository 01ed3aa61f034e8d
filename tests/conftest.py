import pytest

from sample_frames import RED_BLUE, build_frame


@pytest.fixture
def make_frame():
    return build_frame


@pytest.fixture
def two_frames():
    return [build_frame(RED_BLUE), build_frame(RED_BLUE)]
