import logging

import pytest


def setup_logging(level=logging.DEBUG, use_file: bool = False):
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    handlers = [console_handler]

    if use_file:
        file_handler = logging.FileHandler('tests.log')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers)


setup_logging(logging.WARN)


@pytest.fixture(autouse=True)
def fail_on_error_log(caplog):
    yield

    records = caplog.get_records('call')
    errors = [record.message for record in records if record.levelno >= logging.ERROR]
    assert not errors


class FinalizeSpy:
    def __init__(self):
        self.calls = []

    def __call__(self, instance):
        self.calls.append(instance)

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def finalize_spy():
    return FinalizeSpy()
