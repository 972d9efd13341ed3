from pathlib import Path

import pytest

from pyinix import InixDocument, InixFileParser

DATA_DIR = Path(__file__).parent / 'data'


class RecordingLogger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def custom_doc() -> InixDocument:
    return InixFileParser(str(DATA_DIR / 'custom.ini')).read()
