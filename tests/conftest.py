"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient


WHISPER_CSV = """start,end,text
1000,3000, Hello there.
3500,5000,How are you?
6000,8000,Fine thanks.
9000,9500,Anyone else?
"""

PREMIERE_CSV = """Speaker Name,Start Time,End Time,Text
Alice,00;00;00;00,00;00;05;15,Hello there. How are you?
Bob,00;00;05;15,00;00;08;29,Fine thanks.
"""


@pytest.fixture
def whisper_csv():
    return WHISPER_CSV


@pytest.fixture
def premiere_csv():
    return PREMIERE_CSV


@pytest.fixture
def app():
    """FastAPI app with default configuration."""
    from whisper_diary.api.app import create_app
    
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def upload(whisper_csv, premiere_csv):
    """Build the multipart ``files`` argument for the merge endpoint."""
    def _upload(whisper=whisper_csv, premiere=premiere_csv, whisper_name="whisper.csv", premiere_name="premiere.csv"):
        def encode(content):
            return content.encode("utf-8") if isinstance(content, str) else content
        return {
            "whisper": (whisper_name, encode(whisper), "text/csv"),
            "premiere": (premiere_name, encode(premiere), "text/csv"),
        }
    return _upload
