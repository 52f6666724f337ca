import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_generator, get_title_fetcher, get_transcript_fetcher
from app.main import app
from app.services.llm.base import GenerationError


class FakeGenerator:
    def __init__(self, result=None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls = []

    def generate(self, request):
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return self.result


class FakeTranscripts:
    def __init__(self, by_id: dict | None = None):
        self.by_id = by_id or {}
        self.calls = []

    def fetch_transcript(self, video_id: str):
        self.calls.append(video_id)
        return self.by_id.get(video_id)


class FakeTitles:
    def __init__(self, by_id: dict | None = None):
        self.by_id = by_id or {}
        self.calls = []

    def fetch_title(self, video_id: str):
        self.calls.append(video_id)
        return self.by_id.get(video_id)


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def transcripts():
    return FakeTranscripts()


@pytest.fixture
def titles():
    return FakeTitles()


@pytest.fixture
def client(generator, transcripts, titles):
    app.dependency_overrides[get_generator] = lambda: generator
    app.dependency_overrides[get_transcript_fetcher] = lambda: transcripts
    app.dependency_overrides[get_title_fetcher] = lambda: titles
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def failing_generator(generator):
    generator.error = GenerationError("backend down")
    return generator
