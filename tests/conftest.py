import pytest

from app import create_app
from tests.fakes import FakeGeminiClient, FakeImageFetcher


@pytest.fixture
def image_fetcher():
    return FakeImageFetcher()


@pytest.fixture
def gemini_client():
    return FakeGeminiClient()


@pytest.fixture
def app(image_fetcher, gemini_client):
    return create_app('config.TestConfig', gemini_client=gemini_client, image_fetcher=image_fetcher)


@pytest.fixture
def client(app):
    return app.test_client()
