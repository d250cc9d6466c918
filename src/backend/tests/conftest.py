"""Test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from pitchlab.agents import ArtifactGenerator
from pitchlab.api.projects import get_artifact_generator
from pitchlab.db import Database, get_db
from pitchlab.main import app

# Use SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeTextGenerator:
    """Scripted stand-in for the text model.

    Responses are consumed in order; an exception in the script is raised
    instead of returned. With nothing scripted every call fails, which
    drives the generator onto its fallback path.
    """

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.prompts: list[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.responses:
            raise RuntimeError("No scripted model response")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture
async def database():
    """Create a connected test database."""
    db = Database(TEST_DATABASE_URL)
    await db.connect()
    yield db
    await db.disconnect()


@pytest.fixture
def fake_oracle():
    """Text model double with no scripted responses."""
    return FakeTextGenerator()


@pytest.fixture
def generator(fake_oracle):
    """Artifact generator backed by the fake text model."""
    return ArtifactGenerator(fake_oracle)


@pytest.fixture
async def client(database, generator):
    """Create test client with database and generator overrides."""
    async def override_get_db():
        return database

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_artifact_generator] = lambda: generator

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
