import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.platform_registry import PlatformRegistry
from app.services.prompt_service import PromptService

from fakes import FakeCompletionClient, FakeMediaClient


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def settings(upload_dir):
    s = Settings()
    s.UPLOAD_DIR = str(upload_dir)
    s.STATIC_DIR = None
    s.PLATFORM_TEMPLATES_FILE = None
    s.LOG_FILE = None
    s.MAX_UPLOAD_BYTES = 10 * 1024 * 1024
    return s


@pytest.fixture
def registry():
    return PlatformRegistry()


@pytest.fixture
def completion_client():
    return FakeCompletionClient()


@pytest.fixture
def media_client():
    return FakeMediaClient()


@pytest.fixture
def service(registry, completion_client, media_client, upload_dir):
    return PromptService(
        registry=registry,
        completion_client=completion_client,
        media_client=media_client,
        temp_dir=str(upload_dir),
    )


@pytest.fixture
def client(settings, completion_client, media_client):
    app = create_app(
        settings=settings,
        completion_client=completion_client,
        media_client=media_client,
    )
    return TestClient(app)
