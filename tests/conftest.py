"""Global test configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from coderforge.domain.base.ports.logging_port import LoggingPort
from coderforge.domain.plugin.messages import ResourceConfigureRequest
from coderforge.domain.resource.models import CloudContext
from coderforge.infrastructure.http.client import CoderForgeClient
from coderforge.providers.coderforge.resources import (
    new_container_resource,
    new_function_resource,
)
from fixtures.fake_api import FakeCloudApi

TEST_TOKEN = "test-token-abc123"


@pytest.fixture(autouse=True)
def clean_provider_environment(monkeypatch):
    """Keep the developer's CoderForge settings out of the tests."""
    for name in (
        "CODERFORGE_CLOUD_TOKEN",
        "CODERFORGE_HOST_URL",
        "CODERFORGE_CONFIG_FILE",
        "CODERFORGE_LOG_LEVEL",
        "CODERFORGE_LOG_FILE",
        "CODERFORGE_CONSOLE_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_logger():
    """Logging port double."""
    return Mock(spec=LoggingPort)


@pytest.fixture
def cloud_context() -> CloudContext:
    return CloudContext(stack_id="stack-1", cloud_space="dev", locations=("eu-1",))


@pytest.fixture
def fake_api() -> FakeCloudApi:
    return FakeCloudApi()


@pytest.fixture
def api_client(cloud_context, fake_api, mock_logger) -> CoderForgeClient:
    """Client whose HTTP session is the in-memory fake API."""
    return CoderForgeClient(
        context=cloud_context,
        token=TEST_TOKEN,
        logger=mock_logger,
        session_factory=lambda: fake_api,
    )


@pytest.fixture
def function_resource(api_client, mock_logger):
    """Configured function resource backed by the fake API."""
    resource = new_function_resource(mock_logger)
    resource.configure(ResourceConfigureRequest(provider_data=api_client))
    return resource


@pytest.fixture
def container_resource(api_client, mock_logger):
    """Configured container resource backed by the fake API."""
    resource = new_container_resource(mock_logger)
    resource.configure(ResourceConfigureRequest(provider_data=api_client))
    return resource
