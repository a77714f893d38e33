"""End-to-end lifecycle through the provider, driven the way the host drives it."""

from unittest.mock import patch

import pytest

from coderforge.domain.plugin.messages import (
    ConfigureRequest,
    CreateRequest,
    DeleteRequest,
    ReadRequest,
    ResourceConfigureRequest,
    UpdateRequest,
)
from coderforge.infrastructure.http.client import CoderForgeClient
from coderforge.providers.coderforge import new_provider


@pytest.fixture
def configured_resources(fake_api):
    """Resources configured from a provider whose client talks to the fake API."""
    provider = new_provider("test")()
    configured = provider.configure(
        ConfigureRequest(config={"token": "lifecycle-token", "cloud_space": "dev"})
    )
    assert not configured.diagnostics.has_error()

    resources = {}
    for factory in provider.resources():
        resource = factory()
        resource.configure(ResourceConfigureRequest(provider_data=configured.resource_data))
        resources[resource.metadata(provider.metadata().type_name).type_name] = resource

    with patch.object(CoderForgeClient, "_session", lambda self: fake_api):
        yield resources


@pytest.mark.integration
class TestProviderLifecycle:
    """Create, read, update and delete through configured resources."""

    def test_function_lifecycle(self, configured_resources, fake_api):
        function = configured_resources["coderforge_function"]
        plan = {
            "id": None,
            "function_name": "f1",
            "last_updated": None,
            "code": {"package_type": "Image", "image_uri": "img"},
            "timeout": None,
            "max_ram_size": None,
        }

        created = function.create(CreateRequest(plan=plan)).state
        assert created["id"] == "r-123"
        assert fake_api.last_request.headers["Authorization"] == "Bearer lifecycle-token"

        read = function.read(ReadRequest(state=created)).state
        assert read["function_name"] == "f1"

        updated = function.update(UpdateRequest(plan={**plan, "timeout": 15}, state=read)).state
        assert updated["id"] == "r-123"
        assert updated["timeout"] == 15

        assert not function.delete(DeleteRequest(state=updated)).diagnostics.has_error()
        assert function.read(ReadRequest(state=updated)).state is None

    def test_resources_share_one_client(self, configured_resources, fake_api):
        function = configured_resources["coderforge_function"]
        container = configured_resources["coderforge_container"]

        assert function._client is container._client

        container.create(
            CreateRequest(
                plan={
                    "id": None,
                    "last_updated": None,
                    "name": "c1",
                    "image_uri": "img",
                    "runtime": "python3.12",
                    "timeout": None,
                    "max_ram_size": None,
                }
            )
        )
        assert fake_api.items["r-123"]["type"] == "container"
