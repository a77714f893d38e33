"""Unit tests for the CoderForge.org HTTP client."""

import json
import threading

import pytest

from coderforge.config.schemas.client_schema import DEFAULT_API_PATH, ClientConfig
from coderforge.domain.base.exceptions import (
    ApiStatusError,
    ConfigurationError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
)
from coderforge.domain.resource.lookup import Found, NotFound
from coderforge.domain.resource.models import CloudContext, Code, ResourceItem, ResourceKind
from coderforge.infrastructure.http.client import CONTEXT_HEADER, CoderForgeClient
from fixtures.fake_api import FakeCloudApi


def _function_item(**kwargs) -> ResourceItem:
    return ResourceItem(
        type=ResourceKind.FUNCTION,
        name="f1",
        code=Code(package_type="Image", image_uri="registry/f1:latest"),
        **kwargs,
    )


@pytest.mark.unit
class TestClientConstruction:
    """Test client construction and configuration."""

    def test_empty_token_rejected(self, cloud_context):
        with pytest.raises(ConfigurationError):
            CoderForgeClient(context=cloud_context, token="")

    def test_empty_cloud_space_rejected(self):
        with pytest.raises(ConfigurationError):
            CoderForgeClient(context=CloudContext(cloud_space=""), token="t")

    def test_defaults(self, cloud_context):
        client = CoderForgeClient(context=cloud_context, token="t")

        assert client.host_url == "http://localhost:8073"
        assert client.timeout == 10.0
        assert client.context is cloud_context

    def test_from_config(self, cloud_context):
        config = ClientConfig(host_url="https://api.coderforge.org/", timeout_seconds=3)

        client = CoderForgeClient.from_config(cloud_context, "t", config)

        assert client.host_url == "https://api.coderforge.org"
        assert client.timeout == 3

    def test_repr_hides_token(self, api_client):
        assert "test-token" not in repr(api_client)
        assert "dev" in repr(api_client)


@pytest.mark.unit
class TestRequestEnvelope:
    """Test what every request carries."""

    def test_headers_and_timeout(self, api_client, fake_api):
        api_client.create_resource(_function_item())

        request = fake_api.last_request
        assert request.headers["Authorization"] == "Bearer test-token-abc123"
        assert json.loads(request.headers[CONTEXT_HEADER]) == {"userId": "u00001"}
        assert request.headers["Content-Type"] == "application/json"
        assert request.timeout == 10.0

    def test_custom_identity_header(self, cloud_context, fake_api):
        client = CoderForgeClient(
            context=cloud_context,
            token="t",
            identity={"userId": "u00042"},
            session_factory=lambda: fake_api,
        )

        client.create_resource(_function_item())

        assert json.loads(fake_api.last_request.headers[CONTEXT_HEADER]) == {"userId": "u00042"}

    def test_create_posts_context_envelope(self, api_client, fake_api):
        api_client.create_resource(_function_item(timeout=30))

        request = fake_api.last_request
        assert request.method == "POST"
        assert request.url == "http://localhost:8073" + DEFAULT_API_PATH
        assert request.body["stackId"] == "stack-1"
        assert request.body["cloudSpace"] == "dev"
        assert request.body["locations"] == ["eu-1"]
        assert request.body["resourceItems"] == [
            {
                "type": "function",
                "name": "f1",
                "code": {"packageType": "Image", "imageUri": "registry/f1:latest"},
                "timeout": 30,
                "maxRamSize": "",
            }
        ]

    def test_responses_are_closed(self, api_client, fake_api):
        api_client.create_resource(_function_item())

        assert all(response.closed for response in fake_api.responses)

    def test_close_failure_is_only_logged(self, api_client, fake_api, mock_logger):
        fake_api.fail_on_close = True

        created = api_client.create_resource(_function_item())

        assert created.id == "r-123"
        mock_logger.warning.assert_called_once()

    def test_session_per_thread(self, cloud_context):
        sessions = []

        def factory():
            api = FakeCloudApi()
            sessions.append(api)
            return api

        client = CoderForgeClient(context=cloud_context, token="t", session_factory=factory)
        client.get_resource("r-1")
        client.get_resource("r-2")
        worker = threading.Thread(target=client.get_resource, args=("r-3",))
        worker.start()
        worker.join()

        assert len(sessions) == 2
        assert len(sessions[0].calls) == 2
        assert len(sessions[1].calls) == 1


@pytest.mark.unit
class TestCreateResource:
    """Test resource creation."""

    def test_returns_item_with_server_id(self, api_client, mock_logger):
        created = api_client.create_resource(_function_item())

        assert created.id == "r-123"
        assert created.name == "f1"
        mock_logger.info.assert_called()

    def test_rejects_preset_id(self, api_client, fake_api):
        with pytest.raises(ValidationError):
            api_client.create_resource(_function_item(id="r-9"))

        assert fake_api.calls == []

    def test_non_2xx_raises_status_error(self, api_client, fake_api):
        fake_api.fail_next(500, "boom")

        with pytest.raises(ApiStatusError) as exc_info:
            api_client.create_resource(_function_item())

        assert exc_info.value.status_code == 500
        assert exc_info.value.body == "boom"
        assert "status: 500" in str(exc_info.value)
        assert "boom" in str(exc_info.value)

    def test_any_2xx_is_success(self, api_client, fake_api):
        fake_api.reply_next(201, b'{"resourceItems": [{"id": "r-7", "type": "function"}]}')

        assert api_client.create_resource(_function_item()).id == "r-7"

    def test_transport_failure(self, api_client, fake_api):
        fake_api.raise_next()

        with pytest.raises(TransportError) as exc_info:
            api_client.create_resource(_function_item())

        assert exc_info.value.method == "POST"
        assert exc_info.value.url.endswith(DEFAULT_API_PATH)

    def test_undecodable_body(self, api_client, fake_api):
        fake_api.reply_next(200, b"<html>gateway</html>")

        with pytest.raises(ResponseDecodeError) as exc_info:
            api_client.create_resource(_function_item())

        assert exc_info.value.details["body"] == "<html>gateway</html>"

    def test_response_without_items(self, api_client, fake_api):
        fake_api.reply_next(200, b'{"resourceItems": null}')

        with pytest.raises(ResponseDecodeError):
            api_client.create_resource(_function_item())

    def test_response_item_without_id(self, api_client, fake_api):
        fake_api.reply_next(200, b'{"resourceItems": [{"type": "function"}]}')

        with pytest.raises(ResponseDecodeError):
            api_client.create_resource(_function_item())


@pytest.mark.unit
class TestGetResource:
    """Test resource lookup."""

    def test_found(self, api_client, fake_api):
        created = api_client.create_resource(_function_item())

        lookup = api_client.get_resource(created.id)

        assert isinstance(lookup, Found)
        assert lookup.item.name == "f1"
        assert fake_api.last_request.method == "GET"
        assert fake_api.last_request.params == {"resourceId": "r-123", "cloudSpace": "dev"}
        assert fake_api.last_request.body is None

    def test_item_without_kind_is_found(self, api_client, fake_api):
        fake_api.reply_next(200, b'{"resourceItems": [{"id": "r-1", "name": "f1"}]}')

        lookup = api_client.get_resource("r-1")

        assert isinstance(lookup, Found)
        assert lookup.item.name == "f1"

    def test_empty_response_is_not_found(self, api_client):
        lookup = api_client.get_resource("r-404")

        assert lookup == NotFound("r-404")

    def test_404_is_not_found(self, api_client, fake_api):
        fake_api.not_found_status = 404

        assert isinstance(api_client.get_resource("r-404"), NotFound)

    def test_other_status_raises(self, api_client, fake_api):
        fake_api.fail_next(503, "unavailable")

        with pytest.raises(ApiStatusError) as exc_info:
            api_client.get_resource("r-1")

        assert exc_info.value.status_code == 503

    def test_requires_id(self, api_client):
        with pytest.raises(ValidationError):
            api_client.get_resource("")


@pytest.mark.unit
class TestUpdateResource:
    """Test resource replacement."""

    def test_put_replaces_item(self, api_client, fake_api):
        created = api_client.create_resource(_function_item())

        updated = api_client.update_resource(_function_item(id=created.id, timeout=60))

        assert updated.id == "r-123"
        assert updated.timeout == 60
        assert fake_api.last_request.method == "PUT"
        assert fake_api.items["r-123"]["timeout"] == 60

    def test_requires_id(self, api_client):
        with pytest.raises(ValidationError):
            api_client.update_resource(_function_item())

    def test_unknown_resource(self, api_client):
        with pytest.raises(ApiStatusError) as exc_info:
            api_client.update_resource(_function_item(id="r-missing"))

        assert exc_info.value.status_code == 404

    def test_response_without_items(self, api_client, fake_api):
        fake_api.reply_next(200, b"{}")

        with pytest.raises(ResponseDecodeError):
            api_client.update_resource(_function_item(id="r-1"))


@pytest.mark.unit
class TestDeleteResource:
    """Test resource deletion."""

    def test_delete_sends_id_and_context(self, api_client, fake_api):
        created = api_client.create_resource(_function_item())

        api_client.delete_resource(created.id)

        request = fake_api.last_request
        assert request.method == "DELETE"
        assert request.params == {"resourceId": "r-123"}
        assert request.body["cloudSpace"] == "dev"
        assert request.body["resourceItems"] == []
        assert "r-123" not in fake_api.items

    def test_empty_body_is_success(self, api_client, fake_api):
        fake_api.reply_next(204, b"")

        api_client.delete_resource("r-1")

    def test_envelope_body_is_accepted(self, api_client, fake_api):
        fake_api.reply_next(200, b'{"cloudSpace": "dev", "resourceItems": null}')

        api_client.delete_resource("r-1")

    def test_invalid_body(self, api_client, fake_api):
        fake_api.reply_next(200, b"not json")

        with pytest.raises(ResponseDecodeError):
            api_client.delete_resource("r-1")

    def test_non_2xx(self, api_client, fake_api):
        fake_api.fail_next(403, "forbidden")

        with pytest.raises(ApiStatusError) as exc_info:
            api_client.delete_resource("r-1")

        assert exc_info.value.body == "forbidden"

    def test_requires_id(self, api_client):
        with pytest.raises(ValidationError):
            api_client.delete_resource("")
