#tests\conftest.py

"""Pytest configuration and fixtures."""

import json
from unittest.mock import Mock, patch

import pytest

from coolify_client.client.api_client import CoolifyClient
from coolify_client.client.traefik_client import TraefikClient
from coolify_client.core.config import Credentials, static_credentials


def _fake_response(body=None, status=200):
    """Build a stand-in for ``requests.Response``."""
    if body is None:
        text = ""
    elif isinstance(body, str):
        text = body
    else:
        text = json.dumps(body)

    response = Mock()
    response.status_code = status
    response.ok = 200 <= status < 300
    response.text = text
    response.json = Mock(side_effect=lambda: json.loads(text))
    return response


@pytest.fixture
def fake_response():
    """Factory for fake HTTP responses."""
    return _fake_response


@pytest.fixture
def credentials():
    return Credentials(
        server_url="https://coolify.example.com",
        api_token="test-token-123",
    )


@pytest.fixture
def client(credentials):
    return CoolifyClient(credentials=static_credentials(credentials))


@pytest.fixture
def mock_request():
    """Patch the transport used by CoolifyClient."""
    with patch("coolify_client.client.api_client.requests.request") as mocked:
        mocked.return_value = _fake_response({})
        yield mocked


@pytest.fixture
def mock_traefik_get():
    """Patch the transport used by TraefikClient."""
    with patch("coolify_client.client.traefik_client.requests.get") as mocked:
        mocked.return_value = _fake_response({"routers": {}, "services": {}})
        yield mocked


@pytest.fixture
def traefik_credentials():
    return Credentials(
        server_url="https://coolify.example.com",
        api_token="test-token-123",
        traefik_url="https://traefik.example.com",
        traefik_user="admin",
        traefik_password="secret",
    )


@pytest.fixture
def traefik(traefik_credentials):
    return TraefikClient(credentials=static_credentials(traefik_credentials))


@pytest.fixture
def sample_deployment():
    """Deployment payload as returned by Coolify."""
    return {
        "id": 1,
        "application_id": "app-abc",
        "deployment_uuid": "dep-uuid-1",
        "pull_request_id": 0,
        "force_rebuild": False,
        "commit": "abc1234567890",
        "commit_message": "fix: resolve login bug",
        "status": "finished",
        "is_webhook": False,
        "is_api": False,
        "logs": "Build completed successfully.",
        "current_process_id": None,
        "restart_only": False,
        "rollback": False,
        "git_type": None,
        "server_id": 1,
        "server_name": "prod-server",
        "application_name": "my-app",
        "deployment_url": "/deployments/dep-uuid-1",
        "destination_id": None,
        "created_at": "2025-01-15T10:00:00Z",
        "updated_at": "2025-01-15T10:05:00Z",
    }


@pytest.fixture
def sample_application():
    return {
        "id": 1,
        "uuid": "app-uuid-1",
        "name": "my-app",
        "description": "A sample application",
        "fqdn": "https://app.example.com",
        "status": "running",
        "git_repository": "https://github.com/example/app",
        "git_branch": "main",
        "build_pack": "nixpacks",
        "created_at": "2025-01-01T00:00:00Z",
        "updated_at": "2025-01-15T00:00:00Z",
    }


@pytest.fixture
def sample_server():
    return {
        "id": 1,
        "uuid": "srv-uuid-1",
        "name": "prod-server",
        "description": "Production server",
        "ip": "10.0.0.1",
        "user": "root",
        "port": 22,
        "proxy": {"type": "traefik", "status": "running"},
        "settings": {"is_reachable": True, "is_usable": True},
    }
