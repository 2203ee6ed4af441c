from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_session():
    """Authorized HTTP session returning an empty aggregate response"""
    session = MagicMock()
    session.post.return_value.json.return_value = {"bucket": []}
    return session


@pytest.fixture
def fake_credential_provider(mock_session):
    """Credential provider that never opens a browser or touches disk"""
    provider = MagicMock()
    provider.get_authorized_session.return_value = mock_session
    return provider


@pytest.fixture
def client_secret_file(tmp_path, monkeypatch):
    """Valid client secret path exported as GOOGLE_CLIENT_SECRET, run from tmp_path"""
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "client_secret.json"
    path.write_text('{"installed": {"client_id": "id", "client_secret": "secret"}}')
    monkeypatch.setenv("GOOGLE_CLIENT_SECRET", str(path))
    return path
