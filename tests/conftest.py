import pytest
from typing import Any, Dict, Generator, List, Optional
from fastapi.testclient import TestClient

from checkout_relay.app_setup.factory import create_app
from checkout_relay.config import MidtransConfig

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "tests/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class FakeSnap:
    """Double du client Snap: enregistre chaque payload, renvoie une réponse fixe ou lève `error`."""

    def __init__(self, response: Optional[Dict[str, Any]] = None, error: Optional[BaseException] = None):
        self.response = response if response is not None else {"token": "T1", "redirect_url": "U1"}
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def create_transaction(self, parameter: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(parameter)
        if self.error is not None:
            raise self.error
        return self.response


class FakeMidtransAPIError(Exception):
    """Même forme que midtransclient.error_midtrans.MidtransAPIError."""

    def __init__(self, message, api_response_dict=None, http_status_code=None):
        super().__init__(message)
        self.message = message
        self.api_response_dict = api_response_dict
        self.http_status_code = http_status_code


@pytest.fixture(autouse=True)
def _permissive_startup(monkeypatch):
    # Indépendant de APP_ENV / MIDTRANS_STRICT_CONFIG de la machine de test
    monkeypatch.setattr("checkout_relay.config.STRICT_CONFIG", False)


@pytest.fixture
def midtrans_config() -> MidtransConfig:
    return MidtransConfig(
        server_key="SB-Mid-server-abcdefghijklmnop",
        client_key="SB-Mid-client-abcdefghijklmnop",
        is_production=False,
        environment="test",
    )


@pytest.fixture
def fake_snap() -> FakeSnap:
    return FakeSnap()


@pytest.fixture
def app(midtrans_config, fake_snap):
    return create_app(config=midtrans_config, provider=fake_snap)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
