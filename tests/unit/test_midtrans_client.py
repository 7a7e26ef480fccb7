from checkout_relay.config import MidtransConfig
from checkout_relay.payments.midtrans_client import build_snap, provider_error_details
from conftest import FakeMidtransAPIError


def test_build_snap_uses_sandbox_and_keys():
    snap = build_snap(MidtransConfig(server_key="SB-server", client_key="SB-client"))
    assert snap.api_config.is_production is False
    assert snap.api_config.server_key == "SB-server"
    assert snap.api_config.client_key == "SB-client"


def test_details_prefer_api_response():
    err = FakeMidtransAPIError("API error", {"status_code": "400", "error_messages": ["bad"]})
    assert provider_error_details(err) == {"status_code": "400", "error_messages": ["bad"]}


def test_details_fall_back_to_message_then_text():
    assert provider_error_details(FakeMidtransAPIError("API error")) == "API error"
    assert provider_error_details(ValueError("invalid signature")) == "invalid signature"
    assert provider_error_details(TimeoutError()) == "TimeoutError()"
