import stripe
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.integrations.contracts.payments import FIXED_AMOUNT, FIXED_CURRENCY
from src.utils.config_loader import PaymentServerConfig, load_server_config

from tests.fakes import StubProvider


def _client(tmp_path, provider, **config_kwargs):
    config = PaymentServerConfig(static_dir=tmp_path / "missing", **config_kwargs)
    return TestClient(create_app(config, payment_client=provider))


def test_public_key_returns_configured_value(client):
    response = client.get("/stripe-public-key")

    assert response.status_code == 200
    assert response.json() == {"publicKey": "pk_test_123"}


def test_public_key_unset_is_null_not_error(tmp_path):
    client = _client(tmp_path, StubProvider())

    response = client.get("/stripe-public-key")

    assert response.status_code == 200
    assert response.json() == {"publicKey": None}


def test_create_payment_intent_returns_only_client_secret(tmp_path):
    provider = StubProvider(secrets=["sk_abc_secret"])
    client = _client(tmp_path, provider)

    response = client.post("/create-payment-intent")

    assert response.status_code == 200
    assert response.json() == {"clientSecret": "sk_abc_secret"}
    assert response.text == '{"clientSecret":"sk_abc_secret"}'


def test_create_payment_intent_provider_failure_returns_500_with_message(tmp_path):
    provider = StubProvider(error=Exception("card declined"))
    client = _client(tmp_path, provider)

    response = client.post("/create-payment-intent", content=b"")

    assert response.status_code == 500
    assert response.json() == {"error": "card declined"}
    assert response.text == '{"error":"card declined"}'


def test_provider_failure_is_logged(tmp_path, caplog):
    client = _client(tmp_path, StubProvider(error=RuntimeError("network down")))

    with caplog.at_level("ERROR"):
        client.post("/create-payment-intent")

    assert any("network down" in r.getMessage() for r in caplog.records)
    assert any(r.exc_info for r in caplog.records if r.levelname == "ERROR")


def test_two_posts_create_two_distinct_intents(client, stub_provider):
    first = client.post("/create-payment-intent").json()["clientSecret"]
    second = client.post("/create-payment-intent").json()["clientSecret"]

    assert first != second
    assert len(stub_provider.calls) == 2


def test_request_body_is_ignored(client, stub_provider):
    client.post("/create-payment-intent", json={"amount": 1, "currency": "eur", "payment_method_types": ["sepa"]})
    client.post("/create-payment-intent", content=b"not json", headers={"Content-Type": "application/json"})

    assert len(stub_provider.calls) == 2
    for request in stub_provider.calls:
        assert request.amount == FIXED_AMOUNT == 1000
        assert request.currency == FIXED_CURRENCY == "usd"
        assert request.payment_method_types == ["card"]


def test_get_is_not_allowed_on_create_payment_intent(client, stub_provider):
    response = client.get("/create-payment-intent")

    assert response.status_code in (404, 405)
    assert stub_provider.calls == []


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "stripe-payment-server"}


def test_missing_secret_key_returns_stripe_error_not_a_secret(tmp_path, monkeypatch):
    def create_without_key(api_key=None, **kwargs):
        if api_key is None:
            raise stripe.AuthenticationError("No API key provided.")
        raise AssertionError("a key was sent although none is configured")

    monkeypatch.setattr(stripe.PaymentIntent, "create", create_without_key)
    config = load_server_config({"STRIPE_PUBLISHABLE_KEY": "pk_live_x", "STATIC_DIR": str(tmp_path / "missing")})
    client = TestClient(create_app(config))

    response = client.post("/create-payment-intent")

    assert client.get("/stripe-public-key").json() == {"publicKey": "pk_live_x"}
    assert response.status_code == 500
    assert response.json() == {"error": "No API key provided."}
