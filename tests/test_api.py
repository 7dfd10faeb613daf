"""Tests for the HTTP routes and settings."""
from datetime import datetime
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from rulebook.config import Settings
from rulebook.deps import get_clock, get_payment, get_settings, get_shipping
from rulebook.main import app
from rulebook.models import ShippingQuote

from .fakes import FakePayment, FakeShipping, FixedClock


@pytest.fixture
def client() -> Iterator[TestClient]:
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use(provider, value) -> None:
    app.dependency_overrides[provider] = lambda: value


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_coupons(client):
    response = client.get("/coupons")
    assert response.status_code == 200
    codes = [c["code"] for c in response.json()]
    assert codes == ["SAVE10", "SAVE20"]


def test_apply_discount(client):
    response = client.post("/discount", json={"price": 10, "code": "SAVE20"})
    assert response.status_code == 200
    assert response.json() == {"price": 10, "finalPrice": 8}


def test_apply_discount_negative_price(client):
    response = client.post("/discount", json={"price": -10, "code": "SAVE10"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid price"


def test_validate_user(client):
    response = client.post("/users/validate", json={"username": "David", "age": 29})
    assert response.status_code == 200
    assert response.json() == {"message": "Validation successful"}


def test_validate_user_rejected(client):
    response = client.post("/users/validate", json={"username": "Da", "age": 12})
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid username, Invalid age"


def test_price_range(client):
    response = client.get("/price-range", params={"price": 60, "min": 60, "max": 90})
    assert response.json() == {"inRange": True}


def test_check_username(client):
    assert client.get("/usernames/Donald").json() == {"valid": True}
    assert client.get("/usernames/Dav").json() == {"valid": False}


def test_can_drive(client):
    response = client.get("/can-drive", params={"age": 16, "country": "UK"})
    assert response.status_code == 200
    assert response.json() == {"canDrive": False}


def test_can_drive_unknown_country(client):
    response = client.get("/can-drive", params={"age": 9, "country": "DE"})
    assert response.status_code == 400
    assert "Invalid" in response.json()["detail"]


def test_shipping_info(client):
    _use(get_shipping, FakeShipping(ShippingQuote(cost=50, estimatedDays=2)))

    response = client.get("/shipping/Duisburg")

    assert response.status_code == 200
    assert response.json() == {"info": "Shipping Cost: $50 (2 Days)"}


def test_shipping_unavailable(client):
    _use(get_shipping, FakeShipping(None))

    response = client.get("/shipping/Duisburg")

    assert response.json() == {"info": "Shipping Unavailable"}


ORDER_PAYLOAD = {"order": {"totalAmount": 500}, "creditCard": {"creditCardNumber": "12341234"}}


def test_create_order(client):
    payment = FakePayment("success")
    _use(get_payment, payment)

    response = client.post("/orders", json=ORDER_PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert [amount for _, amount in payment.calls] == [500]


def test_create_order_payment_failure(client):
    _use(get_payment, FakePayment("failed"))

    response = client.post("/orders", json=ORDER_PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"success": False, "error": "payment_error"}


@pytest.mark.parametrize(
    "moment, online, discount",
    [
        (datetime(2026, 1, 2, 7, 59), False, 0),
        (datetime(2026, 1, 2, 8, 0), True, 0),
        (datetime(2026, 1, 2, 20, 1), False, 0),
        (datetime(2025, 12, 25, 12, 0), True, 0.2),
    ],
)
def test_store_status(client, moment, online, discount):
    _use(get_clock, FixedClock(moment))
    _use(get_settings, Settings())

    response = client.get("/store/status")

    assert response.status_code == 200
    assert response.json() == {"online": online, "discount": discount}


def test_store_status_uses_configured_hours(client):
    _use(get_clock, FixedClock(datetime(2026, 1, 2, 7, 0)))
    _use(get_settings, Settings(opening_hour=6, closing_hour=9))

    response = client.get("/store/status")

    assert response.json()["online"] is True


# ---------------------------
# Settings
# ---------------------------

def test_settings_defaults():
    settings = Settings()
    assert settings.port == 8000
    assert (settings.opening_hour, settings.closing_hour) == (8, 20)
    assert settings.holiday_discount == 0.2


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("RULEBOOK_HOST", "0.0.0.0")
    monkeypatch.setenv("RULEBOOK_PORT", "9000")
    monkeypatch.setenv("RULEBOOK_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.host == "0.0.0.0"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_settings_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("RULEBOOK_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        Settings.from_env()
