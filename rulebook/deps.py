"""
FastAPI dependency providers.

Routes take their collaborators through these so tests can swap them
with app.dependency_overrides.
"""

from . import libs
from .config import Settings, get_settings
from .ports import Clock, PaymentGateway, ShippingProvider

__all__ = ["Settings", "get_settings", "get_clock", "get_shipping", "get_payment"]


def get_clock() -> Clock:
    return libs.clock


def get_shipping() -> ShippingProvider:
    return libs.shipping


def get_payment() -> PaymentGateway:
    return libs.payment
