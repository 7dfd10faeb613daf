"""
Interfaces of the external services the rule functions talk to.

Default stand-ins live in rulebook.libs; tests pass their own fakes.
"""

from datetime import datetime
from typing import List, Optional, Protocol
from .models import ChargeResult, CreditCard, ShippingQuote


class CurrencyProvider(Protocol):
    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float: ...


class ShippingProvider(Protocol):
    def get_shipping_quote(self, destination: str) -> Optional[ShippingQuote]: ...


class Analytics(Protocol):
    def track_page_view(self, path: str) -> None: ...


class PaymentGateway(Protocol):
    async def charge(self, credit_card: CreditCard, amount: float) -> ChargeResult: ...


class Mailer(Protocol):
    def send_email(self, to: str, message: str) -> None: ...


class SecurityService(Protocol):
    def generate_code(self) -> int: ...


class Clock(Protocol):
    def now(self) -> datetime: ...


class DataSource(Protocol):
    async def fetch(self) -> List[int]: ...
