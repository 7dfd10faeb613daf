"""
Stand-in implementations of the external services in rulebook.ports.

They only log what a real integration would do and return plausible
values, so the service functions work out of the box.
"""

import logging
import random
import re
from datetime import datetime
from typing import List, Optional
from .models import ChargeResult, CreditCard, ShippingQuote

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_valid_email(email: str) -> bool:
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None


class RandomCurrencyProvider:
    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        rate = round(random.uniform(0.5, 2.0), 4)
        logger.info("exchange rate %s -> %s: %s", from_currency, to_currency, rate)
        return rate


class FlatRateShipping:
    def get_shipping_quote(self, destination: str) -> Optional[ShippingQuote]:
        logger.info("quoting shipping to %s", destination)
        return ShippingQuote(cost=round(random.uniform(5, 100)), estimatedDays=2)


class LoggingAnalytics:
    def track_page_view(self, path: str) -> None:
        logger.info("page view: %s", path)


class AlwaysApprovePayments:
    async def charge(self, credit_card: CreditCard, amount: float) -> ChargeResult:
        logger.info("charging %s to card ending %s", amount, credit_card.creditCardNumber[-4:])
        return ChargeResult(status="success")


class LoggingMailer:
    def send_email(self, to: str, message: str) -> None:
        logger.info("sending email to %s: %s", to, message)


class RandomSecurity:
    def generate_code(self) -> int:
        return random.randint(100000, 999999)


class SystemClock:
    def now(self) -> datetime:
        # naive local time
        return datetime.now()


class StaticDataSource:
    def __init__(self, values: Optional[List[int]] = None):
        self.values = values if values is not None else [1, 2, 3]

    async def fetch(self) -> List[int]:
        return list(self.values)


# shared default instances
currency = RandomCurrencyProvider()
shipping = FlatRateShipping()
analytics = LoggingAnalytics()
payment = AlwaysApprovePayments()
mailer = LoggingMailer()
security = RandomSecurity()
clock = SystemClock()
data_source = StaticDataSource()
