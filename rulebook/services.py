"""
Business functions that orchestrate the external services.

Every collaborator is a keyword argument defaulting to the stand-ins in
rulebook.libs, so callers and tests can swap any of them out.
"""

import logging
from typing import Optional
from . import libs
from .config import Settings, get_settings
from .models import CreditCard, Order, OrderResult
from .ports import (
    Analytics,
    Clock,
    CurrencyProvider,
    Mailer,
    PaymentGateway,
    SecurityService,
    ShippingProvider,
)

logger = logging.getLogger(__name__)

HOME_PAGE = "/home"
WELCOME_MESSAGE = "Welcome aboard!"


def _format_amount(amount: float) -> str:
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"


def get_price_in_currency(
    price: float,
    currency_code: str,
    *,
    currency: CurrencyProvider = libs.currency,
) -> float:
    rate = currency.get_exchange_rate("USD", currency_code)
    return price * rate


def get_shipping_info(destination: str, *, shipping: ShippingProvider = libs.shipping) -> str:
    quote = shipping.get_shipping_quote(destination)
    if not quote:
        return "Shipping Unavailable"
    return f"Shipping Cost: ${_format_amount(quote.cost)} ({quote.estimatedDays} Days)"


async def render_page(*, analytics: Analytics = libs.analytics) -> str:
    analytics.track_page_view(HOME_PAGE)
    return "<div>content</div>"


async def submit_order(
    order: Order,
    credit_card: CreditCard,
    *,
    payment: PaymentGateway = libs.payment,
) -> OrderResult:
    result = await payment.charge(credit_card, order.totalAmount)

    if result.status != "success":
        logger.warning("payment failed for amount %s: status=%s", order.totalAmount, result.status)
        return OrderResult(success=False, error="payment_error")

    logger.info("order of %s charged", order.totalAmount)
    return OrderResult(success=True)


async def sign_up(email: str, *, mailer: Mailer = libs.mailer) -> bool:
    if not libs.is_valid_email(email):
        logger.warning("rejected sign-up with invalid email %r", email)
        return False

    mailer.send_email(email, WELCOME_MESSAGE)
    return True


async def login(
    email: str,
    *,
    security: SecurityService = libs.security,
    mailer: Mailer = libs.mailer,
) -> None:
    code = security.generate_code()
    mailer.send_email(email, str(code))


def is_online(*, clock: Clock = libs.clock, settings: Optional[Settings] = None) -> bool:
    if settings is None:
        settings = get_settings()
    hour = clock.now().hour
    return settings.opening_hour <= hour < settings.closing_hour


def get_discount(*, clock: Clock = libs.clock, settings: Optional[Settings] = None) -> float:
    if settings is None:
        settings = get_settings()
    today = clock.now()
    # Christmas day, any year
    if today.month == 12 and today.day == 25:
        return settings.holiday_discount
    return 0
