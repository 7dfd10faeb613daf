import logging
import math
from numbers import Real
from typing import Any, List, Optional, Union
from .libs import data_source
from .models import Coupon
from .ports import DataSource
from .storage import COUPONS_DB, MIN_DRIVING_AGE

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 15


class FetchError(Exception):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a price or an age; NaN fails every bound
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    return not math.isnan(value)


def get_coupons() -> List[Coupon]:
    return list(COUPONS_DB)


def find_coupon(code: str) -> Optional[Coupon]:
    for coupon in COUPONS_DB:
        if coupon.code == code:
            return coupon
    return None


def calculate_discount(price: Any, code: Any) -> Union[float, str]:
    """
    Apply a catalog coupon to a price.

    Returns the discounted price, the untouched price when the code is
    unknown, or an "Invalid ..." message for bad input.
    """
    if not _is_number(price) or price < 0:
        return "Invalid price"

    if not isinstance(code, str):
        return "Invalid discount code"

    coupon = find_coupon(code)
    if coupon is None:
        return price

    return price * (1 - coupon.discount)


def validate_user_input(username: Any, age: Any) -> str:
    errors: List[str] = []

    if not isinstance(username, str) or len(username) < 3 or len(username) > 255:
        errors.append("Invalid username")

    if not _is_number(age) or age < 18 or age > 100:
        errors.append("Invalid age")

    if errors:
        return ", ".join(errors)

    return "Validation successful"


def is_price_in_range(price: Any, min_price: Any, max_price: Any) -> bool:
    if not all(_is_number(v) for v in (price, min_price, max_price)):
        return False
    return min_price <= price <= max_price


def is_valid_username(username: Any) -> bool:
    if not isinstance(username, str):
        return False
    return USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH


def can_drive(age: Any, country_code: str) -> Union[bool, str]:
    min_age = MIN_DRIVING_AGE.get(country_code)
    if min_age is None:
        return "Invalid country code"
    if not _is_number(age):
        return "Invalid age"
    return age >= min_age


async def fetch_data(source: Optional[DataSource] = None) -> List[int]:
    if source is None:
        source = data_source

    try:
        return await source.fetch()
    except OSError as exc:
        # ConnectionError and TimeoutError are OSError subclasses
        logger.warning("data fetch failed: %s", exc)
        raise FetchError("Network error") from exc
