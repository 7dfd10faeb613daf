from .intro import calculate_average, factorial, fizz_buzz, max_of
from .logic import (
    FetchError,
    calculate_discount,
    can_drive,
    fetch_data,
    get_coupons,
    is_price_in_range,
    is_valid_username,
    validate_user_input,
)
from .services import (
    get_discount,
    get_price_in_currency,
    get_shipping_info,
    is_online,
    login,
    render_page,
    sign_up,
    submit_order,
)
from .stack import EmptyStackError, Stack
