from typing import Dict, List
from .models import Coupon

# ---------------------------
# Static catalogs
# ---------------------------

# ordered; get_coupons() hands out copies
COUPONS_DB: List[Coupon] = [
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
]

# country code -> minimum driving age
MIN_DRIVING_AGE: Dict[str, int] = {
    "US": 16,
    "UK": 17,
}
