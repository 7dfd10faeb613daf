import logging
from typing import List
from fastapi import Depends, FastAPI, HTTPException

from .deps import Settings, get_clock, get_payment, get_settings, get_shipping
from .logic import (
    calculate_discount,
    can_drive,
    get_coupons,
    is_price_in_range,
    is_valid_username,
    validate_user_input,
)
from .models import (
    Coupon,
    DiscountRequest,
    DiscountResponse,
    MessageResponse,
    OrderRequest,
    OrderResult,
    StoreStatus,
    UserInputRequest,
)
from .ports import Clock, PaymentGateway, ShippingProvider
from .services import get_discount, get_shipping_info, is_online, submit_order

logger = logging.getLogger(__name__)

# ---------------------------
# FastAPI App & Routes
# ---------------------------

app = FastAPI(title="Rulebook Service")


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/coupons", response_model=List[Coupon])
def list_coupons():
    return get_coupons()


@app.post("/discount", response_model=DiscountResponse)
def apply_discount(payload: DiscountRequest):
    result = calculate_discount(payload.price, payload.code)
    if isinstance(result, str):
        raise HTTPException(status_code=400, detail=result)
    return DiscountResponse(price=payload.price, finalPrice=result)


@app.post("/users/validate", response_model=MessageResponse)
def validate_user(payload: UserInputRequest):
    message = validate_user_input(payload.username, payload.age)
    if message.lower().startswith("invalid"):
        raise HTTPException(status_code=400, detail=message)
    return MessageResponse(message=message)


@app.get("/price-range")
def price_range(price: float, min: float, max: float):
    return {"inRange": is_price_in_range(price, min, max)}


@app.get("/usernames/{username}")
def check_username(username: str):
    return {"valid": is_valid_username(username)}


@app.get("/can-drive")
def check_can_drive(age: int, country: str):
    result = can_drive(age, country)
    if isinstance(result, str):
        raise HTTPException(status_code=400, detail=result)
    return {"canDrive": result}


@app.get("/shipping/{destination}")
def shipping_info(destination: str, shipping: ShippingProvider = Depends(get_shipping)):
    return {"info": get_shipping_info(destination, shipping=shipping)}


@app.post("/orders", response_model=OrderResult, response_model_exclude_none=True)
async def create_order(payload: OrderRequest, payment: PaymentGateway = Depends(get_payment)):
    return await submit_order(payload.order, payload.creditCard, payment=payment)


@app.get("/store/status", response_model=StoreStatus)
def store_status(
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
):
    return StoreStatus(
        online=is_online(clock=clock, settings=settings),
        discount=get_discount(clock=clock, settings=settings),
    )


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("starting on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "rulebook.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
