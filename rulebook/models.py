from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# ---------------------------
# Domain Models
# ---------------------------

class Coupon(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    discount: float = Field(gt=0, lt=1)  # fraction taken off the price


class ShippingQuote(BaseModel):
    cost: float
    estimatedDays: int


class Order(BaseModel):
    totalAmount: float


class CreditCard(BaseModel):
    creditCardNumber: str


class ChargeResult(BaseModel):
    status: str  # "success" or "failed"


class OrderResult(BaseModel):
    success: bool
    error: Optional[str] = None


# ---------------------------
# Request / Response Bodies
# ---------------------------

class DiscountRequest(BaseModel):
    price: float
    code: str


class DiscountResponse(BaseModel):
    price: float
    finalPrice: float


class UserInputRequest(BaseModel):
    username: str
    age: int


class MessageResponse(BaseModel):
    message: str


class OrderRequest(BaseModel):
    order: Order
    creditCard: CreditCard


class StoreStatus(BaseModel):
    online: bool
    discount: float
