from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.core.enums import PaymentMethod


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SmsPurchaseRequest(_CamelModel):
    amount: int
    payment_method: PaymentMethod
    transaction_id: Optional[str] = None
    phone_number: Optional[str] = None


class ApprovePurchaseRequest(_CamelModel):
    approved_by: Optional[str] = None


class BalanceUpdateRequest(_CamelModel):
    used_sms: int


class SmsPricing(_CamelModel):
    price_per_sms: float
    currency: str
    online_charge_percent: float
    min_purchase: int
    max_purchase: int
