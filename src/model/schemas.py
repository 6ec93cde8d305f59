"""
Request schema for submitted receipts.

Field names follow the JSON wire format. ``id`` and ``points`` are assigned by
the server, so they are dropped if a client sends them.
"""
import json
from datetime import date, datetime, time
from decimal import Decimal
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.errors import ReceiptValidationError
from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import TIME_FORMAT, Receipt


class ReceiptItemIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    shortDescription: str
    price: Decimal = Field(..., ge=0)


class ReceiptIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    retailer: str
    purchaseDate: date
    purchaseTime: time
    items: List[ReceiptItemIn]
    total: Decimal = Field(..., ge=0)

    @field_validator("purchaseDate", mode="before")
    @classmethod
    def require_date_string(cls, value):
        if not isinstance(value, str):
            raise ValueError("purchaseDate must be a YYYY-MM-DD string")
        return value

    @field_validator("purchaseTime", mode="before")
    @classmethod
    def parse_purchase_time(cls, value):
        if not isinstance(value, str):
            raise ValueError("purchaseTime must be an HH:MM string")
        try:
            return datetime.strptime(value, TIME_FORMAT).time()
        except ValueError:
            raise ValueError("purchaseTime must be HH:MM")

    def to_model(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchaseDate,
            purchase_time=self.purchaseTime,
            items=[
                ReceiptItem(short_description=item.shortDescription, price=item.price)
                for item in self.items
            ],
            total=self.total,
        )


def parse_receipt(raw: Union[bytes, str, dict]) -> Receipt:
    """Validate a submitted receipt, raising ReceiptValidationError if it is malformed."""
    if isinstance(raw, (bytes, str)):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            raise ReceiptValidationError("Invalid Json in Body") from e
    if not isinstance(raw, dict):
        raise ReceiptValidationError("Receipt must be a JSON object")

    try:
        return ReceiptIn.model_validate(raw).to_model()
    except ValidationError as e:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
        raise ReceiptValidationError(f"The receipt is invalid: {fields}") from e
