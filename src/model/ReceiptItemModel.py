from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ReceiptItem:
    short_description: str
    price: Decimal

    def to_record(self) -> dict:
        return {"shortDescription": self.short_description, "price": str(self.price)}

    @classmethod
    def from_record(cls, record: dict) -> "ReceiptItem":
        return cls(
            short_description=record["shortDescription"],
            price=Decimal(record["price"]),
        )
