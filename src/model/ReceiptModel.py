from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import List, Optional

from src.model.ReceiptItemModel import ReceiptItem

TIME_FORMAT = "%H:%M"


def canonical_amount(amount: Decimal) -> str:
    """Exact plain-notation amount without trailing zeros, so 9.0 and 9.00 match."""
    text = format(amount, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass
class Receipt:
    retailer: str
    purchase_date: Optional[date]
    purchase_time: Optional[time]
    items: List[ReceiptItem]
    total: Decimal
    id: str = ""
    points: int = 0

    def duplicate_key(self) -> str:
        """
        Key shared by receipts that count as the same purchase: trimmed
        retailer, date, time and total. Items and id take no part in it.
        """
        purchase_date = self.purchase_date.isoformat() if self.purchase_date else ""
        purchase_time = self.purchase_time.strftime(TIME_FORMAT) if self.purchase_time else ""
        return "dup:{}+{}+{}+{}".format(
            self.retailer.strip(), purchase_date, purchase_time, canonical_amount(self.total)
        )

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "retailer": self.retailer,
            "purchaseDate": self.purchase_date.isoformat() if self.purchase_date else None,
            "purchaseTime": self.purchase_time.strftime(TIME_FORMAT) if self.purchase_time else None,
            "items": [item.to_record() for item in self.items],
            "points": self.points,
            "total": str(self.total),
        }

    @classmethod
    def from_record(cls, record: dict) -> "Receipt":
        purchase_date = record.get("purchaseDate")
        purchase_time = record.get("purchaseTime")
        return cls(
            id=record["id"],
            retailer=record["retailer"],
            purchase_date=date.fromisoformat(purchase_date) if purchase_date else None,
            purchase_time=time.fromisoformat(purchase_time) if purchase_time else None,
            items=[ReceiptItem.from_record(item) for item in record["items"]],
            points=record["points"],
            total=Decimal(record["total"]),
        )
