"""
Receipt persistence on top of a key-value backend.

Two kinds of keys are written per receipt:

- ``receipt:<id>`` holds the JSON record of the scored receipt.
- the receipt's duplicate key maps to its id and is written after the record,
  so a duplicate hit always points at a readable record.
"""
import dataclasses
import json
import logging
import uuid
from typing import Callable

from src.errors import (
    CorruptRecordError,
    DuplicateReceiptError,
    IdentifierExhaustedError,
    ReceiptNotFoundError,
)
from src.model.ReceiptModel import Receipt
from src.scoring.points import score_breakdown
from src.store.backend import KeyValueBackend

logger = logging.getLogger(__name__)

RECEIPT_KEY_PREFIX = "receipt:"
MAX_ID_ATTEMPTS = 3


def receipt_key(receipt_id: str) -> str:
    return RECEIPT_KEY_PREFIX + receipt_id


def new_receipt_id() -> str:
    return str(uuid.uuid4())


class ReceiptStore:
    def __init__(
        self,
        backend: KeyValueBackend,
        id_factory: Callable[[], str] = new_receipt_id,
        max_id_attempts: int = MAX_ID_ATTEMPTS,
    ):
        self.backend = backend
        self.id_factory = id_factory
        self.max_id_attempts = max_id_attempts

    def create_receipt(self, receipt: Receipt) -> str:
        """
        Score and store a receipt, returning the id assigned to it.

        Raises DuplicateReceiptError if a receipt with the same duplicate key
        exists, and IdentifierExhaustedError if every candidate id collides.
        Nothing is written in either case.
        """
        duplicate_key = receipt.duplicate_key()

        with self.backend.transaction() as tx:
            if tx.exists(duplicate_key):
                logger.info("Rejected duplicate receipt for %s", receipt.retailer.strip())
                raise DuplicateReceiptError()

            receipt_id = self._generate_id(tx)

            breakdown = score_breakdown(receipt)
            logger.debug("Points breakdown for %s: %s", receipt_id, breakdown)
            stored = dataclasses.replace(receipt, id=receipt_id, points=sum(breakdown.values()))

            tx.set(receipt_key(receipt_id), json.dumps(stored.to_record()))
            tx.set(duplicate_key, receipt_id)

        logger.info("Stored receipt %s with %d points", receipt_id, stored.points)
        return receipt_id

    def _generate_id(self, tx: KeyValueBackend) -> str:
        for attempt in range(1, self.max_id_attempts + 1):
            candidate = self.id_factory()
            if not tx.exists(receipt_key(candidate)):
                return candidate
            logger.warning("Receipt id collision on attempt %d", attempt)

        logger.error("Could not create a receipt id after %d attempts", self.max_id_attempts)
        raise IdentifierExhaustedError()

    def _load_record(self, receipt_id: str) -> dict:
        raw = self.backend.get(receipt_key(receipt_id))
        if raw is None:
            raise ReceiptNotFoundError()
        try:
            record = json.loads(raw)
        except ValueError as e:
            logger.error("Stored receipt %s is not valid JSON: %s", receipt_id, e)
            raise CorruptRecordError() from e
        if not isinstance(record, dict):
            logger.error("Stored receipt %s is not a JSON object", receipt_id)
            raise CorruptRecordError()
        return record

    def get_points(self, receipt_id: str) -> int:
        record = self._load_record(receipt_id)
        points = record.get("points")
        if not isinstance(points, int) or isinstance(points, bool):
            logger.error("Stored receipt %s has no integer points", receipt_id)
            raise CorruptRecordError()
        return points

    def get_receipt(self, receipt_id: str) -> Receipt:
        record = self._load_record(receipt_id)
        try:
            return Receipt.from_record(record)
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            logger.error("Stored receipt %s could not be decoded: %s", receipt_id, e)
            raise CorruptRecordError() from e
