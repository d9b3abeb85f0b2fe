from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from app.crm.modules.customers.models import Customer
from app.crm.modules.customers.store import CustomerStore

logger = logging.getLogger(__name__)


class CustomerError(ValueError):
    """Rejected request. Surfaced to API callers as a client error with `message`."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CustomerValidationError(CustomerError):
    def __init__(self, errors: list[ValidationError]):
        super().__init__("; ".join(e.message for e in errors))
        self.errors = errors


class CustomerNotFound(CustomerError):
    pass


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


def _clean(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


def validate_customer_payload(payload: dict[str, Any]) -> list[ValidationError]:
    errs: list[ValidationError] = []
    if not _clean(payload.get("name")):
        errs.append(ValidationError("name", "Name is required."))
    if not _clean(payload.get("email")):
        errs.append(ValidationError("email", "Email is required."))
    return errs


def create_customer(store: CustomerStore, payload: dict[str, Any]) -> Customer:
    errs = validate_customer_payload(payload)
    if errs:
        logger.warning("customer.create rejected: %s", ", ".join(e.field for e in errs))
        raise CustomerValidationError(errs)
    c = store.add(_clean(payload["name"]), _clean(payload["email"]))
    logger.info("customer.create id=%s", c.id)
    return c


def list_customers(store: CustomerStore) -> list[Customer]:
    return store.all()


def delete_customer(store: CustomerStore, customer_id: str | None) -> None:
    cid = _clean(customer_id)
    if not cid or not store.remove(cid):
        logger.warning("customer.delete rejected: unknown id=%r", customer_id)
        raise CustomerNotFound("Customer not found.")
    logger.info("customer.delete id=%s", cid)
