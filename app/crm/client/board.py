from __future__ import annotations

import logging
from typing import Any, Protocol

from app.crm.constants import STATUS_LABELS

logger = logging.getLogger(__name__)


class CustomerApi(Protocol):
    def list_customers(self) -> list[dict[str, Any]]: ...

    def create_customer(self, name: str, email: str) -> dict[str, Any]: ...

    def delete_customer(self, customer_id: str) -> None: ...


class CustomerBoard:
    """
    Client-side customer list bound to the API.

    - load(): replaces local state with the server list
    - submit(): creates, then appends the server's echo (no re-fetch)
    - delete(): deletes, then drops the id locally (no re-fetch)

    A failed delete is logged and local state is kept as-is, so the board can
    drift from the server until the next load().
    """

    def __init__(self, api: CustomerApi):
        self.api = api
        self.customers: list[dict[str, Any]] = []
        self.loaded = False

    def load(self) -> list[dict[str, Any]]:
        self.customers = list(self.api.list_customers())
        self.loaded = True
        return self.customers

    def submit(self, name: str | None, email: str | None) -> dict[str, Any] | None:
        if not name or not email:
            return None
        created = self.api.create_customer(name, email)
        self.customers = [*self.customers, created]
        return created

    def delete(self, customer_id: str) -> bool:
        try:
            self.api.delete_customer(customer_id)
        except Exception as e:
            logger.error("delete failed for customer id=%s: %s", customer_id, e)
            return False
        self.customers = [c for c in self.customers if c.get("id") != customer_id]
        return True

    def render(self) -> str:
        blocks = []
        for c in self.customers:
            blocks.append(
                "\n".join(
                    [
                        f"Nome: {c.get('name', '')}",
                        f"Email: {c.get('email', '')}",
                        f"Status: {STATUS_LABELS[bool(c.get('status'))]}",
                    ]
                )
            )
        return "\n\n".join(blocks)
