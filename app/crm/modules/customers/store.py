"""
Customer record stores.

Two interchangeable backends with the same four operations:

- SqlCustomerStore: SQLAlchemy session (SQLite locally, Postgres in production).
- MemoryCustomerStore: process-local ordered dict, shared per app instance.

Both keep insertion order and assign id / status / created_at at creation.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Protocol

from flask import Flask, current_app
from sqlalchemy.orm import Session

from app.crm.constants import STORE_BACKEND_MEMORY
from app.crm.db import db_session
from app.crm.models import utcnow
from app.crm.modules.customers.models import Customer, new_customer_id


def _new_customer(name: str, email: str) -> Customer:
    return Customer(id=new_customer_id(), name=name, email=email, status=True, created_at=utcnow())


class CustomerStore(Protocol):
    def add(self, name: str, email: str) -> Customer: ...

    def all(self) -> list[Customer]: ...

    def get(self, customer_id: str) -> Customer | None: ...

    def remove(self, customer_id: str) -> bool: ...


class SqlCustomerStore:
    """Commits on every write; the caller's session is otherwise left alone."""

    def __init__(self, s: Session):
        self.s = s

    def add(self, name: str, email: str) -> Customer:
        c = _new_customer(name, email)
        self.s.add(c)
        try:
            self.s.commit()
        except Exception:
            self.s.rollback()
            raise
        return c

    def all(self) -> list[Customer]:
        return self.s.query(Customer).order_by(Customer.seq.asc()).all()

    def get(self, customer_id: str) -> Customer | None:
        return self.s.query(Customer).filter(Customer.id == customer_id).one_or_none()

    def remove(self, customer_id: str) -> bool:
        c = self.get(customer_id)
        if c is None:
            return False
        self.s.delete(c)
        try:
            self.s.commit()
        except Exception:
            self.s.rollback()
            raise
        return True


class MemoryCustomerStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rows: OrderedDict[str, Customer] = OrderedDict()

    def add(self, name: str, email: str) -> Customer:
        c = _new_customer(name, email)
        with self._lock:
            self._rows[c.id] = c
        return c

    def all(self) -> list[Customer]:
        with self._lock:
            return list(self._rows.values())

    def get(self, customer_id: str) -> Customer | None:
        with self._lock:
            return self._rows.get(customer_id)

    def remove(self, customer_id: str) -> bool:
        with self._lock:
            return self._rows.pop(customer_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)


def init_store(app: Flask) -> None:
    """Memory backend: one store per app. Database backend: built per request from the session."""
    if app.config["STORE_BACKEND"] == STORE_BACKEND_MEMORY:
        app.extensions["customer_store"] = MemoryCustomerStore()


def customer_store(app: Flask | None = None) -> CustomerStore:
    if app is None:
        app = current_app
    store = app.extensions.get("customer_store")
    if store is not None:
        return store
    return SqlCustomerStore(db_session(app))
