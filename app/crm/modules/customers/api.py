from __future__ import annotations

from flask import Blueprint, jsonify, request

from app.crm.modules.customers.service import create_customer, delete_customer, list_customers
from app.crm.modules.customers.store import customer_store

bp = Blueprint("customers", __name__)


@bp.get("/customers")
def customers_list():
    customers = list_customers(customer_store())
    return jsonify([c.to_dict() for c in customers])


@bp.post("/customer")
def customer_create():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    c = create_customer(customer_store(), payload)
    return jsonify(c.to_dict()), 201


@bp.delete("/customer")
def customer_delete():
    delete_customer(customer_store(), request.args.get("id"))
    return "", 204
