"""
Customers module.

- Customer entity (id, name, email, status, created_at)
- Record stores (database / memory)
- JSON API: list, create, delete by id
"""
