"""
Central constants for the customer registry.
"""
from __future__ import annotations

STORE_BACKEND_DATABASE = "database"
STORE_BACKEND_MEMORY = "memory"
STORE_BACKENDS = frozenset({STORE_BACKEND_DATABASE, STORE_BACKEND_MEMORY})

# Labels shown next to a customer's status in the client views
STATUS_LABELS = {True: "ATIVO", False: "INATIVO"}

REQUEST_ID_HEADER = "X-Request-ID"
