from app.crm.client.api import CustomerApiClient, CustomerApiError
from app.crm.client.board import CustomerBoard

__all__ = ["CustomerApiClient", "CustomerApiError", "CustomerBoard"]
