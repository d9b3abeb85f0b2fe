from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Any


class CustomerApiError(RuntimeError):
    def __init__(self, message: str, *, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass(frozen=True)
class CustomerApiClient:
    """HTTP client for the customers API. One request per call, no retries."""

    base_url: str = "http://localhost:3333"
    timeout_seconds: int = 15

    def _url(self, path: str, params: dict[str, Any] | None = None) -> str:
        url = self.base_url.rstrip("/") + path
        if params:
            url += "?" + urllib.parse.urlencode({k: v for k, v in params.items() if v is not None})
        return url

    def request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        data = json.dumps(body).encode("utf-8") if body is not None else None
        req = urllib.request.Request(self._url(path, params), data=data, method=method)
        req.add_header("Accept", "application/json")
        if data is not None:
            req.add_header("Content-Type", "application/json")
        try:
            with urllib.request.urlopen(req, timeout=self.timeout_seconds) as resp:
                raw = resp.read()
        except urllib.error.HTTPError as e:
            try:
                body_text = e.read().decode("utf-8", errors="ignore")
            except Exception:
                body_text = ""
            message = body_text[:300]
            try:
                message = json.loads(body_text).get("message") or message
            except (ValueError, AttributeError):
                pass
            raise CustomerApiError(f"HTTP {e.code} from {method} {path}: {message}", status=e.code) from e
        except urllib.error.URLError as e:
            raise CustomerApiError(f"{method} {path} failed: {e.reason}") from e
        if not raw:
            return None
        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError as e:
            raise CustomerApiError(f"Invalid JSON from {method} {path}") from e

    def list_customers(self) -> list[dict[str, Any]]:
        j = self.request_json("GET", "/customers")
        return j if isinstance(j, list) else []

    def create_customer(self, name: str, email: str) -> dict[str, Any]:
        j = self.request_json("POST", "/customer", body={"name": name, "email": email})
        if not isinstance(j, dict):
            raise CustomerApiError("Unexpected response from POST /customer")
        return j

    def delete_customer(self, customer_id: str) -> None:
        self.request_json("DELETE", "/customer", params={"id": customer_id})
