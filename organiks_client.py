"""Organiks farm records API client.

This module defines a thin client around the Organiks HTTP API.  Every
record operation of the service has a method of the same name:

* poultry: :meth:`add_poultry_record`, :meth:`get_poultry_record`,
  :meth:`get_all_poultry_records`, :meth:`update_poultry_record`,
  :meth:`delete_poultry_record`
* eggs: :meth:`add_egg_record`, :meth:`get_egg_record`,
  :meth:`get_all_egg_records`, :meth:`search_egg_record_by_egg_type`,
  :meth:`update_egg_record`, :meth:`delete_egg_record`
* prices: :meth:`set_egg_price`, :meth:`get_egg_price`,
  :meth:`get_all_egg_prices`, :meth:`get_egg_price_by_egg_type`,
  :meth:`update_egg_price`, :meth:`delete_egg_price`
* orders: :meth:`place_egg_order`, :meth:`get_egg_order`,
  :meth:`get_all_orders`

Each method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` and ``error`` is a dictionary
with ``status_code`` and ``message`` (the server's ``detail`` text, e.g.
``"No egg orders found."``).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]
Result = Tuple[Optional[Any], Optional[Error]]


class OrganiksAPI:
    """Client for interacting with the Organiks farm records API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix of the versioned routes.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)`` as described in the module
            docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Poultry records
    # ------------------------------------------------------------------
    def add_poultry_record(self, breed: str, age: int, egg_production: bool) -> Result:
        payload = {"breed": breed, "age": age, "egg_production": egg_production}
        return self._request("POST", "/poultry/", json_body=payload)

    def get_poultry_record(self, record_id: int) -> Result:
        return self._request("GET", f"/poultry/{record_id}")

    def get_all_poultry_records(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/poultry/")

    def update_poultry_record(self, record_id: int, breed: str, age: int, egg_production: bool) -> Result:
        payload = {"breed": breed, "age": age, "egg_production": egg_production}
        return self._request("PUT", f"/poultry/{record_id}", json_body=payload)

    def delete_poultry_record(self, record_id: int) -> Result:
        return self._request("DELETE", f"/poultry/{record_id}")

    # ------------------------------------------------------------------
    # Egg records
    # ------------------------------------------------------------------
    def add_egg_record(self, egg_type: str, total_egg_count: int, cracked_egg_count: int) -> Result:
        payload = {
            "egg_type": egg_type,
            "total_egg_count": total_egg_count,
            "cracked_egg_count": cracked_egg_count,
        }
        return self._request("POST", "/eggs/", json_body=payload)

    def get_egg_record(self, record_id: int) -> Result:
        return self._request("GET", f"/eggs/{record_id}")

    def get_all_egg_records(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/eggs/")

    def search_egg_record_by_egg_type(self, egg_type: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/eggs/search", params={"egg_type": egg_type})

    def update_egg_record(
        self, record_id: int, egg_type: str, total_egg_count: int, cracked_egg_count: int
    ) -> Result:
        payload = {
            "egg_type": egg_type,
            "total_egg_count": total_egg_count,
            "cracked_egg_count": cracked_egg_count,
        }
        return self._request("PUT", f"/eggs/{record_id}", json_body=payload)

    def delete_egg_record(self, record_id: int) -> Result:
        return self._request("DELETE", f"/eggs/{record_id}")

    # ------------------------------------------------------------------
    # Egg prices
    # ------------------------------------------------------------------
    def set_egg_price(self, egg_type: str, price: float) -> Result:
        return self._request("POST", "/egg-prices/", json_body={"egg_type": egg_type, "price": price})

    def get_egg_price(self, price_id: int) -> Result:
        return self._request("GET", f"/egg-prices/{price_id}")

    def get_all_egg_prices(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/egg-prices/")

    def get_egg_price_by_egg_type(self, egg_type: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/egg-prices/search", params={"egg_type": egg_type})

    def update_egg_price(self, price_id: int, egg_type: str, price: float) -> Result:
        return self._request("PUT", f"/egg-prices/{price_id}", json_body={"egg_type": egg_type, "price": price})

    def delete_egg_price(self, price_id: int) -> Result:
        return self._request("DELETE", f"/egg-prices/{price_id}")

    # ------------------------------------------------------------------
    # Egg orders
    # ------------------------------------------------------------------
    def place_egg_order(self, customer_name: str, egg_type: str, quantity: int) -> Result:
        payload = {"customer_name": customer_name, "egg_type": egg_type, "quantity": quantity}
        return self._request("POST", "/orders/", json_body=payload)

    def get_egg_order(self, order_id: int) -> Result:
        return self._request("GET", f"/orders/{order_id}")

    def get_all_orders(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/orders/")
