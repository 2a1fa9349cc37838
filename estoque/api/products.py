import logging
from typing import Any, Union

import requests

from estoque.api.client import ApiClient
from estoque.api.errors import ApiError

logger = logging.getLogger(__name__)


def _json_or_none(res: requests.Response) -> Any:
    try:
        return res.json()
    except ValueError:
        logger.warning("Response from %s is not JSON: %r", res.url, res.text[:200])
        return None


def list_products(client: ApiClient) -> Any:
    res = client.get("/products")
    return _json_or_none(res)


def create_product(client: ApiClient, payload: dict) -> dict:
    res = client.post("/products", json=payload)
    data = _json_or_none(res)
    if not isinstance(data, dict):
        raise ApiError("Backend did not return the created product", res.status_code, data)
    return data


def delete_product(client: ApiClient, product_id: Union[int, str]) -> None:
    client.delete(f"/products/{product_id}")
