"""
Inventory page handlers.

``InventoryView`` owns the current ``InventoryState`` and the backend client.
Each handler calls the backend at most once, waits for the answer, and only
then replaces the state. Backend failures are caught here and turned into the
error banner; nothing is raised to the page.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Union

from pydantic import ValidationError as SchemaError

from estoque.api import products as products_api
from estoque.api.client import ApiClient
from estoque.api.errors import ApiError, ServerError, UnauthorizedError
from estoque.config import settings
from estoque.render import filter_products
from estoque.schemas import Draft, Product
from estoque.state import BannerTimers, InventoryState

logger = logging.getLogger(__name__)

ADD_SUCCESS = "Produto adicionado com sucesso!"
DELETE_SUCCESS = "Produto excluído com sucesso!"
DELETE_CONFIRMATION = "Tem certeza que deseja excluir este produto?"

LIST_UNAUTHORIZED = "Você precisa estar logado para visualizar produtos."
LIST_FAILED = "Erro ao carregar produtos. Por favor, tente novamente."
CREATE_UNAUTHORIZED = "Você precisa estar logado para adicionar produtos."
CREATE_FAILED = "Erro ao adicionar produto."
DELETE_UNAUTHORIZED = "Você precisa estar logado para excluir produtos."
DELETE_FAILED = "Erro ao excluir produto."


def list_error_message(err: ApiError) -> str:
    if isinstance(err, UnauthorizedError):
        return LIST_UNAUTHORIZED
    return LIST_FAILED


def create_error_message(err: ApiError) -> str:
    if isinstance(err, UnauthorizedError):
        return CREATE_UNAUTHORIZED
    if isinstance(err, ServerError):
        return f"Erro interno no servidor: {err.server_message or 'Tente novamente mais tarde.'}"
    if err.server_message:
        return err.server_message
    if err.field_messages:
        return "Erros de validação: " + ", ".join(err.field_messages)
    return CREATE_FAILED


def delete_error_message(err: ApiError) -> str:
    if isinstance(err, UnauthorizedError):
        return DELETE_UNAUTHORIZED
    if err.server_message:
        return err.server_message
    return DELETE_FAILED


def parse_products(data) -> List[Product]:
    if not isinstance(data, list):
        logger.warning("Product list payload is not a list (%s); showing none", type(data).__name__)
        return []

    products = []
    for item in data:
        try:
            products.append(Product.model_validate(item))
        except SchemaError as e:
            logger.warning("Skipping malformed product %r: %s", item, e)
    return products


class InventoryView:
    def __init__(
        self,
        client: ApiClient,
        timers: Optional[BannerTimers] = None,
        banner_seconds: Optional[float] = None,
    ):
        self.client = client
        self.timers = timers or BannerTimers()
        self.banner_seconds = banner_seconds if banner_seconds is not None else settings.success_banner_seconds
        self.state = InventoryState()

    # ---------------- Banners ----------------

    def _show_success(self, message: str) -> None:
        self.state = self.state.with_success(message)
        generation = self.state.banner_generation
        self.timers.call_later(self.banner_seconds, lambda: self._clear_success(generation))

    def _clear_success(self, generation: int) -> None:
        self.state = self.state.clear_success(generation)

    def tick(self) -> int:
        return self.timers.run_due()

    # ---------------- Load ----------------

    def load(self) -> None:
        try:
            data = products_api.list_products(self.client)
        except ApiError as e:
            logger.error("Erro ao buscar produtos: %s", e)
            self.state = self.state.with_error(list_error_message(e))
            return

        logger.debug("Resposta da API: %r", data)
        self.state = replace(self.state.with_products(parse_products(data)), error="")

    # ---------------- Draft & search ----------------

    def update_draft(self, field: str, value: str) -> None:
        if field not in Draft.model_fields:
            raise ValueError(f"Unknown draft field: {field}")
        draft = Draft(**{**self.state.draft.model_dump(), field: value})
        self.state = replace(self.state, draft=draft)

    def reset_draft(self) -> None:
        self.state = replace(self.state, draft=Draft())

    def set_search(self, query: str) -> None:
        self.state = replace(self.state, search_query=query or "")

    def visible_products(self) -> List[Product]:
        return filter_products(self.state.products, self.state.search_query)

    # ---------------- Create ----------------

    def add_product(self) -> bool:
        payload = self.state.draft.to_payload().model_dump()
        logger.info("Sending product data: %s", payload)

        try:
            created = Product.model_validate(products_api.create_product(self.client, payload))
        except ApiError as e:
            logger.error("Erro ao adicionar produto: %s (payload=%r)", e, e.payload)
            self.state = self.state.with_error(create_error_message(e))
            return False
        except SchemaError as e:
            logger.error("Erro ao adicionar produto: unexpected response %s", e)
            self.state = self.state.with_error(CREATE_FAILED)
            return False

        self.state = replace(self.state.append_product(created), draft=Draft(), error="")
        self._show_success(ADD_SUCCESS)
        return True

    # ---------------- Delete ----------------

    def request_delete(self, product_id: Union[int, str]) -> None:
        self.state = replace(self.state, pending_delete=product_id)

    def cancel_delete(self) -> None:
        self.state = replace(self.state, pending_delete=None)

    def confirm_delete(self) -> bool:
        product_id = self.state.pending_delete
        if product_id is None:
            return False
        self.state = replace(self.state, pending_delete=None)

        try:
            products_api.delete_product(self.client, product_id)
        except ApiError as e:
            logger.error("Erro ao excluir produto %s: %s", product_id, e)
            self.state = self.state.with_error(delete_error_message(e))
            return False

        self.state = replace(self.state.remove_product(product_id), error="")
        self._show_success(DELETE_SUCCESS)
        return True
