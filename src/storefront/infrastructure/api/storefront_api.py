"""Request/response facade over the storefront use cases.

Each method takes the caller's session id (what a cookie would carry)
and the decoded request body, and returns an ``ApiResponse`` with an
HTTP status, a JSON-ready body, and optionally a redirect target or a
newly issued session id. Binding this to an HTTP server is left to the
host application.

Status mapping:
- validation and bad credentials -> 400 with ``{"message": ...}``
- no session                     -> 302 to the login page
- missing role                   -> 403 ``{"message": "Access denied"}``
- logout failure                 -> 500
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from storefront.application.checkout import CheckoutHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.session_guard import SessionGuard
from storefront.application.upsert_product import UpsertProductHandler
from storefront.config import LOGIN_PATH, PRODUCTS_PATH
from storefront.domain.exceptions import (
    AuthenticationError,
    AuthenticationRequiredError,
    AuthorizationError,
    SessionError,
    ValidationError,
)
from storefront.domain.model.user import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiResponse:
    status: int
    body: Any = None
    redirect_to: str | None = None
    session_id: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def message(self) -> str | None:
        if isinstance(self.body, dict):
            return self.body.get("message")
        return None

    @staticmethod
    def json(body: Any, status: int = HTTPStatus.OK, session_id: str | None = None) -> ApiResponse:
        return ApiResponse(status=int(status), body=body, session_id=session_id)

    @staticmethod
    def redirect(location: str) -> ApiResponse:
        return ApiResponse(status=int(HTTPStatus.FOUND), redirect_to=location)


class StorefrontApi:

    def __init__(
        self,
        guard: SessionGuard,
        register_user: RegisterUserHandler,
        list_products: ListProductsHandler,
        upsert_product: UpsertProductHandler,
        checkout: CheckoutHandler,
    ) -> None:
        self._guard = guard
        self._register_user = register_user
        self._list_products = list_products
        self._upsert_product = upsert_product
        self._checkout = checkout

    # --- Navigation -----------------------------------------------------------

    def index(self) -> ApiResponse:
        return self._logged("GET", "/", ApiResponse.redirect(LOGIN_PATH))

    # --- Accounts -------------------------------------------------------------

    def register(self, form: Mapping[str, Any]) -> ApiResponse:
        try:
            self._register_user.handle(
                username=form.get("username"),
                password=form.get("password"),
                confirm_password=form.get("confirmPassword"),
                role=form.get("role"),
            )
        except ValidationError as exc:
            response = ApiResponse.json({"message": str(exc)}, HTTPStatus.BAD_REQUEST)
        except Exception:
            logger.exception("Error during registration")
            response = ApiResponse.json(
                {"message": "Internal server error. Please try again later."},
                HTTPStatus.INTERNAL_SERVER_ERROR,
            )
        else:
            response = ApiResponse.json(
                {"message": "Registration successful! You can now log in."}
            )
        return self._logged("POST", "/register", response)

    def login(self, form: Mapping[str, Any], session_id: str | None = None) -> ApiResponse:
        context = self._guard.context_for(session_id)
        try:
            context = self._guard.login(context, form.get("username"), form.get("password"))
        except AuthenticationError as exc:
            response = ApiResponse.json({"message": str(exc)}, HTTPStatus.BAD_REQUEST)
        else:
            response = ApiResponse.json(
                {"success": True, "message": "Login successful!", "redirectTo": PRODUCTS_PATH},
                session_id=context.session_id,
            )
        return self._logged("POST", "/login", response)

    def logout(self, session_id: str | None) -> ApiResponse:
        try:
            self._guard.logout(self._guard.context_for(session_id))
        except SessionError:
            logger.exception("Session could not be destroyed")
            response = ApiResponse.json(
                {"message": "Could not log out."}, HTTPStatus.INTERNAL_SERVER_ERROR
            )
        else:
            response = ApiResponse.redirect(LOGIN_PATH)
        return self._logged("GET", "/logout", response)

    # --- Catalog --------------------------------------------------------------

    def list_products(self, session_id: str | None) -> ApiResponse:
        context = self._guard.context_for(session_id)
        try:
            self._guard.require_authenticated(context)
        except AuthenticationRequiredError as exc:
            return self._logged("GET", "/api/products", ApiResponse.redirect(exc.redirect_to))

        body = [
            {"id": p.id, "name": p.name, "price": p.price, "category": p.category}
            for p in self._list_products.handle()
        ]
        return self._logged("GET", "/api/products", ApiResponse.json(body))

    def upsert_product(self, session_id: str | None, form: Mapping[str, Any]) -> ApiResponse:
        context = self._guard.context_for(session_id)
        try:
            self._guard.require_authenticated(context)
            self._guard.require_role(context, Role.ADMIN)
            self._upsert_product.handle(
                product_id=form.get("id"),
                name=form.get("name"),
                price=form.get("price"),
                category=form.get("category"),
            )
        except AuthenticationRequiredError as exc:
            response = ApiResponse.redirect(exc.redirect_to)
        except AuthorizationError as exc:
            response = ApiResponse.json({"message": str(exc)}, HTTPStatus.FORBIDDEN)
        except ValidationError as exc:
            response = ApiResponse.json({"message": str(exc)}, HTTPStatus.BAD_REQUEST)
        else:
            response = ApiResponse.json({"message": "Product saved successfully!"})
        return self._logged("POST", "/api/products", response)

    # --- Checkout -------------------------------------------------------------

    def checkout(self, session_id: str | None, payload: Mapping[str, Any] | None) -> ApiResponse:
        context = self._guard.context_for(session_id)
        try:
            identity = self._guard.require_authenticated(context)
            receipt = self._checkout.handle(identity, (payload or {}).get("products"))
        except AuthenticationRequiredError as exc:
            response = ApiResponse.redirect(exc.redirect_to)
        except ValidationError as exc:
            response = ApiResponse.json(
                {"success": False, "message": str(exc)}, HTTPStatus.BAD_REQUEST
            )
        else:
            response = ApiResponse.json({"success": True, "message": receipt.message})
        return self._logged("POST", "/checkout", response)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _logged(method: str, path: str, response: ApiResponse) -> ApiResponse:
        logger.info("%s %s %d", method, path, response.status)
        return response
