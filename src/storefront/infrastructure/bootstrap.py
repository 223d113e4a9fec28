"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from storefront import config
from storefront.application.authenticate_user import AuthenticateUserHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.session_guard import SessionGuard
from storefront.application.upsert_product import UpsertProductHandler
from storefront.domain.repository.session_store import SessionStore
from storefront.domain.service.password_hasher import PasswordHasher
from storefront.infrastructure.api.storefront_api import StorefrontApi
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_record_store import JsonRecordStore
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from storefront.infrastructure.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from storefront.infrastructure.session.in_memory_session_store import (
    InMemorySessionStore,
)


def record_store(data_dir: Path | None = None) -> JsonRecordStore:
    return JsonRecordStore(data_dir or config.DATA_DIR)


def storefront_api(
    data_dir: Path | None = None,
    hasher: PasswordHasher | None = None,
    sessions: SessionStore | None = None,
) -> StorefrontApi:
    """Build a fully wired API facade over the JSON files in *data_dir*."""
    store = record_store(data_dir)
    users = JsonUserRepository(store)
    products = JsonProductRepository(store)
    orders = JsonOrderRepository(store)
    if hasher is None:
        hasher = BcryptPasswordHasher()
    if sessions is None:
        sessions = InMemorySessionStore()

    return StorefrontApi(
        guard=SessionGuard(
            sessions=sessions,
            authenticator=AuthenticateUserHandler(users, hasher),
        ),
        register_user=RegisterUserHandler(users, hasher),
        list_products=ListProductsHandler(products),
        upsert_product=UpsertProductHandler(products),
        checkout=CheckoutHandler(orders, products),
    )
