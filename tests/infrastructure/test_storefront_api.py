"""End-to-end tests of the request/response facade over real JSON files."""

import logging

import pytest

from storefront.infrastructure.bootstrap import storefront_api
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_record_store import JsonRecordStore
from storefront.infrastructure.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from tests.fakes import FailingSessionStore


@pytest.fixture
def api(tmp_path):
    return storefront_api(tmp_path, hasher=BcryptPasswordHasher(rounds=4))


def _register(api, username, password="pw", role=None):
    form = {"username": username, "password": password, "confirmPassword": password}
    if role is not None:
        form["role"] = role
    return api.register(form)


def _login(api, username, password="pw"):
    response = api.login({"username": username, "password": password})
    assert response.ok, response.body
    return response.session_id


@pytest.fixture
def admin_session(api):
    _register(api, "root", role="admin")
    return _login(api, "root")


@pytest.fixture
def customer_session(api):
    _register(api, "alice")
    return _login(api, "alice")


class TestIndex:

    def test_root_redirects_to_login(self, api):
        response = api.index()
        assert response.status == 302
        assert response.redirect_to == "/login"


class TestRegister:

    def test_success(self, api):
        response = _register(api, "alice")
        assert response.status == 200
        assert response.body == {"message": "Registration successful! You can now log in."}

    def test_duplicate(self, api):
        _register(api, "alice", "pw1")
        response = _register(api, "alice", "pw2")
        assert response.status == 400
        assert response.body == {"message": "Username already taken"}

    def test_password_mismatch(self, api):
        response = api.register({"username": "alice", "password": "a", "confirmPassword": "b"})
        assert response.status == 400
        assert response.body == {"message": "Passwords do not match"}

    def test_unexpected_error_is_500(self, tmp_path, caplog):
        class BrokenHasher(BcryptPasswordHasher):
            def hash(self, password):
                raise RuntimeError("hasher down")

        api = storefront_api(tmp_path, hasher=BrokenHasher())
        with caplog.at_level(logging.ERROR):
            response = _register(api, "alice")
        assert response.status == 500
        assert response.message == "Internal server error. Please try again later."
        assert "Error during registration" in caplog.text


class TestLogin:

    def test_success_issues_session(self, api):
        _register(api, "alice")
        response = api.login({"username": "alice", "password": "pw"})
        assert response.status == 200
        assert response.body == {
            "success": True,
            "message": "Login successful!",
            "redirectTo": "/products",
        }
        assert response.session_id

    def test_wrong_password_and_unknown_user_match(self, api):
        _register(api, "alice")
        wrong = api.login({"username": "alice", "password": "nope"})
        unknown = api.login({"username": "ghost", "password": "pw"})
        assert wrong.status == unknown.status == 400
        assert wrong.body == unknown.body == {"message": "Invalid username or password"}
        assert wrong.session_id is None


class TestLogout:

    def test_logout_ends_session(self, api, customer_session):
        response = api.logout(customer_session)
        assert response.status == 302
        assert response.redirect_to == "/login"
        assert api.list_products(customer_session).redirect_to == "/login"

    def test_logout_without_session(self, api):
        response = api.logout(None)
        assert response.status == 302
        assert response.redirect_to == "/login"

    def test_logout_failure_is_500(self, tmp_path):
        api = storefront_api(
            tmp_path, hasher=BcryptPasswordHasher(rounds=4), sessions=FailingSessionStore()
        )
        _register(api, "alice")
        response = api.logout(_login(api, "alice"))
        assert response.status == 500
        assert response.body == {"message": "Could not log out."}


class TestProducts:

    def test_anonymous_list_redirects(self, api):
        response = api.list_products(None)
        assert response.status == 302
        assert response.redirect_to == "/login"

    def test_customer_can_list(self, api, admin_session, customer_session):
        api.upsert_product(admin_session, {"id": 1, "name": "A", "price": 10, "category": "misc"})
        response = api.list_products(customer_session)
        assert response.status == 200
        assert response.body == [{"id": 1, "name": "A", "price": 10, "category": "misc"}]

    def test_admin_upsert(self, api, admin_session):
        form = {"id": "1", "name": "Widget", "price": "15.00", "category": "tools"}
        response = api.upsert_product(admin_session, form)
        assert response.status == 200
        assert response.body == {"message": "Product saved successfully!"}

    def test_upsert_same_id_last_write_wins(self, api, admin_session):
        api.upsert_product(admin_session, {"id": "1", "name": "Old", "price": "1", "category": "x"})
        api.upsert_product(admin_session, {"id": "1", "name": "New", "price": "2", "category": "y"})
        body = api.list_products(admin_session).body
        assert body == [{"id": "1", "name": "New", "price": "2", "category": "y"}]

    def test_customer_upsert_denied(self, api, customer_session):
        form = {"id": "1", "name": "Widget", "price": "15.00", "category": "tools"}
        response = api.upsert_product(customer_session, form)
        assert response.status == 403
        assert response.body == {"message": "Access denied"}
        assert api.list_products(customer_session).body == []

    def test_anonymous_upsert_redirects(self, api):
        response = api.upsert_product(None, {"id": "1", "name": "W", "price": "1", "category": "x"})
        assert response.status == 302

    def test_malformed_upsert_rejected(self, api, admin_session):
        response = api.upsert_product(admin_session, {"id": "1", "name": "W", "price": ["1"], "category": "x"})
        assert response.status == 400

    def test_prices_are_not_validated(self, api, admin_session):
        api.upsert_product(admin_session, {"id": "1", "name": "W", "price": -5, "category": "x"})
        api.upsert_product(admin_session, {"id": "2", "name": "V", "price": "", "category": "x"})
        body = api.list_products(admin_session).body
        assert [p["price"] for p in body] == [-5, ""]


class TestCheckout:

    @pytest.fixture(autouse=True)
    def catalog(self, api, admin_session):
        api.upsert_product(admin_session, {"id": 1, "name": "A", "price": "10.00", "category": "misc"})
        api.upsert_product(admin_session, {"id": 2, "name": "B", "price": "2.50", "category": "misc"})

    def test_checkout_single_product(self, api, customer_session, tmp_path):
        response = api.checkout(customer_session, {"products": ["1"]})
        assert response.status == 200
        assert response.body == {"success": True, "message": "Checkout successful! Total: $10.00"}

        orders = JsonOrderRepository(JsonRecordStore(tmp_path)).list_all()
        assert len(orders) == 1
        assert orders[0].username == "alice"

    def test_checkout_sums_selection(self, api, customer_session):
        response = api.checkout(customer_session, {"products": ["1", "2"]})
        assert response.message == "Checkout successful! Total: $12.50"

    @pytest.mark.parametrize("payload", [{"products": []}, {"products": ["9"]}, {}, None])
    def test_invalid_selection(self, api, customer_session, payload):
        response = api.checkout(customer_session, payload)
        assert response.status == 400
        assert response.body == {"success": False, "message": "Invalid products selected."}

    def test_anonymous_checkout_redirects(self, api):
        response = api.checkout(None, {"products": ["1"]})
        assert response.status == 302
        assert response.redirect_to == "/login"

    def test_non_numeric_price_fails_checkout(self, api, admin_session, customer_session, tmp_path):
        api.upsert_product(admin_session, {"id": 3, "name": "C", "price": "free", "category": "misc"})
        response = api.checkout(customer_session, {"products": ["1", "3"]})
        assert response.status == 400
        assert response.body["success"] is False
        assert "invalid price" in response.body["message"]
        assert JsonOrderRepository(JsonRecordStore(tmp_path)).list_all() == []
