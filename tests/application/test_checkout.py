"""Integration tests for the Checkout use case.

Uses in-memory fake repositories, no file I/O.
"""

import pytest

from storefront.application.checkout import CheckoutHandler
from storefront.domain.exceptions import NoValidProductsError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakeProductRepository, identity


def _setup(
    products: list[Product] | None = None,
) -> tuple[CheckoutHandler, FakeOrderRepository, FakeProductRepository]:
    """Build handler with fake repos, optionally pre-loaded with products."""
    if products is None:
        products = [
            Product(id=1, name="A", price="10.00", category="misc"),
            Product(id="2", name="Widget", price="15.00", category="tools"),
            Product(id="3", name="Gadget", price="25.50", category="tools"),
        ]
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository(products)
    return CheckoutHandler(order_repo, product_repo), order_repo, product_repo


class TestCheckoutHappyPath:

    def test_single_product(self):
        handler, order_repo, _ = _setup()
        receipt = handler.handle(identity("alice"), ["1"])

        assert receipt.total == "$10.00"
        assert receipt.message == "Checkout successful! Total: $10.00"
        orders = order_repo.list_all()
        assert len(orders) == 1
        assert orders[0].username == "alice"
        assert orders[0].total_price == Money.of("10.00")

    def test_total_is_sum_of_found_products_only(self):
        handler, order_repo, _ = _setup()
        receipt = handler.handle(identity(), ["2", "3", "999"])
        assert receipt.total == "$40.50"
        assert receipt.item_count == 2
        assert [p.id for p in order_repo.list_all()[0].products] == ["2", "3"]

    def test_duplicate_ids_select_product_once(self):
        handler, _, _ = _setup()
        assert handler.handle(identity(), ["2", "2"]).total == "$15.00"

    def test_repeated_checkout_creates_repeated_orders(self):
        handler, order_repo, _ = _setup()
        first = handler.handle(identity(), ["1"])
        second = handler.handle(identity(), ["1"])
        assert second.order_id == first.order_id + 1
        assert len(order_repo.list_all()) == 2

    def test_order_keeps_price_snapshot(self):
        handler, order_repo, product_repo = _setup()
        handler.handle(identity(), ["2"])

        product_repo.upsert(Product(id="2", name="Widget", price="99.00", category="tools"))

        assert order_repo.list_all()[0].products[0].price == "15.00"


class TestCheckoutIdMatching:

    def test_numeric_request_ids_never_match(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(NoValidProductsError):
            handler.handle(identity(), [1])
        assert order_repo.list_all() == []

    def test_numeric_catalog_id_matches_its_string_form(self):
        handler, _, _ = _setup()
        assert handler.handle(identity(), ["1"]).total == "$10.00"


class TestCheckoutValidation:

    @pytest.mark.parametrize("requested", [[], ["999"], None, "1", {"id": "1"}, 42])
    def test_nothing_selected_creates_no_order(self, requested):
        handler, order_repo, _ = _setup()
        with pytest.raises(NoValidProductsError, match="Invalid products selected."):
            handler.handle(identity(), requested)
        assert order_repo.list_all() == []

    def test_empty_catalog(self):
        handler, _, _ = _setup(products=[])
        with pytest.raises(NoValidProductsError):
            handler.handle(identity(), ["1"])
