"""
Unit tests for domain entities.

Tests for Customer, Product, OrderItem and the Order aggregate.
"""

from decimal import Decimal

import pytest

from ddd_orders.domain.entities import Customer, Order, OrderItem, Product
from ddd_orders.domain.exceptions import InvalidArgument
from ddd_orders.domain.value_objects import Amount, Email, FullName, Quantity


class TestEntityIdentity:
    """Entities compare by identity, not by their attributes."""

    def test_same_data_different_identity(self):
        name = FullName(first_name="Luke", last_name="Skywalker")
        email = Email(value="luke.skywalker@starwars.com")
        first = Customer(full_name=name, email=email)
        second = Customer(full_name=name, email=email)
        assert first.id != second.id
        assert first != second

    def test_identity_survives_mutation(self, customer):
        before_id = customer.id
        snapshot = {customer}
        customer.change_email(Email(value="red.five@rebellion.org"))
        assert customer.id == before_id
        assert customer in snapshot


class TestCustomer:
    """Tests for Customer entity."""

    def test_create(self, customer):
        assert customer.full_name == FullName(first_name="Luke", last_name="Skywalker")
        assert customer.email == Email(value="luke.skywalker@starwars.com")

    def test_change_full_name(self, customer):
        customer.change_full_name(FullName(first_name="Darth", last_name="Vader"))
        assert str(customer.full_name) == "Darth Vader"

    def test_change_email(self, customer):
        customer.change_email(Email(value="red.five@rebellion.org"))
        assert customer.email.value == "red.five@rebellion.org"

    def test_missing_values_rejected(self, customer):
        with pytest.raises(InvalidArgument):
            Customer(full_name=None, email=Email(value="luke.skywalker@starwars.com"))
        with pytest.raises(InvalidArgument):
            customer.change_email(None)
        assert customer.email.value == "luke.skywalker@starwars.com"


class TestProduct:
    """Tests for Product entity."""

    def test_create(self, product):
        assert product.description == "Millennium Falcon"
        assert product.price == Amount(value=Decimal("500000000"))

    @pytest.mark.parametrize("description", [None, "", "   "])
    def test_blank_description_rejected(self, description):
        with pytest.raises(InvalidArgument) as exc_info:
            Product(description=description, price=Amount(value=Decimal("1")))
        assert exc_info.value.field == "description"

    @pytest.mark.parametrize("price", [None, Amount(value=Decimal("0")), Amount(value=Decimal("-1"))])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(InvalidArgument) as exc_info:
            Product(description="X-wing", price=price)
        assert exc_info.value.field == "price"

    def test_change_price(self, product):
        product.change_price(Amount(value=Decimal("0.01")))
        assert product.price == Amount(value=Decimal("0.01"))

    @pytest.mark.parametrize("price", [None, Amount(value=Decimal("0")), Amount(value=Decimal("-100"))])
    def test_rejected_price_change_leaves_product_untouched(self, product, price):
        with pytest.raises(InvalidArgument):
            product.change_price(price)
        assert product.price == Amount(value=Decimal("500000000"))

    def test_change_description(self, product):
        product.change_description("Slave I")
        assert product.description == "Slave I"

    def test_rejected_description_change_leaves_product_untouched(self, product):
        with pytest.raises(InvalidArgument):
            product.change_description("  ")
        assert product.description == "Millennium Falcon"


class TestOrderItem:
    """Tests for OrderItem entity."""

    def test_sub_total(self):
        product = Product(description="Lightsaber", price=Amount(value=Decimal("20")))
        item = OrderItem(product=product, quantity=Quantity(value=Decimal("3")))
        assert item.sub_total == Amount(value=Decimal("60"))

    def test_sub_total_follows_price_changes(self):
        product = Product(description="Lightsaber", price=Amount(value=Decimal("20")))
        item = OrderItem(product=product, quantity=Quantity(value=Decimal("2")))
        product.change_price(Amount(value=Decimal("25")))
        assert item.product is product
        assert item.sub_total == Amount(value=Decimal("50"))

    def test_missing_product_rejected(self):
        with pytest.raises(InvalidArgument):
            OrderItem(product=None, quantity=Quantity(value=Decimal("1")))


class TestOrder:
    """Tests for the Order aggregate."""

    def test_new_order_is_empty(self, order, customer):
        assert order.customer is customer
        assert order.items == ()
        assert order.discount == Amount.zero()
        assert order.total == Amount.zero()

    def test_add_item_appends(self, order):
        products = [
            Product(description=name, price=Amount(value=Decimal(price)))
            for name, price in [("X-wing", "150000"), ("TIE Fighter", "75000"), ("Speeder", "8000")]
        ]
        items = [OrderItem(product=p, quantity=Quantity(value=Decimal("1"))) for p in products]

        for count, item in enumerate(items, start=1):
            order.add_item(item)
            assert len(order.items) == count
            assert order.items[:count] == tuple(items[:count])

    def test_add_item_does_not_mutate_previous_items(self, order, order_item):
        previous = order.items
        order.add_item(order_item)
        assert previous == ()
        assert order.items == (order_item,)

        snapshot = order.items
        order.add_item(order_item)
        assert snapshot == (order_item,)
        assert len(order.items) == 2

    def test_duplicates_allowed(self, order, order_item):
        order.add_item(order_item)
        order.add_item(order_item)
        assert order.total == Amount(value=Decimal("1000000000"))

    def test_add_invalid_item_rejected(self, order):
        with pytest.raises(InvalidArgument):
            order.add_item(None)
        assert order.items == ()

    def test_total_sums_sub_totals(self, order):
        order.add_item(
            OrderItem(
                product=Product(description="Blaster", price=Amount(value=Decimal("12.50"))),
                quantity=Quantity(value=Decimal("4")),
            )
        )
        order.add_item(
            OrderItem(
                product=Product(description="Droid", price=Amount(value=Decimal("100"))),
                quantity=Quantity(value=Decimal("0.5")),
            )
        )
        assert order.total == Amount(value=Decimal("100"))

    def test_apply_discount(self, order, order_item):
        order.add_item(order_item)
        order.apply_discount(Amount(value=Decimal("100000000")))
        assert order.discount == Amount(value=Decimal("100000000"))
        assert order.total == Amount(value=Decimal("400000000"))

    def test_apply_discount_replaces_previous(self, order, order_item):
        order.add_item(order_item)
        order.apply_discount(Amount(value=Decimal("100")))
        order.apply_discount(Amount(value=Decimal("50")))
        assert order.total == Amount(value=Decimal("499999950"))

    def test_discount_larger_than_total_gives_negative_total(self, order, order_item):
        order.add_item(order_item)
        order.apply_discount(Amount(value=Decimal("600000000")))
        assert order.total == Amount(value=Decimal("-100000000"))

    def test_missing_discount_rejected(self, order):
        with pytest.raises(InvalidArgument):
            order.apply_discount(None)
        assert order.discount == Amount.zero()
