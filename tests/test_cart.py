import pytest

from storefront_api.app.core.errors import InvalidQuantityError
from storefront_api.app.services.cart_service import CartService


@pytest.fixture
def cart(seeded_store):
    return CartService(seeded_store)


def test_add_creates_row(cart):
    item = cart.add_to_cart(user_id=1, product_id=1, quantity=2)
    assert item.quantity == 2
    assert [i.id for i in cart.get_cart_items(1)] == [item.id]


def test_adding_same_product_merges_quantities(cart):
    first = cart.add_to_cart(1, 1, 2)
    second = cart.add_to_cart(1, 1, 3)

    assert second.id == first.id
    assert second.quantity == 5
    assert len(cart.get_cart_items(1)) == 1


def test_carts_are_per_user(cart):
    cart.add_to_cart(1, 1)
    cart.add_to_cart(2, 1)
    assert len(cart.get_cart_items(1)) == 1
    assert len(cart.get_cart_items(2)) == 1


@pytest.mark.parametrize("quantity", [0, -1])
def test_quantities_below_one_are_rejected(cart, seeded_store, quantity):
    with pytest.raises(InvalidQuantityError):
        cart.add_to_cart(1, 1, quantity)
    assert len(seeded_store.cart_items) == 0


def test_update_sets_absolute_quantity(cart):
    item = cart.add_to_cart(1, 1, 4)
    assert cart.update_cart_item(item.id, 1).quantity == 1
    with pytest.raises(InvalidQuantityError):
        cart.update_cart_item(item.id, 0)
    assert cart.get_cart_item(1, 1).quantity == 1


def test_update_unknown_row_returns_none(cart):
    assert cart.update_cart_item(99, 2) is None


def test_list_cart_embeds_products(cart):
    cart.add_to_cart(1, 3)
    [row] = cart.list_cart(1)
    assert row.product.id == 3


def test_clear_cart_only_removes_that_user(cart):
    cart.add_to_cart(1, 1)
    cart.add_to_cart(1, 2)
    cart.add_to_cart(2, 1)

    assert cart.clear_cart(1) == 2
    assert cart.get_cart_items(1) == []
    assert len(cart.get_cart_items(2)) == 1


def test_remove_from_cart(cart):
    item = cart.add_to_cart(1, 1)
    assert cart.remove_from_cart(item.id) is True
    assert cart.remove_from_cart(item.id) is False
