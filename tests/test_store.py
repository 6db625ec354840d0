import pytest
from pydantic import ValidationError

from storefront_api.app.core.store import IdentityGenerator, Store, Table
from storefront_api.app.schemas.category import CategoryCreate, CategoryRead
from storefront_api.app.schemas.content import ContentPostCreate, ContentPostUpdate
from storefront_api.app.schemas.product import ProductCreate


def _category(name="Electronics"):
    return CategoryCreate(name=name, icon="laptop", color="#2874f0")


def _post(**overrides):
    values = {"event_id": 1, "creator_id": 1, "title": "Hello", "content": "World", "tags": ["launch"]}
    values.update(overrides)
    return ContentPostCreate(**values)


def test_identity_generator_starts_at_one_and_increases():
    ids = IdentityGenerator()
    assert ids.last == 0
    assert [ids.next() for _ in range(3)] == [1, 2, 3]
    assert ids.last == 3


def test_identities_are_not_reused_after_delete():
    table = Table("categories", CategoryRead)
    first = table.create(_category("A"))
    second = table.create(_category("B"))
    assert table.delete(second.id) is True

    third = table.create(_category("C"))

    assert (first.id, second.id, third.id) == (1, 2, 3)


def test_each_table_has_its_own_sequence(store):
    category = store.categories.create(_category())
    post = store.content_posts.create(_post())
    assert category.id == 1
    assert post.id == 1


def test_store_owns_twelve_empty_tables():
    store = Store()
    assert len(store.tables()) == 12
    assert all(len(table) == 0 for table in store.tables())


def test_create_then_get_round_trip(store):
    created = store.categories.create(_category())
    fetched = store.categories.get(created.id)
    assert fetched == created
    assert created.id in store.categories


def test_get_unknown_id_returns_none(store):
    assert store.categories.get(42) is None


def test_list_keeps_insertion_order(store):
    for name in ("Zeta", "Alpha", "Mid"):
        store.categories.create(_category(name))
    assert [c.name for c in store.categories.list()] == ["Zeta", "Alpha", "Mid"]


def test_find_returns_first_match(store):
    store.categories.create(_category("Fashion"))
    store.categories.create(_category("Fashion"))
    found = store.categories.find(lambda c: c.name == "Fashion")
    assert found.id == 1
    assert store.categories.find(lambda c: c.name == "Toys") is None


def test_returned_rows_are_copies(store):
    post = store.content_posts.create(_post())
    post.tags.append("mutated")
    post.title = "Changed"

    stored = store.content_posts.get(post.id)
    assert stored.tags == ["launch"]
    assert stored.title == "Hello"


def test_create_stamps_timestamps(store):
    post = store.content_posts.create(_post())
    assert post.created_at is not None
    assert post.updated_at == post.created_at


def test_partial_update_changes_only_supplied_fields(store):
    post = store.content_posts.create(_post())

    updated = store.content_posts.update(post.id, ContentPostUpdate(title="New title"))

    assert updated.title == "New title"
    assert updated.content == "World"
    assert updated.tags == ["launch"]
    assert updated.created_at == post.created_at
    assert updated.updated_at >= post.updated_at


def test_update_cannot_change_identity_or_creation_time(store):
    post = store.content_posts.create(_post())
    updated = store.content_posts.update(post.id, {"id": 99, "created_at": "2000-01-01T00:00:00Z"})
    assert updated.id == post.id
    assert updated.created_at == post.created_at
    assert store.content_posts.get(99) is None


def test_update_unknown_id_returns_none(store):
    assert store.content_posts.update(5, ContentPostUpdate(title="x")) is None


def test_invalid_patch_leaves_row_untouched(store):
    product = store.products.create(
        ProductCreate(
            name="Phone", description="d", price=100, category_id=1, brand="TechX", image_url="http://x",
        )
    )
    with pytest.raises(ValidationError):
        store.products.update(product.id, {"price": -1})
    assert store.products.get(product.id).price == 100


def test_delete_is_idempotent(store):
    category = store.categories.create(_category())
    assert store.categories.delete(category.id) is True
    assert store.categories.delete(category.id) is False
    assert store.categories.get(category.id) is None


def test_delete_where_reports_count(store):
    for name in ("A", "B", "A"):
        store.categories.create(_category(name))
    assert store.categories.delete_where(lambda c: c.name == "A") == 2
    assert [c.name for c in store.categories.list()] == ["B"]
