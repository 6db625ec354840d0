from storefront_api.app.core.stitching import attach_products, resolve_platform_names, with_platform_names
from storefront_api.app.schemas.cart import CartItemCreate
from storefront_api.app.schemas.content import ContentPostCreate


def test_cart_rows_embed_current_product(seeded_store):
    row = seeded_store.cart_items.create(CartItemCreate(user_id=1, product_id=1, quantity=2))

    [stitched] = attach_products([row], seeded_store.products)

    assert stitched.id == row.id
    assert stitched.product.name == "Smartphone X Pro"


def test_cart_row_for_deleted_product_has_no_product(seeded_store):
    row = seeded_store.cart_items.create(CartItemCreate(user_id=1, product_id=2))
    seeded_store.products.delete(2)

    [stitched] = attach_products([row], seeded_store.products)

    assert stitched.product is None
    assert stitched.product_id == 2


def test_platform_names_keep_order_and_skip_unknown_ids(seeded_store):
    # Seeded platforms: 1 Facebook, 2 Twitter, 3 Instagram
    assert resolve_platform_names([3, 99, 1], seeded_store.social_platforms) == ["Instagram", "Facebook"]
    assert resolve_platform_names(None, seeded_store.social_platforms) == []


def test_stitching_does_not_modify_tables(seeded_store):
    post = seeded_store.content_posts.create(
        ContentPostCreate(event_id=1, creator_id=1, title="t", content="c", platforms=[2])
    )

    detail = with_platform_names(post, seeded_store.social_platforms)

    assert detail.platform_names == ["Twitter"]
    assert not hasattr(seeded_store.content_posts.get(post.id), "platform_names")
