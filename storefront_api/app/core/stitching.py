"""
Read‑only composition of records across tables.

Stitching runs after filtering and never mutates the underlying
tables: it builds enriched copies.  Missing references are not errors.
A cart row whose product was deleted is returned with ``product`` set
to ``None``, and platform ids that are not in the catalog are simply
dropped from the resolved name list.
"""

from typing import Iterable, List, Optional, Sequence

from ..schemas.cart import CartItemRead, CartItemWithProduct
from ..schemas.content import ContentPostDetail, ContentPostRead
from ..schemas.product import ProductRead
from ..schemas.social import SocialPlatformRead
from .store import Table


def attach_product(item: CartItemRead, products: Table[ProductRead]) -> CartItemWithProduct:
    product: Optional[ProductRead] = products.get(item.product_id)
    return CartItemWithProduct(**item.model_dump(), product=product)


def attach_products(items: Iterable[CartItemRead], products: Table[ProductRead]) -> List[CartItemWithProduct]:
    return [attach_product(item, products) for item in items]


def resolve_platform_names(
    platform_ids: Optional[Sequence[int]], platforms: Table[SocialPlatformRead]
) -> List[str]:
    """Map platform ids to names, preserving order and skipping unknown ids."""
    names: List[str] = []
    for platform_id in platform_ids or []:
        platform = platforms.get(platform_id)
        if platform is not None:
            names.append(platform.name)
    return names


def with_platform_names(post: ContentPostRead, platforms: Table[SocialPlatformRead]) -> ContentPostDetail:
    return ContentPostDetail(
        **post.model_dump(),
        platform_names=resolve_platform_names(post.platforms, platforms),
    )


def with_platform_names_all(
    posts: Iterable[ContentPostRead], platforms: Table[SocialPlatformRead]
) -> List[ContentPostDetail]:
    return [with_platform_names(post, platforms) for post in posts]
