"""
Filter and sort engine for table snapshots.

The functions in this module are pure: they take a list of records
(usually ``Table.list()``) plus a filter model and return a new,
filtered and ordered list.  Nothing here reads or writes a table.

Filter models are pydantic models whose fields are all optional; an
absent field imposes no constraint.  Each present field is turned into
one predicate and a record is kept only when every predicate holds, so
filtering on several fields equals intersecting the results of
filtering on each field alone.

All sorts rely on Python's stable ``sorted``: records with equal keys
keep their relative input order (insertion order for table
snapshots).
"""

from __future__ import annotations

import datetime as dt
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from ..schemas.calendar import CalendarEntryRead
from ..schemas.content import ContentPostFilters, ContentPostRead
from ..schemas.event import EventRead
from ..schemas.product import ProductFilters, ProductRead


T = TypeVar("T")
Predicate = Callable[[T], bool]

DEFAULT_POST_SORT = "scheduled_desc"


def as_utc(value: dt.datetime) -> dt.datetime:
    """Return ``value`` as an aware UTC datetime.

    Naive datetimes (query strings without an offset) are interpreted
    as UTC so that they can be compared with the aware timestamps
    stamped by the store.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


def apply_predicates(records: Iterable[T], predicates: Sequence[Predicate]) -> List[T]:
    return [record for record in records if all(predicate(record) for predicate in predicates)]


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------

def effective_price(product: ProductRead) -> float:
    """Price used for every price filter and sort.

    The discounted price when one is set, otherwise the list price.
    """
    if product.discounted_price is not None:
        return product.discounted_price
    return product.price


def product_predicates(filters: ProductFilters) -> List[Predicate]:
    predicates: List[Predicate] = []
    if filters.category_id is not None:
        category_id = filters.category_id
        predicates.append(lambda p: p.category_id == category_id)
    if filters.min_price is not None:
        min_price = filters.min_price
        predicates.append(lambda p: effective_price(p) >= min_price)
    if filters.max_price is not None:
        max_price = filters.max_price
        predicates.append(lambda p: effective_price(p) <= max_price)
    if filters.brand:
        brands = set(filters.brand)
        predicates.append(lambda p: p.brand in brands)
    if filters.rating is not None:
        rating = filters.rating
        predicates.append(lambda p: p.rating >= rating)
    if filters.in_stock is not None:
        in_stock = filters.in_stock
        predicates.append(lambda p: p.in_stock == in_stock)
    if filters.search_term:
        term = filters.search_term.lower()
        predicates.append(
            lambda p: term in p.name.lower()
            or term in p.description.lower()
            or term in p.brand.lower()
        )
    return predicates


def filter_products(products: Iterable[ProductRead], filters: ProductFilters) -> List[ProductRead]:
    return apply_predicates(products, product_predicates(filters))


def sort_products(products: Iterable[ProductRead], sort_by: Optional[str]) -> List[ProductRead]:
    """Order products by ``sort_by``; ``None`` keeps the input order."""
    if sort_by is None:
        return list(products)
    if sort_by == "price_asc":
        return sorted(products, key=effective_price)
    if sort_by == "price_desc":
        return sorted(products, key=effective_price, reverse=True)
    if sort_by == "rating":
        return sorted(products, key=lambda p: p.rating, reverse=True)
    if sort_by == "newest":
        return sorted(products, key=lambda p: as_utc(p.created_at), reverse=True)
    raise ValueError(f"Unknown product sort: {sort_by}")


def query_products(products: Iterable[ProductRead], filters: Optional[ProductFilters] = None) -> List[ProductRead]:
    """Filter then sort ``products`` according to ``filters``."""
    if filters is None:
        return list(products)
    return sort_products(filter_products(products, filters), filters.sort_by)


# ---------------------------------------------------------------------------
# Content posts
# ---------------------------------------------------------------------------

def content_post_predicates(filters: ContentPostFilters) -> List[Predicate]:
    predicates: List[Predicate] = []
    if filters.event_id is not None:
        event_id = filters.event_id
        predicates.append(lambda p: p.event_id == event_id)
    if filters.creator_id is not None:
        creator_id = filters.creator_id
        predicates.append(lambda p: p.creator_id == creator_id)
    if filters.status is not None:
        status = filters.status
        predicates.append(lambda p: p.status == status)
    # Unscheduled posts never satisfy a date bound.
    if filters.start_date is not None:
        start = as_utc(filters.start_date)
        predicates.append(lambda p: p.scheduled_for is not None and as_utc(p.scheduled_for) >= start)
    if filters.end_date is not None:
        end = as_utc(filters.end_date)
        predicates.append(lambda p: p.scheduled_for is not None and as_utc(p.scheduled_for) <= end)
    if filters.platform is not None:
        platform = filters.platform
        predicates.append(lambda p: platform in (p.platforms or []))
    if filters.tag is not None:
        tag = filters.tag
        predicates.append(lambda p: tag in (p.tags or []))
    if filters.search_term is not None:
        term = filters.search_term.lower()
        predicates.append(lambda p: term in p.title.lower() or term in p.content.lower())
    return predicates


def filter_content_posts(posts: Iterable[ContentPostRead], filters: ContentPostFilters) -> List[ContentPostRead]:
    return apply_predicates(posts, content_post_predicates(filters))


def _sort_by_schedule(posts: Iterable[ContentPostRead], descending: bool) -> List[ContentPostRead]:
    # Unscheduled posts go last in both directions and keep their order.
    scheduled = [p for p in posts if p.scheduled_for is not None]
    unscheduled = [p for p in posts if p.scheduled_for is None]
    ordered = sorted(scheduled, key=lambda p: as_utc(p.scheduled_for), reverse=descending)
    return ordered + unscheduled


def sort_content_posts(posts: Iterable[ContentPostRead], sort_by: Optional[str] = None) -> List[ContentPostRead]:
    """Order posts by ``sort_by`` (``scheduled_desc`` when omitted)."""
    posts = list(posts)
    sort_by = sort_by or DEFAULT_POST_SORT
    if sort_by == "scheduled_asc":
        return _sort_by_schedule(posts, descending=False)
    if sort_by == "scheduled_desc":
        return _sort_by_schedule(posts, descending=True)
    if sort_by == "created_asc":
        return sorted(posts, key=lambda p: as_utc(p.created_at))
    if sort_by == "created_desc":
        return sorted(posts, key=lambda p: as_utc(p.created_at), reverse=True)
    raise ValueError(f"Unknown content post sort: {sort_by}")


def query_content_posts(
    posts: Iterable[ContentPostRead], filters: Optional[ContentPostFilters] = None
) -> List[ContentPostRead]:
    filters = filters or ContentPostFilters()
    return sort_content_posts(filter_content_posts(posts, filters), filters.sort_by)


# ---------------------------------------------------------------------------
# Events and calendar
# ---------------------------------------------------------------------------

def sort_events_by_start(events: Iterable[EventRead]) -> List[EventRead]:
    """Most recent start date first."""
    return sorted(events, key=lambda e: as_utc(e.start_date), reverse=True)


def in_month(entry: CalendarEntryRead, month: int, year: int) -> bool:
    """True when ``entry`` falls in calendar ``month`` (1-12) of ``year``."""
    return entry.date.month == month and entry.date.year == year


def sort_calendar_entries(entries: Iterable[CalendarEntryRead]) -> List[CalendarEntryRead]:
    return sorted(entries, key=lambda e: e.date)
