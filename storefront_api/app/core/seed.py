"""
Demo catalog loaded into a fresh store.

``seed_store`` plays the role a migration/initialisation step plays for
a database: it fills an empty store with the categories, social
platforms and products the storefront and scheduler expect to find.
It goes through the regular table ``create`` calls, so seeded rows get
ids and timestamps exactly like rows created through the API.
"""

import logging

from ..schemas.category import CategoryCreate
from ..schemas.product import ProductCreate
from ..schemas.social import SocialPlatformCreate
from .store import Store


logger = logging.getLogger(__name__)

CATEGORIES = [
    {"name": "Electronics", "description": "Latest gadgets & devices", "icon": "laptop", "color": "#2874f0"},
    {"name": "Fashion", "description": "Clothing, shoes & accessories", "icon": "tshirt", "color": "#ff9f00"},
    {"name": "Home & Kitchen", "description": "Appliances & home essentials", "icon": "home", "color": "#388e3c"},
    {"name": "Beauty & Health", "description": "Personal care & wellness", "icon": "heartbeat", "color": "#ff6161"},
]

SOCIAL_PLATFORMS = [
    {"name": "Facebook", "icon": "facebook", "api_endpoint": "https://graph.facebook.com/v18.0"},
    {"name": "Twitter", "icon": "twitter", "api_endpoint": "https://api.twitter.com/2"},
    {"name": "Instagram", "icon": "instagram", "api_endpoint": "https://graph.instagram.com"},
    {"name": "LinkedIn", "icon": "linkedin", "api_endpoint": "https://api.linkedin.com/v2"},
    {"name": "TikTok", "icon": "tiktok", "api_endpoint": "https://open-api.tiktok.com"},
    {"name": "YouTube", "icon": "youtube", "api_endpoint": "https://www.googleapis.com/youtube/v3"},
    {"name": "Pinterest", "icon": "pinterest", "api_endpoint": "https://api.pinterest.com/v5"},
]

PRODUCTS = [
    {
        "name": "Smartphone X Pro",
        "description": "Latest flagship smartphone with high-end specifications",
        "price": 15999,
        "discounted_price": 12999,
        "discount_percentage": 18,
        "category_id": 1,
        "brand": "TechX",
        "image_url": "https://images.unsplash.com/photo-1598327105666-5b89351aff97",
        "rating": 4.5,
        "review_count": 2345,
        "delivery_time": "Free delivery by tomorrow",
        "specifications": {"ram": "8GB", "storage": "128GB", "display": "6.5-inch AMOLED", "camera": "108MP"},
    },
    {
        "name": "Laptop ProBook",
        "description": "Powerful laptop for professionals and creatives",
        "price": 64999,
        "discounted_price": 52490,
        "discount_percentage": 19,
        "category_id": 1,
        "brand": "TechBook",
        "image_url": "https://images.unsplash.com/photo-1603302576837-37561b2e2302",
        "rating": 4.3,
        "review_count": 1120,
        "delivery_time": "Free delivery in 2 days",
        "specifications": {"processor": "Intel i7", "ram": "16GB", "storage": "512GB SSD", "display": "15.6-inch 4K"},
    },
    {
        "name": "Smart Watch Ultra",
        "description": "Premium smartwatch with health monitoring features",
        "price": 35900,
        "discounted_price": 32900,
        "discount_percentage": 8,
        "category_id": 1,
        "brand": "WatchTech",
        "image_url": "https://images.unsplash.com/photo-1579586337278-3befd40fd17a",
        "rating": 4.7,
        "review_count": 3789,
        "delivery_time": "Free delivery by tomorrow",
        "specifications": {"display": "1.8-inch AMOLED", "battery": "48 hours", "waterproof": True},
    },
    {
        "name": "Men's Formal Shirt",
        "description": "Premium cotton formal shirt for professional occasions",
        "price": 1499,
        "discounted_price": 799,
        "discount_percentage": 47,
        "category_id": 2,
        "brand": "FashionX",
        "image_url": "https://images.unsplash.com/photo-1525507119028-ed4c629a60a3",
        "rating": 4.1,
        "review_count": 945,
        "delivery_time": "Free delivery in 2 days",
        "specifications": {"material": "100% Cotton", "fit": "Regular", "color": "Blue", "size": "L"},
    },
    {
        "name": "Smart TV 55-inch 4K Ultra HD",
        "description": "4K Ultra HD Smart LED TV with HDR and voice control",
        "price": 56990,
        "discounted_price": 42990,
        "discount_percentage": 25,
        "category_id": 3,
        "brand": "ViewTech",
        "image_url": "https://images.unsplash.com/photo-1564275124027-9e6e2a3bbe0c",
        "rating": 4.4,
        "review_count": 2134,
        "delivery_time": "Free delivery in 3-5 days",
        "specifications": {"resolution": "4K Ultra HD", "display": "LED", "smart": True, "hdmi": 3},
    },
    {
        "name": "Wireless Noise Cancelling Headphones",
        "description": "Premium wireless headphones with active noise cancellation",
        "price": 24990,
        "discounted_price": 18990,
        "discount_percentage": 24,
        "category_id": 1,
        "brand": "SoundX",
        "image_url": "https://images.unsplash.com/photo-1610945415295-d9bbf067e59c",
        "rating": 4.6,
        "review_count": 3421,
        "delivery_time": "Free delivery by tomorrow",
        "specifications": {"type": "Over-ear", "batteryLife": "30 hours", "anc": True, "bluetooth": "5.0"},
    },
]


def seed_store(store: Store) -> None:
    """Load the demo catalog into ``store``.

    Only meant for an empty store: seeded products refer to categories
    by the ids they receive here (1‑4).
    """
    for category in CATEGORIES:
        store.categories.create(CategoryCreate(**category))
    for platform in SOCIAL_PLATFORMS:
        store.social_platforms.create(SocialPlatformCreate(**platform))
    for product in PRODUCTS:
        store.products.create(ProductCreate(**product))
    logger.info(
        "Seeded store with %d categories, %d platforms and %d products",
        len(store.categories),
        len(store.social_platforms),
        len(store.products),
    )
