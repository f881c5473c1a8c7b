"""
                Food Delivery Catalog

In-memory catalog and order service for a food-delivery platform:
categories, restaurants, dishes, orders, ratings and analytics.

Version: 1.0.0
License: MIT
"""

from delivery.exceptions import (
    DeliveryError,
    DuplicateCategoryError,
    DuplicateDishError,
    InvalidOrderError,
    NoRestaurantsError,
    OrderNotFoundError,
    UnknownCategoryError,
    UnknownRestaurantError,
)
from delivery.services import DeliveryService, get_delivery_service

__version__ = "1.0.0"

__all__ = [
    "DeliveryService",
    "get_delivery_service",
    "DeliveryError",
    "DuplicateCategoryError",
    "DuplicateDishError",
    "InvalidOrderError",
    "NoRestaurantsError",
    "OrderNotFoundError",
    "UnknownCategoryError",
    "UnknownRestaurantError",
]
