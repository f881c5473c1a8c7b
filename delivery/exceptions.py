"""
Custom exception classes for the delivery service.

Hard failures (uniqueness and referential-integrity violations) are raised
as subclasses of DeliveryError. Queries on unknown entities and malformed
ratings do not raise; they return empty results instead.
"""

from typing import Optional


class DeliveryError(Exception):
    """Base exception for all delivery service errors"""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DuplicateCategoryError(DeliveryError):
    """Raised when a category is registered twice"""

    def __init__(self, category: str):
        super().__init__(
            f"Category already present: {category}",
            {"category": category},
        )


class UnknownCategoryError(DeliveryError):
    """Raised when a restaurant references an unregistered category"""

    def __init__(self, category: str):
        super().__init__(
            f"Category not present: {category}",
            {"category": category},
        )


class UnknownRestaurantError(DeliveryError):
    """Raised when an operation needs a restaurant that does not exist"""

    def __init__(self, restaurant_name: str):
        super().__init__(
            f"Restaurant not present: {restaurant_name}",
            {"restaurant_name": restaurant_name},
        )


class DuplicateDishError(DeliveryError):
    """Raised when a restaurant already sells a dish with the same name"""

    def __init__(self, dish_name: str, restaurant_name: str):
        super().__init__(
            f"Dish already present in {restaurant_name}: {dish_name}",
            {"dish_name": dish_name, "restaurant_name": restaurant_name},
        )


class NoRestaurantsError(DeliveryError):
    """Raised when a ranking is requested and no restaurant is registered"""

    def __init__(self):
        super().__init__("No restaurants registered")


class OrderNotFoundError(DeliveryError):
    """Raised when an order ID was never assigned"""

    def __init__(self, order_id: int):
        super().__init__(f"Order not found: {order_id}", {"order_id": order_id})


class InvalidOrderError(DeliveryError):
    """Raised when an order payload fails validation"""

    def __init__(self, message: str, invalid_fields: Optional[dict] = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)
