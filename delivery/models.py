"""
In-Memory Domain Models

Entity records owned by DeliveryService:
- Dish: priced menu item, keyed by name within its restaurant
- Restaurant: dishes and accumulated ratings for one vendor
- Order: customer request moving from PENDING to ASSIGNED

Cross-entity links are held as names (keys into the service collections)
rather than object references.

Version: 1.0.0
"""

import enum
from dataclasses import dataclass, field
from typing import Optional


class OrderStatus(str, enum.Enum):
    """Order status workflow. ASSIGNED is terminal."""
    PENDING = "pending"
    ASSIGNED = "assigned"


@dataclass(frozen=True, order=True)
class Dish:
    """
    A priced menu item.

    Equality, hashing and ordering use the name only.
    """
    name: str
    price: float = field(compare=False)
    restaurant_name: str = field(compare=False)

    def price_in_range(self, min_price: float, max_price: float) -> bool:
        """Check if the price lies in [min_price, max_price]."""
        return min_price <= self.price <= max_price


@dataclass
class Restaurant:
    """
    A named vendor belonging to exactly one category.

    Dishes and ratings only accumulate; nothing is removed.
    """
    name: str
    category: str
    dishes: dict[str, Dish] = field(default_factory=dict)
    ratings: list[int] = field(default_factory=list)

    def has_dish(self, dish_name: str) -> bool:
        return dish_name in self.dishes

    def add_dish(self, dish_name: str, price: float) -> Dish:
        """Create a dish owned by this restaurant. Caller checks for duplicates."""
        dish = Dish(name=dish_name, price=price, restaurant_name=self.name)
        self.dishes[dish_name] = dish
        return dish

    def sorted_dishes(self) -> list[Dish]:
        return sorted(self.dishes.values())

    def add_rating(self, rating: int) -> None:
        self.ratings.append(rating)

    @property
    def has_ratings(self) -> bool:
        return bool(self.ratings)

    @property
    def average_rating(self) -> Optional[float]:
        """Mean of all ratings, or None when unrated."""
        if not self.ratings:
            return None
        return sum(self.ratings) / len(self.ratings)

    def __repr__(self):
        return f"<Restaurant {self.name} - {self.category} - {len(self.dishes)} dishes>"


@dataclass
class Order:
    """
    A delivery order.

    dish_names and quantities are parallel lists. The order only
    references its restaurant by name; category is the restaurant's
    category at the time the order was placed.
    """
    id: int
    dish_names: list[str]
    quantities: list[int]
    customer_name: str
    restaurant_name: str
    delivery_time: int
    delivery_distance: int
    status: OrderStatus = OrderStatus.PENDING
    category: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.status is OrderStatus.ASSIGNED

    @property
    def is_pending(self) -> bool:
        return self.status is OrderStatus.PENDING

    def mark_assigned(self) -> None:
        """One-way transition PENDING -> ASSIGNED."""
        self.status = OrderStatus.ASSIGNED

    def matches_slot(self, delivery_time: int, max_distance: int) -> bool:
        """Check if a pending order fits the requested hour and distance."""
        return (
            self.is_pending
            and self.delivery_time == delivery_time
            and self.delivery_distance <= max_distance
        )

    def __repr__(self):
        return f"<Order #{self.id} - {self.customer_name} - {self.restaurant_name} - {self.status.value}>"
