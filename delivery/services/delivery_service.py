"""
Delivery Service Facade

Owns every collection in the system (categories, restaurants, orders) and
exposes the catalog, order lifecycle, rating and analytics operations.

Error policy:
    - Registration that breaks uniqueness or references a missing
      category/restaurant raises a DeliveryError subclass.
    - Bad ratings and queries on unknown entities are dropped silently and
      return empty results.

All operations run under a single re-entrant lock, so the order ID counter
and the collections stay consistent if the service is shared across threads.

Version: 1.0.0
"""

import logging
import threading
from typing import Any, Optional

from pydantic import ValidationError

from delivery.core.config import Settings, get_settings
from delivery.exceptions import (
    DuplicateCategoryError,
    DuplicateDishError,
    InvalidOrderError,
    NoRestaurantsError,
    OrderNotFoundError,
    UnknownCategoryError,
    UnknownRestaurantError,
)
from delivery.models import Order, Restaurant
from delivery.schemas import OrderCreate, OrderResponse, StrictOrderCreate

logger = logging.getLogger(__name__)


class DeliveryService:
    """
    In-memory catalog and order manager.

    Example:
        >>> service = DeliveryService()
        >>> service.add_category("Italian")
        >>> service.add_restaurant("Luigi's", "Italian")
        >>> service.add_dish("Pizza", "Luigi's", 9.5)
        >>> service.get_dishes_by_price(9, 10)
        {"Luigi's": ['Pizza']}
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._categories: set[str] = set()
        self._restaurants: dict[str, Restaurant] = {}
        self._orders: list[Order] = []
        self._last_order_id = 0
        self._lock = threading.RLock()

    def _restaurants_by_name(self) -> list[Restaurant]:
        return [self._restaurants[name] for name in sorted(self._restaurants)]

    def _require_restaurant(self, restaurant_name: str) -> Restaurant:
        restaurant = self._restaurants.get(restaurant_name)
        if restaurant is None:
            logger.warning(f"Unknown restaurant: {restaurant_name}")
            raise UnknownRestaurantError(restaurant_name)
        return restaurant

    # =========================================================================
    # CATEGORIES & RESTAURANTS
    # =========================================================================

    def add_category(self, category: str) -> None:
        """
        Register a new category.

        Args:
            category: Category name

        Raises:
            DuplicateCategoryError: If the category is already registered
        """
        with self._lock:
            if category in self._categories:
                logger.warning(f"Duplicate category rejected: {category}")
                raise DuplicateCategoryError(category)
            self._categories.add(category)
            logger.info(f"Category added: {category}")

    def get_categories(self) -> list[str]:
        """Return all categories in sorted order."""
        with self._lock:
            return sorted(self._categories)

    def add_restaurant(self, name: str, category: str) -> None:
        """
        Register a restaurant in an existing category.

        Re-registering a name replaces the previous restaurant, dropping its
        dishes and ratings.

        Args:
            name: Restaurant name
            category: Name of a registered category

        Raises:
            UnknownCategoryError: If the category is not registered
        """
        with self._lock:
            if category not in self._categories:
                logger.warning(f"Restaurant {name} references unknown category: {category}")
                raise UnknownCategoryError(category)
            if name in self._restaurants:
                logger.info(f"Restaurant {name} re-registered, replacing previous entry")
            self._restaurants[name] = Restaurant(name=name, category=category)
            logger.info(f"Restaurant added: {name} ({category})")

    def get_restaurants_for_category(self, category: str) -> list[str]:
        """Return restaurant names in the category, ascending. Empty if none."""
        with self._lock:
            return [
                r.name for r in self._restaurants_by_name()
                if r.category == category
            ]

    # =========================================================================
    # DISHES
    # =========================================================================

    def add_dish(self, name: str, restaurant_name: str, price: float) -> None:
        """
        Add a dish to a restaurant's menu.

        Args:
            name: Dish name
            restaurant_name: Owning restaurant
            price: Dish price

        Raises:
            UnknownRestaurantError: If the restaurant is not registered
            DuplicateDishError: If the restaurant already sells this dish
        """
        with self._lock:
            restaurant = self._require_restaurant(restaurant_name)
            if restaurant.has_dish(name):
                logger.warning(f"Duplicate dish rejected: {name} at {restaurant_name}")
                raise DuplicateDishError(name, restaurant_name)
            restaurant.add_dish(name, price)
            logger.info(f"Dish added: {name} at {restaurant_name} (${price:.2f})")

    def get_dishes_by_price(self, min_price: float, max_price: float) -> dict[str, list[str]]:
        """
        Group dishes priced in [min_price, max_price] by restaurant.

        Restaurants without a qualifying dish are omitted.

        Returns:
            Mapping restaurant name -> dish names
        """
        with self._lock:
            result: dict[str, list[str]] = {}
            for restaurant in self._restaurants_by_name():
                for dish in restaurant.sorted_dishes():
                    if dish.price_in_range(min_price, max_price):
                        result.setdefault(dish.restaurant_name, []).append(dish.name)
            return result

    def get_dishes_for_restaurant(self, restaurant_name: str) -> list[str]:
        """Return the restaurant's dish names alphabetically. Empty if unknown."""
        with self._lock:
            restaurant = self._restaurants.get(restaurant_name)
            if restaurant is None:
                logger.debug(f"No dishes: unknown restaurant {restaurant_name}")
                return []
            return [dish.name for dish in restaurant.sorted_dishes()]

    def get_dishes_by_category(self, category: str) -> list[str]:
        """
        List distinct dish names sold in a category.

        Names appear in the order first encountered, walking restaurants and
        their dishes by name.
        """
        with self._lock:
            seen: dict[str, None] = {}
            for restaurant in self._restaurants_by_name():
                if restaurant.category != category:
                    continue
                for dish in restaurant.sorted_dishes():
                    seen.setdefault(dish.name, None)
            return list(seen)

    # =========================================================================
    # ORDERS
    # =========================================================================

    def _validate_order(self, payload: dict[str, Any]) -> OrderCreate:
        schema = StrictOrderCreate if self.settings.strict_order_validation else OrderCreate
        context = {
            "window": (self.settings.delivery_window_start, self.settings.delivery_window_end)
        }
        try:
            return schema.model_validate(payload, context=context)
        except ValidationError as e:
            invalid_fields = {
                ".".join(str(part) for part in err["loc"]) or "order": err["msg"]
                for err in e.errors()
            }
            logger.warning(f"Order rejected: {invalid_fields}")
            raise InvalidOrderError("Invalid order", invalid_fields) from e

    def add_order(
        self,
        dish_names: list[str],
        quantities: list[int],
        customer_name: str,
        restaurant_name: str,
        delivery_time: int,
        delivery_distance: int,
    ) -> int:
        """
        Place an order and return its ID.

        IDs start at 1 and are never reused. Rejected orders do not consume
        an ID.

        Args:
            dish_names: Names of the ordered dishes
            quantities: Quantity for each dish, parallel to dish_names
            customer_name: Customer placing the order
            restaurant_name: Restaurant fulfilling the order
            delivery_time: Requested delivery hour
            delivery_distance: Delivery distance in kilometers

        Returns:
            The assigned order ID

        Raises:
            UnknownRestaurantError: If the restaurant is not registered
            InvalidOrderError: If the payload fails validation
        """
        data = self._validate_order({
            "dish_names": dish_names,
            "quantities": quantities,
            "customer_name": customer_name,
            "restaurant_name": restaurant_name,
            "delivery_time": delivery_time,
            "delivery_distance": delivery_distance,
        })

        with self._lock:
            restaurant = self._require_restaurant(data.restaurant_name)
            self._last_order_id += 1
            order = Order(
                id=self._last_order_id,
                category=restaurant.category,
                **data.model_dump(),
            )
            self._orders.append(order)
            logger.info(
                f"Order #{order.id} placed: {order.customer_name} at "
                f"{order.restaurant_name}, {order.delivery_time}h, {order.delivery_distance}km"
            )
            return order.id

    def schedule_delivery(self, delivery_time: int, max_distance: int, max_orders: int) -> list[int]:
        """
        Assign pending orders to a delivery slot.

        Picks, in arrival order, at most max_orders pending orders for the
        exact delivery_time whose distance does not exceed max_distance.
        Picked orders are marked assigned and never returned again.

        Returns:
            IDs of the assigned orders, in arrival order
        """
        with self._lock:
            selected: list[Order] = []
            if max_orders > 0:
                for order in self._orders:
                    if order.matches_slot(delivery_time, max_distance):
                        selected.append(order)
                        if len(selected) == max_orders:
                            break

            for order in selected:
                order.mark_assigned()

            ids = [order.id for order in selected]
            logger.info(
                f"Scheduled {len(ids)} order(s) for {delivery_time}h "
                f"within {max_distance}km: {ids}"
            )
            return ids

    def get_pending_orders(self) -> int:
        """Count orders not yet assigned."""
        with self._lock:
            return sum(1 for order in self._orders if order.is_pending)

    def get_order(self, order_id: int) -> OrderResponse:
        """
        Get a snapshot of one order.

        Raises:
            OrderNotFoundError: If no order has this ID
        """
        with self._lock:
            # IDs are dense and 1-based
            if 1 <= order_id <= len(self._orders):
                return OrderResponse.model_validate(self._orders[order_id - 1])
            raise OrderNotFoundError(order_id)

    # =========================================================================
    # RATINGS & ANALYTICS
    # =========================================================================

    def set_rating_for_restaurant(self, restaurant_name: str, rating: int) -> None:
        """
        Record a rating for a restaurant.

        Ratings outside [min_rating, max_rating] and ratings for unknown
        restaurants are discarded without error.
        """
        with self._lock:
            if not self.settings.is_valid_rating(rating):
                logger.debug(f"Rating {rating} for {restaurant_name} out of range, discarded")
                return
            restaurant = self._restaurants.get(restaurant_name)
            if restaurant is None:
                logger.debug(f"Rating for unknown restaurant {restaurant_name} discarded")
                return
            restaurant.add_rating(rating)

    def restaurants_average_rating(self) -> list[str]:
        """Rated restaurants by decreasing average rating."""
        with self._lock:
            rated = [r for r in self._restaurants_by_name() if r.has_ratings]
            rated.sort(key=lambda r: r.average_rating, reverse=True)
            return [r.name for r in rated]

    def orders_per_category(self) -> dict[str, int]:
        """
        Count orders per category.

        Every registered category is present, with 0 when it has no orders.
        """
        with self._lock:
            counts = {category: 0 for category in sorted(self._categories)}
            for order in self._orders:
                # Category captured when the order was placed
                counts[order.category] += 1
            return counts

    def best_restaurant(self) -> str:
        """
        Name of the restaurant with the highest average rating.

        Unrated restaurants rank below any rated one.

        Raises:
            NoRestaurantsError: If no restaurant is registered
        """
        with self._lock:
            restaurants = self._restaurants_by_name()
            if not restaurants:
                raise NoRestaurantsError()

            def score(restaurant: Restaurant) -> float:
                avg = restaurant.average_rating
                return float("-inf") if avg is None else avg

            return max(restaurants, key=score).name
