"""
Order Flow Simulation Script

Seeds a random catalog, places random orders, rates restaurants and
schedules deliveries hour by hour, then prints a summary report.
Run from project root: python scripts/simulate.py

Version: 1.0.0
"""

import sys
import os
import random
import argparse
from datetime import datetime

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from delivery.core.config import get_settings, setup_logging
from delivery.exceptions import DeliveryError
from delivery.services import get_delivery_service

# Sample data
CATALOG = {
    "Italian": {
        "Luigi's": [("Pizza Margherita", 9.50), ("Pasta Carbonara", 13.99), ("Tiramisu", 7.99)],
        "Trattoria Roma": [("Pizza Margherita", 11.00), ("Lasagna", 14.50)],
    },
    "Japanese": {
        "Sakura": [("Salmon Nigiri", 6.50), ("Ramen", 12.00), ("Miso Soup", 3.99)],
    },
    "Mexican": {
        "El Toro": [("Tacos", 8.99), ("Burrito", 10.49), ("Nachos", 6.99)],
    },
    "Vegan": {},
}
FIRST_NAMES = ["John", "Jane", "Mike", "Sarah", "Tom", "Emma", "David", "Lisa", "Chris", "Amy"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis"]


def seed_catalog(service) -> None:
    """Register every category, restaurant and dish in CATALOG."""
    for category, restaurants in CATALOG.items():
        service.add_category(category)
        for restaurant_name, dishes in restaurants.items():
            service.add_restaurant(restaurant_name, category)
            for dish_name, price in dishes:
                service.add_dish(dish_name, restaurant_name, price)


def generate_random_order(service, hours: range) -> dict:
    """Build add_order arguments for a random restaurant."""
    restaurant_name = random.choice(
        [name for restaurants in CATALOG.values() for name in restaurants]
    )
    menu = service.get_dishes_for_restaurant(restaurant_name)
    dishes = random.sample(menu, k=random.randint(1, min(3, len(menu))))
    return {
        "dish_names": dishes,
        "quantities": [random.randint(1, 3) for _ in dishes],
        "customer_name": f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}",
        "restaurant_name": restaurant_name,
        "delivery_time": random.choice(hours),
        "delivery_distance": random.randint(0, 12),
    }


def run_simulation(total_orders: int, max_distance: int, batch_size: int, seed: int) -> None:
    """Drive the full order lifecycle and print a report."""
    random.seed(seed)
    settings = get_settings()
    service = get_delivery_service()

    print("=" * 70)
    print(f"🚀 {settings.app_name.upper()} SIMULATION")
    print("=" * 70)
    print(f"⏰ Timestamp: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"📦 Orders: {total_orders} | Max distance: {max_distance}km | Batch: {batch_size}")
    print("=" * 70)

    seed_catalog(service)
    print(f"\n📋 Categories: {', '.join(service.get_categories())}")

    hours = settings.delivery_hours
    for _ in range(total_orders):
        try:
            service.add_order(**generate_random_order(service, hours))
        except DeliveryError as e:
            print(f"   ❌ Order rejected: {e.message}")

    for restaurant_names in CATALOG.values():
        for restaurant_name in restaurant_names:
            for _ in range(random.randint(0, 5)):
                # Includes out-of-range values, which are discarded
                service.set_rating_for_restaurant(restaurant_name, random.randint(-1, 6))

    print(f"\n🚚 SCHEDULING (pending: {service.get_pending_orders()})")
    print("-" * 70)
    for hour in hours:
        assigned = service.schedule_delivery(hour, max_distance, batch_size)
        if assigned:
            print(f"   {hour:02d}:00 → {assigned}")

    print(f"\n📊 RESULTS:")
    print(f"   Still pending: {service.get_pending_orders()}")
    for category, count in service.orders_per_category().items():
        print(f"   {category:<12} {count} order(s)")

    print(f"\n⭐ RATINGS:")
    ranking = service.restaurants_average_rating()
    print(f"   Ranking: {ranking or 'no ratings yet'}")
    try:
        print(f"   Best: {service.best_restaurant()}")
    except DeliveryError as e:
        print(f"   ⚠️ {e.message}")

    print(f"\n💰 DISHES UNDER $10:")
    for restaurant_name, dishes in service.get_dishes_by_price(0, 10).items():
        print(f"   {restaurant_name}: {', '.join(dishes)}")

    print("\n" + "=" * 70)
    print("✅ SIMULATION COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Order Flow Simulation Script")
    parser.add_argument("--orders", type=int, default=50, help="Number of orders")
    parser.add_argument("--max-distance", type=int, default=8, help="Max delivery distance (km)")
    parser.add_argument("--batch", type=int, default=3, help="Max orders assigned per hour")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Show service logs")
    args = parser.parse_args()

    if args.verbose:
        setup_logging()

    run_simulation(args.orders, args.max_distance, args.batch, args.seed)
