import pytest

from delivery.core.config import Settings
from delivery.services.delivery_service import DeliveryService


@pytest.fixture
def settings():
    """Default settings, isolated from the environment and any .env file"""
    return Settings(_env_file=None)


@pytest.fixture
def service(settings):
    return DeliveryService(settings)


@pytest.fixture
def seeded_service(service):
    """Small catalog: two categories, three restaurants, a few dishes"""
    service.add_category("Italian")
    service.add_category("Japanese")
    service.add_category("Mexican")

    service.add_restaurant("Trattoria Roma", "Italian")
    service.add_restaurant("Luigi's", "Italian")
    service.add_restaurant("Sakura", "Japanese")

    service.add_dish("Pizza", "Luigi's", 9.5)
    service.add_dish("Tiramisu", "Luigi's", 4.99)
    service.add_dish("Lasagna", "Luigi's", 12.0)
    service.add_dish("Pizza", "Trattoria Roma", 10.0)
    service.add_dish("Carbonara", "Trattoria Roma", 11.5)
    service.add_dish("Ramen", "Sakura", 10.0)
    return service
