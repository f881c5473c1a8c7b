"""
Delivery Service Factory

Provides a single, process-wide DeliveryService bound to the cached settings.

Usage:
    from delivery.services import get_delivery_service

    service = get_delivery_service()
    service.add_category("Italian")
"""

import logging
from functools import lru_cache

from delivery.core.config import get_settings
from delivery.services.delivery_service import DeliveryService

logger = logging.getLogger(__name__)


@lru_cache()
def get_delivery_service() -> DeliveryService:
    """Get the shared delivery service instance."""
    settings = get_settings()
    logger.info(f"Delivery Service: {settings.app_name} ({settings.env_mode.value} mode)")
    return DeliveryService(settings)


def reset_delivery_service() -> None:
    """
    Clear the cached service instance.

    The next call to get_delivery_service() starts from an empty catalog.
    """
    get_delivery_service.cache_clear()
    logger.debug("Delivery service cache cleared")


__all__ = [
    "get_delivery_service",
    "reset_delivery_service",
    "DeliveryService",
]
