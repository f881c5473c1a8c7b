"""
Pydantic Schemas for Order Validation

OrderCreate coerces the raw add_order arguments into typed fields without
enforcing business ranges. StrictOrderCreate layers the delivery-window,
distance and line-length checks on top; the delivery window bounds are read
from the validation context so they follow Settings.

Version: 1.0.0
"""

from typing import List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from delivery.models import OrderStatus


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class OrderCreate(BaseModel):
    """Request schema for placing an order."""
    dish_names: List[str] = Field(..., examples=[["Pizza", "Tiramisu"]])
    quantities: List[int] = Field(..., examples=[[2, 1]])
    customer_name: str = Field(..., examples=["John Doe"])
    restaurant_name: str = Field(..., examples=["Luigi's"])
    delivery_time: int = Field(..., examples=[19])
    delivery_distance: int = Field(..., examples=[3])


class StrictOrderCreate(OrderCreate):
    """
    Order schema with business-rule validation.

    Expects ``context={"window": (start, end)}`` when validated; falls back
    to the 8-23 window otherwise.
    """
    delivery_distance: int = Field(..., ge=0, examples=[3])

    @field_validator("delivery_time")
    @classmethod
    def validate_delivery_time(cls, v: int, info: ValidationInfo) -> int:
        start, end = (info.context or {}).get("window", (8, 23))
        if not start <= v <= end:
            raise ValueError(f"Delivery time must be between {start} and {end}")
        return v

    @field_validator("quantities")
    @classmethod
    def validate_quantities(cls, v: List[int]) -> List[int]:
        if any(q < 1 for q in v):
            raise ValueError("Quantities must be at least 1")
        return v

    @model_validator(mode="after")
    def validate_lines(self) -> "StrictOrderCreate":
        if len(self.dish_names) != len(self.quantities):
            raise ValueError("dish_names and quantities must have the same length")
        return self


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class OrderResponse(BaseModel):
    """Read-only view of a single order."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    dish_names: List[str]
    quantities: List[int]
    customer_name: str
    restaurant_name: str
    delivery_time: int
    delivery_distance: int
    status: OrderStatus
    delivered: bool
    category: Optional[str] = None
