"""Shared value types referenced by messages."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class OrderStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"


class Address(BaseModel):
    street: str
    city: str
    postal_code: str = Field(alias="postalCode")


class Customer(BaseModel):
    """A customer as seen by the order service."""

    customer_id: UUID
    name: str
    email: Optional[str] = None


class OrderLine(BaseModel):
    sku: str
    quantity: int
    unit_price: Decimal
