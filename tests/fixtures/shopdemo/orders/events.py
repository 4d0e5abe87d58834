"""Order events."""

from __future__ import annotations

from abc import ABC
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from shopdemo.models import Customer, OrderLine, OrderStatus


class OrderEventBase(BaseModel, ABC):
    order_id: UUID


class OrderCreated(OrderEventBase):
    customer: Customer
    lines: List[OrderLine]
    status: OrderStatus
    total: Decimal
    created_at: datetime
    tags: Dict[str, str] = {}
    note: Optional[str] = None


class _AuditRecord(BaseModel):
    entry: str
