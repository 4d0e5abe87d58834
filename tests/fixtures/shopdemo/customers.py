"""Customer events: plain dataclasses implementing a protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


class CustomerEvent(Protocol):
    customer_id: UUID


@dataclass
class CustomerCreated(CustomerEvent):
    customer_id: UUID
    name: str


@dataclass
class CustomerUpdated(CustomerEvent):
    customer_id: UUID
    name: Optional[str] = None


@dataclass
class OtherEvent:
    reference: str
