"""
Pydantic record schemas.

Each entity declares the fields it needs on creation; every other attribute
rides along in the open extension map (``extra="allow"``) so historical
records carrying older or newer fields stay readable and writable.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from resort_shared.constants import WALK_IN_CUSTOMER_ID, CustomerStatus, OrderStatus

Number = int | float


class ResortRecord(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True, allow_inf_nan=False)

    createdAt: str | None = None
    updatedAt: str | None = None

    def to_item(self) -> dict[str, Any]:
        """Dump to a storable mapping, dropping fields nobody set."""
        return self.model_dump(exclude_none=True)


class Customer(ResortRecord):
    customerId: str | None = None
    name: str = Field(..., min_length=1)
    mobile: str = Field(..., min_length=1)
    walletAmount: Number = 0
    status: str = CustomerStatus.CHECKED_IN.value
    checkinTime: str | None = None
    checkoutTime: str | None = None


class Game(ResortRecord):
    gameId: str | None = None
    name: str = Field(..., min_length=1)
    coins: str | Number = "-"
    minutes: Number = 0
    rate: Number


class Booking(ResortRecord):
    bookingId: str | None = None
    customerId: str = WALK_IN_CUSTOMER_ID
    customerName: str = "Walk-in Customer"
    customerMobile: str = ""
    items: list[Any] = Field(..., min_length=1)
    totalAmount: Number
    totalCoins: Number = 0
    paymentMethod: str = "Cash"
    service: str = Field(..., min_length=1)
    timestamp: str | None = None


class CatalogItem(ResortRecord):
    """Menu, bakery, juice and massage items share one shape."""

    itemId: str | None = None
    name: str = Field(..., min_length=1)
    category: str | None = None
    price: Number | None = None
    description: str | None = None
    available: bool = True


class Combo(ResortRecord):
    comboId: str | None = None
    name: str = Field(..., min_length=1)
    items: list[Any] = Field(default_factory=list)
    price: Number | None = None
    active: bool = True


class ServiceOrder(ResortRecord):
    orderId: str | None = None
    customerId: str | None = None
    items: list[Any] = Field(default_factory=list)
    totalAmount: Number | None = None
    status: str = OrderStatus.PENDING.value
    paymentMethod: str | None = None
    timestamp: str | None = None


class PoolType(ResortRecord):
    typeId: str | None = None
    name: str = Field(..., min_length=1)
    description: str | None = None
    ageRange: str | None = None
    price: Number | None = None
    icon: str | None = None


class TaxSetting(ResortRecord):
    serviceId: str = Field(..., min_length=1)
    serviceName: str | None = None
    taxPercent: Number = 0
    description: str | None = None


class Room(ResortRecord):
    roomId: str | None = None
    name: str = Field(..., min_length=1)
    tamilName: str = ""
    price: Number | None = None
    size: str | None = None
    ac: bool = True
    facilities: list[str] = Field(default_factory=list)
    imageUrl: str = ""
    subImages: list[str] = Field(default_factory=list)
    descriptions: list[str] = Field(default_factory=list)


class StatusUpdateRequest(BaseModel):
    status: str = Field(..., min_length=1)


class PaymentUpdateRequest(BaseModel):
    paymentMethod: str = Field(..., min_length=1)


class TaxUpdateRequest(BaseModel):
    taxPercent: Number = Field(..., ge=0, le=100)


class UploadUrlRequest(BaseModel):
    fileName: str = Field(..., min_length=1)
    fileType: str = Field(default="image/jpeg", min_length=1)


class UploadImageRequest(BaseModel):
    image: str = Field(..., min_length=1)
    fileName: str = Field(..., min_length=1)
    fileType: str = Field(default="image/jpeg", min_length=1)
