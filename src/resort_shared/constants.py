"""
Application constants and enums.
"""

from enum import Enum


class Collection(str, Enum):
    """Logical collection names; physical tables add the configured prefix."""

    CUSTOMERS = "Customers"
    GAMES = "Games"
    BOOKINGS = "Bookings"
    MENU_ITEMS = "MenuItems"
    COMBOS = "Combos"
    RESTAURANT_ORDERS = "RestaurantOrders"
    BAKERY_ITEMS = "BakeryItems"
    BAKERY_ORDERS = "BakeryOrders"
    JUICE_ITEMS = "JuiceItems"
    JUICE_ORDERS = "JuiceOrders"
    MASSAGE_ITEMS = "MassageItems"
    MASSAGE_ORDERS = "MassageOrders"
    POOL_TYPES = "PoolTypes"
    POOL_ORDERS = "PoolOrders"
    TAX_SETTINGS = "TaxSettings"
    ROOMS = "Rooms"


class ServiceLabel(str, Enum):
    """Revenue labels used by the admin dashboard."""

    GAMES = "Games"
    RESTAURANT = "Restaurant"
    BAKERY = "Bakery"
    JUICE = "Juice"
    MASSAGE = "Massage"
    POOL = "Pool"


class CustomerStatus(str, Enum):
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    SERVED = "served"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def all_values(cls) -> set:
        return {member.value for member in cls}


# Secondary index names
MOBILE_INDEX = "mobile-index"
CUSTOMER_TIMESTAMP_INDEX = "customerId-timestamp-index"

# Field names shared across every record
CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"

WALK_IN_CUSTOMER_ID = "walk-in"
ROOM_IMAGE_PREFIX = "rooms"
