"""
Service container built once per application from the store handles.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from resort_shared.config import AppConfig
from resort_shared.constants import Collection, OrderStatus
from resort_shared.datetime_utils import utcnow
from resort_shared.schemas import CatalogItem, Combo, PoolType
from resort_shared.services.analytics_service import RevenueAggregator
from resort_shared.services.booking_service import BookingService
from resort_shared.services.catalog_service import CatalogService
from resort_shared.services.customer_service import CustomerService
from resort_shared.services.game_service import GameService
from resort_shared.services.order_service import OrderService
from resort_shared.services.room_service import RoomService
from resort_shared.services.tax_service import TaxService
from resort_shared.store.base import DocumentStore, ObjectStore


@dataclass
class ResortServices:
    store: DocumentStore
    object_store: ObjectStore
    customers: CustomerService
    games: GameService
    bookings: BookingService
    tax: TaxService
    rooms: RoomService
    analytics: RevenueAggregator
    # keyed by URL resource name, e.g. "bakery-items"
    catalogs: dict[str, CatalogService] = field(default_factory=dict)
    orders: dict[str, OrderService] = field(default_factory=dict)


def build_services(
    store: DocumentStore,
    object_store: ObjectStore,
    config: AppConfig,
    clock: Callable[[], datetime] = utcnow,
) -> ResortServices:
    catalogs = {
        "menu": CatalogService(store, Collection.MENU_ITEMS, CatalogItem, "menu_", clock),
        "combos": CatalogService(store, Collection.COMBOS, Combo, "combo_", clock),
        "bakery-items": CatalogService(store, Collection.BAKERY_ITEMS, CatalogItem, "bakery_", clock),
        "juice-items": CatalogService(store, Collection.JUICE_ITEMS, CatalogItem, "juice_", clock),
        "massage-items": CatalogService(
            store, Collection.MASSAGE_ITEMS, CatalogItem, "massage_", clock
        ),
        "pool-types": CatalogService(store, Collection.POOL_TYPES, PoolType, "pool_type_", clock),
    }
    orders = {
        "restaurant-orders": OrderService(
            store, Collection.RESTAURANT_ORDERS, "order_", stamp_timestamp=True, clock=clock
        ),
        "bakery-orders": OrderService(
            store,
            Collection.BAKERY_ORDERS,
            "bakery_order_",
            forced_status=OrderStatus.PENDING,
            clock=clock,
        ),
        "juice-orders": OrderService(
            store,
            Collection.JUICE_ORDERS,
            "juice_order_",
            forced_status=OrderStatus.PENDING,
            clock=clock,
        ),
        "massage-orders": OrderService(
            store,
            Collection.MASSAGE_ORDERS,
            "massage_order_",
            forced_status=OrderStatus.PENDING,
            clock=clock,
        ),
        "pool-orders": OrderService(
            store,
            Collection.POOL_ORDERS,
            "pool_order_",
            forced_status=OrderStatus.CONFIRMED,
            stamp_timestamp=True,
            clock=clock,
        ),
    }
    return ResortServices(
        store=store,
        object_store=object_store,
        customers=CustomerService(store, clock),
        games=GameService(store, clock),
        bookings=BookingService(store, clock),
        tax=TaxService(store, clock),
        rooms=RoomService(store, object_store, config.upload_url_expires_seconds, clock),
        analytics=RevenueAggregator(store, config.timezone),
        catalogs=catalogs,
        orders=orders,
    )
