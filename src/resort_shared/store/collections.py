"""
Catalogue of document collections: key attribute and secondary indexes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from resort_shared.constants import CUSTOMER_TIMESTAMP_INDEX, MOBILE_INDEX, Collection


@dataclass(frozen=True)
class IndexSpec:
    name: str
    partition_key: str
    sort_key: str | None = None


@dataclass(frozen=True)
class CollectionSpec:
    collection: Collection
    key: str
    indexes: tuple[IndexSpec, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.collection.value

    def index(self, name: str) -> IndexSpec:
        for index in self.indexes:
            if index.name == name:
                return index
        raise KeyError(f"{self.name} has no index '{name}'")

    def key_of(self, value) -> dict:
        return {self.key: value}


_CUSTOMER_TIMESTAMP = IndexSpec(CUSTOMER_TIMESTAMP_INDEX, "customerId", "timestamp")

COLLECTIONS: dict[Collection, CollectionSpec] = {
    spec.collection: spec
    for spec in (
        CollectionSpec(
            Collection.CUSTOMERS, "customerId", (IndexSpec(MOBILE_INDEX, "mobile"),)
        ),
        CollectionSpec(Collection.GAMES, "gameId"),
        CollectionSpec(Collection.BOOKINGS, "bookingId", (_CUSTOMER_TIMESTAMP,)),
        CollectionSpec(Collection.MENU_ITEMS, "itemId"),
        CollectionSpec(Collection.COMBOS, "comboId"),
        CollectionSpec(Collection.RESTAURANT_ORDERS, "orderId", (_CUSTOMER_TIMESTAMP,)),
        CollectionSpec(Collection.BAKERY_ITEMS, "itemId"),
        CollectionSpec(Collection.BAKERY_ORDERS, "orderId"),
        CollectionSpec(Collection.JUICE_ITEMS, "itemId"),
        CollectionSpec(Collection.JUICE_ORDERS, "orderId"),
        CollectionSpec(Collection.MASSAGE_ITEMS, "itemId"),
        CollectionSpec(Collection.MASSAGE_ORDERS, "orderId"),
        CollectionSpec(Collection.POOL_TYPES, "typeId"),
        CollectionSpec(Collection.POOL_ORDERS, "orderId"),
        CollectionSpec(Collection.TAX_SETTINGS, "serviceId"),
        CollectionSpec(Collection.ROOMS, "roomId"),
    )
}


def get_spec(collection: Collection) -> CollectionSpec:
    return COLLECTIONS[Collection(collection)]
