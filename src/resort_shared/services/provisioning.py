"""
Create missing collections and seed the ones that were just created.
"""

from __future__ import annotations

from typing import Any

from resort_shared.constants import Collection
from resort_shared.logging_config import get_logger
from resort_shared.seed_data import DEFAULT_MENU_ITEMS, DEFAULT_POOL_TYPES, DEFAULT_TAX_SETTINGS
from resort_shared.services.registry import ResortServices
from resort_shared.store.collections import COLLECTIONS

logger = get_logger(__name__)


def provision(services: ResortServices) -> dict[str, Any]:
    """
    Ensure every collection exists; seed defaults into new ones only.

    Existing collections are never reseeded, so running this twice is safe.

    Returns:
        ``{"created": [collection names], "seeded": {collection name: count}}``
    """
    created = services.store.ensure_collections(COLLECTIONS.values())

    seeders = {
        Collection.GAMES: services.games.initialize_defaults,
        Collection.MENU_ITEMS: lambda: services.catalogs["menu"].seed(DEFAULT_MENU_ITEMS),
        Collection.POOL_TYPES: lambda: services.catalogs["pool-types"].seed(DEFAULT_POOL_TYPES),
        Collection.TAX_SETTINGS: lambda: services.tax.seed(DEFAULT_TAX_SETTINGS),
        Collection.ROOMS: services.rooms.initialize_defaults,
    }

    seeded = {}
    for collection in created:
        seeder = seeders.get(collection)
        if seeder is not None:
            seeded[collection.value] = len(seeder())

    logger.info(
        "Provisioning complete",
        extra={"created": [c.value for c in created], "seeded": seeded},
    )
    return {"created": [c.value for c in created], "seeded": seeded}
