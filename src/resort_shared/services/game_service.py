"""
Game Service - the game zone's price list.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from resort_shared.constants import Collection
from resort_shared.datetime_utils import utcnow
from resort_shared.ids import prefixed_id
from resort_shared.schemas import Game
from resort_shared.seed_data import DEFAULT_GAMES
from resort_shared.services.repository import EntityRepository
from resort_shared.store.base import DocumentStore
from resort_shared.validation import coerce_number, require_fields

_NUMERIC_FIELDS = ("rate", "minutes")


class GameService:
    def __init__(self, store: DocumentStore, clock: Callable[[], datetime] = utcnow):
        self.repository = EntityRepository(
            store, Collection.GAMES, Game, id_factory=lambda: prefixed_id("game_"), clock=clock
        )

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        require_fields(data, "name", "rate")
        return self.repository.create(
            data,
            coins=data.get("coins") or "-",
            minutes=coerce_number(data.get("minutes") or 0, "minutes"),
            rate=coerce_number(data["rate"], "rate"),
        )

    def get(self, game_id: str) -> dict[str, Any] | None:
        return self.repository.get(game_id)

    def list_all(self) -> list[dict[str, Any]]:
        return self.repository.list_all()

    def update(self, game_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        """Partial update; rate and minutes are stored as numbers."""
        updates = dict(updates)
        for field in _NUMERIC_FIELDS:
            if updates.get(field) not in (None, ""):
                updates[field] = coerce_number(updates[field], field)
        return self.repository.update(game_id, updates)

    def delete(self, game_id: str) -> None:
        self.repository.delete(game_id)

    def initialize_defaults(self) -> list[dict[str, Any]]:
        """Write (or overwrite) the default game list."""
        return self.repository.seed(DEFAULT_GAMES)
