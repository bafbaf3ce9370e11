"""Registries that build game items by name, difficulty or at random."""

from __future__ import annotations

import random
from typing import Callable

from .constants import NUM_OF_DIFFICULTY_LEVELS

Creator = Callable[[tuple[float, float]], object]


class Factory:
    """Holds creators for named items, enemies and gifts."""

    def __init__(self) -> None:
        self._named: dict[str, Creator] = {}
        self._enemies: list[Creator] = []
        self._gifts: list[Creator] = []

    def register(self, name: str, creator: Creator) -> bool:
        """Register a creator under ``name``; an existing entry is kept."""
        self._named.setdefault(name, creator)
        return True

    def create(self, name: str, position):
        """Build the item registered as ``name``, or None if unknown."""
        creator = self._named.get(name)
        return None if creator is None else creator(position)

    def register_enemy(self, creator: Creator) -> bool:
        self._enemies.append(creator)
        return True

    def create_enemy(self, difficulty: int, position):
        """Build the enemy for a difficulty; None outside the known levels."""
        if 0 <= difficulty < NUM_OF_DIFFICULTY_LEVELS:
            return self._enemies[difficulty](position)
        return None

    def register_gift(self, creator: Creator) -> bool:
        self._gifts.append(creator)
        return True

    def create_gift(self, position, rng=None):
        """Build a randomly chosen gift."""
        if not self._gifts:
            raise ValueError("no gifts registered")
        rng = rng if rng is not None else random
        choice = rng.randrange(len(self._gifts))
        if choice < NUM_OF_DIFFICULTY_LEVELS:
            return self._gifts[choice](position)
        return None


FACTORY = Factory()