"""Weapons the villain can attack with."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class MegaWeapon(Protocol):
    """A weapon with a single discharge operation, safe to call repeatedly."""

    def shoot(self) -> None: ...


class CountingWeapon:
    """Weapon that keeps a tally of how often it was fired."""

    def __init__(self, name: str = "mega weapon") -> None:
        self.name = name
        self.shots = 0

    def shoot(self) -> None:
        self.shots += 1
        logger.debug(f"{self.name} fired (shot #{self.shots})")
