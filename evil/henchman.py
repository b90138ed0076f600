"""
Henchmen

Subordinate agents that build bases and carry out the villain's orders.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Henchman(Protocol):
    """Subordinate agent contract. Every command is fire-and-forget."""

    def build_secret_hq(self, location: str) -> None: ...

    def fight_enemies(self) -> None: ...

    def do_hard_things(self) -> None: ...


@dataclass
class LoggingHenchman:
    """Henchman that records and logs every order it receives."""

    name: str = "henchman"
    orders: list[str] = field(default_factory=list)
    hq_location: str | None = None

    def build_secret_hq(self, location: str) -> None:
        self.hq_location = location
        self._obey(f"build_secret_hq:{location}")

    def fight_enemies(self) -> None:
        self._obey("fight_enemies")

    def do_hard_things(self) -> None:
        self._obey("do_hard_things")

    def _obey(self, order: str) -> None:
        self.orders.append(order)
        logger.info(f"[{self.name}] {order}")
