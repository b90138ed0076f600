"""
Sidekicks

The villain's assistant: answers the loyalty question, picks weak targets
from a gadget, and receives (ciphered) messages.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from evil.gadget import Gadget

logger = logging.getLogger(__name__)


@runtime_checkable
class Assistant(Protocol):
    """What a villain needs from his sidekick."""

    def agree(self) -> bool: ...

    def get_weak_targets(self, gadget: Gadget) -> list[str]: ...

    def tell(self, message: str) -> None: ...


class Sidekick:
    """Assistant owned by a SuperVillain."""

    def __init__(
        self,
        gadget: Gadget,
        loyal: bool = True,
        weak_targets: Optional[list[str]] = None,
    ) -> None:
        self.gadget = gadget
        self.loyal = loyal
        self.weak_targets = list(weak_targets or [])
        self.messages: list[str] = []

    def agree(self) -> bool:
        """Loyalty check."""
        return self.loyal

    def get_weak_targets(self, gadget: Gadget) -> list[str]:
        """
        Derive an ordered list of weak targets using the given gadget.

        Gadgets that carry their own ``targets`` win over the sidekick's
        fixed list. Returns a fresh list every call.
        """
        targets = getattr(gadget, "targets", None)
        if targets:
            return list(targets)
        return list(self.weak_targets)

    def tell(self, message: str) -> None:
        """Relay a message to the sidekick."""
        self.messages.append(message)
        logger.debug(f"Sidekick received a message ({len(message)} chars)")
