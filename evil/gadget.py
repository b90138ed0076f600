"""
Gadgets

Opaque equipment handed to a sidekick. The villain never operates a gadget
himself; he only passes it along so the sidekick can derive targets from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Gadget(Protocol):
    """Equipment capability."""

    def do_stuff(self) -> None: ...


class GadgetDummy:
    """Inert gadget for when the equipment does not matter."""

    def do_stuff(self) -> None:
        pass


@dataclass
class TargetingGadget:
    """Gadget that has already located some weak targets."""

    targets: list[str] = field(default_factory=list)
    uses: int = 0

    def do_stuff(self) -> None:
        self.uses += 1
