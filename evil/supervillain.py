"""
Super Villains

The SuperVillain coordinates his collaborators (sidekick, henchmen, weapons,
ciphers, gadgets) through a sequence of staged actions. Every collaborator is
passed in or injected, so any of them can be swapped for a test double.
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Protocol, Union

from evil.cipher import Cipher
from evil.config import EvilConfig
from evil.errors import InvalidFullNameError
from evil.gadget import Gadget
from evil.henchman import Henchman
from evil.listing import FileListingStore, ListingStore, scan_listing
from evil.sidekick import Assistant
from evil.weapon import MegaWeapon

logger = logging.getLogger(__name__)

PLAN = "Take over the world!"

# Extra shots for an intense attack are drawn from [1, 3)
INTENSE_EXTRA_SHOTS = (1, 3)


class RandomSource(Protocol):
    """Anything with random.Random's randrange()."""

    def randrange(self, start: int, stop: int) -> int: ...


@dataclass(frozen=True)
class ParseError:
    """Why a name could not be turned into a SuperVillain."""

    purpose: str
    reason: str

    def __str__(self) -> str:
        return f"Parse error: purpose='{self.purpose}', reason='{self.reason}'"


@dataclass
class SuperVillain:
    """A villain, his optional sidekick and the key he shares with him."""

    first_name: str = ""
    last_name: str = ""
    sidekick: Optional[Assistant] = None
    shared_key: str = ""
    rng: RandomSource = field(default_factory=random.Random, repr=False)
    listing_store: ListingStore = field(default_factory=FileListingStore, repr=False)
    config: EvilConfig = field(default_factory=EvilConfig, repr=False)

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def full_name(self) -> str:
        """Returns the first and last names joined by a space.

        >>> SuperVillain(first_name="Lex", last_name="Luthor").full_name()
        'Lex Luthor'
        """
        return f"{self.first_name} {self.last_name}"

    def set_full_name(self, name: str) -> None:
        """
        Set first and last name from a "first last" string.

        Raises:
            InvalidFullNameError: If the name does not split into exactly
                two whitespace-separated tokens
        """
        components = name.split()
        if len(components) != 2:
            raise InvalidFullNameError()
        self.first_name, self.last_name = components

    @classmethod
    def try_from(cls, name: str, **kwargs) -> Union[SuperVillain, ParseError]:
        """
        Build a villain from a "first last" string.

        Tokens after the second one are ignored. Extra keyword arguments are
        passed to the constructor (e.g. injected collaborators).

        Returns:
            The new SuperVillain, or a ParseError if there are fewer than
            two tokens
        """
        components = name.split()
        if len(components) < 2:
            return ParseError(purpose="full_name", reason="Too few arguments")
        return cls(first_name=components[0], last_name=components[1], **kwargs)

    # -------------------------------------------------------------------------
    # Orchestration
    # -------------------------------------------------------------------------

    def attack(self, weapon: MegaWeapon, intense: bool) -> None:
        """Shoot once, or 2-3 times when the attack is intense."""
        weapon.shoot()
        shots = 1
        if intense:
            times = self.rng.randrange(*INTENSE_EXTRA_SHOTS)
            for _ in range(times):
                weapon.shoot()
            shots += times
        logger.debug(f"{self.full_name()} attacked with {shots} shot(s)")

    async def come_up_with_plan(self) -> str:
        """Think for a while without blocking the event loop, then reveal the plan."""
        await asyncio.sleep(self.config.plan_delay_seconds)
        return PLAN

    def conspire(self) -> None:
        """Fire the sidekick if he doesn't agree with the conspiracy."""
        if self.sidekick is None:
            return
        if not self.sidekick.agree():
            logger.info(f"{self.full_name()} fired his sidekick")
            self.sidekick = None

    def start_world_domination_stage1(self, henchman: Henchman, gadget: Gadget) -> None:
        """Have the henchman build the secret HQ at the first weak target."""
        if self.sidekick is None:
            return
        targets = self.sidekick.get_weak_targets(gadget)
        if targets:
            logger.info(f"Secret HQ goes to {targets[0]}")
            henchman.build_secret_hq(targets[0])

    def start_world_domination_stage2(self, henchman: Henchman) -> None:
        # Order matters: fight first, then the hard things.
        henchman.fight_enemies()
        henchman.do_hard_things()

    def tell_plans(self, secret: str, cipher: Cipher) -> None:
        """Send the sidekick the secret, ciphered with the shared key."""
        if self.sidekick is None:
            return
        ciphered_message = cipher.transform(secret, self.shared_key)
        self.sidekick.tell(ciphered_message)

    def are_there_vulnerable_locations(self) -> Optional[bool]:
        """
        Scan the configured listing for weak locations.

        Returns:
            True/False when the listing was read, None when it couldn't be
        """
        return scan_listing(self.listing_store, self.config.listing_path)

    scan_for_weak_locations = are_there_vulnerable_locations


def parse_villain(name: str, **kwargs) -> Union[SuperVillain, ParseError]:
    """Module-level shorthand for SuperVillain.try_from()."""
    return SuperVillain.try_from(name, **kwargs)
