"""
Evil - Staged orchestration for a Super Villain.

This package models a villain who coordinates a sidekick, henchmen, weapons,
ciphers and gadgets through a sequence of staged actions.
"""

from evil.errors import (
    EvilError,
    InvalidFullNameError,
    ConfigError,
)
from evil.config import (
    EvilConfig,
    load_config,
    load_config_from_pyproject,
)
from evil.logs import setup_logging
from evil.gadget import (
    Gadget,
    GadgetDummy,
    TargetingGadget,
)
from evil.henchman import (
    Henchman,
    LoggingHenchman,
)
from evil.weapon import (
    MegaWeapon,
    CountingWeapon,
)
from evil.cipher import (
    Cipher,
    ShiftCipher,
)
from evil.sidekick import Assistant, Sidekick
from evil.listing import (
    ListingStore,
    FileListingStore,
    has_weak_line,
    scan_listing,
)
from evil.supervillain import (
    SuperVillain,
    ParseError,
    RandomSource,
    PLAN,
    parse_villain,
)

__all__ = [
    # errors
    "EvilError",
    "InvalidFullNameError",
    "ConfigError",
    # config
    "EvilConfig",
    "load_config",
    "load_config_from_pyproject",
    # logs
    "setup_logging",
    # collaborators
    "Gadget",
    "GadgetDummy",
    "TargetingGadget",
    "Henchman",
    "LoggingHenchman",
    "MegaWeapon",
    "CountingWeapon",
    "Cipher",
    "ShiftCipher",
    "Assistant",
    "Sidekick",
    # listing
    "ListingStore",
    "FileListingStore",
    "has_weak_line",
    "scan_listing",
    # supervillain
    "SuperVillain",
    "ParseError",
    "RandomSource",
    "PLAN",
    "parse_villain",
]
