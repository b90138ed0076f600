#!/usr/bin/env python3
"""
MCP Super Villain Server

Exposes the villain's staged operations as MCP tools: VillainParse,
VillainPlan, VillainAttack, VillainTellPlans and VillainScan.
Settings come from [tool.evil] in the project's pyproject.toml.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from evil import (
    CountingWeapon,
    EvilConfig,
    FileListingStore,
    GadgetDummy,
    ParseError,
    ShiftCipher,
    Sidekick,
    SuperVillain,
    load_config,
    setup_logging,
)

logger = logging.getLogger(__name__)

mcp = FastMCP("Super Villain")


def _find_project_root(start_path: Path) -> Optional[Path]:
    """Walk up from start_path to find a project root.

    Looks for common project markers (.git, pyproject.toml).
    """
    current = start_path.resolve()

    while current != current.parent:
        if (current / ".git").exists():
            return current
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    return None


def get_working_dir() -> Path:
    """Get the directory settings and relative listing paths resolve against.

    Priority:
    1. EVIL_WORKING_DIR environment variable (explicit override)
    2. Detect project root from PWD/cwd
    3. Fall back to PWD or cwd
    """
    if os.environ.get("EVIL_WORKING_DIR"):
        return Path(os.environ["EVIL_WORKING_DIR"])

    start = Path(os.environ.get("PWD", os.getcwd()))
    project_root = _find_project_root(start)

    return project_root if project_root else start


def get_config() -> EvilConfig:
    """Load settings for the current project. Not cached."""
    return load_config(get_working_dir())


def _villain(name: str, **kwargs) -> SuperVillain | ParseError:
    config = get_config()
    return SuperVillain.try_from(
        name,
        config=config,
        listing_store=FileListingStore(base_dir=get_working_dir()),
        **kwargs,
    )


@mcp.tool()
def VillainParse(name: str) -> dict:
    """
    Parse a "first last" name into a villain.

    Args:
        name: Full name; tokens after the second are ignored

    Returns:
        first_name, last_name and full_name, or an error message
    """
    villain = _villain(name)
    if isinstance(villain, ParseError):
        return {"error": str(villain)}

    return {
        "first_name": villain.first_name,
        "last_name": villain.last_name,
        "full_name": villain.full_name(),
    }


@mcp.tool()
async def VillainPlan() -> dict:
    """
    Let a villain come up with his plan.

    Returns:
        The plan
    """
    villain = SuperVillain(config=get_config())
    return {"plan": await villain.come_up_with_plan()}


@mcp.tool()
def VillainAttack(intense: bool = False) -> dict:
    """
    Attack with a mega weapon.

    Args:
        intense: Fire 2-3 times instead of once

    Returns:
        How many shots were fired
    """
    weapon = CountingWeapon()
    SuperVillain(config=get_config()).attack(weapon, intense)
    return {"shots": weapon.shots}


@mcp.tool()
def VillainTellPlans(
    name: str,
    secret: str,
    shared_key: str,
    loyal: bool = True,
) -> dict:
    """
    Recruit a sidekick, check his loyalty, then tell him the plans.

    Args:
        name: Villain's full name
        secret: Plan to share; only the ciphered text is relayed
        shared_key: Key shared between villain and sidekick
        loyal: Whether the sidekick agrees with the conspiracy

    Returns:
        The ciphered messages the sidekick received and whether he was kept
    """
    sidekick = Sidekick(GadgetDummy(), loyal=loyal)
    villain = _villain(name, sidekick=sidekick, shared_key=shared_key)
    if isinstance(villain, ParseError):
        return {"error": str(villain)}

    villain.conspire()
    villain.tell_plans(secret, ShiftCipher())

    return {
        "relayed": list(sidekick.messages),
        "sidekick": villain.sidekick is not None,
    }


@mcp.tool()
def VillainScan(listing_path: Optional[str] = None) -> dict:
    """
    Scan a listing of locations for weak ones.

    Args:
        listing_path: Listing to scan (default: configured listing_path)

    Returns:
        vulnerable: true/false, or null if the listing couldn't be read
    """
    config = get_config()
    if listing_path:
        config = config.model_copy(update={"listing_path": listing_path})

    villain = SuperVillain(
        config=config,
        listing_store=FileListingStore(base_dir=get_working_dir()),
    )
    return {"vulnerable": villain.are_there_vulnerable_locations()}


if __name__ == "__main__":
    setup_logging(get_working_dir() / get_config().log_dir)
    mcp.run()
