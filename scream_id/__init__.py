"""Steam ID codec: SteamID64 <-> Steam2 <-> SteamID.

    >>> from scream_id import parse
    >>> parse("76561198403256399").render_as_steam2()
    'STEAM_0:1:221495335'
"""

from __future__ import annotations

from scream_id.core.steam_id import SteamID, parse, validate_steam2, validate_steam64
from scream_id.core.steam_id_constants import (
    AccountType,
    Instance,
    Universe,
    account_type_from_code,
    instance_from_code,
    universe_from_code,
)
from scream_id.version import __version__

__all__ = [
    "AccountType",
    "Instance",
    "SteamID",
    "Universe",
    "__version__",
    "account_type_from_code",
    "instance_from_code",
    "parse",
    "universe_from_code",
    "validate_steam2",
    "validate_steam64",
]
