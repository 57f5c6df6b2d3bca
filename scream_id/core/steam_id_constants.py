# scream_id/core/steam_id_constants.py

"""Constants for the Steam ID encodings.

Contains the bit layout of the packed 64-bit form, the Steam2 prefixes, the
universe/account type/instance enums and the code tables used to map raw
integer fields back onto those enums.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "ACCOUNT_ID_MASK",
    "ACCOUNT_INSTANCE_MASK",
    "ACCOUNT_TYPE_MASK",
    "ACCOUNT_TYPE_SHIFT",
    "AccountType",
    "INSTANCE_SHIFT",
    "Instance",
    "STEAM2_PREFIXES",
    "STEAM2_SEPARATOR",
    "STEAM64_LENGTH",
    "UNIVERSE_SHIFT",
    "Universe",
    "account_type_from_code",
    "instance_from_code",
    "universe_from_code",
]


# ===== ENUMS =====


class Universe(IntEnum):
    """Steam Universe identifiers.

    Defines the Steam environment an account belongs to.
    """

    Invalid = 0
    Public = 1
    Beta = 2
    Internal = 3
    Dev = 4


class AccountType(IntEnum):
    """Kind of entity a Steam ID names."""

    Invalid = 0
    Individual = 1
    Multiseat = 2
    GameServer = 3
    AnonGameServer = 4
    Pending = 5
    ContentServer = 6
    Clan = 7
    Chat = 8
    P2PSuperSeeder = 9
    AnonUser = 10


class Instance(IntEnum):
    """Client instance of an account.

    The packed field is 20 bits wide, only these four values carry names.
    """

    All = 0
    Desktop = 1
    Console = 2
    Web = 4


# ===== BIT LAYOUT =====

ACCOUNT_ID_MASK: int = 0xFFFFFFFF
"""Low 32 bits: the account number."""

ACCOUNT_INSTANCE_MASK: int = 0x000FFFFF
"""Bits 32-51 after shifting: the instance."""

ACCOUNT_TYPE_MASK: int = 0xF
"""Bits 52-55 after shifting: the account type."""

INSTANCE_SHIFT: int = 32
ACCOUNT_TYPE_SHIFT: int = 52
UNIVERSE_SHIFT: int = 56


# ===== TEXT FORMATS =====

STEAM64_LENGTH: int = 17
"""Every SteamID64 in the public universe is 17 decimal digits long."""

STEAM2_PREFIXES: frozenset[str] = frozenset({"STEAM_0", "STEAM_1"})
STEAM2_SEPARATOR: str = ":"


# ===== CODE TABLES =====

_UNIVERSE_BY_CODE: dict[int, Universe] = {
    0: Universe.Invalid,
    1: Universe.Public,
    2: Universe.Beta,
    3: Universe.Internal,
    4: Universe.Dev,
}

_ACCOUNT_TYPE_BY_CODE: dict[int, AccountType] = {
    0: AccountType.Invalid,
    1: AccountType.Individual,
    2: AccountType.Multiseat,
    3: AccountType.GameServer,
    4: AccountType.AnonGameServer,
    5: AccountType.Pending,
    6: AccountType.ContentServer,
    7: AccountType.Clan,
    8: AccountType.Chat,
    9: AccountType.P2PSuperSeeder,
    10: AccountType.AnonUser,
}

_INSTANCE_BY_CODE: dict[int, Instance] = {
    0: Instance.All,
    1: Instance.Desktop,
    2: Instance.Console,
    4: Instance.Web,
}


def universe_from_code(code: int, default: Universe = Universe.Invalid) -> Universe:
    """Map a raw universe code to its enum member.

    Args:
        code: The integer taken from bits 56-63 or from a Steam2 segment.
        default: Returned for codes without a named universe.

    Returns:
        The matching Universe, or ``default``.
    """
    return _UNIVERSE_BY_CODE.get(code, default)


def account_type_from_code(code: int, default: AccountType = AccountType.Invalid) -> AccountType:
    """Map a raw account type code to its enum member, or ``default``."""
    return _ACCOUNT_TYPE_BY_CODE.get(code, default)


def instance_from_code(code: int, default: Instance = Instance.All) -> Instance:
    """Map a raw instance code to its enum member, or ``default``."""
    return _INSTANCE_BY_CODE.get(code, default)
