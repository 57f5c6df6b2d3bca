"""
Steam ID value object and text codec.

This module defines the SteamID dataclass together with the validators that
recognise the two supported text forms:

    SteamID64:  76561198403256399     (17 digits, packed 64-bit value)
    Steam2:     STEAM_0:1:221495335   (legacy, individual accounts only)

Every entry point returns None instead of raising when the input is not a
well-formed Steam ID.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from scream_id.core.steam_id_constants import (
    ACCOUNT_ID_MASK,
    ACCOUNT_INSTANCE_MASK,
    ACCOUNT_TYPE_MASK,
    ACCOUNT_TYPE_SHIFT,
    INSTANCE_SHIFT,
    STEAM2_PREFIXES,
    STEAM2_SEPARATOR,
    STEAM64_LENGTH,
    UNIVERSE_SHIFT,
    AccountType,
    Instance,
    Universe,
    account_type_from_code,
    instance_from_code,
    universe_from_code,
)
from scream_id.utils.i18n import t

logger = logging.getLogger("screamid.steam_id")


__all__ = ["SteamID", "parse", "validate_steam2", "validate_steam64"]

_UINT32_MAX = 0xFFFFFFFF
_UINT64_MAX = 0xFFFFFFFFFFFFFFFF


def _parse_uint32(segment: str) -> int | None:
    """Parse a Steam2 segment as an unsigned 32-bit integer.

    Only plain ASCII digits are accepted, so signs, whitespace and
    underscores (which int() would tolerate) are rejected.

    Args:
        segment: One colon-separated part of a Steam2 string.

    Returns:
        The integer value, or None if the segment is not a valid u32.
    """
    if not segment or not segment.isascii() or not segment.isdigit():
        return None

    value = int(segment)
    if value > _UINT32_MAX:
        return None
    return value


@dataclass(frozen=True)
class SteamID:
    """A decoded Steam ID.

    Instances are immutable; rendering never changes them, so one SteamID
    can be rendered any number of times.

    Attributes:
        universe: The Steam environment the account lives in
        account_type: What kind of entity the ID names
        instance: Client instance (desktop, console, web)
        account_id: The 32-bit account number
    """

    universe: Universe
    account_type: AccountType
    instance: Instance
    account_id: int

    def __str__(self) -> str:
        """String representation as SteamID64."""
        return self.render_as_steam64()

    @classmethod
    def parse(cls, value: str) -> SteamID | None:
        """Parse a SteamID64 or Steam2 string.

        The SteamID64 form is tried first, then Steam2.

        Args:
            value: The raw text, e.g. "76561198403256399" or "STEAM_0:1:221495335"

        Returns:
            The decoded SteamID, or None if the text is neither form
        """
        id64 = cls.validate_steam64(value)
        if id64 is not None:
            return cls._from_steam64(id64)

        id2 = cls.validate_steam2(value)
        if id2 is not None:
            return cls._from_steam2(id2)

        logger.debug(t("logs.steam_id.unknown_format", value=value))
        return None

    @staticmethod
    def validate_steam64(value: str) -> int | None:
        """Validate a SteamID64 string and return its integer value.

        The text must be exactly 17 ASCII digits and the account number
        (low 32 bits) must not be zero.

        Args:
            value: The candidate text

        Returns:
            The packed 64-bit value, or None if the text is not a SteamID64
        """
        if not isinstance(value, str) or len(value) != STEAM64_LENGTH:
            return None
        if not value.isascii() or not value.isdigit():
            return None

        id64 = int(value)
        if id64 > _UINT64_MAX or id64 & ACCOUNT_ID_MASK == 0:
            return None
        return id64

    @staticmethod
    def validate_steam2(value: str) -> str | None:
        """Validate the shape of a Steam2 string and return it unchanged.

        Only the segment count and the STEAM_0/STEAM_1 prefix are checked
        here. The numeric segments are checked when the ID is decoded.

        Args:
            value: The candidate text, e.g. "STEAM_0:0:23071901"

        Returns:
            The input string, or None if it is not shaped like a Steam2 ID
        """
        if not isinstance(value, str):
            return None

        parts = value.split(STEAM2_SEPARATOR)
        if len(parts) != 3:
            return None
        if parts[0] not in STEAM2_PREFIXES:
            return None
        return value

    @classmethod
    def _from_steam64(cls, id64: int) -> SteamID:
        """Split a validated SteamID64 into its four fields."""
        return cls(
            universe=universe_from_code(id64 >> UNIVERSE_SHIFT),
            account_type=account_type_from_code((id64 >> ACCOUNT_TYPE_SHIFT) & ACCOUNT_TYPE_MASK),
            instance=instance_from_code((id64 >> INSTANCE_SHIFT) & ACCOUNT_INSTANCE_MASK),
            account_id=id64 & ACCOUNT_ID_MASK,
        )

    @classmethod
    def _from_steam2(cls, id2: str) -> SteamID | None:
        """Decode a Steam2 string that already passed validate_steam2.

        Steam2 only ever names individual desktop accounts. A universe of 0
        is the historical alias for Public, and unknown universes also fall
        back to Public.
        """
        _, universe_part, account_part = id2.split(STEAM2_SEPARATOR)

        universe_code = _parse_uint32(universe_part)
        account_id = _parse_uint32(account_part)
        if universe_code is None or account_id is None:
            logger.debug(t("logs.steam_id.bad_steam2_segment", value=id2))
            return None

        if universe_code == 0:
            universe = Universe.Public
        else:
            universe = universe_from_code(universe_code, default=Universe.Public)

        return cls(
            universe=universe,
            account_type=AccountType.Individual,
            instance=Instance.Desktop,
            account_id=account_id,
        )

    @property
    def steam_id_64(self) -> int:
        """The packed 64-bit value of this ID."""
        return (
            (int(self.universe) << UNIVERSE_SHIFT)
            | (int(self.account_type) << ACCOUNT_TYPE_SHIFT)
            | (int(self.instance) << INSTANCE_SHIFT)
            | (self.account_id & ACCOUNT_ID_MASK)
        )

    def render_as_steam64(self) -> str:
        """Render the ID as SteamID64 text."""
        return str(self.steam_id_64)

    def render_as_steam2(self) -> str | None:
        """Render the ID in the legacy Steam2 form.

        Only individual accounts have a Steam2 form. The Public universe is
        written as 0. The last segment is ``account_id // 2``, so the low
        bit of the account number is not part of the output.

        Returns:
            The Steam2 string, or None for non-individual accounts
        """
        if self.account_type != AccountType.Individual:
            return None

        universe = int(self.universe)
        if self.universe == Universe.Public:
            universe = 0

        return f"STEAM_{universe}:{int(self.instance)}:{self.account_id // 2}"


def parse(value: str) -> SteamID | None:
    """Parse a SteamID64 or Steam2 string. See SteamID.parse."""
    return SteamID.parse(value)


def validate_steam64(value: str) -> int | None:
    """Validate a SteamID64 string. See SteamID.validate_steam64."""
    return SteamID.validate_steam64(value)


def validate_steam2(value: str) -> str | None:
    """Validate a Steam2 string. See SteamID.validate_steam2."""
    return SteamID.validate_steam2(value)
