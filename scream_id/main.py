#!/usr/bin/env python3
"""scream-id - command-line entry point.

Prints every field of each Steam ID given on the command line together with
its SteamID64 and Steam2 renderings.
"""

from __future__ import annotations

import logging
import sys

from scream_id.config import config
from scream_id.core.logging import setup_logging
from scream_id.core.steam_id import SteamID
from scream_id.utils.i18n import FALLBACK_LOCALE, available_locales, init_i18n, t
from scream_id.version import __app_name__, __version__

__all__ = ["describe", "main", "run"]

logger = logging.getLogger("screamid.cli")

EXIT_OK = 0
EXIT_INVALID_ID = 1
EXIT_USAGE = 2


def describe(steam_id: SteamID) -> list[str]:
    """Build the output lines for one parsed Steam ID.

    Args:
        steam_id: The parsed ID.

    Returns:
        One "label: value" line per field and rendering.
    """
    steam2 = steam_id.render_as_steam2()

    rows = [
        (t("fields.universe"), steam_id.universe.name),
        (t("fields.account_type"), steam_id.account_type.name),
        (t("fields.instance"), steam_id.instance.name),
        (t("fields.account_id"), str(steam_id.account_id)),
        (t("fields.steam64"), steam_id.render_as_steam64()),
        (t("fields.steam2"), steam2 if steam2 is not None else t("cli.not_representable")),
    ]

    width = max(len(label) for label, _ in rows) + 1
    return [f"  {label + ':':<{width}} {value}" for label, value in rows]


def run(argv: list[str]) -> int:
    """Run the CLI for the given arguments (without the program name).

    Args:
        argv: Command-line arguments.

    Returns:
        Exit code (0 = all IDs parsed, 1 = at least one invalid ID, 2 = usage error).
    """
    level = config.log_level_value
    if "--debug" in argv:
        level = logging.DEBUG
    setup_logging(level, config.LOG_FILE)

    language = config.UI_LANGUAGE
    if language not in available_locales():
        logger.warning(t("logs.cli.unknown_language", language=language, fallback=FALLBACK_LOCALE))
        language = FALLBACK_LOCALE
    init_i18n(language)

    if "--help" in argv or "-h" in argv:
        print(t("cli.usage"))
        return EXIT_OK
    if "--version" in argv:
        print(t("cli.version", name=__app_name__, version=__version__))
        return EXIT_OK

    options = [arg for arg in argv if arg.startswith("--") and arg != "--debug"]
    if options:
        print(t("cli.unknown_option", option=options[0]), file=sys.stderr)
        return EXIT_USAGE

    values = [arg for arg in argv if arg != "--debug"]
    if not values:
        print(t("cli.no_input"), file=sys.stderr)
        print(t("cli.usage"), file=sys.stderr)
        return EXIT_USAGE

    exit_code = EXIT_OK
    for value in values:
        steam_id = SteamID.parse(value)
        if steam_id is None:
            logger.debug(t("logs.cli.rejected", value=value))
            print(t("cli.invalid_id", value=value), file=sys.stderr)
            exit_code = EXIT_INVALID_ID
            continue

        logger.debug(t("logs.cli.parsed", value=value, steam_id=steam_id))
        print(value)
        for line in describe(steam_id):
            print(line)

    return exit_code


def main() -> None:
    """Console script entry point."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
