"""Localized user-facing messages for the command line and tool layers."""

# messages.py
# msg("cli.unexpectedArgument", "fast", locale="de") -> "Unerwartetes Argument: fast"
# Unknown locales fall back to English; unknown keys render as "!key!".

from __future__ import annotations

from typing import Optional

DEFAULT_LOCALE = "en"

CATALOG: dict[str, dict[str, str]] = {
    "en": {
        "cli.numberOfSolutions": "Number of solutions: {}",
        "cli.solutionTime": "Solution time: {:.0f} ms",
        "cli.noSourceFileSpecified": "No Sudoku file specified.",
        "cli.unexpectedArgument": "Unexpected argument: {}",
        "cli.invalidFileName": "Invalid file name: {}",
        "cli.parseGridFileError": "Could not read the Sudoku file: {}",
        "cli.capReached": "Stopped after {} solutions (limit reached).",
    },
    "de": {
        "cli.numberOfSolutions": "Anzahl der Lösungen: {}",
        "cli.solutionTime": "Lösungszeit: {:.0f} ms",
        "cli.noSourceFileSpecified": "Keine Sudoku-Datei angegeben.",
        "cli.unexpectedArgument": "Unerwartetes Argument: {}",
        "cli.invalidFileName": "Ungültiger Dateiname: {}",
        "cli.parseGridFileError": "Die Sudoku-Datei konnte nicht gelesen werden: {}",
        "cli.capReached": "Nach {} Lösungen abgebrochen (Grenze erreicht).",
    },
}


def _bundle(locale: Optional[str]) -> dict[str, str]:
    if not locale:
        return CATALOG[DEFAULT_LOCALE]
    lang = locale.replace("-", "_").split("_")[0].lower()
    return CATALOG.get(lang, CATALOG[DEFAULT_LOCALE])


def msg(key: str, *args, locale: Optional[str] = None) -> str:
    template = _bundle(locale).get(key)
    if template is None:
        template = CATALOG[DEFAULT_LOCALE].get(key)
    if template is None:
        return f"!{key}!"
    return template.format(*args)
