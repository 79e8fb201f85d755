"""Resolve Nepal Sambat labels for a requested script."""

from __future__ import annotations

from typing import Dict, Tuple

from ..services.types import CalendarMonth, Paksha, Tithi

SUPPORTED_SCRIPTS = {"latin", "deva"}

PAKSHA = {
    "latin": {Paksha.WAXING: "Thwa", Paksha.WANING: "Gā"},
    "deva": {Paksha.WAXING: Paksha.WAXING.glyph, Paksha.WANING: Paksha.WANING.glyph},
}


def _pick(script: str, latin: str, deva: str) -> Tuple[str, Dict[str, str]]:
    """Return the primary label and aliases for the requested script."""

    aliases = {"latin": latin, "deva": deva}
    if script == "deva":
        return deva, aliases
    return latin, aliases


def clamp_script(script: str | None) -> str:
    if not script:
        return "latin"
    script = script.lower()
    return script if script in SUPPORTED_SCRIPTS else "latin"


def month_label(month: CalendarMonth, script: str) -> Dict[str, Dict[str, str] | str]:
    label, aliases = _pick(script, month.name, month.native_name)
    return {"display_name": label, "aliases": aliases}


def paksha_label(paksha: Paksha, script: str) -> Dict[str, Dict[str, str] | str]:
    label, aliases = _pick(script, PAKSHA["latin"][paksha], PAKSHA["deva"][paksha])
    return {"display_name": label, "aliases": aliases}


def tithi_label(tithi: Tithi, script: str) -> Dict[str, Dict[str, str] | str]:
    latin = f"{PAKSHA['latin'][tithi.paksha]} {tithi.name}"
    deva = f"{PAKSHA['deva'][tithi.paksha]} {tithi.native_name}"
    label, aliases = _pick(script, latin, deva)
    return {"display_name": label, "aliases": aliases}


__all__ = ["SUPPORTED_SCRIPTS", "clamp_script", "month_label", "paksha_label", "tithi_label"]
