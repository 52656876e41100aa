"""Output name derivation.

The game only loads IoStore mods whose files end in MOD_SUFFIX, so every
derived name carries it exactly once.
"""

import re
from pathlib import Path

from .core.errors import UsageError

MOD_SUFFIX = "_9999999_P"

# Each is stripped at most once, in this order
STRIPPED_SUFFIXES = (".zip", ".utoc", ".ucas", ".pak", "_9999999_P", "_9999999", "_P")

UNSAFE_NAME_CHARS = r"[^A-Za-z0-9_.-]+"


def strip_known_suffixes(name: str) -> str:
    """Remove archive extensions and mod suffixes from the end of a name.

    Example:
        "Skin_9999999_P.pak" -> "Skin"
    """
    for suffix in STRIPPED_SUFFIXES:
        if name.endswith(suffix):
            name = name[: -len(suffix)]
    return name


def sanitize_name(name: str) -> str:
    """Keep only safe filename characters.

    Runs of other characters become a single underscore, repeated
    underscores collapse, and leading/trailing underscores are dropped.

    Example:
        "My Mod!!" -> "My_Mod"
    """
    sanitized = re.sub(UNSAFE_NAME_CHARS, "_", name)
    sanitized = re.sub(r"_{2,}", "_", sanitized)
    return sanitized.strip("_")


def derive_mod_name(candidate: str) -> str:
    """Compute the final output base name.

    Args:
        candidate: Explicit --name value, or the input's base name

    Returns:
        Sanitized name ending in MOD_SUFFIX

    Raises:
        UsageError: If nothing usable is left after sanitizing
    """
    base = sanitize_name(strip_known_suffixes(candidate))
    if not base:
        raise UsageError("Could not derive a valid mod name. Pass --name explicitly.")
    return f"{base}{MOD_SUFFIX}"


def base_name_for(input_path: Path) -> str:
    """Return the name a mod is called by when no --name is given."""
    return input_path.resolve().name
