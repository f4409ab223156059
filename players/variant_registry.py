"""
Registry for player variants.

Maps variant keys (e.g., 'random', 'keys') to player classes so the
command line can pick one by name.
"""

from typing import Dict, List, Type

from .base import Player
from .key_press_player import KeyPressPlayer
from .random_player import RandomPlayer


PLAYER_VARIANTS: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "keys": KeyPressPlayer,
}

AVAILABLE_VARIANTS = list(PLAYER_VARIANTS.keys())


def get_player_class(variant: str = "random") -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant: Variant key ('random' or 'keys'). Case-insensitive.

    Returns:
        The player class for the requested variant.

    Raises:
        ValueError: If variant key is not recognized.
    """
    key = (variant or "random").strip().lower()
    if key not in PLAYER_VARIANTS:
        raise ValueError(
            f"Unknown player variant: '{variant}'. "
            f"Available variants: {', '.join(AVAILABLE_VARIANTS)}"
        )
    return PLAYER_VARIANTS[key]


def list_variants() -> List[str]:
    """Return list of available variant keys."""
    return list(AVAILABLE_VARIANTS)
