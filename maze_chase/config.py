"""
config.py — Glyph configuration for Maze Chase.

The config file is a JSON object; every key is optional:

    {
        "player": "P",  "ghost": "G",  "block": "#",  "dot": ".",
        "pill":   "X",  "death": "X",  "space": " ",
        "do_use_emoji": false
    }

Missing glyphs fall back to the built-in ASCII set, or to the emoji set
when "do_use_emoji" is true.  Unknown keys are ignored.
"""

import json

from maze_chase.constants import ASCII_GLYPHS, EMOJI_GLYPHS
from maze_chase.errors import LoadError


class Glyphs:
    """
    Display symbols for every kind of thing drawn on screen.

    Attributes
    ----------
    player, ghost, block, dot, pill, death, space : str
    use_emoji  : bool – emoji glyphs occupy two terminal columns.
    cell_width : int  – terminal columns per maze cell (1 or 2).
    """

    NAMES = ("player", "ghost", "block", "dot", "pill", "death", "space")

    def __init__(self, use_emoji: bool = False, **overrides):
        base = EMOJI_GLYPHS if use_emoji else ASCII_GLYPHS
        for name in self.NAMES:
            setattr(self, name, overrides.get(name, base[name]))
        self.use_emoji  = use_emoji
        self.cell_width = 2 if use_emoji else 1

    @classmethod
    def from_dict(cls, data: dict):
        """Validate a decoded config document and build Glyphs from it."""
        if not isinstance(data, dict):
            raise LoadError("config must be a JSON object")

        use_emoji = data.get("do_use_emoji", False)
        if not isinstance(use_emoji, bool):
            raise LoadError("config key 'do_use_emoji' must be true or false")

        overrides = {}
        for name in cls.NAMES:
            if name not in data:
                continue
            value = data[name]
            if not isinstance(value, str) or not value:
                raise LoadError(
                    f"config key '{name}' must be a non-empty string")
            overrides[name] = value
        return cls(use_emoji, **overrides)

    def __eq__(self, other):
        if not isinstance(other, Glyphs):
            return NotImplemented
        return vars(self) == vars(other)


def load_config(path: str) -> Glyphs:
    """Read a JSON glyph config from *path*.  Failures raise LoadError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise LoadError(f"cannot read config '{path}': {exc}") from exc
    except ValueError as exc:
        raise LoadError(f"config '{path}' is not valid JSON: {exc}") from exc
    return Glyphs.from_dict(data)
