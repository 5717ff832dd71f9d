"""Key name to command translation shared by every front-end."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Optional, Tuple

from artillery_game.core.game import Command


@dataclass(frozen=True)
class KeyBindings:
    """Key names bound to each command.

    Key names are lower-case: printable keys are their character, plus
    ``enter``, ``left``, ``right``, ``up`` and ``down``.
    """

    angle_decrease: Tuple[str, ...] = ("a", "left")
    angle_increase: Tuple[str, ...] = ("d", "right")
    power_increase: Tuple[str, ...] = ("w", "up")
    power_decrease: Tuple[str, ...] = ("s", "down")
    fire: Tuple[str, ...] = ("enter",)
    quit: Tuple[str, ...] = ("q",)

    def __post_init__(self) -> None:
        seen: Dict[str, str] = {}
        for binding in fields(self):
            for key in getattr(self, binding.name):
                if key in seen:
                    raise ValueError(
                        f"key {key!r} bound to both {seen[key]} and {binding.name}"
                    )
                seen[key] = binding.name

    def command_for(self, key_name: str) -> Optional[Command]:
        key_name = key_name.lower()
        for binding in fields(self):
            if key_name in getattr(self, binding.name):
                return Command(binding.name.replace("_", "-"))
        return None

    def help_text(self) -> str:
        return (
            f"{'/'.join(self.angle_decrease)} {'/'.join(self.angle_increase)}: angle"
            f"  {'/'.join(self.power_increase)} {'/'.join(self.power_decrease)}: power"
            f"  {'/'.join(self.fire)}: fire  {'/'.join(self.quit)}: quit"
        )


DEFAULT_BINDINGS = KeyBindings()


__all__ = ["DEFAULT_BINDINGS", "KeyBindings"]
