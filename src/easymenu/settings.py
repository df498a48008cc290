"""Configuration of the interactive menu."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Union

import yaml

from easymenu.errors import ConfigurationError

__all__ = ["MenuSettings"]


@dataclass(frozen=True)
class MenuSettings:
    """Settings for the executor and for bootstrapping.

    Attributes:
        prompt: Text shown when asking for a selection.
        invalid_choice_message: Shown when the selected key is not on the menu.
        first_key: Key of the first entry; the remaining entries follow densely.
        quit_key: Key bound to the quit action. Must be lower than ``first_key``.
        require_quit_action: Fail at startup when no quit action is registered.
            Otherwise a stock exit action is used.
        log_level: Level passed to ``logging.basicConfig`` by ``start``.
    """

    prompt: str = "Select an option from the menu"
    invalid_choice_message: str = "Please select a valid option!"
    first_key: int = 1
    quit_key: int = 0
    require_quit_action: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.quit_key >= self.first_key:
            raise ConfigurationError(
                f"quit_key ({self.quit_key}) must be lower than first_key ({self.first_key})"
            )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "MenuSettings":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown menu settings: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "MenuSettings":
        """Load settings from a YAML mapping. An empty file gives the defaults."""
        data = yaml.safe_load(Path(path).read_text())
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration root must be a mapping")
        return cls.from_mapping(data)
