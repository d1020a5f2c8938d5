# -----------------------------------------------------------------------------
# SHOP SETTINGS
# -----------------------------------------------------------------------------
# Responsibility: Load the shop configuration (stop tokens, failure limit,
# default region and strategy) from shop.yaml, falling back to defaults when
# the file is absent. Environment variables override the file:
#
# - PIZZERIA_REGION: Region served by the console counter
# - PIZZERIA_STRATEGY: direct | regional | family
# -----------------------------------------------------------------------------

import os
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field, field_validator
from rich.console import Console

console = Console()

# Settings file location
SETTINGS_PATH = Path(__file__).parent.parent.parent / "shop.yaml"


class ShopSettings(BaseModel):
    """
    Pydantic model for the shop configuration.

    Loaded from shop.yaml at startup.
    """

    stop_tokens: List[str] = Field(default_factory=lambda: ["stop"])
    max_consecutive_failures: int = Field(default=3, ge=0)
    default_region: str = "Beijing"
    default_strategy: str = "family"

    @field_validator("max_consecutive_failures")
    @classmethod
    def limit_allows_one_failure(cls, value: int) -> int:
        """0 disables the limit; otherwise a single failure must never close the loop."""
        if value == 1:
            raise ValueError("max_consecutive_failures must be 0 (disabled) or at least 2")
        return value


def load_settings(settings_path: Path = SETTINGS_PATH) -> ShopSettings:
    """
    Load settings from YAML, then apply environment overrides.

    Args:
        settings_path: Path to the settings YAML file.

    Returns:
        ShopSettings with validated values.
    """
    if settings_path.exists():
        with open(settings_path) as f:
            data = yaml.safe_load(f) or {}
        settings = ShopSettings(**data)
        console.print(f"[green][SETTINGS] Loaded {settings_path.name}[/green]")
    else:
        console.print("[yellow][SETTINGS] Settings file not found, using defaults[/yellow]")
        settings = ShopSettings()

    overrides = {}
    if os.getenv("PIZZERIA_REGION"):
        overrides["default_region"] = os.getenv("PIZZERIA_REGION")
    if os.getenv("PIZZERIA_STRATEGY"):
        overrides["default_strategy"] = os.getenv("PIZZERIA_STRATEGY")

    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings
