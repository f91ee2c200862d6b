import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from aulas.adapters.clock import SystemClock
from aulas.rules.loader import load_rules
from aulas.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("AULAS_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


# --- Adapters ---
def get_clock() -> SystemClock:
    return SystemClock()
