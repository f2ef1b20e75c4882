import logging
from functools import lru_cache
from pathlib import Path

from safecalc.rules import Rules, default_rules, load_rules, resolve_rules_path

logger = logging.getLogger(__name__)


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.rules_path: Path = resolve_rules_path()


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    """
    Rules for the API process.

    A missing rules file means built-in defaults; an invalid one raises.
    """
    settings = get_settings()
    if not settings.rules_path.exists():
        logger.info("No rules file at %s, using defaults", settings.rules_path)
        return default_rules()
    return load_rules(settings.rules_path)
