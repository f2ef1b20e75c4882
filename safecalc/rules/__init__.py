from safecalc.rules.loader import (
    DEFAULT_RULES_PATH,
    RULES_PATH_ENV,
    default_rules,
    load_rules,
    resolve_rules_path,
)
from safecalc.rules.models import Rules

__all__ = [
    "DEFAULT_RULES_PATH",
    "RULES_PATH_ENV",
    "Rules",
    "default_rules",
    "load_rules",
    "resolve_rules_path",
]
