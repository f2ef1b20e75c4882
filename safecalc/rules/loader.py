import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from safecalc.rules.models import Rules

DEFAULT_RULES_PATH = Path("rules.yaml")
RULES_PATH_ENV = "SAFECALC_RULES_PATH"


def resolve_rules_path(explicit: Path | str | None = None) -> Path:
    """
    Pick the rules file: explicit path, then $SAFECALC_RULES_PATH,
    then rules.yaml in the working directory.
    """
    if explicit is not None:
        return Path(explicit)
    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)
    return DEFAULT_RULES_PATH


def default_rules() -> Rules:
    """Built-in rules used when no rules file is present."""
    return Rules()


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Rules file must contain a mapping, got {type(data).__name__}")

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
