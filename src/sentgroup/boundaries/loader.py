"""YAML boundary rules loading and validation."""

import yaml
from pathlib import Path
from typing import Any, Union
from .config import BoundaryConfig
from .schema import BoundaryRules

class RulesLoadError(Exception):
    """Exception raised when boundary rules loading or validation fails."""
    pass

def _validate(data: Any, source: str) -> BoundaryRules:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RulesLoadError(f"{source} must contain a YAML mapping, got {type(data)}")

    try:
        rules = BoundaryRules.model_validate(data)
    except Exception as e:
        raise RulesLoadError(f"Rules validation failed: {e}") from e

    issues = rules.validate_rules()
    if issues:
        raise RulesLoadError(f"Rules validation issues: {'; '.join(issues)}")

    return rules

def load_rules(path: Union[str, Path]) -> BoundaryRules:
    """
    Load and validate boundary rules from a YAML file.

    An empty file yields the default rules.

    Args:
        path: Path to YAML rules file

    Returns:
        BoundaryRules: Validated rules object

    Raises:
        RulesLoadError: If file cannot be read or rules are invalid
    """
    path = Path(path)

    if not path.exists():
        raise RulesLoadError(f"Rules file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RulesLoadError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise RulesLoadError(f"Cannot read rules file {path}: {e}") from e

    return _validate(data, f"Rules file {path}")

def load_rules_from_string(yaml_content: str) -> BoundaryRules:
    """
    Load and validate boundary rules from a YAML string.

    Raises:
        RulesLoadError: If YAML is invalid or rules validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise RulesLoadError(f"Invalid YAML content: {e}") from e

    return _validate(data, "Rules content")

def load_config(path: Union[str, Path]) -> BoundaryConfig:
    """Load a rules file and compile it into a BoundaryConfig."""
    return load_rules(path).to_config()

def dump_rules(rules: BoundaryRules) -> str:
    """Serialize rules back to YAML."""
    return yaml.safe_dump(rules.model_dump(mode="json"), sort_keys=False, allow_unicode=True)
