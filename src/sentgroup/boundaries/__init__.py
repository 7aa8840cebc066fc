"""
Boundary rules: compiled configuration, YAML schema and loader.
"""

from .config import BoundaryConfig, BoundaryConfigError
from .loader import RulesLoadError, load_config, load_rules, load_rules_from_string
from .schema import BoundaryRules

__all__ = [
    'BoundaryConfig', 'BoundaryConfigError', 'BoundaryRules',
    'RulesLoadError', 'load_config', 'load_rules', 'load_rules_from_string',
]
