"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from sentgroup.boundaries.config import BoundaryConfig
from sentgroup.boundaries.loader import load_rules_from_string


@pytest.fixture
def default_config():
    """Provide the default English boundary configuration."""
    return BoundaryConfig.default()


@pytest.fixture
def region_config():
    """Provide a configuration that keeps only <start> .. <end> regions."""
    return BoundaryConfig.default().with_regions("<start>", "<end>")


@pytest.fixture
def sample_rules_yaml():
    """Provide a sample rules YAML for testing."""
    return """
version: 1
boundary_pattern: '\\.|[!?]+|;'
followers: [")", "'", '"']
discard: ["*NL*"]
discard_patterns: ['-{3,}']
html_discard_tags: [p, br]
region_begin_pattern: '<text>'
region_end_pattern: '</text>'
allow_empty_sentences: false
"""


@pytest.fixture
def sample_rules(sample_rules_yaml):
    """Provide loaded rules for testing."""
    return load_rules_from_string(sample_rules_yaml)


@pytest.fixture
def temp_rules_file(sample_rules_yaml):
    """Provide a temporary rules file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False, encoding='utf-8') as f:
        f.write(sample_rules_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Meter for testing that captures counters and observations."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
