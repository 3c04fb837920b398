"""Pytest configuration and shared fixtures.

This module contains pytest configuration and shared fixtures used
across all test files.
"""

from typing import Any
from unittest.mock import Mock

import pytest

import scenario_validation.config as config_module
from scenario_validation.config import Config
from scenario_validation.validators.base_validator import BaseValidator
from tests.fixtures.sample_data import SampleUser


class RecordingValidator(BaseValidator):
    """Concrete validator recording hook calls and failing on None values."""
    
    calls: list[str]
    
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []
    
    def validate_attribute(self, obj: Any, attribute: str) -> None:
        self.calls.append(attribute)
        if getattr(obj, attribute, None) is None:
            self.add_error(obj, attribute, self.get_message("{attribute} is missing."))


@pytest.fixture
def user() -> SampleUser:
    """Create an empty data object in the insert scenario."""
    return SampleUser()


@pytest.fixture
def recording_validator() -> RecordingValidator:
    """Create a RecordingValidator covering name, email and age."""
    validator = RecordingValidator()
    validator.attributes = ["name", "email", "age"]
    return validator


@pytest.fixture
def mock_object() -> Mock:
    """Create a mock data object with labels derived from attribute names."""
    obj = Mock(spec=["has_errors", "add_error", "get_attribute_label"])
    obj.has_errors.return_value = False
    obj.get_attribute_label.side_effect = lambda attribute: f"Label of {attribute}"
    return obj


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use configuration built from a clean environment for each test.
    
    This keeps a developer's .env or exported variables from changing
    factory strictness or aliases under test.
    """
    for var in ("LOG_LEVEL", "STRICT_PARAMS", "VALIDATOR_ALIASES"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config_module, "_config", Config(_env_file=None))
