"""
Configuration type definitions and exceptions for dfraw-parser.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Layout version written into every settings profile."""
    V1_0 = "1.0"
    CURRENT = V1_0


class ConfigError(Exception):
    """Raised when a settings profile cannot be opened."""
    pass


@dataclass
class ValidationResult:
    """Outcome of checking a settings profile."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
