"""
jam Config - Global Configuration

Provides the numeric tolerances and strategy switches used throughout the
library. Configuration can be set globally or overridden locally within a
``with`` block.

Example:
    >>> import jam
    >>> jam.get_config().numeric.tolerance
    1e-12
    >>> with jam.get_config().local(numeric=NumericConfig(tolerance=1e-8)):
    ...     v.equals_vector(w)   # compared with tolerance 1e-8

Environment:
    JAM_TOLERANCE         Default comparison tolerance (positive float)
    JAM_NO_DECOMP_CHECKS  Disable eigen decomposition self-checks (1/true/yes)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, TYPE_CHECKING

import numpy as np

from .error import JamRangeError

if TYPE_CHECKING:
    from .math.comparator import DoubleComparator

logger = logging.getLogger("jam.config")


# =============================================================================
# Configuration Sections
# =============================================================================

@dataclass(frozen=True)
class NumericConfig:
    """Floating-point comparison settings."""
    tolerance: float = 1.0e-12                                    # Default comparator tolerance
    epsilon: float = field(default_factory=lambda: float(np.finfo(np.float64).eps))


@dataclass(frozen=True)
class StatConfig:
    """Settings for the statistics layer."""
    quantile_method: str = "weibull"   # numpy.percentile method; position p * (n + 1)


@dataclass(frozen=True)
class LinalgConfig:
    """Settings for the decomposition layer."""
    check_decompositions: bool = True  # Verify A v = lambda v after eigen decomposition
    check_tolerance: float = 1.0e-8    # Tolerance used by the self-checks


# =============================================================================
# Global Configuration Manager
# =============================================================================

_SECTIONS = ("numeric", "stat", "linalg")


class JamConfig:
    """
    Global configuration manager for jam.

    Sections are immutable dataclasses; assign a new instance to change one.
    ``local()`` overrides sections for the duration of a ``with`` block.

    Example:
        >>> config = get_config()
        >>> config.numeric = NumericConfig(tolerance=1e-10)
        >>> with config.local(linalg=LinalgConfig(check_decompositions=False)):
        ...     JamEigen.compute(matrix)
    """

    def __init__(self):
        self._global: Dict[str, Any] = {}
        self._local: Dict[str, List[Any]] = {name: [] for name in _SECTIONS}
        self._comparator_cache: Dict[float, "DoubleComparator"] = {}
        self.reset()
        self._apply_environment()

    # -------------------------------------------------------------------------
    # Section Accessors (with local override support)
    # -------------------------------------------------------------------------

    def _get(self, name: str) -> Any:
        stack = self._local[name]
        if stack:
            return stack[-1]
        return self._global[name]

    @property
    def numeric(self) -> NumericConfig:
        """Get numeric configuration."""
        return self._get("numeric")

    @numeric.setter
    def numeric(self, value: NumericConfig):
        """Set global numeric configuration."""
        _validate_tolerance(value.tolerance)
        self._global["numeric"] = value

    @property
    def stat(self) -> StatConfig:
        """Get statistics configuration."""
        return self._get("stat")

    @stat.setter
    def stat(self, value: StatConfig):
        """Set global statistics configuration."""
        self._global["stat"] = value

    @property
    def linalg(self) -> LinalgConfig:
        """Get decomposition configuration."""
        return self._get("linalg")

    @linalg.setter
    def linalg(self, value: LinalgConfig):
        """Set global decomposition configuration."""
        _validate_tolerance(value.check_tolerance)
        self._global["linalg"] = value

    # -------------------------------------------------------------------------
    # Convenience Properties
    # -------------------------------------------------------------------------

    @property
    def tolerance(self) -> float:
        """Default comparison tolerance."""
        return self.numeric.tolerance

    @tolerance.setter
    def tolerance(self, value: float):
        self.numeric = replace(self._global["numeric"], tolerance=float(value))

    @property
    def comparator(self) -> "DoubleComparator":
        """Comparator for the currently active tolerance."""
        tolerance = self.numeric.tolerance
        comparator = self._comparator_cache.get(tolerance)
        if comparator is None:
            from .math.comparator import DoubleComparator
            comparator = DoubleComparator(tolerance)
            self._comparator_cache[tolerance] = comparator
        return comparator

    # -------------------------------------------------------------------------
    # Context Manager Support
    # -------------------------------------------------------------------------

    def local(self, **kwargs) -> "_LocalConfigContext":
        """
        Create a local configuration context.

        Args:
            **kwargs: Section overrides (numeric, stat, linalg)

        Returns:
            Context manager

        Raises:
            KeyError: If an unknown section name is given
        """
        for key in kwargs:
            if key not in _SECTIONS:
                raise KeyError(f"Unknown configuration section: {key}")
        return _LocalConfigContext(self, **kwargs)

    def _push_local(self, **kwargs):
        for key, value in kwargs.items():
            if key == "numeric":
                _validate_tolerance(value.tolerance)
            self._local[key].append(value)
            logger.debug("Entering local %s override: %s", key, value)

    def _pop_local(self, keys: List[str]):
        for key in keys:
            value = self._local[key].pop()
            logger.debug("Leaving local %s override: %s", key, value)

    # -------------------------------------------------------------------------
    # Reset / Environment
    # -------------------------------------------------------------------------

    def reset(self):
        """Reset all configurations to defaults."""
        self._global = {
            "numeric": NumericConfig(),
            "stat": StatConfig(),
            "linalg": LinalgConfig(),
        }

    def _apply_environment(self):
        raw = os.environ.get("JAM_TOLERANCE")
        if raw:
            try:
                self.tolerance = float(raw)
                logger.debug("Tolerance set from JAM_TOLERANCE: %s", raw)
            except ValueError as e:
                logger.warning("Ignoring invalid JAM_TOLERANCE=%r: %s", raw, e)

        if os.environ.get("JAM_NO_DECOMP_CHECKS", "").lower() in ("1", "true", "yes"):
            self._global["linalg"] = replace(self._global["linalg"], check_decompositions=False)
            logger.debug("Decomposition self-checks disabled via JAM_NO_DECOMP_CHECKS")

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "numeric": {
                "tolerance": self.numeric.tolerance,
                "epsilon": self.numeric.epsilon,
            },
            "stat": {
                "quantile_method": self.stat.quantile_method,
            },
            "linalg": {
                "check_decompositions": self.linalg.check_decompositions,
                "check_tolerance": self.linalg.check_tolerance,
            },
        }

    def __repr__(self) -> str:
        return f"JamConfig({self.to_dict()})"


class _LocalConfigContext:
    """Context manager for local configuration override."""

    def __init__(self, config: JamConfig, **kwargs):
        self._config = config
        self._kwargs = kwargs
        self._keys = list(kwargs.keys())

    def __enter__(self):
        self._config._push_local(**self._kwargs)
        return self._config

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._config._pop_local(self._keys)
        return False


def _validate_tolerance(value: float) -> None:
    if not value > 0.0:
        raise JamRangeError(f"Tolerance must be positive, got {value}")


# =============================================================================
# Global Instance
# =============================================================================

config = JamConfig()


# =============================================================================
# Convenience Functions
# =============================================================================

def get_config() -> JamConfig:
    """Get the global configuration instance."""
    return config


def set_tolerance(value: float):
    """Set the default comparison tolerance globally."""
    config.tolerance = value


def default_comparator() -> "DoubleComparator":
    """Get the comparator for the currently active tolerance."""
    return config.comparator


def get_epsilon() -> float:
    """Get the machine precision used by the decomposition thresholds."""
    return config.numeric.epsilon


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Config sections
    "NumericConfig",
    "StatConfig",
    "LinalgConfig",
    # Main config class
    "JamConfig",
    # Global instance
    "config",
    # Convenience functions
    "get_config",
    "set_tolerance",
    "default_comparator",
    "get_epsilon",
]
