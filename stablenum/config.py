"""
Runtime configuration for stablenum.

Settings are read from environment variables once, at import time, the same
way ``setup.py`` reads its build switches. Library code consults ``CONFIG``
and never re-reads the environment on a hot path.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

FAST_MATH_ENV = "STABLENUM_FAST_MATH"
SUMMATION_ENV = "STABLENUM_SUMMATION"

TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class Config:
    """
    Immutable snapshot of the library configuration.

    Attributes:
        fast_math: Seed the Lambert W iteration with the ``fast`` backend
        summation: Name of the default summation strategy
    """

    fast_math: bool = False
    summation: str = "kahan"

    @property
    def backend(self) -> str:
        """Name of the seeding backend implied by ``fast_math``."""
        return "fast" if self.fast_math else "std"


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Build a configuration from environment variables.

    Args:
        environ: Mapping to read from (default: ``os.environ``)

    Returns:
        Parsed configuration
    """
    if environ is None:
        environ = os.environ

    fast_math = environ.get(FAST_MATH_ENV, "").strip().lower() in TRUTHY
    summation = environ.get(SUMMATION_ENV, "").strip().lower() or "kahan"

    config = Config(fast_math=fast_math, summation=summation)
    logger.debug("Loaded configuration: backend=%s, summation=%s",
                 config.backend, config.summation)
    return config


CONFIG = load_config()
