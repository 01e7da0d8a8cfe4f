"""
Summation strategies.

A strategy is a small stateless object with two operations that share one
signature across all strategies:

- ``strategy(values, init)`` reduces a whole sequence,
- ``strategy.add(value, sum, compensation)`` performs one incremental step
  and returns the updated ``(sum, compensation)`` pair.

Callers choose a strategy once (e.g. when a solver is built) and then call
it in their inner loops, trading speed for precision without touching the
call sites.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .config import CONFIG
from .core import (
    Values,
    kahan_accumulate,
    kahan_add,
    plain_accumulate,
    plain_add,
)

logger = logging.getLogger(__name__)


class Summation(ABC):
    """Interface shared by the summation strategies."""

    name = ""

    @abstractmethod
    def __call__(self, values: Values, init=0.0):
        """
        Reduce a sequence.

        Args:
            values: Sequence of values to sum
            init: Initial value; its type is the accumulator type

        Returns:
            Total in the type of ``init``
        """

    @abstractmethod
    def add(self, value, sum, compensation):
        """
        Add one value to a running sum.

        Args:
            value: Value to add
            sum: Current running sum
            compensation: Current compensation term

        Returns:
            Tuple of (new_sum, new_compensation)
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PlainSummation(Summation):
    """Direct accumulation, no error tracking."""

    name = "std"

    def __call__(self, values: Values, init=0.0):
        return plain_accumulate(values, init)

    def add(self, value, sum, compensation):
        return plain_add(value, sum, compensation)


class KahanSummation(Summation):
    """Kahan compensated accumulation; error does not grow with length."""

    name = "kahan"

    def __call__(self, values: Values, init=0.0):
        return kahan_accumulate(values, init)

    def add(self, value, sum, compensation):
        return kahan_add(value, sum, compensation)


SUMMATIONS = {
    "std": PlainSummation,
    "plain": PlainSummation,
    "kahan": KahanSummation,
}


def get_summation(name: Optional[str] = None) -> Summation:
    """
    Create a summation strategy by name.

    Args:
        name: ``"std"`` (alias ``"plain"``) or ``"kahan"``; defaults to
            the configured strategy

    Returns:
        Strategy instance
    """
    if name is None:
        name = CONFIG.summation
    try:
        summation = SUMMATIONS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown method: {name}") from None
    logger.debug("Using %s summation", summation.name)
    return summation


def kahan_sum(values: Values, init=0.0):
    """
    Compute sum using Kahan compensated summation.

    Args:
        values: Sequence of values to sum (list, numpy array or tensor)
        init: Initial value of the sum

    Returns:
        Compensated sum with reduced floating-point error
    """
    return kahan_accumulate(values, init)
