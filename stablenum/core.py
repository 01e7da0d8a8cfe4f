"""
Core summation primitives.

This module contains the single-step and whole-sequence forms of plain and
Kahan compensated summation, plus a torch-backed accumulator for streaming
tensor data.
"""

from typing import Iterable, Union

import numpy as np
import torch

Values = Union[Iterable, np.ndarray, torch.Tensor]


def kahan_add(value, sum, compensation):
    """
    Single Kahan summation step.

    ``sum - compensation`` tracks the exact running total to within one
    rounding error, however many terms have been added.

    Args:
        value: Value to add
        sum: Current running sum
        compensation: Current compensation term (lost low-order bits)

    Returns:
        Tuple of (new_sum, new_compensation)
    """
    y = value - compensation
    t = sum + y
    compensation = (t - sum) - y
    return t, compensation


def plain_add(value, sum, compensation):
    """Plain summation step; the compensation is passed through untouched."""
    return sum + value, compensation


def as_sequence(values: Values):
    """Convert tensors and arrays to a flat numpy array; other iterables pass through."""
    if isinstance(values, torch.Tensor):
        values = values.detach().cpu().numpy()
    if isinstance(values, np.ndarray):
        return values.ravel()
    return values


def as_scalar(init):
    """
    Normalize an initial value to the accumulator type.

    Numpy scalars keep their type, 0-d tensors become numpy scalars and
    everything else becomes a Python float.
    """
    if isinstance(init, torch.Tensor):
        init = init.detach().cpu().numpy()[()]
    if isinstance(init, np.generic):
        return init
    return float(init)


def kahan_accumulate(values: Values, init=0.0):
    """
    Kahan compensated sum of a sequence.

    Every value is converted to the type of ``init`` before it is added, so a
    float32 sequence can be accumulated in double precision by passing a
    Python float.

    Args:
        values: Sequence of values to sum
        init: Initial value of the sum

    Returns:
        Compensated sum, with the final compensation discarded
    """
    total = as_scalar(init)
    cast = type(total)
    c = cast(0)
    for value in as_sequence(values):
        y = cast(value) - c
        t = total + y
        c = (t - total) - y
        total = t
    return total


def plain_accumulate(values: Values, init=0.0):
    """Running sum of a sequence in the type of ``init``, without compensation."""
    total = as_scalar(init)
    cast = type(total)
    for value in as_sequence(values):
        total = total + cast(value)
    return total


class KahanAccumulator:
    """
    Compensated accumulator for streaming tensor data.

    Attributes:
        sum: The accumulated sum
        c: The compensation term tracking lost precision
    """

    def __init__(self, shape=(), dtype=torch.float32, device=None, summation=None):
        """
        Initialize accumulator.

        Args:
            shape: Shape of the accumulator tensor
            dtype: Data type for the accumulator
            device: Device to place the tensors on
            summation: Strategy providing ``add`` (default: Kahan step)
        """
        self.sum = torch.zeros(shape, dtype=dtype, device=device)
        self.c = torch.zeros(shape, dtype=dtype, device=device)
        self.dtype = dtype
        self.device = device or torch.device('cpu')
        self._add = kahan_add if summation is None else summation.add

    def add(self, value: Union[torch.Tensor, np.ndarray, float]):
        """
        Add a value (cast to the accumulator dtype and device).

        Args:
            value: Value to add to the accumulator
        """
        value = torch.as_tensor(value, dtype=self.dtype, device=self.device)
        self.sum, self.c = self._add(value, self.sum, self.c)

    def get(self) -> torch.Tensor:
        """Get the accumulated sum."""
        return self.sum

    @property
    def compensation(self) -> torch.Tensor:
        return self.c

    def reset(self):
        """Reset the accumulator to zero."""
        self.sum = torch.zeros_like(self.sum)
        self.c = torch.zeros_like(self.c)
