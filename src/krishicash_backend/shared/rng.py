"""Deterministic random helpers used across the game logic."""

from __future__ import annotations

from collections.abc import Sequence  # noqa: TC003
from random import Random
from typing import Protocol, TypeVar, runtime_checkable

_T = TypeVar("_T")


@runtime_checkable
class RandomSource(Protocol):
    """Minimal interface the engine needs to draw monthly events."""

    def choice(self, population: Sequence[_T]) -> _T:
        """Return one element of *population* chosen uniformly."""


class DeterministicRandomService:
    """Thin wrapper around :class:`random.Random` providing deterministic utilities."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._random = Random(seed)  # noqa: S311

    @property
    def seed(self) -> int | None:
        """Return the base seed for the service."""
        return self._seed

    def choice(self, population: Sequence[_T]) -> _T:
        """Return a deterministic choice from *population*."""
        if not population:
            msg = "Cannot choose from an empty population."
            raise ValueError(msg)
        return population[self._random.randrange(len(population))]


__all__ = ["DeterministicRandomService", "RandomSource"]
