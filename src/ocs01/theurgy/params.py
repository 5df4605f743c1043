"""Argument generation for contract methods."""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence

from ..config.models import ParamSpec

DEFAULT_PARAM_MAX = 100


class ParamGenerator(Protocol):
    def generate(self, spec: ParamSpec) -> str:
        ...


class RandomParamGenerator:
    """Use the declared example, else a uniform integer in ``[1, max]``."""

    def __init__(self, rng: Optional[random.Random] = None, default_max: int = DEFAULT_PARAM_MAX) -> None:
        self._rng = rng or random.Random()
        self.default_max = default_max

    def generate(self, spec: ParamSpec) -> str:
        if spec.example is not None:
            return spec.example
        upper = spec.max if spec.max is not None else self.default_max
        return str(self._rng.randint(1, max(upper, 1)))


def generate_params(generator: ParamGenerator, specs: Sequence[ParamSpec]) -> tuple[str, ...]:
    return tuple(generator.generate(spec) for spec in specs)
