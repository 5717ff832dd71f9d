"""Procedural terrain built from octaves of cosine-interpolated noise."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerrainSettings:
    """Configuration options for terrain generation."""

    width: int = 100
    octaves: int = 6
    min_height: float = 5.0
    max_height: float = 15.0

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"terrain width must be positive, got {self.width}")
        if self.octaves < 1:
            raise ValueError(f"terrain needs at least one octave, got {self.octaves}")
        if self.min_height < 0:
            raise ValueError("terrain heights must be non-negative")
        if self.min_height >= self.max_height:
            raise ValueError("min_height must be below max_height")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, sending halves away from zero."""

    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def cosine_interpolate(a: float, b: float, mu: float) -> float:
    mu2 = (1 - math.cos(mu * math.pi)) / 2
    return a * (1 - mu2) + b * mu2


def base_profile(
    width: int,
    rng: random.Random,
    low: float = 5.0,
    high: float = 15.0,
) -> List[float]:
    """Draw the raw column heights every octave is sampled from."""

    span = high - low
    return [low + rng.random() * span for _ in range(width)]


def blend_octaves(base: Sequence[float], octaves: int) -> Tuple[int, ...]:
    """Superimpose progressively coarser resamplings of ``base``.

    Octave ``z`` samples every ``2 ** (octaves - z)``-th column as a control
    point, fills the gaps with cosine interpolation (wrapping from the last
    control point back to the first) and contributes with weight
    ``1 / 2 ** (z - 1)``. The blend is normalised by the total weight and
    rounded to whole cells.
    """

    if octaves < 1:
        raise ValueError(f"terrain needs at least one octave, got {octaves}")
    if not base:
        raise ValueError("cannot blend an empty base profile")

    width = len(base)
    totals = [0.0] * width
    weight_sum = 0.0
    for z in range(octaves, 0, -1):
        weight = 1 / 2 ** (z - 1)
        sample = 2 ** (octaves - z)
        controls = list(base[::sample])
        weight_sum += weight

        # Only the first ``width`` values of a layer are ever blended.
        for column in range(width):
            i, j = divmod(column, sample)
            a = controls[i]
            if j == 0:
                totals[column] += weight * a
            else:
                b = controls[(i + 1) % len(controls)]
                totals[column] += weight * cosine_interpolate(a, b, j / sample)

    return tuple(round_half_away(total / weight_sum) for total in totals)


def generate_terrain(
    width: int,
    octaves: int,
    rng: Optional[random.Random] = None,
    *,
    low: float = 5.0,
    high: float = 15.0,
) -> Tuple[int, ...]:
    settings = TerrainSettings(width=width, octaves=octaves, min_height=low, max_height=high)
    return TerrainGenerator(settings, rng).generate()


class TerrainGenerator:
    """Produce immutable height profiles from an injected random source."""

    def __init__(
        self,
        settings: Optional[TerrainSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or TerrainSettings()
        self._rng = rng or random.Random()

    def generate(self) -> Tuple[int, ...]:
        settings = self.settings
        coarsest = 2 ** (settings.octaves - 1)
        if settings.width < coarsest:
            logger.warning(
                "Terrain width %d is narrower than the coarsest octave stride %d; "
                "the profile will have very few control points",
                settings.width,
                coarsest,
            )
        base = base_profile(
            settings.width, self._rng, settings.min_height, settings.max_height
        )
        terrain = blend_octaves(base, settings.octaves)
        logger.debug(
            "Generated terrain: width=%d, octaves=%d, range=%d..%d",
            settings.width,
            settings.octaves,
            min(terrain),
            max(terrain),
        )
        return terrain


__all__ = [
    "TerrainGenerator",
    "TerrainSettings",
    "base_profile",
    "blend_octaves",
    "cosine_interpolate",
    "generate_terrain",
    "round_half_away",
]
