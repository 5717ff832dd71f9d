from __future__ import annotations

import random

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from artillery_game.core.terrain import base_profile, blend_octaves, generate_terrain


@pytest.mark.property
@settings(max_examples=50, deadline=None)
@given(
    width=st.integers(min_value=1, max_value=200),
    octaves=st.integers(min_value=1, max_value=7),
    seed=st.integers(min_value=0, max_value=10_000),
)
def test_generated_profiles_are_bounded(width: int, octaves: int, seed: int) -> None:
    """Every profile has exactly ``width`` non-negative whole-number heights."""

    terrain = generate_terrain(width, octaves, random.Random(seed))

    assert len(terrain) == width
    for height in terrain:
        assert isinstance(height, int)
        assert 5 <= height <= 15


@pytest.mark.property
@settings(max_examples=25, deadline=None)
@given(
    base=st.lists(
        st.floats(min_value=0.0, max_value=50.0, allow_nan=False),
        min_size=1,
        max_size=128,
    ),
    octaves=st.integers(min_value=1, max_value=6),
)
def test_blend_is_deterministic(base: list, octaves: int) -> None:
    first = blend_octaves(base, octaves)
    second = blend_octaves(tuple(base), octaves)

    assert first == second
    assert len(first) == len(base)
    assert all(height >= 0 for height in first)


@pytest.mark.property
@settings(max_examples=25, deadline=None)
@given(seed=st.integers(min_value=0, max_value=10_000))
def test_blend_stays_within_base_range(seed: int) -> None:
    base = base_profile(100, random.Random(seed))

    terrain = blend_octaves(base, 6)

    assert min(terrain) >= round(min(base)) - 1
    assert max(terrain) <= round(max(base)) + 1
