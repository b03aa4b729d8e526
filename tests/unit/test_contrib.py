"""Unit tests for contribution table construction."""

import math

import numpy as np
import pytest

from pixzoom.contrib import build_contributions, reflect_indices
from pixzoom.filters import FILTERS


def test_box_identity_single_entry():
    """At scale 1 the box table maps every sample to itself with weight 1."""
    table = build_contributions(7, 7, FILTERS["box"], channels=3)
    assert len(table) == 7
    for i in range(7):
        assert table.entries(i) == [(i * 3, 1.0)]


def test_lanczos_downscale_size_bound():
    """Entries per destination never exceed ceil(support * 2 / scale) + 1."""
    table = build_contributions(100, 10, FILTERS["lanczos3"])
    bound = math.ceil(3.0 * 2 * 10) + 1
    assert bound == 61
    assert table.counts().max() <= bound
    assert len(table) == 10


@pytest.mark.parametrize("name", sorted(FILTERS))
@pytest.mark.parametrize("src,dst", [(10, 25), (25, 10), (9, 9), (3, 1)])
def test_size_bound_all_filters(name, src, dst):
    f = FILTERS[name]
    table = build_contributions(src, dst, f)
    scale = dst / src
    bound = math.ceil(f.support * 2 * max(1.0, 1.0 / scale)) + 1
    assert table.counts().max() <= bound
    assert table.counts().min() >= 1


def test_offsets_scaled_by_channels():
    t1 = build_contributions(8, 5, FILTERS["bell"], channels=1)
    t4 = build_contributions(8, 5, FILTERS["bell"], channels=4)
    assert np.array_equal(t1.pixels * 4, t4.pixels)
    assert np.array_equal(t1.weights, t4.weights)


def test_indices_always_in_range():
    """Wide kernels on short axes fold back into the source."""
    for src in (1, 2, 3, 5):
        for dst in (1, 4, 11):
            table = build_contributions(src, dst, FILTERS["lanczos3"], channels=2)
            assert table.pixels.min() >= 0
            assert table.pixels.max() <= (src - 1) * 2
            assert np.all(table.pixels % 2 == 0)


def test_reflect_rule():
    n = 5
    j = np.array([-3, -2, -1, 0, 4, 5, 6, 7])
    assert reflect_indices(j, n).tolist() == [3, 2, 1, 0, 4, 4, 3, 2]


def test_reflect_single_sample():
    assert reflect_indices(np.array([-2, -1, 0, 1, 2]), 1).tolist() == [0, 0, 0, 0, 0]


def test_upscale_window_and_weights():
    """Bell at scale 2: centres at i/2, window ceil(c-1.5)..floor(c+1.5)."""
    table = build_contributions(4, 8, FILTERS["bell"])
    # i = 3 -> centre 1.5 -> j in 0..3
    entries = table.entries(3)
    assert [p for p, _ in entries] == [0, 1, 2, 3]
    w = [wt for _, wt in entries]
    assert w == pytest.approx([0.0, 0.5, 0.5, 0.0])
    # i = 0 -> centre 0 -> j = -1, 0, 1 with -1 folded to 1
    entries = table.entries(0)
    assert [p for p, _ in entries] == [1, 0, 1]
    assert [wt for _, wt in entries] == pytest.approx([0.125, 0.75, 0.125])


def test_zero_weights_kept():
    table = build_contributions(4, 8, FILTERS["bell"])
    assert np.any(table.weights == 0.0)


def test_downscale_widens_and_rescales():
    """Triangle at scale 0.5: width 2, weights tri(d / 2) / 2."""
    table = build_contributions(8, 4, FILTERS["triangle"])
    entries = table.entries(2)  # centre 4
    assert [p for p, _ in entries] == [2, 3, 4, 5, 6]
    assert [wt for _, wt in entries] == pytest.approx([0.0, 0.25, 0.5, 0.25, 0.0])


@pytest.mark.parametrize("name", ["box", "triangle", "bell", "bspline", "mitchell", "hermite"])
@pytest.mark.parametrize("src,dst", [(16, 16), (16, 8), (12, 30)])
def test_interior_weights_sum_to_one(name, src, dst):
    table = build_contributions(src, dst, FILTERS[name])
    sums = table.weight_sums()
    assert np.allclose(sums, 1.0, atol=1e-4)


def test_float32_weights():
    table = build_contributions(10, 3, FILTERS["mitchell"])
    assert table.weights.dtype == np.float32
    assert table.offsets[0] == 0
    assert table.offsets[-1] == table.pixels.size
