import numpy as np
import pytest

from wavemedium.core.errors import InvalidTargetShapeError
from wavemedium.operators.extrapolate import boundary_split, extrapolate


def test_extrapolate_1d_odd_difference():
    out, roi, left, right = extrapolate(np.array([1, 2, 3]), (6,))
    np.testing.assert_array_equal(out, [1, 1, 1, 2, 3, 3])
    assert roi == (slice(2, 5),)
    assert left == (2,)
    assert right == (1,)


@pytest.mark.parametrize("shape,target", [
    ((2, 3, 4), (2, 6, 7)),
    ((1, 5, 5), (1, 8, 10)),
    ((3, 3, 3), (4, 5, 6)),
    ((4, 6, 8), (4, 6, 8)),
])
def test_extrapolate_invariants(shape, target):
    rng = np.random.default_rng(0)
    a = rng.standard_normal(shape) + 1j * rng.standard_normal(shape)
    out, roi, left, right = extrapolate(a, target)

    assert out.shape == target
    for n, t, l, r, s in zip(shape, target, left, right, roi):
        assert l + r + n == t
        assert l - r in (0, 1)
        assert s.start == l
        assert s.stop - s.start == n
    np.testing.assert_array_equal(out[roi], a)

    expected = np.pad(a, list(zip(left, right)), mode="edge")
    np.testing.assert_array_equal(out, expected)


def test_extrapolate_replicates_edges():
    a = np.arange(12, dtype=float).reshape(1, 3, 4)
    out, roi, left, right = extrapolate(a, (1, 6, 8))
    assert left == (0, 2, 2)
    assert right == (0, 1, 2)
    # every boundary pixel equals the nearest pixel of the original map
    np.testing.assert_array_equal(out[0, :, 0], out[0, :, 2])
    np.testing.assert_array_equal(out[0, :, 1], out[0, :, 2])
    np.testing.assert_array_equal(out[0, :, -1], out[0, :, 5])
    np.testing.assert_array_equal(out[0, 0, 2:6], a[0, 0])
    np.testing.assert_array_equal(out[0, -1, 2:6], a[0, -1])
    assert out[0, 0, 0] == a[0, 0, 0]
    assert out[0, -1, -1] == a[0, -1, -1]


def test_extrapolate_does_not_modify_input():
    a = np.ones((1, 2, 2))
    out, _, _, _ = extrapolate(a, (1, 4, 4))
    out[...] = 5.0
    np.testing.assert_array_equal(a, 1.0)


def test_boundary_split():
    assert boundary_split((4, 4), (7, 4)) == ((2, 0), (1, 0))


@pytest.mark.parametrize("target", [(1, 3, 4), (1, 4)])
def test_extrapolate_invalid_target(target):
    with pytest.raises(InvalidTargetShapeError):
        extrapolate(np.ones((1, 4, 4)), target)
