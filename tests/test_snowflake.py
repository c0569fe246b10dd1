from math import sqrt

import numpy as np
import pytest

from kochsnowflake.snowflake import InvalidArgumentError, base_triangle, koch, koch_fn, next_koch


def perimeter_of(K):
    return np.sum(np.abs(np.diff(K)))


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4])
def test_koch_is_closed(n):
    K = koch(n)
    assert K[0] == K[-1]


@pytest.mark.parametrize("n, count", [(0, 4), (1, 13), (2, 49), (3, 193), (4, 769)])
def test_koch_vertex_count(n, count):
    assert koch(n).size == count == 3 * 4**n + 1


def test_base_triangle_corners():
    expected = np.array([
        0 + 1j / sqrt(3),
        -0.5 - 1j / (2 * sqrt(3)),
        0.5 - 1j / (2 * sqrt(3)),
        0 + 1j / sqrt(3),
    ])
    np.testing.assert_allclose(koch(0), expected, rtol=0, atol=1e-12)
    np.testing.assert_array_equal(koch(0), base_triangle())


def test_base_triangle_is_centered():
    K = koch(0)
    assert abs(np.mean(K[:-1])) < 1e-12
    np.testing.assert_allclose(np.abs(K), 1 / sqrt(3), atol=1e-12)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_perimeter_grows_by_four_thirds(n):
    assert perimeter_of(koch(n + 1)) / perimeter_of(koch(n)) == pytest.approx(4 / 3, rel=1e-12)


def test_consecutive_vertices_are_distinct():
    K = koch(3)
    assert np.all(np.abs(np.diff(K)) > 0)


def test_original_vertices_are_kept():
    K2 = koch(2)
    np.testing.assert_array_equal(K2[::4], koch(1))


def test_koch_is_deterministic():
    np.testing.assert_array_equal(koch(3), koch(3))


def test_koch_returns_fresh_read_only_arrays():
    a, b = koch(1), koch(1)
    assert a is not b
    with pytest.raises(ValueError):
        a[0] = 0


def test_first_edge_gets_outward_equilateral_bump():
    z1, z2 = koch(0)[0], koch(0)[1]
    K1 = koch(1)
    w1, w2, w3 = K1[1], K1[2], K1[3]

    assert w1 == pytest.approx(2 * z1 / 3 + z2 / 3, abs=1e-12)
    assert w3 == pytest.approx(z1 / 3 + 2 * z2 / 3, abs=1e-12)

    mid = (w1 + w3) / 2
    assert abs(w2 - mid) == pytest.approx(sqrt(3) / 2 * abs(w1 - w3), rel=1e-12)
    # all three sides of the bump are equal
    assert abs(w2 - w1) == pytest.approx(abs(w3 - w1), rel=1e-12)
    assert abs(w2 - w3) == pytest.approx(abs(w3 - w1), rel=1e-12)
    # the apex points away from the triangle
    assert abs(w2) > abs((z1 + z2) / 2)


def test_next_koch_on_open_segment():
    seg = next_koch([1.0, -1.0])
    np.testing.assert_allclose(seg, [1, 1 / 3, 1j / sqrt(3), -1 / 3, -1], atol=1e-12)


@pytest.mark.parametrize("n", [-1, -5])
def test_negative_level_is_rejected(n):
    with pytest.raises(InvalidArgumentError):
        koch(n)


@pytest.mark.parametrize("n", [1.5, 2.0, "2", True, None])
def test_non_integer_level_is_rejected(n):
    with pytest.raises(InvalidArgumentError):
        koch(n)


def test_numpy_integer_level_is_accepted():
    assert koch(np.int64(2)).size == 49


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        koch(-1)


@pytest.mark.parametrize("vertices", [[], [1.0], [[0, 1], [1, 0]]])
def test_next_koch_rejects_bad_sequences(vertices):
    with pytest.raises(InvalidArgumentError):
        next_koch(vertices)


@pytest.mark.parametrize("n", [0, 1, 3])
def test_koch_fn_endpoints(n):
    K = koch(n)
    assert koch_fn(K, 0.0) == K[0]
    assert koch_fn(K, 1.0) == K[-1]
    assert koch_fn(K, 0.0) == koch_fn(K, 1.0)


def test_koch_fn_scalar_and_array():
    K = koch(1)
    assert isinstance(koch_fn(K, 0.5), complex)

    t = np.linspace(0, 1, 7).reshape(7, 1)
    assert koch_fn(K, t).shape == (7, 1)


def test_koch_fn_hits_every_vertex():
    K = koch(2)
    t = np.arange(K.size) / (K.size - 1)
    np.testing.assert_allclose(koch_fn(K, t), K, atol=1e-12)


def test_koch_fn_is_continuous_at_breakpoints():
    K = koch(2)
    n_edges = K.size - 1
    eps = 1e-10
    for k in range(1, n_edges):
        t_k = k / n_edges
        assert abs(koch_fn(K, t_k - eps) - K[k]) < 1e-8
        assert abs(koch_fn(K, t_k + eps) - K[k]) < 1e-8


def test_koch_fn_is_linear_within_a_segment():
    K = koch(1)
    n_edges = K.size - 1
    t = (3 + 0.25) / n_edges
    assert koch_fn(K, t) == pytest.approx(0.75 * K[3] + 0.25 * K[4], abs=1e-12)


@pytest.mark.parametrize("t", [-1e-9, 1.0 + 1e-9, 2.0, np.nan, np.inf])
def test_koch_fn_rejects_out_of_range(t):
    with pytest.raises(InvalidArgumentError):
        koch_fn(koch(1), t)


def test_koch_fn_rejects_any_out_of_range_entry():
    with pytest.raises(InvalidArgumentError):
        koch_fn(koch(1), np.array([0.0, 0.5, 1.5]))
