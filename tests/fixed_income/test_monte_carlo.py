# tests/fixed_income/test_monte_carlo.py
import types

import numpy as np
import pytest

from hullwhite_bond.errors import InvalidParameter
from hullwhite_bond.fixed_income.analytic import analytic_zero_coupon_price
from hullwhite_bond.fixed_income.bond_pricer import price_zero_coupon_bond
from hullwhite_bond.fixed_income.monte_carlo import monte_carlo_price
from hullwhite_bond.sde.integrators import iter_generators, spawn_generators
from hullwhite_bond.sde.schemas import HullWhiteConfig, SimulationGrid


def test_monte_carlo_reproducible_for_seed():
    params = HullWhiteConfig(a=0.1, sigma=0.02, r0=0.05)
    grid = SimulationGrid(T=5.0, steps=50)

    res1 = monte_carlo_price(params, grid, n_paths=64, seed=2024)
    res2 = monte_carlo_price(params, grid, n_paths=64, seed=2024)
    assert res1 == res2
    assert res1.n_paths == 64
    assert res1.std_error > 0


def test_zero_volatility_has_no_sampling_error():
    params = HullWhiteConfig(a=0.1, sigma=0.0, r0=0.05)
    grid = SimulationGrid(T=5.0, steps=100)

    res = monte_carlo_price(params, grid, n_paths=8, seed=1, face_value=100.0)
    single = price_zero_coupon_bond(
        params, grid, np.random.default_rng(0), face_value=100.0
    )
    assert res.std_error < 1e-12
    assert np.isclose(res.price, single, rtol=1e-14)


def test_single_path_reports_zero_std_error():
    params = HullWhiteConfig(a=0.1, sigma=0.02, r0=0.05)
    res = monte_carlo_price(params, SimulationGrid(T=1.0, steps=10), n_paths=1, seed=3)
    assert res.std_error == 0.0


def test_monte_carlo_mean_close_to_closed_form():
    """Euler bias + sampling noise should stay within a few standard errors"""
    params = HullWhiteConfig(a=0.1, sigma=0.02, r0=0.05)
    grid = SimulationGrid(T=5.0, steps=100)

    res = monte_carlo_price(params, grid, n_paths=2000, seed=42)
    exact = analytic_zero_coupon_price(params, grid.T)

    assert abs(res.price - exact) < 4 * res.std_error + 3e-3


@pytest.mark.parametrize("n_paths", [0, -5])
def test_invalid_path_count_raises(n_paths):
    params = HullWhiteConfig(a=0.1, sigma=0.02, r0=0.05)
    with pytest.raises(InvalidParameter):
        monte_carlo_price(params, SimulationGrid(T=1.0, steps=10), n_paths=n_paths)


@pytest.mark.parametrize("n_paths", [2.5, "10", True])
def test_non_integer_path_count_raises(n_paths):
    params = HullWhiteConfig(a=0.1, sigma=0.02, r0=0.05)
    with pytest.raises(InvalidParameter):
        monte_carlo_price(params, SimulationGrid(T=1.0, steps=10), n_paths=n_paths)


def test_lazy_generators_match_spawned_streams():
    lazy = iter_generators(11, 3)
    assert isinstance(lazy, types.GeneratorType)

    children = np.random.SeedSequence(11).spawn(3)
    for rng, eager, child in zip(lazy, spawn_generators(11, 3), children):
        expected = np.random.default_rng(child).standard_normal(4)
        assert np.array_equal(rng.standard_normal(4), expected)
        assert np.array_equal(eager.standard_normal(4), expected)


def test_monte_carlo_uses_one_stream_per_path():
    params = HullWhiteConfig(a=0.1, sigma=0.02, r0=0.05)
    grid = SimulationGrid(T=2.0, steps=20)

    res = monte_carlo_price(params, grid, n_paths=5, seed=9)
    manual = [
        price_zero_coupon_bond(params, grid, rng) for rng in spawn_generators(9, 5)
    ]
    assert res.price == pytest.approx(float(np.mean(manual)), rel=1e-14)


def test_spawned_generators_are_independent_and_reproducible():
    gens_a = spawn_generators(7, 4)
    gens_b = spawn_generators(7, 4)

    first_a = [g.standard_normal(5) for g in gens_a]
    first_b = [g.standard_normal(5) for g in gens_b]

    for x, y in zip(first_a, first_b):
        assert np.array_equal(x, y)
    for i in range(4):
        for j in range(i + 1, 4):
            assert not np.array_equal(first_a[i], first_a[j])
