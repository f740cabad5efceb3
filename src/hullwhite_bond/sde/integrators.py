from __future__ import annotations

from typing import Iterator, List

import numpy as np


def rng_with_seed(seed: int | None) -> np.random.Generator:
    """Create a numpy Generator deterministically from seed if provided."""
    return np.random.default_rng(seed)


def iter_generators(seed: int | None, n: int) -> Iterator[np.random.Generator]:
    """
    Yield n independent, non-overlapping generators one at a time.

    Children are spawned lazily from one SeedSequence; the k-th child is
    the same one SeedSequence(seed).spawn(n)[k] would give.
    """
    root = np.random.SeedSequence(seed)
    for _ in range(n):
        (child,) = root.spawn(1)
        yield np.random.default_rng(child)


def spawn_generators(seed: int | None, n: int) -> List[np.random.Generator]:
    """
    Independent, non-overlapping generators for n Monte-Carlo paths.

    Children of one SeedSequence never share a stream, so each path (or
    worker) can own its generator without synchronization.
    """
    return list(iter_generators(seed, n))


def euler_maruyama_step(
    x: float, drift: float, diffusion: float, dt: float, dW: float
) -> float:
    """
    Single Euler-Maruyama step:
    X_{t+dt} = X_t + a(X_t)*dt + b(X_t)*dW
    Here we pass precomputed drift and diffusion scalars for speed.
    """
    return x + drift * dt + diffusion * dW
