"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for concurrent redemption attacks.
"""

import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

import pytest

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial

T = TypeVar("T")


def run_concurrently(attack: Callable[[], T], num_attackers: int) -> list[T]:
    """
    Run an attack from many threads released at the same instant.

    A barrier holds every worker until all are ready so the calls
    genuinely overlap instead of running one after another.
    """
    barrier = threading.Barrier(num_attackers)

    def attacker() -> T:
        barrier.wait()
        return attack()

    with ThreadPoolExecutor(max_workers=num_attackers) as executor:
        futures = [executor.submit(attacker) for _ in range(num_attackers)]
        return [f.result() for f in futures]


@pytest.fixture
def concurrently() -> Callable[..., list]:
    return run_concurrently
