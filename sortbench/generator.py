import random
from typing import List


def generate_random_input(n: int, rng: random.Random, low: int = 0, high: int = 100) -> List[int]:
    """Generate ``n`` integers drawn uniformly from ``[low, high)``."""
    if n < 0:
        raise ValueError(f"Input size must be non-negative, got {n}")
    return [rng.randrange(low, high) for _ in range(n)]
