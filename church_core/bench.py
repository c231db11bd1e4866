# church_core/bench.py
"""
Tiny benchmarking helper for Church evaluations.

Usage:

    from church_core.bench import benchmark_eval
    from church_core import FAC, num, to_int

    stats = benchmark_eval(lambda: to_int(FAC(num(6))), repeats=20)
    print(stats)

`builder` must force the whole computation (bridge the result to a host
value), otherwise only closure construction gets timed.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict


def benchmark_eval(
    builder: Callable[[], Any],
    repeats: int = 10,
) -> Dict[str, Any]:
    """
    Call builder() `repeats` times and time each call.

    Returns:
        {
            "repeats": N,
            "result": <last builder() value>,
            "min_s": ...,
            "max_s": ...,
            "avg_s": ...,
            "total_s": ...,
        }
    """
    if repeats <= 0:
        raise ValueError("repeats must be > 0")

    times = []
    result = None
    for _ in range(repeats):
        t0 = time.perf_counter()
        result = builder()
        t1 = time.perf_counter()
        times.append(t1 - t0)

    total = sum(times)
    return {
        "repeats": repeats,
        "result": result,
        "min_s": min(times),
        "max_s": max(times),
        "avg_s": total / repeats,
        "total_s": total,
    }
