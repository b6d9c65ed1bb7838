# src/feasibility/analysis/rounding.py
import math


def money(n: float) -> int:
    """
    Round to the nearest whole dollar, halves toward +infinity.

    Applied after every pipeline stage, not only on the final figures, so the
    intermediate roundings compound. Reports depend on that exact behaviour.
    """
    whole = math.floor(n)
    # n - floor(n) is exact; adding 0.5 first is not (0.49999999999999994 + 0.5 == 1.0)
    if n - whole >= 0.5:
        whole += 1
    return int(whole)


def clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, n))
