"""Binary searches on the answer and sorted-array bounds."""

from bisect import bisect_left, bisect_right

_INT_MAX = 2147483647


def _largest_feasible(low, high, feasible):
    """Largest value in [low, high] for which ``feasible`` holds, assuming low does."""
    while high > low:
        mid = (low + high + 1) // 2
        if feasible(mid):
            low = mid
        else:
            high = mid - 1
    return low


def aquarium_height(heights, water):
    """Tallest tank height whose fill over the given coral needs at most ``water``."""

    def fits(level):
        return sum(max(level - h, 0) for h in heights) <= water

    return _largest_feasible(0, _INT_MAX, fits)


def cardboard_width(sizes, total):
    """Largest border width so the squared cardboard areas sum to at most ``total``."""

    def fits(width):
        area = 0
        for size in sizes:
            area += (size + 2 * width) ** 2
            if area > total:
                return False
        return True

    return _largest_feasible(0, 10 ** 9, fits)


def olympiad_bench_length(n, m, k):
    """Smallest longest bench when seating ``k`` people in ``n`` rows of ``m`` seats."""

    def seats(longest):
        return (longest * (m // (longest + 1)) + m % (longest + 1)) * n

    low, high = 0, m
    while high > low + 1:
        mid = (low + high) // 2
        if seats(mid) >= k:
            high = mid
        else:
            low = mid
    return high


def bound_positions(values, target):
    """Return the sorted values with the upper and lower bound indices of ``target``."""
    ordered = sorted(values)
    return ordered, bisect_right(ordered, target), bisect_left(ordered, target)