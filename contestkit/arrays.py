"""Array problems: prefix sums, greedy choices and counting arguments."""

from bisect import bisect_right
from itertools import accumulate

_MOD = 10 ** 9 + 7
_UNBOUNDED = 10 ** 18


def _prefix_sums(values):
    """Prefix sums of ``values`` with a leading zero."""
    return [0, *accumulate(values)]


def can_sort_by_subtracting(values):
    """Whether subtracting each adjacent pair's minimum leaves the values sorted."""
    result = list(values)
    for i in range(len(result) - 1):
        low = min(result[i], result[i + 1])
        result[i] -= low
        result[i + 1] -= low
    return all(a <= b for a, b in zip(result, result[1:]))


def max_truck_difference(weights):
    """Largest gap between the heaviest and lightest truck over every even split."""
    n = len(weights)
    prefix = _prefix_sums(weights)
    best = -1
    for size in range(1, n + 1):
        if n % size:
            continue
        loads = [prefix[end] - prefix[end - size] for end in range(size, n + 1, size)]
        best = max(best, max(loads) - min(loads))
    return best


def count_cherry_arrays(a, b, k):
    """Number of ways to fill the ``-1`` entries of ``b`` so every ``a[i] + b[i]`` is equal."""
    fixed = {x + y for x, y in zip(a, b) if y != -1}
    if len(fixed) > 1:
        return 0
    free = [x for x, y in zip(a, b) if y == -1]
    low = max(free, default=0)
    low = max(low, 0)
    high = min((x + k for x in free), default=_UNBOUNDED)
    high = min(high, _UNBOUNDED)
    if fixed:
        (target,) = fixed
        return 1 if low <= target <= high else 0
    return high - low + 1 if low <= high else 0


def collecting_game(values):
    """For each element, how many others it can collect when starting from it."""
    n = len(values)
    order = sorted((value, index) for index, value in enumerate(values))
    answers = [-1] * n
    waiting = []
    running = 0
    for i, (value, index) in enumerate(order):
        running += value
        waiting.append(index)
        if i == n - 1 or order[i + 1][0] > running:
            for pos in waiting:
                answers[pos] = i
            waiting.clear()
    return answers


def counting_orders(a, b):
    """Number of orderings of ``a`` with every ``a[i] > b[i]``, modulo 1e9+7."""
    ordered_a = sorted(a)
    total = 1
    for i, limit in enumerate(sorted(b, reverse=True)):
        larger = len(ordered_a) - bisect_right(ordered_a, limit)
        total = total * max(larger - i, 0) % _MOD
    return total


def maximum_sum_greedy(values, k):
    """Sum left after ``k`` greedy removals of either the two smallest or the largest."""
    ordered = sorted(values)
    total = sum(ordered)
    left, right = 0, len(ordered) - 1
    for _ in range(k):
        if left > right:
            break
        if left + 1 <= right and ordered[left] + ordered[left + 1] > ordered[right]:
            total -= ordered[left] + ordered[left + 1]
            left += 2
        else:
            total -= ordered[right]
            right -= 1
    return total


def maximum_sum_after_operations(values, k):
    """Best sum left after ``k`` removals of either the two smallest or the largest."""
    n = len(values)
    if k < 0 or 2 * k > n:
        raise ValueError("k must satisfy 0 <= 2 * k <= len(values)")
    prefix = _prefix_sums(sorted(values))
    return max(
        0,
        max(prefix[n - (k - pairs)] - prefix[2 * pairs] for pairs in range(k + 1)),
    )


def palindromic_subsequence_array(n):
    """An array of length ``n`` framed by ones with distinct values between."""
    return [1, *range(1, n - 1), 1]


def max_quest_experience(first, repeat, k):
    """Most experience from ``k`` quest completions, unlocking quests in order."""
    total = 0
    best = 0
    top_repeat = None
    for i, (gain, again) in enumerate(zip(first[:k], repeat)):
        total += gain
        top_repeat = again if top_repeat is None else max(top_repeat, again)
        best = max(best, total + top_repeat * (k - i - 1))
    return best


def sort_subarray_bounds(before, after):
    """1-based bounds of the longest sorted subarray covering every change."""
    changed = [i for i, (x, y) in enumerate(zip(before, after)) if x != y]
    if not changed:
        raise ValueError("the arrays must differ in at least one position")
    left, right = changed[0], changed[-1]
    while left > 0 and after[left - 1] <= after[left]:
        left -= 1
    while right < len(after) - 1 and after[right + 1] >= after[right]:
        right += 1
    return left + 1, right + 1


def can_build_by_subsequence_sums(values):
    """Whether the values can be built from ``[1]`` by appending subsequence sums."""
    if not values:
        raise ValueError("values must not be empty")
    ordered = sorted(values)
    if ordered[0] != 1:
        return False
    running = 0
    for value in ordered:
        if running and value > running:
            return False
        running += value
    return True


def tenzing_books(stacks, x):
    """Whether reading books from the tops of the stacks can reach knowledge ``x``."""
    knowledge = 0
    for stack in stacks:
        for book in stack:
            if x | book != x:
                break
            knowledge |= book
    return knowledge == x


def max_alternating_parity_sum(values):
    """Largest sum of a non-empty subarray whose neighbours differ in parity."""
    if not values:
        raise ValueError("values must not be empty")
    best = current = values[0]
    for previous, value in zip(values, values[1:]):
        if value % 2 == previous % 2:
            current = value
        else:
            current += value
        current = max(current, value)
        best = max(best, current)
    return best


def apply_modifications(values, queries):
    """Apply each distinct query ``q``: add ``2**(q-1)`` to multiples of ``2**q``."""
    result = list(values)
    seen = set()
    for q in queries:
        if q in seen:
            continue
        seen.add(q)
        step = 1 << q
        half = 1 << (q - 1)
        result = [v + half if v % step == 0 else v for v in result]
    return result


def max_profit(prices):
    """Largest gain from buying once and selling later."""
    if not prices:
        raise ValueError("prices must not be empty")
    profit = 0
    cheapest = prices[0]
    for price in prices:
        profit = max(profit, price - cheapest)
        cheapest = min(cheapest, price)
    return profit


def mex_permutation(n, x):
    """A permutation of ``0..n-1`` (with ``x`` placed last) for the MEX puzzle."""
    if n == x:
        return list(range(n))
    return [i for i in range(n) if i != x] + [x]


def longest_non_decreasing_segment(values):
    """1-based bounds of the first longest non-decreasing segment."""
    if not values:
        raise ValueError("values must not be empty")
    best_len, start, current = 1, 0, 0
    for i in range(1, len(values)):
        if values[i] >= values[i - 1]:
            if i - current + 1 > best_len:
                best_len = i - current + 1
                start = current
        else:
            current = i
    return start + 1, start + best_len


def is_palindrome(values):
    """Whether the sequence reads the same backwards."""
    sequence = list(values)
    return sequence == sequence[::-1]


def count_valid_starts(values, k, x):
    """Positions in ``k`` repeats of ``values`` whose suffix sum is at least ``x``."""
    total = sum(values)
    if total * k < x:
        return 0
    prefix = _prefix_sums(values)
    count = 0
    for start in prefix[:-1]:
        suffix = total - start
        if suffix >= x:
            count += k
        else:
            needed = -(-(x - suffix) // total)
            if needed < k:
                count += k - needed
    return count