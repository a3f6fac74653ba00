"""Number-theory helpers built around greatest common divisors and primes."""

import math
from collections import Counter
from functools import reduce


def gcd(a, b):
    """Greatest common divisor of two integers."""
    return math.gcd(a, b)


def distinct_prime_factors(n):
    """Distinct prime factors of ``n`` in increasing order."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors = []
    if n % 2 == 0:
        factors.append(2)
        while n % 2 == 0:
            n //= 2
    candidate = 3
    while candidate * candidate <= n:
        if n % candidate == 0:
            factors.append(candidate)
            while n % candidate == 0:
                n //= candidate
        candidate += 2
    if n > 2:
        factors.append(n)
    return factors


def max_shifted_gcd(values):
    """Largest gcd(min + i, max + i) for shifts i from 0 to 100."""
    if not values:
        raise ValueError("values must not be empty")
    low, high = min(values), max(values)
    return max(math.gcd(low + shift, high + shift) for shift in range(101))


def can_split_gcd_min(values):
    """Whether the values split into a part whose minimum equals the other's gcd."""
    if not values:
        raise ValueError("values must not be empty")
    total = reduce(math.gcd, values)
    if total == min(values):
        return True
    freq = Counter(values)
    for k in sorted(freq):
        if k < total:
            continue
        multiples = [x for x in freq if x % k == 0]
        suffix_count = sum(freq[x] for x in multiples)
        if 1 <= suffix_count < len(values) and reduce(math.gcd, multiples) == k:
            return True
    return False


def palindrome_modulus(values):
    """Largest modulus making the sequence a palindrome (0 when unbounded)."""
    return reduce(
        math.gcd,
        (abs(a - b) for a, b in zip(values, reversed(values))),
        0,
    )


def has_min_gcd_pair(values):
    """Whether the other multiples of the minimum have that minimum as gcd."""
    if not values:
        raise ValueError("values must not be empty")
    ordered = sorted(values)
    smallest = ordered[0]
    common = reduce(math.gcd, (v for v in ordered[1:] if v % smallest == 0), 0)
    return common == smallest