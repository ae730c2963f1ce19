"""Solutions for contest 363: rating gaps, hair growth, palindrome-free anagrams, palindromes."""

from collections import Counter


class _Input:
    """Whitespace separated tokens of a problem input."""

    def __init__(self, text):
        self._tokens = iter(text.split())

    def word(self):
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self):
        return int(self.word())

    def numbers(self, amount):
        return [self.number() for _ in range(amount)]


def rating_gap(r):
    """Return how much rating r must rise to show one more symbol (ratings up to 299)."""
    for bound in (100, 200, 300):
        if r <= bound - 1:
            return bound - r
    raise ValueError(f"rating {r} is 300 or more")


def days_until(lengths, t, p):
    """Return the days until at least p hairs, each growing by 1 a day, reach length t."""
    lengths = list(lengths)
    if p <= 0:
        return 0
    if p > len(lengths):
        raise ValueError("p exceeds the number of hairs")
    pth_longest = sorted(lengths, reverse=True)[p - 1]
    return max(0, t - pth_longest)


def is_palindrome_at(s, start, length):
    """Tell whether s[start:start + length] is a palindrome."""
    part = s[start : start + length]
    return part == part[::-1]


def has_palindrome(s, k):
    """Tell whether s has a palindromic substring of length k."""
    return any(is_palindrome_at(s, i, k) for i in range(len(s) - k + 1))


def _distinct_permutations(chars):
    counts = Counter(chars)
    size = len(chars)
    prefix = []

    def build():
        if len(prefix) == size:
            yield "".join(prefix)
            return
        for ch in sorted(counts):
            if counts[ch]:
                counts[ch] -= 1
                prefix.append(ch)
                yield from build()
                prefix.pop()
                counts[ch] += 1

    yield from build()


def count_palindrome_free(s, k):
    """Count the distinct rearrangements of s with no palindromic substring of length k."""
    return sum(1 for perm in _distinct_permutations(s) if not has_palindrome(perm, k))


def nth_palindrome(n):
    """Return the n-th smallest non-negative palindromic number (0 is the first)."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return 0
    seen = 1
    length = 1
    while True:
        if length == 1:
            amount = 9
        else:
            amount = 9 * 10 ** ((length + 1) // 2 - 1)
        if seen + amount >= n:
            break
        seen += amount
        length += 1
    half = str(10 ** ((length + 1) // 2 - 1) + (n - seen - 1))
    mirror = half[:-1][::-1] if length % 2 else half[::-1]
    return int(half + mirror)


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        return f"{rating_gap(data.number())}\n"
    if problem == "B":
        n, t, p = data.numbers(3)
        return f"{days_until(data.numbers(n), t, p)}\n"
    if problem == "C":
        _n, k = data.numbers(2)
        return f"{count_palindrome_free(data.word(), k)}\n"
    if problem == "D":
        return f"{nth_palindrome(data.number())}\n"
    raise ValueError(f"unknown problem: {problem}")