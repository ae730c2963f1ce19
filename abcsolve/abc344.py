"""Solutions for contest 344: bar removal, reversed input, sums of three arrays."""


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


def remove_between_bars(s):
    """Remove the first two '|' characters and everything between them."""
    first = s.index("|")
    second = s.index("|", first + 1)
    return s[:first] + s[second + 1 :]


def reverse_lines(values):
    """Return the values in reverse order."""
    return list(reversed(list(values)))


def can_make_sums(a, b, c, queries):
    """For each query tell whether one element from each of a, b and c adds up to it."""
    pair_sums = {x + y for x in a for y in b}
    c = list(c)
    return [any(q - z in pair_sums for z in c) for q in queries]


def run(problem, text):
    """Solve one problem of the contest for the given input text and return the output."""
    data = _Input(text)
    problem = problem.upper()
    if problem == "A":
        return remove_between_bars(data.word()) + "\n"
    if problem == "B":
        values = [int(token) for token in text.split()]
        return "".join(f"{v}\n" for v in reverse_lines(values))
    if problem == "C":
        a = data.numbers(data.number())
        b = data.numbers(data.number())
        c = data.numbers(data.number())
        queries = data.numbers(data.number())
        return "".join(
            ("Yes" if ok else "No") + "\n" for ok in can_make_sums(a, b, c, queries)
        )
    raise ValueError(f"unknown problem: {problem}")