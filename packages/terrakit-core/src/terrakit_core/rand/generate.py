"""Random test data: strings over an alphabet and unique integer arrays."""

import random
import string

LOWER = string.ascii_lowercase
UPPER = string.ascii_uppercase
DIGIT = string.digits
WHITESPACE = " \t\n\r\v\f"
SPECIAL = string.punctuation
ALPHANUMERIC = LOWER + UPPER + DIGIT

ALPHABETS: dict[str, str] = {
    "lower": LOWER,
    "upper": UPPER,
    "digit": DIGIT,
    "whitespace": WHITESPACE,
    "special": SPECIAL,
    "alphanumeric": ALPHANUMERIC,
}


def random_string(n: int, alphabet: str, rng: random.Random | None = None) -> str:
    """Return ``n`` characters drawn from ``alphabet``.

    Raises ValueError for a negative length or an empty alphabet, even when
    ``n`` is 0.
    """
    if n < 0:
        raise ValueError(f"length must be >= 0, got {n}")
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    rng = rng or random
    return "".join(rng.choice(alphabet) for _ in range(n))


def int_array_unique(n: int, rng: random.Random | None = None) -> list[int]:
    """Return a random permutation of 0..n-1."""
    if n < 0:
        raise ValueError(f"length must be >= 0, got {n}")
    rng = rng or random
    return rng.sample(range(n), n)
