from .generate import (
    ALPHABETS,
    ALPHANUMERIC,
    DIGIT,
    LOWER,
    SPECIAL,
    UPPER,
    WHITESPACE,
    int_array_unique,
    random_string,
)

__all__ = [
    "ALPHABETS",
    "ALPHANUMERIC",
    "DIGIT",
    "LOWER",
    "SPECIAL",
    "UPPER",
    "WHITESPACE",
    "int_array_unique",
    "random_string",
]
