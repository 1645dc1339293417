"""Symbol generator used to mint short class aliases."""

DEFAULT_ALPHABET = "0abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"


class SymbolGenerator:
    """
    Positional numeral system over an ordered alphabet.

    The base is the alphabet length. The first symbol is the zero digit, so it
    only appears in non-leading positions of counting tokens; ``next()`` starts
    at 1 and therefore never yields it on its own.
    """

    def __init__(self, alphabet: str = DEFAULT_ALPHABET):
        """
        Initialize the generator.

        Args:
            alphabet: Ordered symbols, index 0 being the zero digit
        """
        if len(alphabet) < 2:
            raise ValueError("Alphabet needs at least two symbols")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("Alphabet symbols must be unique")
        self.alphabet = alphabet
        self.base = len(alphabet)
        self.cursor = 0

    def get(self, n: int) -> str:
        """
        Convert a base-10 integer into a token of this numeral system.

        Args:
            n: Non-negative integer

        Returns:
            Token, most significant symbol first
        """
        if n < 0:
            raise ValueError(f"Cannot encode negative value {n}")
        if n == 0:
            return self.alphabet[0]

        digits = []
        while n > 0:
            n, remainder = divmod(n, self.base)
            digits.append(self.alphabet[remainder])
        return "".join(reversed(digits))

    def next(self) -> str:
        """Advance the cursor and return its token."""
        self.cursor += 1
        return self.get(self.cursor)

    def reset(self) -> None:
        """Move the cursor back to zero."""
        self.cursor = 0
