"""Generator for XML ID values."""

import random
import string

ID_FIRST_CHARS = string.ascii_lowercase
ID_CHARS = string.ascii_lowercase + string.digits


class IDGenerator:
    """Mint random identifiers that are valid XML IDs.

    Tokens are lowercase alphanumeric and always start with a letter. A
    generator never returns the same token twice until :meth:`reset` is
    called. Generators do not share state; give each thread its own.

    Args:
        length: Number of characters per token (default: 8)

    Raises:
        ValueError: If *length* is less than 1
    """

    def __init__(self, length: int = 8):
        if length < 1:
            raise ValueError(f"length must be at least 1, got {length}")

        self.length = length
        self._random = random.Random()
        self._minted: set[str] = set()

    @property
    def capacity(self) -> int:
        """Number of distinct tokens this generator can produce."""
        return len(ID_FIRST_CHARS) * len(ID_CHARS) ** (self.length - 1)

    def mint(self) -> str:
        """Return a token not previously minted by this generator.

        Raises:
            RuntimeError: If every possible token has been minted
        """
        if len(self._minted) >= self.capacity:
            raise RuntimeError(f"All {self.capacity} IDs of length {self.length} are in use")

        while True:
            token = self._random.choice(ID_FIRST_CHARS) + "".join(
                self._random.choices(ID_CHARS, k=self.length - 1)
            )
            if token not in self._minted:
                self._minted.add(token)
                return token

    def reset(self) -> None:
        """Forget every token minted so far."""
        self._minted.clear()
