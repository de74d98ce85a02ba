"""Random byte source interface - domain service abstraction.

Salt quality depends entirely on the randomness behind this interface. The
domain only needs "give me N bytes"; whether they come from the operating
system, a hardware RNG or a scripted test double is an infrastructure choice.
"""

from abc import ABC, abstractmethod


class IRandomSource(ABC):
    """
    Interface for producing random bytes.

    Production implementations must be cryptographically secure. The hasher
    assumes a uniform distribution over the byte space and does not check it.
    """

    @abstractmethod
    def random_bytes(self, length: int) -> bytes:
        """
        Produce ``length`` random bytes.

        Args:
            length: Number of bytes to produce (>= 1)

        Returns:
            A byte string of exactly ``length`` bytes
        """
        pass
