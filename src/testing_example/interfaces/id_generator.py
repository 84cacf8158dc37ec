"""Interface for the generators that mint entity UUIDs and random names."""

import abc


class IdGenerator(abc.ABC):
    """Contract for an ID generator.

    Every site entity gets a `uuid` from `new_id()`. Fixtures that need a
    throwaway machine name (user names, file names) use `new_name()`.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Generate a new unique identifier."""

    def new_name(self, length: int = 8) -> str:
        """Generate a lowercase alphanumeric name from the tail of a new id.

        Args:
            length: Number of characters to keep (the id's random tail).

        Returns:
            str: The name, at most `length` characters long.
        """
        return "".join(ch for ch in self.new_id() if ch.isalnum()).lower()[-length:]
