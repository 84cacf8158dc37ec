"""Module defining the `Unit` value holder."""

# pylint: disable=too-few-public-methods


class Unit:
    """Holds a single integer length.

    The stored value is whatever was last passed to `set_length`; there are no
    bounds checks, so negative lengths are kept as given.

    Note:
        Instances are not synchronized. Callers sharing one across threads
        must provide their own locking.
    """

    def __init__(self) -> None:
        self._length = 0

    def set_length(self, length: int) -> None:
        """Replace the stored length.

        Args:
            length: The new length. Any integer is accepted.
        """
        self._length = length

    def get_length(self) -> int:
        """Return the stored length (0 until `set_length` is called)."""
        return self._length

    def __repr__(self) -> str:
        return f"Unit(length={self._length})"
