"""ID generators for entity UUIDs and random fixture names."""

import threading
import uuid

from ulid import monotonic

from testing_example.interfaces.id_generator import IdGenerator


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs sort by creation time, which keeps entity listings ordered when
    they are sorted by uuid. Backed by the `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """Random UUIDv4 generator, the format the site uses for entity uuids."""

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded IDs.

    Note:
        Deterministic output for tests and demos; not unique across instances.
    """

    def __init__(self, length: int = 26) -> None:
        self._counter = 0
        self._length = length
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate the next identifier in sequence."""
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._length}d}"
