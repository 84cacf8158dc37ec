"""In-memory FileRepository implementation."""

import dataclasses
import logging

from testing_example.interfaces.errors import FileNotFoundError, InvalidFileUriError  # pylint: disable=redefined-builtin
from testing_example.interfaces.files import File, FileRepository, FileStatus
from testing_example.interfaces.id_generator import IdGenerator

from .store import InMemorySiteData

logger = logging.getLogger(__name__)


class InMemoryFileRepository(FileRepository):
    """Managed file records kept in `InMemorySiteData`.

    Only the records are managed; no bytes are stored behind the URIs.
    """

    def __init__(self, data: InMemorySiteData, id_generator: IdGenerator) -> None:
        self._data = data
        self._ids = id_generator

    def create_file(self, uri: str, *, permanent: bool = False) -> File:
        scheme, sep, target = uri.partition("://")
        if not (scheme and sep and target.strip("/")):
            raise InvalidFileUriError(uri)

        record = File(
            fid=next(self._data.fid_seq),
            uuid=self._ids.new_id(),
            uri=uri,
            filename=target.rstrip("/").rsplit("/", 1)[-1],
            status=FileStatus.PERMANENT if permanent else FileStatus.TEMPORARY,
        )
        self._data.files[record.fid] = record
        logger.debug("Created file %s (%s)", record.fid, uri)
        return record

    def set_permanent(self, fid: int) -> File:
        if (record := self._data.files.get(fid)) is None:
            raise FileNotFoundError(fid)
        if not record.is_permanent:
            record = dataclasses.replace(record, status=FileStatus.PERMANENT)
            self._data.files[fid] = record
        return record

    def get_file(self, fid: int) -> File | None:
        return self._data.files.get(fid)
