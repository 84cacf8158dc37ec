"""Managed file interface definitions."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from enum import Enum

PUBLIC_SCHEME = "public"
PUBLIC_FILES_PATH = "/sites/default/files"


class FileStatus(Enum):
    """Lifecycle status of a managed file."""

    TEMPORARY = 0
    PERMANENT = 1


@dataclass(frozen=True, slots=True)
class File:
    """Immutable snapshot of a managed file record.

    Conventions:
      - `uri` has the form `scheme://target` (e.g. "public://photo.png").
      - `filename` is the last path segment of the target.
    """

    fid: int
    uuid: str
    uri: str
    filename: str
    status: FileStatus = FileStatus.TEMPORARY

    @property
    def is_permanent(self) -> bool:
        """True once the file has been marked permanent."""
        return self.status is FileStatus.PERMANENT

    @property
    def scheme(self) -> str:
        """The stream wrapper scheme of `uri` (e.g. "public")."""
        return self.uri.split("://", 1)[0]

    @property
    def url(self) -> str:
        """Browser-facing location of the file.

        `public://` files are served from the public files directory; any other
        scheme is returned unchanged.
        """
        scheme, target = self.uri.split("://", 1)
        if scheme == PUBLIC_SCHEME:
            return f"{PUBLIC_FILES_PATH}/{target}"
        return self.uri


class FileRepository(abc.ABC):
    """Contract for the managed file collaborator."""

    @abc.abstractmethod
    def create_file(self, uri: str, *, permanent: bool = False) -> File:
        """Register a managed file record.

        Args:
            uri: The file URI, `scheme://target`.
            permanent: Create the record as permanent instead of temporary.

        Returns:
            File: The stored snapshot.

        Raises:
            InvalidFileUriError: If `uri` has no scheme or no target.
        """

    @abc.abstractmethod
    def set_permanent(self, fid: int) -> File:
        """Mark a file permanent. Idempotent.

        Raises:
            FileNotFoundError: If no file has id `fid`.
        """

    @abc.abstractmethod
    def get_file(self, fid: int) -> File | None:
        """Return the file with id `fid`, or None."""
