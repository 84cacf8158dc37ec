"""Unit tests for the `File` snapshot."""

from testing_example.interfaces.files import File, FileStatus

# pylint: disable=magic-value-comparison


def _file(uri: str, status: FileStatus = FileStatus.TEMPORARY) -> File:
    return File(fid=1, uuid="u", uri=uri, filename=uri.rsplit("/", 1)[-1], status=status)


def test_public_files_are_served_from_the_files_directory() -> None:
    """public:// maps onto /sites/default/files."""
    assert _file("public://2024/photo.png").url == "/sites/default/files/2024/photo.png"


def test_other_schemes_are_returned_verbatim() -> None:
    """Non-public URIs are not rewritten."""
    assert _file("vfs://abc.png").url == "vfs://abc.png"


def test_scheme() -> None:
    """The scheme is everything before ://."""
    assert _file("private://a.txt").scheme == "private"


def test_permanence_follows_status() -> None:
    """is_permanent reflects the status."""
    assert not _file("public://a.png").is_permanent
    assert _file("public://a.png", FileStatus.PERMANENT).is_permanent
