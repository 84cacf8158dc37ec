"""Errors raised by the site collaborators."""

# ============================================================================
#                           General site errors
# ============================================================================


class SiteError(Exception):
    """Base class for all collaborator errors."""


class InvalidEntityError(SiteError):
    """Raised when an entity definition is malformed or not supported."""

    def __init__(self, kind: str, key: object, reason: str) -> None:
        super().__init__(f"Invalid {kind} ({key}): {reason}")
        self.kind = kind
        self.key = key
        self.reason = reason


class DuplicateEntityError(SiteError):
    """Raised when creating an entity whose key is already taken."""

    def __init__(self, kind: str, key: object) -> None:
        super().__init__(f"{kind} ({key}) already exists")
        self.kind = kind
        self.key = key


# ============================================================================
#                           Lookup errors
# ============================================================================


class EntityNotFoundError(SiteError):
    """Base class for errors raised when a referenced entity does not exist."""

    KIND = "entity"

    def __init__(self, key: object) -> None:
        super().__init__(f"{self.KIND} ({key}) not found")
        self.key = key


class NodeNotFoundError(EntityNotFoundError):
    """Raised when a node id is unknown."""

    KIND = "node"


class ContentTypeNotFoundError(EntityNotFoundError):
    """Raised when a content type (node bundle) is unknown."""

    KIND = "content type"


class FieldNotFoundError(EntityNotFoundError):
    """Raised when a field storage or field instance is unknown."""

    KIND = "field"


class VocabularyNotFoundError(EntityNotFoundError):
    """Raised when a vocabulary id is unknown."""

    KIND = "vocabulary"


class TermNotFoundError(EntityNotFoundError):
    """Raised when a taxonomy term id is unknown."""

    KIND = "term"


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user id is unknown."""

    KIND = "user"


class RoleNotFoundError(EntityNotFoundError):
    """Raised when a role id is unknown."""

    KIND = "role"


class FileNotFoundError(EntityNotFoundError):  # pylint: disable=redefined-builtin
    """Raised when a managed file id is unknown.

    Note:
        This shadows the builtin of the same name inside modules that import
        it; the builtin is not used by the collaborators.
    """

    KIND = "file"


# ============================================================================
#                           Value and access errors
# ============================================================================


class FieldValueError(SiteError):
    """Raised when a node field value violates its field definition."""

    def __init__(self, field_name: str, reason: str) -> None:
        super().__init__(f"Invalid value for {field_name}: {reason}")
        self.field_name = field_name
        self.reason = reason


class UnknownPermissionError(SiteError):
    """Raised when permissions are not present in the site's registry.

    Attributes:
        permissions (tuple[str, ...]): The unknown permission names, sorted.
    """

    def __init__(self, permissions: tuple[str, ...]) -> None:
        super().__init__(f"Unknown permission(s): {', '.join(permissions)}")
        self.permissions = permissions


class InvalidFileUriError(SiteError):
    """Raised when a file URI lacks a `scheme://target` form."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"File URI '{uri}' must have the form scheme://target")
        self.uri = uri


class LoginError(SiteError):
    """Raised when the simulated browser cannot log a user in."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Cannot log in as '{name}': {reason}")
        self.name = name
        self.reason = reason
