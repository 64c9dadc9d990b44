"""Exception classes for the Rolodex search service."""


class RolodexError(Exception):
    """Base exception for all Rolodex errors."""
    status_code = 500


class InvalidQuery(RolodexError):
    """Raised when the search query is missing or blank."""
    status_code = 400


class InvalidRequestBody(RolodexError):
    """Raised when the request body cannot be parsed."""
    status_code = 400


class StorageUnavailable(RolodexError):
    """Raised when a person/note read fails."""
    status_code = 500
