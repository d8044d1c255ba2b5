"""
Exceptions raised by the gowork core.

I/O failures are not wrapped: an unreadable directory surfaces as the
original OSError so its message (which names the path) reaches the user
unchanged.
"""


class GoworkError(Exception):
    """Base class for gowork errors."""


class MalformedIdentifierError(GoworkError, ValueError):
    """A canonical identifier has fewer separators than its level requires."""

    def __init__(self, identifier: str, kind: str):
        super().__init__(f"Malformed {kind} identifier: {identifier!r}")
        self.identifier = identifier
        self.kind = kind


class AuthorNotFoundError(GoworkError, LookupError):
    """Raised when an exact author lookup exhausts every candidate."""

    def __init__(self, message: str = "Author could not be found"):
        super().__init__(message)


class ProjectNotFoundError(GoworkError, LookupError):
    """Raised when a search term resolves to nothing."""

    def __init__(self, message: str = "Project could not be found"):
        super().__init__(message)


class AmbiguousMatchError(GoworkError, LookupError):
    """Raised when a search term resolves to more than one location."""

    def __init__(self, term: str, candidates):
        self.term = term
        self.candidates = list(candidates)
        super().__init__(
            f"{term!r} is ambiguous, {len(self.candidates)} candidates: "
            + ", ".join(str(c) for c in self.candidates)
        )
