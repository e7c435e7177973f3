"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ContentDeletedException(DomainError):
    """Raised when attempting to modify deleted content."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"Cannot modify deleted {resource} {resource_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ThreadStructureError(ValidationError):
    """A reply would violate the shape of the comment tree.

    Always detected before anything is written.
    """

    pass


class ParentNotFoundError(ThreadStructureError):
    """Raised when replying to a comment that does not exist."""

    def __init__(self, parent_id: int):
        self.parent_id = parent_id
        super().__init__(f"Parent comment not found: {parent_id}")


class CrossDiscussionParentError(ThreadStructureError):
    """Raised when the parent comment lives in another discussion."""

    def __init__(self, parent_id: int, discussion_id: int):
        self.parent_id = parent_id
        self.discussion_id = discussion_id
        super().__init__(
            f"Parent comment {parent_id} does not belong to discussion {discussion_id}"
        )


class NestingTooDeepError(ThreadStructureError):
    """Raised when a reply would exceed the maximum thread depth."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(
            f"This thread is too deeply nested to reply further (max depth {max_depth})"
        )


class PersistenceError(DomainError):
    """Storage failure. Callers decide whether to retry."""

    pass


class CommentFetchTimeoutError(DomainError):
    """Raised when reading comments exceeds the request-level timeout."""

    def __init__(self, discussion_id: int, timeout_seconds: float):
        self.discussion_id = discussion_id
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Fetching comments for discussion {discussion_id} "
            f"timed out after {timeout_seconds}s"
        )
