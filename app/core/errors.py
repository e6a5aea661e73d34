class RepositoryError(Exception):
    """Base class for errors raised by the service layer."""


class NotFoundError(RepositoryError):
    def __init__(self, id: int):
        self.id = id
        super().__init__(f"NotFound, id is {id}")


class DuplicateError(RepositoryError):
    def __init__(self, id: int):
        self.id = id
        super().__init__(f"Duplicate data, id is {id}")


class InvalidReferenceError(RepositoryError):
    """Raised when a commit is rejected by a foreign key check."""

    def __init__(self, label_ids: list[int]):
        self.label_ids = label_ids
        super().__init__(f"Unknown label id in {label_ids}")
