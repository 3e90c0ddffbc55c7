class BabyJourneyError(Exception):
    """Base exception for the Baby Journey backend."""

    pass


class RecordNotFoundError(BabyJourneyError):
    """Raised when a record does not exist or belongs to another user."""

    def __init__(self, kind: str, record_id: object):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found")


class InvalidOperationError(BabyJourneyError):
    """Raised when a request is well-formed but not allowed on this record."""

    pass


class PersistenceError(BabyJourneyError):
    """Raised when a write to the record store fails."""

    pass
