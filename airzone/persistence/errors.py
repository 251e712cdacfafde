"""Persistence-specific exceptions."""

from airzone.contracts.enums import RejectReason


class PersistenceError(Exception):
    """Base exception for all persistence errors."""


class DocumentNotFoundError(PersistenceError):
    """Raised when a Firestore document does not exist."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"{collection}/{doc_id} not found")


class ZoneRejectedError(PersistenceError):
    """Raised when a zone write fails validation. Nothing was written."""

    def __init__(self, reason: RejectReason, message: str):
        self.reason = reason
        self.message = message
        super().__init__(f"{reason.value}: {message}")


class ScheduleRejectedError(PersistenceError):
    """Raised when a schedule write or lookup window is invalid."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
