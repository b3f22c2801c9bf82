"""
Error taxonomy for incident operations.

Every failure is local to one operation and leaves the collection untouched.
Each class carries the HTTP status the JSON views answer with.
"""


class IncidentError(Exception):
    """Base class for all incident operation failures."""

    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(IncidentError):
    """Malformed or missing input."""

    status_code = 400


class NotFoundError(IncidentError):
    """The referenced incident does not exist."""

    status_code = 404

    def __init__(self, incident_id: str):
        self.incident_id = incident_id
        super().__init__(f"Incident {incident_id} not found")


class ConflictError(IncidentError):
    """An incident with the same id already exists."""

    status_code = 409

    def __init__(self, incident_id: str):
        self.incident_id = incident_id
        super().__init__(f"Incident ID already exists: {incident_id}")


class GenerationError(IncidentError):
    """The text-generation provider failed or returned unusable output."""

    status_code = 502

    def __init__(self, message: str, provider: str = ""):
        self.provider = provider
        super().__init__(message)


class StorageError(IncidentError):
    """The storage backend could not read or write the collection."""

    status_code = 503
