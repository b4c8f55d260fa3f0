"""Store integrity errors.

Unknown ids are not errors: lookups return None. These exceptions cover
states the store cannot represent consistently.
"""


class StoreIntegrityError(Exception):
    """Base class for store consistency failures."""


class MissingClientError(StoreIntegrityError):
    """A meeting references a client id that is not stored."""

    def __init__(self, client_id: int, meeting_id: int | None = None):
        self.client_id = client_id
        self.meeting_id = meeting_id
        if meeting_id is None:
            message = f"Client {client_id} does not exist"
        else:
            message = f"Meeting {meeting_id} references missing client {client_id}"
        super().__init__(message)


class DuplicateKeyError(StoreIntegrityError):
    """A unique key is already taken."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} with key '{key}' already exists")
