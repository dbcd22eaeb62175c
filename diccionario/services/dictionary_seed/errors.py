class DictionarySeedError(RuntimeError):
    """Base error for the dictionary seeding pipeline."""


class MalformedCatalogEntry(DictionarySeedError, ValueError):
    """Raised when a catalog record has an empty term or an unknown category."""

    def __init__(self, message: str, term: str | None = None):
        super().__init__(message)
        self.term = term


class PersistenceFailure(DictionarySeedError):
    """Raised when the term store fails while counting, listing or upserting."""

    def __init__(self, message: str, term: str | None = None):
        super().__init__(message)
        self.term = term
