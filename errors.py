# errors.py
class AppError(Exception):
    """Base class for failures surfaced to the client as a server error."""


class ParseError(AppError):
    """A store file has content that is not a well-formed JSON array."""


class StoreWriteError(AppError):
    """Writing a store file failed."""


class EmptyCollectionError(AppError):
    """A verse was requested from an empty verse collection."""


class ExportError(AppError):
    """The prayer requests could not be serialized to CSV."""
