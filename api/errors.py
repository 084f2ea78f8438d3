"""
Error taxonomy for the document namespace and indexing engine.

Request-time errors (NotFound, Conflict, Validation, EngineUnavailable) are
raised synchronously to the caller and mapped to HTTP status codes by the
route modules. Run-time errors (IndexingFault, ExtractionError) never reach
the caller of trigger(); they are recorded in the index status.
"""


class NamespaceError(Exception):
    """Base class for all domain errors"""
    pass


class NotFoundError(NamespaceError):
    """Path or version does not exist"""
    pass


class ConflictError(NamespaceError):
    """Path kind clash, or an operation that cannot run concurrently"""
    pass


class IndexingInProgressError(ConflictError):
    """An indexing run is already active"""

    def __init__(self, message: str = "Indexing already in progress"):
        super().__init__(message)


class ValidationError(NamespaceError):
    """Malformed request value"""
    pass


class PathValidationError(ValidationError):
    """Malformed or disallowed namespace path"""
    pass


class InvalidIntervalError(ValidationError):
    """Auto-index interval is not a positive integer"""
    pass


class EngineUnavailableError(NamespaceError):
    """Indexing engine failed to initialize; permanent until restart"""
    pass


class IndexingFault(NamespaceError):
    """Fatal error that aborts an in-progress indexing run"""
    pass


class VectorStoreUnavailableError(IndexingFault):
    """Vector store boundary cannot be reached"""
    pass


class ExtractionError(NamespaceError):
    """Per-file failure while parsing a document (non-fatal)"""
    pass


class UnsupportedFormatError(ExtractionError):
    """File format is not recognised by any extractor"""
    pass
