"""Custom exception classes for the API layer.

The ontology pipeline itself never raises; these errors describe requests
the service refuses before the pipeline runs.
"""


class DocumentVerificationException(Exception):
    """Base exception for all application errors."""

    pass


class ValidationError(DocumentVerificationException):
    """Exception raised when a request cannot be processed as given."""

    pass


class EmptyDocumentError(ValidationError):
    """Exception raised when a document contains no text."""

    pass
