"""
Typed failures raised by the ranking engine and the document sources.
"""


class DocumentTermError(Exception):
    """Base class for every failure raised by DocumentTerm."""


class EmptyDocumentError(DocumentTermError):
    """A document has no words, so its term frequencies are undefined."""

    def __init__(self, document=None):
        self.document = document
        if document is None:
            message = "Cannot compute term frequency over an empty word list"
        else:
            message = f"Document '{document}' contains no words"
        super().__init__(message)


class MissingCorpusEntryError(DocumentTermError, LookupError):
    """
    A queried term has no entry in a document's frequency table or in the
    IDF map. Documents built with create_document_data always carry every
    queried term, so this signals a programming error.
    """

    def __init__(self, term, where="document data"):
        self.term = term
        super().__init__(f"Term '{term}' missing from {where}")


class SourceUnavailableError(DocumentTermError):
    """Documents could not be enumerated or read."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Cannot read documents from {path}: {reason}")


class ConfigurationError(DocumentTermError):
    """A configuration value has the wrong type or an unusable value."""
