"""
Plain data structures shared by the TF-IDF functions.
"""
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..errors import MissingCorpusEntryError


class DocumentData:
    """
    Term frequencies of a single document, restricted to the terms of one
    query. It is not a frequency table of every word in the document.
    """

    def __init__(self, term_frequency: Optional[Mapping[str, float]] = None):
        self._term_frequency: Dict[str, float] = dict(term_frequency or {})

    def add_term(self, term: str, frequency: float) -> None:
        """Store the frequency of a term, replacing any previous value."""
        self._term_frequency[term] = frequency

    def get_term_frequency(self, term: str) -> float:
        """
        Get the stored frequency of a term.

        Args:
            term: Term to look up

        Returns:
            Term frequency in [0, 1]

        Raises:
            MissingCorpusEntryError: If the term was never added
        """
        try:
            return self._term_frequency[term]
        except KeyError:
            raise MissingCorpusEntryError(term) from None

    @property
    def terms(self) -> List[str]:
        return list(self._term_frequency)

    def to_dict(self) -> Dict[str, float]:
        return dict(self._term_frequency)

    def __contains__(self, term):
        return term in self._term_frequency

    def __len__(self):
        return len(self._term_frequency)

    def __eq__(self, other):
        if not isinstance(other, DocumentData):
            return NotImplemented
        return self._term_frequency == other._term_frequency

    def __repr__(self):
        return f"DocumentData({self._term_frequency!r})"


class CorpusIndex:
    """Document identifier to DocumentData mapping, in insertion order."""

    def __init__(self):
        self._documents: Dict[str, DocumentData] = {}

    def add_document_data(self, document: str, document_data: DocumentData) -> None:
        """
        Add the frequency table of a document.

        Args:
            document: Unique document identifier
            document_data: Term frequencies of that document

        Raises:
            ValueError: If the document is already indexed
        """
        if document in self._documents:
            raise ValueError(f"Document '{document}' is already indexed")
        self._documents[document] = document_data

    def get_document_data(self, document: str) -> DocumentData:
        return self._documents[document]

    @property
    def documents(self) -> Mapping[str, DocumentData]:
        """Read-only view of the indexed documents."""
        return MappingProxyType(self._documents)

    def items(self) -> Iterator[Tuple[str, DocumentData]]:
        return iter(self._documents.items())

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {document: data.to_dict() for document, data in self._documents.items()}

    def __iter__(self):
        return iter(self._documents)

    def __len__(self):
        return len(self._documents)

    def __contains__(self, document):
        return document in self._documents

    def __repr__(self):
        return f"CorpusIndex(documents={len(self._documents)})"
