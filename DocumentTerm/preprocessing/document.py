from typing import Iterable, List, Optional

from .tokenizer import Tokenizer


class Document:
    """
    Represents a document in the ranking system.
    Stores the document identifier and its content as ordered lines.
    """

    def __init__(self, id: str, lines: Iterable[str] = (), title: str = ""):
        """
        Initialize a document with content.

        Args:
            id: Unique identifier for the document (usually its path)
            lines: Document content, one entry per line
            title: Optional human readable title used for display
        """
        self.id = str(id)
        self.lines = list(lines)
        self.title = title

    @classmethod
    def from_text(cls, id: str, text: str, title: str = "") -> 'Document':
        """
        Create a document from a single block of text.

        Args:
            id: Unique identifier for the document
            text: Full document text; split on line boundaries
            title: Optional title

        Returns:
            New Document
        """
        return cls(id, text.splitlines(), title=title)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def words(self, tokenizer: Optional[Tokenizer] = None) -> List[str]:
        """
        Tokenize the document content.

        Args:
            tokenizer: Tokenizer to use (defaults to the standard delimiters)

        Returns:
            Words of all lines, in order
        """
        tokenizer = tokenizer or Tokenizer()
        return tokenizer.tokenize_lines(self.lines)

    def is_empty(self, tokenizer: Optional[Tokenizer] = None) -> bool:
        return not self.words(tokenizer)

    def __repr__(self):
        return f"Document(id={self.id!r}, lines={len(self.lines)})"
