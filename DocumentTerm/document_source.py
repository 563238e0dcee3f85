"""
Document sources: enumerate documents and read them into lines.
"""
import json
import logging
import os
from typing import Iterator, List

from .errors import SourceUnavailableError
from .preprocessing.document import Document

logger = logging.getLogger(__name__)


class DirectoryDocumentSource:
    """One document per regular file directly under a directory."""

    def __init__(self, root: str, encoding: str = "utf-8"):
        self.root = root
        self.encoding = encoding

    def document_paths(self) -> List[str]:
        """
        List the document files, sorted by name so rankings are reproducible.

        Raises:
            SourceUnavailableError: If the directory is missing or unreadable
        """
        if not os.path.isdir(self.root):
            raise SourceUnavailableError(self.root, "not a directory")
        try:
            names = sorted(os.listdir(self.root))
        except OSError as e:
            raise SourceUnavailableError(self.root, e) from e

        paths = [os.path.join(self.root, name) for name in names]
        return [path for path in paths if os.path.isfile(path)]

    def read_document(self, path: str) -> Document:
        try:
            with open(path, "r", encoding=self.encoding) as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(path, e) from e
        return Document(path, lines, title=os.path.basename(path))

    def __iter__(self) -> Iterator[Document]:
        for path in self.document_paths():
            yield self.read_document(path)


class JsonDocumentSource:
    """
    Documents stored in a JSON file, either as a list of objects
    ({"id", "title", "abstract", "text" or "content"}) or as an object
    mapping document id to text.
    """

    def __init__(self, path: str, encoding: str = "utf-8"):
        self.path = path
        self.encoding = encoding

    def _load(self):
        try:
            with open(self.path, "r", encoding=self.encoding) as f:
                return json.load(f)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(self.path, e) from e
        except json.JSONDecodeError as e:
            raise SourceUnavailableError(self.path, f"invalid JSON: {e}") from e

    def _text_field(self, doc_id, name: str, value) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise SourceUnavailableError(
                self.path, f"'{name}' of document {doc_id} must be a string, got {type(value).__name__}")
        return value

    def _document_from_dict(self, position: int, doc: dict) -> Document:
        doc_id = str(doc.get("id", position))
        title = self._text_field(doc_id, "title", doc.get("title"))
        text = self._text_field(doc_id, "text", doc.get("text"))
        if not text:
            text = self._text_field(doc_id, "content", doc.get("content"))
        if not text:
            # Fall back to whatever descriptive fields are present
            abstract = self._text_field(doc_id, "abstract", doc.get("abstract"))
            text = "\n".join(filter(None, [title, abstract]))
        return Document.from_text(doc_id, text, title=title)

    def __iter__(self) -> Iterator[Document]:
        data = self._load()

        if isinstance(data, dict):
            for doc_id, text in data.items():
                yield Document.from_text(doc_id, self._text_field(doc_id, "text", text))
        elif isinstance(data, list):
            for position, doc in enumerate(data):
                if not isinstance(doc, dict):
                    raise SourceUnavailableError(self.path, f"entry {position} is not an object")
                yield self._document_from_dict(position, doc)
        else:
            raise SourceUnavailableError(self.path, "expected a JSON list or object")


def load_documents(path: str, encoding: str = "utf-8") -> List[Document]:
    """
    Load every document from a directory of text files or a JSON file.

    Args:
        path: Directory or JSON file
        encoding: Text encoding of the files

    Returns:
        Documents in a deterministic order

    Raises:
        SourceUnavailableError: If the path does not exist or cannot be read
    """
    if os.path.isdir(path):
        source = DirectoryDocumentSource(path, encoding=encoding)
    elif os.path.isfile(path):
        source = JsonDocumentSource(path, encoding=encoding)
    else:
        raise SourceUnavailableError(path, "no such file or directory")

    documents = list(source)
    logger.info("Loaded %d documents from %s", len(documents), path)
    return documents
