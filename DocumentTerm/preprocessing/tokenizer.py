"""
Delimiter-based tokenizer used for both documents and queries.
"""
import re
from typing import Iterable, List, Sequence

# "/d" and "/n" are literal two-character delimiters, not digit or newline
# classes. Changing them changes tokenization of any text containing them.
DEFAULT_DELIMITERS = (".", ",", "-", " ", "?", "!", ";", ":", "/d", "/n")


class Tokenizer:
    """Split text into words on runs of a fixed set of literal delimiters."""

    def __init__(self, delimiters: Sequence[str] = DEFAULT_DELIMITERS):
        """
        Initialize the tokenizer.

        Args:
            delimiters: Literal strings that separate words. Longer
                delimiters are tried first so that "/d" wins over a
                single-character delimiter sharing its prefix.

        Raises:
            ValueError: If no delimiters are given or one of them is empty
        """
        delimiters = tuple(delimiters)
        if not delimiters or any(not d for d in delimiters):
            raise ValueError("Tokenizer needs at least one non-empty delimiter")

        self.delimiters = delimiters
        ordered = sorted(set(delimiters), key=len, reverse=True)
        self._split_pattern = re.compile(
            "(?:" + "|".join(re.escape(d) for d in ordered) + ")+"
        )

    def tokenize(self, text: str) -> List[str]:
        """
        Split a single line of text into words.

        Adjacent delimiters collapse into one split, and empty tokens at the
        start or end of the line are dropped.

        Args:
            text: Text to split

        Returns:
            List of words in the order they appear
        """
        return [word for word in self._split_pattern.split(text) if word]

    def tokenize_lines(self, lines: Iterable[str]) -> List[str]:
        """
        Tokenize a sequence of lines and concatenate the words in line order.

        Args:
            lines: Lines of a document

        Returns:
            List of words across all lines
        """
        words = []
        for line in lines:
            words.extend(self.tokenize(line))
        return words

    def __repr__(self):
        return f"Tokenizer(delimiters={self.delimiters!r})"


_default_tokenizer = Tokenizer()


def tokenize(text: str) -> List[str]:
    """Tokenize one line with the default delimiters."""
    return _default_tokenizer.tokenize(text)


def tokenize_lines(lines: Iterable[str]) -> List[str]:
    """Tokenize several lines with the default delimiters."""
    return _default_tokenizer.tokenize_lines(lines)
