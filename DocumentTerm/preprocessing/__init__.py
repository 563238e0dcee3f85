"""
Preprocessing module for turning raw document text into word sequences.
Includes the delimiter tokenizer and the Document container.
"""
from .tokenizer import Tokenizer, DEFAULT_DELIMITERS, tokenize, tokenize_lines
from .document import Document
