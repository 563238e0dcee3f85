"""
DocumentTerm - rank text documents against a query with TF-IDF.
"""
from DocumentTerm.errors import (
    ConfigurationError,
    DocumentTermError,
    EmptyDocumentError,
    MissingCorpusEntryError,
    SourceUnavailableError,
)
from DocumentTerm.preprocessing import Document, Tokenizer, DEFAULT_DELIMITERS, tokenize, tokenize_lines
from DocumentTerm.tfidf_search import (
    CorpusIndex,
    DocumentData,
    Ranking,
    TFIDFSearchEngine,
    compute_tf,
    create_document_data,
    compute_idf,
    compute_idf_map,
    compute_document_score,
    rank_documents,
    iter_ranking,
)
from DocumentTerm.document_source import DirectoryDocumentSource, JsonDocumentSource, load_documents
from DocumentTerm.config import SearchConfig, load_config, configure_logging

__version__ = "1.0.0"
