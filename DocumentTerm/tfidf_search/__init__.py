"""
TF-IDF search module for information retrieval using the TF-IDF weighting scheme.
Ranks documents by the summed TF-IDF weight of the query terms.
"""
from .model import DocumentData, CorpusIndex
from .tfidf_search import (
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
