"""
TF-IDF search module for ranking documents against a multi-word query.
Scores are the sum over query terms of TF(term, doc) * IDF(term, corpus),
and documents sharing a score are grouped together.
"""
import logging
import math
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from ..errors import EmptyDocumentError, MissingCorpusEntryError
from ..preprocessing.document import Document
from ..preprocessing.tokenizer import Tokenizer
from .model import CorpusIndex, DocumentData

logger = logging.getLogger(__name__)

# Descending score -> document ids with exactly that score
Ranking = Dict[float, List[str]]


def compute_tf(words: Sequence[str], term: str) -> float:
    """
    Compute the term frequency of a term in a list of words.
    TF(t,d) = count(t in d) / len(d)

    Args:
        words: Words of the document
        term: Term to count (exact, case-sensitive match)

    Returns:
        Term frequency in [0, 1]

    Raises:
        EmptyDocumentError: If words is empty
    """
    if not words:
        raise EmptyDocumentError()

    count = 0
    for word in words:
        if word == term:
            count += 1
    return count / len(words)


def create_document_data(words: Sequence[str], terms: Iterable[str]) -> DocumentData:
    """
    Build the frequency table of a document for the given query terms.
    Every term gets an entry, including an explicit 0.0 for terms the
    document does not contain.

    Args:
        words: Words of the document
        terms: Query terms

    Returns:
        DocumentData populated with one frequency per distinct term

    Raises:
        EmptyDocumentError: If words is empty
    """
    if not words:
        raise EmptyDocumentError()

    document_data = DocumentData()
    for term in terms:
        document_data.add_term(term, compute_tf(words, term))
    return document_data


def compute_idf(term: str, corpus: Mapping[str, DocumentData]) -> float:
    """
    Calculate the inverse document frequency of a term.
    IDF(t) = log10(N / DF(t)), or 0 when no document contains the term.

    Args:
        term: The term to calculate IDF for
        corpus: Document identifier to DocumentData mapping

    Returns:
        IDF value for the term
    """
    number_of_documents = 0
    for _, document_data in corpus.items():
        if document_data.get_term_frequency(term) > 0.0:
            number_of_documents += 1

    if number_of_documents == 0:
        return 0.0
    return math.log10(len(corpus) / number_of_documents)


def compute_idf_map(terms: Iterable[str], corpus: Mapping[str, DocumentData]) -> Dict[str, float]:
    """Map each term to its IDF over the corpus."""
    return {term: compute_idf(term, corpus) for term in terms}


def compute_document_score(terms: Iterable[str], document_data: DocumentData,
                           idf_map: Mapping[str, float]) -> float:
    """
    Calculate the TF-IDF score of one document.

    Repeated query terms contribute once per occurrence, so repeating a word
    in the query increases its weight.

    Args:
        terms: Query terms
        document_data: Term frequencies of the document
        idf_map: IDF value of every query term

    Returns:
        Sum of TF * IDF over the query terms

    Raises:
        MissingCorpusEntryError: If a term is missing from either mapping
    """
    score = 0.0
    for term in terms:
        term_frequency = document_data.get_term_frequency(term)
        try:
            inverse_document_frequency = idf_map[term]
        except KeyError:
            raise MissingCorpusEntryError(term, where="IDF map") from None
        score += term_frequency * inverse_document_frequency
    return score


def rank_documents(terms: Sequence[str], corpus: Mapping[str, DocumentData]) -> Ranking:
    """
    Group documents by score, ordered by descending score.

    Documents with exactly equal scores share one group, in corpus
    iteration order. Scores that differ only by floating point drift are
    kept apart.

    Args:
        terms: Query terms
        corpus: Document identifier to DocumentData mapping

    Returns:
        Dict from score to document identifiers, highest score first
    """
    terms = list(terms)
    idf_map = compute_idf_map(terms, corpus)

    score_to_documents: Dict[float, List[str]] = {}
    for document, document_data in corpus.items():
        score = compute_document_score(terms, document_data, idf_map)
        score_to_documents.setdefault(score, []).append(document)

    return {score: score_to_documents[score]
            for score in sorted(score_to_documents, reverse=True)}


def iter_ranking(ranking: Ranking) -> Iterator[Tuple[float, str]]:
    """Yield (score, document) pairs in presentation order."""
    for score, documents in ranking.items():
        for document in documents:
            yield score, document


class TFIDFSearchEngine:
    """TF-IDF search engine over a fully loaded set of documents"""

    def __init__(self, tokenizer: Optional[Tokenizer] = None, skip_empty_documents: bool = False):
        """
        Initialize the TF-IDF search engine.

        Args:
            tokenizer: Tokenizer for documents and queries
            skip_empty_documents: Leave out documents without words instead
                of failing the whole search
        """
        self.tokenizer = tokenizer or Tokenizer()
        self.skip_empty_documents = skip_empty_documents

    def query_terms(self, query: str) -> List[str]:
        """Tokenize a query string into terms."""
        return self.tokenizer.tokenize(query)

    def build_corpus_index(self, documents: Iterable[Document], terms: Sequence[str]) -> CorpusIndex:
        """
        Compute the DocumentData of every document for the query terms.

        Args:
            documents: Documents to index
            terms: Query terms

        Returns:
            CorpusIndex in document order

        Raises:
            EmptyDocumentError: If a document has no words and empty
                documents are not skipped
            ValueError: If two documents share an identifier
        """
        corpus = CorpusIndex()
        for document in documents:
            words = document.words(self.tokenizer)
            if not words:
                if self.skip_empty_documents:
                    logger.warning("Skipping empty document %s", document.id)
                    continue
                raise EmptyDocumentError(document.id)
            corpus.add_document_data(document.id, create_document_data(words, terms))

        logger.debug("Indexed %d documents for %d distinct terms", len(corpus), len(set(terms)))
        return corpus

    def search(self, query: Union[str, Sequence[str]], documents: Iterable[Document]) -> Ranking:
        """
        Rank documents against a query.

        Args:
            query: Query string, or an already tokenized list of terms
            documents: Documents to rank

        Returns:
            Ranking from score to document identifiers, highest score first
        """
        terms = self.query_terms(query) if isinstance(query, str) else list(query)
        corpus = self.build_corpus_index(documents, terms)
        return rank_documents(terms, corpus)
