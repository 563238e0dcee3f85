import argparse
import json
import logging
import sys
from typing import List, Optional, Union

from DocumentTerm.config import SearchConfig, configure_logging, load_config
from DocumentTerm.document_source import load_documents
from DocumentTerm.errors import ConfigurationError, DocumentTermError
from DocumentTerm.preprocessing.document import Document
from DocumentTerm.tfidf_search.tfidf_search import Ranking, TFIDFSearchEngine, iter_ranking

logger = logging.getLogger(__name__)


class DocumentRanker:
    """
    Unified interface for ranking a document collection against a query.
    Loads documents once and ranks them for any number of queries.
    """
    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.engine = TFIDFSearchEngine(
            tokenizer=self.config.tokenizer(),
            skip_empty_documents=self.config.skip_empty_documents
        )
        self.documents: List[Document] = []
        self.documents_loaded = False

    def load_documents(self, corpus_path: Optional[str] = None) -> List[Document]:
        """
        Load documents from a directory or a JSON file.

        Args:
            corpus_path: Location of the documents (defaults to the configured path)

        Returns:
            The loaded documents

        Raises:
            SourceUnavailableError: If the documents cannot be read
        """
        corpus_path = corpus_path or self.config.corpus_path
        self.documents = load_documents(corpus_path, encoding=self.config.encoding)
        self.documents_loaded = True
        return self.documents

    def find_most_relevant_documents(self, terms: Optional[Union[str, List[str]]] = None) -> Ranking:
        """
        Rank the loaded documents.

        Args:
            terms: Query terms, or a query string (defaults to the configured query)

        Returns:
            Ranking from score to document identifiers, highest score first
        """
        if not self.documents_loaded:
            self.load_documents()

        if terms is None:
            terms = self.config.resolved_terms()

        return self.engine.search(terms, self.documents)

    @staticmethod
    def format_results(ranking: Ranking, top: Optional[int] = None) -> List[str]:
        """
        Format a ranking as one "Score: S, Document: D" line per document.

        Args:
            ranking: Ranking to format
            top: Maximum number of documents to include (all when None)

        Returns:
            Lines in descending score order
        """
        lines = []
        for score, document in iter_ranking(ranking):
            if top is not None and len(lines) >= top:
                break
            lines.append(f"Score: {score}, Document: {document}")
        return lines

    @staticmethod
    def save_results(ranking: Ranking, output_path: str) -> None:
        """Write a ranking to a JSON file as a list of score groups."""
        groups = [{"score": score, "documents": documents} for score, documents in ranking.items()]
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(groups, f, ensure_ascii=False, indent=2)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='DocumentTerm - TF-IDF document ranking'
    )
    parser.add_argument('--config', help='Path to a JSON configuration file')
    parser.add_argument('--corpus', help='Directory of text documents or a JSON documents file')
    parser.add_argument('--query', help='Query string to rank documents against')
    parser.add_argument('--top', type=int, default=None,
                        help='Number of documents to display (default: all)')
    parser.add_argument('--output', help='Write the ranking to this JSON file')
    parser.add_argument('--skip-empty', action='store_true', default=None,
                        help='Skip documents without words instead of failing')
    parser.add_argument('--log-level', help='Logging level (DEBUG, INFO, WARNING, ...)')
    return parser


def config_from_args(args: argparse.Namespace) -> SearchConfig:
    """Load the configuration file and apply command-line overrides."""
    config = load_config(args.config)
    return config.with_overrides(
        corpus_path=args.corpus,
        query=args.query,
        skip_empty_documents=args.skip_empty,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        config = config_from_args(args)
        configure_logging(config.log_level)
        ranker = DocumentRanker(config)
        ranking = ranker.find_most_relevant_documents()
    except ConfigurationError as e:
        configure_logging()
        logger.error("Invalid configuration: %s", e)
        return 1
    except (DocumentTermError, ValueError) as e:
        logger.error("Ranking failed: %s", e)
        return 1

    for line in ranker.format_results(ranking, top=args.top):
        print(line)

    if args.output:
        try:
            ranker.save_results(ranking, args.output)
        except OSError as e:
            logger.error("Could not write %s: %s", args.output, e)
            return 1
        logger.info("Ranking saved to %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
