"""
Runtime configuration: where the documents live and what to search for.
"""
import codecs
import json
import logging
import os
from dataclasses import dataclass, field, fields, replace
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .errors import ConfigurationError
from .preprocessing.tokenizer import DEFAULT_DELIMITERS, Tokenizer

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")


@dataclass
class SearchConfig:
    """Settings for one ranking run."""
    corpus_path: str = "data/books"
    query: str = "the girl that falls"
    terms: Optional[List[str]] = None
    delimiters: List[str] = field(default_factory=lambda: list(DEFAULT_DELIMITERS))
    skip_empty_documents: bool = False
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    def __post_init__(self):
        """
        Check every field. Runs for file values, defaults and overrides alike.

        Raises:
            ConfigurationError: If a value has the wrong type or cannot be used
        """
        for name in ("corpus_path", "query", "encoding", "log_level"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(f"'{name}' must be a string, got {value!r}")

        if not isinstance(self.skip_empty_documents, bool):
            raise ConfigurationError(
                f"'skip_empty_documents' must be true or false, got {self.skip_empty_documents!r}")

        if self.terms is not None and (
                not isinstance(self.terms, list) or not all(isinstance(t, str) for t in self.terms)):
            raise ConfigurationError(f"'terms' must be a list of strings, got {self.terms!r}")

        if (not isinstance(self.delimiters, list) or not self.delimiters
                or not all(isinstance(d, str) and d for d in self.delimiters)):
            raise ConfigurationError(
                f"'delimiters' must be a non-empty list of non-empty strings, got {self.delimiters!r}")

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ConfigurationError(f"Unknown encoding '{self.encoding}'") from None

        check_log_level(self.log_level)

    def tokenizer(self) -> Tokenizer:
        return Tokenizer(self.delimiters)

    def resolved_terms(self) -> List[str]:
        """Pre-tokenized terms if configured, otherwise the tokenized query."""
        if self.terms is not None:
            return list(self.terms)
        return self.tokenizer().tokenize(self.query)

    def with_overrides(self, **overrides) -> 'SearchConfig':
        """
        Return a copy with the given fields replaced.
        None values are ignored so unset command-line flags keep file values.
        A new query clears configured terms so they are derived from it.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "query" in changes and "terms" not in changes:
            changes["terms"] = None
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict) -> 'SearchConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in data.items() if key in known})


def load_config(config_path: Optional[str] = None) -> SearchConfig:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the JSON file (defaults to the packaged config.json)

    Returns:
        SearchConfig; built-in defaults when the file is missing or unreadable

    Raises:
        ConfigurationError: If the file holds invalid values
    """
    config_path = config_path or DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        logger.warning("Config file %s not found, using default settings", config_path)
        return SearchConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not load config %s: %s, using default settings", config_path, e)
        return SearchConfig()

    if not isinstance(data, dict):
        logger.warning("Config %s is not a JSON object, using default settings", config_path)
        return SearchConfig()

    return SearchConfig.from_dict(data)


def check_log_level(level: str) -> int:
    """
    Resolve a logging level name such as "info" or "DEBUG".

    Raises:
        ConfigurationError: If the name is not a known logging level
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(level: str = "WARNING") -> None:
    """Send log records through rich on the root logger."""
    logging.basicConfig(
        level=check_log_level(level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
