"""
Test configuration loading and the command-line drivers
"""

import json
import logging
import math
import os

import pytest

import cli_app
from DocumentTerm.config import DEFAULT_CONFIG_PATH, SearchConfig, check_log_level, load_config
from DocumentTerm.errors import ConfigurationError
from DocumentTerm.main import DocumentRanker, main


@pytest.fixture
def corpus_dir(tmp_path):
    books = tmp_path / "books"
    books.mkdir()
    (books / "a.txt").write_text("the cat sat\n", encoding="utf-8")
    (books / "b.txt").write_text("the dog ran\n", encoding="utf-8")
    (books / "c.txt").write_text("a cat and a dog\n", encoding="utf-8")
    return books


def doc(corpus_dir, name):
    return os.path.join(str(corpus_dir), name)


def test_packaged_config_loads():
    config = load_config(DEFAULT_CONFIG_PATH)
    assert config.query == "the girl that falls"
    assert config.resolved_terms() == ["the", "girl", "that", "falls"]


def test_missing_config_uses_defaults(tmp_path):
    assert load_config(str(tmp_path / "missing.json")) == SearchConfig()


def test_invalid_config_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")
    assert load_config(str(path)) == SearchConfig()


def test_config_file_values_and_unknown_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "corpus_path": "somewhere",
        "terms": ["cold", "winter"],
        "skip_empty_documents": True,
        "unexpected": 1,
    }), encoding="utf-8")

    config = load_config(str(path))

    assert config.corpus_path == "somewhere"
    assert config.skip_empty_documents is True
    assert config.resolved_terms() == ["cold", "winter"]


def test_overrides_ignore_none_and_reset_terms():
    config = SearchConfig(query="cold winter", terms=["x"])

    assert config.with_overrides(query=None, corpus_path=None) == config

    overridden = config.with_overrides(query="best detective")
    assert overridden.terms is None
    assert overridden.resolved_terms() == ["best", "detective"]


def test_ranker_finds_most_relevant_documents(corpus_dir):
    ranker = DocumentRanker(SearchConfig(corpus_path=str(corpus_dir), query="cat"))
    ranking = ranker.find_most_relevant_documents()

    idf = math.log10(3 / 2)
    assert list(ranking) == pytest.approx([idf / 3, idf / 5, 0.0])
    assert list(ranking.values()) == [
        [doc(corpus_dir, "a.txt")],
        [doc(corpus_dir, "c.txt")],
        [doc(corpus_dir, "b.txt")],
    ]


def test_format_results():
    lines = DocumentRanker.format_results({0.5: ["x", "y"], 0.0: ["z"]})
    assert lines == [
        "Score: 0.5, Document: x",
        "Score: 0.5, Document: y",
        "Score: 0.0, Document: z",
    ]
    assert DocumentRanker.format_results({0.5: ["x", "y"], 0.0: ["z"]}, top=2) == lines[:2]


def test_main_prints_ranking(corpus_dir, capsys):
    exit_code = main(["--corpus", str(corpus_dir), "--query", "cat"])

    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split("Document: ")[1] for line in lines] == [
        doc(corpus_dir, "a.txt"),
        doc(corpus_dir, "c.txt"),
        doc(corpus_dir, "b.txt"),
    ]
    assert lines[-1].startswith("Score: 0.0, ")


def test_main_top_and_output(corpus_dir, tmp_path, capsys):
    output = tmp_path / "ranking.json"
    exit_code = main(["--corpus", str(corpus_dir), "--query", "dog", "--top", "1",
                      "--output", str(output)])

    assert exit_code == 0
    assert len(capsys.readouterr().out.splitlines()) == 1

    groups = json.loads(output.read_text(encoding="utf-8"))
    assert [group["documents"] for group in groups] == [
        [doc(corpus_dir, "b.txt")],
        [doc(corpus_dir, "c.txt")],
        [doc(corpus_dir, "a.txt")],
    ]


def test_main_missing_corpus_fails(tmp_path, capsys):
    assert main(["--corpus", str(tmp_path / "missing"), "--query", "cat"]) == 1
    assert capsys.readouterr().out == ""


def test_main_empty_document(corpus_dir):
    (corpus_dir / "empty.txt").write_text("\n\n", encoding="utf-8")

    assert main(["--corpus", str(corpus_dir), "--query", "cat"]) == 1
    assert main(["--corpus", str(corpus_dir), "--query", "cat", "--skip-empty"]) == 0


def test_cli_app_search(corpus_dir):
    cli = cli_app.DocumentTermCLI(SearchConfig(corpus_path=str(corpus_dir)))
    assert cli.load_documents()

    ranking = cli.search("dog")
    assert ranking[0.0] == [doc(corpus_dir, "a.txt")]


def test_cli_app_main(corpus_dir):
    assert cli_app.main(["--corpus", str(corpus_dir), "--query", "cat", "--top", "2"]) == 0
    assert cli_app.main(["--corpus", str(corpus_dir / "missing")]) == 1


def test_cli_app_interactive_mode(corpus_dir, monkeypatch):
    queries = iter(["cat", "dog", "quit", "never reached"])
    monkeypatch.setattr(cli_app.console, "input", lambda prompt="": next(queries))

    searched = []
    original_search = cli_app.DocumentTermCLI.search

    def recording_search(self, query, terms=None):
        searched.append(query)
        return original_search(self, query, terms)

    monkeypatch.setattr(cli_app.DocumentTermCLI, "search", recording_search)

    assert cli_app.main(["--corpus", str(corpus_dir), "--interactive"]) == 0
    assert searched == ["cat", "dog"]


@pytest.mark.parametrize("values", [
    {"query": None},
    {"delimiters": []},
    {"delimiters": [" ", ""]},
    {"terms": "cold winter"},
    {"skip_empty_documents": "yes"},
    {"encoding": "no-such-codec"},
    {"log_level": "verbose"},
])
def test_invalid_config_values_are_rejected(tmp_path, values):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(values), encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_invalid_override_is_rejected():
    with pytest.raises(ConfigurationError):
        SearchConfig().with_overrides(log_level="verbose")


def test_check_log_level():
    assert check_log_level("debug") == logging.DEBUG
    with pytest.raises(ConfigurationError):
        check_log_level("verbose")


def test_main_unknown_log_level_fails(corpus_dir, capsys):
    assert main(["--corpus", str(corpus_dir), "--query", "cat", "--log-level", "verbose"]) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("values", [{"delimiters": []}, {"query": None}])
def test_main_invalid_config_file_fails(corpus_dir, tmp_path, values):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(values), encoding="utf-8")

    assert main(["--config", str(path), "--corpus", str(corpus_dir)]) == 1
    assert cli_app.main(["--config", str(path), "--corpus", str(corpus_dir)]) == 1


def test_cli_app_unknown_log_level_fails(corpus_dir):
    assert cli_app.main(["--corpus", str(corpus_dir), "--log-level", "verbose"]) == 1
