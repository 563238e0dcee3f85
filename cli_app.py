#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
DocumentTerm - Enhanced CLI Interface
Rich command-line front end for TF-IDF document ranking
"""

import argparse
import sys
import time
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.markup import escape
from rich import box

from DocumentTerm.config import SearchConfig, configure_logging, load_config
from DocumentTerm.errors import ConfigurationError, DocumentTermError
from DocumentTerm.main import DocumentRanker
from DocumentTerm.tfidf_search.tfidf_search import Ranking, iter_ranking

# Initialize rich console
console = Console()

EXIT_COMMANDS = {"", "exit", "quit"}


class DocumentTermCLI:
    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize the CLI interface"""
        self.config = config or SearchConfig()
        self.ranker = DocumentRanker(self.config)

    def print_header(self):
        """Display the application header"""
        console.print(Panel(
            "[bold blue]DocumentTerm[/bold blue] [yellow]TF-IDF Ranking[/yellow]",
            border_style="blue",
            subtitle="Rank documents by query relevance",
            width=80
        ))

    def load_documents(self) -> bool:
        """Load the configured documents, reporting progress"""
        console.print(f"Loading documents from: [cyan]{escape(self.config.corpus_path)}[/cyan]")
        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                TimeElapsedColumn(),
                console=console,
                transient=True
            ) as progress:
                task = progress.add_task("Loading documents...", total=None)
                documents = self.ranker.load_documents()
                progress.update(task, completed=True)
        except DocumentTermError as e:
            console.print(f"[bold red]Error loading documents:[/bold red] {e}")
            return False

        console.print(f"[green]Successfully loaded [bold]{len(documents)}[/bold] documents[/green]")
        return True

    def search(self, query: str, terms: Optional[List[str]] = None) -> Optional[Ranking]:
        """Rank the loaded documents against a query"""
        if terms is None:
            terms = self.ranker.engine.query_terms(query)
        console.print(f"Ranking documents for: '[cyan]{escape(query)}[/cyan]' -> {escape(str(terms))}")

        start_time = time.time()
        try:
            ranking = self.ranker.find_most_relevant_documents(terms)
        except (DocumentTermError, ValueError) as e:
            console.print(f"[bold red]Error during ranking:[/bold red] {e}")
            return None

        execution_time = time.time() - start_time
        console.print(f"[green]Ranked {sum(len(d) for d in ranking.values())} documents "
                      f"in {execution_time:.6f} seconds[/green]")
        return ranking

    def display_results(self, ranking: Ranking, top: Optional[int] = None):
        """Display a ranking as a table"""
        if not ranking:
            console.print("[yellow]No documents to rank.[/yellow]")
            return

        table = Table(
            box=box.HEAVY_EDGE,
            show_header=True,
            header_style="bold magenta",
            title=f"[bold]{len(ranking)} score group(s)[/bold]",
            title_style="yellow"
        )
        table.add_column("#", style="dim", width=4)
        table.add_column("Score", style="yellow", width=12)
        table.add_column("Document", style="cyan", no_wrap=False)

        best_score = next(iter(ranking))
        for i, (score, document) in enumerate(iter_ranking(ranking)):
            if top is not None and i >= top:
                break
            # Highlight every document tied for the best score
            row_style = "on blue" if score == best_score and score > 0 else ""
            table.add_row(str(i + 1), f"{score:.6f}", escape(document), style=row_style)

        console.print(table)
        console.print("[dim]Tip: Higher scores indicate more relevant documents.[/dim]")

    def interactive_mode(self, top: Optional[int] = None):
        """Prompt for queries until the user quits"""
        console.rule("[bold blue]DocumentTerm[/bold blue]")
        console.print("[dim]Enter a query, or 'quit' to exit.[/dim]")

        while True:
            try:
                query = console.input("\n[bold cyan]Query: [/bold cyan]")
            except EOFError:
                break

            if query.strip().lower() in EXIT_COMMANDS:
                break

            ranking = self.search(query)
            if ranking is not None:
                self.display_results(ranking, top)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application"""
    parser = argparse.ArgumentParser(
        description='DocumentTerm - TF-IDF document ranking'
    )
    parser.add_argument('--config', help='Path to a JSON configuration file')
    parser.add_argument('--corpus', help='Directory of text documents or a JSON documents file')
    parser.add_argument('--query', help='Query string to rank documents against')
    parser.add_argument('--top', type=int, default=None,
                        help='Number of documents to display (default: all)')
    parser.add_argument('--skip-empty', action='store_true', default=None,
                        help='Skip documents without words instead of failing')
    parser.add_argument('--interactive', action='store_true',
                        help='Run in interactive mode')
    parser.add_argument('--log-level', help='Logging level (DEBUG, INFO, WARNING, ...)')
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config).with_overrides(
            corpus_path=args.corpus,
            query=args.query,
            skip_empty_documents=args.skip_empty,
            log_level=args.log_level,
        )
        configure_logging(config.log_level)
        cli = DocumentTermCLI(config)
    except ConfigurationError as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}")
        return 1

    cli.print_header()

    if not cli.load_documents():
        return 1

    if args.interactive:
        cli.interactive_mode(args.top)
        return 0

    console.rule("[bold yellow]TF-IDF Ranking[/bold yellow]", style="yellow")
    ranking = cli.search(config.query, config.resolved_terms())
    if ranking is None:
        return 1
    cli.display_results(ranking, args.top)
    return 0


if __name__ == "__main__":
    sys.exit(main())
