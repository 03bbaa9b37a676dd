"""
Command-line interface for the Arabic SEO analyzer.

Provides a CLI for analyzing an article from an editor JSON export, a Word
document or a text file.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .analyzer import analyze
from .config import DEFAULT_GOAL, resolve_goal
from .content_sources import DocumentLoadError, load_document
from .keyword_loader import KeywordLoadError, load_keywords
from .models import AnalysisStatus, FullAnalysis, Keywords, KeywordStats

console = Console()

STATUS_STYLES = {
    AnalysisStatus.PASS: "green",
    AnalysisStatus.WARN: "yellow",
    AnalysisStatus.FAIL: "red",
    AnalysisStatus.INFO: "dim",
}


def _status_cell(status: AnalysisStatus) -> str:
    style = STATUS_STYLES[status]
    return f"[{style}]{status.value}[/{style}]"


def _merge_keywords(
    base: Keywords,
    primary: Optional[str],
    secondaries: tuple[str, ...],
    company: Optional[str],
    lsi: tuple[str, ...],
) -> Keywords:
    """Command-line keyword options override the keyword file."""
    return Keywords(
        primary=primary if primary is not None else base.primary,
        secondaries=secondaries or base.secondaries,
        company=company if company is not None else base.company,
        lsi=lsi or base.lsi,
    )


@click.group()
def cli() -> None:
    """Arabic SEO Analyzer - Score Arabic articles against SEO and quality rules."""


@cli.command("analyze")
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--keywords",
    "-k",
    "keywords_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Keyword file (CSV, Excel or a .txt keyword block).",
)
@click.option("--primary", "-p", type=str, help="Primary keyword.")
@click.option("--secondary", "-s", "secondaries", multiple=True, help="Secondary keyword (repeatable).")
@click.option("--company", "-c", type=str, help="Company name.")
@click.option("--lsi", "lsi", multiple=True, help="LSI term (repeatable).")
@click.option(
    "--goal",
    "-g",
    type=str,
    default=DEFAULT_GOAL.value,
    show_default=True,
    help="Content goal: academic, sales, blog, tour-program, comparison (Arabic labels accepted).",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the full report as JSON.")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
def analyze_command(
    document: Path,
    keywords_file: Optional[Path],
    primary: Optional[str],
    secondaries: tuple[str, ...],
    company: Optional[str],
    lsi: tuple[str, ...],
    goal: str,
    as_json: bool,
    verbose: bool,
) -> None:
    """
    Analyze DOCUMENT (.json editor export, .docx, .txt or .md).

    Examples:

        arabic-seo analyze article.docx --primary "الرياض" --goal sales

        arabic-seo analyze article.json -k keywords.csv --json
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        doc = load_document(document)
        base = load_keywords(keywords_file) if keywords_file else Keywords()
    except DocumentLoadError as e:
        console.print(f"[red]Document loading error:[/red] {e}")
        sys.exit(1)
    except KeywordLoadError as e:
        console.print(f"[red]Keyword loading error:[/red] {e}")
        sys.exit(1)

    keywords = _merge_keywords(base, primary, secondaries, company, lsi)
    if resolve_goal(goal) is None and not as_json:
        console.print(f"[yellow]Unknown goal '{goal}', using default density bands.[/yellow]")

    result = analyze(doc, keywords=keywords, goal=goal)

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    console.print(Panel.fit(
        f"[bold blue]Arabic SEO Analyzer[/bold blue]\n{document.name}: {result.word_count} words",
        border_style="blue",
    ))
    _display_keywords(result, keywords)
    _display_structure(result, verbose)
    _display_duplicates(result)


def _keyword_row(table: Table, label: str, term: str, stats: KeywordStats) -> None:
    low, high = stats.required_count
    table.add_row(
        label,
        term,
        str(stats.count),
        f"{low}-{high}",
        f"{stats.percentage * 100:.2f}%",
        _status_cell(stats.status),
    )


def _display_keywords(result: FullAnalysis, keywords: Keywords) -> None:
    """Display the keyword density table."""
    if keywords.is_empty:
        return
    kw = result.keyword_analysis

    table = Table(title="Keywords", show_header=True)
    table.add_column("Type", style="cyan")
    table.add_column("Keyword", style="green")
    table.add_column("Count", justify="right")
    table.add_column("Required", justify="right")
    table.add_column("Density", justify="right")
    table.add_column("Status")

    if keywords.primary:
        _keyword_row(table, "Primary", keywords.primary, kw.primary)
    for secondary in kw.secondaries:
        if secondary.text:
            _keyword_row(table, "Secondary", secondary.text, secondary)
    if keywords.company:
        _keyword_row(table, "Company", keywords.company, kw.company)
    if keywords.active_lsi:
        _keyword_row(table, "LSI", f"{len(keywords.active_lsi)} terms", kw.lsi.distribution)

    console.print(table)

    if keywords.primary:
        for check in kw.primary.checks:
            mark = "[green]✓[/green]" if check.is_met else "[red]✗[/red]"
            console.print(f"  {mark} {escape(check.text)}")


def _display_structure(result: FullAnalysis, verbose: bool) -> None:
    """Display structure checks grouped the way the editor shows them."""
    structure = result.structure_analysis
    groups = list(structure.groups())
    goal_checks = [c for c in structure.goal_checks() if c.is_applicable]
    if goal_checks:
        groups.insert(0, ("Goal", goal_checks))

    for title, checks in groups:
        if not checks:
            continue
        table = Table(title=title, show_header=True)
        table.add_column("Check", style="cyan")
        table.add_column("Status")
        table.add_column("Current")
        table.add_column("Required")
        for check in checks:
            table.add_row(
                check.title,
                _status_cell(check.status),
                escape(str(check.current)),
                escape(str(check.required)),
            )
            if verbose:
                for item in check.violating_items or []:
                    table.add_row("", "", f"[dim]{item.from_pos}-{item.to_pos}[/dim]", f"[dim]{escape(item.message)}[/dim]")
        console.print(table)

    stats = result.structure_stats
    console.print(
        f"\n[bold]Failing checks:[/bold] {stats.violating_criteria_count}  "
        f"[bold]Violations:[/bold] {stats.total_errors_count}  "
        f"[bold]Paragraphs:[/bold] {stats.paragraph_count}  "
        f"[bold]Headings:[/bold] {stats.heading_count}"
    )


def _display_duplicates(result: FullAnalysis) -> None:
    phrases = sorted(result.duplicate_analysis.all_phrases(), key=lambda p: (-p.count, -p.size))
    if not phrases:
        return

    table = Table(title="Repeated phrases", show_header=True)
    table.add_column("Phrase", style="green")
    table.add_column("Words", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Keyword")
    for phrase in phrases[:20]:
        table.add_row(escape(phrase.text), str(phrase.size), str(phrase.count), "✓" if phrase.contains_keyword else "")
    console.print(table)

    stats = result.duplicate_stats
    console.print(
        f"[bold]Unique words:[/bold] {stats.unique_words}/{stats.total_words}  "
        f"[bold]Repeats:[/bold] {stats.total_duplicates}"
    )


def run_cli() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    run_cli()
