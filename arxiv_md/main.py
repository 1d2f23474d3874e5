import logging
from pathlib import Path
from typing import List

import typer

from arxiv_md.config import DEFAULT_LEVEL, OUTPUT_DIR
from arxiv_md.models.paper import DetailLevel
from arxiv_md.services.paper_service import extract_paper, normalize_arxiv_id, resolve_paper_id
from arxiv_md.utils.html_to_md import save_markdown
from arxiv_md.utils.logging_config import setup_logging

app = typer.Typer(help="Convert arXiv papers (ar5iv / arxiv.org HTML) to Markdown.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")):
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command()
def extract(
    arxiv_id: str = typer.Argument(..., help="arXiv ID, e.g. 2512.16906, 2512.16906v1 or arxiv:1706.03762"),
    level: DetailLevel = typer.Option(DetailLevel(DEFAULT_LEVEL), "--level", "-l", help="Which part of the paper to extract."),
    save: bool = typer.Option(False, "--save", help="Also write the Markdown to arxiv_<id>.md."),
    output_dir: Path = typer.Option(OUTPUT_DIR, "--output-dir", help="Directory used with --save."),
):
    """Print a paper as Markdown.

    Levels: abstract (title, authors, abstract), body (abstract and main
    sections), appendix (title and appendix), all (everything including
    references).
    """
    result = extract_paper(arxiv_id, level)
    if result.is_error:
        typer.echo(result.text, err=True)
        raise typer.Exit(code=1)

    typer.echo(result.text)
    if save:
        path = save_markdown(result.text, normalize_arxiv_id(arxiv_id), output_dir)
        typer.echo(f"Markdown file saved as: {path}", err=True)


@app.command()
def search(query: List[str] = typer.Argument(..., help="Title, author or arXiv query, e.g. 'transformer attention'.")):
    """Search arXiv and list matching papers with their IDs."""
    result = resolve_paper_id(" ".join(query))
    if result.is_error:
        typer.echo(result.text, err=True)
        raise typer.Exit(code=1)
    typer.echo(result.text)


if __name__ == "__main__":
    app()
