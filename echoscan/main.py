"""Entry point to the application as a Typer CLI."""

import sys
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from loguru import logger
from typer import Typer

from echoscan.analysis.analyzer import analyze
from echoscan.api.data_models import HealthcheckResponse
from echoscan.api.router import router as main_router
from echoscan.api.utils import parse_custom_words
from echoscan.configuration import config
from echoscan.data_models import AnalysisConfig
from echoscan.errors import EchoscanError
from echoscan.export import to_csv, to_json
from echoscan.ingestion.extractor import read_document

app = Typer(no_args_is_help=True)

description = """
**Echoscan** points out repetition in a text before your readers notice it.

## What is reported?

- **Repeated words** and **3- or 4-word phrases**, optionally without stopwords.
- **Repeated sentence openings**, such as three sentences starting with "It is a".
- **Long sentences** standing out from the rest of the text.
- **Near-duplicate sentences** sharing most of their content words.
- **Counts of your own focus terms**.
"""


class ExportFormat(str, Enum):
    """Formats of the analysis report."""

    JSON = "json"
    CSV = "csv"


def build_api() -> FastAPI:
    """
    Create the web application serving the analysis API.

    Returns:
        FastAPI: The application with all routes registered.
    """
    fastapi_app = FastAPI(
        title=config.project_name,
        summary="Echoscan finds repeated words, phrases and sentences in a text.",
        description=description,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        redoc_url="/api/redoc",
    )

    @fastapi_app.get("/")
    async def root() -> RedirectResponse:
        """Redirect root to docs."""
        return RedirectResponse(url="/api/docs")

    @fastapi_app.get("/health")
    async def health() -> HealthcheckResponse:
        """Report that the service is up."""
        return HealthcheckResponse(is_healthy=True)

    fastapi_app.include_router(main_router, prefix="/api")
    return fastapi_app


def configure_logging(verbose: bool) -> None:
    """Send logs to stderr at the configured or the debug level."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else config.log_level)


@app.command("api")
def run_api(
    verbose: Annotated[bool, typer.Option(help="Log debug messages.")] = False,
) -> None:
    """Start up the backend sharing the Web API."""
    import uvicorn

    configure_logging(verbose)
    uvicorn.run(build_api(), host=config.api_host, port=config.api_port)


@app.command("analyze")
def analyze_document(  # noqa: PLR0913, one argument per CLI option.
    path: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="A .txt, .md or .docx file."),
    ],
    export_format: Annotated[
        ExportFormat, typer.Option("--format", help="Format of the report.")
    ] = ExportFormat.JSON,
    repeated_words: Annotated[bool, typer.Option()] = True,
    repeated_phrases: Annotated[bool, typer.Option()] = True,
    repeated_starters: Annotated[bool, typer.Option()] = True,
    similar_sentences: Annotated[bool, typer.Option()] = True,
    exclude_common: Annotated[
        bool, typer.Option(help="Skip stopwords in word and phrase counts.")
    ] = True,
    max_results: Annotated[
        int, typer.Option(min=1, help="The maximum number of repeated words.")
    ] = config.default_max_results,
    custom_words: Annotated[
        str, typer.Option(help="Comma-separated focus terms to count.")
    ] = "",
    output: Annotated[
        Path | None, typer.Option(help="Write the report here instead of stdout.")
    ] = None,
    verbose: Annotated[bool, typer.Option(help="Log debug messages.")] = False,
) -> None:
    """Analyze a local document and print the report."""
    configure_logging(verbose)
    options = AnalysisConfig(
        repeated_words=repeated_words,
        repeated_phrases=repeated_phrases,
        repeated_starters=repeated_starters,
        similar_sentences=similar_sentences,
        exclude_common=exclude_common,
        max_results=max_results,
        custom_words=parse_custom_words(custom_words),
    )

    try:
        text = read_document(path, max_bytes=config.max_upload_bytes)
        result = analyze(text, options)
    except EchoscanError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    report = to_csv(result) if export_format is ExportFormat.CSV else to_json(result)
    if output is None:
        typer.echo(report)
        return

    output.write_text(report, encoding="utf-8")
    logger.info(f"Report written to {output}.")


if __name__ == "__main__":
    app()
