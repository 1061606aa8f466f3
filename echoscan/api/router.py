"""Module with endpoints of the analysis API."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from loguru import logger

from echoscan.analysis.analyzer import analyze
from echoscan.api.data_models import AnalysisRequest, ErrorResponse
from echoscan.api.rate_limiter import enforce_rate_limit
from echoscan.api.utils import build_analysis_config
from echoscan.configuration import config
from echoscan.data_models import AnalysisConfig, AnalysisResult
from echoscan.errors import (
    InputTooLargeError,
    InvalidInputError,
    UnsupportedFormatError,
)
from echoscan.ingestion.extractor import ensure_within_limit, extract_text

NO_TEXT_MESSAGE = "No text provided."
UNSUPPORTED_FILE_MESSAGE = "Unsupported file type. Upload .txt, .md, or .docx."

router = APIRouter(
    dependencies=[Depends(enforce_rate_limit)],
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def _megabytes(size: int) -> str:
    return f"{size / (1024 * 1024):g}MB"


def _read_upload(file: UploadFile) -> str:
    content = file.file.read()
    try:
        ensure_within_limit(content, config.max_upload_bytes)
    except InputTooLargeError as e:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Max size is {_megabytes(e.max_bytes)}.",
        ) from e

    try:
        return extract_text(file.filename or "", content)
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=400, detail=UNSUPPORTED_FILE_MESSAGE) from e


def _check_text_size(text: str) -> None:
    try:
        ensure_within_limit(text, config.max_text_bytes)
    except InputTooLargeError as e:
        raise HTTPException(
            status_code=413,
            detail=f"Text too large. Max size is {_megabytes(e.max_bytes)}.",
        ) from e


def _run_analysis(text: str, options: AnalysisConfig) -> AnalysisResult:
    try:
        return analyze(text, options)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=NO_TEXT_MESSAGE) from e
    except Exception as e:
        logger.exception("Unexpected failure while analyzing a text.")
        raise HTTPException(
            status_code=500,
            detail="Failed to analyze text.",
        ) from e


@router.post("/analyze")
def analyze_form(  # noqa: PLR0913, one argument per form field.
    file: Annotated[UploadFile | None, File()] = None,
    text: Annotated[str | None, Form()] = None,
    repeated_words: Annotated[str | None, Form(alias="repeatedWords")] = None,
    repeated_phrases: Annotated[str | None, Form(alias="repeatedPhrases")] = None,
    repeated_starters: Annotated[str | None, Form(alias="repeatedStarters")] = None,
    similar_sentences: Annotated[str | None, Form(alias="similarSentences")] = None,
    exclude_common: Annotated[str | None, Form(alias="excludeCommon")] = None,
    max_results: Annotated[str | None, Form(alias="maxResults")] = None,
    custom_words: Annotated[str | None, Form(alias="customWords")] = None,
) -> AnalysisResult:
    """
    Analyze a text sent as a form field or as an uploaded document.

    An uploaded `.txt`, `.md` or `.docx` file takes precedence over the `text` field.
    Flags accept "true" or "false", any other value means the default.
    """
    options = build_analysis_config(
        repeated_words=repeated_words,
        repeated_phrases=repeated_phrases,
        repeated_starters=repeated_starters,
        similar_sentences=similar_sentences,
        exclude_common=exclude_common,
        max_results=max_results,
        custom_words=custom_words,
    )
    source = "file" if file is not None else "form"
    if file is not None:
        text = _read_upload(file)
        if not text:
            raise HTTPException(status_code=400, detail=UNSUPPORTED_FILE_MESSAGE)
    elif text:
        _check_text_size(text)

    if not text or not text.strip():
        raise HTTPException(status_code=400, detail=NO_TEXT_MESSAGE)

    logger.info(f"Analyzing a text of {len(text)} characters from {source}.")
    return _run_analysis(text, options)


@router.post("/analyze/json")
def analyze_json(request: AnalysisRequest) -> AnalysisResult:
    """Analyze a text sent in a JSON body with camelCase options."""
    _check_text_size(request.text)
    logger.info(f"Analyzing a text of {len(request.text)} characters from JSON.")
    return _run_analysis(request.text, request.options)
