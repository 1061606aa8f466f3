"""Module with the API utility functions."""

import ipaddress

from fastapi import HTTPException, Request
from loguru import logger

from echoscan.configuration import config
from echoscan.data_models import AnalysisConfig

FORWARDED_FOR_HEADER = "X-Forwarded-For"


def is_trusted_proxy(ip: str) -> bool:
    """Check whether the address belongs to one of the configured proxies."""
    try:
        address = ipaddress.ip_address(ip)
    except ValueError:
        return False
    return any(address in network for network in config.api_trusted_proxies)


def _forwarded_client(header: str, peer: str) -> str | None:
    # Walk from the right: each trusted hop vouches for the address on its left.
    chain = [item.strip() for item in header.split(",") if item.strip()]
    chain.append(peer)
    while chain and is_trusted_proxy(chain[-1]):
        chain.pop()
    if not chain:
        return None
    try:
        ipaddress.ip_address(chain[-1])
    except ValueError:
        logger.warning(f"Ignoring a malformed {FORWARDED_FOR_HEADER} entry.")
        return None
    return chain[-1]


def get_ip_address_or_raise(fastapi_request: Request) -> str:
    """
    Get an IP address of the client sending the request raising an exception if missing.

    The peer address is used unless the peer is a configured trusted proxy, in which
    case the `X-Forwarded-For` chain is consulted. A header sent by any other peer
    is ignored.

    Args:
        fastapi_request (Request): The request of the client.

    Raises:
        HTTPException: Raised if an IP address cannot be retrieved from the request.

    Returns:
        str: IP address of the client.
    """
    if fastapi_request.client is None:
        raise HTTPException(
            detail=(
                "Unable to identify the IP address. Please, do not use proxy while "
                "connecting to this API."
            ),
            status_code=401,
        )
    peer = fastapi_request.client.host
    header = fastapi_request.headers.get(FORWARDED_FOR_HEADER)
    if header and is_trusted_proxy(peer):
        return _forwarded_client(header, peer) or peer
    return peer


def resolve_boolean(value: str | None, default: bool) -> bool:
    """
    Interpret a form field as a boolean flag.

    Args:
        value (str | None): Raw value of the field.
        default (bool): Value used when the field is neither "true" nor "false".

    Returns:
        bool: The flag.
    """
    if value == "true":
        return True
    if value == "false":
        return False
    return default


def resolve_max_results(
    value: str | None, default: int = config.default_max_results
) -> int:
    """
    Interpret a form field as the maximum number of repeated words.

    Args:
        value (str | None): Raw value of the field.
        default (int, optional): Value used when the field is missing, is not
            an integer, or is not positive. Defaults to the value from
            the configuration.

    Returns:
        int: A positive limit.
    """
    if not value:
        return default
    try:
        limit = int(value.strip())
    except ValueError:
        return default
    return limit if limit > 0 else default


def parse_custom_words(value: str | None) -> tuple[str, ...]:
    """
    Split a comma-separated list of focus terms.

    Args:
        value (str | None): Raw value of the field, e.g. "very, Really,,just".

    Returns:
        tuple[str, ...]: Trimmed, lowercase, non-empty terms in input order.
    """
    if not value:
        return ()
    terms = (term.strip().lower() for term in value.split(","))
    return tuple(term for term in terms if term)


def build_analysis_config(  # noqa: PLR0913, one argument per form field.
    repeated_words: str | None = None,
    repeated_phrases: str | None = None,
    repeated_starters: str | None = None,
    similar_sentences: str | None = None,
    exclude_common: str | None = None,
    max_results: str | None = None,
    custom_words: str | None = None,
) -> AnalysisConfig:
    """
    Build an analysis configuration from raw form fields.

    Malformed values fall back to their defaults instead of failing the request.

    Returns:
        AnalysisConfig: Normalised configuration.
    """
    return AnalysisConfig(
        repeated_words=resolve_boolean(repeated_words, default=True),
        repeated_phrases=resolve_boolean(repeated_phrases, default=True),
        repeated_starters=resolve_boolean(repeated_starters, default=True),
        similar_sentences=resolve_boolean(similar_sentences, default=True),
        exclude_common=resolve_boolean(exclude_common, default=True),
        max_results=resolve_max_results(max_results),
        custom_words=parse_custom_words(custom_words),
    )
