from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from assistant.core.messages import ChatTurn, LookupResult
from assistant.core.prompt import FOUND_MESSAGE_TEMPLATE, NO_DATA_MESSAGE
from config.settings import get_settings


logger = logging.getLogger("kenteken.rdw")


def _is_empty(data: Any) -> bool:
    return data is None or (isinstance(data, (list, dict, str)) and not data)


def _request_rdw(client: httpx.Client, url: str, plate: str) -> Any:
    response = client.get(
        url,
        params={"kenteken": plate},
        headers={"Content-Type": "application/json"},
    )
    response.raise_for_status()
    if not response.content.strip():
        return None
    return response.json()


def fetch_rdw_data(plate: str, client: Optional[httpx.Client] = None) -> LookupResult:
    """Look up ``plate`` in the RDW open data registry.

    Attempted once. Network problems, bad URLs, non-2xx answers and
    undecodable bodies come back as ``transport_error`` rather than raising.
    """
    settings = get_settings()
    url = settings.rdw_api_base

    try:
        if client is not None:
            data = _request_rdw(client, url, plate)
        else:
            with httpx.Client(timeout=settings.rdw_timeout) as own_client:
                data = _request_rdw(own_client, url, plate)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        logger.warning("RDW lookup failed for plate=%s: %s", plate, exc)
        return LookupResult.transport_error(str(exc))

    if _is_empty(data):
        logger.info("RDW returned no data for plate=%s", plate)
        return LookupResult.not_found()

    logger.info("RDW returned data for plate=%s", plate)
    return LookupResult.found(data)


def build_enrichment_turn(plate: str, result: LookupResult) -> ChatTurn:
    # not_found and transport_error read the same to the model and the caller.
    if result.status == "found":
        record = json.dumps(result.record, ensure_ascii=False, separators=(",", ":"))
        text = FOUND_MESSAGE_TEMPLATE.format(plate=plate, record=record)
    else:
        text = NO_DATA_MESSAGE
    return ChatTurn(role="system", text=text)
