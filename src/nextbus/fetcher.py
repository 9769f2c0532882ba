"""
Typed fetcher: one blocking GET, then structural decode into the caller's response model.
No cache and no retry; every failure is raised to the caller as a NextBusError.
"""
import logging
import time
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from src.nextbus.errors import DecodeError, NetworkError, ServiceError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

ShapeT = TypeVar("ShapeT", bound=BaseModel)


def _raise_for_service_error(url: str, data: Any) -> None:
    """The feed reports bad agency/route/stop tags as {"Error": {...}} with a 200 status."""
    if not isinstance(data, dict) or "Error" not in data:
        return
    err = data["Error"]
    if isinstance(err, dict):
        message = str(err.get("content") or "").strip()
        should_retry = str(err.get("shouldRetry", "false")).lower() == "true"
    else:
        message = str(err).strip()
        should_retry = False
    raise ServiceError(message or "NextBus returned an error", url, should_retry=should_retry)


def fetch(url: str, shape: type[ShapeT], timeout: float = DEFAULT_TIMEOUT_SECONDS) -> ShapeT:
    """
    GET `url` and decode the JSON body into `shape`.
    Raises NetworkError (transport failure, non-2xx) or DecodeError (bad JSON, type mismatch).
    """
    logger.debug("telemetry nextbus_request url=%s", url, extra={"url": url})
    start = time.perf_counter()
    try:
        with httpx.Client(timeout=timeout) as client:
            resp = client.get(url)
            resp.raise_for_status()
            body = resp.content
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.warning(
            "telemetry nextbus_http_error status=%s url=%s",
            status,
            url,
            extra={"status": status, "url": url},
        )
        raise NetworkError(f"NextBus returned HTTP {status}", url, status_code=status) from e
    except httpx.TimeoutException as e:
        logger.warning("telemetry nextbus_timeout url=%s", url, extra={"url": url})
        raise NetworkError(f"NextBus request timed out after {timeout}s", url) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(
            "telemetry nextbus_transport_error url=%s error=%s",
            url,
            str(e),
            extra={"url": url, "error": str(e)},
        )
        raise NetworkError(f"NextBus request failed: {e}", url) from e

    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "telemetry nextbus_fetched status=%s bytes=%s duration_ms=%.1f",
        resp.status_code,
        len(body),
        duration_ms,
        extra={"status": resp.status_code, "bytes": len(body), "duration_ms": duration_ms},
    )

    try:
        data = resp.json()
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"Response is not valid JSON: {e}", url) from e
    _raise_for_service_error(url, data)
    try:
        return shape.model_validate(data)
    except RecursionError as e:
        raise DecodeError(f"Response is too deeply nested for {shape.__name__}", url) from e
    except ValidationError as e:
        logger.warning(
            "telemetry nextbus_decode_error shape=%s errors=%s",
            shape.__name__,
            e.error_count(),
            extra={"shape": shape.__name__, "errors": e.error_count()},
        )
        raise DecodeError(f"Response does not match {shape.__name__}: {e}", url) from e
