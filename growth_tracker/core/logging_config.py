import logging
import time
import uuid

from fastapi import Request

from growth_tracker.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

request_logger = logging.getLogger("growth_tracker.requests")


def configure_logging(level: str = None) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )


async def request_logging_middleware(request: Request, call_next):
    """Log every HTTP request with status, duration and a short trace id."""
    trace_id = uuid.uuid4().hex[:8]
    request.state.trace_id = trace_id
    start = time.perf_counter()

    response = await call_next(request)

    duration_ms = (time.perf_counter() - start) * 1000
    user_id = getattr(request.state, "user_id", None)
    message = (
        f"trace_id={trace_id} method={request.method} path={request.url.path} "
        f"status={response.status_code} duration_ms={duration_ms:.1f}"
    )
    if user_id is not None:
        message += f" user_id={user_id}"

    if response.status_code >= 500:
        client = request.client.host if request.client else "-"
        request_logger.error(
            f"{message} ip={client} user_agent={request.headers.get('user-agent', '-')}"
        )
    elif response.status_code >= 400:
        request_logger.warning(message)
    else:
        request_logger.info(message)

    response.headers["X-Trace-Id"] = trace_id
    return response
