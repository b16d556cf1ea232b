import uuid
import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from framework.logging.logger import get_logger

TRACE_HEADER = "X-Trace-ID"

logger = get_logger("http")


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


class LoggingMiddleware(BaseHTTPMiddleware):
    """Runs each request inside a loguru context carrying its trace id."""

    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get(TRACE_HEADER) or uuid.uuid4().hex
        request.state.trace_id = trace_id
        client = request.client.host if request.client else "unknown"

        with logger.contextualize(trace_id=trace_id):
            started = time.perf_counter()
            logger.info(f"--> {request.method} {request.url.path} from {client}")
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(f"<-- {request.method} {request.url.path} failed after {_elapsed_ms(started):.2f}ms: {e}")
                raise
            logger.info(f"<-- {request.method} {request.url.path} {response.status_code} in {_elapsed_ms(started):.2f}ms")
            response.headers[TRACE_HEADER] = trace_id
            return response
