import logging
import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class TimingMiddleware:
    """
    Pure ASGI middleware that adds an ``X-Response-Time-Ms`` header with
    the wall-clock time spent handling each HTTP request, and logs it at
    debug level.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                headers = list(message.get("headers", []))
                headers.append((b"x-response-time-ms", str(duration_ms).encode()))
                message["headers"] = headers
                logger.debug(
                    "%s %s -> %s in %.2f ms",
                    scope["method"],
                    scope["path"],
                    message["status"],
                    duration_ms,
                )
            await send(message)

        await self.app(scope, receive, send_wrapper)
