"""HTTP API server.

Serves the textual torrent listing and the bulk binary dump over aiohttp.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from aiohttp import web

from torrentview.api.controllers import APIResult, BinaryController, TorrentsController
from torrentview.api.protocol import (
    API_BASE_PATH,
    DEFAULT_DUMP_FILENAME,
    FIELDS_PARAM,
    OCTET_STREAM,
    ErrorResponse,
)
from torrentview.utils.exceptions import SessionUnavailableError, TorrentViewError
from torrentview.utils.logging_config import set_correlation_id
from torrentview.utils.string import split_to_list

if TYPE_CHECKING:
    from aiohttp.web_request import Request
    from aiohttp.web_response import StreamResponse

    from torrentview.models import Config
    from torrentview.session.session import Session
    from torrentview.utils.time import Clock

logger = logging.getLogger(__name__)


def parse_fields(request: Request) -> list[str]:
    """Collect field names from every ``fields`` query parameter.

    Each value may hold several names separated by ``,`` or ``|``.
    """
    names: list[str] = []
    for value in request.query.getall(FIELDS_PARAM, []):
        names.extend(split_to_list(value))
    return names


def _error_response(status: int, error: str, code: str, details: dict[str, Any] | None = None) -> web.Response:
    return web.json_response(
        ErrorResponse(error=error, code=code, details=details).model_dump(),
        status=status,
    )


def render_result(result: APIResult) -> web.Response:
    """Frame a controller result as an HTTP response."""
    if result.mime_type == OCTET_STREAM:
        headers = {}
        if result.filename:
            headers["Content-Disposition"] = f'attachment; filename="{result.filename}"'
        return web.Response(body=result.data, content_type=OCTET_STREAM, headers=headers)
    return web.json_response(result.data)


class ApiServer:
    """HTTP API server exposing torrent status exports."""

    def __init__(
        self,
        session: Session,
        host: str = "127.0.0.1",
        port: int = 8080,
        *,
        clock: Clock | None = None,
        default_fields: Iterable[str] = (),
        dump_filename: str = DEFAULT_DUMP_FILENAME,
    ):
        """Initialize API server.

        Args:
            session: Resource manager whose torrents are served
            host: Host to bind to
            port: Port to bind to (0 picks a free port, readable after start)
            clock: Source of the current time for projections
            default_fields: Fields used when a request names none
            dump_filename: Suggested filename for the bulk dump

        """
        self.session = session
        self.host = host
        self.port = port

        self.torrents_controller = TorrentsController(
            session, clock=clock, default_fields=default_fields
        )
        self.binary_controller = BinaryController(
            session, clock=clock, dump_filename=dump_filename
        )

        self.app = web.Application(middlewares=[self._error_middleware])
        self.runner: web.AppRunner | None = None
        self.site: web.TCPSite | None = None

        self._setup_routes()

    @classmethod
    def from_config(cls, session: Session, config: Config, **kwargs: Any) -> ApiServer:
        """Build a server from the ``api`` and ``export`` config sections."""
        return cls(
            session,
            host=config.api.host,
            port=config.api.port,
            default_fields=config.export.default_fields,
            dump_filename=config.api.dump_filename,
            **kwargs,
        )

    def _setup_routes(self) -> None:
        self.app.router.add_get(f"{API_BASE_PATH}/torrents/info", self._handle_torrents_info)
        self.app.router.add_get(f"{API_BASE_PATH}/torrents/fields", self._handle_torrents_fields)
        self.app.router.add_get(f"{API_BASE_PATH}/binary/dump", self._handle_binary_dump)

    @web.middleware
    async def _error_middleware(self, request: Request, handler: Any) -> StreamResponse:
        """Turn export failures into error responses; nothing partial is sent."""
        set_correlation_id()
        try:
            return await handler(request)
        except web.HTTPException:
            raise
        except SessionUnavailableError as e:
            logger.warning("Session unavailable for %s: %s", request.path, e)
            return _error_response(503, e.message, "SESSION_UNAVAILABLE", e.details or None)
        except TorrentViewError as e:
            logger.exception("Export failed for %s", request.path)
            return _error_response(500, e.message, "EXPORT_FAILED", e.details or None)
        except Exception as e:
            logger.exception("Unexpected error handling %s", request.path)
            return _error_response(500, str(e) or "Internal error", "INTERNAL_ERROR")

    async def _handle_torrents_info(self, request: Request) -> web.Response:
        """Handle GET /api/v2/torrents/info."""
        return render_result(self.torrents_controller.info_action(parse_fields(request)))

    async def _handle_torrents_fields(self, _request: Request) -> web.Response:
        """Handle GET /api/v2/torrents/fields."""
        return render_result(self.torrents_controller.fields_action())

    async def _handle_binary_dump(self, _request: Request) -> web.Response:
        """Handle GET /api/v2/binary/dump."""
        return render_result(self.binary_controller.dump_action())

    async def start(self) -> None:
        """Start the API server."""
        self.runner = web.AppRunner(self.app)
        await self.runner.setup()
        self.site = web.TCPSite(self.runner, self.host, self.port)
        try:
            await self.site.start()
        except OSError as e:
            logger.exception("Failed to start API server on %s:%d", self.host, self.port)
            await self.runner.cleanup()
            self.runner = None
            self.site = None
            msg = f"API server failed to bind to {self.host}:{self.port}: {e}"
            raise RuntimeError(msg) from e

        server = self.site._server  # noqa: SLF001
        sockets = getattr(server, "sockets", None)
        if sockets:
            self.port = sockets[0].getsockname()[1]

        logger.info("API server listening on %s:%d", self.host, self.port)

    async def stop(self) -> None:
        """Stop the API server."""
        if self.site:
            await self.site.stop()
        if self.runner:
            await self.runner.cleanup()
        self.site = None
        self.runner = None
        logger.info("API server stopped")
