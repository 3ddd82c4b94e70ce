"""API controllers.

Controllers turn request parameters into exporter calls and hand back an
:class:`APIResult` for the transport to frame. They know nothing about HTTP.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from torrentview.api.protocol import (
    DEFAULT_DUMP_FILENAME,
    JSON_CONTENT_TYPE,
    OCTET_STREAM,
    FieldListResponse,
)
from torrentview.export.collection import CollectionExporter
from torrentview.serialize.fields import SCHEMA_VERSION
from torrentview.serialize.serialize_torrent import CANONICAL_FIELDS, normalize_fields
from torrentview.session.session import Session
from torrentview.utils.time import Clock


@dataclass
class APIResult:
    """Payload plus the framing hints the transport needs."""

    data: Any
    mime_type: str = JSON_CONTENT_TYPE
    filename: str | None = None


class APIController:
    """Base class holding the explicitly injected session."""

    def __init__(self, session: Session, *, clock: Clock | None = None):
        self.session = session
        self.exporter = CollectionExporter(session, clock=clock)


class TorrentsController(APIController):
    """Textual torrent listing."""

    def __init__(
        self,
        session: Session,
        *,
        clock: Clock | None = None,
        default_fields: Iterable[str] = (),
    ):
        super().__init__(session, clock=clock)
        self.default_fields = (
            [default_fields] if isinstance(default_fields, str) else list(default_fields)
        )

    def info_action(self, fields: Iterable[str] | None = None) -> APIResult:
        """List every torrent projected onto ``fields``."""
        selector = normalize_fields(fields) or normalize_fields(self.default_fields)
        return APIResult(self.exporter.export(selector))

    def fields_action(self) -> APIResult:
        """Describe the schema."""
        response = FieldListResponse(version=SCHEMA_VERSION, fields=list(CANONICAL_FIELDS))
        return APIResult(response.model_dump())


class BinaryController(APIController):
    """Bulk binary dump of every torrent."""

    def __init__(
        self,
        session: Session,
        *,
        clock: Clock | None = None,
        dump_filename: str = DEFAULT_DUMP_FILENAME,
    ):
        super().__init__(session, clock=clock)
        self.dump_filename = dump_filename

    def dump_action(self) -> APIResult:
        return APIResult(self.exporter.dump(), OCTET_STREAM, self.dump_filename)
