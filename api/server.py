"""
HTTP adapter: routes requests onto SimulationService and encodes replies.

Handlers only decode, call one service method and encode; the service does
all locking, and encoding happens on the detached snapshot it returns.
"""

from __future__ import annotations
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
import logging
from typing import Callable, Dict, Optional, Tuple
from urllib.parse import urlsplit

import orjson
from prometheus_client import CollectorRegistry

import config
from api import metrics
from api.payloads import ConfigUpdate, SpawnRequest, TouchRequest, decode_body
from sim.service import SimulationService

logger = logging.getLogger(__name__)

JSON_TYPE = "application/json"


class SimHTTPServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(
        self,
        address: Tuple[str, int],
        service: SimulationService,
        registry: Optional[CollectorRegistry] = None,
    ) -> None:
        self.service = service
        self.registry = registry if registry is not None else metrics.build_registry(service)
        super().__init__(address, SimRequestHandler)


class SimRequestHandler(BaseHTTPRequestHandler):
    server: SimHTTPServer
    server_version = "ameba-sim"

    # path -> {method: handler name}
    routes: Dict[str, Dict[str, str]] = {
        "/state": {"GET": "get_state"},
        "/spawn": {"POST": "post_spawn"},
        "/touch": {"POST": "post_touch"},
        "/config": {"GET": "get_config", "POST": "post_config"},
        "/metrics": {"GET": "get_metrics"},
        "/metrics/prometheus": {"GET": "get_prometheus"},
        "/events": {"GET": "get_events"},
        "/health": {"GET": "get_health"},
    }

    @property
    def service(self) -> SimulationService:
        return self.server.service

    # -- dispatch --

    def _dispatch(self) -> None:
        path = urlsplit(self.path).path.rstrip("/") or "/"
        methods = self.routes.get(path)
        if methods is None:
            self._read_body()
            self._send_json({"error": "not found", "path": path}, HTTPStatus.NOT_FOUND)
            return
        name = methods.get(self.command)
        if name is None:
            self._read_body()
            self._send_empty(HTTPStatus.METHOD_NOT_ALLOWED, allow=", ".join(sorted(methods)))
            return
        handler: Callable[[], None] = getattr(self, name)
        handler()

    do_GET = _dispatch
    do_POST = _dispatch
    do_PUT = _dispatch
    do_PATCH = _dispatch
    do_DELETE = _dispatch
    do_HEAD = _dispatch
    do_OPTIONS = _dispatch

    # -- endpoints --

    def get_state(self) -> None:
        self._send_json(self.service.state_snapshot())

    def post_spawn(self) -> None:
        req = decode_body(SpawnRequest, self._read_body())
        org = self.service.spawn(req.seed_traits)
        self._send_json({"organism": org}, HTTPStatus.CREATED)

    def post_touch(self) -> None:
        req = decode_body(TouchRequest, self._read_body())
        x, y = self.service.touch(req.x, req.y)
        self._send_json({"ok": True, "x": x, "y": y})

    def get_config(self) -> None:
        self._send_json(self.service.config_snapshot())

    def post_config(self) -> None:
        # accepted but not applied; tunables stay at their startup values
        req = decode_body(ConfigUpdate, self._read_body())
        logger.debug("Ignoring config update %s", req.model_dump(by_alias=True, exclude_none=True))
        self._send_json({"ok": True})

    def get_metrics(self) -> None:
        self._send_json(self.service.metrics_snapshot())

    def get_prometheus(self) -> None:
        self._send(HTTPStatus.OK, metrics.render(self.server.registry), metrics.CONTENT_TYPE)

    def get_events(self) -> None:
        self._send_json(self.service.events_snapshot())

    def get_health(self) -> None:
        self._send_json({"ok": True, "sim": config.SIM_NAME})

    # -- io helpers --

    def _read_body(self) -> bytes:
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            length = 0
        return self.rfile.read(length) if length > 0 else b""

    def _send(self, status: HTTPStatus, body: bytes, content_type: str) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)

    def _send_json(self, payload, status: HTTPStatus = HTTPStatus.OK) -> None:
        self._send(status, orjson.dumps(payload), JSON_TYPE)

    def _send_empty(self, status: HTTPStatus, allow: str = "") -> None:
        self.send_response(status)
        if allow:
            self.send_header("Allow", allow)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def log_message(self, format: str, *args) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)


def create_server(
    service: SimulationService,
    host: str = config.HOST,
    port: int = config.PORT,
) -> SimHTTPServer:
    """Bind the HTTP server. Raises OSError if the port cannot be bound."""
    return SimHTTPServer((host, port), service)
