"""
Continuous live simulation served over HTTP: organisms wander, eat,
reproduce and mutate in real time.

    python main.py serve --port 5001
    python main.py view --url http://127.0.0.1:5001
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

import config
from api.server import create_server
from sim.scheduler import TickScheduler
from sim.service import SimulationService
from world.world import World

logger = logging.getLogger("ameba_sim")


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="ameba_sim",
        description="Run the artificial-life simulation server or its viewer.",
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    sub = p.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the simulation and HTTP API (default)")
    serve.add_argument("--host", default=config.HOST, help="Interface to bind")
    serve.add_argument("--port", type=int, default=config.PORT, help="Port to listen on")
    serve.add_argument(
        "--interval",
        type=float,
        default=config.TICK_INTERVAL,
        help="Seconds between simulation steps",
    )
    serve.add_argument("--width", type=float, default=config.WORLD_W, help="World width")
    serve.add_argument("--height", type=float, default=config.WORLD_H, help="World height")
    serve.add_argument(
        "--event-log-limit",
        type=non_negative_int,
        default=config.EVENT_LOG_LIMIT,
        metavar="N",
        help="Keep only the newest N events (0 = unbounded)",
    )

    view = sub.add_parser("view", help="Open a pygame window onto a running server")
    view.add_argument("--url", default=config.VIEW_URL, help="Server base URL")
    view.add_argument(
        "--poll",
        type=float,
        default=config.VIEW_POLL_SECONDS,
        help="Seconds between /state polls",
    )

    args = p.parse_args(argv)
    if args.command is None:
        args = p.parse_args(["--log-level", args.log_level, "serve"])
    return args


def build_service(args: argparse.Namespace) -> SimulationService:
    world = World.create(args.width, args.height, args.event_log_limit)
    service = SimulationService(world=world)
    service.seed(config.START_POP, config.START_FOOD)
    return service


def serve(args: argparse.Namespace) -> int:
    service = build_service(args)

    try:
        server = create_server(service, args.host, args.port)
    except OSError as e:
        logger.critical("Cannot listen on %s:%d: %s", args.host, args.port, e)
        return 1

    scheduler = TickScheduler(service, interval=args.interval)
    scheduler.start()
    logger.info("Simulation listening on %s:%d", args.host, args.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        scheduler.stop(timeout=2.0)
        server.server_close()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "view":
        from render.viewer import run_viewer

        run_viewer(args.url, args.poll)
        return 0
    return serve(args)


if __name__ == "__main__":
    sys.exit(main())
