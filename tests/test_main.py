"""
CLI parsing and startup.
"""

import socket

import pytest

import config
import main


def test_defaults_to_serve():
    args = main.parse_args([])
    assert args.command == "serve"
    assert args.port == config.PORT
    assert args.interval == config.TICK_INTERVAL
    assert args.event_log_limit == config.EVENT_LOG_LIMIT


def test_serve_overrides():
    args = main.parse_args(["--log-level", "DEBUG", "serve", "--port", "6000", "--width", "500", "--event-log-limit", "0"])
    assert (args.log_level, args.port, args.width, args.event_log_limit) == ("DEBUG", 6000, 500.0, 0)


def test_view_args():
    args = main.parse_args(["view", "--url", "http://example:5001"])
    assert args.command == "view"
    assert args.url == "http://example:5001"


def test_build_service_seeds_world():
    args = main.parse_args(["serve", "--width", "300", "--height", "200"])
    service = main.build_service(args)
    state = service.state_snapshot()
    assert len(state["organisms"]) == config.START_POP
    assert len(state["maps"]["foods"]) == config.START_FOOD
    assert service.config_snapshot()["worldWidth"] == 300.0
    assert service.metrics_snapshot()["births"] == 0


def test_bind_failure_exits_nonzero():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as taken:
        taken.bind(("127.0.0.1", 0))
        taken.listen(1)
        port = taken.getsockname()[1]
        args = main.parse_args(["serve", "--host", "127.0.0.1", "--port", str(port)])
        assert main.serve(args) == 1


def test_negative_event_log_limit_is_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        main.parse_args(["serve", "--event-log-limit", "-1"])
    assert exc.value.code == 2
    assert "--event-log-limit" in capsys.readouterr().err
