"""Web application assembly and entry point."""

from __future__ import annotations

import argparse
import logging
import signal
import sys
import threading
import time
from datetime import datetime
from pathlib import Path
from socketserver import ThreadingMixIn
from wsgiref.simple_server import WSGIServer, make_server

from dotenv import load_dotenv
from flask import Flask, request

from apptemplate.config import AllConfig, init_config
from apptemplate.controller import MainController
from apptemplate.cors import allow_cors
from apptemplate.database import Connection, connect
from apptemplate.logger import new_logger
from apptemplate.repository import TestTableRepository

SHUTDOWN_TIMEOUT_SECONDS = 5.0


def _log(message: str) -> None:
    print(f"{datetime.now():%Y/%m/%d %H:%M:%S} {message}", file=sys.stderr)


def init_route(app: Flask, conf: AllConfig, connection: Connection, logger: logging.Logger) -> Flask:
    """Register middleware and the main routes on the application."""
    if conf.app_config.run_mode == "development":
        allow_cors(app)

    controller = MainController(TestTableRepository(connection.mysql), logger)
    app.add_url_rule("/", "get_main", controller.get_main, methods=["GET"])
    app.add_url_rule(
        "/detail", "get_detail_main", lambda: controller.get_detail_main(request.args), methods=["GET"]
    )
    return app


def create_app(conf: AllConfig, connection: Connection, logger: logging.Logger) -> Flask:
    """Build the application with its routes."""
    app = init_route(Flask("apptemplate"), conf, connection, logger)
    print(f"RUNNING IN PORT {conf.http_config.http_port}")
    return app


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    daemon_threads = True


def start_service(app: Flask, conf: AllConfig) -> None:
    """Serve the application until SIGINT or SIGTERM, then shut down gracefully."""
    server = make_server("", int(conf.http_config.http_port), app, server_class=_ThreadingWSGIServer)

    def serve() -> None:
        server.serve_forever()
        print("SERVICE START")

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()

    quit_event = threading.Event()
    previous = {
        sig: signal.signal(sig, lambda signum, frame: quit_event.set())
        for sig in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        while not quit_event.wait(0.5):
            pass
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    _log("Shutdown Server ...")
    deadline = time.monotonic() + SHUTDOWN_TIMEOUT_SECONDS
    server.shutdown()
    server.server_close()
    thread.join(timeout=max(0.0, deadline - time.monotonic()))
    if thread.is_alive():
        raise RuntimeError("Server Shutdown: context deadline exceeded")
    time.sleep(max(0.0, deadline - time.monotonic()))
    _log("timeout of 5 seconds.")
    _log("Server exiting")


def main(argv: list[str] | None = None) -> int:
    """Load .env, connect to the database and serve the application."""
    argparse.ArgumentParser(prog="apptemplate", description="Run the web service.").parse_args(argv)

    env_file = Path(".env")
    if not env_file.is_file():
        raise FileNotFoundError("open .env: no such file or directory")
    load_dotenv(env_file)

    conf = init_config()
    app = create_app(conf, connect(conf), new_logger(conf.app_config))
    try:
        start_service(app, conf)
    except OSError as err:
        _log(f"listen: {err}")
        raise SystemExit(1) from err
    return 0


if __name__ == "__main__":
    sys.exit(main())