# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Structured logging on the stdlib ``mockwire`` logger tree.

mockwire is imported into other people's processes, so it never touches
structlog's global configuration. Each module logger wraps the stdlib logger
of the same name: the host's level for ``mockwire`` decides what is emitted
(WARNING by default, inherited from the root logger), and events travel as
event dicts to whatever handlers the host has installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from mockwire.core.config import Config

ROOT_LOGGER = "mockwire"

_HANDLER_NAME = "mockwire.console"

_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> Any:
    """Get a structured logger bound to the stdlib logger *name*."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def set_level(name: str, level: str) -> None:
    """Set the stdlib level for *name* (e.g. ``mockwire.mock`` to ``DEBUG``)."""
    logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.WARNING))


def is_configured() -> bool:
    """True once :func:`configure_logging` has attached its handler."""
    return _find_handler() is not None


def configure_logging(config: Config | None = None) -> logging.Handler:
    """Level the ``mockwire`` tree and render its events to stderr.

    Reads ``mockwire.logging.level`` (``root`` levels the whole tree, other
    keys name individual loggers) and ``mockwire.logging.format``
    (``console`` or ``json``). Calling it again replaces the handler it
    installed before. Set ``mockwire.logging.level.root`` to ``DEBUG`` to
    trace every intercepted call.

    Returns:
        The handler attached to the ``mockwire`` logger.
    """
    config = config if config is not None else Config.defaults()
    levels = dict(config.get_section("mockwire.logging.level"))
    set_level(ROOT_LOGGER, str(levels.pop("root", "WARNING")))
    for name, level in levels.items():
        set_level(name, str(level))

    if str(config.get("mockwire.logging.format", "console")).lower() == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(default=repr)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    tree = logging.getLogger(ROOT_LOGGER)
    previous = _find_handler()
    if previous is not None:
        tree.removeHandler(previous)
    tree.addHandler(handler)
    return handler


def _find_handler() -> logging.Handler | None:
    for handler in logging.getLogger(ROOT_LOGGER).handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None
