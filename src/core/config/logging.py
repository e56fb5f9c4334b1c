"""
Logging — Конфигурация structlog для palindromeda

Два режима вывода (stderr):
- Human (default): ConsoleRenderer, цвета при TTY
- JSON (log_json=True): одна JSON-строка на событие

Библиотечные модули получают логгеры через
structlog.get_logger("palindromeda.<area>"). Hot path (предикат,
floor/ceiling) не логирует.
"""

import logging
import sys
from typing import Final

import structlog

# Корневой stdlib логгер библиотеки
LOGGER_NAME: Final[str] = "palindromeda"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """
    Настройка процессоров structlog и маршрутизации вывода.

    Handler (stderr) вешается на логгер palindromeda с propagate=False;
    root логгер, его уровень и handlers приложения не меняются.
    Повторный вызов заменяет handler, а не добавляет второй.

    Args:
        verbose: DEBUG для логгера palindromeda; иначе только WARNING+
        log_json: JSONRenderer вместо ConsoleRenderer
    """
    library_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    # Только логгер библиотеки: root и handlers приложения не трогаем
    library_logger = logging.getLogger(LOGGER_NAME)
    library_logger.handlers.clear()
    library_logger.addHandler(handler)
    library_logger.setLevel(library_level)
    library_logger.propagate = False
