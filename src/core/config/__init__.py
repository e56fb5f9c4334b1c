"""
Configuration — логирование и константы окружения библиотеки.
"""

from src.core.config.logging import LOGGER_NAME, configure_logging

__all__ = [
    "LOGGER_NAME",
    "configure_logging",
]
