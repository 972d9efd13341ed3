# -*- encoding: utf-8 -*-
# @File   : log.py
# @Time   : 2024/10/12 21:40:18
# @Author : Kariko Lin

"""Logger capability handed to the parser.

Anything with a `log(message)` method will do.
"""

import logging
from typing import Protocol

__all__ = ['InixLogger', 'StdLogger', 'NullLogger']


class InixLogger(Protocol):
    def log(self, message: str) -> None:
        ...


class StdLogger:
    """Forward messages to a stdlib `logging.Logger`."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO
    ) -> None:
        self._logger = logger or logging.getLogger('pyinix')
        self._level = level

    def log(self, message: str) -> None:
        self._logger.log(self._level, message)


class NullLogger:
    def log(self, message: str) -> None:
        pass
