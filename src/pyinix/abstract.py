# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/12 21:36:45
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import TypeVar

T = TypeVar('T')


class FileHandler[T](metaclass=ABCMeta):
    """Read / write one file as `T`.

    `encoding=None` leaves it to `open()`, i.e. the system default.
    """

    def __init__(self, filename: str, encoding: str | None = None) -> None:
        self._fn = filename
        self._codec = encoding

    @property
    def filename(self) -> str:
        return self._fn

    @property
    def encoding(self) -> str | None:
        return self._codec

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return f'{self._fn} ({self._codec or "default codec"})'
