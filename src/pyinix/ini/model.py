# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:10:41
# @Author : Kariko Lin

"""
Basically INI Structure, keeping comments alongside.

```ini
; global comment, stored as `Comment-1`
[GAMES] ; header comment
COD=Call of Duty ; property comment
```

Document keys keep the brackets of headers (`[GAMES]`),
so that headers won't collide with synthetic `Comment-<n>` keys.
"""

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Iterator

from .consts import (
    COMMENT_KEY_PREFIX,
    HEADER_CLOSE,
    HEADER_OPEN,
    LineKind
)
from ..log import InixLogger


@dataclass(frozen=True)
class InixProperty:
    value: str
    comment: str = ''


class InixHeader(MutableMapping[str, InixProperty]):
    """An INI section, i.e. ordered properties with an optional comment.

    Re-assigning an existing key overrides the value,
    but the key keeps its original position.
    """
    kind = LineKind.HEADER

    def __init__(self, comment: str = '') -> None:
        self.comment = comment
        self.__props: dict[str, InixProperty] = {}

    @property
    def properties(self) -> dict[str, InixProperty]:
        return self.__props

    def __getitem__(self, key: str) -> InixProperty:
        return self.__props[key]

    def __setitem__(self, key: str, value: InixProperty) -> None:
        self.__props[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__props[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__props)

    def __len__(self) -> int:
        return len(self.__props)

    def __repr__(self) -> str:
        return 'InixHeader { .comment = %r, .cnt = %d }' % (
            self.comment, len(self.__props))


@dataclass(frozen=True)
class InixComment:
    text: str  # verbatim, leader included.
    kind = LineKind.COMMENT


type InixNode = InixHeader | InixComment


def cleanse_key(key: str) -> str:
    """Wrap a bare header name into brackets, like `FRUITS` -> `[FRUITS]`."""
    key = key.strip()
    if key.startswith(HEADER_OPEN):
        return key
    return f'{HEADER_OPEN}{key}{HEADER_CLOSE}'


class InixDocument(Mapping[str, InixNode]):
    """Parsed INI file: headers and standalone comments in file order,
    plus the errors met while parsing.

    Having errors does not mean the document is empty,
    lines parsed well are still there.
    """

    def __init__(self) -> None:
        self.__nodes: dict[str, InixNode] = {}
        self.errors: list[str] = []

    @staticmethod
    def _resolve(key: str) -> str:
        # only synthetic `Comment-<n>` keys go as-is.
        if (key.startswith(COMMENT_KEY_PREFIX)
                and key[len(COMMENT_KEY_PREFIX):].isdigit()):
            return key
        return cleanse_key(key)

    def __getitem__(self, key: str) -> InixNode:
        return self.__nodes[self._resolve(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._resolve(key) in self.__nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self.__nodes)

    def __len__(self) -> int:
        return len(self.__nodes)

    def __str__(self) -> str:
        from .parser import serialize
        return serialize(self)

    def __repr__(self) -> str:
        return 'InixDocument { .cnt = %d, .errors = %d }' % (
            len(self.__nodes), len(self.errors))

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def object_count(self) -> int:
        """Count of headers and standalone comments."""
        return len(self.__nodes)

    def contains_header(self, name: str) -> bool:
        return cleanse_key(name) in self.__nodes

    def get_comment(self, number: int) -> InixComment:
        """Get the `number`-th (1-based) standalone comment.

        Raises `KeyError` if there's no such comment.
        """
        ret = self.__nodes[f'{COMMENT_KEY_PREFIX}{number}']
        if not isinstance(ret, InixComment):
            raise KeyError(number)
        return ret

    def headers(self) -> Iterator[tuple[str, InixHeader]]:
        for k, v in self.__nodes.items():
            if isinstance(v, InixHeader):
                yield k, v

    def comments(self) -> Iterator[tuple[str, InixComment]]:
        for k, v in self.__nodes.items():
            if isinstance(v, InixComment):
                yield k, v

    def dump_dictionary(self, logger: InixLogger) -> None:
        for k, v in self.__nodes.items():
            logger.log(f'{k} -> {v.kind.value}')

    # only for parsers below.
    def _insert(self, key: str, node: InixNode) -> None:
        self.__nodes[key] = node

    def _has_key(self, key: str) -> bool:
        return key in self.__nodes

    def _node(self, key: str) -> InixNode:
        return self.__nodes[key]
