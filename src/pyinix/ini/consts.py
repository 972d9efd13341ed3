# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 21:52:03
# @Author : Kariko Lin

from enum import Enum


class LineKind(str, Enum):
    HEADER = 'Header'
    PROPERTY = 'Property'
    COMMENT = 'Comment'


HEADER_OPEN = '['
HEADER_CLOSE = ']'
# `//` is what Assetto Corsa configs use, only the first char counts.
COMMENT_LEADERS = (';', '/')
INLINE_COMMENT = ';'
PAIR_SEPARATOR = '='

COMMENT_JOINT = ' ; '
COMMENT_KEY_PREFIX = 'Comment-'
EMPTY_SENTINEL = '<empty>'


class InixError(str, Enum):
    MALFORMED_HEADER = 'missing closing bracket'
    MALFORMED_PROPERTY = 'error parsing the property'
    DUPLICATE_HEADER = 'duplicate header'
    SOURCE_READ_FAILURE = 'error reading the file'
