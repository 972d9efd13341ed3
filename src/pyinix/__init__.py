# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:31:07
# @Author : Kariko Lin

import logging

from .ini import (
    InixComment, InixDocument, InixHeader, InixProperty,
    InixParser, InixFileParser, InixReadError, classify, serialize,
    InixJsonExporter, InixYamlExporter, LineKind
)
from .log import InixLogger, NullLogger, StdLogger

__all__ = [
    'InixComment', 'InixDocument', 'InixHeader', 'InixProperty',
    'InixParser', 'InixFileParser', 'InixReadError', 'classify', 'serialize',
    'InixJsonExporter', 'InixYamlExporter', 'LineKind',
    'InixLogger', 'NullLogger', 'StdLogger'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
