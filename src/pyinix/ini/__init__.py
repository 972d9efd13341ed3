# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:48:22
# @Author : Kariko Lin

from .consts import LineKind
from .model import InixComment, InixDocument, InixHeader, InixProperty
from .parser import (
    InixParser,
    InixFileParser,
    InixReadError,
    classify,
    serialize
)
from .export import InixJsonExporter, InixYamlExporter
