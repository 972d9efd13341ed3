# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2024/10/13 00:31:52
# @Author : Kariko Lin

"""Structured (JSON / YAML) forms of an INI document,
for tools which would rather not deal with INI lines.

```yaml
objects:
- header: '[GAMES]'
  comment: This is a header comment.
  properties:
    COD:
      value: Call of Duty
      comment: This is call of duty.
- comment: '; global comment 1'
errors: []
```
"""

import json
from typing import Any, NotRequired, TypedDict

import yaml

from .consts import COMMENT_KEY_PREFIX
from .model import InixComment, InixDocument, InixHeader, InixProperty
from ..abstract import FileHandler

__all__ = ['InixJsonExporter', 'InixYamlExporter']


class _PropertyPack(TypedDict):
    value: str
    comment: NotRequired[str]


class _ObjectPack(TypedDict, total=False):
    header: str
    comment: str
    properties: dict[str, _PropertyPack]


class _DocumentPack(TypedDict):
    objects: list[_ObjectPack]
    errors: list[str]


# should keep this base class for better type hinting.
class InixStructExporter(FileHandler[InixDocument]):
    def __init__(
        self, filename: str, encoding: str = 'utf-8', *, indent: int = 2
    ) -> None:
        super().__init__(filename, encoding)
        self._indent = indent

    @staticmethod
    def to_dict(doc: InixDocument) -> _DocumentPack:
        objects: list[_ObjectPack] = []
        for key, node in doc.items():
            if isinstance(node, InixComment):
                objects.append({'comment': node.text})
                continue
            obj: _ObjectPack = {'header': key}
            if node.comment:
                obj['comment'] = node.comment
            obj['properties'] = {}
            for k, v in node.items():
                prop: _PropertyPack = {'value': v.value}
                if v.comment:
                    prop['comment'] = v.comment
                obj['properties'][k] = prop
            objects.append(obj)
        return {'objects': objects, 'errors': list(doc.errors)}

    @staticmethod
    def from_dict(src: dict[str, Any]) -> InixDocument:
        ret = InixDocument()
        comment_cnt = 0
        for obj in src.get('objects') or []:
            if 'header' not in obj:
                comment_cnt += 1
                ret._insert(
                    f'{COMMENT_KEY_PREFIX}{comment_cnt}',
                    InixComment(str(obj['comment'])))
                continue
            header = InixHeader(str(obj.get('comment') or ''))
            for k, v in (obj.get('properties') or {}).items():
                # may there be some pure digits considered as int
                header[str(k)] = InixProperty(
                    str(v['value']), str(v.get('comment') or ''))
            ret._insert(str(obj['header']).strip(), header)
        ret.errors.extend(str(i) for i in src.get('errors') or [])
        return ret


class InixJsonExporter(InixStructExporter):
    def read(self) -> InixDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return self.from_dict(json.load(fp))

    def write(self, instance: InixDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(
                self.to_dict(instance), fp,
                ensure_ascii=False, indent=self._indent)


class InixYamlExporter(InixStructExporter):
    def read(self) -> InixDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src = yaml.load(fp.read(), yaml.FullLoader)
        return self.from_dict(src or {})

    def write(self, instance: InixDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.dump(
                self.to_dict(instance), fp,
                allow_unicode=True, sort_keys=False, indent=self._indent)
