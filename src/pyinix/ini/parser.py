# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 22:47:26
# @Author : Kariko Lin

"""Line based INI reading & writing.

Each line is judged by its first char only:
- `[` a header, like `[GAMES] ; comment`,
- `;` or `/` a standalone comment,
- anything else a `key=value ; comment` property.

Malformed lines never stop the parsing,
they are recorded in `InixDocument.errors` instead.
"""

from io import StringIO, TextIOBase
from typing import Iterable, cast

import chardet

from .consts import (
    COMMENT_JOINT,
    COMMENT_KEY_PREFIX,
    COMMENT_LEADERS,
    EMPTY_SENTINEL,
    HEADER_CLOSE,
    HEADER_OPEN,
    INLINE_COMMENT,
    PAIR_SEPARATOR,
    InixError,
    LineKind
)
from .model import InixComment, InixDocument, InixHeader, InixProperty
from ..abstract import FileHandler
from ..log import InixLogger, NullLogger

__all__ = [
    'classify', 'serialize',
    'InixParser', 'InixFileParser', 'InixReadError'
]


class InixReadError(Exception):
    """To record errors when reading INI files."""
    pass


def classify(first_char: str) -> LineKind:
    if first_char == HEADER_OPEN:
        return LineKind.HEADER
    if first_char in COMMENT_LEADERS:
        return LineKind.COMMENT
    return LineKind.PROPERTY


def _split_comment(line: str) -> tuple[str, str]:
    body, sep, comment = line.partition(INLINE_COMMENT)
    return body, comment.strip() if sep else ''


class InixParser:
    def __init__(self, logger: InixLogger | None = None) -> None:
        self._logger = logger if logger is not None else NullLogger()
        self.__reset()

    def __reset(self) -> None:
        self._doc = InixDocument()
        self._cursor: str | None = None
        self._comment_cnt = 0

    def parse(self, lines: Iterable[str]) -> InixDocument:
        """Build a document from raw lines.

        Trailing line breaks are ignored, empty lines are skipped.
        A whitespace-only line is NOT empty, it fails as a property.
        """
        self.__reset()
        line_cnt = 0
        for i in lines:
            line_cnt += 1
            i = i.rstrip('\r\n')
            if not i:
                continue
            match classify(i[0]):
                case LineKind.HEADER:
                    self.__parse_header(i)
                case LineKind.PROPERTY:
                    self.__parse_property(i)
                case LineKind.COMMENT:
                    self.__parse_comment(i)

        ret = self._doc
        self._logger.log(
            f'Finished parsing {line_cnt} lines: '
            f'{len(ret)} objects, {len(ret.errors)} errors.')
        # no carry-over between calls.
        self.__reset()
        return ret

    def readstream(self, buf: TextIOBase) -> InixDocument:
        """读取解码好的字符串流。"""
        return self.parse(buf)

    def __error(self, kind: InixError, detail: str) -> None:
        msg = f'{kind.value} - {detail}'
        self._logger.log(msg)
        self._doc.errors.append(msg)

    def __parse_header(self, line: str) -> None:
        decl, comment = _split_comment(line)
        decl = decl.strip()
        if not decl.endswith(HEADER_CLOSE):
            # cursor unchanged, properties below go to the previous header.
            self.__error(InixError.MALFORMED_HEADER, decl)
            return
        if self._doc._has_key(decl):
            # keep the first one, and merge the following properties into it.
            self.__error(InixError.DUPLICATE_HEADER, decl)
        else:
            self._doc._insert(decl, InixHeader(comment))
        self._cursor = decl

    def __parse_property(self, line: str) -> None:
        pair, comment = _split_comment(line)
        pieces = pair.split(PAIR_SEPARATOR, 1)
        if len(pieces) != 2:
            self.__error(
                InixError.MALFORMED_PROPERTY,
                f'{line} (got {len(pieces)} piece(s))')
            return
        if self._cursor is None or not self._doc._has_key(self._cursor):
            self._logger.log(f'Dropped property out of any header: {line}')
            return
        key = pieces[0].strip()
        if key and classify(key[0]) is not LineKind.PROPERTY:
            # written back as `key=value`, it would read as a header or comment.
            self._logger.log(
                f"Property key '{key}' won't survive a rewrite: {line}")
        # the cursor only ever points at headers.
        header = cast(InixHeader, self._doc._node(self._cursor))
        header[key] = InixProperty(pieces[1].strip(), comment)

    def __parse_comment(self, line: str) -> None:
        self._comment_cnt += 1
        self._doc._insert(
            f'{COMMENT_KEY_PREFIX}{self._comment_cnt}', InixComment(line))


def _with_comment(text: str, comment: str) -> str:
    return f'{text}{COMMENT_JOINT}{comment}' if comment else text


def serialize(doc: InixDocument) -> str:
    """Reconstruct INI text, `<empty>` for an empty document.

    Note that `<empty>` is NOT an INI, never parse it back.
    """
    if len(doc) == 0:
        return EMPTY_SENTINEL
    buf = StringIO()
    for key, node in doc.items():
        if isinstance(node, InixHeader):
            buf.write(_with_comment(key, node.comment) + '\n')
            for k, v in node.items():
                buf.write(
                    _with_comment(f'{k}{PAIR_SEPARATOR}{v.value}', v.comment)
                    + '\n')
        else:
            buf.write(node.text + '\n')
        buf.write('\n')
    return buf.getvalue()


class InixFileParser(FileHandler[InixDocument]):
    def __init__(
        self,
        filename: str,
        encoding: str | None = None,
        logger: InixLogger | None = None
    ) -> None:
        super().__init__(filename, encoding)
        self._logger = logger if logger is not None else NullLogger()

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            # chardet may name a codec Python does not ship, like EUC-TW.
            try:
                buf = raw.decode('gbk')
            except UnicodeDecodeError as e:
                raise InixReadError(str(e)) from e
        return StringIO(buf)

    def __read(self) -> InixDocument:
        parser = InixParser(self._logger)
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return parser.readstream(fp)
        except UnicodeDecodeError:
            return parser.readstream(self._decode_file())

    def read(self) -> InixDocument:
        """读取`InixFileParser`实例指定的文件。

        Never raises: failing to read gives an empty document
        with a single error entry.
        """
        self._logger.log(f'Loading in file with path - {self._fn}')
        try:
            return self.__read()
        except (OSError, LookupError, InixReadError) as e:
            ret = InixDocument()
            ret.errors.append(f'{InixError.SOURCE_READ_FAILURE.value} - {e}')
            self._logger.log(ret.errors[-1])
            return ret

    def write(self, instance: InixDocument) -> None:
        """保存到 INI 文件。空文档不予保存（`<empty>`并不是 INI）。"""
        if len(instance) == 0:
            raise ValueError(f'Refused to write an empty document to {self}.')
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            fp.write(serialize(instance))

    def __str__(self) -> str:
        return "INI file: " + super().__str__()
