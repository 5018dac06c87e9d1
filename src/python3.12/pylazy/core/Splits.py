#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from typing import Self

import rich.repr as RR

from .Cursors import Cursor
from .Views   import View


__all__: list[str] = ['SplitCursor', 'SplitView', 'split']


NPOS: int = -1


class SplitCursor(Cursor[str]):
    """Forward cursor over the pieces of a text between delimiters.

    `pos` is where the current piece starts, `last` where the next
    delimiter is (`NPOS` once there is none).  Positions compare by `pos`.
    """
    __slots__ = ('text', 'delimiter', 'pos', 'last')
    text     : str
    delimiter: str
    pos      : int
    last     : int

    def __init__(self: Self, text: str, delimiter: str, pos: int = 0,
                 last: int | None = None) -> None:
        self.text = text
        self.delimiter = delimiter
        self.pos = pos
        self.last = text.find(delimiter, pos) if last is None else last

    def deref(self: Self) -> str:
        if self.last != NPOS:
            return self.text[self.pos:self.last]
        return self.text[self.pos:]

    def next(self: Self) -> Self:
        text, delimiter, last = self.text, self.delimiter, self.last
        if last == NPOS:
            return type(self)(text, delimiter, len(text), NPOS)
        if last == len(text) - len(delimiter):
            # A trailing delimiter ends the text, no empty last piece.
            return type(self)(text, delimiter, len(text), NPOS)
        return type(self)(text, delimiter, last + len(delimiter))

    def __eq__(self: Self, other: object) -> bool:
        return isinstance(other, SplitCursor) and self.pos == other.pos

    def __hash__(self: Self) -> int:
        return hash(self.pos)

    def __repr__(self: Self) -> str:
        return f'SplitCursor({self.pos})'

    def __rich_repr__(self: Self) -> RR.Result:
        yield self.pos


class SplitView(View[SplitCursor]):
    __slots__ = ('text', 'delimiter')
    text     : str
    delimiter: str

    def __init__(self: Self, text: str, delimiter: str) -> None:
        if not delimiter:
            raise ValueError('split() delimiter must not be empty')
        self.text = text
        self.delimiter = delimiter
        super().__init__(SplitCursor(text, delimiter, 0),
                         SplitCursor(text, delimiter, len(text), NPOS))

    def __rich_repr__(self: Self) -> RR.Result:
        yield 'delimiter', self.delimiter
        yield from super().__rich_repr__()


def split(text: str, delimiter: str = ' ') -> SplitView:
    """Lazily split `text` on `delimiter`.

    >>> list(split('a,,b,', ','))
    ['a', '', 'b']
    """
    return SplitView(text, delimiter)
