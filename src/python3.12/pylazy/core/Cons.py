#!/usr/bin/env python3.12
# pyright: reportUnusedClass=false


from typing import Iterable, Iterator, Self

import rich.repr as RR

from .Cursors import Cursor


__all__: list[str] = [
    'Cel', 'Nnl', 'ConsCursor',
    'cons', 'cons_from_iterable', 'cons_to_iterable', 'cons_len',
    'cons_cursors',
]


type Cel[T] = tuple[T, Cel[T]] | tuple[()]
"""### A classic cons cell list, with a tuple as the base type.
Immutable and shareable: every tail is itself a valid list, which makes
a cell a natural forward-only, re-traversable cursor position."""

type Nnl[T] = tuple[T, Cel[T]]
"""### A not-empty cons cell list."""

NIL: tuple[()] = ()


def cons[T](*items: T) -> Cel[T]:
    """Cons list holding `items` in the given order."""
    return cons_from_iterable(items)


def cons_from_iterable[T](iterable: Iterable[T]) -> Cel[T]:
    """Cons list in iteration order."""
    cell: Cel[T] = NIL
    for item in reversed(list(iterable)):
        cell = (item, cell)
    return cell


def cons_to_iterable[T](cell: Cel[T]) -> Iterator[T]:
    car: T
    # TypeGuard is too expensive to use here.
    while cell != NIL:
        car, cell = cell  # type: ignore
        yield car


def cons_len(cell: Cel[object]) -> int:
    n = 0
    while cell != NIL:
        cell = cell[1]  # type: ignore
        n += 1
    return n


class ConsCursor[T](Cursor[T]):
    """Forward cursor over a cons list.  The end position is the empty cell."""
    __slots__ = ('cell',)
    cell: Cel[T]

    def __init__(self: Self, cell: Cel[T]) -> None:
        self.cell = cell

    def deref(self: Self) -> T:
        return self.cell[0]  # type: ignore

    def next(self: Self) -> Self:
        return type(self)(self.cell[1])  # type: ignore

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, ConsCursor):
            return False
        # Identity, not structure: equal tails at different depths are
        # different positions.
        return self.cell is other.cell or (not self.cell and not other.cell)

    def __hash__(self: Self) -> int:
        return id(self.cell) if self.cell else 0

    def __repr__(self: Self) -> str:
        return f'ConsCursor({"nil" if not self.cell else self.cell[0]!r})'

    def __rich_repr__(self: Self) -> RR.Result:
        yield 'nil' if not self.cell else self.cell[0]


def cons_cursors[T](cell: Cel[T]) -> tuple[ConsCursor[T], ConsCursor[T]]:
    return ConsCursor(cell), ConsCursor(NIL)
