#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from typing import Any, ClassVar, Final, Iterable, Self

import loguru    as LG
import rich.repr as RR

from .Capabilities import Capability, Traits, classify, require
from .Composites   import ForwardCompositeCursor, composite_cursor_type
from .Cursors      import Cursor, cursors
from .Groups       import CursorGroup
from .Policies     import ( PropagationPolicy, CartesianPolicy     #
                          , ConcatenatePolicy                      )
from .Views        import View
from ..config      import Settings


__all__: list[str] = [
    'CombinatorView', 'CartesianView', 'ConcatenateView',
    'cartesian', 'cartesian_range', 'concat', 'concat_range',
]


DEBUG: Final[bool] = Settings().DEBUG


class CombinatorView(View[ForwardCompositeCursor]):
    """View over N member sequences, traversed according to `policy`."""
    __slots__ = ('traits',)
    policy: ClassVar[type[PropagationPolicy]]
    traits: Traits

    def __init__(self: Self,
                 begin: ForwardCompositeCursor,
                 end  : ForwardCompositeCursor
    ) -> None:
        super().__init__(begin, end)
        self.traits = begin.traits

    @classmethod
    def from_pairs(cls: type[Self],
                   pairs   : Iterable[tuple[Cursor[Any], Cursor[Any]]],
                   required: Capability | None = None
    ) -> Self:
        """Build from ordered (begin, end) member cursor pairs."""
        members = [cls._pair(pair) for pair in pairs]
        if not members:
            raise ValueError(f'{cls.__name__} needs at least one member')
        begins = tuple(b for b, _ in members)
        ends   = tuple(e for _, e in members)
        traits = require(classify(begins), required, cls.__name__)
        cursor_type = composite_cursor_type(traits)
        policy = cls.policy
        begin = cursor_type(
            CursorGroup(policy.begin_state(begins, ends), begins, ends),
            policy, traits)
        end = cursor_type(
            CursorGroup(policy.end_state(begins, ends), begins, ends),
            policy, traits)
        if DEBUG:
            LG.logger.debug(
                f'{cls.__name__}: {len(members)} members, '
                f'{traits.capability.name}, {traits.difference_type}')
        return cls(begin, end)

    @staticmethod
    def _pair(pair: Any) -> tuple[Cursor[Any], Cursor[Any]]:
        try:
            begin, end = pair
        except (TypeError, ValueError) as e:
            raise TypeError(
                f'expected a (begin, end) cursor pair, got {pair!r}') from e
        if not (isinstance(begin, Cursor) and isinstance(end, Cursor)):
            raise TypeError(
                f'expected a (begin, end) cursor pair, got {pair!r}')
        return begin, end

    def __rich_repr__(self: Self) -> RR.Result:
        yield 'members', len(self._begin.group)
        yield from super().__rich_repr__()


class CartesianView(CombinatorView):
    """Every combination of the members' elements, as tuples.

    The last member varies fastest.  The view is random access only when
    every member is; its length is the product of the members' lengths.
    """
    __slots__ = ()
    policy: ClassVar[type[PropagationPolicy]] = CartesianPolicy


class ConcatenateView(CombinatorView):
    """The members' elements one sequence after another."""
    __slots__ = ()
    policy: ClassVar[type[PropagationPolicy]] = ConcatenatePolicy


def cartesian_range(pairs: Iterable[tuple[Cursor[Any], Cursor[Any]]],
                    require: Capability | None = None
                    ) -> CartesianView:
    return CartesianView.from_pairs(pairs, require)


def cartesian(*iterables: Any, require: Capability | None = None
              ) -> CartesianView:
    """Cartesian product view of `iterables`.

    >>> list(cartesian('ab', (1, 2)))
    [('a', 1), ('a', 2), ('b', 1), ('b', 2)]
    """
    return cartesian_range((cursors(it) for it in iterables), require)


def concat_range(pairs: Iterable[tuple[Cursor[Any], Cursor[Any]]],
                 require: Capability | None = None
                 ) -> ConcatenateView:
    return ConcatenateView.from_pairs(pairs, require)


def concat(*iterables: Any, require: Capability | None = None
           ) -> ConcatenateView:
    """Concatenation view of `iterables`.

    >>> list(concat('xy', 'pqr'))
    ['x', 'y', 'p', 'q', 'r']
    """
    return concat_range((cursors(it) for it in iterables), require)
