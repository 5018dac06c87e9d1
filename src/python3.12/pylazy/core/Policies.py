#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Sequence, Self

from .Cursors import Cursor
from .Groups  import CursorGroup


__all__: list[str] = [
    'PropagationPolicy', 'CartesianPolicy', 'ConcatenatePolicy',
]


#############################################################################
#  Propagation Policies
# ----------------------
#
#  A policy moves a single stepping operation across the members of a
#  `CursorGroup`.  Policies are stateless; every operation is a
#  classmethod mutating `group.current` in place, so one composite cursor
#  class serves every combinator kind.
#
#  Jumps and distances require random-access members.  Nothing here checks
#  it: the composite cursor class, picked from the members' traits, only
#  exposes what the members can do.
#
class PropagationPolicy(ABC):
    name: ClassVar[str]

    @classmethod
    @abstractmethod
    def begin_state(cls: type[Self],
                    begin: Sequence[Cursor[Any]],
                    end  : Sequence[Cursor[Any]]
    ) -> list[Cursor[Any]]:
        """Member positions of the combinator's first element."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def end_state(cls: type[Self],
                  begin: Sequence[Cursor[Any]],
                  end  : Sequence[Cursor[Any]]
    ) -> list[Cursor[Any]]:
        """Member positions one past the combinator's last element."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def step_forward(cls: type[Self], group: CursorGroup) -> None:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def step_backward(cls: type[Self], group: CursorGroup) -> None:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def jump_forward(cls: type[Self], group: CursorGroup, offset: int
                     ) -> None:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def jump_backward(cls: type[Self], group: CursorGroup, offset: int
                      ) -> None:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def deref(cls: type[Self], group: CursorGroup) -> Any:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def distance(cls: type[Self], a: CursorGroup, b: CursorGroup) -> int:
        """Signed number of forward steps from `b` to `a`."""
        raise NotImplementedError

    @classmethod
    def jump(cls: type[Self], group: CursorGroup, offset: int) -> None:
        if offset >= 0:
            cls.jump_forward(group, offset)
        else:
            cls.jump_backward(group, -offset)

    @classmethod
    def equal(cls: type[Self], a: CursorGroup, b: CursorGroup) -> bool:
        return a.mismatch(b) is None


class CartesianPolicy(PropagationPolicy):
    """Odometer: the last member varies fastest and carries leftwards.

    End state is member 0 at its end and every other member at its begin,
    which is where the odometer lands after the final carry.  A product
    with an empty member starts at its end state.
    """
    name: ClassVar[str] = 'cartesian'

    @classmethod
    def begin_state(cls: type[Self],
                    begin: Sequence[Cursor[Any]],
                    end  : Sequence[Cursor[Any]]
    ) -> list[Cursor[Any]]:
        if any(b == e for b, e in zip(begin, end)):
            return cls.end_state(begin, end)
        return list(begin)

    @classmethod
    def end_state(cls: type[Self],
                  begin: Sequence[Cursor[Any]],
                  end  : Sequence[Cursor[Any]]
    ) -> list[Cursor[Any]]:
        return [end[0], *begin[1:]]

    @classmethod
    def step_forward(cls: type[Self], group: CursorGroup) -> None:
        current, begin, end = group.current, group.begin, group.end
        for i in range(len(current) - 1, 0, -1):
            current[i] = current[i].next()
            if current[i] != end[i]:
                return
            # rolled over: reset and carry
            current[i] = begin[i]
        current[0] = current[0].next()

    @classmethod
    def step_backward(cls: type[Self], group: CursorGroup) -> None:
        current, begin, end = group.current, group.begin, group.end
        for i in range(len(current) - 1, 0, -1):
            if current[i] != begin[i]:
                current[i] = current[i].prev()  # type: ignore[attr-defined]
                return
            # borrow: wrap to the last element
            current[i] = end[i].prev()  # type: ignore[attr-defined]
        current[0] = current[0].prev()  # type: ignore[attr-defined]

    @classmethod
    def jump_forward(cls: type[Self], group: CursorGroup, offset: int
                     ) -> None:
        cls._shift(group, offset)

    @classmethod
    def jump_backward(cls: type[Self], group: CursorGroup, offset: int
                      ) -> None:
        cls._shift(group, -offset)

    @classmethod
    def _shift(cls: type[Self], group: CursorGroup, offset: int) -> None:
        """Mixed-radix add: each member is a digit of base its length."""
        current, begin = group.current, group.begin
        carry = offset
        for i in range(len(current) - 1, 0, -1):
            if not carry:
                return
            length = group.length(i)
            if not length:
                # Empty product: no digit can absorb anything.
                continue
            carry, digit = divmod(group.position(i) + carry, length)
            current[i] = begin[i].jump(digit)  # type: ignore[attr-defined]
        if carry:
            current[0] = current[0].jump(carry)  # type: ignore[attr-defined]

    @classmethod
    def deref(cls: type[Self], group: CursorGroup) -> tuple[Any, ...]:
        return tuple(c.deref() for c in group.current)

    @classmethod
    def distance(cls: type[Self], a: CursorGroup, b: CursorGroup) -> int:
        total, weight = 0, 1
        for i in range(len(a) - 1, -1, -1):
            total += weight * a.current[i].distance(  # type: ignore
                b.current[i])
            weight *= a.length(i)
        return total


class ConcatenatePolicy(PropagationPolicy):
    """Sequential: members are traversed one after another, left to right.

    Members before the one in progress sit at their end, members after it
    at their begin.  Exhausted members are never reset.
    """
    name: ClassVar[str] = 'concatenate'

    @classmethod
    def begin_state(cls: type[Self],
                    begin: Sequence[Cursor[Any]],
                    end  : Sequence[Cursor[Any]]
    ) -> list[Cursor[Any]]:
        return list(begin)

    @classmethod
    def end_state(cls: type[Self],
                  begin: Sequence[Cursor[Any]],
                  end  : Sequence[Cursor[Any]]
    ) -> list[Cursor[Any]]:
        return list(end)

    @classmethod
    def step_forward(cls: type[Self], group: CursorGroup) -> None:
        current, end = group.current, group.end
        for i, cursor in enumerate(current):
            if cursor != end[i]:
                current[i] = cursor.next()
                return

    @classmethod
    def step_backward(cls: type[Self], group: CursorGroup) -> None:
        current, begin = group.current, group.begin
        for i in range(len(current) - 1, 0, -1):
            if current[i] != begin[i]:
                current[i] = current[i].prev()  # type: ignore[attr-defined]
                return
        current[0] = current[0].prev()  # type: ignore[attr-defined]

    @classmethod
    def jump_forward(cls: type[Self], group: CursorGroup, offset: int
                     ) -> None:
        current, end = group.current, group.end
        last = len(current) - 1
        for i in range(last):
            if not offset:
                return
            remaining: int = end[i].distance(current[i])  # type: ignore
            if remaining > offset:
                current[i] = current[i].jump(offset)  # type: ignore
                return
            current[i] = end[i]
            offset -= remaining
        if offset:
            current[last] = current[last].jump(offset)  # type: ignore

    @classmethod
    def jump_backward(cls: type[Self], group: CursorGroup, offset: int
                      ) -> None:
        current, begin = group.current, group.begin
        for i in range(len(current) - 1, 0, -1):
            if not offset:
                return
            consumed = group.position(i)
            if consumed >= offset:
                current[i] = current[i].jump(-offset)  # type: ignore
                return
            current[i] = begin[i]
            offset -= consumed
        if offset:
            current[0] = current[0].jump(-offset)  # type: ignore

    @classmethod
    def deref(cls: type[Self], group: CursorGroup) -> Any:
        current, end = group.current, group.end
        for i in range(len(current) - 1):
            if current[i] != end[i]:
                return current[i].deref()
        return current[-1].deref()

    @classmethod
    def distance(cls: type[Self], a: CursorGroup, b: CursorGroup) -> int:
        return sum(x.distance(y)  # type: ignore[attr-defined]
                   for x, y in zip(a.current, b.current))
