#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from functools import reduce
from typing import Any, Final, Iterable, Self

import numpy as NP


__all__: list[str] = [
    'Capability', 'CapabilityError', 'Traits', 'DEFAULT_DIFFERENCE_TYPE',
    'weakest', 'common_difference_type', 'classify', 'require',
]


DEFAULT_DIFFERENCE_TYPE: Final[NP.dtype[Any]] = NP.dtype(NP.int64)


class Capability(IntEnum):
    """Traversal capability of a cursor.  Ordered weakest to strongest."""
    FORWARD       = 0
    BIDIRECTIONAL = 1
    RANDOM_ACCESS = 2

    def satisfies(self: Self, other: Capability) -> bool:
        return self >= other


class CapabilityError(TypeError):
    """A cursor combination is weaker than an operation requires."""


@dataclass(frozen=True, slots=True)
class Traits:
    capability     : Capability
    difference_type: NP.dtype[Any]

    @property
    def bidirectional(self: Self) -> bool:
        return self.capability >= Capability.BIDIRECTIONAL

    @property
    def random_access(self: Self) -> bool:
        return self.capability >= Capability.RANDOM_ACCESS


def weakest(*capabilities: Capability) -> Capability:
    """Weakest-link rule: a composite is only as capable as its least member."""
    if not capabilities:
        raise ValueError('weakest() needs at least one capability')
    return min(capabilities)


def common_difference_type(*dtypes: Any) -> NP.dtype[Any]:
    """Step-count dtype wide enough for every given step-count dtype."""
    if not dtypes:
        return DEFAULT_DIFFERENCE_TYPE
    return reduce(NP.promote_types, (NP.dtype(d) for d in dtypes))


def classify(cursors: Iterable[Any]) -> Traits:
    """Traits of a composite built from `cursors`.

    Anything exposing `capability` and `difference_type` attributes counts
    as a cursor; see `pylazy.core.Cursors.Cursor`.
    """
    members = tuple(cursors)
    return Traits(
        weakest(*(c.capability for c in members)),
        common_difference_type(*(c.difference_type for c in members)))


def require(traits: Traits, capability: Capability | None, what: str = ''
            ) -> Traits:
    if capability is not None and not traits.capability.satisfies(capability):
        raise CapabilityError(
            f'{what or "operation"} requires {capability.name} cursors, '
            f'members only provide {traits.capability.name}')
    return traits
