#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from functools import cache
from secrets import randbits
from typing import Any, Callable, Final, Iterable, Iterator, Self

import numpy as NP
import rich.repr as RR
from numpy.random.bit_generator import ISeedSequence

from .Cursors import RandomAccessCursor
from .Views   import View
from ..config import Settings


__all__: list[str] = [
    'SeedSequence', 'make_generator', 'RandomCursor', 'RandomView', 'random',
]


MASK32: Final[int] = 0xFFFFFFFF
# Index arithmetic wraps like an unsigned 64-bit size.
MASK64: Final[int] = 0xFFFFFFFFFFFFFFFF


################################################################################
#
# ---------- Seed Sequence ----------------------------------------------------
#
#  A fixed-size variant of the classic seed_seq mixing: a fixed array of
#  32-bit entropy words is spread over any number of output words with two
#  rounds of multiply-xorshift mixing.  All arithmetic is modulo 2**32.
#

def _mix(x: int) -> int:
    return x ^ (x >> 27)


class SeedSequence(ISeedSequence):
    """Seed sequence over a fixed number of 32-bit entropy words.

    Without `entropy`, `size` words (default `Settings().SEED_WORDS`) are
    drawn from the OS.  Given entropy is truncated or zero-padded to
    `size` words.  Usable wherever numpy expects a seed sequence.
    """
    seed: tuple[int, ...]

    def __init__(self: Self,
                 entropy: Iterable[int] | None = None,
                 size   : int | None = None
    ) -> None:
        if entropy is None:
            size = size or Settings().SEED_WORDS
            words = [randbits(32) for _ in range(size)]
        else:
            words = [int(w) & MASK32 for w in entropy]
            size = size or len(words)
            words = (words + [0] * size)[:size]
        if not size:
            raise ValueError('a seed sequence needs at least one word')
        self.seed = tuple(words)

    def __len__(self: Self) -> int:
        return len(self.seed)

    def param(self: Self) -> tuple[int, ...]:
        return self.seed

    def generate(self: Self, n: int) -> list[int]:
        """`n` well-mixed 32-bit words."""
        if n <= 0:
            return []
        out = [0x8b8b8b8b] * n
        seed = self.seed
        s = len(seed)
        m = max(s + 1, n)
        t = (11 if n >= 623 else 7 if n >= 68 else 5 if n >= 39
             else 3 if n >= 7 else (n - 1) // 2)
        p = (n - t) // 2
        q = p + t

        for k in range(m - 1):
            k_n, kp_n = k % n, (k + p) % n
            behind = out[((k - 1) & MASK64) % n]
            r1 = (1664525 * _mix(out[k_n] ^ out[kp_n] ^ behind)) & MASK32
            if k == 0:
                r2 = (r1 + s) & MASK32
            elif k <= s:
                r2 = (r1 + k_n + seed[k - 1]) & MASK32
            else:
                r2 = (r1 + k_n) & MASK32
            out[kp_n] = (out[kp_n] + r1) & MASK32
            out[(k + q) % n] = (out[(k + q) % n] + r2) & MASK32
            out[k_n] = r2

        for k in range(m, m + n - 1):
            k_n, kp_n = k % n, (k + p) % n
            r3 = (1566083941 * _mix((out[k_n] + out[kp_n] + out[(k - 1) % n])
                                    & MASK32)) & MASK32
            r4 = (r3 - k_n) & MASK32
            out[kp_n] ^= r3
            out[(k + q) % n] ^= r4
            out[k_n] = r4

        return out

    def generate_state(self: Self, n_words: int, dtype: Any = NP.uint32
                       ) -> NP.ndarray[Any, Any]:
        dtype = NP.dtype(dtype)
        if dtype == NP.uint32:
            return NP.array(self.generate(n_words), dtype=NP.uint32)
        if dtype == NP.uint64:
            words = NP.array(self.generate(2 * n_words), dtype='<u4')
            return words.view('<u8').astype(NP.uint64)
        raise ValueError(f'only uint32 and uint64 states, not {dtype}')

    def __repr__(self: Self) -> str:
        return f'SeedSequence({len(self.seed)} words)'


def make_generator(seed: SeedSequence | Iterable[int] | int | None = None
                   ) -> NP.random.Generator:
    """Mersenne Twister generator seeded through `SeedSequence`."""
    if isinstance(seed, int):
        seed = [seed]
    if not isinstance(seed, SeedSequence):
        seed = SeedSequence(seed)
    return NP.random.Generator(NP.random.MT19937(seed))


@cache
def _shared_generator() -> NP.random.Generator:
    return make_generator()


################################################################################
#
# ---------- Random View ------------------------------------------------------
#

class RandomCursor[N: (int, float)](RandomAccessCursor[N]):
    """Counts positions; every dereference draws a fresh value.

    An endless cursor never compares equal, so a traversal up to an
    endless end never stops on its own.
    """
    __slots__ = ('draw', 'index', 'endless')
    draw   : Callable[[], N]
    index  : int
    endless: bool

    def __init__(self: Self, draw: Callable[[], N], index: int = 0,
                 endless: bool = False) -> None:
        self.draw = draw
        self.index = index
        self.endless = endless

    def deref(self: Self) -> N:
        return self.draw()

    def jump(self: Self, offset: int) -> Self:
        return type(self)(self.draw, self.index + offset, self.endless)

    def distance(self: Self, other: Self) -> int:
        if self.endless or getattr(other, 'endless', False):
            raise TypeError('an endless RandomCursor has no distance')
        return self.index - other.index

    def __eq__(self: Self, other: object) -> bool:
        if self.endless or not isinstance(other, RandomCursor):
            return False
        return self.index == other.index

    def __hash__(self: Self) -> int:
        return hash(self.index)

    def __repr__(self: Self) -> str:
        return f'RandomCursor({self.index})'


class RandomView[N: (int, float)](View[RandomCursor[N]]):
    __slots__ = ('lo', 'hi', 'amount')
    lo    : N
    hi    : N
    amount: int | None

    def __init__(self: Self, draw: Callable[[], N], lo: N, hi: N,
                 amount: int | None = None) -> None:
        self.lo, self.hi, self.amount = lo, hi, amount
        endless = amount is None
        super().__init__(RandomCursor(draw, 0, endless),
                         RandomCursor(draw, amount or 0, endless))

    def next_random(self: Self) -> N:
        """A fresh random value, regardless of the view's size."""
        return self._begin.deref()

    def min_random(self: Self) -> N:
        return self.lo

    def max_random(self: Self) -> N:
        return self.hi

    def empty(self: Self) -> bool:
        return self.amount is not None and self.amount == 0

    def _finite(self: Self, what: str) -> None:
        if self.amount is None:
            raise TypeError(f'an endless RandomView has no {what}')

    def __len__(self: Self) -> int:
        self._finite('length')
        return self.amount  # type: ignore[return-value]

    def __reversed__(self: Self) -> Iterator[N]:
        self._finite('end to reverse from')
        return super().__reversed__()

    def last(self: Self, *default: Any) -> N:
        self._finite('last element')
        return super().last(*default)

    def __getitem__(self: Self, index: int) -> N:
        if self.amount is None and isinstance(index, int) and index >= 0:
            return self._begin.jump(index).deref()
        return super().__getitem__(index)

    def __rich_repr__(self: Self) -> RR.Result:
        yield 'lo', self.lo
        yield 'hi', self.hi
        yield 'amount', self.amount
        yield from super().__rich_repr__()


def random(lo: int | float, hi: int | float, amount: int | None = None,
           *,
           generator: NP.random.Generator | None = None,
           seed: SeedSequence | Iterable[int] | int | None = None
           ) -> RandomView[Any]:
    """View of `amount` uniform random values in [lo, hi].

    Integers when both bounds are integers, floats otherwise.  Without
    `amount` the view is endless.  Without `generator` or `seed` a shared,
    OS-seeded generator is used.
    """
    if lo > hi:
        raise ValueError(f'random() bounds out of order: {lo} > {hi}')
    if amount is not None and amount < 0:
        raise ValueError(f'random() amount must not be negative: {amount}')
    if generator is None:
        generator = (_shared_generator() if seed is None
                     else make_generator(seed))
    gen = generator
    draw: Callable[[], Any]
    if isinstance(lo, int) and isinstance(hi, int):
        draw = lambda: int(gen.integers(lo, hi, endpoint=True))
    else:
        draw = lambda: float(gen.uniform(lo, hi))
    return RandomView(draw, lo, hi, amount)
