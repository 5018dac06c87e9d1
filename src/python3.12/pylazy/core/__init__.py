#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-


__all__: list[str] = [
    'Capability', 'CapabilityError', 'Traits', 'weakest',
    'common_difference_type', 'classify', 'require',

    'Cursor', 'BidirectionalCursor', 'RandomAccessCursor', 'CursorRange',
    'IndexCursor', 'StepCursor', 'ForwardIndexCursor',
    'cursors', 'forward', 'bidirectional',

    'Cel', 'Nnl', 'ConsCursor', 'cons', 'cons_from_iterable',
    'cons_to_iterable', 'cons_len', 'cons_cursors',

    'CursorGroup',

    'PropagationPolicy', 'CartesianPolicy', 'ConcatenatePolicy',

    'ForwardCompositeCursor', 'BidirectionalCompositeCursor',
    'RandomAccessCompositeCursor', 'composite_cursor_type',

    'View',

    'CombinatorView', 'CartesianView', 'ConcatenateView',
    'cartesian', 'cartesian_range', 'concat', 'concat_range',

    'SplitCursor', 'SplitView', 'split',

    'SeedSequence', 'make_generator', 'RandomCursor', 'RandomView', 'random',
]

from .Capabilities import ( Capability, CapabilityError, Traits, weakest    #
                          , common_difference_type, classify, require      )
from .Cursors      import ( Cursor, BidirectionalCursor, RandomAccessCursor #
                          , CursorRange, IndexCursor, StepCursor           #
                          , ForwardIndexCursor, cursors, forward           #
                          , bidirectional                                  )
from .Cons         import ( Cel, Nnl, ConsCursor, cons, cons_from_iterable  #
                          , cons_to_iterable, cons_len, cons_cursors       )
from .Groups       import   CursorGroup
from .Policies     import ( PropagationPolicy, CartesianPolicy              #
                          , ConcatenatePolicy                              )
from .Composites   import ( ForwardCompositeCursor                          #
                          , BidirectionalCompositeCursor                   #
                          , RandomAccessCompositeCursor                    #
                          , composite_cursor_type                          )
from .Views        import   View
from .Combinators  import ( CombinatorView, CartesianView, ConcatenateView  #
                          , cartesian, cartesian_range, concat             #
                          , concat_range                                   )
from .Splits       import   SplitCursor, SplitView, split
from .Randoms      import ( SeedSequence, make_generator, RandomCursor      #
                          , RandomView, random                             )
