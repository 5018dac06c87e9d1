#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

import loguru as LG


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

    'Settings',
]

from .core   import *
from .config import Settings

# Silent unless the application opts in: LG.logger.enable('pylazy')
LG.logger.disable(__name__)
