## marching cubes case tables for isosurf
## Copyright (c) 2026 isosurf contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Static lookup tables for marching cubes.

=================
corner numbering
=================

A cell is the hexahedron whose base point is ``(x, y, z)``.  Its eight
corners are numbered by their offsets from the base::

    corner   offset        corner   offset
    0        (0, 0, 0)     4        (0, 1, 0)
    1        (1, 0, 0)     5        (1, 1, 0)
    2        (0, 0, 1)     6        (0, 1, 1)
    3        (1, 0, 1)     7        (1, 1, 1)

Bit ``b`` of a case code is set when corner ``b`` is at or below the
isovalue.

===============
edge numbering
===============

Each of the twelve edges joins two corners and runs along one axis::

    edge  corners  axis       edge  corners  axis
    0     0-1      x          6     6-7      x
    1     1-3      z          7     4-6      z
    2     2-3      x          8     0-4      y
    3     0-2      z          9     1-5      y
    4     4-5      x          10    2-6      y
    5     5-7      z          11    3-7      y

===========
case table
===========

``CASE_TABLE[code]`` is a row of 16 edge ids; every three consecutive
ids before the first ``SENTINEL`` form one triangle, so a row carries at
most five triangles.  The corner, edge and case tables must agree; renumber
one and the other two have to change with it.
"""

from __future__ import annotations

from typing import List, Tuple

SENTINEL = -1
ROW_LENGTH = 16
MAX_TRIANGLES = 5
NUM_CASES = 256

X_AXIS, Y_AXIS, Z_AXIS = 0, 1, 2

# corner -> (dx, dy, dz)
CORNER_OFFSETS: Tuple[Tuple[int, int, int], ...] = (
    (0, 0, 0),
    (1, 0, 0),
    (0, 0, 1),
    (1, 0, 1),
    (0, 1, 0),
    (1, 1, 0),
    (0, 1, 1),
    (1, 1, 1),
)

# edge -> (corner a, corner b, axis); a is the lower end along the axis
EDGE_ENDPOINTS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, X_AXIS),
    (1, 3, Z_AXIS),
    (2, 3, X_AXIS),
    (0, 2, Z_AXIS),
    (4, 5, X_AXIS),
    (5, 7, Z_AXIS),
    (6, 7, X_AXIS),
    (4, 6, Z_AXIS),
    (0, 4, Y_AXIS),
    (1, 5, Y_AXIS),
    (2, 6, Y_AXIS),
    (3, 7, Y_AXIS),
)

EdgeTriple = Tuple[int, int, int]

CASE_TABLE: Tuple[Tuple[int, ...], ...] = (
    (-1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 0
    (0, 3, 8, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 1
    (0, 1, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 2
    (1, 3, 8, 1, 8, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 3
    (2, 3, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 4
    (0, 8, 10, 0, 2, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 5
    (3, 10, 2, 0, 9, 1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 6
    (1, 2, 10, 1, 9, 10, 8, 9, 10, -1, -1, -1, -1, -1, -1, -1),  # 7
    (1, 2, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 8
    (1, 2, 11, 0, 3, 8, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 9
    (0, 2, 9, 2, 9, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 10
    (8, 2, 3, 8, 2, 11, 8, 9, 11, -1, -1, -1, -1, -1, -1, -1),  # 11
    (1, 3, 11, 3, 10, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 12
    (0, 8, 10, 0, 1, 10, 1, 10, 11, -1, -1, -1, -1, -1, -1, -1),  # 13
    (0, 3, 9, 3, 9, 10, 9, 10, 11, -1, -1, -1, -1, -1, -1, -1),  # 14
    (8, 9, 11, 8, 10, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 15
    (7, 8, 4, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 16
    (0, 3, 4, 3, 4, 7, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 17
    (0, 1, 9, 4, 7, 8, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 18
    (1, 3, 7, 1, 4, 7, 1, 4, 9, -1, -1, -1, -1, -1, -1, -1),  # 19
    (7, 4, 8, 2, 3, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 20
    (0, 2, 4, 2, 4, 10, 4, 7, 10, -1, -1, -1, -1, -1, -1, -1),  # 21
    (0, 1, 9, 2, 3, 10, 4, 7, 8, -1, -1, -1, -1, -1, -1, -1),  # 22
    (1, 2, 9, 2, 9, 10, 4, 9, 10, 4, 7, 10, -1, -1, -1, -1),  # 23
    (1, 2, 11, 4, 7, 8, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 24
    (0, 3, 7, 0, 4, 7, 1, 2, 11, -1, -1, -1, -1, -1, -1, -1),  # 25
    (0, 2, 9, 2, 9, 11, 4, 7, 8, -1, -1, -1, -1, -1, -1, -1),  # 26
    (2, 3, 7, 2, 9, 11, 4, 7, 9, 2, 7, 9, -1, -1, -1, -1),  # 27
    (10, 3, 11, 4, 7, 8, 1, 11, 3, -1, -1, -1, -1, -1, -1, -1),  # 28
    (7, 4, 10, 0, 1, 4, 1, 4, 10, 1, 10, 11, -1, -1, -1, -1),  # 29
    (4, 7, 8, 0, 3, 10, 0, 9, 10, 9, 10, 11, -1, -1, -1, -1),  # 30
    (9, 10, 11, 4, 9, 10, 4, 7, 10, -1, -1, -1, -1, -1, -1, -1),  # 31
    (4, 5, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 32
    (0, 3, 8, 4, 5, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 33
    (0, 1, 5, 0, 4, 5, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 34
    (1, 3, 5, 3, 5, 8, 4, 5, 8, -1, -1, -1, -1, -1, -1, -1),  # 35
    (2, 3, 10, 4, 5, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 36
    (0, 2, 10, 0, 8, 10, 4, 5, 9, -1, -1, -1, -1, -1, -1, -1),  # 37
    (5, 4, 0, 2, 10, 3, 1, 5, 0, -1, -1, -1, -1, -1, -1, -1),  # 38
    (1, 2, 5, 2, 5, 10, 5, 10, 4, 10, 4, 8, -1, -1, -1, -1),  # 39
    (1, 2, 11, 4, 5, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 40
    (0, 3, 8, 1, 2, 11, 4, 5, 9, -1, -1, -1, -1, -1, -1, -1),  # 41
    (0, 2, 4, 2, 5, 11, 2, 4, 5, -1, -1, -1, -1, -1, -1, -1),  # 42
    (3, 4, 8, 3, 4, 5, 2, 3, 5, 2, 5, 11, -1, -1, -1, -1),  # 43
    (1, 3, 11, 3, 10, 11, 4, 5, 9, -1, -1, -1, -1, -1, -1, -1),  # 44
    (8, 10, 11, 4, 5, 9, 0, 1, 8, 1, 8, 11, -1, -1, -1, -1),  # 45
    (0, 4, 5, 0, 3, 10, 0, 5, 10, 5, 10, 11, -1, -1, -1, -1),  # 46
    (5, 8, 11, 8, 10, 11, 4, 5, 8, -1, -1, -1, -1, -1, -1, -1),  # 47
    (5, 7, 9, 7, 8, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 48
    (0, 3, 9, 3, 5, 7, 3, 5, 9, -1, -1, -1, -1, -1, -1, -1),  # 49
    (0, 8, 7, 0, 7, 1, 7, 1, 5, -1, -1, -1, -1, -1, -1, -1),  # 50
    (1, 3, 5, 3, 5, 7, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 51
    (2, 3, 10, 7, 8, 9, 5, 7, 9, -1, -1, -1, -1, -1, -1, -1),  # 52
    (5, 7, 9, 2, 7, 10, 0, 2, 9, 2, 7, 9, -1, -1, -1, -1),  # 53
    (2, 3, 10, 7, 1, 5, 8, 1, 7, 0, 1, 8, -1, -1, -1, -1),  # 54
    (10, 2, 1, 7, 5, 1, 10, 1, 7, -1, -1, -1, -1, -1, -1, -1),  # 55
    (7, 8, 9, 9, 5, 7, 1, 2, 11, -1, -1, -1, -1, -1, -1, -1),  # 56
    (1, 2, 11, 0, 5, 9, 0, 5, 7, 0, 3, 7, -1, -1, -1, -1),  # 57
    (0, 2, 8, 2, 5, 8, 2, 5, 11, 5, 7, 8, -1, -1, -1, -1),  # 58
    (2, 5, 11, 2, 3, 5, 3, 5, 7, -1, -1, -1, -1, -1, -1, -1),  # 59
    (9, 5, 8, 8, 7, 5, 11, 10, 3, 1, 3, 11, -1, -1, -1, -1),  # 60
    (0, 1, 9, 5, 7, 11, 7, 10, 11, -1, -1, -1, -1, -1, -1, -1),  # 61
    (0, 3, 10, 0, 10, 11, 0, 5, 11, 0, 5, 7, 0, 7, 8, -1),  # 62
    (5, 7, 10, 5, 10, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 63
    (6, 7, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 64
    (0, 3, 8, 6, 7, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 65
    (0, 1, 9, 6, 7, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 66
    (6, 7, 10, 1, 3, 8, 1, 8, 9, -1, -1, -1, -1, -1, -1, -1),  # 67
    (2, 3, 7, 2, 6, 7, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 68
    (0, 2, 6, 0, 6, 7, 0, 7, 8, -1, -1, -1, -1, -1, -1, -1),  # 69
    (2, 3, 7, 2, 6, 7, 0, 1, 9, -1, -1, -1, -1, -1, -1, -1),  # 70
    (6, 7, 8, 1, 8, 9, 1, 2, 6, 1, 6, 8, -1, -1, -1, -1),  # 71
    (1, 2, 11, 6, 7, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 72
    (6, 7, 10, 0, 3, 8, 1, 2, 11, -1, -1, -1, -1, -1, -1, -1),  # 73
    (0, 2, 9, 2, 9, 11, 6, 7, 10, -1, -1, -1, -1, -1, -1, -1),  # 74
    (8, 9, 11, 6, 7, 10, 2, 3, 11, 3, 8, 11, -1, -1, -1, -1),  # 75
    (7, 3, 1, 7, 1, 11, 7, 6, 11, -1, -1, -1, -1, -1, -1, -1),  # 76
    (7, 1, 11, 7, 6, 11, 0, 8, 1, 1, 8, 7, -1, -1, -1, -1),  # 77
    (0, 9, 11, 0, 3, 7, 0, 7, 11, 6, 7, 11, -1, -1, -1, -1),  # 78
    (8, 9, 11, 7, 8, 11, 6, 7, 11, -1, -1, -1, -1, -1, -1, -1),  # 79
    (4, 8, 6, 10, 8, 6, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 80
    (0, 3, 6, 0, 4, 6, 3, 6, 10, -1, -1, -1, -1, -1, -1, -1),  # 81
    (4, 8, 6, 0, 1, 9, 8, 10, 6, -1, -1, -1, -1, -1, -1, -1),  # 82
    (1, 3, 9, 3, 4, 9, 3, 4, 10, 4, 6, 10, -1, -1, -1, -1),  # 83
    (3, 4, 8, 2, 3, 4, 2, 4, 6, -1, -1, -1, -1, -1, -1, -1),  # 84
    (0, 2, 4, 2, 4, 6, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 85
    (2, 4, 6, 0, 1, 9, 3, 4, 8, 2, 3, 4, -1, -1, -1, -1),  # 86
    (2, 4, 6, 1, 2, 4, 1, 4, 9, -1, -1, -1, -1, -1, -1, -1),  # 87
    (1, 2, 11, 4, 6, 8, 6, 8, 10, -1, -1, -1, -1, -1, -1, -1),  # 88
    (1, 2, 11, 0, 3, 10, 0, 6, 10, 0, 4, 6, -1, -1, -1, -1),  # 89
    (8, 4, 10, 10, 4, 6, 2, 0, 9, 9, 2, 11, -1, -1, -1, -1),  # 90
    (3, 9, 11, 2, 3, 11, 3, 6, 10, 3, 4, 6, 3, 4, 9, -1),  # 91
    (1, 3, 8, 1, 6, 11, 1, 6, 8, 4, 6, 8, -1, -1, -1, -1),  # 92
    (0, 4, 6, 0, 1, 11, 0, 6, 11, -1, -1, -1, -1, -1, -1, -1),  # 93
    (3, 9, 11, 3, 4, 8, 3, 0, 9, 3, 4, 6, 3, 6, 11, -1),  # 94
    (4, 6, 11, 4, 9, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 95
    (4, 5, 9, 6, 7, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 96
    (0, 3, 8, 4, 5, 9, 6, 7, 10, -1, -1, -1, -1, -1, -1, -1),  # 97
    (10, 6, 7, 0, 1, 5, 0, 4, 5, -1, -1, -1, -1, -1, -1, -1),  # 98
    (3, 1, 5, 4, 3, 5, 7, 6, 10, 8, 3, 4, -1, -1, -1, -1),  # 99
    (4, 5, 9, 2, 3, 7, 2, 6, 7, -1, -1, -1, -1, -1, -1, -1),  # 100
    (0, 2, 6, 0, 6, 7, 0, 7, 8, 4, 5, 9, -1, -1, -1, -1),  # 101
    (0, 1, 5, 3, 6, 7, 2, 3, 6, 0, 4, 5, -1, -1, -1, -1),  # 102
    (1, 2, 8, 1, 8, 5, 2, 6, 8, 4, 5, 8, 7, 8, 6, -1),  # 103
    (4, 5, 9, 6, 7, 10, 1, 2, 11, -1, -1, -1, -1, -1, -1, -1),  # 104
    (0, 1, 9, 2, 3, 10, 4, 7, 8, 5, 6, 11, -1, -1, -1, -1),  # 105
    (0, 2, 11, 0, 5, 11, 0, 4, 5, 6, 7, 10, -1, -1, -1, -1),  # 106
    (2, 3, 5, 2, 5, 11, 3, 4, 5, 3, 4, 8, 6, 7, 10, -1),  # 107
    (4, 5, 9, 1, 6, 11, 1, 6, 7, 1, 3, 7, -1, -1, -1, -1),  # 108
    (0, 7, 8, 0, 1, 11, 0, 6, 11, 0, 6, 7, 4, 5, 9, -1),  # 109
    (0, 3, 7, 0, 6, 7, 0, 6, 11, 0, 5, 11, 0, 4, 5, -1),  # 110
    (4, 5, 11, 6, 7, 11, 4, 8, 11, 7, 8, 11, -1, -1, -1, -1),  # 111
    (8, 9, 10, 9, 5, 6, 9, 6, 10, -1, -1, -1, -1, -1, -1, -1),  # 112
    (0, 5, 6, 0, 5, 9, 0, 3, 6, 3, 6, 10, -1, -1, -1, -1),  # 113
    (0, 1, 5, 5, 6, 10, 0, 5, 10, 0, 8, 10, -1, -1, -1, -1),  # 114
    (3, 5, 6, 3, 6, 10, 1, 3, 5, -1, -1, -1, -1, -1, -1, -1),  # 115
    (2, 3, 8, 2, 8, 9, 2, 5, 9, 2, 5, 6, -1, -1, -1, -1),  # 116
    (0, 2, 9, 2, 5, 9, 2, 5, 6, -1, -1, -1, -1, -1, -1, -1),  # 117
    (0, 3, 8, 1, 2, 5, 2, 5, 6, -1, -1, -1, -1, -1, -1, -1),  # 118
    (1, 2, 6, 1, 5, 6, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 119
    (10, 9, 5, 1, 2, 11, 5, 6, 10, 8, 9, 10, -1, -1, -1, -1),  # 120
    (3, 0, 10, 2, 11, 1, 6, 5, 9, 0, 9, 6, 6, 10, 0, -1),  # 121
    (0, 2, 5, 2, 5, 11, 5, 6, 10, 5, 8, 10, 0, 5, 8, -1),  # 122
    (2, 3, 10, 5, 6, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 123
    (1, 6, 11, 1, 5, 6, 1, 5, 9, 1, 8, 9, 1, 3, 8, -1),  # 124
    (0, 1, 11, 0, 5, 6, 0, 5, 9, 0, 6, 11, -1, -1, -1, -1),  # 125
    (11, 5, 6, 0, 3, 8, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 126
    (5, 6, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 127
    (5, 6, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 128
    (0, 3, 8, 5, 6, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 129
    (0, 1, 9, 5, 6, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 130
    (5, 6, 11, 1, 3, 9, 3, 8, 9, -1, -1, -1, -1, -1, -1, -1),  # 131
    (2, 3, 10, 5, 6, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 132
    (5, 6, 11, 0, 2, 10, 0, 8, 10, -1, -1, -1, -1, -1, -1, -1),  # 133
    (0, 1, 9, 5, 6, 11, 2, 3, 10, -1, -1, -1, -1, -1, -1, -1),  # 134
    (5, 6, 11, 2, 9, 10, 8, 9, 10, 1, 2, 9, -1, -1, -1, -1),  # 135
    (1, 2, 6, 1, 5, 6, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 136
    (0, 3, 8, 1, 2, 6, 1, 5, 6, -1, -1, -1, -1, -1, -1, -1),  # 137
    (9, 5, 6, 9, 0, 6, 0, 2, 6, -1, -1, -1, -1, -1, -1, -1),  # 138
    (2, 3, 6, 3, 5, 6, 3, 5, 9, 3, 8, 9, -1, -1, -1, -1),  # 139
    (1, 3, 5, 3, 6, 10, 3, 5, 6, -1, -1, -1, -1, -1, -1, -1),  # 140
    (0, 1, 5, 0, 8, 10, 5, 6, 10, 0, 5, 10, -1, -1, -1, -1),  # 141
    (0, 5, 9, 0, 5, 6, 0, 3, 6, 3, 6, 10, -1, -1, -1, -1),  # 142
    (6, 9, 5, 8, 9, 10, 10, 9, 6, -1, -1, -1, -1, -1, -1, -1),  # 143
    (4, 7, 8, 5, 6, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 144
    (5, 6, 11, 0, 3, 4, 3, 4, 7, -1, -1, -1, -1, -1, -1, -1),  # 145
    (0, 1, 9, 4, 7, 8, 5, 6, 11, -1, -1, -1, -1, -1, -1, -1),  # 146
    (1, 3, 7, 5, 6, 11, 1, 7, 9, 4, 7, 9, -1, -1, -1, -1),  # 147
    (7, 8, 4, 11, 5, 6, 2, 3, 10, -1, -1, -1, -1, -1, -1, -1),  # 148
    (0, 2, 4, 2, 4, 5, 2, 5, 11, 7, 6, 10, -1, -1, -1, -1),  # 149
    (0, 1, 9, 2, 3, 10, 4, 7, 8, 5, 6, 11, -1, -1, -1, -1),  # 150
    (1, 2, 9, 2, 9, 10, 4, 7, 10, 4, 9, 10, 5, 6, 11, -1),  # 151
    (1, 2, 6, 1, 5, 6, 4, 7, 8, -1, -1, -1, -1, -1, -1, -1),  # 152
    (0, 3, 4, 3, 4, 7, 1, 2, 5, 2, 5, 6, -1, -1, -1, -1),  # 153
    (0, 2, 6, 0, 5, 6, 0, 5, 9, 4, 7, 8, -1, -1, -1, -1),  # 154
    (5, 6, 9, 4, 7, 9, 2, 3, 9, 2, 6, 9, 3, 7, 9, -1),  # 155
    (8, 4, 7, 3, 1, 5, 3, 10, 5, 5, 10, 6, -1, -1, -1, -1),  # 156
    (5, 6, 10, 4, 7, 10, 0, 4, 10, 1, 5, 10, 0, 1, 10, -1),  # 157
    (4, 7, 8, 0, 5, 6, 0, 5, 9, 0, 3, 6, 3, 6, 10, -1),  # 158
    (5, 6, 9, 6, 9, 10, 4, 7, 9, 7, 9, 10, -1, -1, -1, -1),  # 159
    (4, 9, 11, 6, 4, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 160
    (0, 3, 8, 4, 6, 11, 4, 9, 11, -1, -1, -1, -1, -1, -1, -1),  # 161
    (0, 1, 11, 0, 6, 11, 0, 4, 6, -1, -1, -1, -1, -1, -1, -1),  # 162
    (4, 6, 8, 1, 3, 8, 1, 6, 11, 1, 6, 8, -1, -1, -1, -1),  # 163
    (6, 11, 4, 9, 11, 4, 10, 2, 3, -1, -1, -1, -1, -1, -1, -1),  # 164
    (10, 2, 8, 8, 2, 0, 6, 11, 4, 4, 11, 9, -1, -1, -1, -1),  # 165
    (2, 3, 10, 0, 1, 6, 1, 6, 11, 0, 4, 6, -1, -1, -1, -1),  # 166
    (1, 2, 11, 4, 6, 8, 6, 8, 10, -1, -1, -1, -1, -1, -1, -1),  # 167
    (1, 2, 4, 1, 4, 9, 2, 4, 6, -1, -1, -1, -1, -1, -1, -1),  # 168
    (0, 3, 8, 1, 2, 9, 2, 4, 6, 2, 4, 9, -1, -1, -1, -1),  # 169
    (0, 2, 4, 2, 4, 6, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 170
    (3, 4, 8, 2, 3, 4, 2, 4, 6, -1, -1, -1, -1, -1, -1, -1),  # 171
    (1, 3, 9, 3, 4, 9, 3, 4, 6, 3, 6, 10, -1, -1, -1, -1),  # 172
    (0, 1, 8, 1, 4, 6, 1, 4, 9, 1, 6, 10, 1, 8, 10, -1),  # 173
    (0, 4, 6, 0, 3, 6, 3, 6, 10, -1, -1, -1, -1, -1, -1, -1),  # 174
    (4, 6, 8, 6, 8, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 175
    (8, 9, 11, 6, 8, 11, 6, 7, 8, -1, -1, -1, -1, -1, -1, -1),  # 176
    (0, 3, 7, 0, 9, 11, 6, 7, 11, 0, 7, 11, -1, -1, -1, -1),  # 177
    (0, 1, 8, 1, 7, 8, 1, 7, 11, 7, 11, 6, -1, -1, -1, -1),  # 178
    (6, 7, 11, 1, 3, 7, 1, 7, 11, -1, -1, -1, -1, -1, -1, -1),  # 179
    (2, 3, 10, 6, 7, 8, 6, 8, 11, 8, 9, 11, -1, -1, -1, -1),  # 180
    (0, 2, 7, 2, 7, 10, 0, 7, 9, 6, 7, 11, 7, 9, 11, -1),  # 181
    (2, 3, 10, 0, 1, 8, 6, 7, 11, 1, 8, 7, 1, 11, 7, -1),  # 182
    (1, 2, 10, 1, 6, 11, 1, 6, 7, 1, 7, 10, -1, -1, -1, -1),  # 183
    (6, 7, 8, 1, 2, 6, 1, 6, 8, 1, 8, 9, -1, -1, -1, -1),  # 184
    (1, 2, 9, 0, 3, 9, 3, 7, 9, 6, 7, 9, 2, 6, 9, -1),  # 185
    (0, 8, 7, 6, 7, 0, 2, 0, 6, -1, -1, -1, -1, -1, -1, -1),  # 186
    (7, 3, 2, 7, 6, 2, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 187
    (1, 3, 6, 1, 6, 9, 6, 8, 9, 6, 7, 8, 3, 6, 10, -1),  # 188
    (0, 1, 9, 6, 7, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 189
    (0, 3, 10, 0, 6, 7, 0, 6, 10, 0, 8, 7, -1, -1, -1, -1),  # 190
    (6, 7, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 191
    (11, 5, 10, 5, 7, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 192
    (0, 3, 8, 5, 7, 10, 5, 10, 11, -1, -1, -1, -1, -1, -1, -1),  # 193
    (0, 1, 9, 5, 7, 10, 5, 10, 11, -1, -1, -1, -1, -1, -1, -1),  # 194
    (1, 3, 8, 1, 8, 9, 5, 7, 11, 7, 10, 11, -1, -1, -1, -1),  # 195
    (3, 5, 7, 2, 3, 5, 2, 5, 11, -1, -1, -1, -1, -1, -1, -1),  # 196
    (0, 2, 8, 2, 5, 8, 5, 7, 8, 2, 5, 11, -1, -1, -1, -1),  # 197
    (0, 1, 9, 2, 3, 7, 2, 5, 7, 2, 5, 11, -1, -1, -1, -1),  # 198
    (2, 5, 11, 1, 2, 9, 2, 5, 7, 2, 7, 8, 2, 8, 9, -1),  # 199
    (1, 5, 7, 1, 2, 10, 7, 10, 1, -1, -1, -1, -1, -1, -1, -1),  # 200
    (0, 3, 8, 1, 5, 7, 1, 2, 7, 2, 7, 10, -1, -1, -1, -1),  # 201
    (0, 2, 9, 2, 7, 9, 2, 7, 10, 5, 7, 9, -1, -1, -1, -1),  # 202
    (2, 3, 8, 2, 5, 9, 2, 5, 7, 2, 7, 10, 2, 8, 9, -1),  # 203
    (5, 7, 3, 3, 1, 5, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 204
    (1, 5, 7, 0, 7, 8, 0, 1, 7, -1, -1, -1, -1, -1, -1, -1),  # 205
    (3, 5, 7, 0, 3, 5, 0, 5, 9, -1, -1, -1, -1, -1, -1, -1),  # 206
    (5, 7, 9, 7, 8, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 207
    (8, 10, 11, 8, 5, 11, 8, 5, 4, -1, -1, -1, -1, -1, -1, -1),  # 208
    (3, 0, 10, 5, 11, 10, 4, 5, 0, 10, 0, 5, -1, -1, -1, -1),  # 209
    (0, 1, 9, 4, 5, 11, 4, 8, 11, 8, 10, 11, -1, -1, -1, -1),  # 210
    (4, 5, 9, 1, 3, 11, 3, 10, 11, -1, -1, -1, -1, -1, -1, -1),  # 211
    (2, 3, 5, 2, 5, 11, 3, 4, 5, 3, 4, 8, -1, -1, -1, -1),  # 212
    (0, 2, 4, 2, 4, 5, 2, 5, 11, -1, -1, -1, -1, -1, -1, -1),  # 213
    (3, 5, 8, 2, 3, 11, 0, 1, 9, 4, 5, 8, 3, 5, 11, -1),  # 214
    (1, 2, 11, 1, 5, 11, 1, 5, 9, 4, 5, 9, -1, -1, -1, -1),  # 215
    (1, 2, 5, 2, 5, 10, 4, 5, 10, 4, 8, 10, -1, -1, -1, -1),  # 216
    (0, 3, 10, 0, 4, 10, 1, 2, 10, 1, 5, 10, 4, 5, 10, -1),  # 217
    (2, 5, 10, 0, 5, 9, 0, 2, 5, 4, 5, 8, 5, 8, 10, -1),  # 218
    (4, 5, 9, 2, 3, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 219
    (1, 3, 5, 4, 5, 8, 3, 8, 5, -1, -1, -1, -1, -1, -1, -1),  # 220
    (0, 1, 5, 0, 4, 5, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 221
    (0, 5, 9, 0, 3, 5, 4, 5, 8, 3, 5, 8, -1, -1, -1, -1),  # 222
    (4, 5, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 223
    (4, 7, 10, 9, 10, 11, 4, 9, 10, -1, -1, -1, -1, -1, -1, -1),  # 224
    (0, 3, 8, 9, 10, 11, 4, 7, 9, 7, 9, 10, -1, -1, -1, -1),  # 225
    (11, 10, 1, 1, 10, 4, 1, 0, 4, 4, 7, 10, -1, -1, -1, -1),  # 226
    (4, 7, 8, 1, 3, 10, 1, 10, 11, -1, -1, -1, -1, -1, -1, -1),  # 227
    (3, 4, 7, 2, 3, 4, 2, 4, 9, 2, 9, 11, -1, -1, -1, -1),  # 228
    (7, 9, 11, 0, 7, 8, 0, 2, 7, 4, 7, 9, 2, 7, 11, -1),  # 229
    (11, 2, 3, 11, 1, 0, 11, 7, 3, 11, 4, 7, 11, 4, 0, -1),  # 230
    (2, 1, 11, 7, 4, 8, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 231
    (1, 2, 9, 4, 7, 10, 4, 9, 10, 2, 9, 10, -1, -1, -1, -1),  # 232
    (0, 1, 9, 2, 3, 10, 4, 7, 8, -1, -1, -1, -1, -1, -1, -1),  # 233
    (0, 2, 4, 2, 4, 10, 4, 7, 10, -1, -1, -1, -1, -1, -1, -1),  # 234
    (2, 4, 10, 2, 3, 4, 3, 4, 8, 4, 7, 10, -1, -1, -1, -1),  # 235
    (1, 4, 9, 1, 3, 7, 1, 4, 7, -1, -1, -1, -1, -1, -1, -1),  # 236
    (0, 1, 9, 0, 4, 9, 0, 4, 8, 4, 7, 8, -1, -1, -1, -1),  # 237
    (0, 3, 4, 3, 4, 7, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 238
    (4, 7, 8, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 239
    (8, 9, 11, 8, 10, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 240
    (0, 3, 9, 3, 9, 10, 9, 10, 11, -1, -1, -1, -1, -1, -1, -1),  # 241
    (0, 1, 11, 0, 11, 10, 0, 10, 8, -1, -1, -1, -1, -1, -1, -1),  # 242
    (1, 3, 11, 3, 10, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 243
    (8, 9, 11, 2, 3, 8, 2, 8, 11, -1, -1, -1, -1, -1, -1, -1),  # 244
    (2, 9, 11, 0, 2, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 245
    (0, 1, 8, 2, 3, 8, 1, 8, 11, 2, 8, 11, -1, -1, -1, -1),  # 246
    (1, 2, 11, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 247
    (8, 9, 10, 9, 1, 10, 1, 2, 10, -1, -1, -1, -1, -1, -1, -1),  # 248
    (0, 1, 9, 2, 3, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 249
    (0, 2, 10, 0, 8, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 250
    (2, 3, 10, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 251
    (1, 3, 8, 1, 8, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 252
    (0, 1, 9, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 253
    (0, 3, 8, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 254
    (-1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 255
)


def case_row(code: int) -> Tuple[int, ...]:
    """Return the edge ids of ``code`` up to, not including, the sentinel."""

    row = CASE_TABLE[code]
    for n, edge in enumerate(row):
        if edge == SENTINEL:
            return row[:n]
    return row


def case_triangles(code: int) -> List[EdgeTriple]:
    """Return the triangles of ``code`` as edge id triples."""

    row = case_row(code)
    return [(row[n], row[n + 1], row[n + 2]) for n in range(0, len(row) - 2, 3)]


def crossing_edges(code: int) -> List[int]:
    """Return the edges whose two corners fall on opposite sides of the
    isovalue for ``code``.  These are exactly the edges a case row may
    reference."""

    edges = []
    for edge, (a, b, _) in enumerate(EDGE_ENDPOINTS):
        if ((code >> a) & 1) != ((code >> b) & 1):
            edges.append(edge)
    return edges


def complement(code: int) -> int:
    return code ^ 0xFF


__all__ = [
    'CASE_TABLE',
    'CORNER_OFFSETS',
    'EDGE_ENDPOINTS',
    'EdgeTriple',
    'MAX_TRIANGLES',
    'NUM_CASES',
    'ROW_LENGTH',
    'SENTINEL',
    'X_AXIS',
    'Y_AXIS',
    'Z_AXIS',
    'case_row',
    'case_triangles',
    'complement',
    'crossing_edges',
]
