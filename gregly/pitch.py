# -*- coding: utf-8 -*-
#
# This file is part of `gregly`, a library for gabc chant notation and LilyPond
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Resolving gabc staff positions to absolute LilyPond pitches.

A gabc note only tells where it sits on the staff: the letters ``a`` to ``m``
denote the positions from below the lowest line to above the highest line.
Which pitch such a position stands for, is determined by the clef.

The c clefs (``c1`` to ``c4``) put middle C on the given line (counted from
below), the f clefs (``f1`` to ``f4``) put the F above middle C there. The
absolute pitch is looked up in a fixed ladder of pitch names, in LilyPond's
absolute octave notation (``c'`` is middle C)::

    >>> from gregly.pitch import absolute_pitch
    >>> absolute_pitch('d', 'c1')
    "c'"
    >>> absolute_pitch('h', 'c1')
    "g'"
    >>> absolute_pitch('H', 'c3')
    "c'"

"""

from .exceptions import ClefError


#: The pitch names a gabc note can have, from low to high.
LADDER = (
    "a,", "b,", "c", "d", "e", "f", "g", "a", "b", "c'", "d'", "e'", "f'",
    "g'", "a'", "b'", "c''", "d''", "e''", "f''", "g''", "a'''",
)

#: The index in the :data:`LADDER` of the pitch at staff position ``a``, per
#: clef. Moving the clef one line up, moves the pitches two steps down.
CLEF_OFFSETS = {
    "c1": 6,
    "c2": 4,
    "c3": 2,
    "c4": 0,
    "f1": 9,
    "f2": 7,
    "f3": 5,
    "f4": 3,
}

#: The staff positions, lowest first.
POSITIONS = "abcdefghijklm"


def ladder_index(position, clef):
    """Return the index in the :data:`LADDER` for the position under the clef.

    The ``position`` is a single letter ``a``-``m``, case does not matter.
    Raises :class:`~gregly.exceptions.ClefError` if the clef is not one of
    the eight known clefs.

    """
    try:
        offset = CLEF_OFFSETS[clef]
    except KeyError:
        raise ClefError(clef) from None
    step = POSITIONS.find(position.lower())
    assert len(position) == 1 and step != -1, "invalid staff position: {!r}".format(position)
    return offset + step


def absolute_pitch(position, clef):
    """Return the LilyPond absolute pitch name for the position under the clef.

    Raises :class:`~gregly.exceptions.ClefError` for an unknown clef.

    """
    index = ladder_index(position, clef)
    assert index < len(LADDER)
    return LADDER[index]
