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
Exceptions raised by gregly.

Two kinds of errors are reported to the caller: a :class:`GabcSyntaxError`
when the gabc text does not match the grammar, and a :class:`ClefError` when
an absolute pitch is requested for a note that has no usable clef.

A missing part of a production that the grammar always provides (e.g. a note
without its position character) is not an error of the input but a mismatch
between the language definition and the transform; those are checked with
``assert``.

"""


class GabcSyntaxError(ValueError):
    """Raised when the gabc text can't be read.

    The ``pos`` attribute is the position in the source text where the problem
    was found, or None if the problem concerns the document as a whole. Use
    :func:`line_column` to turn it into a line and column number.

    """
    def __init__(self, message, pos=None):
        super().__init__(message, pos)
        self.message = message
        self.pos = pos

    def __str__(self):
        if self.pos is None:
            return self.message
        return "{} (at position {})".format(self.message, self.pos)


class ClefError(ValueError):
    """Raised when a pitch is requested under an unknown clef.

    This also happens for notes that appear before the first clef of a
    document, they carry the :data:`~gregly.model.NO_CLEF` value.

    """
    def __init__(self, clef):
        super().__init__(clef)
        self.clef = clef

    def __str__(self):
        return "invalid clef: {}".format(self.clef)


def line_column(text, pos):
    """Return a tuple (line, column) for the position in text.

    Both values start at 1, like most editors display them.

        >>> line_column("name:x;\\n%%\\n(c3", 13)
        (3, 3)

    """
    line = text.count('\n', 0, pos) + 1
    column = pos - (text.rfind('\n', 0, pos) + 1) + 1
    return line, column
