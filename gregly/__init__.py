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
The gregly module.

Read gabc (Gregorio chant notation) and write it as JSON or LilyPond::

    >>> import gregly
    >>> doc = gregly.read.document("name:Test;\\n%%\\n(c1) Hel(e.)lo(hi~) (::)")
    >>> doc.attribute("name")
    'Test'
    >>> lily = doc.as_lilypond()

On first import, the gabc language definition is added to the parce registry,
so that :func:`find` (which is :func:`parce.find`) can find it by name or
filename.

"""

from parce import find

from . import read
from .exceptions import ClefError, GabcSyntaxError
from .pkginfo import version, version_string


__all__ = (
    'ClefError', 'GabcSyntaxError', 'find', 'load', 'read', 'version',
    'version_string',
)


def load(filename, encoding="utf-8", errors=None):
    """Convenience function to read a gabc file and return a
    :class:`~gregly.model.Document`.

    The ``encoding`` and ``errors`` arguments are passed to Python's
    :func:`open` function. Raises :class:`OSError` if the file can't be read,
    and :class:`GabcSyntaxError` if it can't be parsed.

    """
    with open(filename, encoding=encoding, errors=errors) as f:
        return read.document(f.read())


## register bundled languages in gregly here
from parce.registry import register
register("gregly.lang.gabc.Gabc.root",
    name = "Gabc",
    desc = "Gregorio chant notation",
    aliases = ["gabc", "gregorio"],
    filenames = [("*.gabc", 1)],
)

del register
