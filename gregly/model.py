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
The in-memory model of a gabc document.

A :class:`Document` has a tuple of attributes (the header fields) and a tuple
of :class:`Syllable` objects. Each syllable has a text and a tuple of music
elements: :class:`Note`, :class:`Barline` or :class:`Spacer`.

All classes are named tuples, so a model can't be changed once it has been
built. Clefs do not appear in the model: every note carries the clef that was
in effect at the note's place in the source text.

Usually you get a Document by reading gabc text::

    >>> from gregly import read
    >>> doc = read.document("name:Test;\\n%%\\n(c1) Hel(e.)lo(hi~) (::)")
    >>> doc.attributes
    (('name', 'Test'),)
    >>> len(doc.syllables)
    4
    >>> doc.syllables[2].music[0]
    Note(prefix='', position='h', suffix='', clef='c1')

"""

import collections
import json

from . import pitch


#: The clef a note gets when no clef was seen before it.
NO_CLEF = "no clef set"


class Note(collections.namedtuple("Note", "prefix position suffix clef")):
    """A gabc note.

    ``prefix`` is empty or ``"-"`` (an initio debilis), ``position`` is the
    staff position letter (``a``-``m``, upper case is a punctum inclinatum),
    ``suffix`` contains the shape and rhythmic signs (e.g. ``"."`` or ``"~"``)
    and ``clef`` is the clef governing the note.

    """
    __slots__ = ()

    def absolute_pitch(self):
        """Return the absolute pitch of this note in LilyPond notation.

            >>> Note('', 'h', '..', 'c1').absolute_pitch()
            "g'"

        Raises :class:`~gregly.exceptions.ClefError` if the clef is unknown.

        """
        return pitch.absolute_pitch(self.position, self.clef)

    def to_data(self):
        return {"Note": {
            "prefix": self.prefix,
            "position": self.position,
            "suffix": self.suffix,
            "current_clef": self.clef,
        }}


class Barline(collections.namedtuple("Barline", "text")):
    """A gabc bar (divisio), e.g. ``";"`` or ``"::"``."""
    __slots__ = ()

    def to_data(self):
        return {"Barline": self.text}


class Spacer(collections.namedtuple("Spacer", "text")):
    """A gabc spacer, e.g. ``"/"``; it has no musical meaning."""
    __slots__ = ()

    def to_data(self):
        return {"Spacer": self.text}


class Syllable(collections.namedtuple("Syllable", "text music")):
    """A syllable: ``text`` and the ``music`` (a tuple) that belongs to it.

    The text keeps its surrounding whitespace, which tells whether a syllable
    starts or ends a word.

    """
    __slots__ = ()

    def has_notes(self):
        """Return True if there is at least one Note in our music."""
        return any(isinstance(e, Note) for e in self.music)

    def to_data(self):
        return {
            "text": self.text,
            "music": [e.to_data() for e in self.music],
        }


class Document(collections.namedtuple("Document", "attributes syllables")):
    """A full gabc document.

    ``attributes`` is a tuple of (key, value) tuples, in the order they
    appeared in the header. Keys need not be unique. ``syllables`` is a tuple
    of :class:`Syllable` objects.

    """
    __slots__ = ()

    def attribute(self, key, default=None):
        """Return the value of the first attribute named ``key``."""
        for k, value in self.attributes:
            if k == key:
                return value
        return default

    def to_data(self):
        """Return the document as a structure of dicts, lists and strings."""
        return {
            "attributes": [list(a) for a in self.attributes],
            "syllables": [s.to_data() for s in self.syllables],
        }

    def as_json(self):
        """Return the document as a JSON string."""
        return json.dumps(self.to_data(), ensure_ascii=False, separators=(',', ':'))

    def as_lilypond(self):
        """Return a full LilyPond source text with the music and the lyrics.

        See :class:`~gregly.lily.LilyPondWriter`.

        """
        from .lily import LilyPondWriter
        return LilyPondWriter().document(self)
