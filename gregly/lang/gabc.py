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
Gabc language and transform definition.

The :class:`Gabc` language definition tokenizes gabc text into a tree of
contexts. A gabc file has a header with attributes (``name:Populus Sion;``),
then a ``%%`` line, then the body: syllable texts, each followed by the music
between parentheses::

    name:Populus Sion;
    %%
    (c3) Pó(eh/hi)pu(h)lus(h) Si(hi)on,(hgh.) *(;) ec(hihi)ce(e.) (::)

The :class:`GabcTransform` turns the tree into a :class:`~gregly.model.Document`.
Clefs in the music change the clef that is stamped on every following note,
also in following syllables; this is done by :func:`stamp_clefs` after all
syllables have been transformed.

"""

import collections

from parce import Language, lexicon, default_action, skip
from parce.rule import bygroup
from parce.transform import Transform
import parce.action as a

from .. import model
from ..exceptions import GabcSyntaxError


#: Characters that may follow the position letter of a note.
NOTE_SUFFIX = r"[.~<>_'0-9vVwWoOqQrRsSxXyY#=]*"


#: A clef change inside the music, only used while building the model.
Clef = collections.namedtuple("Clef", "name")


class Gabc(Language):
    """Gabc language definition."""
    @lexicon
    def root(cls):
        """The header, until the ``%%`` line, which starts the body."""
        yield r'%%', a.Delimiter.Separator, cls.body
        yield r'%[^\n]*', a.Comment
        yield r'[^\s:;%][^:;\n]*(?=:)', a.Name.Attribute, cls.attribute
        yield r'\s+', skip
        yield default_action, a.Invalid

    @lexicon
    def attribute(cls):
        """The value of an attribute, the key is in the root context."""
        yield r':', a.Delimiter.Operator
        yield r';', a.Delimiter, -1
        yield r'[^;]+', a.String

    @lexicon
    def body(cls):
        """The syllables of the body: a text and an opening parenthesis."""
        yield r'[ \t]*[\r\n]+|[ \t]+$', skip
        yield r'%[^\n]*', a.Comment
        yield r'([^()\r\n%]*)(\()', bygroup(a.Text.Lyric, a.Delimiter.Bracket), cls.syllable
        yield default_action, a.Invalid

    @lexicon
    def syllable(cls):
        """The music of a syllable, after the opening parenthesis."""
        yield r'\)', a.Delimiter.Bracket, -1
        yield from cls.music()
        yield default_action, a.Invalid

    @lexicon
    def notes(cls):
        """Music items without surrounding parentheses."""
        yield from cls.music()
        yield default_action, a.Invalid

    @classmethod
    def music(cls):
        """The items that can appear in a music span.

        The clef is tried first, because it starts with a letter that would
        otherwise be read as a note.

        """
        yield r'[cf][1-4]', a.Name.Builtin.Clef
        yield r'(-?)([a-mA-M])(' + NOTE_SUFFIX + ')', \
            bygroup(a.Name.Pitch.Prefix, a.Name.Pitch, a.Name.Pitch.Suffix)
        yield r"::|;[1-8]|[:;,'`]", a.Delimiter.Separator.Bar
        yield r'//?|!| +|[zZ][0+-]?', a.Delimiter.Separator.Spacer


class GabcTransform(Transform):
    """Transform Gabc to a :class:`~gregly.model.Document`.

    A token that opens a context stays in the parent context, so the key of
    an attribute is read in :meth:`root` and the text of a syllable in
    :meth:`body`.

    """

    ## transforming methods
    def root(self, items):
        """Build the Document from the attributes and the body."""
        self.check(items)
        attributes = []
        syllables = []
        has_body = False
        key = None
        for i in items:
            if i.is_token:
                if i.action is a.Name.Attribute:
                    key = i
                elif i.action is a.Delimiter.Separator:
                    has_body = True
            elif i.name == "attribute":
                attributes.append((key.text, i.obj))
            elif i.name == "body":
                syllables = i.obj
        if not has_body:
            raise GabcSyntaxError("missing '%%' line before the body")
        return model.Document(tuple(attributes), tuple(stamp_clefs(syllables)))

    def attribute(self, items):
        """Return the value of the attribute, as in the source."""
        if items[-1] != ';':
            raise GabcSyntaxError("attribute not terminated with ';'", items[0].pos)
        for t in items:
            if t.action is a.String:
                return t.text
        return ''

    def body(self, items):
        """Return a list of (text, elements) tuples, one per syllable.

        The elements still contain the clefs, and the notes have no clef yet.

        """
        self.check(items)
        result = []
        text = ''
        bracket = None
        for i in items:
            if i.is_token:
                if i.action is a.Text.Lyric:
                    text = i.text
                elif i.action is a.Delimiter.Bracket:
                    bracket = i
            elif i.name == "syllable":
                result.append((text, i.obj))
                text = ''
                bracket = None
        if bracket is not None:
            raise GabcSyntaxError("music not terminated with ')'", bracket.pos)
        return result

    def syllable(self, items):
        """Return the list of elements of a syllable's music."""
        self.check(items)
        if not items or items[-1] != ')':
            raise GabcSyntaxError("music not terminated with ')'", items[0].pos if items else None)
        return self.create_music(items)

    def notes(self, items):
        """Return the list of elements."""
        self.check(items)
        return self.create_music(items)

    ## helper methods
    def check(self, items):
        """Raise GabcSyntaxError if there is an invalid token in the items."""
        for t in items:
            if t.is_token and t.action in a.Invalid:
                raise GabcSyntaxError("unexpected {!r}".format(t.text), t.pos)

    def create_music(self, items):
        """Return a list of music elements and Clef markers.

        A note consists of an optional prefix token, the pitch token and an
        optional suffix token; the note's clef is stamped later.

        """
        music = []
        prefix = ''
        for t in items:
            if not t.is_token:
                continue
            if t.action is a.Name.Pitch.Prefix:
                prefix = t.text
            elif t.action is a.Name.Pitch:
                music.append(model.Note(prefix, t.text, '', None))
                prefix = ''
            elif t.action is a.Name.Pitch.Suffix:
                assert isinstance(music[-1], model.Note), "suffix without note"
                music[-1] = music[-1]._replace(suffix=t.text)
            elif t.action is a.Name.Builtin.Clef:
                music.append(Clef(t.text))
            elif t.action is a.Delimiter.Separator.Bar:
                music.append(model.Barline(t.text))
            elif t.action is a.Delimiter.Separator.Spacer:
                music.append(model.Spacer(t.text))
        return music


def stamp_clefs(syllables, clef=model.NO_CLEF):
    """Yield Syllable objects from (text, elements) tuples.

    Starting with ``clef``, every Note gets the clef that was last seen. The
    clefs themselves are not put in the syllables' music.

    """
    for text, elements in syllables:
        clef, syllable = stamp_syllable(text, elements, clef)
        yield syllable


def stamp_syllable(text, elements, clef):
    """Return a tuple (clef, Syllable).

    The returned clef is the clef in effect at the end of the syllable.

    """
    music = []
    for e in elements:
        if isinstance(e, Clef):
            clef = e.name
        elif isinstance(e, model.Note):
            music.append(e._replace(clef=clef))
        else:
            music.append(e)
    return clef, model.Syllable(text, tuple(music))
