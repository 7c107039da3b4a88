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
Simple helper functions to read gabc text into model objects.

Example::

    >>> from gregly import read
    >>> doc = read.document("office-part:Tractus;\\nmode:8;\\n%%\\n(c3) Pó(eh/hi)")
    >>> doc.attribute("mode")
    '8'
    >>> read.syllable("Pó(eh/hi)", "c3").music[2]
    Spacer(text='/')
    >>> read.note("h..", "c1")
    Note(prefix='', position='h', suffix='..', clef='c1')

All functions raise :class:`~gregly.exceptions.GabcSyntaxError` when the text
can't be read.

"""

import logging

import parce
import parce.action as a
from parce.transform import transform_text

from . import model
from .exceptions import GabcSyntaxError
from .lang.gabc import Gabc, stamp_clefs


logger = logging.getLogger(__name__)


def document(text):
    """Return a :class:`~gregly.model.Document` from the full gabc text."""
    doc = transform_text(Gabc.root, text)
    logger.debug("read %d attributes and %d syllables",
        len(doc.attributes), len(doc.syllables))
    return doc


def syllables(text, clef=model.NO_CLEF):
    """Yield :class:`~gregly.model.Syllable` objects from body text.

    The text is read as the part of a gabc file after the ``%%`` line. Notes
    before the first clef get the specified ``clef``.

    """
    return stamp_clefs(transform_text(Gabc.body, text) or (), clef)


def syllable(text, clef=model.NO_CLEF):
    """Return the first syllable from the text, e.g. ``"Po(eh/hi)"``.

    Returns None if the text contains no syllable.

    """
    for s in syllables(text, clef):
        return s


def note(text, clef=model.NO_CLEF):
    """Return a single :class:`~gregly.model.Note` from the text, e.g. ``"h.."``.

    Raises GabcSyntaxError if the text is not exactly one note.

    """
    elements = transform_text(Gabc.notes, text) or []
    if len(elements) != 1 or not isinstance(elements[0], model.Note):
        raise GabcSyntaxError("not a single note: {!r}".format(text))
    return elements[0]._replace(clef=clef)


def tree(text, lexicon=Gabc.root):
    """Return the parce tree for the text, without transforming it."""
    return parce.root(lexicon, text)


def dump_tree(node, indent=0):
    """Return a multiline string showing the tree below ``node``.

    Every context is shown with its lexicon, every token with its action
    and text; one line per node, indented with tabs.

    """
    lines = []
    for n in node:
        if n.is_token:
            lines.append("{}{!r}: {}\n".format('\t' * indent, n.action, n.text))
        else:
            lines.append("{}{!r}\n".format('\t' * indent, n.lexicon))
            lines.append(dump_tree(n, indent + 1))
    return ''.join(lines)


def check_tree(node):
    """Raise GabcSyntaxError for the first invalid token below ``node``.

    The transform does this while building the model; use this function
    when only the tree is needed.

    """
    for n in node:
        if not n.is_token:
            check_tree(n)
        elif n.action in a.Invalid:
            raise GabcSyntaxError("unexpected {!r}".format(n.text), n.pos)
