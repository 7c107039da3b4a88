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


r"""
Writing a gabc document as LilyPond source.

The music of every syllable becomes one line of LilyPond notes, where all
notes after the first are tied to it with a slur: ``g(c' c' d')``. The texts
of the syllables become a ``\lyricmode`` expression, with `` -- `` between
syllables that belong to the same word. Both are put in a template derived
from the LilyPond "modern transcription of Gregorian music" template:
<http://lilypond.org/doc/v2.18/Documentation/snippets/templates#templates-ancient-notation-template-_002d-modern-transcription-of-gregorian-music>

Example::

    >>> from gregly import read
    >>> from gregly.lily import LilyPondWriter
    >>> doc = read.document("name:x;\n%%\n(c3) Pó(eh/hi)pu(h)lus(h) (::)")
    >>> w = LilyPondWriter()
    >>> w.notes(doc.syllables[1].music)
    "g(c' c' d')"
    >>> w.lyrics(doc.syllables)
    ' Pó -- pu -- lus  '

"""

import logging

from . import model


logger = logging.getLogger(__name__)


def sanitize_syllable(text):
    """Make a syllable text usable as a LilyPond lyric.

    Braces are removed, spaces inside the text are replaced with underscores,
    and a text starting with a digit is put between double quotes, so
    LilyPond does not read it as a duration. If the text started or ended with
    whitespace, the result has one space there::

        >>> sanitize_syllable(" 3. Po")
        ' "3._Po"'
        >>> sanitize_syllable("{Kyrie} ")
        'Kyrie '

    Applying this function to its own result does not change it.

    """
    start = text.lstrip() != text
    end = text.rstrip() != text
    t = text.strip().replace('{', '').replace('}', '').replace(' ', '_')
    if t[:1].isnumeric():
        t = '"{}"'.format(t)
    return ''.join((' ' if start else '', t, ' ' if end else ''))


class LilyPondWriter:
    """Writes LilyPond source text for gabc syllables and documents.

    The bar commands and the template parts are class attributes; inherit and
    change them to get a different output.

    """
    #: The LilyPond command for each gabc bar.
    bar_commands = {
        "'": r"\divisioMinima",
        ";": r"\divisioMaior",
        ":": r"\divisioMaior",
        "::": r"\finalis",
    }

    #: The LilyPond command for a bar not in :attr:`bar_commands`.
    default_bar_command = r"\divisioMinima"

    #: The template text before the music.
    head = (
        '\\include "gregorian.ly"\n'
        '\n'
        'chant = \\absolute { \\transpose c c\' {\n'
        '  \\set Score.timing = ##f\n'
        '  '
    )

    #: The template text between the music and the lyrics.
    middle = (
        '\n'
        '}}\n'
        '\n'
        'verba = \\lyricmode {\n'
        '  '
    )

    #: The template text after the lyrics.
    tail = r'''
}

\score {
  \new Staff <<
    \new Voice = "melody" \chant
    \new Lyrics = "one" \lyricsto melody \verba
  >>
  \layout {
    \context {
      \Staff
      \remove "Time_signature_engraver"
      \remove "Bar_engraver"
      \hide Stem
    }
    \context {
      \Voice
      \override Stem.length = #0
    }
    \context {
      \Score
      barAlways = ##t
    }
  }
}'''

    def element(self, elem):
        """Return the LilyPond text for a Note, Barline or Spacer.

        A Spacer yields the empty string. Raises
        :class:`~gregly.exceptions.ClefError` for a Note with an unknown clef.

        """
        if isinstance(elem, model.Note):
            return elem.absolute_pitch()
        elif isinstance(elem, model.Barline):
            return self.bar_commands.get(elem.text, self.default_bar_command)
        return ''

    def notes(self, music):
        """Return the LilyPond notes for the music of one syllable.

        The second and following elements are put between parentheses, so
        they are slurred to the first. After the second element, elements
        that yield no text (spacers) are left out; the second element always
        opens the slur, even when it is a spacer.

        """
        texts = map(self.element, music)
        first = next(texts, None)
        if first is None:
            return ''
        second = next(texts, None)
        if second is None:
            return first
        rest = ''.join(' ' + t for t in texts if t)
        return '{}({}{})'.format(first, second, rest)

    def music(self, syllables):
        """Return the notes of all syllables, each on its own line."""
        return ''.join(self.notes(s.music) + '\n' for s in syllables)

    def syllable_text(self, syllable):
        r"""Return the lyric text for a syllable.

        A syllable without notes would get a note from the next syllable in
        LilyPond, so its (non-empty) text is written as a stanza label::

            >>> from gregly.read import syllable
            >>> LilyPondWriter().syllable_text(syllable("*(;)", "c1"))
            ' \\set stanza = "*" '

        """
        text = sanitize_syllable(syllable.text)
        if not syllable.has_notes() and text.strip():
            return ' \\set stanza = "{}" '.format(text)
        return text

    def lyrics(self, syllables):
        """Return the lyrics of all syllables.

        Two syllables are joined with `` -- `` when there is no whitespace
        between them.

        """
        result = []
        prev = None
        for text in map(self.syllable_text, syllables):
            if prev is not None and prev.rstrip() == prev and text.lstrip() == text:
                result.append(" -- ")
            result.append(text)
            prev = text
        return ''.join(result)

    def document(self, document):
        """Return the full LilyPond source text for the Document."""
        logger.debug("writing %d syllables as LilyPond", len(document.syllables))
        return ''.join((
            self.head,
            self.music(document.syllables),
            self.middle,
            self.lyrics(document.syllables),
            self.tail,
        ))
