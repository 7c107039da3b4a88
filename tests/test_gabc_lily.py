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
Test writing gabc as LilyPond.
"""

import pytest

### find gregly
import sys
sys.path.insert(0, '.')

from gregly import ClefError, read
from gregly.lily import LilyPondWriter, sanitize_syllable
from gregly.model import NO_CLEF, Barline, Note, Spacer, Syllable


FILE = """office-part:Tractus;
mode:8;
%%
(c3) Pó(eh/hi)pu(h)lus(h) Si(hi)on,(hgh.) *(;) ec(hihi)ce(e.) (::)"""

NOTES = (
    "\n"
    "g(c' c' d')\n"
    "c'\n"
    "c'\n"
    "c'(d')\n"
    "c'(b c')\n"
    "\\divisioMaior\n"
    "c'(d' c' d')\n"
    "g\n"
    "\\finalis\n"
)

LYRICS = ' Pó -- pu -- lus Si -- on, \\set stanza = " *"  ec -- ce  '


def test_sanitize_syllable():
    assert sanitize_syllable("Po") == "Po"
    assert sanitize_syllable(" Po") == " Po"
    assert sanitize_syllable("Po  ") == "Po "
    assert sanitize_syllable("{Ky}ri{e}") == "Kyrie"
    assert sanitize_syllable(" 3. Po") == ' "3._Po"'
    assert sanitize_syllable("a b c") == "a_b_c"
    assert sanitize_syllable("") == ""
    # whitespace-only text keeps a space on both sides
    assert sanitize_syllable(" ") == "  "
    for text in ("Po", " 3. Po ", "{a} b", "  x  y ", "12"):
        once = sanitize_syllable(text)
        assert sanitize_syllable(once) == once


def test_notes():
    w = LilyPondWriter()
    assert w.notes(()) == ""
    assert w.notes((Note("", "h", "", "c3"),)) == "c'"
    assert w.notes((Barline(";"),)) == "\\divisioMaior"
    assert w.notes((Barline("::"),)) == "\\finalis"
    assert w.notes((Barline(","),)) == "\\divisioMinima"
    assert w.notes(read.syllable("Po(eh/hi)", "c3").music) == "g(c' c' d')"
    assert w.notes(read.syllable("Po(cde)", "c3").music) == "e(f g)"
    # spacers produce no text and no extra space
    assert w.notes(read.syllable("Po(eh//i!)", "c3").music) == "g(c' d')"
    assert w.element(Spacer(" ")) == ""
    # a spacer as the second element still opens the slur
    assert w.notes(read.syllable("Po(e/h)", "c3").music) == "g( c')"
    assert w.notes((Spacer("/"),)) == ""


def test_notes_without_clef():
    w = LilyPondWriter()
    with pytest.raises(ClefError):
        w.notes((Note("", "h", "", NO_CLEF),))
    with pytest.raises(ClefError):
        read.document("%%\na(h) (c3) b(h)").as_lilypond()


def test_syllable_text():
    w = LilyPondWriter()
    s = read.syllable("*(;)", "c1")
    assert w.notes(s.music) == "\\divisioMaior"
    assert w.syllable_text(s) == ' \\set stanza = "*" '
    s = read.syllable(" 3. Po(cde)", "c3")
    assert w.notes(s.music) == "e(f g)"
    assert w.syllable_text(s) == ' "3._Po"'
    # a syllable without notes and without text gets no stanza
    assert w.syllable_text(Syllable(" ", (Barline("::"),))) == "  "
    assert w.syllable_text(Syllable("", ())) == ""


def test_lyrics():
    w = LilyPondWriter()
    assert w.lyrics(read.syllables("Po(h)pu(h)lus(h)", "c3")) == "Po -- pu -- lus"
    assert w.lyrics(read.syllables("Po(h) pu(h)", "c3")) == "Po pu"
    assert w.lyrics(()) == ""


def test_file():
    d = read.document(FILE)
    w = LilyPondWriter()
    assert w.music(d.syllables) == NOTES
    assert w.lyrics(d.syllables) == LYRICS

    ly = d.as_lilypond()
    assert ly == w.document(d)
    assert ly.startswith('\\include "gregorian.ly"\n')
    assert ly.endswith("}")
    assert NOTES in ly
    assert LYRICS in ly
    assert "\\lyricsto melody \\verba" in ly
    assert ly == w.head + NOTES + w.middle + LYRICS + w.tail


def test_custom_writer():
    class Writer(LilyPondWriter):
        bar_commands = dict(LilyPondWriter.bar_commands, **{",": "\\bar \"'\""})

    s = read.syllable("a(h,)", "c3")
    assert Writer().notes(s.music) == "c'(\\bar \"'\")"
    assert LilyPondWriter().notes(s.music) == "c'(\\divisioMinima)"
