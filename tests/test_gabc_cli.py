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
Test the gregly command.
"""

import json

from click.testing import CliRunner

### find gregly
import sys
sys.path.insert(0, '.')

from gregly.cli import main


FILE = """office-part:Tractus;
mode:8;
%%
(c3) Pó(eh/hi)pu(h)lus(h) Si(hi)on,(hgh.) *(;) ec(hihi)ce(e.) (::)"""


def run(tmp_path, text, *args):
    filename = tmp_path / "test.gabc"
    filename.write_text(text, encoding="utf-8")
    return CliRunner().invoke(main, [*args, str(filename)])


def test_lilypond(tmp_path):
    result = run(tmp_path, FILE)
    assert result.exit_code == 0
    assert result.output.startswith('\\include "gregorian.ly"')
    assert "g(c' c' d')" in result.output
    assert "Pó -- pu -- lus" in result.output


def test_json(tmp_path):
    result = run(tmp_path, FILE, "--format", "json")
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["attributes"][0] == ["office-part", "Tractus"]
    assert len(data["syllables"]) == 10


def test_tree(tmp_path):
    result = run(tmp_path, FILE, "-f", "tree")
    assert result.exit_code == 0
    assert "office-part" in result.output


def test_syntax_error(tmp_path):
    result = run(tmp_path, "name:x;\n%%\n(c3 n)")
    assert result.exit_code == 1
    assert ":3:5: unexpected 'n'" in result.output


def test_tree_syntax_error(tmp_path):
    result = run(tmp_path, "this is not a gabc file", "--format", "tree")
    assert result.exit_code == 1
    assert ":1:1: unexpected" in result.output


def test_encoding_error(tmp_path):
    filename = tmp_path / "latin1.gabc"
    filename.write_bytes("%%\n(c3) P\xf3(h)".encode("latin-1"))
    result = CliRunner().invoke(main, [str(filename)])
    assert result.exit_code == 1
    assert "encoding utf-8" in result.output
    # with the right encoding it can be read
    result = CliRunner().invoke(main, ["--encoding", "latin-1", "--format", "json", str(filename)])
    assert result.exit_code == 0
    assert "P\xf3" in result.output


def test_clef_error(tmp_path):
    result = run(tmp_path, "%%\na(h) (c3) b(h)")
    assert result.exit_code == 1
    assert "invalid clef" in result.output
    # JSON output does not need clefs
    assert run(tmp_path, "%%\na(h)", "--format", "json").exit_code == 0


def test_missing_file(tmp_path):
    result = CliRunner().invoke(main, [str(tmp_path / "missing.gabc")])
    assert result.exit_code == 2


def test_version():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
