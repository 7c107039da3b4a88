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
The ``gregly`` command.

Reads one gabc file and writes it to standard output as LilyPond source (the
default), as JSON, or as the raw parse tree::

    gregly populus_sion.gabc > populus_sion.ly
    gregly --format json populus_sion.gabc

"""

import logging

import click

from . import read
from .exceptions import ClefError, GabcSyntaxError, line_column
from .pkginfo import version_string


logger = logging.getLogger(__name__)


FORMATS = ("lilypond", "json", "tree")


def format_syntax_error(filename, text, error):
    """Return a ``file:line:column: message`` string for a GabcSyntaxError."""
    if error.pos is None:
        return "{}: {}".format(filename, error.message)
    line, column = line_column(text, error.pos)
    return "{}:{}:{}: {}".format(filename, line, column, error.message)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=version_string, prog_name="gregly")
@click.argument("filename", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMATS),
    default="lilypond",
    show_default=True,
    help="What to write to standard output.",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Encoding of the gabc file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log what is being done.")
def main(filename, output_format, encoding, verbose):
    """Convert the gabc file FILENAME to LilyPond or JSON."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )
    try:
        with open(filename, encoding=encoding) as f:
            text = f.read()
    except (UnicodeDecodeError, LookupError) as e:
        raise click.ClickException("{}: can't read with encoding {}: {}".format(filename, encoding, e)) from e
    logger.debug("read %d characters from %s", len(text), filename)

    try:
        if output_format == "tree":
            tree = read.tree(text)
            read.check_tree(tree)
            output = read.dump_tree(tree).rstrip("\n")
        elif output_format == "json":
            output = read.document(text).as_json()
        else:
            output = read.document(text).as_lilypond()
    except GabcSyntaxError as e:
        raise click.ClickException(format_syntax_error(filename, text, e)) from e
    except ClefError as e:
        raise click.ClickException("{}: {}".format(filename, e)) from e
    click.echo(output)


if __name__ == "__main__":
    main()
