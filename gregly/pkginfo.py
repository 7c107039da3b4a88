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
Meta-information about the gregly package.

This information is used by the install script, and also for the
command ``gregly --version``.

"""

#: name of the package
name = "gregly"

#: the current version
version = (0, 1, 0)
version_suffix = ""
#: the current version as a string
version_string = "{}.{}.{}".format(*version) + version_suffix

#: short description
description = "Read gabc chant notation and write it as JSON or LilyPond"

#: long description
long_description = \
    "The gregly package reads gabc files (the notation used by Gregorio) " \
    "into an immutable model, and writes that model as JSON or as a " \
    "LilyPond source file with a modern transcription of the chant."

#: maintainer name
maintainer = "Wilbert Berendsen"

#: maintainer email
maintainer_email = "info@wilbertberendsen.nl"

#: homepage
url = "https://github.com/frescobaldi/gregly"

#: license
license = "GPL v3"
