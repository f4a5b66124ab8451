# -*- coding: utf-8 -*-
#
# This file is part of `ngconf`, a library for the Nginx configuration format
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
The ngconf module.

Read an Nginx configuration with :func:`parse` or :func:`load`, edit the
:class:`~.node.Node` tree, and write it back using :func:`str` or
:func:`save`.

"""

import logging
import os.path

from .errors import ConfigError
from .node import Node
from .pkginfo import version, version_string
from .read import document as parse


__all__ = ('Node', 'ConfigError', 'parse', 'load', 'save', 'version', 'version_string')


logger = logging.getLogger(__name__)


def load(filename, encoding="utf-8"):
    """Read the file ``filename`` and return the root :class:`~.node.Node`.

    Raises :class:`OSError` if the file can't be read and a
    :class:`~.errors.ConfigError` if it can't be parsed.

    """
    filename = os.path.abspath(filename)
    with open(filename, encoding=encoding) as f:
        text = f.read()
    logger.debug("Read %d characters from %s", len(text), filename)
    try:
        return parse(text)
    except ConfigError as err:
        logger.warning("Could not parse file: %s due to %s", filename, err)
        raise


def save(node, filename, encoding="utf-8"):
    """Write the configuration text of ``node`` to the file ``filename``.

    A newline is appended to the text. Returns the number of characters
    written. Raises :class:`OSError` if the file can't be written.

    """
    filename = os.path.abspath(filename)
    with open(filename, "w", encoding=encoding) as f:
        count = node.write_to(f) + f.write('\n')
    logger.debug("Wrote %d characters to %s", count, filename)
    return count
