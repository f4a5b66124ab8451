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
The exceptions raised by ngconf.

All exceptions inherit from :class:`ConfigError`, which is a
:class:`ValueError`.

"""


class ConfigError(ValueError):
    """Base class for all ngconf errors."""


class RootDirectiveError(ConfigError):
    """Raised when a root node is given a directive."""
    def __init__(self, directive):
        super().__init__("root node can't have a directive: {}".format(repr(directive)))
        self.directive = directive


class NonRootMissingDirectiveError(ConfigError):
    """Raised when a non-root node (e.g. an anonymous block) has no directive."""
    def __init__(self, pos=None):
        msg = "non-root node has no directive"
        if pos is not None:
            msg += " (at position {})".format(pos)
        super().__init__(msg)
        self.pos = pos


class ParseError(ConfigError):
    """Base class for structural errors found while parsing.

    The ``pos`` attribute holds the offset in the text where the error was
    found, or None if unknown.

    """
    message = "parse error"

    def __init__(self, pos=None):
        msg = self.message
        if pos is not None:
            msg += " at position {}".format(pos)
        super().__init__(msg)
        self.pos = pos


class UnbalancedBlockError(ParseError):
    """Raised when a ``}`` is found that does not close an open block."""
    message = "unmatched '}'"


class UnterminatedBlockError(ParseError):
    """Raised when a block is still open at the end of the text."""
    message = "block opened with '{' is not closed"
