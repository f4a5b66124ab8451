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
Nginx configuration language and transformation definition.

The :class:`Nginx` language splits the text in words, comments and the
``{``, ``}`` and ``;`` delimiters; every block is lexed in its own
``block`` context. Only spaces, tabs, carriage returns and newlines separate
words. A ``#`` starts a comment only at the beginning of a word; inside a
word it is literal, so ``/page#top`` is one word.

The :class:`NginxTransform` builds a tree of :class:`~ngconf.node.Node`
objects from that.

"""

from parce import Language, lexicon
from parce.transform import Transform
import parce.action as a

from ..errors import (
    NonRootMissingDirectiveError,
    UnbalancedBlockError,
    UnterminatedBlockError,
)
from ..node import Node


class Nginx(Language):
    """Nginx configuration language definition."""
    @lexicon
    def root(cls):
        yield from cls.common()
        yield r"\}", a.Delimiter.Bracket.Invalid

    @lexicon
    def block(cls):
        yield from cls.common()
        yield r"\}", a.Delimiter.Bracket.End, -1

    @classmethod
    def common(cls):
        # a comment only starts at the beginning of a word
        yield r"#[^\r\n]*", a.Comment
        yield r"\{", a.Delimiter.Bracket.Start, cls.block
        yield r";", a.Delimiter.Separator
        yield r"[^ \t\r\n#{};][^ \t\r\n{};]*", a.Text


class NginxTransform(Transform):
    """Transform Nginx configuration text to a :class:`~ngconf.node.Node` tree."""
    ## helper methods
    def comment_node(self, token):
        """Create a comment Node from a comment token.

        The first word (starting with ``#``) is the directive, the other
        words are the arguments. Runs of spaces result in empty arguments,
        so that the comment is written back unchanged.

        """
        words = token.text.rstrip(" \t").replace('\t', ' ').split(' ')
        return Node(words[0], words[1:])

    def statements(self, items):
        """Yield Nodes from the items of a root or block context."""
        words = []
        start = None
        for i in items:
            if i.is_token:
                if i.action is a.Comment:
                    yield self.comment_node(i)
                elif i.action is a.Text:
                    words.append(i.text)
                elif i.action is a.Delimiter.Separator:
                    if words:
                        yield Node(words[0], words[1:])
                        words = []
                elif i.action is a.Delimiter.Bracket.Start:
                    if not words:
                        raise NonRootMissingDirectiveError(i.pos)
                    start = i.pos
                elif i.action is a.Delimiter.Bracket.Invalid:
                    raise UnbalancedBlockError(i.pos)
            elif i.name == "block":
                children, closed = i.obj
                if not closed:
                    raise UnterminatedBlockError(start)
                yield Node(words[0], words[1:], children)
                words = []
                start = None
        if start is not None:
            # the text ended right after a '{'
            raise UnterminatedBlockError(start)
        # a statement not terminated by a ';'
        if words:
            yield Node(words[0], words[1:])

    ### transforming methods
    def root(self, items):
        """Build the root Node."""
        return Node(children=self.statements(items), root=True)

    def block(self, items):
        """Return a tuple(children, closed) for a ``{`` ... ``}`` block.

        ``closed`` is False if the text ended before the block was closed.

        """
        closed = bool(items) and items[-1].is_token and items[-1].text == '}'
        if closed:
            items.pop()
        return list(self.statements(items)), closed
