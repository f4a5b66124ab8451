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
This module defines the :class:`Node` class, which builds a configuration
tree based on Python lists.

A Node is either the document root, or one directive. The children of a
node are the items of the list. A node with children is a block, a node
without children is a simple statement or a comment line.

Children do not know their parent; a tree is walked from the root down. Use
:meth:`~Node.get`, :meth:`~Node.add` and :meth:`~Node.delete` to query and
edit the direct children of a node, and :meth:`~Node.dump` or :func:`str` to
get the configuration text back.

"""

import reprlib

from . import write
from .errors import NonRootMissingDirectiveError, RootDirectiveError


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"

COMMENT_START = "#"


class Node(list):
    """Node is a directive, comment line or the document root.

    The ``directive`` is the keyword of the directive, or, for a comment, the
    first word of the comment, starting with ``#``. The ``args`` are the
    words following the directive. If ``root`` is True, the node is the
    document root, which has no directive and no arguments.

    Child nodes can be given in ``children``. Iterating over a node yields
    the child nodes, just like the underlying Python list. Unlike Python's
    list, a node always evaluates to True, even if there are no children.

    Raises :class:`~.errors.RootDirectiveError` if a root node gets a
    directive, and :class:`~.errors.NonRootMissingDirectiveError` if another
    node gets none.

    """

    __slots__ = ('directive', 'args', 'root')

    def __init__(self, directive="", args=(), children=(), root=False):
        if root and directive:
            raise RootDirectiveError(directive)
        if not root and not directive:
            raise NonRootMissingDirectiveError()
        super().__init__(children)
        self.directive = directive
        self.args = list(args)
        self.root = root

    def __repr__(self):
        def result():
            yield type(self).__name__
            if self.root:
                yield "(root)"
            else:
                yield repr(self.directive)
            if self.args:
                yield reprlib.repr(self.args)
            if len(self):
                yield "({} child{})".format(len(self), '' if len(self) == 1 else 'ren')
        return "<{}>".format(" ".join(result()))

    def __str__(self):
        """Return the configuration text, same as ``dump(0)``."""
        return self.dump(0)

    def __bool__(self):
        """Always True."""
        return True

    __hash__ = object.__hash__

    def __eq__(self, other):
        """Identity compare to make Node.index and Node.remove robust."""
        return self is other

    def __ne__(self, other):
        """Identity compare to make Node.index and Node.remove robust."""
        return self is not other

    def is_root(self):
        """Return True if this node is the document root."""
        return self.root

    def is_comment(self):
        """Return True if this node is a comment line."""
        return self.directive.startswith(COMMENT_START)

    def is_block(self):
        """Return True if this node has child nodes."""
        return len(self) > 0

    def copy(self, with_children=True):
        """Return a copy of this Node.

        If ``with_children`` is True (the default), child nodes are also
        copied.

        """
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(self.directive, self.args, children, self.root)

    def equals(self, other):
        """Return True if we and other are equivalent.

        This is the case when we and the other have the same class, the same
        amount of children, :meth:`body_equals` returns True, and finally for
        all the children this method returns True.

        """
        return type(self) is type(other) and len(self) == len(other) and \
            self.body_equals(other) and \
            all(a.equals(b) for a, b in zip(self, other))

    def body_equals(self, other):
        """Return True if directive, arguments and root flag are the same."""
        return self.root == other.root and self.directive == other.directive \
            and self.args == other.args

    def matches(self, directive, *args):
        """Return True if our directive is ``directive`` and our arguments
        start with ``args``.

        """
        return self.directive == directive and len(self.args) >= len(args) \
            and all(a == b for a, b in zip(args, self.args))

    def get(self, directive, *args):
        """Return the list of child nodes with the directive.

        If arguments are given, only the child nodes whose arguments start
        with the given arguments are returned. For example::

            >>> upstream = ngconf.parse("upstream backend { server a:443 max_fails=3; server b:443; }")[0]
            >>> upstream.get("server", "a:443")
            [<Node 'server' ['a:443', 'max_fails=3']>]

        An empty list is returned if there are no matching nodes.

        """
        return [node for node in self if node.matches(directive, *args)]

    def add(self, directive, *args):
        """Add a child node with the directive and arguments and return it.

        If a child node matching the directive and arguments already exists
        (see :meth:`get`), that node is returned and nothing is added.

        """
        for node in self.get(directive, *args):
            return node
        node = type(self)(directive, args)
        self.append(node)
        return node

    def delete(self, directive, *args):
        """Delete the child nodes matching the directive and arguments.

        If no arguments are given, all child nodes with the directive are
        deleted. Deleting a node deletes its children as well. It is not an
        error if no node matches.

        """
        self[:] = [node for node in self if not node.matches(directive, *args)]

    def descendants(self, reverse=False):
        """Iterate over all the descendants of this node.

        If ``reverse`` is set to True, yields all descendants in backward
        direction.

        When you :meth:`~generator.send` False to this generator, child nodes
        of the just yielded node will not be yielded.

        """
        iterate = reversed if reverse else iter
        stack = []
        gen = iterate(self)
        while True:
            for n in gen:
                if (yield n) is not False and len(n):
                    stack.append(gen)
                    gen = iterate(n)
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def find_all(self, directive, *args):
        """Iterate over all descendants matching the directive and arguments,
        in document order.

        This is like :meth:`get`, but searches the whole subtree.

        """
        for node in self.descendants():
            if node.matches(directive, *args):
                yield node

    def dump(self, indent=0):
        """Return the configuration text of this node and its children.

        The ``indent`` is the indentation level to start with. See
        :class:`~.write.Writer` for the layout rules.

        """
        return write.writer.write(self, indent)

    def write_to(self, file):
        """Write the configuration text to the text stream ``file``.

        Returns the value returned by the stream's ``write()`` method, which
        is the number of characters written.

        """
        return file.write(str(self))

    def pprint(self, file=None, style=None):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        def dump(node, prefix, last):
            print(prefix + (d[2 + last] if last is not None else '') + repr(node), file=file)
            if last is not None:
                prefix += d[last]
            for n in node[:-1]:
                dump(n, prefix, 0)
            if len(node):
                dump(node[-1], prefix, 1)
        dump(self, '', None)
