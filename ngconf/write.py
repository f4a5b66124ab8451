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
Functionality to write a node tree back to configuration text, with a
conventional layout.

Blank lines from the original text are not preserved; instead the
:class:`Writer` inserts blank lines between logical groups:

* never before the first child of a block (or of the document);
* before a node following a block;
* before a comment that follows a statement, so that comment lines stay
  together with the statements they describe;
* before the first block in the output, unless a comment precedes it.

"""

INDENT_WIDTH = 4


class _DumpContext:
    """Keeps the state of one :meth:`Writer.write` call.

    It describes the previously written sibling and the position in the
    block that is being written.

    """
    __slots__ = ('has_comment', 'first_block', 'block_start', 'last_block_end')

    def __init__(self):
        self.has_comment = False        # the previous node was a comment
        self.first_block = True         # no block has been written yet
        self.block_start = True         # we are at the first child of a block
        self.last_block_end = False     # the previous node was a block


class Writer:
    """Writes the text of a node and its descendants.

    The ``indent_width`` is the number of spaces to indent per level; it can
    also be set as attribute afterwards.

    Writing recurses once per nesting level of blocks, using two stack frames
    per level, so trees nested deeper than about 400 levels exceed Python's
    default recursion limit and raise :class:`RecursionError`.

    Call :meth:`write` to get the text output of a node.

    """
    def __init__(self, indent_width=INDENT_WIDTH):

        #: the number of spaces per indent level
        self.indent_width = indent_width

    def write(self, node, indent=0):
        """Return the text of the node at indent level ``indent``.

        Called by :meth:`Node.dump() <ngconf.node.Node.dump>`.

        """
        context = _DumpContext()
        if node.is_root():
            return self.write_children(node, indent, context)
        return self.write_node(node, indent, context)

    def write_children(self, node, indent, context):
        """Return the text of the children of node, joined by newlines."""
        lines = []
        for index, child in enumerate(node):
            context.block_start = index == 0
            if context.block_start:
                context.has_comment = context.last_block_end = False
            lines.append(self.write_node(child, indent, context))
        return '\n'.join(lines)

    def write_node(self, node, indent, context):
        """Return the text of one node, preceded by a newline if a blank line
        is needed.

        The context is updated to describe this node for the next sibling.

        """
        is_comment = node.is_comment()
        is_block = node.is_block()

        blank = not context.block_start and (
            context.last_block_end
            or (is_comment and not context.has_comment)
            or (is_block and context.first_block and not context.has_comment))
        if is_block:
            context.first_block = False

        prefix = '\n' if blank else ''
        prefix += ' ' * (indent * self.indent_width)
        head = ' '.join([node.directive] + node.args)

        if is_block:
            children = self.write_children(node, indent + 1, context)
            text = '{}{} {{\n{}\n{}}}'.format(prefix, head, children,
                ' ' * (indent * self.indent_width))
        elif is_comment:
            text = prefix + head
        else:
            text = prefix + head + ';'

        context.has_comment = is_comment
        context.last_block_end = is_block
        return text


#: the Writer used by :meth:`Node.dump() <ngconf.node.Node.dump>`
writer = Writer()
