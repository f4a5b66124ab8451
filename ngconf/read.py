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


r"""
Simple helper functions to build :class:`~.node.Node` trees from text.

Example::

    >>> from ngconf import read
    >>> root = read.document("events {\n worker_connections 1024;\n}")
    >>> root.pprint()
    <Node (root) (1 child)>
     ╰╴<Node 'events' (1 child)>
        ╰╴<Node 'worker_connections' ['1024']>

"""


from parce.transform import Transformer

from .lang import nginx
from .node import Node


_transformer = Transformer()


def document(text):
    """Return the root :class:`~.node.Node` built from the text.

    Raises a :class:`~.errors.ConfigError` subclass if the text can't be
    read.

    """
    root = _transformer.transform_text(nginx.Nginx.root, text)
    if root is None:
        # nothing to transform in an empty text
        root = Node(root=True)
    return root


def node(text):
    """Return the first node read from the text, or None if there is none.

    Example::

        >>> read.node("listen 80 default_server;")
        <Node 'listen' ['80', 'default_server']>

    """
    for n in document(text):
        return n
