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
Test writing node trees back to configuration text.
"""

### find ngconf
import sys
sys.path.insert(0, '.')

import ngconf
from ngconf.node import Node
from ngconf.write import Writer


CONF = """
  worker_processes auto;
  pid /run/nginx.pid;
  events {
    worker_connections 1024;
  }
  stream {
    upstream backend {
      hash $remote_addr consistent;
    }
    server {
      listen 127.0.0.1:8443;
      proxy_connect_timeout 1s;
      proxy_pass backend;
    }
  }


  http {
      # Basic Settings
      sendfile on;
      tcp_nopush on;
      tcp_nodelay on;
      # SSL Settings
      ssl_protocols TLSv1 TLSv1.1 TLSv1.2; # Dropping SSLv3, ref: POODLE
      ssl_prefer_server_ciphers on;
      # Logging Settings
      access_log /var/log/nginx/access.log;
      error_log /var/log/nginx/error.log;
  }"""


EXPECTED = """\
worker_processes auto;
pid /run/nginx.pid;

stream {
    upstream backend {
        hash $remote_addr consistent;
        server backend1:443 max_fails=3 fail_timeout=30s;
    }

    server {
        listen 127.0.0.1:8443;
        proxy_connect_timeout 1s;
        proxy_pass backend;
    }
}

http {
    # Basic Settings
    sendfile on;
    tcp_nopush on;
    tcp_nodelay on;

    # SSL Settings
    ssl_protocols TLSv1 TLSv1.1 TLSv1.2;

    # Dropping SSLv3, ref: POODLE
    ssl_prefer_server_ciphers on;

    # Logging Settings
    access_log /var/log/nginx/access.log;
    error_log /var/log/nginx/error.log;
}"""


def test_edit_and_write():
    root = ngconf.parse(CONF)
    root.delete("events")
    upstream = root.get("stream")[0].get("upstream")[0]
    upstream.add("server", "backend1:443", "max_fails=3", "fail_timeout=30s")
    assert root.dump() == EXPECTED
    assert str(root) == EXPECTED


def test_scenario():
    root = ngconf.parse("events {\n worker_connections 1024;\n}\nhttp {\n sendfile on;\n}")
    root.delete("events")
    assert root.dump(0) == "http {\n    sendfile on;\n}"


def test_round_trip():
    text = ngconf.parse(CONF).dump()
    assert ngconf.parse(text).dump() == text
    assert ngconf.parse(EXPECTED).dump() == EXPECTED
    assert ngconf.parse(EXPECTED).equals(ngconf.parse(
        "worker_processes auto; pid /run/nginx.pid; stream { upstream backend { "
        "hash $remote_addr consistent; server backend1:443 max_fails=3 fail_timeout=30s; } "
        "server { listen 127.0.0.1:8443; proxy_connect_timeout 1s; proxy_pass backend; } } "
        "http {\n# Basic Settings\nsendfile on; tcp_nopush on; tcp_nodelay on;\n# SSL Settings\n"
        "ssl_protocols TLSv1 TLSv1.1 TLSv1.2;\n# Dropping SSLv3, ref: POODLE\n"
        "ssl_prefer_server_ciphers on;\n# Logging Settings\naccess_log /var/log/nginx/access.log; "
        "error_log /var/log/nginx/error.log; }"))


def test_statements():
    assert ngconf.parse("listen 80;").dump() == "listen 80;"
    assert ngconf.parse("ip_hash;").dump() == "ip_hash;"
    assert ngconf.parse("a;\n\n\nb;").dump() == "a;\nb;"
    assert ngconf.parse("").dump() == ""


def test_blocks():
    # blank line after a block, also before statements
    assert ngconf.parse("events { use epoll; } worker_processes 2; pid x;").dump() == (
        "events {\n"
        "    use epoll;\n"
        "}\n"
        "\n"
        "worker_processes 2;\n"
        "pid x;")

    # blank line before the first block if it is not the first node
    assert ngconf.parse("user www; events { use epoll; } http { sendfile on; }").dump() == (
        "user www;\n"
        "\n"
        "events {\n"
        "    use epoll;\n"
        "}\n"
        "\n"
        "http {\n"
        "    sendfile on;\n"
        "}")

    # ... but not before later blocks following statements
    assert ngconf.parse("http { a 1; } b 2; server { c 3; }").dump() == (
        "http {\n"
        "    a 1;\n"
        "}\n"
        "\n"
        "b 2;\n"
        "server {\n"
        "    c 3;\n"
        "}")

    # nested blocks, no arguments
    assert ngconf.parse("http { server { location / { root html; } } }").dump() == (
        "http {\n"
        "    server {\n"
        "        location / {\n"
        "            root html;\n"
        "        }\n"
        "    }\n"
        "}")


def test_comments():
    # a comment is kept together with the following statement,
    # but separated from the preceding statement
    text = "server {\n    listen 80;\n    # the name\n    server_name example.com;\n}"
    assert ngconf.parse(text).dump() == (
        "server {\n"
        "    listen 80;\n"
        "\n"
        "    # the name\n"
        "    server_name example.com;\n"
        "}")

    # consecutive comments are not separated; no blank line at block start
    text = "server {\n# one\n# two\nlisten 80;\n}"
    assert ngconf.parse(text).dump() == (
        "server {\n"
        "    # one\n"
        "    # two\n"
        "    listen 80;\n"
        "}")

    # comments before blocks stay with the block
    text = "# events\nevents {\n# inside\n}\n# http\nhttp { sendfile on; }"
    assert ngconf.parse(text).dump() == (
        "# events\n"
        "events {\n"
        "    # inside\n"
        "}\n"
        "\n"
        "# http\n"
        "http {\n"
        "    sendfile on;\n"
        "}")

    # spacing inside comments is kept, except tabs and trailing whitespace
    assert ngconf.parse("#  a  b\t c   \n").dump() == "#  a  b  c"


def test_subtree():
    root = ngconf.parse("http {\n server {\n listen 80;\n }\n}")
    server = root[0][0]
    assert server.dump() == "server {\n    listen 80;\n}"
    assert server.dump(1) == "    server {\n        listen 80;\n    }"
    assert server[0].dump(2) == "        listen 80;"


def test_writer():
    root = Node(root=True)
    http = root.add("http")
    http.add("sendfile", "on")
    assert Writer(2).write(root) == "http {\n  sendfile on;\n}"
    w = Writer()
    w.indent_width = 1
    assert w.write(root, 1) == " http {\n  sendfile on;\n }"
    assert root.dump() == "http {\n    sendfile on;\n}"


def test_built_tree():
    root = Node(root=True)
    root.add("#", "generated")
    root.add("worker_processes", "auto")
    events = root.add("events")
    events.add("worker_connections", "1024")
    assert str(root) == (
        "# generated\n"
        "worker_processes auto;\n"
        "\n"
        "events {\n"
        "    worker_connections 1024;\n"
        "}")


def test_deep_nesting():
    depth = 200
    text = "a {" * depth + "b;" + "}" * depth
    root = ngconf.parse(text)
    node = root
    for _ in range(depth):
        node = node[0]
    assert node.directive == "b"
    output = root.dump()
    assert output.count("{") == depth
    assert output.splitlines()[depth] == " " * (4 * depth) + "b;"
    assert ngconf.parse(output).equals(root)
