# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""XML namespaces used by the server's notification feed documents."""

from __future__ import annotations

SERVER = "http://ns.taverna.org.uk/2010/xml/server/"
SERVER_REST = SERVER + "rest/"
SERVER_SOAP = SERVER + "soap/"
FEED = SERVER + "feed/"
ADMIN = SERVER + "admin/"
XLINK = "http://www.w3.org/1999/xlink"

# Prefix declarations for feed documents; elements and attributes are qualified
FEED_NAMESPACE_PREFIXES: dict[str, str] = {
    "xlink": XLINK,
    "ts": SERVER,
    "ts-rest": SERVER_REST,
    "ts-soap": SERVER_SOAP,
    "feed": FEED,
    "admin": ADMIN,
}


def qualified(prefix: str, local: str) -> str:
    """Return ``local`` in Clark notation under the namespace bound to ``prefix``.

    Raises:
        KeyError: If the prefix is not declared for feed documents
    """
    return f"{{{FEED_NAMESPACE_PREFIXES[prefix]}}}{local}"
