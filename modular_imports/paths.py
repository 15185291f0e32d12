"""Resolution of relative import sources before configuration lookup.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

import os
import re
from collections.abc import Container
from pathlib import Path

RELATIVE_SOURCE_RE = re.compile(r"^\.{0,2}/")


def is_path_source(source: str) -> bool:
    """True for ``./x``, ``../x`` and ``/x`` style sources."""
    return bool(RELATIVE_SOURCE_RE.match(source))


def resolve_module_source(source: str, filename: str | Path | None, configured: Container[str]) -> str:
    """Return the key under which ``source`` is looked up in the configuration.

    Sources that are configured verbatim, and bare package names, are
    returned unchanged. Path-like sources are made absolute: ``./`` and
    ``../`` sources relative to the directory of ``filename`` (the current
    working directory when no filename is known), ``/`` sources on their
    own.
    """
    if source in configured or not is_path_source(source):
        return source

    if source.startswith("/"):
        base = ""
    elif filename is not None:
        base = os.path.dirname(os.fspath(filename))
    else:
        base = os.getcwd()
    return os.path.abspath(os.path.join(base, source))
