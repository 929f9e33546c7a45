"""Logger lookup for mdhtml modules.

Every module logs through ``get_logger(__name__)`` so records land under the
``mdhtml`` hierarchy. No handlers are installed here; the ``mdhtml`` CLI
calls ``logging.basicConfig`` and ``-v`` turns on the converter's INFO
progress lines.

Example:
    >>> import logging
    >>> logging.getLogger("mdhtml").setLevel(logging.DEBUG)
    >>> get_logger("renderers.html").getEffectiveLevel() == logging.DEBUG
    True
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the ``mdhtml.``-prefixed logger for ``name``.

    Names already inside the package (``__name__`` of an mdhtml module) are
    used as-is.

    Example:
        >>> get_logger("mdhtml.parser").name
        'mdhtml.parser'
        >>> get_logger("cli").name
        'mdhtml.cli'
    """
    if not (name == "mdhtml" or name.startswith("mdhtml.")):
        name = f"mdhtml.{name}"
    return logging.getLogger(name)
