"""Logger lookup for mathspan modules.

Every module logs under the ``mathspan`` namespace, so one handler on the
package logger sees render failures (ERROR, from mathspan.emitter),
conversion details in permissive mode (DEBUG, from mathspan.engine) and
plugin registration (DEBUG, from mathspan.plugin).

Example:
    >>> import logging
    >>> logging.getLogger("mathspan").setLevel(logging.DEBUG)
    >>> from mathspan import Markdown
    >>> html = Markdown()("\\(\\frac{1}{\\)")  # conversion failure is logged
"""

from __future__ import annotations

import logging

#: Root of the package's logger hierarchy.
ROOT_LOGGER = "mathspan"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, under the ``mathspan`` namespace.

    Names already inside the namespace (``__name__`` of a package module)
    are used as is; anything else is prefixed, so engines and plugins built
    outside the package still log alongside it.

    Example:
        >>> get_logger("mathspan.emitter").name
        'mathspan.emitter'
        >>> get_logger("my_engine").name
        'mathspan.my_engine'
    """
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
