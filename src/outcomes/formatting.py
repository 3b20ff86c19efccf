"""Message formatting that never raises.

This is the only place message templates are interpreted. Interpolation uses
``%``-style placeholders; a single mapping argument fills named placeholders
(``"%(name)s"``), the same convention ``logging`` applies to record arguments.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from outcomes.messages import MESSAGE_FORMAT_ERROR, NO_MESSAGE_AVAILABLE

__all__ = ["format_message"]


def format_message(template: str | None, *args: Any) -> str:
    """Interpolate *args* into *template*.

    - ``None`` template: returns ``"No message available"``.
    - No arguments: returns the template untouched, so a literal ``%`` in a
      free-form message is never interpreted.
    - Malformed template or mismatched arguments: returns
      ``"Unable to format message, reason: <error>"``.
    """
    if template is None:
        return NO_MESSAGE_AVAILABLE
    if not args:
        return template

    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return str(template) % values
    except (TypeError, ValueError, LookupError, ArithmeticError) as exc:
        return MESSAGE_FORMAT_ERROR + str(exc)
