"""
Native invocation module

Default boundary-crossing call used to read property values at generation time.
"""

from typing import Any, Callable, Optional, Sequence

# call(receiver, accessor, arguments) -> value
Invoker = Callable[[Any, str, Optional[Sequence[Any]]], Any]


def call_native(receiver, accessor: str, arguments: Optional[Sequence[Any]] = None):
    """Invoke an accessor on a receiver

    Returns None for a None receiver (static context). A callable attribute
    is called with the arguments, anything else is returned as read.
    """
    if receiver is None:
        return None
    target = getattr(receiver, accessor)
    if callable(target):
        return target(*(arguments or ()))
    return target
