"""
Reflection module

Builds a ClassDescriptor from a Python class that exposes members by name:

    class Echo:
        jsprop_prefix = '>'                       # writable property

        @property
        def jsprop_count(self): ...               # read-only property

        def jsfunc_echo(self, message): ...       # method
        def jsfunc_fetch(self, url, _Promise): ...  # promise-mode method
        def init_from_javascript(self, name): ... # constructor
"""

import inspect
from typing import Optional

from .ir import ClassDescriptor, MethodInfo, PropertyInfo, Selector

JSFUNC_PREFIX = 'jsfunc_'
JSPROP_PREFIX = 'jsprop_'
CONSTRUCTOR_METHOD = 'init_from_javascript'


def reflect_class(cls: type) -> ClassDescriptor:
    """Reflect the exposed surface of a class

    Members are listed in definition order, base classes first.
    """
    attrs: dict[str, object] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for attr_name, value in vars(klass).items():
            # An override keeps the position of the member it overrides
            attrs[attr_name] = value

    members = []
    constructor: Optional[Selector] = None
    for attr_name, value in attrs.items():
        if attr_name.startswith(JSFUNC_PREFIX):
            name = attr_name[len(JSFUNC_PREFIX):]
            members.append(MethodInfo(name=name, selector=selector_of(getattr(cls, attr_name))))
        elif attr_name.startswith(JSPROP_PREFIX):
            name = attr_name[len(JSPROP_PREFIX):]
            readonly = isinstance(value, property) and value.fset is None
            members.append(PropertyInfo(name=name, readonly=readonly, getter=attr_name))
        elif attr_name == CONSTRUCTOR_METHOD:
            constructor = selector_of(getattr(cls, attr_name))

    return ClassDescriptor(
        identity=f'{cls.__module__}.{cls.__qualname__}',
        members=tuple(members),
        constructor=constructor,
    )


def selector_of(func) -> Selector:
    """Derive a selector from a method signature

    Parameters after self become slots; positional-only ones are unnamed.
    Variadic parameters are not exposed.
    """
    params = list(inspect.signature(func).parameters.values())
    if params and params[0].name in ('self', 'cls'):
        params = params[1:]

    slots = []
    for param in params:
        if param.kind == param.POSITIONAL_ONLY:
            slots.append(None)
        elif param.kind in (param.POSITIONAL_OR_KEYWORD, param.KEYWORD_ONLY):
            slots.append(param.name)
    return Selector(tuple(slots))
