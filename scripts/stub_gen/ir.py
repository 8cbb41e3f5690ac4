"""
IR (Intermediate Representation) module

Describes the exposed surface of one native class: its methods, properties,
optional constructor and catch-all entry point.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union
import json
import re

# Trailing slot name that switches a method stub into promise mode
PROMISE_SENTINEL = '_Promise'

# Method name used as the generic invocation entry point
CATCH_ALL_NAME = 'function'


class DescriptorError(ValueError):
    """Raised for a malformed class descriptor"""


def simple_class_name(identity: str) -> str:
    """Class name stripped of any namespace or path prefix

    Examples:
        pkg.module.Echo -> Echo
        MyApp/Echo -> Echo
    """
    return re.split(r'[./]', identity)[-1]


@dataclass(frozen=True)
class Selector:
    """Ordered argument slots of a method; None marks an unnamed slot"""
    slots: tuple[Optional[str], ...] = ()

    @classmethod
    def parse(cls, text: str) -> 'Selector':
        """Parse a colon-delimited selector

        The leading component is the method's base name and the trailing
        component is always empty, so neither becomes a slot.

        Examples:
            echo:message: -> ('message',)
            add::: -> (None, None)
            fetch:url:_Promise: -> ('url', '_Promise')
        """
        parts = text.split(':')
        parts = parts[1:-1]
        return cls(tuple(p if p else None for p in parts))

    @property
    def is_promise(self) -> bool:
        return bool(self.slots) and self.slots[-1] == PROMISE_SENTINEL


@dataclass(frozen=True)
class MethodInfo:
    """Method member"""
    kind: ClassVar[str] = 'method'
    name: str
    selector: Selector = field(default_factory=Selector)


@dataclass(frozen=True)
class PropertyInfo:
    """Property member"""
    kind: ClassVar[str] = 'property'
    name: str
    readonly: bool = False
    getter: Optional[str] = None

    @property
    def accessor(self) -> str:
        """Getter handle passed to the invocation mechanism"""
        return self.getter or self.name


Member = Union[MethodInfo, PropertyInfo]


@dataclass(frozen=True)
class ClassDescriptor:
    """Introspected shape of one native class"""
    identity: str
    members: tuple[Member, ...] = ()
    constructor: Optional[Selector] = None

    def __post_init__(self):
        if not self.identity:
            raise DescriptorError('class descriptor has no class identity')
        seen = set()
        for member in self.members:
            if not isinstance(member, (MethodInfo, PropertyInfo)):
                raise DescriptorError(f'{self.identity}: unknown member {member!r}')
            if member.name in seen:
                raise DescriptorError(f'{self.identity}: duplicate member {member.name!r}')
            seen.add(member.name)
        object.__setattr__(self, 'members', tuple(self.members))

    @property
    def simple_name(self) -> str:
        return simple_class_name(self.identity)

    @property
    def member_names(self) -> list[str]:
        return [m.name for m in self.members]

    def get_member(self, name: str) -> Optional[Member]:
        """Get member by name"""
        for member in self.members:
            if member.name == name:
                return member
        return None

    def has_method(self, name: str) -> bool:
        return isinstance(self.get_member(name), MethodInfo)

    def has_property(self, name: str) -> bool:
        return isinstance(self.get_member(name), PropertyInfo)

    @property
    def has_catch_all(self) -> bool:
        return self.has_method(CATCH_ALL_NAME)

    @classmethod
    def load(cls, json_path: str) -> 'ClassDescriptor':
        """Load a descriptor from a JSON file"""
        with open(json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> 'ClassDescriptor':
        """Create a descriptor from a dictionary"""
        if not isinstance(data, dict):
            raise DescriptorError('class descriptor must be a JSON object')
        identity = data.get('class')
        if not identity or not isinstance(identity, str):
            raise DescriptorError('class descriptor is missing "class"')

        decls = data.get('members', [])
        if not isinstance(decls, list):
            raise DescriptorError(f'{identity}: "members" must be a list')

        members = []
        for decl in decls:
            if not isinstance(decl, dict):
                raise DescriptorError(f'{identity}: member entry {decl!r} is not an object')
            kind = decl.get('kind')
            if not decl.get('name') or not isinstance(decl['name'], str):
                raise DescriptorError(f'{identity}: member without a name')
            if kind == 'method':
                members.append(cls._parse_method(decl))
            elif kind == 'property':
                members.append(cls._parse_property(decl))
            else:
                raise DescriptorError(f'{identity}: unknown member kind {kind!r}')

        constructor = data.get('constructor')
        return cls(
            identity=identity,
            members=tuple(members),
            constructor=cls._parse_selector(constructor) if constructor is not None else None,
        )

    @staticmethod
    def _parse_selector(value) -> Selector:
        """Parse a selector given as text or as a list of slot names"""
        if isinstance(value, str):
            return Selector.parse(value)
        if isinstance(value, list):
            if not all(s is None or isinstance(s, str) for s in value):
                raise DescriptorError(f'invalid selector slots {value!r}')
            return Selector(tuple(s if s else None for s in value))
        raise DescriptorError(f'invalid selector {value!r}')

    @classmethod
    def _parse_method(cls, decl: dict) -> MethodInfo:
        """Parse method declaration"""
        if 'slots' in decl:
            selector = cls._parse_selector(decl['slots'])
        else:
            selector = cls._parse_selector(decl.get('selector', decl['name'] + ':'))
        return MethodInfo(name=decl['name'], selector=selector)

    @staticmethod
    def _parse_property(decl: dict) -> PropertyInfo:
        """Parse property declaration"""
        getter = decl.get('getter')
        if getter is not None and not isinstance(getter, str):
            raise DescriptorError(f'invalid getter {getter!r} for {decl["name"]!r}')
        return PropertyInfo(
            name=decl['name'],
            readonly=bool(decl.get('readonly', False)),
            getter=getter,
        )
