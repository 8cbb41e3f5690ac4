"""
Main generator module

Orchestrates member stubs into a complete JavaScript extension module.
"""

from dataclasses import dataclass
import inspect
import logging
import os
from typing import Optional, Protocol, TYPE_CHECKING

from .codegen import CodeGen, js_property, js_string
from .invocation import Invoker, call_native
from .ir import (
    CATCH_ALL_NAME, ClassDescriptor, DescriptorError, MethodInfo, PropertyInfo,
    simple_class_name,
)
from .method import MethodStubBuilder
from .values import serialize_value

if TYPE_CHECKING:
    from .ir import Member

logger = logging.getLogger(__name__)

# Name the constructor stub is invoked under
CONSTRUCTOR_NAME = '+'

# Indentation of generated modules
INDENT = '  '

CATCH_ALL_STUB = ('function() { return arguments.callee.' + CATCH_ALL_NAME
                  + '.apply(arguments.callee, arguments); }')


@dataclass(frozen=True)
class GenerationResult:
    """Module text plus the properties whose values could not be serialized"""
    text: str
    failures: tuple[str, ...] = ()


class ScriptResolver(Protocol):
    """Looks up the companion script of a class"""

    def resolve(self, identity: str) -> Optional[str]:
        ...


class DirectoryScriptResolver:
    """Companion scripts stored as <root>/<SimpleName>.js"""

    def __init__(self, root: str):
        self.root = root

    def path_for(self, identity: str) -> str:
        return os.path.join(self.root, f'{simple_class_name(identity)}.js')

    def resolve(self, identity: str) -> Optional[str]:
        path = self.path_for(identity)
        if not os.path.isfile(path):
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()


class ModuleScriptResolver:
    """Companion scripts stored beside the Python module defining a class"""

    def __init__(self, cls: type):
        self.cls = cls

    def resolve(self, identity: str) -> Optional[str]:
        try:
            source = inspect.getfile(self.cls)
        except TypeError:
            # Built-in classes have no source file
            return None
        return DirectoryScriptResolver(os.path.dirname(source)).resolve(identity)


class StubGenerator:
    """Generates the script module proxying one native class"""

    def __init__(self, script_resolver: Optional[ScriptResolver] = None,
                 invoke: Invoker = call_native, receiver: str = 'this'):
        self.script_resolver = script_resolver
        self.invoke = invoke
        self.method_builder = MethodStubBuilder(receiver, indent_str=INDENT)
        self._ignores: set[str] = set()

    def ignore(self, *names: str):
        """Exclude members from generated output"""
        self._ignores.update(names)

    def generate(self, channel_name: str, namespace: str,
                 descriptor: ClassDescriptor, instance=None) -> str:
        """Generate the module text for a class"""
        return self.generate_with_failures(channel_name, namespace, descriptor, instance).text

    def generate_with_failures(self, channel_name: str, namespace: str,
                               descriptor: ClassDescriptor, instance=None) -> GenerationResult:
        """Generate the module and report properties that fell back to undefined"""
        if not isinstance(descriptor, ClassDescriptor):
            raise DescriptorError(f'expected a ClassDescriptor, got {type(descriptor).__name__}')

        failures: list[str] = []
        gen = CodeGen(indent_str=INDENT)

        gen.line('(function(exports) {')
        gen.indent()
        for member in descriptor.members:
            if member.name in self._ignores:
                continue
            self._gen_member(member, instance, gen, failures)
        gen.dedent()

        script = self._companion_script(descriptor)
        if script:
            gen.raw(script.rstrip('\n'))

        gen.line(f'}})(Extension.create({self._create_args(channel_name, namespace, descriptor)}));')
        return GenerationResult(gen.output() + '\n', tuple(failures))

    def _gen_member(self, member: 'Member', instance, gen: CodeGen, failures: list[str]):
        """Generate the stub line for one member"""
        if member.kind == MethodInfo.kind:
            stub = self.method_builder.build(member.name, member.selector)
            gen.line(f'{js_property("exports", member.name)} = {stub};')
        elif member.kind == PropertyInfo.kind:
            value = self._initial_value(member, instance, failures)
            writable = 'false' if member.readonly else 'true'
            gen.line(f'Extension.defineProperty(exports, {js_string(member.name)}, {value}, {writable});')
        else:
            raise DescriptorError(f'unknown member kind {member.kind!r} for {member.name!r}')

    def _initial_value(self, prop: PropertyInfo, instance, failures: list[str]) -> str:
        """Fetch and serialize a property's current value"""
        if instance is None:
            return 'undefined'
        result = serialize_value(self.invoke(instance, prop.accessor, None))
        if not result.ok:
            logger.warning(f'Property {prop.name!r} has no literal initial value, using undefined')
            failures.append(prop.name)
            return 'undefined'
        return result.literal

    def _companion_script(self, descriptor: ClassDescriptor) -> Optional[str]:
        """Hand-written script merged into the module, if the class ships one"""
        if self.script_resolver is None:
            return None
        script = self.script_resolver.resolve(descriptor.identity)
        if script is not None:
            logger.debug(f'Merging companion script for {descriptor.simple_name}')
        return script

    def _create_args(self, channel_name: str, namespace: str, descriptor: ClassDescriptor) -> str:
        """Arguments of the trailing Extension.create call"""
        args = [channel_name, js_string(namespace)]
        if descriptor.constructor is not None:
            args.append(self.method_builder.build(CONSTRUCTOR_NAME, descriptor.constructor))
            args.append('true')
        elif descriptor.has_catch_all and CATCH_ALL_NAME not in self._ignores:
            args.append(CATCH_ALL_STUB)
        return ', '.join(args)
