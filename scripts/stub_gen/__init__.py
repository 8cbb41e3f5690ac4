"""
stub_gen - JavaScript extension stub generation for native classes

This package turns the introspected surface of a native class (methods,
properties, an optional constructor and catch-all entry point) into a
JavaScript module whose members forward calls across the native/script
boundary through `Extension` channel objects.
"""

from .ir import (
    ClassDescriptor, MethodInfo, PropertyInfo, Selector, DescriptorError,
    PROMISE_SENTINEL, CATCH_ALL_NAME,
)
from .codegen import CodeGen, js_string, is_js_identifier
from .values import SerializeResult, serialize_value
from .method import MethodStubBuilder
from .invocation import call_native
from .reflection import reflect_class
from .generator import (
    StubGenerator, GenerationResult, ScriptResolver, DirectoryScriptResolver, ModuleScriptResolver,
)

__all__ = [
    'ClassDescriptor', 'MethodInfo', 'PropertyInfo', 'Selector', 'DescriptorError',
    'PROMISE_SENTINEL', 'CATCH_ALL_NAME',
    'CodeGen', 'js_string', 'is_js_identifier',
    'SerializeResult', 'serialize_value',
    'MethodStubBuilder',
    'call_native',
    'reflect_class',
    'StubGenerator', 'GenerationResult', 'ScriptResolver', 'DirectoryScriptResolver', 'ModuleScriptResolver',
]
