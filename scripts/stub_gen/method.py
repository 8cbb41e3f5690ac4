"""
Method stub generation module

Generates proxy functions that forward script calls to native methods.
"""

from typing import TYPE_CHECKING

from .codegen import CodeGen, is_js_identifier, js_string

if TYPE_CHECKING:
    from .ir import Selector


class MethodStubBuilder:
    """Generates method proxy functions"""

    def __init__(self, receiver: str = 'this', indent_str: str = '    '):
        self.receiver = receiver
        self.indent_str = indent_str

    def param_names(self, selector: 'Selector') -> tuple[list[str], bool]:
        """Get stub parameter names and promise mode for a selector

        Unnamed, reserved and duplicate slots get the positional name __<index>.
        The promise sentinel is never a parameter.
        """
        slots = list(selector.slots)
        is_promise = selector.is_promise
        if is_promise:
            slots.pop()

        params = []
        for i, slot in enumerate(slots):
            if not slot or not is_js_identifier(slot) or slot in params or slot.startswith('__'):
                slot = f'__{i}'
            params.append(slot)
        return params, is_promise

    def build(self, name: str, selector: 'Selector') -> str:
        """Build a function expression proxying the named member"""
        params, is_promise = self.param_names(selector)
        param_list = ', '.join(params)
        tag = js_string(name)

        if not is_promise:
            return f'function({param_list}) {{ {self.receiver}.invoke({tag}, [{param_list}]); }}'

        args = params + ["{'resolve': resolve, 'reject': reject}"]
        gen = CodeGen(indent_str=self.indent_str)
        with gen.block(f'function({param_list}) {{'):
            # The promise executor runs with its own `this`
            gen.line(f'var _this = {self.receiver};')
            with gen.block('return new Promise(function(resolve, reject) {', '});'):
                gen.line(f"_this.invoke({tag}, [{', '.join(args)}]);")
        return gen.output()
