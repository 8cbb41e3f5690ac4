"""
Code generation utilities

Provides helpers for generating JavaScript code.
"""

import re


# JavaScript reserved words (ES5 plus strict mode and ES2015 additions)
JS_KEYWORDS = {
    'break', 'case', 'catch', 'class', 'const', 'continue', 'debugger',
    'default', 'delete', 'do', 'else', 'enum', 'export', 'extends', 'false',
    'finally', 'for', 'function', 'if', 'implements', 'import', 'in',
    'instanceof', 'interface', 'let', 'new', 'null', 'package', 'private',
    'protected', 'public', 'return', 'static', 'super', 'switch', 'this',
    'throw', 'true', 'try', 'typeof', 'var', 'void', 'while', 'with', 'yield',
    'await', 'arguments', 'eval', 'undefined',
}

_IDENTIFIER_RE = re.compile(r'[A-Za-z_$][A-Za-z0-9_$]*')

_STRING_ESCAPES = {
    '\\': '\\\\',
    "'": "\\'",
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
    '\b': '\\b',
    '\f': '\\f',
    '\v': '\\v',
    '\0': '\\x00',
    '\u2028': '\\u2028',
    '\u2029': '\\u2029',
}


class CodeGen:
    """Code generation helper with indentation support"""

    def __init__(self, indent_str: str = '    '):
        self._lines: list[str] = []
        self._indent: int = 0
        self._indent_str: str = indent_str

    def line(self, text: str = ''):
        """Add a line with current indentation

        Multi-line text is indented line by line.
        """
        if not text:
            self._lines.append('')
            return
        for part in text.split('\n'):
            if part:
                self._lines.append(self._indent_str * self._indent + part)
            else:
                self._lines.append('')

    def lines(self, *texts: str):
        """Add multiple lines"""
        for text in texts:
            self.line(text)

    def raw(self, text: str):
        """Add raw text without indentation processing"""
        self._lines.append(text)

    def indent(self):
        """Increase indentation"""
        self._indent += 1

    def dedent(self):
        """Decrease indentation"""
        if self._indent > 0:
            self._indent -= 1

    def block(self, header: str, footer: str = '}'):
        """Context manager for code blocks"""
        return _BlockContext(self, header, footer)

    def output(self) -> str:
        """Get generated code as string"""
        return '\n'.join(self._lines)


class _BlockContext:
    """Context manager for indented code blocks"""

    def __init__(self, gen: CodeGen, header: str, footer: str):
        self._gen = gen
        self._header = header
        self._footer = footer

    def __enter__(self):
        self._gen.line(self._header)
        self._gen.indent()
        return self

    def __exit__(self, *args):
        self._gen.dedent()
        self._gen.line(self._footer)


def is_js_identifier(name: str) -> bool:
    """Check if name can be used as a JavaScript binding name"""
    return _IDENTIFIER_RE.fullmatch(name) is not None and name not in JS_KEYWORDS


def js_string(text: str) -> str:
    """Quote text as a single-quoted JavaScript string literal

    Examples:
        it's -> 'it\\'s'
        a<newline>b -> 'a\\nb'
    """
    out = []
    for ch in text:
        if ch in _STRING_ESCAPES:
            out.append(_STRING_ESCAPES[ch])
        elif ord(ch) < 0x20:
            out.append(f'\\x{ord(ch):02x}')
        else:
            out.append(ch)
    return "'" + ''.join(out) + "'"


def js_property(obj: str, name: str) -> str:
    """Property access expression, using bracket notation when needed

    Reserved words are legal after a dot, so only the identifier shape matters.
    """
    if _IDENTIFIER_RE.fullmatch(name):
        return f'{obj}.{name}'
    return f'{obj}[{js_string(name)}]'
