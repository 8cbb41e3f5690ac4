from stub_gen.ir import Selector
from stub_gen.method import MethodStubBuilder


class TestDirectMode:
    def setup_method(self):
        self.builder = MethodStubBuilder()

    def test_two_unnamed_slots(self):
        stub = self.builder.build('add:with:', Selector((None, None)))
        assert stub == "function(__0, __1) { this.invoke('add:with:', [__0, __1]); }"

    def test_named_slots(self):
        stub = self.builder.build('echo', Selector.parse('echo:message:'))
        assert stub == "function(message) { this.invoke('echo', [message]); }"

    def test_no_slots(self):
        stub = self.builder.build('close', Selector())
        assert stub == "function() { this.invoke('close', []); }"

    def test_custom_receiver(self):
        stub = MethodStubBuilder('self').build('close', Selector())
        assert stub == "function() { self.invoke('close', []); }"


class TestParamNames:
    def setup_method(self):
        self.builder = MethodStubBuilder()

    def test_mixed_named_and_unnamed(self):
        params, is_promise = self.builder.param_names(Selector(('a', None, 'c')))
        assert params == ['a', '__1', 'c']
        assert not is_promise

    def test_reserved_word_gets_positional_name(self):
        params, _ = self.builder.param_names(Selector(('with', 'x-y')))
        assert params == ['__0', '__1']

    def test_duplicate_names_made_unique(self):
        params, _ = self.builder.param_names(Selector(('x', 'x')))
        assert params == ['x', '__1']

    def test_names_cannot_collide_with_positional_names(self):
        params, _ = self.builder.param_names(Selector(('__1', None)))
        assert params == ['__0', '__1']

    def test_trailing_newline_gets_positional_name(self):
        params, _ = self.builder.param_names(Selector(('a', 'a\n')))
        assert params == ['a', '__1']

    def test_param_count_excludes_sentinel(self):
        for slots in [(), ('a',), (None, None), ('a', '_Promise'), ('_Promise',)]:
            selector = Selector(slots)
            params, is_promise = self.builder.param_names(selector)
            expected = len(slots) - 1 if slots and slots[-1] == '_Promise' else len(slots)
            assert len(params) == expected
            assert is_promise == selector.is_promise
            assert '_Promise' not in params


class TestPromiseMode:
    def setup_method(self):
        self.builder = MethodStubBuilder()

    def test_promise_stub(self):
        stub = self.builder.build('fetch', Selector(('url', '_Promise')))
        assert stub == (
            "function(url) {\n"
            "    var _this = this;\n"
            "    return new Promise(function(resolve, reject) {\n"
            "        _this.invoke('fetch', [url, {'resolve': resolve, 'reject': reject}]);\n"
            "    });\n"
            "}"
        )

    def test_promise_without_params(self):
        stub = self.builder.build('ping', Selector(('_Promise',)))
        assert stub.startswith('function() {\n')
        assert "_this.invoke('ping', [{'resolve': resolve, 'reject': reject}]);" in stub

    def test_receiver_captured_before_executor(self):
        stub = self.builder.build('fetch', Selector(('url', '_Promise')))
        assert stub.index('var _this = this;') < stub.index('new Promise')
        assert 'this.invoke' not in stub.replace('_this.invoke', '')

    def test_indent_follows_module(self):
        stub = MethodStubBuilder(indent_str='  ').build('fetch', Selector(('url', '_Promise')))
        assert stub == (
            'function(url) {\n'
            '  var _this = this;\n'
            '  return new Promise(function(resolve, reject) {\n'
            "    _this.invoke('fetch', [url, {'resolve': resolve, 'reject': reject}]);\n"
            '  });\n'
            '}'
        )
