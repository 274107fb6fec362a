"""
Unit tests for the three-pane converter.

Tests cover:
- Focus dispatch (the focused pane is the source of truth)
- Parse failures shown in both destination panes
- Serialize failures shown in the affected pane only
- Blank source clearing the other panes
- One-shot convert()
"""

import pytest

from json_toml_yaml.core.converter import Converter, SyncResult, convert
from json_toml_yaml.core.formats import ConversionError, DataFormat

JSON, TOML, YAML = DataFormat.JSON, DataFormat.TOML, DataFormat.YAML


@pytest.fixture
def converter():
    return Converter()


def edit(converter, fmt, text) -> SyncResult:
    converter.set_text(fmt, text)
    converter.focus(fmt)
    return converter.sync()


class TestFocusDispatch:
    """The focused pane overwrites the other two."""

    def test_starts_empty(self, converter):
        assert all(converter.text(fmt) == '' for fmt in DataFormat)
        assert converter.focused is None

    def test_no_focus_does_nothing(self, converter):
        converter.set_text(JSON, '{"a": 1}')
        result = converter.sync()
        assert result.source is None
        assert result.outputs == {}
        assert converter.text(TOML) == ''

    def test_from_json(self, converter):
        result = edit(converter, JSON, '{"a": 1}')
        assert result.ok
        assert result.source is JSON
        assert converter.text(TOML) == 'a = 1\n'
        assert converter.text(YAML) == 'a: 1\n'
        assert converter.text(JSON) == '{"a": 1}'

    def test_from_toml(self, converter):
        edit(converter, TOML, 'title = "x"\n\n[owner]\nname = "Tom"\n')
        assert converter.text(JSON) == '{\n  "title": "x",\n  "owner": {\n    "name": "Tom"\n  }\n}'
        assert converter.text(YAML) == 'title: x\nowner:\n  name: Tom\n'

    def test_from_yaml(self, converter):
        edit(converter, YAML, 'items:\n- 1\n- 2\n')
        assert converter.text(JSON) == '{\n  "items": [\n    1,\n    2\n  ]\n}'
        assert converter.registry.get_adapter(TOML).loads(converter.text(TOML)) == {'items': [1, 2]}

    def test_focus_switch(self, converter):
        edit(converter, JSON, '{"a": 1}')
        edit(converter, YAML, 'a: 2\n')
        assert converter.text(JSON) == '{\n  "a": 2\n}'
        assert converter.text(TOML) == 'a = 2\n'

    def test_outputs_only_other_panes(self, converter):
        result = edit(converter, TOML, 'a = 1\n')
        assert set(result.outputs) == {JSON, YAML}


class TestErrors:
    """Failures become the text of the destination panes."""

    def test_parse_failure_fills_both_panes(self, converter):
        result = edit(converter, JSON, '{"a": ')
        assert not result.ok
        assert set(result.errors) == {TOML, YAML}
        assert converter.text(TOML) == converter.text(YAML)
        assert 'Expecting value' in converter.text(TOML)
        assert converter.text(JSON) == '{"a": '

    def test_parse_failure_error_objects(self, converter):
        result = edit(converter, YAML, 'a: [1')
        error = result.errors[JSON]
        assert isinstance(error, ConversionError)
        assert error.format is YAML
        assert error.stage == 'parse'

    def test_recovers_after_fixing_input(self, converter):
        edit(converter, JSON, '{"a": ')
        result = edit(converter, JSON, '{"a": 1}')
        assert result.ok
        assert converter.text(TOML) == 'a = 1\n'

    def test_top_level_array_to_toml(self, converter):
        result = edit(converter, JSON, '[1, 2]')
        assert set(result.errors) == {TOML}
        assert converter.text(TOML) == 'TOML documents must be a table at the top level, got an array'
        assert converter.text(YAML) == '- 1\n- 2\n'

    def test_null_to_toml(self, converter):
        edit(converter, YAML, 'a: null\nb: 1\n')
        assert converter.text(TOML) == "unsupported None value at 'a'"
        assert converter.text(JSON) == '{\n  "a": null,\n  "b": 1\n}'


class TestBlankSource:

    def test_clears_other_panes(self, converter):
        edit(converter, JSON, '{"a": 1}')
        result = edit(converter, JSON, '   \n')
        assert result.ok
        assert converter.text(TOML) == ''
        assert converter.text(YAML) == ''


class TestConvert:

    def test_convert(self):
        assert convert('a: 1\n', YAML, TOML) == 'a = 1\n'

    def test_convert_raises(self):
        with pytest.raises(ConversionError):
            convert('[1, 2]', JSON, TOML)


class TestTypingInProgress:
    """Every prefix of a document, as typed, converts or shows an error."""

    DOCUMENT = {
        'title': 'Example "config"',
        'version': 3,
        'ratio': 0.25,
        'enabled': True,
        'tags': ['fast', 'small'],
        'point': {'x': 1, 'y': -2},
        'owner': {'name': 'Tom', 'dob': '1979-05-27'},
        'servers': [{'host': 'alpha', 'ports': [8001, 8002]}, {'host': 'beta', 'ports': []}],
    }

    @pytest.mark.parametrize('fmt', list(DataFormat))
    def test_every_prefix(self, converter, fmt):
        text = converter.registry.get_adapter(fmt).dumps(self.DOCUMENT)
        targets = {other for other in DataFormat if other is not fmt}
        for end in range(len(text) + 1):
            result = edit(converter, fmt, text[:end])
            assert set(result.outputs) == targets, text[:end]
            assert all(isinstance(output, str) for output in result.outputs.values())
        assert result.ok
        for target in targets:
            assert converter.registry.get_adapter(target).loads(converter.text(target)) == self.DOCUMENT

    def test_truncated_inline_table(self, converter):
        result = edit(converter, TOML, 'point = { x = 1')
        assert set(result.errors) == {JSON, YAML}
        assert converter.text(JSON) == converter.text(YAML) != ''

    def test_nested_array_of_tables_to_toml(self, converter):
        result = edit(converter, JSON, '{"a": [[{"q": 1}]]}')
        assert set(result.errors) == {TOML}
        assert converter.text(TOML) == "tables inside nested arrays are not supported at 'a[0]'"
        assert converter.text(YAML) == 'a:\n- - q: 1\n'
