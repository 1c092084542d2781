# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for attribute rendering and escaping."""

from genro_htmltag import AttributeMap, encode_content, render_attributes


class TestRenderAttributes:
    """Tests for render_attributes."""

    def test_empty(self):
        """No attributes render as ''."""
        assert render_attributes({}) == ''
        assert render_attributes(None) == ''

    def test_order_is_preserved(self):
        """Fragments follow mapping order."""
        attrs = AttributeMap({'id': 'a', 'class': 'b', 'title': 'c'})
        assert render_attributes(attrs) == ' id="a" class="b" title="c"'

    def test_bare_flag(self):
        """Boolean attributes render bare."""
        assert render_attributes({'hidden': True, 'disabled': False}) == ' hidden'

    def test_empty_string_omitted(self):
        """Empty values are omitted from output."""
        assert render_attributes({'title': '', 'id': 'x'}) == ' id="x"'

    def test_style_single_quotes(self):
        """Style renders with single quotes."""
        assert render_attributes({'style': 'test-value'}) == " style='test-value'"

    def test_style_dict(self):
        """A style dict renders as declarations."""
        result = render_attributes({'style': {'color': 'red', 'font-size': '16px'}})
        assert result == " style='color: red; font-size: 16px;'"

    def test_json_value(self):
        """Dict values render as single-quoted JSON."""
        assert render_attributes({'aria-controls': {'key': 'value'}}) == (
            ' aria-controls=\'{"key":"value"}\''
        )

    def test_data_expansion(self):
        """A dict under 'data' expands into data-* attributes."""
        result = render_attributes({'data': {'id': '1', 'active': True}})
        assert result == ' data-id="1" data-active="true"'

    def test_aria_expansion(self):
        """A dict under 'aria' expands into aria-* attributes."""
        assert render_attributes({'aria': {'hidden': True}}) == ' aria-hidden="true"'

    def test_class_list(self):
        """A class list is space-joined."""
        assert render_attributes({'class': ['a', 'b']}) == ' class="a b"'


class TestEscaping:
    """Tests for value escaping."""

    def test_double_quoted_escaping(self):
        """Quotes and ampersands are escaped in double-quoted values."""
        result = render_attributes({'title': 'a "b" \'c\' & <d>'})
        assert result == ' title="a &quot;b&quot; &apos;c&apos; &amp; &lt;d&gt;"'

    def test_single_quoted_escaping(self):
        """Apostrophes are escaped in single-quoted values; double quotes are kept."""
        result = render_attributes({'style': "font-family: 'Arial'"})
        assert result == " style='font-family: &apos;Arial&apos;'"

    def test_json_keeps_double_quotes(self):
        """JSON double quotes survive in single-quoted values."""
        assert render_attributes({'data-x': ['a']}) == ' data-x=\'["a"]\''

    def test_encode_content(self):
        """Content encoding escapes markup but not quotes."""
        assert encode_content('<b>"x" & \'y\'</b>') == '&lt;b&gt;"x" &amp; \'y\'&lt;/b&gt;'


class TestDescribedBy:
    """Tests for the computed aria-describedby value."""

    def test_true_with_id(self):
        """True becomes '{id}-help'."""
        result = render_attributes({'id': 'x', 'aria-describedby': True})
        assert result == ' id="x" aria-describedby="x-help"'

    def test_string_true_with_id(self):
        """The string 'true' behaves like True."""
        result = render_attributes({'id': 'x', 'aria-describedby': 'true'})
        assert result == ' id="x" aria-describedby="x-help"'

    def test_true_without_id(self):
        """Without an id the attribute is omitted."""
        assert render_attributes({'aria-describedby': True}) == ''

    def test_true_with_empty_id(self):
        """An empty id counts as absent."""
        assert render_attributes({'id': '', 'aria-describedby': True}) == ''

    def test_explicit_value_kept(self):
        """Any other value renders as is."""
        result = render_attributes({'id': 'x', 'aria-describedby': 'hint'})
        assert result == ' id="x" aria-describedby="hint"'

    def test_false_renders_literal(self):
        """False is not computed."""
        assert render_attributes({'aria-describedby': False}) == ' aria-describedby="false"'

    def test_deferred_true(self):
        """A deferred value returning True is computed from the id."""
        result = render_attributes({'id': 'x', 'aria-describedby': lambda: True})
        assert result == ' id="x" aria-describedby="x-help"'

    def test_deferred_true_without_id(self):
        """A deferred True without an id is omitted."""
        assert render_attributes({'aria-describedby': lambda: 'true'}) == ''

    def test_aria_mapping(self):
        """describedby inside an aria mapping is computed too."""
        result = render_attributes({'id': 'x', 'aria': {'describedby': True, 'label': 'L'}})
        assert result == ' id="x" aria-describedby="x-help" aria-label="L"'

    def test_aria_mapping_without_id(self):
        """describedby inside an aria mapping without an id is omitted."""
        assert render_attributes({'aria': {'describedby': True}}) == ''

    def test_deferred_aria_mapping(self):
        """A deferred aria mapping is expanded after it is resolved."""
        result = render_attributes({'id': 'x', 'aria': lambda: {'describedby': 'true'}})
        assert result == ' id="x" aria-describedby="x-help"'
