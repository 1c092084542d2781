# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for AttributeMap and normalize_key."""

import pytest

from genro_htmltag import AttributeMap, InvalidKeyError, normalize_key
from genro_htmltag.values import Aria, AttributeProperty, DataProperty, Event


class TestAttributeMapSet:
    """Tests for set/remove/get."""

    def test_set_and_get(self):
        """Values are stored as given."""
        attrs = AttributeMap()
        attrs.set('id', 'main')
        assert attrs.get('id') == 'main'
        assert attrs['id'] == 'main'
        assert 'id' in attrs

    def test_get_default(self):
        """Missing keys return the default."""
        assert AttributeMap().get('id', 'x') == 'x'

    def test_set_none_removes(self):
        """Setting None removes the key."""
        attrs = AttributeMap({'id': 'main', 'title': 't'})
        attrs.set('id', None)
        assert list(attrs) == ['title']

    def test_empty_string_is_stored(self):
        """An empty string stays in the map."""
        attrs = AttributeMap()
        attrs.set('title', '')
        assert attrs.to_ordered_pairs() == [('title', '')]

    def test_overwrite_keeps_position(self):
        """Overwriting a key keeps its original position."""
        attrs = AttributeMap({'a': '1', 'b': '2'})
        attrs.set('a', '3')
        assert attrs.to_ordered_pairs() == [('a', '3'), ('b', '2')]

    def test_enum_key(self):
        """Enum keys resolve to their value."""
        attrs = AttributeMap()
        attrs.set(AttributeProperty.TITLE, 'Hi')
        assert attrs.to_dict() == {'title': 'Hi'}

    def test_empty_key_raises(self):
        """An empty key raises InvalidKeyError."""
        with pytest.raises(InvalidKeyError, match='non-empty string'):
            AttributeMap().set('', 'x')

    def test_non_string_key_raises(self):
        """A non-string key raises InvalidKeyError."""
        with pytest.raises(InvalidKeyError) as info:
            AttributeMap().set(1, 'x')
        assert info.value.key == 1

    def test_remove_missing_key(self):
        """Removing a missing key is a no-op."""
        attrs = AttributeMap({'id': 'x'})
        attrs.remove('title')
        assert len(attrs) == 1


class TestAttributeMapBulk:
    """Tests for set_many, copy and equality."""

    def test_set_many_in_order(self):
        """Pairs are applied in order; None removes."""
        attrs = AttributeMap({'id': 'x'})
        attrs.set_many({'title': 't', 'id': None, 'lang': 'en'})
        assert attrs.to_ordered_pairs() == [('title', 't'), ('lang', 'en')]

    def test_set_many_coerces_keys(self):
        """Non-string keys are converted with str()."""
        attrs = AttributeMap()
        attrs.set_many({1: 'one', AttributeProperty.ID: 'x'})
        assert attrs.to_dict() == {'1': 'one', 'id': 'x'}

    def test_set_many_empty_key_raises(self):
        """An empty key raises even in bulk."""
        with pytest.raises(InvalidKeyError):
            AttributeMap().set_many({'': 'x'})

    def test_copy_is_independent(self):
        """Changes to a copy do not affect the original."""
        attrs = AttributeMap({'id': 'x'})
        other = attrs.copy()
        other.set('id', 'y')
        assert attrs['id'] == 'x'

    def test_equality_with_dict(self):
        """An AttributeMap compares equal to a dict with the same items."""
        assert AttributeMap({'id': 'x'}) == {'id': 'x'}
        assert AttributeMap({'id': 'x'}) == AttributeMap({'id': 'x'})
        assert AttributeMap({'id': 'x'}) != {'id': 'y'}


class TestAddClass:
    """Tests for class append/override semantics."""

    def test_append(self):
        """Classes are appended with a single space."""
        attrs = AttributeMap()
        attrs.add_class('a')
        attrs.add_class('b')
        assert attrs['class'] == 'a b'

    def test_override(self):
        """override replaces existing classes."""
        attrs = AttributeMap({'class': 'a'})
        attrs.add_class('b', override=True)
        assert attrs['class'] == 'b'

    def test_duplicates_skipped(self):
        """A class already present is not repeated."""
        attrs = AttributeMap({'class': 'a b'})
        attrs.add_class('b c')
        assert attrs['class'] == 'a b c'

    def test_empty_is_noop(self):
        """An empty string leaves existing classes."""
        attrs = AttributeMap({'class': 'a'})
        attrs.add_class('')
        assert attrs['class'] == 'a'

    def test_none_removes(self):
        """None removes the class attribute."""
        attrs = AttributeMap({'class': 'a'})
        attrs.add_class(None)
        assert 'class' not in attrs

    def test_append_to_list(self):
        """Appending to a class list flattens it."""
        attrs = AttributeMap({'class': ['a', 'b']})
        attrs.add_class('c')
        assert attrs['class'] == 'a b c'


class TestNormalizeKey:
    """Tests for prefixed keys."""

    def test_adds_prefix(self):
        """A bare key gets the prefix."""
        assert normalize_key('label', 'aria-') == 'aria-label'

    def test_keeps_existing_prefix(self):
        """A fully-qualified key is unchanged."""
        assert normalize_key('data-value', 'data-') == 'data-value'

    def test_enum_keys(self):
        """Enum members resolve before prefixing."""
        assert normalize_key(Aria.LABEL, 'aria-') == 'aria-label'
        assert normalize_key(DataProperty.ID, 'data-') == 'data-id'
        assert normalize_key(Event.CLICK, 'on') == 'onclick'

    def test_event_without_prefix(self):
        """Event names get 'on'."""
        assert normalize_key('click', 'on') == 'onclick'

    def test_empty_key_raises(self):
        """An empty key raises."""
        with pytest.raises(InvalidKeyError):
            normalize_key('', 'data-')
