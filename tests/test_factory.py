# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for SimpleFactory, defaults and providers."""

import logging

import pytest

from genro_htmltag import (
    AbstractInstantiationError,
    BaseBlock,
    Block,
    ConfigurationError,
    DefaultsProvider,
    SimpleFactory,
    ThemeProvider,
)

from .conftest import TagBlock, TagInline, TagInput


class CardDefaults(DefaultsProvider):
    def get_defaults(self, tag):
        return {'class': 'card', 'title': 'from-provider'}


class EmptyDefaults(DefaultsProvider):
    def get_defaults(self, tag):
        return {}


class ColorTheme(ThemeProvider):
    def apply(self, tag, theme):
        if theme == 'dark':
            return {'class': ['bg-dark', True]}
        return {}


class TagWithLoadDefault(TagBlock):
    def load_default(self):
        return {'class': 'from-class', 'title': 'from-class'}


class TestCreate:
    """Tests for SimpleFactory.create()."""

    def test_create(self):
        """create() returns a blank instance."""
        tag = SimpleFactory.create(TagBlock)
        assert isinstance(tag, TagBlock)
        assert tag.render() == '<div>\n</div>'

    def test_create_abstract_raises(self):
        """Abstract classes cannot be created."""
        with pytest.raises(
            AbstractInstantiationError,
            match="Cannot instantiate abstract class 'BaseBlock' via 'tag\\(\\)' method.",
        ):
            SimpleFactory.create(BaseBlock)

    def test_tag_abstract_raises(self):
        """tag() on an abstract class raises."""
        with pytest.raises(AbstractInstantiationError):
            BaseBlock.tag()


class TestConfigure:
    """Tests for SimpleFactory.configure()."""

    def test_single_value(self):
        """A scalar is passed as single argument."""
        tag = SimpleFactory.configure(TagBlock.tag(), {'id': 'x'})
        assert tag.render() == '<div id="x">\n</div>'

    def test_list_is_spread(self):
        """A list is spread as positional arguments."""
        tag = TagBlock.tag().class_('a')
        tag = SimpleFactory.configure(tag, {'class': ['b', True]})
        assert tag.get_attribute('class') == 'b'

    def test_mapping_option(self):
        """A mapping is a single argument."""
        tag = SimpleFactory.configure(TagBlock.tag(), {'attributes': {'title': 't'}})
        assert tag.get_attribute('title') == 't'

    def test_does_not_modify_original(self):
        """configure() returns a new tag."""
        original = TagBlock.tag()
        SimpleFactory.configure(original, {'id': 'x'})
        assert original.get_attribute('id') is None

    def test_public_property(self):
        """Names in public_properties are set directly."""
        tag = SimpleFactory.configure(TagInput.tag(), {'label': 'Name'})
        assert tag.label == 'Name'

    def test_unknown_option_raises(self):
        """Unknown names raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="has no option 'nonexistent'"):
            SimpleFactory.configure(TagBlock.tag(), {'nonexistent': 1})

    def test_private_option_raises(self):
        """Private names raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match='private'):
            SimpleFactory.configure(TagBlock.tag(), {'_attributes': {}})

    def test_non_option_method_raises(self):
        """Public methods not marked as options are rejected."""
        with pytest.raises(ConfigurationError):
            SimpleFactory.configure(TagBlock.tag(), {'render': []})

    def test_debug_logging(self, caplog):
        """Each applied option is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger='genro_htmltag.factory'):
            SimpleFactory.configure(TagBlock.tag(), {'id': 'x'})
        assert 'TagBlock.id' in caplog.text


class TestDefaults:
    """Tests for the defaults registry and precedence."""

    def test_registry_defaults(self):
        """Registry defaults apply to tag()."""
        SimpleFactory.set_defaults(TagBlock, {'class': 'from-global'})
        assert TagBlock.tag().render() == '<div class="from-global">\n</div>'

    def test_get_defaults(self):
        """get_defaults() returns a copy of the registry entry."""
        SimpleFactory.set_defaults(TagBlock, {'id': 'x'})
        defaults = SimpleFactory.get_defaults(TagBlock)
        defaults['id'] = 'y'
        assert SimpleFactory.get_defaults(TagBlock) == {'id': 'x'}
        assert SimpleFactory.get_defaults(TagInline) == {}

    def test_registry_is_per_class(self):
        """Defaults of one class do not affect another."""
        SimpleFactory.set_defaults(TagBlock, {'class': 'x'})
        assert Block.tag().render() == '<div>\n</div>'

    def test_precedence_no_collision(self):
        """Registry defaults and tag() arguments combine."""
        SimpleFactory.set_defaults(TagBlock, {'class': 'from-global'})
        tag = TagBlock.tag({'id': 'id-user'})
        assert tag.render() == '<div class="from-global" id="id-user">\n</div>'

    def test_precedence_order(self):
        """load_default < registry < tag() arguments."""
        SimpleFactory.set_defaults(TagWithLoadDefault, {'title': 'from-global'})
        tag = TagWithLoadDefault.tag({'title': 'from-user'})
        assert tag.get_attribute('title') == 'from-user'
        assert tag.get_attribute('class') == 'from-class'

    def test_registry_beats_load_default(self):
        """Registry defaults override load_default()."""
        SimpleFactory.set_defaults(TagWithLoadDefault, {'title': 'from-global'})
        assert TagWithLoadDefault.tag().get_attribute('title') == 'from-global'

    def test_several_argument_mappings(self):
        """Later mappings passed to tag() win."""
        tag = TagBlock.tag({'id': 'a'}, {'id': 'b'})
        assert tag.get_attribute('id') == 'b'

    def test_reset_defaults(self):
        """reset_defaults() clears one class or all."""
        SimpleFactory.set_defaults(TagBlock, {'id': 'a'})
        SimpleFactory.set_defaults(TagInline, {'id': 'b'})
        SimpleFactory.reset_defaults(TagBlock)
        assert SimpleFactory.get_defaults(TagBlock) == {}
        assert SimpleFactory.get_defaults(TagInline) == {'id': 'b'}
        SimpleFactory.reset_defaults()
        assert SimpleFactory.get_registry() == {}


class TestProviders:
    """Tests for default and theme providers."""

    def test_default_provider_class(self):
        """A provider class is instantiated and applied."""
        tag = TagBlock.tag().add_default_provider(CardDefaults)
        assert tag.render() == '<div class="card" title="from-provider">\n</div>'

    def test_default_provider_instance(self):
        """A provider instance is applied."""
        tag = TagBlock.tag().add_default_provider(CardDefaults())
        assert tag.get_attribute('class') == 'card'

    def test_provider_overrides_tag_defaults(self):
        """Providers apply after tag() arguments."""
        tag = TagBlock.tag({'title': 'from-user'}).add_default_provider(CardDefaults)
        assert tag.get_attribute('title') == 'from-provider'

    def test_empty_provider(self):
        """An empty mapping leaves the tag unchanged."""
        tag = TagBlock.tag().add_default_provider(EmptyDefaults)
        assert tag.render() == '<div>\n</div>'

    def test_theme_provider(self):
        """A theme provider receives the theme name."""
        tag = TagBlock.tag().class_('base').add_theme_provider('dark', ColorTheme)
        assert tag.get_attribute('class') == 'bg-dark'

    def test_theme_provider_unknown_theme(self):
        """Themes without options leave the tag unchanged."""
        tag = TagBlock.tag().class_('base').add_theme_provider('light', ColorTheme)
        assert tag.get_attribute('class') == 'base'

    def test_tag_hooks_return_empty(self):
        """A tag is itself a provider with no options."""
        tag = TagBlock.tag()
        assert tag.get_defaults(tag) == {}
        assert tag.apply(tag, 'dark') == {}
