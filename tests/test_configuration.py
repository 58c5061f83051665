"""Test access to the plugin list of a configuration target."""

import os
import sys
from types import SimpleNamespace

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from babelhelpers import add_plugin, find_plugin, has_plugin
from babelhelpers.configuration import get_plugins_array
from babelhelpers.utils.exceptions import InvalidConfigurationTargetError, PlacementConflictError


def test_list_is_returned_as_is():
    plugins = ["a"]
    assert get_plugins_array(plugins) is plugins


def test_mapping_host_gets_empty_list_attached():
    host = {}
    plugins = get_plugins_array(host)
    assert plugins == []
    assert host["options"]["babel"]["plugins"] is plugins
    assert get_plugins_array(host) is plugins


def test_mapping_host_with_existing_plugins():
    plugins = ["a"]
    host = {"options": {"babel": {"plugins": plugins, "compileModules": False}}}
    assert get_plugins_array(host) is plugins
    assert host["options"]["babel"]["compileModules"] is False


def test_mapping_host_with_null_sections():
    host = {"options": None}
    get_plugins_array(host)
    assert host == {"options": {"babel": {"plugins": []}}}

    host = {"options": {"babel": {"plugins": None}}}
    assert get_plugins_array(host) is host["options"]["babel"]["plugins"]


def test_object_host_gets_options_attached():
    app = SimpleNamespace()
    plugins = get_plugins_array(app)
    assert app.options == {"babel": {"plugins": []}}
    assert get_plugins_array(app) is plugins


def test_object_host_with_existing_plugins():
    addon = SimpleNamespace(options={"babel": {"plugins": ["a"]}})
    assert get_plugins_array(addon) is addon.options["babel"]["plugins"]


def test_nested_attribute_host():
    plugins = ["a"]
    app = SimpleNamespace(options=SimpleNamespace(babel=SimpleNamespace(plugins=plugins)))
    assert get_plugins_array(app) is plugins
    assert has_plugin(app, "babel-plugin-a")


def test_nested_attribute_host_gets_list_attached():
    app = SimpleNamespace(options=SimpleNamespace(babel=SimpleNamespace()))
    plugins = get_plugins_array(app)
    assert app.options.babel.plugins is plugins
    add_plugin(app, "a")
    assert app.options.babel.plugins == ["a"]


def test_attribute_options_with_mapping_babel():
    addon = SimpleNamespace(options=SimpleNamespace(babel={"plugins": ["a"]}))
    assert get_plugins_array(addon) is addon.options.babel["plugins"]


@pytest.mark.parametrize("target", [("a", "b"), "plugins", 42])
def test_target_that_cannot_hold_options_is_rejected(target):
    with pytest.raises(InvalidConfigurationTargetError) as exc_info:
        get_plugins_array(target)
    assert exc_info.value.found_type == type(target).__name__


def test_options_that_cannot_hold_babel_are_rejected():
    with pytest.raises(InvalidConfigurationTargetError):
        get_plugins_array({"options": ("babel",)})


def test_immutable_plugin_collection_is_rejected():
    host = {"options": {"babel": {"plugins": ("a",)}}}
    with pytest.raises(InvalidConfigurationTargetError) as exc_info:
        get_plugins_array(host)
    assert "tuple" in str(exc_info.value)


class TestPublicHelpers:
    """Test find_plugin, has_plugin and add_plugin against hosts and lists."""

    def test_find_plugin(self):
        entry = ["@babel/plugin-foo", {"loose": True}]
        plugins = ["a", entry]
        assert find_plugin(plugins, "@babel/plugin-foo") is entry
        assert find_plugin(plugins, "babel-plugin-missing") is None

    def test_has_plugin_matches_find_plugin(self):
        host = {"options": {"babel": {"plugins": ["a", {}]}}}
        for name in ["babel-plugin-a", "babel-plugin-b", "a", ""]:
            assert has_plugin(host, name) == (find_plugin(host, name) is not None)
        assert has_plugin(host, "babel-plugin-a")

    def test_add_plugin_to_host_is_visible_to_host(self):
        app = SimpleNamespace(options={"babel": {"plugins": ["a", "c"]}})
        index = add_plugin(app, "b", after=["babel-plugin-a"])
        assert index == 1
        assert app.options["babel"]["plugins"] == ["a", "b", "c"]

    def test_add_plugin_to_empty_host(self):
        host = {}
        add_plugin(host, "a", before=["babel-plugin-missing"])
        assert host["options"]["babel"]["plugins"] == ["a"]

    def test_add_plugin_with_tuple_entry(self):
        plugins = ["a", "b"]
        add_plugin(plugins, ("b", {}, "second"), before=["babel-plugin-b"])
        assert plugins == ["a", ("b", {}, "second"), "b"]

    def test_add_plugin_conflict(self):
        plugins = ["a", "b", "c"]
        with pytest.raises(PlacementConflictError):
            add_plugin(plugins, "new", before=["babel-plugin-a"], after=["babel-plugin-c"])
        assert plugins == ["a", "b", "c"]
