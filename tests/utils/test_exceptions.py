"""Tests for the babelhelpers exception hierarchy."""

from babelhelpers.utils.exceptions import (
    BabelHelpersError,
    InvalidConfigurationTargetError,
    PipelineFileError,
    PlacementConflictError,
)


def test_base_error_message_parts():
    error = BabelHelpersError("Something failed", suggested_action="Retry", original_exception=ValueError("bad"))
    assert str(error) == "Something failed | Action: Retry | Original error: bad"
    assert error.message == "Something failed"


def test_placement_conflict_details():
    error = PlacementConflictError(
        plugin_name="babel-plugin-new",
        before=["babel-plugin-a"],
        after=["babel-plugin-c"],
        earliest=3,
        latest=0,
    )
    assert isinstance(error, BabelHelpersError)
    assert error.message == "Unable to satisfy placement constraints for Babel plugin babel-plugin-new"
    assert error.before == ("babel-plugin-a",)
    assert error.after == ("babel-plugin-c",)
    assert "babel-plugin-a" in error.suggested_action


def test_placement_conflict_without_name():
    error = PlacementConflictError(plugin_name=None)
    assert error.plugin_name == "<unresolvable name>"


def test_invalid_configuration_target():
    error = InvalidConfigurationTargetError("tuple")
    assert error.found_type == "tuple"
    assert "found tuple" in str(error)


def test_pipeline_file_error_includes_path():
    error = PipelineFileError("Pipeline file not found", path="plugins.json")
    assert error.path == "plugins.json"
    assert str(error).startswith("Pipeline file not found: plugins.json")
