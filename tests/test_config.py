"""
Tests for configuration loading — schemabuild.yml parsing and overrides.
"""

from pathlib import Path

import pytest

from schemabuild.core.config.loader import (
    build_parameters,
    find_build_file,
    load_build_file,
    parse_overrides,
)
from schemabuild.core.errors import ConfigurationError


@pytest.fixture
def valid_build_yml(write_build_file) -> Path:
    return write_build_file("""\
        version: 1
        project:
          name: petstore
          build_directory: target
          source_directories: [src, lib]
          virtualenv: .venv
        generate:
          sourceDirectory: schema
          targetPackage: petstore.model
          annotationStyle: jackson2
          propertyWordDelimiters: "_-"
          generateBuilders: true
        engine:
          command: jsonschema2pojo --stdin
    """)


class TestLoadBuildFile:
    """Tests for load_build_file()."""

    def test_load_valid_config(self, valid_build_yml: Path):
        build_file = load_build_file(valid_build_yml)
        project = build_file.project
        assert project.name == "petstore"
        assert project.root == valid_build_yml.parent.resolve()
        assert project.build_path == project.root / "target"
        assert project.source_directories == [Path("src"), Path("lib")]
        assert project.virtualenv == Path(".venv")
        assert build_file.engine.command == "jsonschema2pojo --stdin"
        assert build_file.generate["sourceDirectory"] == "schema"

    def test_minimal_config(self, write_build_file):
        path = write_build_file("generate:\n  sourceDirectory: schema\n")
        build_file = load_build_file(path)
        assert build_file.project.name == path.parent.resolve().name
        assert build_file.project.build_directory == Path("build")
        assert build_file.engine.command == ""

    def test_empty_file(self, write_build_file):
        build_file = load_build_file(write_build_file(""))
        assert build_file.generate == {}

    def test_empty_generate_section(self, write_build_file):
        build_file = load_build_file(write_build_file("project:\n  name: petstore\ngenerate:\n"))
        assert build_file.generate == {}
        assert build_file.project.name == "petstore"

    def test_relative_root(self, write_build_file, tmp_path: Path):
        (tmp_path / "app").mkdir()
        build_file = load_build_file(write_build_file("project:\n  root: app\n"))
        assert build_file.project.root == (tmp_path / "app").resolve()

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_build_file(tmp_path / "nonexistent.yml")

    def test_invalid_yaml_raises(self, write_build_file):
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_build_file(write_build_file(":: invalid: yaml: ["))

    def test_non_mapping_raises(self, write_build_file):
        with pytest.raises(ConfigurationError, match="Expected a YAML mapping"):
            load_build_file(write_build_file("- just\n- a\n- list\n"))

    def test_bad_project_section_raises(self, write_build_file):
        with pytest.raises(ConfigurationError, match="Invalid build configuration"):
            load_build_file(write_build_file("project:\n  source_directories: 5\n"))

    def test_auto_search_raises(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        isolated = tmp_path / "isolated"
        isolated.mkdir()
        monkeypatch.chdir(isolated)
        with pytest.raises(ConfigurationError, match=r"No schemabuild\.yml found"):
            load_build_file(None)


class TestFindBuildFile:
    """Tests for find_build_file()."""

    def test_find_in_current_dir(self, tmp_path: Path):
        (tmp_path / "schemabuild.yml").write_text("{}\n")
        result = find_build_file(tmp_path)
        assert result is not None
        assert result.name == "schemabuild.yml"

    def test_find_in_parent_dir(self, tmp_path: Path):
        (tmp_path / "schemabuild.yml").write_text("{}\n")
        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)
        result = find_build_file(subdir)
        assert result is not None
        assert result.parent == tmp_path.resolve()

    def test_not_found_returns_none(self, tmp_path: Path):
        subdir = tmp_path / "deep" / "nested"
        subdir.mkdir(parents=True)
        assert find_build_file(subdir) is None


class TestParseOverrides:
    def test_plain_and_prefixed(self):
        assert parse_overrides(["skip=true", "schemabuild.targetPackage=a.b"]) == {
            "skip": "true",
            "targetPackage": "a.b",
        }

    def test_value_may_contain_equals(self):
        assert parse_overrides(["targetPackage=a=b"]) == {"targetPackage": "a=b"}

    def test_empty_value(self):
        assert parse_overrides(["propertyWordDelimiters="]) == {"propertyWordDelimiters": ""}

    @pytest.mark.parametrize("bad", ["skip", "=true", "  =x"])
    def test_invalid(self, bad: str):
        with pytest.raises(ConfigurationError, match="Invalid property override"):
            parse_overrides([bad])


class TestBuildParameters:
    def test_defaults(self):
        params = build_parameters({})
        assert params.output_directory is None
        assert params.source_directory is None
        assert params.source_paths is None
        assert params.target_package == ""
        assert params.generate_builders is False
        assert params.use_primitives is False
        assert params.add_compile_source_root is True
        assert params.skip is False
        assert params.property_word_delimiters == ""
        assert params.use_long_integers is False
        assert params.include_hashcode_and_equals is True
        assert params.include_to_string is True
        assert params.annotation_style == "jackson"

    def test_empty_source_directory_override_unsets(self):
        params = build_parameters({"sourcePaths": ["a.json"]}, {"sourceDirectory": ""})
        assert params.source_directory is None
        assert params.source_paths == [Path("a.json")]

    def test_empty_output_directory_override_unsets(self):
        params = build_parameters({"outputDirectory": "gen"}, parse_overrides(["outputDirectory="]))
        assert params.output_directory is None

    def test_null_paths_stay_unset(self):
        params = build_parameters({"sourceDirectory": None, "outputDirectory": None})
        assert params.source_directory is None
        assert params.output_directory is None

    def test_camel_and_snake_keys(self):
        params = build_parameters({"sourceDirectory": "schema", "use_primitives": True})
        assert params.source_directory == Path("schema")
        assert params.use_primitives is True

    def test_override_wins_across_spellings(self):
        params = build_parameters(
            {"annotationStyle": "jackson1"}, {"annotation_style": "none"}
        )
        assert params.annotation_style == "none"

    def test_string_coercion(self):
        params = build_parameters(
            {}, {"skip": "true", "includeToString": "false", "sourcePaths": "a.json, b.json"}
        )
        assert params.skip is True
        assert params.include_to_string is False
        assert params.source_paths == [Path("a.json"), Path("b.json")]

    def test_null_strings_become_empty(self):
        params = build_parameters({"targetPackage": None, "propertyWordDelimiters": None})
        assert params.target_package == ""
        assert params.property_word_delimiters == ""

    def test_unknown_parameter_raises(self):
        with pytest.raises(ConfigurationError, match="Invalid generation parameters"):
            build_parameters({"sourceDirectroy": "schema"})

    def test_bad_boolean_raises(self):
        with pytest.raises(ConfigurationError, match="Invalid generation parameters"):
            build_parameters({}, {"skip": "maybe"})
