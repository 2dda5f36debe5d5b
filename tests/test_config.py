"""Tests for configuration loading."""

import pytest

from config import CONFIG_FILENAME, CleanerConfig, load_config, normalize_extensions, split_list
from errors import ConfigError


class TestSplitList:
    """Tests for delimited list handling."""

    def test_delimited_string(self):
        assert split_list("include|third_party/include") == ("include", "third_party/include")

    def test_list_of_delimited_strings(self):
        assert split_list(["a|b", "c"]) == ("a", "b", "c")

    def test_empty_entries_dropped(self):
        assert split_list("a||b|") == ("a", "b")
        assert split_list("") == ()
        assert split_list(None) == ()

    def test_rejects_scalars(self):
        with pytest.raises(ConfigError):
            split_list(42)


class TestCleanerConfig:
    """Tests for CleanerConfig merging."""

    def test_defaults(self):
        config = CleanerConfig()
        assert config.include_dirs == ()
        assert config.exclude_dirs == ()
        assert config.extensions == (".h",)
        assert config.output_format == "text"

    def test_merge_ignores_none(self):
        config = CleanerConfig(include_dirs=("include",)).merge(include_dirs=None, output_format="json")

        assert config.include_dirs == ("include",)
        assert config.output_format == "json"

    def test_merge_normalizes_extensions(self):
        config = CleanerConfig().merge(extensions=["HPP", ".h"])

        assert config.extensions == (".hpp", ".h")

    def test_merge_rejects_unknown_format(self):
        with pytest.raises(ConfigError):
            CleanerConfig().merge(output_format="xml")

    def test_merge_rejects_no_extensions(self):
        with pytest.raises(ConfigError):
            CleanerConfig().merge(extensions=[])

    def test_normalize_extensions(self):
        assert normalize_extensions(".h|hh") == (".h", ".hh")


class TestLoadConfig:
    """Tests for loading YAML config files."""

    def test_no_file(self, tmp_path):
        """Test defaults when the root has no config file."""
        assert load_config(root=tmp_path) == CleanerConfig()

    def test_default_file_in_root(self, tmp_path):
        """Test the config file in the scan root is picked up."""
        (tmp_path / CONFIG_FILENAME).write_text(
            "include_dirs:\n  - include\n  - third_party/include\n"
            "exclude_dirs: build|generated\n"
            "extensions: [.h, hpp]\n"
            "format: json\n",
            encoding="utf-8",
        )

        config = load_config(root=tmp_path)

        assert config.include_dirs == ("include", "third_party/include")
        assert config.exclude_dirs == ("build", "generated")
        assert config.extensions == (".h", ".hpp")
        assert config.output_format == "json"

    def test_explicit_path(self, tmp_path):
        """Test an explicit config file wins over the root default."""
        (tmp_path / CONFIG_FILENAME).write_text("format: json\n", encoding="utf-8")
        explicit = tmp_path / "custom.yaml"
        explicit.write_text("exclude_dirs: [vendor]\n", encoding="utf-8")

        config = load_config(path=explicit, root=tmp_path)

        assert config.exclude_dirs == ("vendor",)
        assert config.output_format == "text"

    def test_empty_file(self, tmp_path):
        """Test an empty file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path=path) == CleanerConfig()

    def test_missing_explicit_file(self, tmp_path):
        """Test a missing explicit config file is an error."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(path=tmp_path / "nope.yaml")

        assert "nope.yaml" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("include_dirs: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(path=path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- include\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(path=path)

    def test_unknown_keys(self, tmp_path):
        path = tmp_path / "typo.yaml"
        path.write_text("include_dir: [include]\n", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path=path)

        assert "include_dir" in str(exc_info.value)

    def test_invalid_value_names_file(self, tmp_path):
        path = tmp_path / "format.yaml"
        path.write_text("format: xml\n", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path=path)

        assert exc_info.value.path == str(path)
