"""Unit tests for size-based exclusion rules."""

from unittest.mock import patch

import pytest

from dirtools.exclusion_rules.size_rules import SizeExclusionRules, parse_file_size
from dirtools.filesystem import dir_tree


@pytest.fixture
def sized_files(tmp_path):
    (tmp_path / "logs").mkdir()
    (tmp_path / "small.txt").write_bytes(b"small")
    (tmp_path / "large.bin").write_bytes(b"x" * 2000)
    (tmp_path / "logs" / "big.log").write_bytes(b"x" * 5000)
    return tmp_path


class TestParseFileSize:
    @pytest.mark.parametrize(
        "size,expected",
        [
            ("1024", 1024),
            ("0", 0),
            ("1KB", 1000),
            ("2.5MB", 2500000),
            ("1 GB", 1000000000),
            ("1KiB", 1024),
            ("1MiB", 1048576),
        ],
    )
    def test_parse(self, size, expected):
        assert parse_file_size(size) == expected

    @pytest.mark.parametrize("size", ["invalid", "", "1XB"])
    def test_parse_invalid_format(self, size):
        with pytest.raises(ValueError, match="Invalid size format"):
            parse_file_size(size)

    def test_humanfriendly_not_available(self):
        with patch("builtins.__import__", side_effect=ImportError("No module named 'humanfriendly'")):
            with pytest.raises(ImportError, match="Size limits need humanfriendly"):
                parse_file_size("1GB")


class TestSizeExclusionRules:
    def test_init(self):
        assert SizeExclusionRules("1MB").max_size_bytes == 1000000
        assert SizeExclusionRules(1048576).max_size_bytes == 1048576
        assert SizeExclusionRules(10).base_path is None

    def test_init_with_negative_int(self):
        with pytest.raises(ValueError, match="Size cannot be negative"):
            SizeExclusionRules(-1)

    @pytest.mark.parametrize("max_size", [1.5, None, True])
    def test_init_with_invalid_type(self, max_size):
        with pytest.raises(ValueError, match="max_size must be string or int"):
            SizeExclusionRules(max_size)

    def test_init_with_invalid_string(self):
        with pytest.raises(ValueError, match="Invalid size format"):
            SizeExclusionRules("invalid_size")

    def test_exclude_relative_paths(self, sized_files):
        rules = SizeExclusionRules(1000, base_path=sized_files)

        assert not rules.exclude("small.txt")
        assert rules.exclude("large.bin")
        assert rules.exclude("logs/big.log")

    def test_exclude_absolute_path(self, sized_files):
        rules = SizeExclusionRules(1000, base_path="/somewhere/else")
        assert rules.exclude(str(sized_files / "large.bin"))

    def test_exclude_directories(self, sized_files):
        rules = SizeExclusionRules(0, base_path=sized_files)
        assert not rules.exclude("logs/")
        assert not rules.exclude(str(sized_files / "logs"))

    def test_exclude_nonexistent_file(self):
        rules = SizeExclusionRules(1000)
        assert not rules.exclude("/nonexistent/file.txt")

    def test_exclude_permission_error(self):
        rules = SizeExclusionRules(1000)
        with patch("pathlib.Path.is_file", return_value=True):
            with patch("pathlib.Path.stat", side_effect=PermissionError()):
                assert not rules.exclude("/some/path")

    def test_exclude_symlink_by_target_size(self, sized_files):
        (sized_files / "link").symlink_to(sized_files / "large.bin")
        rules = SizeExclusionRules(10, base_path=sized_files)
        assert rules.exclude("link")

    def test_has_rules(self):
        assert SizeExclusionRules(1000).has_rules()
        assert not SizeExclusionRules(0).has_rules()

    def test_load_and_add_rule_not_supported(self):
        rules = SizeExclusionRules("1GB")
        with pytest.raises(NotImplementedError, match="SizeExclusionRules doesn't support loading rules from files"):
            rules.load_rules("/nonexistent/file.txt")
        with pytest.raises(NotImplementedError, match="SizeExclusionRules doesn't support adding individual rules"):
            rules.add_rule("500MB")

    def test_dir_tree_with_size_rules(self, sized_files):
        directories, files = dir_tree(sized_files, SizeExclusionRules("1KB", base_path=sized_files))

        assert directories == [str(sized_files), str(sized_files / "logs")]
        assert files == [str(sized_files / "small.txt")]
