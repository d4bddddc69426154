import os
import tempfile
from pathlib import Path

import pytest

from dirtools.exclusion_rules.git_rules import GitIgnoreExclusionRules


def write_rules_file(*lines):
    with tempfile.NamedTemporaryFile(mode="w", suffix=".ignore", delete=False) as f:
        f.write("\n".join(lines) + "\n")
    return f.name


@pytest.fixture
def temp_gitignore():
    path = write_rules_file("*.txt", "!important.txt", "subdir/", "*.py[cod]", "**/__pycache__/")
    yield path
    os.unlink(path)


@pytest.fixture
def temp_npmignore():
    path = write_rules_file("*.log", "node_modules/", "!important.log")
    yield path
    os.unlink(path)


@pytest.mark.parametrize(
    "path,expected",
    [
        ("file.txt", True),
        ("important.txt", False),
        ("file.py", False),
        ("file.pyc", True),
        ("subdir/", True),
        ("subdir/file.py", True),
        ("nested/subdir/", True),
        ("nested/file.txt", True),
        ("__pycache__/", True),
        ("lib/__pycache__/cache_file.py", True),
        ("subdirectory/", False),
        ("src/", False),
    ],
)
def test_gitignore_exclusion_rules(temp_gitignore, path, expected):
    rules = GitIgnoreExclusionRules(temp_gitignore)
    assert rules.exclude(path) == expected, f"Failed for path: {path}"


def test_directory_only_pattern_ignores_files():
    """A trailing slash in a pattern only matches directories, which walks mark with a slash."""
    rules = GitIgnoreExclusionRules()
    rules.add_rule("build/")

    assert rules.exclude("build/")
    assert rules.exclude("src/build/")
    assert not rules.exclude("build")


def test_empty_rules_file():
    path = write_rules_file("")
    try:
        rules = GitIgnoreExclusionRules(path)
        assert not rules.exclude("any_file.txt")
        assert not rules.has_rules()
    finally:
        os.unlink(path)


def test_has_rules():
    rules = GitIgnoreExclusionRules()
    assert not rules.has_rules()

    rules.add_rule("# only a comment")
    assert not rules.has_rules()

    rules.add_rule("*.log")
    assert rules.has_rules()


def test_nonexistent_file():
    with pytest.raises(FileNotFoundError, match="Rules file not found"):
        GitIgnoreExclusionRules("nonexistent_file")


def test_failed_load_keeps_current_rules(temp_gitignore, temp_npmignore):
    rules = GitIgnoreExclusionRules(temp_gitignore)

    with pytest.raises(FileNotFoundError):
        rules.load_rules([temp_npmignore, "nonexistent_file"])

    # Nothing from the first, readable file was added
    assert not rules.exclude("debug.log")
    assert rules.exclude("file.txt")


def test_multiple_rules_files(temp_gitignore, temp_npmignore):
    rules = GitIgnoreExclusionRules([temp_gitignore, Path(temp_npmignore)])

    assert rules.exclude("file.txt")
    assert not rules.exclude("important.txt")
    assert rules.exclude("debug.log")
    assert not rules.exclude("important.log")
    assert rules.exclude("node_modules/")


def test_rules_files_order():
    first = write_rules_file("*.md", "!README.md")
    second = write_rules_file("README.md")
    third = write_rules_file("!README.md")
    try:
        assert GitIgnoreExclusionRules([first, second]).exclude("README.md")
        assert not GitIgnoreExclusionRules([first, second, third]).exclude("README.md")
        assert not GitIgnoreExclusionRules([second, first]).exclude("README.md")
        assert GitIgnoreExclusionRules([second, first]).exclude("CONTRIBUTING.md")
    finally:
        for path in (first, second, third):
            os.unlink(path)


def test_load_rules_incrementally(temp_gitignore, temp_npmignore):
    rules = GitIgnoreExclusionRules(temp_gitignore)
    assert not rules.exclude("debug.log")

    rules.load_rules(temp_npmignore)
    assert rules.exclude("debug.log")
    assert rules.exclude("file.txt")


def test_add_rule_order():
    rules1 = GitIgnoreExclusionRules()
    rules1.add_rule("*.md")
    rules1.add_rule("!README.md")

    rules2 = GitIgnoreExclusionRules()
    rules2.add_rule("!README.md")
    rules2.add_rule("*.md")

    assert not rules1.exclude("README.md")
    assert rules2.exclude("README.md")


def test_mixing_add_rule_and_load_rules():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.py")

    path = write_rules_file("*.txt", "!important.py")
    try:
        rules.load_rules(path)

        assert rules.exclude("main.py")
        assert not rules.exclude("important.py")
        assert rules.exclude("notes.txt")
    finally:
        os.unlink(path)


def test_complex_patterns():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("**/*.min.js")
    rules.add_rule("build-*/")
    rules.add_rule("!build-config/")

    assert rules.exclude("js/libs/jquery.min.js")
    assert rules.exclude("build-output/")
    assert not rules.exclude("build-config/")
    assert not rules.exclude("normal.js")
