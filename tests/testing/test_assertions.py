"""Unit tests for the assertion helpers."""

import os

import pytest

from dirtools.filesystem import create_tmp_file
from dirtools.testing import (
    assert_array_keys_equal,
    assert_contains_instance_of,
    assert_directory_exists,
    assert_directory_not_exists,
    assert_exception,
    assert_file_exists,
    assert_file_extension,
    assert_file_mime,
    assert_file_not_exists,
    assert_file_perms,
    assert_image_size,
    assert_is_html,
    assert_is_json,
    assert_is_list_not_empty,
    assert_is_positive,
    assert_is_url,
    assert_object_properties_equal,
    assert_same_methods,
)


class FirstClass:
    def first_method(self):
        pass

    def second_method(self):
        pass


class SecondClass:
    def second_method(self):
        pass

    def first_method(self):
        pass


class ThirdClass:
    def third_method(self):
        pass


class WithProperties:
    def __init__(self):
        self.first = 1
        self.second = 2


def raise_value_error(message="right exception message"):
    raise ValueError(message)


class TestAssertException:
    def test_expected_exception(self):
        error = assert_exception(ValueError, raise_value_error)
        assert isinstance(error, ValueError)

    def test_expected_message(self):
        assert_exception(ValueError, raise_value_error, "right exception message")

    def test_subclass_matches(self):
        assert_exception(Exception, raise_value_error)

    def test_not_an_exception_class(self):
        with pytest.raises(AssertionError, match="Class `str` does not exist or is not an Exception instance"):
            assert_exception(str, raise_value_error)

    def test_unexpected_type(self):
        with pytest.raises(AssertionError, match="Expected exception `TypeError`, unexpected type `ValueError`"):
            assert_exception(TypeError, raise_value_error)

    def test_unexpected_message(self):
        with pytest.raises(
            AssertionError,
            match="Expected message exception `other message`, unexpected message `right exception message`",
        ):
            assert_exception(ValueError, raise_value_error, "other message")

    def test_empty_message(self):
        with pytest.raises(AssertionError, match="but no message for the exception"):
            assert_exception(ValueError, lambda: raise_value_error(""), "expected message")

    def test_no_exception(self):
        with pytest.raises(AssertionError, match="Expected exception `ValueError`, but no exception throw"):
            assert_exception(ValueError, lambda: None)


def test_assert_file_exists(tmp_path):
    first, second = tmp_path / "first", tmp_path / "second"
    first.touch()
    second.touch()

    assert_file_exists(first)
    assert_file_exists([str(first), second])
    with pytest.raises(AssertionError, match="exists"):
        assert_file_exists([first, tmp_path / "missing"])
    with pytest.raises(AssertionError):
        assert_file_exists(tmp_path)


def test_assert_file_not_exists(tmp_path):
    existing = tmp_path / "existing"
    existing.touch()

    assert_file_not_exists([tmp_path / "missing", tmp_path / "other"])
    with pytest.raises(AssertionError, match="does not exist"):
        assert_file_not_exists(existing)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_assert_file_not_exists_dangling_link(tmp_path):
    link = tmp_path / "link"
    os.symlink(tmp_path / "missing", link)
    with pytest.raises(AssertionError):
        assert_file_not_exists(link)


def test_assert_directory_exists(tmp_path):
    (tmp_path / "dir").mkdir()
    (tmp_path / "file").touch()

    assert_directory_exists([tmp_path, tmp_path / "dir"])
    with pytest.raises(AssertionError):
        assert_directory_exists(tmp_path / "file")

    assert_directory_not_exists([tmp_path / "missing", tmp_path / "file"])
    with pytest.raises(AssertionError):
        assert_directory_not_exists(tmp_path / "dir")


def test_assert_file_extension():
    assert_file_extension("jpg", ["file.jpg", "path/to/FILE.JPG", "http://example.com/photo.jpg?size=1"])
    assert_file_extension("JPG", "file.jpg")
    with pytest.raises(AssertionError, match="has extension `png`"):
        assert_file_extension("png", ["file.png", "file.jpg"])


def test_assert_file_perms(tmp_path):
    filename = tmp_path / "file"
    filename.touch()
    os.chmod(filename, 0o600)

    assert_file_perms(filename, "0600")
    assert_file_perms([filename], 0o600)
    assert_file_perms(filename, ["0644", "0600"])
    with pytest.raises(AssertionError, match=r"has permissions 0644 \(got 0600\)"):
        assert_file_perms(filename, 0o644)


def test_assert_file_mime(tmp_path):
    files = [create_tmp_file("string", directory=tmp_path), create_tmp_file("string", directory=tmp_path)]
    assert_file_mime(files[0], "text/plain")
    assert_file_mime(files, "text/plain")

    page = tmp_path / "page.html"
    page.write_text("<p>Hello</p>")
    assert_file_mime([page], "text/html")

    with pytest.raises(AssertionError, match=r"has MIME type `text/html` \(got text/plain\)"):
        assert_file_mime(files[0], "text/html")
    with pytest.raises(AssertionError, match="exists"):
        assert_file_mime(tmp_path / "missing.txt", "text/plain")


def test_assert_image_size(tmp_path):
    Image = pytest.importorskip("PIL.Image")
    filename = tmp_path / "pic.jpg"
    Image.new("RGB", (120, 20)).save(filename)

    assert_image_size(filename, 120, 20)
    with pytest.raises(AssertionError, match=r"is 20x120 \(got 120x20\)"):
        assert_image_size(filename, 20, 120)


def test_assert_is_list_not_empty():
    assert_is_list_not_empty(["a", "b"])
    assert_is_list_not_empty([0])
    for value in ([], ["a", ""], ["a", None], "not a list", ("a",)):
        with pytest.raises(AssertionError):
            assert_is_list_not_empty(value)


def test_assert_array_keys_equal():
    assert_array_keys_equal(["b", "a"], {"a": 1, "b": 2})
    with pytest.raises(AssertionError):
        assert_array_keys_equal(["a"], {"a": 1, "b": 2})


def test_assert_object_properties_equal():
    assert_object_properties_equal(["second", "first"], WithProperties())
    with pytest.raises(AssertionError):
        assert_object_properties_equal(["first"], WithProperties())


def test_assert_contains_instance_of():
    assert_contains_instance_of(int, [1, 2, 3])
    assert_contains_instance_of(int, [])
    with pytest.raises(AssertionError, match="is an instance of `int`"):
        assert_contains_instance_of(int, [1, "2"])
    with pytest.raises(AssertionError, match="is iterable"):
        assert_contains_instance_of(str, "abc")


def test_assert_same_methods():
    assert_same_methods(FirstClass, SecondClass)
    assert_same_methods(FirstClass(), SecondClass)
    with pytest.raises(AssertionError, match="have the same methods"):
        assert_same_methods(FirstClass, ThirdClass)


def test_predicate_assertions():
    assert_is_html("<b>bold</b>")
    assert_is_json('{"a": 1}')
    assert_is_positive("3")
    assert_is_url("https://example.com")

    with pytest.raises(AssertionError):
        assert_is_html("plain")
    with pytest.raises(AssertionError):
        assert_is_json("{a}")
    with pytest.raises(AssertionError):
        assert_is_positive(-3)
    with pytest.raises(AssertionError):
        assert_is_url("example.com")
