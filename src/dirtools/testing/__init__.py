"""Assertion helpers for testing code that works with the filesystem."""

from .assertions import (
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

__all__ = [
    "assert_array_keys_equal",
    "assert_contains_instance_of",
    "assert_directory_exists",
    "assert_directory_not_exists",
    "assert_exception",
    "assert_file_exists",
    "assert_file_extension",
    "assert_file_mime",
    "assert_file_not_exists",
    "assert_file_perms",
    "assert_image_size",
    "assert_is_html",
    "assert_is_json",
    "assert_is_list_not_empty",
    "assert_is_positive",
    "assert_is_url",
    "assert_object_properties_equal",
    "assert_same_methods",
]
