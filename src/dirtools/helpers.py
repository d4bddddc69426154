"""General purpose string, type and object helpers."""

import inspect
import json
import math
import re
import shutil
import unicodedata
import warnings
from html.parser import HTMLParser
from numbers import Number, Real
from typing import Any, Iterable, List, Optional, Sequence
from urllib.parse import urlsplit

from dirtools.exceptions import BadMethodCallError


class _TagStripper(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.parts: List[str] = []

    def handle_data(self, data: str) -> None:
        self.parts.append(data)

    def handle_entityref(self, name: str) -> None:
        self.parts.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self.parts.append(f"&#{name};")


def strip_tags(string: str) -> str:
    """Remove HTML tags from a string, leaving the text between them.

    Example:
        >>> strip_tags("<b>bold</b> text")
        'bold text'
    """
    stripper = _TagStripper()
    stripper.feed(string)
    stripper.close()
    return "".join(stripper.parts)


def is_html(string: str) -> bool:
    """Check if a string is HTML, i.e. if it contains at least one tag.

    Example:
        >>> is_html("<b>string</b>")
        True
        >>> is_html("string")
        False
    """
    return string.lower() != strip_tags(string).lower()


def is_json(string: str) -> bool:
    """Check if a string is valid JSON.

    Example:
        >>> is_json('{"a": 1}')
        True
        >>> is_json("{a: 1}")
        False
    """
    try:
        json.loads(string)
    except (TypeError, ValueError):
        return False
    return True


def is_positive(value: Any) -> bool:
    """Check if a value is a positive whole number, given as a number or a numeric string.

    Example:
        >>> is_positive(1), is_positive("2"), is_positive("1.0")
        (True, True, True)
        >>> is_positive(0), is_positive(-1), is_positive(1.5), is_positive("a")
        (False, False, False, False)
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return False
    if not isinstance(value, Real) or not math.isfinite(value):
        return False
    return bool(value > 0 and value == round(value))


def is_stringable(value: Any) -> bool:
    """Check if a value can be meaningfully converted to a string.

    Scalars (strings, numbers, booleans, bytes) are stringable, ``None`` is not, and
    other objects are stringable when their class defines its own ``__str__``.

    Example:
        >>> is_stringable("a"), is_stringable(1.5), is_stringable(None)
        (True, True, False)
        >>> is_stringable(object())
        False
    """
    if value is None:
        return False
    if isinstance(value, (str, bytes, bool, Number)):
        return True
    return type(value).__str__ is not object.__str__


def is_url(string: str) -> bool:
    """Check if a string is an absolute URL with a scheme and a host.

    Example:
        >>> is_url("http://google.com")
        True
        >>> is_url("google.com")
        False
    """
    try:
        parts = urlsplit(string)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)


def objects_map(objects: Iterable[Any], method: str, args: Sequence[Any] = ()) -> List[Any]:
    """Call a method on every object and collect the return values.

    Args:
        objects: The objects. Each one must have the method.
        method: Name of the method to call.
        args: Positional arguments for the method.

    Returns:
        The values returned by each call, in order.

    Raises:
        BadMethodCallError: If an object does not have the method.

    Example:
        >>> objects_map(["a", "b"], "upper")
        ['A', 'B']
        >>> objects_map(["a,b"], "split", [","])
        [['a', 'b']]
    """
    results = []
    for obj in objects:
        func = getattr(obj, method, None)
        if not callable(func):
            raise BadMethodCallError(type(obj).__name__, method)
        results.append(func(*args))
    return results


def slug(string: str, lower_case: bool = True) -> str:
    """Get a slug from a string.

    Underscores, double slashes, backslashes, quotes and spaces become dashes, the
    result is transliterated to ASCII and non-printable characters are dropped.

    Example:
        >>> slug("Hello World")
        'hello-world'
        >>> slug("Perché_Così", lower_case=False)
        'Perche-Cosi'
    """
    for search in ("_", "//", "\\", "'", " "):
        string = string.replace(search, "-")
    string = unicodedata.normalize("NFKD", string).encode("ascii", "ignore").decode("ascii")
    string = "".join(char for char in string if char.isprintable())
    return string.lower() if lower_case else string


def string_starts_with(haystack: str, needle: str) -> bool:
    """Check if a string starts with another string."""
    return haystack.startswith(needle)


def string_ends_with(haystack: str, needle: str) -> bool:
    """Check if a string ends with another string. An empty needle always matches."""
    return haystack.endswith(needle)


def string_contains(haystack: str, needle: str) -> bool:
    """Check if a string contains another string."""
    return needle in haystack


def uncamelcase(string: str) -> str:
    """Turn a camel case string into a snake case one.

    Example:
        >>> uncamelcase("thisIsAString")
        'this_is_a_string'
        >>> uncamelcase("ThisIsAString")
        'this_is_a_string'
    """
    string = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", string)
    string = re.sub(r"([^_])([A-Z][a-z])", r"\1_\2", string)
    return string.lower()


def which(command: str) -> Optional[str]:
    """Get the full path of a shell command, or None if it cannot be found.

    Example:
        >>> which("sh")  # doctest: +SKIP
        '/usr/bin/sh'
    """
    return shutil.which(command)


def get_child_methods(cls: type) -> List[str]:
    """Get the names of the methods a class defines itself, excluding inherited ones.

    Only the methods of the direct parent class are subtracted, and private names
    (with a leading underscore) are left out.

    Example:
        >>> class Parent:
        ...     def first(self): pass
        >>> class Child(Parent):
        ...     def second(self): pass
        >>> get_child_methods(Child)
        ['second']
    """
    methods = [name for name, _ in inspect.getmembers(cls, callable) if not name.startswith("_")]
    parent = cls.__mro__[1] if len(cls.__mro__) > 1 else None
    if parent is not None and parent is not object:
        parent_methods = set(name for name, _ in inspect.getmembers(parent, callable))
        methods = [name for name in methods if name not in parent_methods]
    return methods


def get_class_short_name(obj: Any) -> str:
    """Get the short name of a class (the part without the module path).

    Args:
        obj: A class or an instance.

    Example:
        >>> get_class_short_name(ValueError("x"))
        'ValueError'
        >>> get_class_short_name(dict)
        'dict'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    return cls.__qualname__.rsplit(".", 1)[-1]


def deprecation_warning(message: str, stacklevel: int = 2) -> None:
    """Emit a DeprecationWarning pointing at the caller of the deprecated code.

    Args:
        message: The deprecation message.
        stacklevel: Frame the warning is attributed to, counted from this function.
            The default blames the caller of the function that calls this one.
    """
    warnings.warn(message, DeprecationWarning, stacklevel=stacklevel + 1)
