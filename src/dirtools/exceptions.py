class DirectoryNotFoundError(FileNotFoundError):
    """
    Exception raised when a directory walk is started on a path that is not a directory.

    Raised both when the path does not exist and when it exists but is something other
    than a directory. It subclasses FileNotFoundError so callers handling plain OS
    errors keep working.

    Attributes:
        path (str): The path that was expected to be a directory.

    Example:
        >>> error = DirectoryNotFoundError("/no/such/dir")
        >>> str(error)
        'The "/no/such/dir" directory does not exist'
        >>> isinstance(error, OSError)
        True
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the offending path.

        Args:
            path (str): The path that was expected to be a directory.
        """
        self.path = path
        super().__init__(f'The "{path}" directory does not exist')


class InvalidInputError(ValueError):
    """
    Exception raised when a helper receives an argument it cannot work with.

    Example:
        >>> error = InvalidInputError("Path cannot be empty")
        >>> str(error)
        'Path cannot be empty'
    """

    pass


class BadMethodCallError(AttributeError):
    """
    Exception raised when an object is asked to run a method it does not have.

    Attributes:
        class_name (str): Name of the class of the object.
        method (str): Name of the missing method.

    Example:
        >>> error = BadMethodCallError("Foo", "bar")
        >>> str(error)
        'Class `Foo` does not have a method `bar`'
    """

    def __init__(self, class_name: str, method: str) -> None:
        self.class_name = class_name
        self.method = method
        super().__init__(f"Class `{class_name}` does not have a method `{method}`")


class ConfigurationError(RuntimeError):
    """Exception raised when a required configuration value has not been set."""

    pass
