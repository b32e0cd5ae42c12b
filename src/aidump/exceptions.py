class ConfigError(Exception):
    """
    Exception raised when a configuration file cannot be read or parsed.

    A configuration file that parses but omits expected keys is not an error; this
    exception covers missing explicit config files and invalid JSON syntax.

    Attributes:
        path (str): Path to the offending configuration file.
        reason (str): Description of what went wrong.

    Example:
        >>> error = ConfigError("ai.json", "Expecting value: line 1 column 1 (char 0)")
        >>> str(error)
        'Invalid configuration file ai.json: Expecting value: line 1 column 1 (char 0)'
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the config path and the failure reason.

        Args:
            path (str): Path to the configuration file.
            reason (str): Description of the failure.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration file {path}: {reason}")


class RootDirectoryError(Exception):
    """
    Exception raised when the project root does not exist or is not a directory.

    Example:
        >>> str(RootDirectoryError("/no/such/dir"))
        'Invalid directory: /no/such/dir'
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Invalid directory: {path}")


class OutputSinkError(Exception):
    """
    Exception raised when the output destination cannot be opened for writing.

    Example:
        >>> str(OutputSinkError("/readonly/out.txt"))
        'Could not open file for writing: /readonly/out.txt'
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Could not open file for writing: {path}")
