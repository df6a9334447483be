class ExtractionError(Exception):
    """Raised when strings cannot be extracted from a file.

    The underlying error (read, write or rename failure) is kept as
    ``__cause__``.
    """

    def __init__(self, message='Unable to extract strings.'):
        super().__init__(message)


class ConfigurationError(ExtractionError):
    pass


class InvalidResourceFileError(ExtractionError):
    """The target exists but does not look like a string resource file."""

    def __init__(self, path):
        super().__init__(f'{path} exists and is not a string resource file')
        self.path = path
