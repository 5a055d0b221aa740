"""Exceptions raised while reading E-utilities XML documents."""


class ParsingError(Exception):
    """Base exception for XML documents that cannot be turned into records."""

    def __init__(self, message: str, root_tag: str | None = None):
        self.root_tag = root_tag
        super().__init__(message)


class MalformedDocumentError(ParsingError):
    """Raised when the input is not well-formed XML."""

    pass


class MissingRootError(ParsingError):
    """Raised when a well-formed document has no element with the expected root tag."""

    def __init__(self, root_tag: str):
        super().__init__(
            f"No <{root_tag}> element found in document", root_tag=root_tag
        )


class InvalidRecordError(ParsingError):
    """Raised when element values cannot be converted into a record's fields."""
