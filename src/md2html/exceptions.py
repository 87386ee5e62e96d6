"""Custom exceptions for md2html."""


class Md2HtmlError(Exception):
    """Base exception for md2html operations."""


class SourceError(Md2HtmlError):
    """Error while reading the Markdown source."""


class SourceNotFoundError(SourceError):
    """Markdown source does not exist."""


class SourceReadError(SourceError):
    """Markdown source exists but could not be read."""


class SinkError(Md2HtmlError):
    """Error while writing the HTML output."""


class SinkNotWritableError(SinkError):
    """HTML output could not be opened for writing."""


class SinkWriteError(SinkError):
    """Writing to an opened HTML output failed."""
