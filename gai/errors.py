"""Exception types raised by gai.

Every failure surfaces to the command line as one of these. Lower-level
exceptions are attached as ``__cause__`` so the full chain can be reported.
"""


class GaiError(Exception):
    """Base class for all gai failures."""


class ConfigurationError(GaiError):
    """Required configuration (the API key) is missing."""


class RepositoryError(GaiError):
    """The staged diff could not be obtained."""


class GitExecutionError(RepositoryError):
    """The git executable could not be run."""


class NotARepositoryError(RepositoryError):
    """The working directory is not inside a git work tree."""


class EmptyDiffError(RepositoryError):
    """Nothing is staged."""


class DiffEncodingError(RepositoryError):
    """The diff output is not valid UTF-8."""


class TransportError(GaiError):
    """The API could not be reached."""


class ApiRequestFailed(GaiError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, status_code, body):
        super().__init__(f"API request failed: {body}")
        self.status_code = status_code
        self.body = body


class MalformedResponse(GaiError):
    """The response body does not have the expected shape."""


class ApiError(GaiError):
    """The response body carries an error object."""

    def __init__(self, message):
        super().__init__(f"OpenAI API error: {message}")
        self.api_message = message


class NoChoicesError(GaiError):
    """The response contains no choices."""


class EmptyMessageError(GaiError):
    """The generated message is empty once cleaned up."""


class CommitError(GaiError):
    """git commit exited with a non-zero status."""

    def __init__(self, stderr):
        super().__init__(f"Commit failed: {stderr}")
        self.stderr = stderr


def format_error_chain(exc):
    """Join an exception and its causes into a single line."""
    parts = []
    seen = set()
    current = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = str(current).strip()
        if text and text not in parts:
            parts.append(text)
        current = current.__cause__
    return ": ".join(parts) or exc.__class__.__name__
