"""gai: AI-powered git commit messages."""

# Re-export the public API for library-style usage (and tests).
from .ai import (  # noqa: F401
    ChatTurn,
    CompletionProvider,
    CompletionRequest,
    OpenAIProvider,
    RawResponse,
    build_request,
    get_openai_client,
    normalize_message,
    parse_completion,
    validate_response,
)
from .cli import cli, main
from .config import Settings, __version__, load_settings, require_api_key
from .errors import (  # noqa: F401
    ApiError,
    ApiRequestFailed,
    CommitError,
    ConfigurationError,
    EmptyDiffError,
    EmptyMessageError,
    GaiError,
    MalformedResponse,
    NoChoicesError,
    NotARepositoryError,
    RepositoryError,
    TransportError,
)
from .git import GitCLI, VersionControl, run  # noqa: F401
from .pipeline import generate_commit_message, select_mode
from .pipeline import run as run_pipeline
from .ui import display_spinning_animation, format_generated_message  # noqa: F401
from .validation import lint_git_commit_subject  # noqa: F401

__all__ = [
    "__version__",
    # CLI
    "cli",
    "main",
    # Config
    "Settings",
    "load_settings",
    "require_api_key",
    # Git
    "run",
    "VersionControl",
    "GitCLI",
    # AI
    "ChatTurn",
    "CompletionRequest",
    "build_request",
    "RawResponse",
    "CompletionProvider",
    "OpenAIProvider",
    "get_openai_client",
    "normalize_message",
    "parse_completion",
    "validate_response",
    # Pipeline
    "select_mode",
    "generate_commit_message",
    "run_pipeline",
    # Validation/UI
    "lint_git_commit_subject",
    "display_spinning_animation",
    "format_generated_message",
    # Errors
    "GaiError",
    "ConfigurationError",
    "RepositoryError",
    "NotARepositoryError",
    "EmptyDiffError",
    "TransportError",
    "ApiRequestFailed",
    "MalformedResponse",
    "ApiError",
    "NoChoicesError",
    "EmptyMessageError",
    "CommitError",
]
