"""Configuration constants and settings for gai."""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"

DEFAULT_MODEL = "gpt-4.1-nano"
DEFAULT_TEMPERATURE = 1.0
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0

OPENAI_BASE_URL = "https://api.openai.com/v1"

COMMIT_TYPES = (
    "feat", "fix", "docs", "style", "refactor", "test", "chore", "perf", "ci", "build", "revert"
)

COMMIT_SUBJECT_RE = re.compile(
    r"^(feat|fix|docs|style|refactor|test|chore|perf|ci|build|revert)(\(.+\))?!?: .+$"
)


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, built once at startup and passed to the pipeline."""

    api_key: str
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE


def load_env_file(path=None):
    """
    Load a .env file into the process environment.

    Without `path`, the nearest .env in the working directory or one of its
    parents is used, so running from a subdirectory of a repository still
    picks up the file at its root.

    Variables already present in the environment take precedence over the file.
    Returns True if a file was found and loaded.
    """
    if path is None:
        path = find_dotenv(usecwd=True)
        if not path:
            return False
    env_path = Path(path)
    if not env_path.is_file():
        return False
    load_dotenv(dotenv_path=env_path, override=False)
    logger.debug("Loaded environment variables from %s", env_path)
    return True


def require_api_key(environ=None):
    """
    Return the OpenAI API key from the environment.

    Raises ConfigurationError if it is missing or blank.
    """
    environ = os.environ if environ is None else environ
    api_key = (environ.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigurationError(
            f"{API_KEY_ENV} not found. Please set it in your .env file or environment variables."
        )
    return api_key


def load_settings(model=DEFAULT_MODEL, temperature=DEFAULT_TEMPERATURE, environ=None):
    """Build Settings from the environment plus command-line overrides."""
    return Settings(
        api_key=require_api_key(environ),
        model=model,
        temperature=float(temperature),
    )
