"""Linting for generated commit subjects."""

from .config import COMMIT_SUBJECT_RE


def lint_git_commit_subject(subject):
    """
    Validate a git commit subject line.

    Raises ValueError if validation fails.
    """
    lines = (subject or "").splitlines()
    first_line = lines[0] if lines else ""
    if not COMMIT_SUBJECT_RE.match(first_line):
        raise ValueError("Commit subject must match the format: <type>(<scope>): <subject>")
    if first_line.endswith("."):
        raise ValueError("Commit subject must not end with a period")
