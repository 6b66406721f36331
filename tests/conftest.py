import subprocess
from pathlib import Path

import pytest

import gai as ag


@pytest.fixture
def tmp_git_repo(tmp_path):
    """Create a temporary git repository with user config set."""
    repo = tmp_path / "repo"
    repo.mkdir()

    def git(*args):
        subprocess.check_call(["git", "-C", str(repo), *args])

    git("init", "-q")
    git("config", "user.email", "test@example.com")
    git("config", "user.name", "Test User")
    git("config", "commit.gpgsign", "false")
    return repo, git


@pytest.fixture(autouse=True)
def clear_openai_key(monkeypatch):
    """Ensure OPENAI_API_KEY is absent during tests."""
    # setenv first so values written by load_dotenv are undone afterwards
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.delenv("OPENAI_API_KEY")
    return


@pytest.fixture
def write_file():
    def _write(base: Path, name: str, content: str = "sample"):
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


class FakeVCS(ag.VersionControl):
    def __init__(self, diff="+add foo()\n", is_repo=True, commit_error=None):
        self.diff = diff
        self._is_repo = is_repo
        self.commit_error = commit_error
        self.commits = []

    def is_repo(self):
        return self._is_repo

    def staged_diff(self):
        if not self._is_repo:
            raise ag.NotARepositoryError("Not inside a git repository")
        if not self.diff:
            raise ag.EmptyDiffError("No staged changes found.")
        return self.diff

    def commit(self, message):
        if self.commit_error:
            raise ag.CommitError(self.commit_error)
        self.commits.append(message)


class FakeProvider(ag.CompletionProvider):
    def __init__(self, status_code=200, text=""):
        self.response = ag.RawResponse(status_code=status_code, text=text)
        self.requests = []

    def complete(self, request):
        self.requests.append(request)
        return self.response


@pytest.fixture
def fake_vcs():
    return FakeVCS()


@pytest.fixture
def make_provider():
    return FakeProvider


@pytest.fixture
def settings():
    return ag.Settings(api_key="sk-test", model="gpt-4.1-nano", temperature=1.0)


@pytest.fixture
def make_vcs():
    return FakeVCS
