import json

import pytest

import gai as ag

FOO_BODY = json.dumps(
    {"choices": [{"message": {"role": "assistant", "content": '"feat: add foo function"'}}]}
)


def test_select_mode():
    assert ag.select_mode() == "help"
    assert ag.select_mode(generate=True) == "generate"
    assert ag.select_mode(commit=True) == "commit"
    assert ag.select_mode(generate=True, commit=True) == "commit"


def test_generate_returns_message_without_committing(settings, fake_vcs, make_provider):
    provider = make_provider(200, FOO_BODY)

    message = ag.run_pipeline("generate", settings, vcs=fake_vcs, provider=provider)

    assert message == "feat: add foo function"
    assert fake_vcs.commits == []
    (request,) = provider.requests
    assert request.model == settings.model
    assert "+add foo()\n" in request.turns[1].content


def test_commit_mode_commits_clean_message(settings, fake_vcs, make_provider):
    message = ag.run_pipeline(
        "commit", settings, vcs=fake_vcs, provider=make_provider(200, FOO_BODY)
    )
    assert message == "feat: add foo function"
    assert fake_vcs.commits == ["feat: add foo function"]


def test_help_mode_does_nothing(settings, fake_vcs, make_provider):
    provider = make_provider(200, FOO_BODY)
    assert ag.run_pipeline("help", settings, vcs=fake_vcs, provider=provider) is None
    assert provider.requests == []


def test_empty_diff_fails_before_network(settings, make_vcs, make_provider):
    provider = make_provider(200, FOO_BODY)
    with pytest.raises(ag.RepositoryError):
        ag.run_pipeline("generate", settings, vcs=make_vcs(diff=""), provider=provider)
    assert provider.requests == []


def test_not_a_repository_fails_before_network(settings, make_vcs, make_provider):
    provider = make_provider(200, FOO_BODY)
    with pytest.raises(ag.NotARepositoryError):
        ag.run_pipeline("commit", settings, vcs=make_vcs(is_repo=False), provider=provider)
    assert provider.requests == []


def test_api_failure_skips_commit(settings, fake_vcs, make_provider):
    provider = make_provider(401, '{"error":{"message":"invalid api key"}}')
    with pytest.raises(ag.ApiRequestFailed, match="invalid api key"):
        ag.run_pipeline("commit", settings, vcs=fake_vcs, provider=provider)
    assert fake_vcs.commits == []


def test_no_choices_is_reported(settings, fake_vcs, make_provider):
    provider = make_provider(200, '{"choices":[],"error":null}')
    with pytest.raises(ag.NoChoicesError):
        ag.run_pipeline("commit", settings, vcs=fake_vcs, provider=provider)
    assert fake_vcs.commits == []


def test_commit_failure_propagates(settings, make_vcs, make_provider):
    vcs = make_vcs(commit_error="pre-commit hook failed")
    with pytest.raises(ag.CommitError, match="pre-commit hook failed"):
        ag.run_pipeline("commit", settings, vcs=vcs, provider=make_provider(200, FOO_BODY))


def test_on_request_called_before_network(settings, fake_vcs, make_provider):
    events = []
    provider = make_provider(200, FOO_BODY)
    original = provider.complete

    def complete(request):
        events.append("request")
        return original(request)

    provider.complete = complete
    ag.generate_commit_message(
        settings, vcs=fake_vcs, provider=provider, on_request=lambda: events.append("spinner")
    )
    assert events == ["spinner", "request"]


def test_non_conventional_message_logs_warning(settings, fake_vcs, make_provider, caplog):
    body = json.dumps({"choices": [{"message": {"role": "assistant", "content": "Added foo"}}]})
    with caplog.at_level("WARNING", logger="gai.pipeline"):
        message = ag.generate_commit_message(
            settings, vcs=fake_vcs, provider=make_provider(200, body)
        )
    assert message == "Added foo"
    assert "not a conventional commit" in caplog.text


def test_unknown_mode_rejected(settings, fake_vcs, make_provider):
    with pytest.raises(ValueError):
        ag.run_pipeline("push", settings, vcs=fake_vcs, provider=make_provider())
