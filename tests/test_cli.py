import math

import pytest
import requests
from click.testing import CliRunner

from leetcode_py import cli as cli_module
from leetcode_py.cli import cli
from leetcode_py.client import (
    Contest,
    ContestQuestionStub,
    ParseError,
    Problem,
    UserIdentity,
)
from leetcode_py.client.parser import parse_problem_and_question


class FakeClient:
    """Replaces LeetCodeClient; attributes set per test are returned by the calls."""

    user = None
    daily = 1
    tags = []
    contest = None
    problems = []
    detail = None
    error = None
    registered = []

    def __init__(self):
        self.saved = None

    def _result(self, value):
        if self.error is not None:
            raise self.error
        return value

    def get_user_info(self):
        return self._result(self.user)

    def get_question_daily(self):
        return self._result(self.daily)

    def get_question_ids_by_tag(self, slug):
        return self._result(self.tags)

    def get_contest_info(self, slug):
        return self._result(self.contest)

    def register_contest(self, slug):
        type(self).registered.append(slug)
        return self._result(None)

    def get_problems(self, categories=None):
        return self._result(list(self.problems))

    def get_question_detail(self, slug):
        return self._result(self.detail)

    def save_credentials(self, csrftoken, session):
        self.saved = (csrftoken, session)


@pytest.fixture
def fake_client(monkeypatch):
    class Client(FakeClient):
        registered = []

    monkeypatch.setattr(cli_module, "LeetCodeClient", Client)
    return Client


@pytest.fixture
def runner():
    return CliRunner()


def test_user_not_logged_in(runner, fake_client):
    result = runner.invoke(cli, ["user"])
    assert result.exit_code == 0
    assert "Not logged in" in result.output


def test_user_logged_in(runner, fake_client):
    fake_client.user = UserIdentity("ann", True)
    result = runner.invoke(cli, ["user"])
    assert "ann" in result.output
    assert "yes" in result.output


def test_login_rejected(runner, fake_client):
    result = runner.invoke(cli, ["login", "--csrftoken", "a", "--session", "b"])
    assert result.exit_code == 1
    assert "Login failed" in result.output


def test_daily(runner, fake_client):
    fake_client.daily = 1823
    result = runner.invoke(cli, ["daily"])
    assert "1823" in result.output


def test_tag_empty(runner, fake_client):
    result = runner.invoke(cli, ["tag", "nothing"])
    assert result.exit_code == 0
    assert "No questions found" in result.output


def test_tag(runner, fake_client):
    fake_client.tags = ["1", "15"]
    result = runner.invoke(cli, ["tag", "array"])
    assert "1, 15" in result.output


def test_contest(runner, fake_client):
    fake_client.contest = Contest(
        id=1,
        duration=5400,
        start_time=0,
        title="Weekly Contest 293",
        title_slug="weekly-contest-293",
        is_virtual=False,
        contains_premium=False,
        registered=True,
        questions=(ContestQuestionStub(2273, 3, "Find Resultant Array", "find-resultant"),),
        skipped=("missing or invalid field: questions[1].credit",),
    )
    result = runner.invoke(cli, ["contest", "weekly-contest-293"])

    assert result.exit_code == 0
    assert "Weekly Contest 293" in result.output
    assert "2273" in result.output
    assert "1 question(s) could not be read" in result.output


def test_contest_register(runner, fake_client):
    fake_client.contest = Contest(1, 5400, 0, "Biweekly Contest 78", "biweekly-contest-78", False, False, True)
    result = runner.invoke(cli, ["contest", "biweekly-contest-78", "--register"])

    assert result.exit_code == 0
    assert fake_client.registered == ["biweekly-contest-78"]
    assert "Registered for biweekly-contest-78" in result.output
    assert "registered" in result.output


def test_contest_register_rejected(runner, fake_client):
    fake_client.error = requests.HTTPError("403 Forbidden")
    result = runner.invoke(cli, ["contest", "biweekly-contest-78", "--register"])

    assert result.exit_code == 1
    assert fake_client.registered == ["biweekly-contest-78"]
    assert "Request failed" in result.output


def test_problems(runner, fake_client):
    fake_client.problems = [
        Problem("algorithms", 2, 2, 2, False, "Add Two Numbers", 40.0, "add-two-numbers", False),
        Problem("algorithms", 1, 1, 1, False, "Two Sum", math.nan, "two-sum", False, status="ac"),
    ]
    result = runner.invoke(cli, ["problems", "algorithms"])

    assert result.exit_code == 0
    assert "Two Sum" in result.output
    assert "40.0%" in result.output
    assert result.output.index("Two Sum") < result.output.index("Add Two Numbers")


def test_show(runner, fake_client, question_response, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    fake_client.detail = parse_problem_and_question(question_response)
    result = runner.invoke(cli, ["show", "two-sum"])

    assert result.exit_code == 0
    assert "Two Sum" in result.output
    assert "Given an array of integers nums" in result.output
    assert "class Solution:" in result.output


def test_show_unknown_lang(runner, fake_client, question_response, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    fake_client.detail = parse_problem_and_question(question_response)
    result = runner.invoke(cli, ["show", "two-sum", "--lang", "rust"])
    assert "No template for rust" in result.output


def test_show_premium(runner, fake_client):
    result = runner.invoke(cli, ["show", "some-premium-question"])
    assert result.exit_code == 0
    assert "premium" in result.output


def test_parse_error_exits_non_zero(runner, fake_client):
    fake_client.error = ParseError("data.user")
    result = runner.invoke(cli, ["user"])
    assert result.exit_code == 1
    assert "Unexpected response from server" in result.output


def test_request_error_exits_non_zero(runner, fake_client):
    fake_client.error = requests.ConnectionError("boom")
    result = runner.invoke(cli, ["daily"])
    assert result.exit_code == 1
    assert "Request failed" in result.output


def test_set_lang(runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(cli, ["set-lang", "cpp"])

    assert result.exit_code == 0
    assert (tmp_path / ".leetcode_py.local").exists()
    assert cli_module.LocalConfig.load().default_lang == "cpp"
