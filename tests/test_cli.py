"""Tests for the s2-recs command line and the demo driver."""

import json

import httpx
import pytest

from s2_recs import __version__
from s2_recs.cli import main as cli
from s2_recs.client import RecommendationClient
from s2_recs.demo import run_demo

BASE_URL = "https://api.semanticscholar.org/recommendations/v1"


@pytest.fixture
def fake_api(monkeypatch):
    """Route every RecommendationClient built by the CLI through a MockTransport."""
    state = {"status": 200, "body": {"recommendedPapers": [{"paperId": "p1", "title": "T"}]}, "requests": []}

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        return httpx.Response(state["status"], json=state["body"])

    def factory(base_url=None):
        return RecommendationClient(base_url=base_url or BASE_URL, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli, "RecommendationClient", factory)
    return state


def test_version(capsys):
    assert cli.main(["version"]) == 0
    assert capsys.readouterr().out.strip() == __version__


def test_forpaper_prints_json(fake_api, capsys):
    rc = cli.main(["forpaper", "ABC123", "--limit", "2", "--from", "recent"])

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == fake_api["body"]
    params = fake_api["requests"][0].url.params
    assert params["limit"] == "2"
    assert params["from"] == "recent"


def test_forpaper_failure_exit_code(fake_api, capsys):
    fake_api["status"] = 404
    rc = cli.main(["forpaper", "missing"])

    assert rc == 1
    assert capsys.readouterr().out == ""


def test_papers_positive_and_negative(fake_api, capsys):
    rc = cli.main(["papers", "--positive", "X", "W", "--negative", "Y", "--fields", "title"])

    assert rc == 0
    request = fake_api["requests"][0]
    assert json.loads(request.content) == {"positivePaperIds": ["X", "W"], "negativePaperIds": ["Y"]}
    assert request.url.params["fields"] == "title"


def test_base_url_override(fake_api):
    cli.main(["--base-url", "https://mirror.example.org/recs/v1", "forpaper", "ABC123"])
    assert fake_api["requests"][0].url.host == "mirror.example.org"


def test_demo_uses_supplied_ids(fake_api, capsys):
    rc = cli.main(["demo", "--seed", "S1", "--negative", "N1"])

    assert rc == 0
    requests = fake_api["requests"]
    assert [r.method for r in requests] == ["GET", "POST", "POST"]
    assert requests[0].url.path.endswith("/papers/forpaper/S1")
    assert requests[0].url.params["limit"] == "2"
    assert json.loads(requests[1].content) == {"positivePaperIds": ["S1"], "negativePaperIds": []}
    assert json.loads(requests[2].content) == {"positivePaperIds": ["S1"], "negativePaperIds": ["N1"]}

    out = capsys.readouterr().out
    assert "Single paper recommendations:" in out
    assert "Multiple positive and negative paperIds recommendations:" in out


def test_demo_exits_zero_when_every_call_fails(fake_api, capsys):
    fake_api["status"] = 500
    rc = cli.main(["demo"])

    assert rc == 0
    assert len(fake_api["requests"]) == 3
    assert "null" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_run_demo_defaults_from_settings(capsys):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"recommendedPapers": []})

    async with RecommendationClient(base_url=BASE_URL, transport=httpx.MockTransport(handler)) as recs:
        assert await run_demo(client=recs) == 0

    assert seen[0].url.path.endswith("/papers/forpaper/f9c602cc436a9ea2f9e7db48c77d924e09ce3c32")
    assert json.loads(seen[2].content)["negativePaperIds"] == ["271fb7332c613b7e36bf483a9cba2dcc768c96ea"]


def test_demo_exits_zero_on_redirect_loop(monkeypatch, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(302, headers={"Location": str(request.url)})

    def factory(base_url=None):
        return RecommendationClient(base_url=base_url or BASE_URL, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli, "RecommendationClient", factory)

    assert cli.main(["demo"]) == 0
    assert capsys.readouterr().out.count("null") == 3
