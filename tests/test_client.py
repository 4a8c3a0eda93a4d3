import pytest
import requests
import responses

from portal2boards.client import (
    API_URL,
    DEFAULT_USER_AGENT,
    AggregatedMode,
    BoardsError,
    Client,
)

OVERALL_URL = "https://board.iverb.me/aggregated/overall/json"

AGGREGATED_BODY = {
    "Points": {
        "11": {
            "userData": {"boardname": "alice", "avatar": "a.png"},
            "scoreData": {"score": 100, "playerRank": 1, "scoreRank": 1},
        }
    },
    "Times": {},
}


def test_default_user_agent():
    with Client() as client:
        assert client.user_agent == DEFAULT_USER_AGENT
        assert client.api == API_URL


def test_custom_user_agent_is_prefixed():
    with Client("MyTool/2.0") as client:
        assert client.user_agent == f"MyTool/2.0 {DEFAULT_USER_AGENT}"


def test_get_aggregated_overall():
    with responses.RequestsMock() as rsps, Client("Tool") as client:
        rsps.add(responses.GET, OVERALL_URL, json=AGGREGATED_BODY, status=200)
        result = client.get_aggregated(AggregatedMode.OVERALL)
        assert result.points[11].user_data.board_name == "alice"
        assert result.times == {}
        assert rsps.calls[0].request.headers["User-Agent"] == client.user_agent


@pytest.mark.parametrize(
    "mode, path",
    [(AggregatedMode.SINGLE_PLAYER, "sp"), (AggregatedMode.COOPERATIVE, "coop")],
)
def test_get_aggregated_paths(mode, path):
    url = f"{API_URL}/aggregated/{path}/json"
    with responses.RequestsMock() as rsps, Client() as client:
        rsps.add(responses.GET, url, json={"Points": {}, "Times": {}})
        result = client.get_aggregated(mode)
        assert result.points == {}
        assert rsps.calls[0].request.url == url


def test_get_aggregated_chapter_is_rejected():
    with Client() as client:
        with pytest.raises(ValueError):
            client.get_aggregated(AggregatedMode.CHAPTER)


def test_get_chamber():
    url = f"{API_URL}/chamber/47458/json"
    body = {"5": {"scoreData": {"score": "1800"}, "userData": {"boardname": "bob"}}}
    with responses.RequestsMock() as rsps, Client() as client:
        rsps.add(responses.GET, url, json=body)
        chamber = client.get_chamber(47458)
        assert chamber.id == 47458
        assert chamber.entries[5].score.score == 1800
        assert chamber.entries[5].user.board_name == "bob"


def test_non_200_raises_with_status():
    with responses.RequestsMock() as rsps, Client() as client:
        rsps.add(responses.GET, OVERALL_URL, status=404)
        with pytest.raises(BoardsError) as info:
            client.get_aggregated(AggregatedMode.OVERALL)
        assert info.value.status_code == 404


def test_transport_error_raises():
    with responses.RequestsMock() as rsps, Client() as client:
        rsps.add(responses.GET, OVERALL_URL, body=requests.ConnectionError("down"))
        with pytest.raises(BoardsError) as info:
            client.get_aggregated(AggregatedMode.OVERALL)
        assert info.value.status_code is None


def test_invalid_json_raises():
    with responses.RequestsMock() as rsps, Client() as client:
        rsps.add(responses.GET, OVERALL_URL, body="not json", status=200)
        with pytest.raises(BoardsError):
            client.get_aggregated(AggregatedMode.OVERALL)