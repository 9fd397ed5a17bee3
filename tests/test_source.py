import requests

from hub.source import fetch_projects, load_projects


class FakeResponse:
    def __init__(self, body, status=200):
        self.body = body
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.body


class FakeSession:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "params": dict(params)})
        r = self.responses.pop(0)
        if isinstance(r, Exception):
            raise r
        return r


def test_follows_cursor_until_absent():
    session = FakeSession([
        FakeResponse({"projects": [{"name": "a"}], "pagination": {"next": 111}}),
        FakeResponse({"projects": [{"name": "b"}], "pagination": {"next": None}}),
    ])
    projects = fetch_projects("tok", base="https://api.test/projects", session=session)

    assert [p["name"] for p in projects] == ["a", "b"]
    assert session.calls[0]["params"] == {"limit": 100}
    assert session.calls[1]["params"] == {"limit": 100, "until": 111}
    assert session.calls[0]["headers"]["Authorization"] == "Bearer tok"


def test_team_id_passed():
    session = FakeSession([FakeResponse({"projects": []})])
    fetch_projects("tok", team_id="team_1", session=session)
    assert session.calls[0]["params"]["teamId"] == "team_1"


def test_no_token_gives_empty_list():
    warnings = []
    assert load_projects(None, warnings=warnings) == []
    assert len(warnings) == 1


def test_failed_second_page_discards_everything():
    session = FakeSession([
        FakeResponse({"projects": [{"name": "a"}], "pagination": {"next": 1}}),
        FakeResponse({}, status=500),
    ])
    warnings = []
    assert load_projects("tok", warnings=warnings, session=session) == []
    assert "500" in warnings[0]


def test_network_error_gives_empty_list():
    session = FakeSession([requests.ConnectionError("down")])
    assert load_projects("tok", session=session) == []


def test_malformed_body_gives_empty_list():
    session = FakeSession([FakeResponse(["not", "an", "object"])])
    warnings = []
    assert load_projects("tok", warnings=warnings, session=session) == []
    assert warnings


def test_non_dict_project_gives_empty_list():
    session = FakeSession([FakeResponse({"projects": [None, {"name": "ok"}]})])
    warnings = []
    assert load_projects("tok", warnings=warnings, session=session) == []
    assert warnings


def test_non_string_name_gives_empty_list():
    session = FakeSession([FakeResponse({"projects": [{"name": 42}]})])
    assert load_projects("tok", session=session) == []


def test_non_dict_pagination_gives_empty_list():
    session = FakeSession([FakeResponse({"projects": [{"name": "a"}], "pagination": ["x"]})])
    warnings = []
    assert load_projects("tok", warnings=warnings, session=session) == []
    assert "pagination" in warnings[0]


def test_null_pagination_ends_loop():
    session = FakeSession([FakeResponse({"projects": [{"name": "a"}], "pagination": None})])
    assert [p["name"] for p in load_projects("tok", session=session)] == ["a"]
