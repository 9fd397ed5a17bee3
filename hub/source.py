# hub/source.py
import requests

from hub.config import API_BASE, HEADERS, PAGE_LIMIT, TIMEOUT


def fetch_projects(token, team_id=None, base=API_BASE, session=None):
    """Fetch every project, one page at a time, following pagination.next.

    Raises on the first failed page: network error, non-2xx status or a body
    without a "projects" list.
    """
    http = session or requests.Session()
    headers = dict(HEADERS)
    headers["Authorization"] = f"Bearer {token}"

    projects = []
    cursor = None
    while True:
        params = {"limit": PAGE_LIMIT}
        if cursor is not None:
            params["until"] = cursor
        if team_id:
            params["teamId"] = team_id

        response = http.get(base, headers=headers, params=params, timeout=TIMEOUT)
        response.raise_for_status()
        data = response.json()

        if not isinstance(data, dict) or not isinstance(data.get("projects"), list):
            raise ValueError("unexpected response body, no 'projects' list")
        for p in data["projects"]:
            if not isinstance(p, dict) or not isinstance(p.get("name"), str):
                raise ValueError(f"unexpected project record: {p!r}")
        projects.extend(data["projects"])

        pagination = data.get("pagination")
        if pagination is None:
            return projects
        if not isinstance(pagination, dict):
            raise ValueError(f"unexpected pagination: {pagination!r}")
        cursor = pagination.get("next")
        if cursor is None:
            return projects


def load_projects(token, team_id=None, warnings=None, base=API_BASE, session=None):
    """Never fails: any problem gives an empty list and a logged warning."""
    if warnings is None:
        warnings = []

    if not token:
        msg = "VERCEL_TOKEN not set, skipping remote projects"
        print(msg)
        warnings.append(msg)
        return []

    try:
        projects = fetch_projects(token, team_id=team_id, base=base, session=session)
    except (requests.RequestException, ValueError) as e:
        msg = f"Could not fetch Vercel projects: {e}"
        print(msg)
        warnings.append(msg)
        return []

    print(f"Found {len(projects)} Vercel projects")
    return projects
