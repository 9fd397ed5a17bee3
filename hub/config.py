# hub/config.py
# Build settings. Secrets come from the environment (GitHub Actions / Vercel).

import os
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

# --- HOSTING ---
API_BASE = "https://api.vercel.com/v9/projects"
HOSTING_SUFFIX = "vercel.app"
PAGE_LIMIT = 100
TIMEOUT = 20
HEADERS = {"User-Agent": "AppHubBuilder/1.0"}

# The hub itself is deployed on the same account
EXCLUDED_SLUGS = {"app-hub"}

# Default domain already taken by an unrelated project
DOMAIN_OVERRIDES = {
    "strategyforge": "strategyforge-meschelles-projects.vercel.app",
}

# --- FILES ---
TEMPLATE_PATH = ROOT / "index.html"
DIST_DIR = ROOT / "dist"
DEFAULT_REGISTRY = ROOT.parent / "code63-app" / "src" / "lib" / "app-registry.ts"


def get_token():
    return os.getenv("VERCEL_TOKEN") or None


def get_team_id():
    return os.getenv("VERCEL_TEAM_ID") or None


def get_registry_path():
    path = os.getenv("APP_HUB_REGISTRY")
    return Path(path) if path else DEFAULT_REGISTRY
