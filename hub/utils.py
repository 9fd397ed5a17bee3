# hub/utils.py
from hub.config import HOSTING_SUFFIX


def format_name(slug: str) -> str:
    """"bar-app" -> "Bar App". Empty segments are kept, so "a--b" gives "A  B"."""
    return " ".join(part[:1].upper() + part[1:] for part in slug.split("-"))


def default_domain(slug: str, suffix: str = HOSTING_SUFFIX) -> str:
    return f"{slug}.{suffix}"


def on_suffix(host: str, suffix: str = HOSTING_SUFFIX) -> bool:
    host = host.lower().rstrip(".")
    return host == suffix or host.endswith("." + suffix)


def https_url(domain: str) -> str:
    if domain.startswith("https://"):
        return domain
    if domain.startswith("http://"):
        domain = domain[len("http://"):]
    return "https://" + domain.strip("/")
