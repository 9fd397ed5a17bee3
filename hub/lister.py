# hub/lister.py
from hub.config import DOMAIN_OVERRIDES, EXCLUDED_SLUGS, HOSTING_SUFFIX
from hub.utils import default_domain, format_name, https_url, on_suffix


def project_aliases(project):
    """Alias hostnames of a project record, in the order the API lists them."""
    raw = project.get("alias")
    if not isinstance(raw, list) or not raw:
        targets = project.get("targets")
        production = targets.get("production") if isinstance(targets, dict) else None
        raw = production.get("alias") if isinstance(production, dict) else None
    if not isinstance(raw, list):
        return []

    hosts = []
    for a in raw:
        host = a.get("domain") if isinstance(a, dict) else a
        if isinstance(host, str) and host:
            hosts.append(host)
    return hosts


def resolve_domain(slug, aliases, overrides=DOMAIN_OVERRIDES, suffix=HOSTING_SUFFIX):
    if slug in overrides:
        return overrides[slug]
    if aliases:
        for host in aliases:
            if not on_suffix(host, suffix):
                return host
        return aliases[0]
    return default_domain(slug, suffix)


def build_entry(project, overrides=DOMAIN_OVERRIDES, suffix=HOSTING_SUFFIX):
    slug = project["name"]
    domain = resolve_domain(slug, project_aliases(project), overrides, suffix)
    entry = {"name": format_name(slug), "url": https_url(domain), "slug": slug}
    updated = project.get("updatedAt")
    if isinstance(updated, (int, float)) and not isinstance(updated, bool):
        entry["updatedAt"] = updated
    return entry


def _updated_key(entry):
    value = entry.get("updatedAt")
    return float("-inf") if value is None else value


def list_apps(projects, excluded=EXCLUDED_SLUGS, overrides=DOMAIN_OVERRIDES, suffix=HOSTING_SUFFIX):
    """Excluded slugs are dropped, the rest sorted newest first.

    Entries without updatedAt go last; sorted() is stable so ties keep the
    source order.
    """
    apps = []
    for p in projects:
        slug = p.get("name") if isinstance(p, dict) else None
        if not isinstance(slug, str) or not slug:
            print(f"Skipping project without a name: {p!r}")
            continue
        if slug in excluded:
            continue
        apps.append(build_entry(p, overrides, suffix))
    return sorted(apps, key=_updated_key, reverse=True)
