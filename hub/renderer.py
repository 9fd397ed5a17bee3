# hub/renderer.py
import json

from bs4 import BeautifulSoup

REGISTRY_PLACEHOLDER = "const CODE63_APPS = REGISTERED_APPS_PLACEHOLDER;"
APPS_PLACEHOLDER = "const VERCEL_APPS = VERCEL_APPS_PLACEHOLDER;"
PLACEHOLDERS = (REGISTRY_PLACEHOLDER, APPS_PLACEHOLDER)


def to_js(value):
    # "</" would close the surrounding <script>
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).replace("</", "<\\/")


def count_placeholders(template):
    return sum(template.count(p) for p in PLACEHOLDERS)


def placeholders_outside_scripts(template):
    soup = BeautifulSoup(template, "lxml")
    in_scripts = " ".join(s.get_text() for s in soup.find_all("script"))
    return [p for p in PLACEHOLDERS if p in template and p not in in_scripts]


def render(template, apps, registry_slugs, warnings=None):
    if warnings is None:
        warnings = []

    if not count_placeholders(template):
        msg = "Template has no app list placeholder, page written unchanged"
        print(msg)
        warnings.append(msg)
        return template

    for p in placeholders_outside_scripts(template):
        msg = f"Placeholder outside <script>: {p}"
        print(msg)
        warnings.append(msg)

    html = template.replace(REGISTRY_PLACEHOLDER, f"const CODE63_APPS = {to_js(registry_slugs)};")
    html = html.replace(APPS_PLACEHOLDER, f"const VERCEL_APPS = {to_js(apps)};")
    return html
