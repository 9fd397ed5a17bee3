# hub/registry.py
# Known Code63 apps. Preferred format is a plain YAML/JSON list; the legacy
# TypeScript registry is still read textually.

import json
import re
from pathlib import Path

import yaml

MARKER = "REGISTERED_APPS: string[] = ["
END = "];"
SLUG_PATTERN = re.compile(r"'([a-z0-9-]+)'")
YAML_SUFFIXES = {".yaml", ".yml"}


def parse_document(text, as_json=False):
    data = json.loads(text) if as_json else yaml.safe_load(text)
    if isinstance(data, dict):
        data = data.get("apps")
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("registry must be a list of slugs or a mapping with an 'apps' list")
    return [item for item in data if isinstance(item, str)]


def extract_slugs(source):
    start = source.find(MARKER)
    if start == -1:
        return []
    section = source[start:]
    end = section.find(END)
    if end != -1:
        section = section[:end]
    return SLUG_PATTERN.findall(section)


def dedupe(slugs):
    seen = set()
    out = []
    for s in slugs:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def load_registry(path, warnings=None):
    if warnings is None:
        warnings = []
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
        suffix = path.suffix.lower()
        if suffix == ".json":
            slugs = parse_document(text, as_json=True)
        elif suffix in YAML_SUFFIXES:
            slugs = parse_document(text)
        else:
            slugs = extract_slugs(text)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValueError) as e:
        msg = f"Could not read registry {path}: {e}"
        print(msg)
        warnings.append(msg)
        return []

    slugs = dedupe(slugs)
    print(f"Found {len(slugs)} registry apps")
    return slugs
