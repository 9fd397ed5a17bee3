# hub/report.py
# build-report.html: what went into the page and what went wrong.
from datetime import datetime
from pathlib import Path

import markdown

TEMPLATE = """<!doctype html>
<html><head><meta charset="utf-8"><title>{title}</title>
<style>
body{{font-family: system-ui, -apple-system, "Segoe UI", Roboto, Arial; margin:24px; max-width:900px}}
h1{{color:#1a1a2e}}
h2{{color:#e94560}}
table{{border-collapse:collapse}}
td, th{{border:1px solid #e1e4e8;padding:4px 8px}}
</style></head><body>
{body}
</body></html>"""


def make_md(apps, registry_slugs, warnings):
    lines = ["# App hub build report\n"]
    lines.append(f"Built {datetime.now().isoformat(timespec='seconds')}\n")
    lines.append(f"- Registry apps : **{len(registry_slugs)}**")
    lines.append(f"- Vercel projects : **{len(apps)}**")
    lines.append("")

    lines.append("## Warnings\n")
    if warnings:
        for w in warnings:
            lines.append(f"- {w}")
    else:
        lines.append("None.")
    lines.append("")

    if apps:
        lines.append("## Projects\n")
        lines.append("| Name | Slug | URL |")
        lines.append("| --- | --- | --- |")
        for a in apps:
            lines.append(f"| {a['name']} | {a['slug']} | {a['url']} |")
        lines.append("")

    if registry_slugs:
        lines.append("## Registry\n")
        lines.append(", ".join(registry_slugs))
        lines.append("")
    return "\n".join(lines)


def write_report(out_dir, apps, registry_slugs, warnings):
    md = make_md(apps, registry_slugs, warnings)
    html = markdown.markdown(md, extensions=["tables"])
    out_path = Path(out_dir) / "build-report.html"
    out_path.write_text(TEMPLATE.format(title="App hub build report", body=html), encoding="utf-8")
    return out_path
