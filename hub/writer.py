# hub/writer.py
import json
from pathlib import Path

MANIFEST = {
    "name": "My Apps",
    "short_name": "My Apps",
    "description": "Quick access to all my apps",
    "start_url": "/",
    "display": "standalone",
    "background_color": "#1a1a2e",
    "theme_color": "#1a1a2e",
    "icons": [
        {"src": "/icon-192.png", "sizes": "192x192", "type": "image/png"},
        {"src": "/icon-512.png", "sizes": "512x512", "type": "image/png"},
    ],
}

ICON_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect width="100" height="100" fill="#1a1a2e"/>
  <text x="50" y="65" font-size="50" text-anchor="middle" fill="#e94560">🚀</text>
</svg>"""


def write_site(out_dir, html):
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    (out_dir / "index.html").write_text(html, encoding="utf-8")
    with open(out_dir / "manifest.json", "w", encoding="utf-8") as f:
        json.dump(MANIFEST, f, indent=2)
    (out_dir / "icon.svg").write_text(ICON_SVG, encoding="utf-8")
    return out_dir
