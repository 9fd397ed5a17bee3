#!/usr/bin/env python3
# build.py
# Generates dist/ (index.html, manifest.json, icon.svg, build-report.html).
# Usage: VERCEL_TOKEN=... python build.py [--out dist]

from hub.main import run

if __name__ == "__main__":
    run()
