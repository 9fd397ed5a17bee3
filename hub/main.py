# hub/main.py
import argparse
from pathlib import Path

from hub import config
from hub.lister import list_apps
from hub.registry import load_registry
from hub.renderer import render
from hub.report import write_report
from hub.source import load_projects
from hub.writer import write_site


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Build the app hub page")
    parser.add_argument("--template", type=Path, default=config.TEMPLATE_PATH, help="HTML template with the app list placeholders")
    parser.add_argument("--out", type=Path, default=config.DIST_DIR, help="Output directory")
    parser.add_argument("--registry", type=Path, default=None, help="Code63 registry (YAML/JSON list or app-registry.ts)")
    parser.add_argument("--no-registry", action="store_true", help="Skip the Code63 registry")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    warnings = []

    registry_slugs = []
    if not args.no_registry:
        print("Reading Code63 registry...")
        registry_slugs = load_registry(args.registry or config.get_registry_path(), warnings)

    print("Fetching Vercel projects...")
    projects = load_projects(config.get_token(), config.get_team_id(), warnings)

    print("Building app list...")
    apps = list_apps(projects)

    print("Rendering template...")
    template = args.template.read_text(encoding="utf-8")
    html = render(template, apps, registry_slugs, warnings)

    out_dir = write_site(args.out, html)
    write_report(out_dir, apps, registry_slugs, warnings)

    print(f"Built app-hub with {len(registry_slugs)} Code63 apps + {len(apps)} Vercel apps")
    print(f"Output: {out_dir}/")
    if warnings:
        print(f"{len(warnings)} warning(s), see {out_dir / 'build-report.html'}")
    return 0


def run(argv=None):
    try:
        main(argv)
    except Exception as e:
        # Never fail the deploy
        print("Build error:", e)
    print("Done.")
    return 0


if __name__ == "__main__":
    run()
