from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _add_repo_to_syspath() -> None:
    # Ensure we can import the local 'medinotes' package and 'config' when running directly
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Export the landing page as a static bundle for object storage hosting."
    )
    p.add_argument(
        "--out",
        type=Path,
        default=Path("out"),
        help="Output directory (default: out)",
    )
    p.add_argument(
        "--state",
        choices=("anonymous", "authenticated"),
        default="anonymous",
        help="Auth state the exported page is rendered in (default: anonymous)",
    )
    return p.parse_args()


def main() -> int:
    _add_repo_to_syspath()
    from medinotes import create_app
    from medinotes.build import BuildConfigError
    from medinotes.export import ExportError, export_site
    from medinotes.utils.auth import AuthState

    args = parse_args()
    try:
        written = export_site(create_app(), args.out, state=AuthState(args.state))
    except (ExportError, BuildConfigError) as exc:
        print(f"Export failed: {exc}")
        return 1

    print(f"Exported {len(written)} file(s) to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
