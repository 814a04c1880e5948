"""
Manifest validator CLI.

Validates every *.json manifest in a directory and exits 0 only when at
least one manifest was found and none has a violation.

Usage:
    openverb-validate --manifests-dir manifests/
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import OpenVerbSettings
from .validator import ManifestValidator

logger = logging.getLogger(__name__)


def build_parser(settings: OpenVerbSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openverb-validate",
        description="Validate OpenVerb manifest files",
    )

    parser.add_argument(
        '--manifests-dir',
        type=Path,
        default=settings.manifests_dir,
        help=f'Directory of manifest JSON files (default: {settings.manifests_dir})'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default=settings.log_level,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help=f'Logging level (default: {settings.log_level})'
    )

    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Only print failures and the summary'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = OpenVerbSettings.from_env()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print("\nOpenVerb Manifest Validator\n")

    report = ManifestValidator().validate_directory(args.manifests_dir)

    if report.no_sources:
        print(f"No manifest files found in {args.manifests_dir}", file=sys.stderr)
        return 1

    for line in report.render():
        if line.startswith("  FAIL") or "error(s) found" in line:
            print(line, file=sys.stderr)
        elif not (args.quiet and line.startswith("  OK")):
            print(line)

    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
