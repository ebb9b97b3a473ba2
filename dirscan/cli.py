"""Command-line front door for dirscan.

Parses CLI options, resolves scan settings from presets and flags, and prints
one matching path per line. Scan errors go to stderr and set exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from . import config
from .errors import ScanError
from .settings import ScanSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirscan",
        description="List directory entries with hidden/backup filtering, recursively by default.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to scan. Defaults to current directory.")
    parser.add_argument(
        "--preset",
        default=None,
        help="Start from a named preset (all, files, dirs, or one saved with --save-preset).",
    )
    kind = parser.add_mutually_exclusive_group()
    kind.add_argument("--files", action="store_true", help="Only list non-directory entries.")
    kind.add_argument("--dirs", action="store_true", help="Only list directories.")
    parser.add_argument(
        "--skip-hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Skip names starting with a dot.",
    )
    parser.add_argument(
        "--skip-backup",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Skip *~, *.bak and #*# names.",
    )
    parser.add_argument(
        "--skip-symlinks",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Skip symlinks instead of listing them.",
    )
    parser.add_argument("--no-recursive", action="store_true", help="Only list the top-level directory.")
    parser.add_argument("--save-preset", metavar="NAME", help="Save the resolved settings under NAME.")
    parser.add_argument("--set-default-preset", metavar="NAME", help="Use preset NAME when --preset is omitted.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log scan errors as they happen.")
    return parser


def resolve_settings(args: argparse.Namespace) -> ScanSettings:
    """Combine the selected preset with explicit flag overrides."""
    preset_name = args.preset or config.load_default_preset_name()
    if preset_name is None:
        settings = ScanSettings.all()
    else:
        loaded = config.load_preset(preset_name)
        if loaded is None:
            raise SystemExit(f"Unknown preset: {preset_name}")
        settings = loaded

    overrides: dict[str, bool] = {}
    if args.files:
        overrides.update(skip_dirs=True, skip_files=False)
    if args.dirs:
        overrides.update(skip_dirs=False, skip_files=True)
    for flag in ("skip_hidden", "skip_backup", "skip_symlinks"):
        value = getattr(args, flag)
        if value is not None:
            overrides[flag] = value
    return settings.with_options(**overrides) if overrides else settings


def scan(settings: ScanSettings, path: Path, recursive: bool, out: TextIO) -> list[ScanError]:
    """Print matching entries under ``path`` and return recorded errors."""
    if recursive:
        with settings.walker(path) as walker:
            for entry, _name in walker:
                out.write(f"{entry.path}\n")
        return walker.errors

    with settings.entries(path) as iterator:
        for entry, _name in iterator:
            out.write(f"{entry.path}\n")
    return [] if iterator.error is None else [iterator.error]


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and scan a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    settings = resolve_settings(args)
    if args.save_preset:
        config.save_preset(args.save_preset, settings)
    if args.set_default_preset:
        if config.load_preset(args.set_default_preset) is None:
            raise SystemExit(f"Unknown preset: {args.set_default_preset}")
        config.save_default_preset_name(args.set_default_preset)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")

    errors = scan(settings, path, recursive=not args.no_recursive, out=sys.stdout)
    for error in errors:
        sys.stderr.write(f"dirscan: {error}\n")
    if errors:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
