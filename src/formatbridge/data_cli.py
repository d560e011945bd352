#!/usr/bin/env python3
"""CLI utility for managing FormatBridge data files"""

import argparse
import sys
from typing import List, Optional

from .config import get_data_manager


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="formatbridge-data", description="Manage FormatBridge configuration data files"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show data files locations")

    reset_parser = subparsers.add_parser("reset", help="Reset data files to defaults")
    reset_parser.add_argument("--file", help="Specific file to reset (e.g., settings.yaml)")
    reset_parser.add_argument("--all", action="store_true", help="Reset all files")

    subparsers.add_parser("path", help="Show user data directory path")

    copy_parser = subparsers.add_parser(
        "copy", help="Copy package file to user directory for editing"
    )
    copy_parser.add_argument("file", help="File to copy (e.g., settings.yaml)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    dm = get_data_manager()

    if args.command == "info":
        info = dm.get_data_info()
        print(f"\nPackage data directory:\n   {info['package_data_dir']}")
        print(f"\nUser data directory:\n   {info['user_data_dir']}")

        if info["user_files"]:
            print("\nUser files (override defaults):")
            for file in info["user_files"]:
                print(f"   • {file}")
        else:
            print("\nUser files: None")

        if info["package_files"]:
            print("\nPackage files (defaults):")
            for file in info["package_files"]:
                override = " (overridden)" if file in info["user_files"] else ""
                print(f"   • {file}{override}")

        print("\nTip: User files override package defaults when present")
        print("Tip: Use 'formatbridge-data copy <file>' to copy a default file for editing")

    elif args.command == "reset":
        if args.file:
            removed = dm.reset_to_defaults(args.file)
            print(f"Reset {args.file}" if removed else f"{args.file} was already using defaults")
        elif args.all:
            removed = dm.reset_to_defaults()
            print(f"Reset {removed} file(s) to defaults")
        else:
            print("Specify --file <filename> or --all")
            return 1

    elif args.command == "path":
        print(dm.user_data_dir)

    elif args.command == "copy":
        success = dm.copy_package_to_user(args.file)
        if success:
            print(f"You can now edit: {dm.user_data_dir / args.file}")
        else:
            print(f"Could not copy {args.file} (missing package file or user copy exists)")
        return 0 if success else 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
