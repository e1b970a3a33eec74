# src/lsa/cli.py
import sys
import argparse

from lsa.core.snapshot import copy_file, copy_folder, copy_workspace
from lsa.errors import SnapshotError


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="lsa",
        description="Copy a snapshot of your workspace, a folder or a file to the clipboard, ready to paste into an LLM chat.",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--workspace", action="store_true", help="Copy the current directory (respects .gitignore)")
    mode.add_argument("--workspace-file", metavar="FILE_PATH", help="Copy a single file")
    mode.add_argument("--workspace-folder", metavar="FOLDER_PATH", help="Copy a single folder (respects .gitignore)")

    parser.add_argument("--source-only", action="store_true", help="With --workspace: only include source files")
    parser.add_argument(
        "--max-size",
        type=int,
        metavar="KB",
        default=None,
        help="With --workspace: stop adding files once the snapshot would exceed this many KB",
    )
    return parser


def parse_args(argv=None):
    parser = create_arg_parser()
    args = parser.parse_args(argv)
    if not args.workspace:
        if args.source_only:
            parser.error("--source-only requires --workspace")
        if args.max_size is not None:
            parser.error("--max-size requires --workspace")
    if args.max_size is not None and args.max_size < 1:
        parser.error("--max-size must be at least 1 KB")
    return args


def main(argv=None):
    try:
        args = parse_args(argv)

        if args.workspace_file:
            copy_file(args.workspace_file)
        elif args.workspace_folder:
            copy_folder(args.workspace_folder)
        else:
            copy_workspace(source_only=args.source_only, max_size_kb=args.max_size)

    except SnapshotError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
