"""CLI entry point for the mini-git interactive shell."""
import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from minigit.config import EngineConfig, load_config
from minigit.engine import Repository
from minigit.exceptions import MiniGitError
from minigit.models import CommitRecord, LogEntry, StatusReport

# Exit codes
EXIT_SUCCESS = 0
EXIT_INVALID_INPUT = 1
EXIT_KEYBOARD_INTERRUPT = 130

PROMPT = "mini-git> "
BANNER = (
    "=================================\n"
    "    Mini-Git Version Control     \n"
    "=================================\n"
    "Commands: init, status, commit, log, help, exit\n"
)
HELP_TEXT = (
    "\nAvailable commands:\n"
    "  init <path>     - Initialize repository at path\n"
    "  status          - Show working tree status\n"
    "  commit <msg>    - Commit changes with message\n"
    "  log             - Show commit history\n"
    "  help            - Show this help message\n"
    "  exit            - Exit the program\n"
)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="minigit",
        description="Minimal local version tracking with an interactive shell",
    )
    parser.add_argument(
        "--repo",
        type=str,
        default="",
        help="Initialize a repository at this path before starting the shell",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--output-json", action="store_true", help="Print command results as JSON"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file (overrides MINIGIT_LOG_FILE)",
    )
    return parser


def _configure_logging(*, level: str, verbose: bool, log_file: str = "") -> logging.Logger:
    logger = logging.getLogger("minigit")
    logger.setLevel(logging.DEBUG if verbose else getattr(logging, level))
    logger.handlers.clear()

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.DEBUG if verbose else getattr(logging, level))
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger


def format_result_json(result) -> str:
    """Serialize a pydantic model (or list of models) to a JSON string."""

    def _serialize(obj):
        if hasattr(obj, "model_dump"):
            return obj.model_dump(mode="json")
        return obj

    if isinstance(result, list):
        prepared = [_serialize(item) for item in result]
    else:
        prepared = _serialize(result)
    return json.dumps(prepared, indent=2, default=str)


def print_status_human(report: StatusReport) -> None:
    """Print working-tree status in human-readable format."""
    print("\n=== Repository Status ===")
    if report.is_clean:
        print("Nothing to commit, working tree clean")
    else:
        for title, marker, names in (
            ("New files", "+", report.added),
            ("Modified files", "M", report.modified),
            ("Deleted files", "-", report.deleted),
        ):
            if names:
                print(f"\n{title}:")
                for name in sorted(names):
                    print(f"  {marker} {name}")
    print()


def print_commit_human(record: CommitRecord) -> None:
    """Print a summary of a newly created commit."""
    if record.is_root:
        print("Creating initial commit...")
        for name, file_record in sorted(record.full_snapshot.items()):
            print(f"  Added: {name} (hash: {file_record.fingerprint})")
    else:
        print("Creating commit...")
        for name in record.added_files:
            print(f"  Added: {name}")
        for delta in record.deltas:
            print(f"  Modified: {delta.filename} (delta stored)")
            print(
                f"    Changes: {len(delta.modified_line_indices)} lines modified, "
                f"{len(delta.added_lines)} lines added/changed"
            )
        for name in record.deleted_files:
            print(f"  Deleted: {name}")

    print(f"\n[Commit {record.commit_id}] {record.message}")
    print(f"Timestamp: {record.timestamp}\n")


def print_log_human(entries: list[LogEntry]) -> None:
    """Print commit history, newest first."""
    if not entries:
        print("No commits yet.")
        return

    print("\n=== Commit History ===\n")
    for entry in entries:
        print(f"Commit ID: {entry.commit_id}")
        print(f"Message: {entry.message}")
        print(f"Timestamp: {entry.timestamp}")
        if entry.added_files:
            print(f"Added files: {' '.join(entry.added_files)}")
        if entry.modified_files:
            print(f"Modified files: {' '.join(entry.modified_files)}")
        if entry.deleted_files:
            print(f"Deleted files: {' '.join(entry.deleted_files)}")
        print("---\n")


def _emit(result, output_json: bool, human: Callable) -> None:
    if output_json:
        print(format_result_json(result))
    else:
        human(result)


def _init_repository(repository: Repository, path: str) -> None:
    created = not repository.filesystem.directory_exists(path)
    repository.init(path)
    if created:
        print(f"Created directory: {path}")
    print(f"Initialized mini-git repository in {path}")


def dispatch(repository: Repository, line: str, output_json: bool = False) -> bool:
    """Execute one shell command line.

    Engine errors are reported on stderr and never end the session.

    Args:
        repository: Engine to drive.
        line: Raw input line, e.g. ``"commit fix typo"``.
        output_json: Print results as JSON instead of text.

    Returns:
        False when the shell should exit, True otherwise.
    """
    parts = line.split(maxsplit=1)
    if not parts:
        return True
    command = parts[0]
    rest = parts[1].strip() if len(parts) > 1 else ""

    try:
        if command == "init":
            if not rest:
                print("Usage: init <path>")
            else:
                _init_repository(repository, rest)
        elif command == "status":
            _emit(repository.status(), output_json, print_status_human)
        elif command == "commit":
            if not rest:
                print("Usage: commit <message>")
            else:
                _emit(repository.commit(rest), output_json, print_commit_human)
        elif command == "log":
            _emit(repository.log(), output_json, print_log_human)
        elif command == "help":
            print(HELP_TEXT)
        elif command in ("exit", "quit"):
            print("Goodbye!")
            return False
        else:
            print(f"Unknown command: {command}")
            print("Type 'help' for available commands.")
    except MiniGitError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return True


def run_shell(
    repository: Repository,
    output_json: bool = False,
    read_line: Callable[[str], str] = input,
) -> int:
    """Read and dispatch commands until exit or end of input."""
    print(BANNER)
    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            print()
            return EXIT_SUCCESS
        except KeyboardInterrupt:
            print("\nInterrupted.", file=sys.stderr)
            return EXIT_KEYBOARD_INTERRUPT
        if not dispatch(repository, line, output_json):
            return EXIT_SUCCESS


def create_repository(config: EngineConfig) -> Repository:
    return Repository(metadata_dir_name=config.metadata_dir_name)


def main(argv: list[str] | None = None, read_line: Callable[[str], str] = input) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
        read_line: Line reader used by the shell (defaults to ``input``).

    Returns:
        Exit code integer.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    log_file = args.log_file if args.log_file is not None else config.log_file
    try:
        _configure_logging(level=config.log_level, verbose=args.verbose, log_file=log_file)
    except OSError as exc:
        print(f"Error: cannot open log file '{log_file}': {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    repository = create_repository(config)
    if args.repo:
        try:
            _init_repository(repository, args.repo)
        except OSError as exc:
            print(f"Error: cannot initialize '{args.repo}': {exc}", file=sys.stderr)
            return EXIT_INVALID_INPUT

    return run_shell(repository, output_json=args.output_json, read_line=read_line)


if __name__ == "__main__":
    sys.exit(main())
