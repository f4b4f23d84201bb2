"""Command line entry point: merge a TOML file and print the effective variables.

A child process cannot change its parent's environment, so the output is
meant to be evaluated by the calling shell.

Usage:
    # Print KEY=value lines (shell-quoted)
    tomlenv config.toml

    # Export into the current shell
    eval "$(tomlenv config.toml --export)"

    # Also seed from a .env file, show override decisions
    tomlenv config.toml --env-file .env --log-level DEBUG

    # Machine-readable
    tomlenv config.toml --json
"""

import argparse
import json
import re
import shlex
import sys
from typing import List, Optional

from tomlenv.exceptions import ConfigurationError, TomlEnvError
from tomlenv.loader import TomlEnvLoader, read_document
from tomlenv.logger import create_logger
from tomlenv.merge import MergeResult
from tomlenv.settings import LoaderSettings

SHELL_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tomlenv",
        description="Merge a TOML file into the environment (environment wins)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("config", help="Path to the TOML configuration file")
    parser.add_argument(
        "--env-file",
        default=None,
        help="Optional .env file applied before the merge (default: TOMLENV_ENV_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level; DEBUG prints every override (default: TOMLENV_LOG_LEVEL or INFO)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print a JSON object")
    output.add_argument("--export", action="store_true", help="Prefix each line with 'export'")
    parser.add_argument(
        "--strict-exit",
        action="store_true",
        help="Exit immediately on unsupported value types",
    )
    return parser.parse_args(argv)


def check_shell_names(results: List[MergeResult]) -> None:
    """Reject variable names that are not valid shell identifiers.

    Raises:
        ConfigurationError: Listing every offending name
    """
    invalid = [r.env_key for r in results if not SHELL_NAME.match(r.env_key)]
    if invalid:
        raise ConfigurationError(
            "Keys are not valid shell variable names; use --json to print them",
            details={"keys": invalid},
        )


def format_results(results: List[MergeResult], as_json: bool = False, export: bool = False) -> str:
    """Render merge results as shell assignments or a JSON object."""
    if as_json:
        return json.dumps({r.env_key: r.value for r in results}, indent=2)
    check_shell_names(results)
    prefix = "export " if export else ""
    return "\n".join(f"{prefix}{r.env_key}={shlex.quote(r.value)}" for r in results)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = LoaderSettings.from_env()
        if args.log_level:
            settings.log_level = args.log_level.upper()
            settings.validate()
        # stdout carries the assignments; keep log lines out of it
        logger = create_logger(
            level=settings.level,
            json_format=settings.json_logs,
            stream=sys.stderr,
        )
        loader = TomlEnvLoader.from_settings(
            settings,
            logger=logger,
            env_file=args.env_file or settings.env_file,
            abort_on_unsupported=args.strict_exit or settings.abort_on_unsupported,
        )
        results = loader.merge_text(read_document(args.config))
        output = format_results(results, as_json=args.json, export=args.export)
    except TomlEnvError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
