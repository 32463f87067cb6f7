"""Command-line interface for vhdlex."""

from __future__ import annotations

import argparse
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from vhdlex.errors import ConfigError
from vhdlex.log import configure, get_logger

logger = get_logger(__name__)

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    output_format: str
    skip_trivia: bool
    check: bool
    watch: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="vhdlex",
        description="Tokenize VHDL source files",
    )
    p.add_argument("input", help="Input .vhd/.vhdl file")
    p.add_argument(
        "-o",
        "--output",
        help="Output file for the dump, or for the --check report (default: stdout)",
    )
    p.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Token dump format (default: text)",
    )
    p.add_argument(
        "--skip-trivia",
        action="store_true",
        default=None,
        help="Omit whitespace and comment tokens from the dump",
    )
    p.add_argument(
        "--check",
        action="store_true",
        default=None,
        help="Report lexical problems instead of dumping tokens",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover vhdlex.toml)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and rerun")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "vhdlex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: {exc}") from exc


def _config_bool(table: dict[str, Any], key: str) -> bool:
    """Read a boolean config value; only TOML true/false are accepted."""
    value = table.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"invalid value for {key}: {value!r} (expected true or false)")
    return value


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    cfg_output = config.get("output")
    if not isinstance(cfg_output, dict):
        cfg_output = {}

    # Output format: config < CLI
    output_format = "text"
    cfg_format = cfg_output.get("format")
    if cfg_format is not None:
        if cfg_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"invalid output format {cfg_format!r} (expected one of: {', '.join(OUTPUT_FORMATS)})"
            )
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    # Trivia filtering: config < CLI
    skip_trivia = _config_bool(cfg_output, "skip_trivia")
    if args.skip_trivia is not None:
        skip_trivia = args.skip_trivia

    # Check mode: config < CLI
    check = _config_bool(config, "check")
    if args.check is not None:
        check = args.check

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        skip_trivia=skip_trivia,
        check=check,
        watch=args.watch,
        verbose=args.verbose,
    )


def dump_file(options: CliOptions) -> str:
    """Read and tokenize a VHDL file, returning the formatted token dump."""
    from vhdlex.dump import dump_tokens, format_json, format_text
    from vhdlex.lexer import iter_pairs
    from vhdlex.tokens import TRIVIA

    source = options.input_file.read_text(encoding="utf-8")
    pairs = list(iter_pairs(source))
    logger.debug("%s: %d tokens", options.input_file, len(pairs))

    if options.verbose:
        dump_tokens(pairs, file=sys.stderr)

    if options.skip_trivia:
        pairs = [(token, lexeme) for token, lexeme in pairs if token.type not in TRIVIA]

    if options.output_format == "json":
        return format_json(pairs)
    return format_text(pairs)


def check_file(options: CliOptions) -> int:
    """Report diagnostics for a VHDL file; return 1 if any were found.

    The report goes to the output file when one is given, else to stderr.
    """
    from vhdlex.diagnostics import check

    source = options.input_file.read_text(encoding="utf-8")
    errors = check(source)
    report = "".join(err.format(str(options.input_file)) + "\n" for err in errors)
    if options.output_file:
        options.output_file.write_text(report, encoding="utf-8")
    else:
        sys.stderr.write(report)
    return 1 if errors else 0


def run_once(options: CliOptions) -> int:
    """Run the selected action once and return its exit code."""
    if options.check:
        return check_file(options)

    text = dump_file(options)
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
    return 0


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, rerun on each modification."""
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    run_once(options)
                    print(f"Processed {options.input_file}", file=sys.stderr)
                except (OSError, UnicodeDecodeError) as exc:
                    print(f"error: {exc}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure(args.verbose)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        return run_once(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
