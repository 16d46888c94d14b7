"""CLI entrypoint for safe-secrets."""
import sys
import json
import argparse
import logging
from pathlib import Path

from safe_secrets import __version__
from safe_secrets.secrets.domains.errors import SecretError
from .validators import validate_secret_id, validate_version_stage

# Configure logging to stderr
logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
    stream=sys.stderr
)
logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json", "bytes", "describe")


def cmd_version(args):
    """Show version information."""
    print(f"safe-secrets {__version__}")


def cmd_config_set_path(args):
    """Set config file path preference."""
    from safe_secrets.secrets.domains.preferences import set_config_path

    config_path = Path(args.path).resolve()

    if not config_path.exists():
        print(f"Error: Config file does not exist: {config_path}", file=sys.stderr)
        sys.exit(1)

    if not config_path.is_file():
        print(f"Error: Path is not a file: {config_path}", file=sys.stderr)
        sys.exit(1)

    set_config_path(str(config_path))
    print(f"Config path set to: {config_path}")


def cmd_config_show(args):
    """Show current config file path."""
    from safe_secrets.secrets.domains.config_loader import default_config_path
    from safe_secrets.secrets.domains.preferences import get_config_path

    config_path_pref = get_config_path()

    if config_path_pref:
        config_path = Path(config_path_pref)
        if config_path.exists():
            print(f"Config path: {config_path}")
        else:
            print(f"Config path (from preference, but file not found): {config_path}")
        print("Source: preference")
    else:
        default_config = default_config_path()
        print(f"Config path: {default_config}")
        if default_config.exists():
            print("Source: default")
        else:
            print("Source: default (file not found)")


def cmd_config_clear(args):
    """Clear config path preference."""
    from safe_secrets.secrets.domains.config_loader import default_config_path
    from safe_secrets.secrets.domains.preferences import clear_config_path

    clear_config_path()
    print(f"Config path preference cleared. Will use default: {default_config_path()}")


def _print_secret(secret, output_format):
    if output_format == "describe":
        print(secret)
        print(f"Stages: current={secret.is_current()} pending={secret.is_pending()} previous={secret.is_previous()}")
    elif output_format == "json":
        print(json.dumps(secret.json(), indent=2))
    elif output_format == "bytes":
        sys.stdout.buffer.write(secret.bytes())
        sys.stdout.flush()
    else:
        print(secret.text())


def cmd_secrets_get(args):
    """Fetch a secret and print it in the requested format."""
    from safe_secrets.secrets.workflows.secret_operations import build_fetcher

    validate_secret_id(args.secret_id)

    version_selector = {}
    if args.version_id:
        version_selector["VersionId"] = args.version_id
    if args.version_stage:
        validate_version_stage(args.version_stage)
        version_selector["VersionStage"] = args.version_stage

    fetcher = build_fetcher()
    try:
        secret = fetcher.fetch(args.secret_id, **version_selector)
        _print_secret(secret, args.format)
    except SecretError as e:
        # Details hold the redacted safe fields only
        print(f"Error: {e}", file=sys.stderr)
        if e.details:
            print(f"Details: {e.details}", file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="safe-secrets",
        description="safe-secrets CLI - fetch secrets without leaking them into logs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes:
  0 - Success
  1 - Runtime error (secret not found, access denied, invalid secret, config error)
  2 - Usage error (invalid arguments, invalid secret id)

Environment variables:
  SAFE_SECRETS_BACKEND - Backend to use, aws or gcp (overrides config file)
  GCP_PROJECT - GCP project ID (overrides config file)

Configuration:
  Default location: ~/.config/safe-secrets/config.yml
  Custom path: Set with 'safe-secrets config set-path <path>'
  View current: Run 'safe-secrets config show'
        """
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "version",
        help="Show version information",
        description="Display the current version of safe-secrets"
    )

    config_parser = subparsers.add_parser(
        "config",
        help="Configuration management",
        description="Manage safe-secrets configuration"
    )
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    config_set_path_parser = config_subparsers.add_parser(
        "set-path",
        help="Set config file path",
        description="""
Set the configuration file path preference.

This stores the absolute path to your config file in:
~/.config/safe-secrets/preferences.json
        """
    )
    config_set_path_parser.add_argument(
        "path",
        help="Path to config file"
    )

    config_subparsers.add_parser(
        "show",
        help="Show current config path",
        description="Display the current configuration file path and its source (preference or default)"
    )

    config_subparsers.add_parser(
        "clear",
        help="Clear config path preference",
        description="Remove the config path preference and fall back to ~/.config/safe-secrets/config.yml"
    )

    secrets_parser = subparsers.add_parser(
        "secrets",
        help="Secret operations",
        description="Read secrets from the configured backend"
    )
    secrets_subparsers = secrets_parser.add_subparsers(dest="secrets_command")

    get_parser = secrets_subparsers.add_parser(
        "get",
        help="Get a secret value",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Fetch a secret and print it.

Formats:
  text     - the SecretString payload (default)
  json     - the SecretString payload parsed and pretty-printed as JSON
  bytes    - the raw payload bytes written to stdout
  describe - redacted summary (payload type, safe fields, version stages);
             never prints the payload
        """
    )
    get_parser.add_argument(
        "secret_id",
        help="Secret name or ARN"
    )
    version_group = get_parser.add_mutually_exclusive_group()
    version_group.add_argument(
        "--version-id",
        help="Fetch a specific version"
    )
    version_group.add_argument(
        "--version-stage",
        help="Fetch the version carrying this stage (e.g. AWSPREVIOUS)"
    )
    get_parser.add_argument(
        "-f", "--format",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output format (default: text)"
    )

    return parser


def main(argv=None):
    """Main CLI entrypoint.

    Exit codes:
        0 - Success
        1 - Runtime errors (secret not found, access denied, invalid secret, etc.)
        2 - Usage errors (invalid arguments, invalid secret id, etc.)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        # Package loggers only: botocore logs full response bodies at DEBUG
        logging.getLogger("safe_secrets").setLevel(logging.DEBUG)

    if not args.command:
        parser.print_help()
        sys.exit(2)

    try:
        if args.command == "version":
            cmd_version(args)
        elif args.command == "config":
            if args.config_command == "set-path":
                cmd_config_set_path(args)
            elif args.config_command == "show":
                cmd_config_show(args)
            elif args.config_command == "clear":
                cmd_config_clear(args)
            else:
                parser.print_help()
                sys.exit(2)
        elif args.command == "secrets":
            if args.secrets_command == "get":
                cmd_secrets_get(args)
            else:
                parser.print_help()
                sys.exit(2)
        else:
            parser.print_help()
            sys.exit(2)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
