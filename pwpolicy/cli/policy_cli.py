"""
Command-line interface for checking passwords against a policy.

Usage:
    python -m pwpolicy.cli.policy_cli check [--policy-file <path>] [--password <password>]
    python -m pwpolicy.cli.policy_cli show-policy [--policy-file <path>]
"""

import argparse
import getpass
import json
import sys

from pwpolicy.config import PolicySettings
from pwpolicy.service import PasswordPolicyConfiguration, PasswordPolicyService
from pwpolicy.observability.logger import get_logger, setup_logger

logger = get_logger(__name__)


def build_service(args) -> PasswordPolicyService:
    """
    Build the policy service from environment settings and CLI overrides.

    Args:
        args: Command line arguments
    """
    settings = PolicySettings.from_env(args.env_file)
    if args.policy_file:
        settings = settings.model_copy(update={"policy_file": args.policy_file})
    # The CLI always checks, even if the environment disables enforcement
    settings = settings.model_copy(update={"enabled": True})

    return PasswordPolicyService(PasswordPolicyConfiguration.from_settings(settings))


def check_command(args) -> int:
    """
    Check a password and print the result summary as JSON.

    Args:
        args: Command line arguments

    Returns:
        0 if the password satisfies the policy, 1 otherwise
    """
    service = build_service(args)

    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")

    result = service.check_password(password)
    print(json.dumps(result.to_summary(), indent=2))

    if not result.is_valid:
        logger.info(
            "Password violates policy",
            extra={"violated": [rule.placeholder for rule in result.violated_rules]},
        )
        return 1
    return 0


def show_policy_command(args) -> int:
    """
    Print the configured policy.

    Args:
        args: Command line arguments
    """
    service = build_service(args)
    policy = service.get_password_policy()

    output = {
        "summary": policy.get_rule_summary(),
        "rules": [rule.model_dump() for rule in policy.rules],
    }
    print(json.dumps(output, indent=2))
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwpolicy",
        description="Check passwords against a password policy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a password against the default policy (prompts for the password)
  pwpolicy check

  # Check against a policy file
  pwpolicy check --policy-file config/policy.yaml --password 'LongPas$w0rd'

  # Show the rules of a policy file
  pwpolicy show-policy --policy-file config/policy.yaml
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: $LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log format (default: $LOG_FORMAT or json)"
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Load environment variables from a .env file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Check a password")
    check_parser.add_argument(
        "--policy-file",
        default=None,
        help="Path to a policy YAML file (default: $PASSWORD_POLICY_FILE or built-in policy)"
    )
    check_parser.add_argument(
        "--password",
        default=None,
        help="Password to check (prompted for if omitted)"
    )

    show_parser = subparsers.add_parser("show-policy", help="Show the policy rules")
    show_parser.add_argument(
        "--policy-file",
        default=None,
        help="Path to a policy YAML file (default: $PASSWORD_POLICY_FILE or built-in policy)"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.log_level or args.log_format:
        setup_logger(level=args.log_level, format_type=args.log_format)

    commands = {
        "check": check_command,
        "show-policy": show_policy_command,
    }

    try:
        return commands[args.command](args)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load password policy: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
