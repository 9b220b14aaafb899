"""
IPsec algorithm CLI - Run with: python -m ipsec_algorithm

Commands:
    list       - Show every recognized algorithm and its constraints
    supported  - Show the algorithms supported at a vendor API level
    check      - Validate an algorithm / key length / truncation length
"""

import argparse
import sys

from ipsec_algorithm.availability import ALGO_TO_REQUIRED_FIRST_SDK, supported_set
from ipsec_algorithm.config import get_settings
from ipsec_algorithm.constraints import key_constraint_of, truncation_constraint_of
from ipsec_algorithm.validation import check


def cmd_list(args):
    """List recognized algorithms."""
    print(f"{'Algorithm':<32} {'Class':<11} {'Key bits':<14} {'Trunc bits':<12} Mandatory from")
    for algo, first_sdk in sorted(ALGO_TO_REQUIRED_FIRST_SDK.items(), key=lambda item: item[0].value):
        trunc = truncation_constraint_of(algo)
        print(
            f"{algo.value:<32} {algo.algorithm_class.value:<11} "
            f"{key_constraint_of(algo).describe():<14} "
            f"{trunc.describe() if trunc else '-':<12} {first_sdk}"
        )
    return 0


def cmd_supported(args):
    """Show supported algorithms."""
    parser = argparse.ArgumentParser(prog="python -m ipsec_algorithm supported")
    parser.add_argument("--api-level", type=int, default=None, help="Vendor API level")
    parser.add_argument("--optional", nargs="*", default=None, help="Optional algorithm names")
    opts = parser.parse_args(args)

    settings = get_settings()
    level = opts.api_level if opts.api_level is not None else settings.vendor_api_level
    optional = opts.optional if opts.optional is not None else settings.optional_algorithms

    for algo in sorted(a.value for a in supported_set(level, optional)):
        print(algo)
    return 0


def cmd_check(args):
    """Validate parameters using a zero key of the requested length."""
    parser = argparse.ArgumentParser(prog="python -m ipsec_algorithm check")
    parser.add_argument("name", help="Kernel algorithm name, e.g. 'hmac(sha256)'")
    parser.add_argument("--key-bits", type=int, required=True)
    parser.add_argument("--trunc-bits", type=int, default=None)
    opts = parser.parse_args(args)

    if opts.key_bits < 0 or opts.key_bits % 8:
        print(f"Key length must be a non-negative multiple of 8, got {opts.key_bits}")
        return 1

    error = check(opts.name, bytes(opts.key_bits // 8), opts.trunc_bits)
    if error is not None:
        print(f"Invalid: {error}")
        return 1
    print("Valid")
    return 0


def cmd_help(args=None):
    """Show help."""
    print(__doc__)
    print("Usage: python -m ipsec_algorithm <command> [options]\n")
    print("Commands:")
    print("  list        Show every recognized algorithm and its constraints")
    print("  supported   Show supported algorithms [--api-level N] [--optional NAME ...]")
    print("  check       Validate NAME --key-bits N [--trunc-bits N]")
    print("  help        Show this help message")
    return 0


def main(argv=None):
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        cmd_help()
        return 0

    command = argv[0].lower()

    commands = {
        "list": cmd_list,
        "supported": cmd_supported,
        "check": cmd_check,
        "help": cmd_help,
        "--help": cmd_help,
        "-h": cmd_help,
    }

    if command in commands:
        return commands[command](argv[1:])
    else:
        print(f"Unknown command: {command}")
        cmd_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
