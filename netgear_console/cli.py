"""
Command-line interface for the Netgear switch console client.

Provides argument parsing and the subcommand dispatch.
"""

import argparse
import getpass
import os
import sys

from netgear_console.client import SwitchClient
from netgear_console.config import DEFAULT_TIMEOUT, TOKEN_DIR_ENV
from netgear_console.credentials import EnvironmentPasswordResolver
from netgear_console.errors import NetgearError
from netgear_console.formatter import OUTPUT_FORMATS, render
from netgear_console.logging_setup import _setup_logging, log
from netgear_console.models import (
    PoeLimitType,
    PoeMode,
    PoePriority,
    PoeUpdate,
    PortSpeed,
    PortUpdate,
)
from netgear_console.storage.tokens import FileTokenStore


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def _on_off(value: str) -> bool:
    if value.lower() in ("on", "yes", "true", "1"):
        return True
    if value.lower() in ("off", "no", "false", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected on/off, got '{value}'")


def parse_args(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="netgear-console",
        description="Manage PoE and port settings of Netgear GS305EP/GS308EP/GS316EP "
                    "switches through their web console.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Passwords can be supplied via NETGEAR_PASSWORD_<HOST> or NETGEAR_SWITCHES.\n"
            f"Tokens are cached under --token-dir (or ${TOKEN_DIR_ENV})."
        ),
    )
    parser.add_argument(
        "--address", "-a", required=True,
        help="Switch IP address or host name",
    )
    parser.add_argument(
        "--token-dir", default=os.environ.get(TOKEN_DIR_ENV),
        help="Root directory for cached tokens (default: system temp dir)",
    )
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT,
        help=f"Per-request timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )
    parser.add_argument(
        "--output", choices=OUTPUT_FORMATS, default="md",
        help="Output format for tables (default: md)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login", help="Log in and cache the session token")
    login.add_argument("--password", "-p", default="", help="Admin password (prompted if omitted)")
    commands.add_parser("logout", help="Forget the cached session token")
    commands.add_parser("detect", help="Print the detected switch model")

    poe = commands.add_parser("poe", help="PoE status and configuration")
    poe_commands = poe.add_subparsers(dest="poe_command", required=True)
    poe_commands.add_parser("status", help="Show PoE port status")
    poe_commands.add_parser("settings", help="Show PoE port settings")
    poe_set = poe_commands.add_parser("set", help="Change PoE settings of one port")
    poe_set.add_argument("--port", type=int, required=True)
    toggle = poe_set.add_mutually_exclusive_group()
    toggle.add_argument("--enable", dest="enabled", action="store_true", default=None)
    toggle.add_argument("--disable", dest="enabled", action="store_false", default=None)
    poe_set.add_argument("--mode", choices=_enum_values(PoeMode))
    poe_set.add_argument("--priority", choices=_enum_values(PoePriority))
    poe_set.add_argument("--limit-type", choices=_enum_values(PoeLimitType))
    poe_set.add_argument("--limit", type=float, help="Power limit in watts")
    poe_set.add_argument("--detection-type")
    poe_cycle = poe_commands.add_parser("cycle", help="Power-cycle PoE ports")
    poe_cycle.add_argument("ports", type=int, nargs="+")

    port = commands.add_parser("port", help="Port configuration")
    port_commands = port.add_subparsers(dest="port_command", required=True)
    port_commands.add_parser("settings", help="Show port settings")
    port_set = port_commands.add_parser("set", help="Change settings of one port")
    port_set.add_argument("--port", type=int, required=True)
    port_set.add_argument("--name")
    port_set.add_argument("--speed", choices=_enum_values(PortSpeed))
    port_set.add_argument("--ingress-limit")
    port_set.add_argument("--egress-limit")
    port_set.add_argument("--flow-control", type=_on_off, metavar="on|off")

    return parser.parse_args(argv)


def _build_client(args: argparse.Namespace, auto_login: bool = True) -> SwitchClient:
    return SwitchClient(
        args.address,
        timeout=args.timeout,
        token_store=FileTokenStore(args.token_dir),
        password_resolver=EnvironmentPasswordResolver() if auto_login else None,
    )


def _cmd_login(args: argparse.Namespace) -> None:
    client = _build_client(args, auto_login=False)
    password = args.password
    if not password:
        config = EnvironmentPasswordResolver().resolve(args.address)
        password = config.password if config else ""
    if not password:
        password = getpass.getpass(f"Password for {args.address}: ")
    client.login(password)


def _cmd_logout(args: argparse.Namespace) -> None:
    client = _build_client(args, auto_login=False)
    client.logout()
    log.info("Logged out of %s", args.address)


def _cmd_detect(args: argparse.Namespace) -> None:
    client = _build_client(args, auto_login=False)
    print(f"{client.model.value} ({client.model.family.value} auth)")


def _cmd_poe(args: argparse.Namespace) -> None:
    client = _build_client(args)
    if args.poe_command == "status":
        print(render("poe_status", client.poe.get_status(), args.output))
    elif args.poe_command == "settings":
        print(render("poe_settings", client.poe.get_settings(), args.output))
    elif args.poe_command == "set":
        client.poe.update_port(PoeUpdate(
            args.port,
            enabled=args.enabled,
            mode=PoeMode(args.mode) if args.mode else None,
            priority=PoePriority(args.priority) if args.priority else None,
            power_limit_type=PoeLimitType(args.limit_type) if args.limit_type else None,
            power_limit_w=args.limit,
            detection_type=args.detection_type,
        ))
        log.info("Updated PoE settings of port %d", args.port)
    elif args.poe_command == "cycle":
        client.poe.cycle_power(*args.ports)


def _cmd_port(args: argparse.Namespace) -> None:
    client = _build_client(args)
    if args.port_command == "settings":
        print(render("port_settings", client.ports.get_settings(), args.output))
    elif args.port_command == "set":
        client.ports.update_port(PortUpdate(
            args.port,
            name=args.name,
            speed=PortSpeed(args.speed) if args.speed else None,
            ingress_limit=args.ingress_limit,
            egress_limit=args.egress_limit,
            flow_control=args.flow_control,
        ))
        log.info("Updated settings of port %d", args.port)


COMMANDS = {
    "login": _cmd_login,
    "logout": _cmd_logout,
    "detect": _cmd_detect,
    "poe": _cmd_poe,
    "port": _cmd_port,
}


def main(argv=None) -> int:
    """
    Main entry point for the netgear-console CLI.
    """
    args = parse_args(argv)

    _setup_logging(debug=args.debug)

    try:
        COMMANDS[args.command](args)
    except NetgearError as exc:
        log.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        log.warning("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
