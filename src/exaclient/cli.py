"""CLI entry point for the exaclient command."""

from __future__ import annotations

import argparse
import asyncio
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exaclient.api.exceptions import ExarotonError
from exaclient.api.models import Server, ServerStatus
from exaclient.config import load_config, save_config
from exaclient.exaroton import Exaroton
from exaclient.logging_setup import configure_logging

console = Console()
err_console = Console(stderr=True)

_STATUS_STYLES = {
    ServerStatus.ONLINE: "green",
    ServerStatus.OFFLINE: "dim",
    ServerStatus.CRASHED: "bold red",
}


def _status_label(status: ServerStatus) -> str:
    style = _STATUS_STYLES.get(status, "yellow")
    return f"[{style}]{status.name.lower()}[/{style}]"


def _servers_table(servers: list[Server], title: str = "Servers") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Address")
    table.add_column("Status")
    table.add_column("Players", justify="right")
    for s in servers:
        table.add_row(
            s.id,
            escape(s.name),
            escape(s.address or "-"),
            _status_label(s.status),
            f"{s.players.count}/{s.players.max}",
        )
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exaclient", description="Manage exaroton servers."
    )
    parser.add_argument("--debug", action="store_true", help="Log HTTP requests")
    sub = parser.add_subparsers(dest="command", required=True)

    configure = sub.add_parser("configure", help="Store the API key")
    configure.add_argument("--api-key", required=True)

    sub.add_parser("account", help="Show account info")
    sub.add_parser("servers", help="List servers")
    sub.add_parser("pools", help="List credit pools")

    server = sub.add_parser("server", help="Show one server")
    server.add_argument("server_id")

    start = sub.add_parser("start", help="Start a server")
    start.add_argument("server_id")
    start.add_argument(
        "--own-credits", action="store_true", help="Pay with your own credits"
    )

    for name in ("stop", "restart"):
        p = sub.add_parser(name, help=f"{name.capitalize()} a server")
        p.add_argument("server_id")

    command = sub.add_parser("command", help="Run a console command")
    command.add_argument("server_id")
    command.add_argument("console_command")

    log = sub.add_parser("log", help="Print the server log")
    log.add_argument("server_id")
    log.add_argument("--share", action="store_true", help="Upload to mclo.gs")

    return parser


async def _run(args: argparse.Namespace) -> None:
    async with Exaroton.from_config() as exa:
        if args.command == "account":
            account = (await exa.get_account()).unwrap()
            console.print(
                f"[bold]{escape(account.name)}[/bold] <{escape(account.email or '-')}>"
            )
            console.print(f"Credits: {account.credits:.2f}")
            console.print(f"Verified: {'yes' if account.verified else 'no'}")
        elif args.command == "servers":
            servers = (await exa.get_servers()).unwrap() or []
            console.print(_servers_table(servers))
        elif args.command == "server":
            s = (await exa.get_server(args.server_id)).unwrap()
            console.print(_servers_table([s], title=escape(s.name)))
            if s.players.names:
                console.print("Online: " + ", ".join(s.players.names))
        elif args.command == "start":
            if args.own_credits:
                (await exa.start_server_with_own_credits(args.server_id)).unwrap()
            else:
                (await exa.start_server(args.server_id)).unwrap()
            console.print(f"Starting {args.server_id}")
        elif args.command == "stop":
            (await exa.stop_server(args.server_id)).unwrap()
            console.print(f"Stopping {args.server_id}")
        elif args.command == "restart":
            (await exa.restart_server(args.server_id)).unwrap()
            console.print(f"Restarting {args.server_id}")
        elif args.command == "command":
            (await exa.execute_server_command(
                args.server_id, args.console_command
            )).unwrap()
            console.print("Command sent")
        elif args.command == "log":
            if args.share:
                uploaded = (await exa.upload_server_log(args.server_id)).unwrap()
                console.print(uploaded.url)
            else:
                log = (await exa.get_server_log(args.server_id)).unwrap()
                console.print(escape(log.content or ""), highlight=False)
        elif args.command == "pools":
            pools = (await exa.get_credit_pools()).unwrap() or []
            table = Table(title="Credit pools")
            table.add_column("ID", style="cyan", no_wrap=True)
            table.add_column("Name")
            table.add_column("Credits", justify="right")
            table.add_column("Members", justify="right")
            table.add_column("Servers", justify="right")
            for p in pools:
                table.add_row(
                    p.id, escape(p.name), f"{p.credits:.2f}",
                    str(p.members), str(p.servers),
                )
            console.print(table)


def _configure(api_key: str) -> None:
    config = load_config()
    config.api.api_key = api_key
    save_config(config)
    console.print("API key saved")


def main(argv: list[str] | None = None) -> None:
    """Run the exaclient command line."""
    args = build_parser().parse_args(argv)
    config = load_config()
    configure_logging("DEBUG" if args.debug else config.logging.level)

    if args.command == "configure":
        _configure(args.api_key)
        return

    try:
        asyncio.run(_run(args))
    except ExarotonError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)
