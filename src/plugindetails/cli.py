from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence

from plugindetails import __version__
from plugindetails.config import Settings
from plugindetails.lifecycle import activate, activation_notice, deactivate
from plugindetails.logging_config import configure_logging
from plugindetails.markdown import parse_readme
from plugindetails.models.plugin import PluginApiArgs
from plugindetails.plugin_info import PLUGIN_INFORMATION_ACTION
from plugindetails.state import open_app_state

EXIT_OK = 0
EXIT_NOT_FOUND = 1


def _print_json(data: object) -> None:
    sys.stdout.write(json.dumps(data, indent=2) + "\n")


def cmd_sections(args: argparse.Namespace, settings: Settings) -> int:
    path = args.readme or settings.plugin.readme_path
    _print_json(parse_readme(path).model_dump())
    return EXIT_OK


async def cmd_info(args: argparse.Namespace, settings: Settings) -> int:
    slug = args.slug or settings.plugin.slug
    async with open_app_state(settings) as state:
        notice = await activation_notice(state.cache, settings.plugin)
        info = state.details.plugin_info(None, PLUGIN_INFORMATION_ACTION, PluginApiArgs(slug=slug))

    if notice is not None:
        sys.stderr.write(notice + "\n")
    if info is None:
        sys.stderr.write(f"No plugin information for {slug!r}\n")
        return EXIT_NOT_FOUND
    _print_json(info.model_dump(exclude_none=True))
    return EXIT_OK


async def cmd_check_update(args: argparse.Namespace, settings: Settings) -> int:
    async with open_app_state(settings) as state:
        if args.no_cache:
            await state.checker.clear()
        local_version = args.local_version or state.details.headers.version
        offer = await state.checker.check(local_version)

    if offer is None:
        sys.stdout.write(f"{settings.plugin.slug} {local_version} is up to date\n")
    else:
        _print_json(offer.model_dump())
    return EXIT_OK


async def cmd_activate(args: argparse.Namespace, settings: Settings) -> int:
    async with open_app_state(settings) as state:
        await activate(state.cache, settings.plugin)
    return EXIT_OK


async def cmd_deactivate(args: argparse.Namespace, settings: Settings) -> int:
    async with open_app_state(settings) as state:
        await deactivate(state.checker, settings.plugin)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plugindetails",
        description="Plugin details panel and GitHub release update checks.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sections = sub.add_parser("sections", help="Print the README sections as JSON.")
    p_sections.add_argument(
        "readme", nargs="?", default=None, help="README path (defaults to the configured one)."
    )

    p_info = sub.add_parser("info", help="Print the plugin information payload as JSON.")
    p_info.add_argument(
        "--slug", default=None, help="Slug to request (defaults to the configured one)."
    )

    p_check = sub.add_parser("check-update", help="Check GitHub for a newer release.")
    p_check.add_argument(
        "--local-version",
        default=None,
        help="Installed version (defaults to the main file's Version header).",
    )
    p_check.add_argument(
        "--no-cache", action="store_true", help="Drop the cached remote version first."
    )

    sub.add_parser("activate", help="Run the activation hook.")
    sub.add_parser("deactivate", help="Run the deactivation hook.")
    return parser


_ASYNC_COMMANDS = {
    "info": cmd_info,
    "check-update": cmd_check_update,
    "activate": cmd_activate,
    "deactivate": cmd_deactivate,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    configure_logging(settings.logging)

    if args.command == "sections":
        return cmd_sections(args, settings)
    return asyncio.run(_ASYNC_COMMANDS[args.command](args, settings))
