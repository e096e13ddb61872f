from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape


class Id60CliError(Exception):
    pass


class UsageError(Id60CliError):
    pass


ID60_PRETTY = "ID60_PRETTY"
ID60_QUIET = "ID60_QUIET"

_ERROR_CONSOLE = Console(stderr=True)


@dataclass(frozen=True)
class GlobalOpts:
    pretty: bool = False
    quiet: bool = False


def _truthy(raw: str | None) -> bool:
    return str(raw or "").strip().lower() in {"1", "true", "yes", "on"}


def _bootstrap_env() -> None:
    # Discover and load .env without overriding already-exported values.
    load_dotenv()


def _global_opts(*, pretty: bool, quiet: bool) -> GlobalOpts:
    return GlobalOpts(
        pretty=pretty or _truthy(os.environ.get(ID60_PRETTY)),
        quiet=quiet or _truthy(os.environ.get(ID60_QUIET)),
    )


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _note(g: GlobalOpts, msg: str) -> None:
    if not g.quiet:
        _eprint(f"note: {msg}")


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {escape(msg)}", highlight=False)


def _print_json(obj: Any, *, pretty: bool) -> None:
    if pretty:
        sys.stdout.write(json.dumps(obj, indent=2, sort_keys=True) + "\n")
    else:
        sys.stdout.write(json.dumps(obj, separators=(",", ":"), sort_keys=True) + "\n")


def _parse_int(raw: str, *, label: str) -> int:
    text = str(raw or "").strip().replace("_", "")
    try:
        if text[:2].lower() == "0x":
            return int(text[2:], 16)
        return int(text, 10)
    except ValueError as e:
        raise UsageError(f"invalid {label}: {raw!r} (expected decimal or 0x-prefixed hex)") from e


def _parse_hex_bytes(raw: str, *, label: str) -> bytes:
    text = str(raw or "").strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise UsageError(f"invalid {label}: {e}") from e
