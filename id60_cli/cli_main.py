from __future__ import annotations

import sys
from typing import Any

import click
import typer

import id60

from . import __version__
from .cli_shared import (
    GlobalOpts,
    UsageError,
    _bootstrap_env,
    _global_opts,
    _note,
    _parse_hex_bytes,
    _parse_int,
    _print_json,
    _rich_error,
)

app = typer.Typer(
    name="id60",
    help="Encode and decode identifiers as fixed-width Base60 text.",
    no_args_is_help=True,
    add_completion=False,
)

_NEW_KINDS = ("uuid4", "uuid7", "ulid")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"id60 {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def app_callback(
    ctx: typer.Context,
    pretty: bool = typer.Option(False, "--pretty", help="Emit indented JSON (env: ID60_PRETTY)"),
    quiet: bool = typer.Option(False, "--quiet", help="Suppress stderr notes (env: ID60_QUIET)"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    del version
    ctx.obj = {"g": _global_opts(pretty=pretty, quiet=quiet)}


def _ctx_global(ctx: typer.Context) -> GlobalOpts:
    if isinstance(ctx.obj, dict) and isinstance(ctx.obj.get("g"), GlobalOpts):
        return ctx.obj["g"]
    return _global_opts(pretty=False, quiet=False)


def _emit(ctx: typer.Context, command: str, **fields: Any) -> None:
    _print_json({"kind": f"id60.{command}.v1", **fields}, pretty=_ctx_global(ctx).pretty)


@app.command("encode-bytes", help="Encode hex-encoded bytes as minimal Base60.")
def encode_bytes(
    ctx: typer.Context,
    hex_bytes: str = typer.Argument(..., help="Input bytes as hex, optional 0x prefix"),
) -> None:
    raw = _parse_hex_bytes(hex_bytes, label="hex bytes")
    _emit(ctx, "encode-bytes", input=raw.hex(), output=id60.encode_bytes(raw))


@app.command("decode-bytes", help="Decode Base60 to minimal big-endian bytes (hex).")
def decode_bytes(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Base60 text"),
) -> None:
    raw = id60.decode_to_bytes(text)
    _note(_ctx_global(ctx), "leading zero bytes of the original input are not recoverable")
    _emit(ctx, "decode-bytes", input=text, output=raw.hex())


@app.command("encode-int", help="Encode a non-negative integer as Base60.")
def encode_int(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Integer, decimal or 0x-prefixed hex"),
    pad: int | None = typer.Option(None, "--pad", help="Left-pad to exactly this many chars"),
) -> None:
    n = _parse_int(value, label="integer")
    _emit(ctx, "encode-int", input=str(n), output=id60.encode_integer(n, pad))


@app.command("decode-int", help="Decode Base60 to a decimal integer.")
def decode_int(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Base60 text"),
) -> None:
    # Decimal string keeps values above 2**53 exact for JSON consumers.
    _emit(ctx, "decode-int", input=text, output=str(id60.decode_to_integer(text)))


@app.command("encode-int64", help="Encode an unsigned 64-bit integer as 11 Base60 chars.")
def encode_int64(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Integer, decimal or 0x-prefixed hex"),
) -> None:
    n = _parse_int(value, label="integer")
    _emit(ctx, "encode-int64", input=str(n), output=id60.encode_int64(n))


@app.command("decode-int64", help="Decode 11 Base60 chars to an unsigned 64-bit integer.")
def decode_int64(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Base60 text (11 chars)"),
) -> None:
    _emit(ctx, "decode-int64", input=text, output=str(id60.decode_int64(text)))


@app.command("encode-uuid", help="Encode a hyphenated UUID as 22 Base60 chars.")
def encode_uuid(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="UUID text (8-4-4-4-12)"),
) -> None:
    _emit(ctx, "encode-uuid", input=value, output=id60.encode_uuid(value))


@app.command("decode-uuid", help="Decode 22 Base60 chars to a hyphenated UUID.")
def decode_uuid(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Base60 text (22 chars)"),
) -> None:
    _emit(ctx, "decode-uuid", input=text, output=id60.decode_uuid(text))


@app.command("encode-ulid", help="Encode a 26-char ULID as 22 Base60 chars.")
def encode_ulid(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="ULID text (Crockford base32, any case)"),
) -> None:
    _emit(ctx, "encode-ulid", input=value, output=id60.encode_ulid(value))


@app.command("decode-ulid", help="Decode 22 Base60 chars to a 26-char ULID.")
def decode_ulid(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Base60 text (22 chars)"),
) -> None:
    _emit(ctx, "decode-ulid", input=text, output=id60.decode_ulid(text))


@app.command("compare", help="Compare two Base60 values numerically (-1, 0, 1).")
def compare(
    ctx: typer.Context,
    a: str = typer.Argument(..., help="Left Base60 text"),
    b: str = typer.Argument(..., help="Right Base60 text"),
) -> None:
    _emit(ctx, "compare", a=a, b=b, result=id60.compare_as_bigint(a, b))


@app.command("validate", help="Check that text uses only the Base60 alphabet (exit 1 if not).")
def validate(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to check"),
) -> None:
    valid = id60.is_valid_base60(text)
    _emit(ctx, "validate", input=text, valid=valid)
    if not valid:
        raise typer.Exit(code=1)


@app.command("new", help="Mint a new identifier as 22 Base60 chars (uuid4, uuid7 or ulid).")
def new(
    ctx: typer.Context,
    kind: str = typer.Argument("uuid7", help="One of: uuid4, uuid7, ulid"),
    ts_ms: str | None = typer.Option(None, "--ts-ms", help="Timestamp in ms for uuid7/ulid"),
) -> None:
    kind = kind.strip().lower()
    if kind not in _NEW_KINDS:
        raise UsageError(f"unknown id kind {kind!r} (expected one of: {', '.join(_NEW_KINDS)})")
    ts = _parse_int(ts_ms, label="--ts-ms") if ts_ms is not None else None
    if kind == "uuid4":
        if ts is not None:
            raise UsageError("--ts-ms is not supported for uuid4")
        value = id60.new_uuid4()
        decoded = id60.decode_uuid(value)
    elif kind == "uuid7":
        value = id60.new_uuid7(ts)
        decoded = id60.decode_uuid(value)
    else:
        value = id60.new_ulid(ts)
        decoded = id60.decode_ulid(value)
    _emit(ctx, "new", type=kind, output=value, decoded=decoded)


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        _bootstrap_env()
        result = app(args=argv, prog_name="id60", standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except click.ClickException as e:
        _rich_error(e.format_message())
        return int(e.exit_code)
    except UsageError as e:
        _rich_error(str(e))
        return 2
    except id60.Base60Error as e:
        _rich_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
