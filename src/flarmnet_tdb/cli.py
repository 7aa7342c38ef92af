import json
from pathlib import Path

import click

from flarmnet_core.protocol import DEFAULT_PREVIEW_RECORDS
from .decode import read_tdb
from .errors import TdbError
from .models import DecodedFile, Record

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}


def _load(path: Path) -> DecodedFile:
    try:
        return read_tdb(path)
    except TdbError as e:
        # Fail closed, with a single-line reason.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)


def dump_result(decoded: DecodedFile) -> dict:
    slots = []
    for outcome in decoded.records:
        if isinstance(outcome, Record):
            slots.append({"status": "OK", "record": outcome.to_dict()})
        else:
            slots.append({"status": "ERROR", "error": outcome.to_dict()})
    return {
        "version": decoded.version,
        "ok_count": decoded.ok_count,
        "error_count": decoded.error_count,
        "records": slots,
    }


@click.group()
def main():
    pass


@main.command("info")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--limit", default=DEFAULT_PREVIEW_RECORDS, show_default=True, type=click.IntRange(min=0),
              help="Number of records to preview")
def info_cmd(path: Path, limit: int):
    """Print a summary of a TDB file."""
    decoded = _load(path)

    click.echo(f"Version: {decoded.version}")
    click.echo(f"Records: {len(decoded.records)}")
    click.echo(f"  OK: {decoded.ok_count}")
    click.echo(f"  Errors: {decoded.error_count}")

    click.echo()
    click.echo(f"First {limit} records:")
    for i, outcome in enumerate(decoded.records[:limit]):
        if isinstance(outcome, Record):
            click.echo(
                f"  [{i}] {outcome.flarm_id} call_sign={outcome.call_sign!r} "
                f"airfield={outcome.airfield!r} plane_type={outcome.plane_type!r} "
                f"reg={outcome.registration!r} freq={outcome.frequency!r}"
            )
        else:
            click.echo(f"  [{i}] ERROR: {outcome}")


@main.command("dump")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def dump_cmd(path: Path):
    """Print every slot of a TDB file as canonical JSON."""
    decoded = _load(path)
    click.echo(json.dumps(dump_result(decoded), **CANONICAL_JSON_KW))


if __name__ == "__main__":
    main()
