"""FlarmNet Export - TDB to Parquet and back."""
from __future__ import annotations

from pathlib import Path

import click

from flarmnet_core.protocol import DEFAULT_VERSION, MAX_U32
from flarmnet_tdb.decode import read_tdb
from flarmnet_tdb.encode import write_tdb
from flarmnet_tdb.models import TdbFile
from flarmnet_export.tables import export_parquet, load_parquet


@click.group()
def main():
    pass


@main.command("export")
@click.argument("tdb", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(dir_okay=False, path_type=Path))
def export_cmd(tdb: Path, out: Path) -> None:
    """Export the records of a TDB file to a Parquet table."""
    try:
        decoded = read_tdb(tdb)
        rows = export_parquet(decoded, out)
    except Exception as e:
        # Fail closed, with a single-line reason.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)

    click.echo(f"PASS: Table written to {out}")
    click.echo(f"  Version: {decoded.version}")
    click.echo(f"  Rows: {rows}")
    click.echo(f"  Skipped: {decoded.error_count}")


@main.command("build")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--version", "version", default=DEFAULT_VERSION, show_default=True,
              type=click.IntRange(0, MAX_U32), help="Format version written to the header")
def build_cmd(source: Path, out: Path, version: int) -> None:
    """Build a TDB file from a Parquet table."""
    try:
        records = load_parquet(source)
        write_tdb(out, TdbFile(version=version, records=records))
    except Exception as e:
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)

    click.echo(f"PASS: TDB written to {out}")
    click.echo(f"  Records: {len(records)}")


if __name__ == "__main__":
    main()
