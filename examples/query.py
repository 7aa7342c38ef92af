"""Look up a FLARM id in a table written by `flarmnet-export export`."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 3:
        print("Usage: python query.py <table.parquet> <flarm_id>")
        print("Example: python query.py flarmnet.parquet 3EE3C7")
        sys.exit(1)

    table = Path(sys.argv[1])
    flarm_id = sys.argv[2].upper()

    con = duckdb.connect(":memory:")
    con.execute(f"CREATE VIEW records AS SELECT * FROM read_parquet('{table}')")

    sql = """
    SELECT
        slot,
        flarm_id,
        call_sign,
        registration,
        plane_type,
        airfield,
        pilot_name,
        frequency
    FROM records
    WHERE flarm_id = ?
    ORDER BY slot
    """

    print(f"--- FlarmNet lookup: {flarm_id} ---\n")

    df = con.execute(sql, [flarm_id]).fetchdf()
    if df.empty:
        print("No record found.")
        sys.exit(1)

    for _, row in df.iterrows():
        print(f"{row['flarm_id']} {row['call_sign']} ({row['registration']})")
        print(f"  Type: {row['plane_type']}")
        print(f"  Airfield: {row['airfield']}")
        print(f"  Pilot: {row['pilot_name']}")
        print(f"  Frequency: {row['frequency'] or '-'}")
        print()


if __name__ == "__main__":
    main()
