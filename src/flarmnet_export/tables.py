from __future__ import annotations

from pathlib import Path
from warnings import warn

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from flarmnet_tdb.models import DecodedFile, Record

TEXT_COLUMNS = ["flarm_id", "frequency", "call_sign", "pilot_name", "airfield", "plane_type", "registration"]

RECORD_SCHEMA = pa.schema(
    [("slot", pa.int32())] + [(name, pa.string()) for name in TEXT_COLUMNS]
)


def records_to_frame(decoded: DecodedFile) -> pd.DataFrame:
    """One row per successfully decoded record; `slot` is its position in the file."""
    rows: list[dict] = []
    for slot, outcome in enumerate(decoded.records):
        if not isinstance(outcome, Record):
            warn(f"Skipping record {slot}: {outcome}")
            continue
        rows.append({"slot": slot, **outcome.to_dict()})
    return pd.DataFrame(rows, columns=["slot"] + TEXT_COLUMNS)


def export_parquet(decoded: DecodedFile, out_path: Path) -> int:
    """Write decoded records to a Parquet file. Returns the number of rows written."""
    df = records_to_frame(decoded)
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if df.empty:
        table = RECORD_SCHEMA.empty_table()
    else:
        table = pa.Table.from_pandas(df, schema=RECORD_SCHEMA, preserve_index=False)
    pq.write_table(table, out_path)
    return table.num_rows


def load_parquet(path: Path) -> list[Record]:
    """Read records back from a table. Missing columns and nulls become empty strings."""
    df = pq.read_table(Path(path)).to_pandas()
    if "flarm_id" not in df.columns:
        raise ValueError(f"Table {path} has no flarm_id column")
    if "slot" in df.columns:
        df = df.sort_values("slot", kind="stable")

    records = []
    for row in df.to_dict(orient="records"):
        values = {}
        for name in TEXT_COLUMNS:
            value = row.get(name)
            values[name] = "" if value is None or pd.isna(value) else str(value)
        records.append(Record(**values))
    return records
