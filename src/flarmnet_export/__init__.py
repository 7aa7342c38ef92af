"""FlarmNet Export - Parquet tables from and to TDB files."""
from .tables import RECORD_SCHEMA, export_parquet, load_parquet, records_to_frame

__all__ = ["RECORD_SCHEMA", "export_parquet", "load_parquet", "records_to_frame"]
