import sys
from pathlib import Path

from flarmnet_core.protocol import HEADER_SIZE, FLARM_ID_OFFSET, records_offset


def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_one_byte.py <file>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    if len(b) < HEADER_SIZE:
        print("File too small to corrupt safely.")
        raise SystemExit(2)

    count = int.from_bytes(b[8:12], "little")
    if count == 0:
        print("File has no records to corrupt.")
        raise SystemExit(2)

    # Set the high byte of the first record's FLARM id.
    # Ids are 24-bit, so any non-zero high byte makes that slot invalid.
    idx = records_offset(count) + FLARM_ID_OFFSET + 3
    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")


if __name__ == "__main__":
    main()
