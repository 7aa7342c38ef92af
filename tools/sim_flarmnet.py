import random
from pathlib import Path

from flarmnet_core.ids import format_flarm_id
from flarmnet_core.protocol import DEFAULT_VERSION
from flarmnet_tdb.encode import write_tdb
from flarmnet_tdb.models import Record, TdbFile

# --- CONFIGURATION ---
AIRFIELDS = ["EDKA", "EDLN", "EDKB", "EDRK", "LSZF", "EHTE"]
PLANE_TYPES = ["LS6a", "ASK-13", "ASW 27", "Discus 2b", "DG-800", "Ventus 3", "Paraglider"]
PILOTS = ["John Doe", "Jane Roe", "Jürgen Müller", "", "Åsa Öberg"]
FREQUENCIES = ["", "122.475", "123.150", "123.500", "130.125"]


def make_record(rng: random.Random) -> Record:
    registration = f"D-{rng.randint(0, 9999):04d}"
    return Record(
        flarm_id=format_flarm_id(rng.randint(0, 0xFFFFFF)),
        frequency=rng.choice(FREQUENCIES),
        call_sign=registration[-2:],
        pilot_name=rng.choice(PILOTS),
        airfield=rng.choice(AIRFIELDS),
        plane_type=rng.choice(PLANE_TYPES),
        registration=registration,
    )


def generate_database(out_file: str, count: int = 25, seed: int | None = None) -> Path:
    rng = random.Random(seed)
    tdb = TdbFile(version=DEFAULT_VERSION, records=[make_record(rng) for _ in range(count)])

    out = Path(out_file)
    out.parent.mkdir(parents=True, exist_ok=True)
    write_tdb(out, tdb)

    print(f"GENERATED: {out} ({count} records)")
    return out


if __name__ == "__main__":
    import sys

    # Usage:
    #   python tools/sim_flarmnet.py OUT_FILE [--records N] [--seed S]

    args = [a for a in sys.argv[1:] if a]

    def pop_option(arg_list: list[str], opt: str) -> tuple[str | None, list[str]]:
        """Remove `opt VALUE` from an argv-style list."""
        if opt not in arg_list:
            return None, arg_list
        i = arg_list.index(opt)
        if i + 1 >= len(arg_list):
            raise SystemExit(f"{opt} requires a value")
        return arg_list[i + 1], arg_list[:i] + arg_list[i + 2:]

    records, args = pop_option(args, "--records")
    seed, args = pop_option(args, "--seed")

    out = args[0] if args else "flarmnet.tdb"
    generate_database(
        out,
        count=int(records) if records is not None else 25,
        seed=int(seed) if seed is not None else None,
    )
