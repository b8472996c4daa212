#!/usr/bin/env python3
# tools/walk_items.py
import sys
from pathlib import Path
from cborview.binary.reader import load_bytes
from cborview.binary.codecs.cursor import Cursor
from cborview.binary.codecs.header import decode_header
from cborview.binary.codecs.skip import skip_item
from cborview.binary.constants import INDEFINITE
from cborview.models.common import MajorType

def main(path: Path, max_items: int = 50):
    raw = load_bytes(str(path))
    cur = Cursor(raw)
    i = 0
    while not cur.at_end() and i < max_items:
        start = cur.tell()
        hdr = cur.copy()
        major, val = decode_header(hdr)
        skip_item(cur)
        arg = "indef" if val == INDEFINITE else str(val)
        print(f"[{i:03d}] off={start:6d} len={cur.tell() - start:6d} {MajorType(major).name:<6} arg={arg}"
              f"  head={raw[start:start + 8].hex()}")
        i += 1
    print(f"items={i} consumed={cur.tell()} of {len(raw)}")

if __name__ == "__main__":
    main(Path(sys.argv[1]), int(sys.argv[2]) if len(sys.argv) > 2 else 50)
