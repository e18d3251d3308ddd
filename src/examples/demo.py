#!/usr/bin/env python
"""
demo.py – One-shot showcase of recordview.

1. Decorates plain dicts coming out of a generator.
2. Shows the default-column / default-sort lookup a printer would do.
3. Shows the FixedTypeError for a named tuple and the to_record() remedy.
"""

from collections import namedtuple
from operator import itemgetter

from recordview import FixedTypeError, decorate, field_names, get_bundle, to_record, type_names, view

# ────────────────────────────────── 1. Records ─────────────────────────────────────────
INVENTORY = [
    {"sku": "B-200", "name": "bolt", "qty": 120, "bin": "A3", "supplier": "acme"},
    {"sku": "A-100", "name": "anchor", "qty": 4, "bin": "C1", "supplier": "globex"},
    {"sku": "N-300", "name": "nut", "qty": 900, "bin": "A3", "supplier": "acme"},
]


@view(display_fields=["sku", "name", "qty"], sort_fields="sku", type_name="Inventory.Item")
def load_inventory():
    for row in INVENTORY:
        yield dict(row)


# ────────────────────────────────── 2. A tiny "consumer" ───────────────────────────────
def print_table(rows) -> None:
    rows = list(rows)
    if not rows:
        return
    bundle = get_bundle(rows[0])
    columns = list(bundle.display_fields) if bundle and bundle.display_fields else field_names(rows[0])
    if bundle and bundle.sort_fields:
        rows.sort(key=itemgetter(*bundle.sort_fields))
    print("  ".join(f"{c:<8}" for c in columns))
    for row in rows:
        print("  ".join(f"{row.get(c)!s:<8}" for c in columns))


def main() -> None:
    rows = list(load_inventory())
    print(f"type chain: {type_names(rows[0])}\n")
    print_table(rows)

    Point = namedtuple("Point", "x y")
    try:
        decorate(Point(1, 2), display_fields=["x"])
    except FixedTypeError as e:
        print(f"\n✗ {e}")

    point = decorate(to_record(Point(1, 2)), display_fields=["x"], passthru=True)
    print(f"✓ decorated projection: {point.fields()} -> {get_bundle(point)}")


if __name__ == "__main__":
    main()
