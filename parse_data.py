# parse_data.py
"""
Parse the GWP dataset and print basic stats.

Usage:
    python parse_data.py [path/to/gwp.csv]
"""

import sys

from gwp.config import Config
from gwp.data.loader import LoadError, parse_gwp_csv
from gwp.data.schema import N_FIELDS


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    file_path = argv[0] if argv else Config.DATA_FILE

    try:
        _, stats = parse_gwp_csv(file_path)
    except LoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Records loaded:        {stats['n_records']}")
    print(f"Rows skipped:          {stats['n_skipped_rows']}")
    print(f"Cells defaulted to 0:  {stats['n_bad_cells']}")
    print(f"Duplicate keys:        {stats['n_duplicate_keys']}")

    if stats["skipped_examples"]:
        print("\nExample skipped rows:")
        for ex in stats["skipped_examples"]:
            print(f"- Line {ex['line_number']}: {ex['n_fields']} fields (expected {N_FIELDS})")

    if stats["duplicate_key_examples"]:
        print("\nExample duplicates:")
        for example in stats["duplicate_key_examples"]:
            print(f"- {example}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
