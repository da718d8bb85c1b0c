# gwp/data/loader.py

import csv
import logging
import math
from typing import Optional

from gwp.data.schema import (
    COUNTRY_COL,
    DELIMITER,
    FIRST_YEAR_COL,
    LOB_COL,
    N_FIELDS,
    N_YEARS,
    Record,
    Table,
)

logger = logging.getLogger(__name__)

MAX_EXAMPLES = 5


class LoadError(Exception):
    """The dataset file could not be opened or read."""


# ---- Helpers ----

def parse_year_value(value: str) -> Optional[float]:
    """
    Parse a single yearly premium cell.

    Returns None for empty, non-numeric or non-finite cells.
    """
    value = value.strip()
    if value == "":
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_gwp_csv(file_path: str):
    records = []
    seen_keys: set[tuple[str, str]] = set()

    n_rows = 0
    n_skipped_rows = 0
    n_bad_cells = 0
    n_duplicate_keys = 0
    skipped_examples = []
    duplicate_key_examples: list[str] = []

    try:
        with open(file_path, newline="", encoding="utf-8", errors="replace") as f:
            reader = csv.reader(f, delimiter=DELIMITER, quoting=csv.QUOTE_NONE)

            # header is not validated
            next(reader, None)

            for line_number, fields in enumerate(reader, start=2):
                n_rows += 1

                if len(fields) < N_FIELDS:
                    n_skipped_rows += 1
                    if len(skipped_examples) < MAX_EXAMPLES:
                        skipped_examples.append(
                            {
                                "line_number": line_number,
                                "n_fields": len(fields),
                            }
                        )
                    continue

                country = fields[COUNTRY_COL].strip()
                lob = fields[LOB_COL].strip()

                yearly_values = []
                for cell in fields[FIRST_YEAR_COL:FIRST_YEAR_COL + N_YEARS]:
                    number = parse_year_value(cell)
                    if number is None:
                        if cell.strip():
                            n_bad_cells += 1
                            logger.debug(
                                "Line %s: unparseable year value %r, using 0",
                                line_number,
                                cell,
                            )
                        number = 0.0
                    yearly_values.append(number)

                records.append(
                    Record(
                        country=country,
                        line_of_business=lob,
                        yearly_values=tuple(yearly_values),
                    )
                )

                key = (country.lower(), lob)
                if key in seen_keys:
                    n_duplicate_keys += 1
                    if len(duplicate_key_examples) < MAX_EXAMPLES:
                        duplicate_key_examples.append(
                            f"Duplicate ({country!r}, {lob!r}) at line {line_number}"
                        )
                else:
                    seen_keys.add(key)
    except (OSError, csv.Error) as e:
        raise LoadError(f"Cannot read dataset {file_path!r}: {e}") from e

    table = Table(records=tuple(records))

    stats = {
        "n_rows": n_rows,
        "n_records": len(table),
        "n_skipped_rows": n_skipped_rows,
        "n_bad_cells": n_bad_cells,
        "n_duplicate_keys": n_duplicate_keys,
        "skipped_examples": skipped_examples,
        "duplicate_key_examples": duplicate_key_examples,
    }
    return table, stats


def load(file_path: str) -> Table:
    """
    Load the GWP dataset into an immutable Table.

    Raises LoadError when the file cannot be read; row and cell problems are
    absorbed and only logged.
    """
    table, stats = parse_gwp_csv(file_path)

    logger.info(
        "Loaded %s: %s rows read, %s records, %s skipped rows, "
        "%s defaulted cells, %s duplicate keys",
        file_path,
        stats["n_rows"],
        stats["n_records"],
        stats["n_skipped_rows"],
        stats["n_bad_cells"],
        stats["n_duplicate_keys"],
    )
    for ex in stats["skipped_examples"]:
        logger.warning(
            "Skipped line %s: %s fields, expected %s",
            ex["line_number"],
            ex["n_fields"],
            N_FIELDS,
        )
    for example in stats["duplicate_key_examples"]:
        logger.warning("%s (first occurrence wins)", example)

    return table
