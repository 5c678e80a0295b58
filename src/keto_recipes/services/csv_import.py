"""Tolerant CSV parser for bulk-loading food items.

Expected columns are ``item, protein, fat, carbs``. Bad lines never abort the
scan; each one is reported as ``Line N: <reason>`` where ``N`` counts the
non-blank data lines (header excluded), not raw file lines.
"""

import logging
import re

from keto_recipes.domain.foods import CsvParseResult, FoodItemDraft

EXPECTED_COLUMNS = 4
HEADER_MARKER = "item"

_NAME_QUOTES = re.compile(r"^[\"']|[\"']$")
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_logger = logging.getLogger(__name__)


def parse_food_csv(text: str) -> CsvParseResult:
    """Parse CSV text into food item drafts and per-line error messages."""
    lines = [line for line in text.split("\n") if line.strip()]
    data_lines = lines
    if lines and HEADER_MARKER in lines[0].lower():
        data_lines = lines[1:]

    items: list[FoodItemDraft] = []
    errors: list[str] = []
    for index, raw_line in enumerate(data_lines, start=1):
        try:
            draft, error = _parse_line(raw_line.strip())
        except Exception as exc:
            _logger.warning("Unexpected CSV parse failure on line %s", index)
            errors.append(f"Line {index}: Parse error - {exc}")
            continue
        if error is not None:
            errors.append(f"Line {index}: {error}")
            continue
        items.append(draft)

    return CsvParseResult(items=items, errors=errors, total_lines=len(data_lines))


def split_csv_line(line: str) -> list[str]:
    """Split one line on commas outside double quotes.

    Quotes are kept in the tokens. A trailing empty field is dropped.
    """
    fields: list[str] = []
    current = ""
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
            current += char
        elif char == "," and not in_quotes:
            fields.append(current.strip())
            current = ""
        else:
            current += char
    if current:
        fields.append(current.strip())
    return fields


def parse_leading_float(value: str) -> float | None:
    """Parse the longest numeric prefix of ``value``; None when there is none."""
    match = _NUMERIC_PREFIX.match(value.lstrip())
    if match is None:
        return None
    return float(match.group())


def _parse_line(line: str) -> tuple[FoodItemDraft | None, str | None]:
    fields = split_csv_line(line)
    if len(fields) < EXPECTED_COLUMNS:
        return None, "Invalid format - expected 4 columns"

    item, protein, fat, carbs = fields[:EXPECTED_COLUMNS]
    name = _NAME_QUOTES.sub("", item).strip()
    if not name:
        return None, "Missing item name"

    values = [parse_leading_float(raw) for raw in (protein, fat, carbs)]
    if any(value is None for value in values):
        return None, "Invalid numeric values"

    protein_value, fat_value, carbs_value = values
    return (
        FoodItemDraft(
            name=name, protein=protein_value, fat=fat_value, carbs=carbs_value
        ),
        None,
    )
