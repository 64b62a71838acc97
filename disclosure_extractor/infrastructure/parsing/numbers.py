"""Reconstruction of number runs printed without separators.

Some layouts print a unit price and several returns as one run, e.g.
``249.230.994.135.11`` for ``249.23 | 0.99 | 4.13 | 5.11``. Every value carries
exactly two fractional digits, so the run is split on ``.`` and each part is
divided into the fraction of one value and the integer digits of the next.
"""
from __future__ import annotations

from decimal import Decimal

from disclosure_extractor.config import SETTINGS
from disclosure_extractor.domain.errors import NumericReconstructionError
from disclosure_extractor.infrastructure.parsing.utils import NEGATIVE_GLYPHS, PLUS_GLYPHS

FRACTION_DIGITS = 2


def _clean_run(run: str) -> tuple[str, tuple[int, ...]]:
    """Drop sign glyphs and whitespace, keeping the offsets of negative glyphs."""
    chars: list[str] = []
    negative_offsets: list[int] = []
    for ch in run:
        if ch in NEGATIVE_GLYPHS:
            negative_offsets.append(len(chars))
        elif ch in PLUS_GLYPHS or ch.isspace():
            continue
        else:
            chars.append(ch)
    return "".join(chars), tuple(negative_offsets)


def reconstruct_values(run: str, expected: int) -> tuple[Decimal, ...]:
    """Split ``run`` into ``expected`` values with two fractional digits each.

    A negative glyph applies to the value whose digits start at or span its
    position. Raises NumericReconstructionError instead of guessing when the run
    does not hold enough parts.
    """
    if expected < 1:
        raise ValueError("expected must be at least 1")

    cleaned, negative_offsets = _clean_run(run)
    parts = cleaned.split(".")
    if len(parts) < expected + 1:
        raise NumericReconstructionError(
            f"Expected {expected} values in {run.strip()!r}, found {len(parts)} parts",
            run=run,
            expected=expected,
        )

    starts = [0]
    for part in parts[:-1]:
        starts.append(starts[-1] + len(part) + 1)

    values: list[Decimal] = []
    for k in range(1, expected + 1):
        claimed = 0 if k == 1 else FRACTION_DIGITS
        integer = parts[k - 1][claimed:]
        fraction = parts[k][:FRACTION_DIGITS]
        if not integer or len(fraction) < FRACTION_DIGITS or not (integer + fraction).isdigit():
            raise NumericReconstructionError(
                f"Cannot split value {k} of {expected} from {run.strip()!r}",
                run=run,
                expected=expected,
            )
        value = SETTINGS.decimal_context.create_decimal(f"{integer}.{fraction}")

        span_start = starts[k - 1] + claimed
        span_end = starts[k] + FRACTION_DIGITS
        if any(span_start <= offset < span_end for offset in negative_offsets):
            value = -value
        values.append(value)

    return tuple(values)
