"""Column contracts shared by the importers and the predictor."""

from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd


ID_COLUMN = "ID"
NA_VALUES: tuple[str, ...] = ("NaN", "NA", "")


class SchemaError(ValueError):
    """Raised when a table does not have the columns or values a step needs."""


def require_columns(frame: pd.DataFrame, columns: Iterable[str], *, context: str) -> None:
    missing = [column for column in columns if column not in frame.columns]
    if missing:
        raise SchemaError(f"{context} is missing required columns: {', '.join(missing)}")


def require_unique_ids(frame: pd.DataFrame, *, context: str) -> None:
    duplicated = frame.loc[frame[ID_COLUMN].duplicated(), ID_COLUMN]
    if not duplicated.empty:
        sample = ", ".join(map(str, duplicated.unique()[:5]))
        raise SchemaError(f"{context} has duplicate IDs: {sample}")


def _factor_codes(series: pd.Series) -> pd.Series:
    # Sorted distinct labels numbered from 1; missing stays missing.
    levels = sorted(series.dropna().astype(str).unique())
    mapping = {level: float(code) for code, level in enumerate(levels, start=1)}
    return series.map(lambda value: mapping.get(str(value)) if pd.notna(value) else float("nan"))


def coerce_numeric(
    frame: pd.DataFrame,
    *,
    context: str,
    strict: bool = True,
    exclude: Sequence[str] = (ID_COLUMN,),
) -> pd.DataFrame:
    """Return a copy of ``frame`` where every non-excluded column is numeric.

    Text columns that parse as numbers are converted. With ``strict`` a column
    that does not parse raises :class:`SchemaError`; otherwise it is treated
    as a label column and becomes 1-based codes of its sorted distinct values.
    """

    coerced = frame.copy()
    for column in coerced.columns:
        if column in exclude:
            continue
        series = coerced[column]
        if pd.api.types.is_bool_dtype(series):
            coerced[column] = series.astype(float)
            continue
        if pd.api.types.is_numeric_dtype(series):
            continue
        try:
            coerced[column] = pd.to_numeric(series, errors="raise")
        except (ValueError, TypeError) as exc:
            if strict:
                raise SchemaError(f"{context}: column {column!r} is not numeric ({exc})") from exc
            coerced[column] = _factor_codes(series)
    return coerced


def sort_by_id(frame: pd.DataFrame) -> pd.DataFrame:
    return frame.sort_values(ID_COLUMN, kind="mergesort").reset_index(drop=True)


__all__ = [
    "ID_COLUMN",
    "NA_VALUES",
    "SchemaError",
    "require_columns",
    "require_unique_ids",
    "coerce_numeric",
    "sort_by_id",
]
