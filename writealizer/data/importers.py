"""Readers for ReaderBench, Coh-Metrix and GAMET output files.

Each importer returns a normalized table: an ``ID`` string column, every
other column numeric, rows sorted by ``ID``. :func:`merge_rb_gamet` joins a
ReaderBench table with a GAMET table for the CWS/CIWS models.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from writealizer.config import WriteAlizerConfig
from .identifiers import IdentifierRule
from .schemas import (
    ID_COLUMN,
    NA_VALUES,
    SchemaError,
    coerce_numeric,
    require_columns,
    require_unique_ids,
    sort_by_id,
)


LOGGER = logging.getLogger(__name__)

FILENAME_COLUMN = "filename"
GAMET_COLUMNS: tuple[str, ...] = ("error_count", "word_count", "grammar", "misspelling")
RB_ID_COLUMN = "File name"
RB_SEPARATOR_LINE = "SEP=,"
RB_EXCLUDED_PATTERN = "AvgWordsList"
MERGE_SUFFIXES = ("_rb", "_gamet")


def _read_csv(path: Path, *, skiprows: int = 0, text_columns: tuple[str, ...] = ()) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found at: {path}")
    return pd.read_csv(
        path,
        sep=",",
        skiprows=skiprows,
        na_values=list(NA_VALUES),
        keep_default_na=False,
        encoding="utf-8-sig",
        dtype={column: str for column in text_columns},
    )


def _with_identifier(frame: pd.DataFrame, rule: IdentifierRule, *, context: str) -> pd.DataFrame:
    require_columns(frame, (FILENAME_COLUMN,), context=context)
    frame = frame.copy()
    frame[ID_COLUMN] = rule.apply(frame[FILENAME_COLUMN])
    return frame


def _finalize(frame: pd.DataFrame, *, context: str) -> pd.DataFrame:
    require_unique_ids(frame, context=context)
    result = sort_by_id(frame)
    LOGGER.info("Imported %s: %d rows, %d columns", context, len(result), result.shape[1])
    return result


def import_gamet(path, *, config: WriteAlizerConfig | None = None) -> pd.DataFrame:
    """Import a GAMET output file.

    Keeps ``ID``, the four GAMET counts and adds ``per_gram`` and
    ``per_misspell`` (grammar and misspelling errors per word, rounded to six
    decimals). A zero ``word_count`` is rejected rather than producing
    infinite rates.
    """

    cfg = config or WriteAlizerConfig()
    path = Path(path)
    context = f"GAMET file {path}"
    rule = IdentifierRule.from_config(cfg.identifier)

    frame = _with_identifier(_read_csv(path), rule, context=context)
    require_columns(frame, GAMET_COLUMNS, context=context)
    frame = frame.loc[:, [ID_COLUMN, *GAMET_COLUMNS]]
    frame = coerce_numeric(frame, context=context)

    zero_words = frame.loc[frame["word_count"] == 0, ID_COLUMN]
    if not zero_words.empty:
        raise SchemaError(
            f"{context}: word_count is zero for ID(s) {', '.join(zero_words.astype(str))}; "
            "cannot compute per-word error rates."
        )
    frame["per_gram"] = (frame["grammar"] / frame["word_count"]).round(6)
    frame["per_misspell"] = (frame["misspelling"] / frame["word_count"]).round(6)
    return _finalize(frame, context=context)


def import_coh(path, *, config: WriteAlizerConfig | None = None) -> pd.DataFrame:
    """Import a Coh-Metrix output file, keeping every column it contains.

    Text columns such as ``TextID`` and ``filename`` are kept as 1-based codes
    of their sorted distinct values.
    """

    cfg = config or WriteAlizerConfig()
    path = Path(path)
    context = f"Coh-Metrix file {path}"
    rule = IdentifierRule.from_config(cfg.identifier)

    frame = _with_identifier(_read_csv(path), rule, context=context)
    frame = coerce_numeric(frame, context=context, strict=False)
    return _finalize(frame, context=context)


def _has_separator_line(path: Path) -> bool:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found at: {path}")
    with path.open("r", encoding="utf-8-sig") as handle:
        first_line = handle.readline()
    return first_line.rstrip("\r\n") == RB_SEPARATOR_LINE


def import_rb(path, *, config: WriteAlizerConfig | None = None) -> pd.DataFrame:
    """Import a ReaderBench output file.

    Some ReaderBench exports start with a ``SEP=,`` hint line for spreadsheet
    software; it is skipped when present. The ``AvgWordsList`` sentiment
    columns vary in number between exports and are dropped. ``File name`` is
    read as text so IDs like ``001`` keep their leading zeros; other text
    columns become label codes.
    """

    path = Path(path)
    context = f"ReaderBench file {path}"

    skiprows = 1 if _has_separator_line(path) else 0
    frame = _read_csv(path, skiprows=skiprows, text_columns=(RB_ID_COLUMN,))
    excluded = [column for column in frame.columns if RB_EXCLUDED_PATTERN in column]
    frame = frame.drop(columns=excluded)
    require_columns(frame, (RB_ID_COLUMN,), context=context)
    frame = frame.rename(columns={RB_ID_COLUMN: ID_COLUMN})

    if frame[ID_COLUMN].isna().any():
        raise SchemaError(f"{context}: {RB_ID_COLUMN!r} has missing values.")
    frame = coerce_numeric(frame, context=context, strict=False)
    return _finalize(frame, context=context)


def merge_rb_gamet(rb: pd.DataFrame, gamet: pd.DataFrame) -> pd.DataFrame:
    """Inner-join a ReaderBench table and a GAMET table on ``ID``.

    IDs present in only one table are dropped; the counts are logged because
    they shrink the result without raising.
    """

    require_columns(rb, (ID_COLUMN,), context="ReaderBench table")
    require_columns(gamet, (ID_COLUMN,), context="GAMET table")
    merged = pd.merge(rb, gamet, on=ID_COLUMN, how="inner", sort=True, suffixes=MERGE_SUFFIXES)

    matched = set(merged[ID_COLUMN])
    rb_only = len(set(rb[ID_COLUMN]) - matched)
    gamet_only = len(set(gamet[ID_COLUMN]) - matched)
    if rb_only or gamet_only:
        LOGGER.warning(
            "Merge dropped %d ReaderBench-only and %d GAMET-only ID(s)", rb_only, gamet_only
        )
    return merged.reset_index(drop=True)


def import_merge_gamet_rb(rb_path, gamet_path, *, config: WriteAlizerConfig | None = None) -> pd.DataFrame:
    """Import a ReaderBench file and a GAMET file and merge them on ``ID``."""

    rb = import_rb(rb_path, config=config)
    gamet = import_gamet(gamet_path, config=config)
    return merge_rb_gamet(rb, gamet)


__all__ = [
    "import_gamet",
    "import_coh",
    "import_rb",
    "merge_rb_gamet",
    "import_merge_gamet_rb",
    "GAMET_COLUMNS",
    "RB_ID_COLUMN",
]
