import logging
from pathlib import Path

import pandas as pd

from writealizer.data.schemas import ID_COLUMN


LOGGER = logging.getLogger(__name__)


def export_scores(scores, data, name, *, directory=None):
    """Write ``scores`` in front of the full input table as a CSV file.

    Rows are aligned by position, not re-sorted. The file has a header row and
    no index column. Returns the path written.
    """

    if len(scores) != len(data):
        raise ValueError(
            f"Cannot align {len(scores)} score rows with {len(data)} data rows for export."
        )
    target_dir = Path(directory) if directory is not None else Path.cwd()
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / name

    score_columns = scores.drop(columns=[ID_COLUMN], errors="ignore").reset_index(drop=True)
    combined = pd.concat([score_columns, data.reset_index(drop=True)], axis=1)
    combined.to_csv(path, sep=",", index=False)
    LOGGER.info("Exported %d scored rows to %s", len(combined), path)
    return path


__all__ = ["export_scores"]
