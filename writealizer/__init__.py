"""
Automated writing quality and CBM scores from text-analysis tool exports.

Import ReaderBench, Coh-Metrix or GAMET CSV files into normalized tables,
then score them with the bundled regression ensembles via
:func:`predict_quality`.
"""

from .config import WriteAlizerConfig, load_config
from .data import (
    SchemaError,
    import_coh,
    import_gamet,
    import_merge_gamet_rb,
    import_rb,
    merge_rb_gamet,
    sample_path,
)
from .export import export_scores
from .scoring import EnsembleScorer, predict_quality

__all__ = [
    "WriteAlizerConfig",
    "load_config",
    "SchemaError",
    "import_coh",
    "import_gamet",
    "import_merge_gamet_rb",
    "import_rb",
    "merge_rb_gamet",
    "sample_path",
    "export_scores",
    "EnsembleScorer",
    "predict_quality",
]
