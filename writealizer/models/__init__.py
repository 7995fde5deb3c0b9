from .ensembles import (
    COHMETRIX_QUALITY,
    DEFAULT_ENSEMBLES,
    MERGED_CWS_CIWS,
    MODE_ALIASES,
    READERBENCH_QUALITY,
    EnsembleSpec,
    ScoreSpec,
    available_modes,
    resolve_ensemble,
)
from .regressors import ModelLoader, check_features, predict_values

__all__ = [
    "COHMETRIX_QUALITY",
    "DEFAULT_ENSEMBLES",
    "MERGED_CWS_CIWS",
    "MODE_ALIASES",
    "READERBENCH_QUALITY",
    "EnsembleSpec",
    "ScoreSpec",
    "available_modes",
    "resolve_ensemble",
    "ModelLoader",
    "check_features",
    "predict_values",
]
