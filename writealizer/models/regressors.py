import logging
from pathlib import Path

import joblib
import numpy as np

from writealizer.data.schemas import ID_COLUMN, SchemaError


LOGGER = logging.getLogger(__name__)


class ModelLoader:
    """Load serialized regressors from ``<model_dir>/<name><suffix>`` with joblib."""

    __slots__ = ("model_dir", "suffix")

    def __init__(self, model_dir, suffix=".joblib"):
        self.model_dir = Path(model_dir)
        self.suffix = suffix

    @classmethod
    def from_config(cls, config):
        return cls(config.resolve_dir(), suffix=config.suffix)

    def path_for(self, name):
        return self.model_dir / f"{name}{self.suffix}"

    def __call__(self, name):
        path = self.path_for(name)
        if not path.exists():
            raise FileNotFoundError(f"Model artifact {name!r} not found at: {path}")
        LOGGER.info("Loading model %s from %s", name, path)
        return joblib.load(path)


def required_features(model):
    names = getattr(model, "feature_names_in_", None)
    if names is None:
        return None
    return [str(name) for name in names]


def check_features(name, model, frame):
    """Raise SchemaError when ``frame`` lacks columns the model was fitted on."""

    features = required_features(model)
    if features is None:
        return
    missing = [feature for feature in features if feature not in frame.columns]
    if missing:
        shown = ", ".join(missing[:10])
        more = f" (+{len(missing) - 10} more)" if len(missing) > 10 else ""
        raise SchemaError(f"Model {name!r} needs columns missing from the data: {shown}{more}")


def model_inputs(model, frame):
    features = required_features(model)
    if features is None:
        return frame.drop(columns=[ID_COLUMN], errors="ignore")
    return frame.loc[:, features]


def predict_values(name, model, frame):
    values = np.asarray(model.predict(model_inputs(model, frame)), dtype=float).reshape(-1)
    if values.shape[0] != len(frame):
        raise SchemaError(
            f"Model {name!r} returned {values.shape[0]} predictions for {len(frame)} rows."
        )
    return values


__all__ = [
    "ModelLoader",
    "required_features",
    "check_features",
    "model_inputs",
    "predict_values",
]
