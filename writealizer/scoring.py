"""Ensemble scoring of imported ReaderBench, Coh-Metrix and merged tables."""

import logging

import numpy as np
import pandas as pd

from writealizer.config import WriteAlizerConfig
from writealizer.data.schemas import ID_COLUMN, require_columns
from writealizer.export import export_scores
from writealizer.models import ModelLoader, check_features, predict_values, resolve_ensemble


LOGGER = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "filename.csv"


class EnsembleScorer:
    """Average the outputs of every model in an ensemble, one column per score."""

    __slots__ = ("ensemble", "loader")

    def __init__(self, ensemble, loader):
        self.ensemble = ensemble
        self.loader = loader

    def _load_models(self):
        return {name: self.loader(name) for name in self.ensemble.model_names}

    def score(self, data):
        require_columns(data, (ID_COLUMN,), context="Scoring input")
        models = self._load_models()
        for name, model in models.items():
            check_features(name, model, data)

        predictions = {name: predict_values(name, model, data) for name, model in models.items()}
        result = pd.DataFrame({ID_COLUMN: data[ID_COLUMN].to_numpy()})
        for score in self.ensemble.scores:
            stacked = np.vstack([predictions[name] for name in score.model_names])
            result[score.column] = stacked.mean(axis=0)
        LOGGER.info(
            "Scored %d rows with %s (%d models)",
            len(result),
            self.ensemble.mode,
            len(models),
        )
        return result


def predict_quality(
    model,
    data,
    store=False,
    name=DEFAULT_EXPORT_NAME,
    *,
    config=None,
    loader=None,
):
    """Score ``data`` with the ensemble selected by ``model``.

    ``model`` is ``holistic-quality-from-readerbench``,
    ``holistic-quality-from-cohmetrix`` or ``cws-ciws-from-merged`` (the
    older ``rb_mod1``, ``coh_mod1`` and ``rb_gamet_cws1`` names are accepted
    too). Returns ``ID`` plus ``predicted_quality``, or ``predicted_cws`` and
    ``predicted_ciws``. With ``store=True`` the scores are also written in
    front of ``data`` to ``name`` in the export directory.

    ``loader`` maps a model name to a fitted model; it defaults to a joblib
    loader over the configured model directory.
    """

    cfg = config or WriteAlizerConfig()
    ensemble = resolve_ensemble(model, cfg.models.ensembles)
    scorer = EnsembleScorer(ensemble, loader or ModelLoader.from_config(cfg.models))
    scores = scorer.score(data)
    if store:
        export_scores(scores, data, name, directory=cfg.export.resolve_dir())
    return scores


__all__ = ["EnsembleScorer", "predict_quality", "DEFAULT_EXPORT_NAME"]
