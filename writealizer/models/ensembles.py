"""Which pre-trained models make up each scoring mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence


READERBENCH_QUALITY = "holistic-quality-from-readerbench"
COHMETRIX_QUALITY = "holistic-quality-from-cohmetrix"
MERGED_CWS_CIWS = "cws-ciws-from-merged"

MODE_ALIASES: Mapping[str, str] = {
    "rb_mod1": READERBENCH_QUALITY,
    "coh_mod1": COHMETRIX_QUALITY,
    "rb_gamet_cws1": MERGED_CWS_CIWS,
}


@dataclass(frozen=True, slots=True)
class ScoreSpec:
    """One output column and the models averaged into it."""

    column: str
    model_names: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.model_names:
            raise ValueError(f"Score column {self.column!r} needs at least one model.")


@dataclass(frozen=True, slots=True)
class EnsembleSpec:
    mode: str
    scores: tuple[ScoreSpec, ...]

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(score.column for score in self.scores)

    @property
    def model_names(self) -> tuple[str, ...]:
        names: list[str] = []
        for score in self.scores:
            names.extend(name for name in score.model_names if name not in names)
        return tuple(names)


def _quality(mode: str, prefix: str) -> EnsembleSpec:
    names = tuple(f"{prefix}_mod1{suffix}" for suffix in "abcdef")
    return EnsembleSpec(mode, (ScoreSpec("predicted_quality", names),))


DEFAULT_ENSEMBLES: Mapping[str, EnsembleSpec] = {
    READERBENCH_QUALITY: _quality(READERBENCH_QUALITY, "rb"),
    COHMETRIX_QUALITY: _quality(COHMETRIX_QUALITY, "coh"),
    MERGED_CWS_CIWS: EnsembleSpec(
        MERGED_CWS_CIWS,
        (
            ScoreSpec("predicted_cws", ("CWS_mod1a", "CWS_mod1b")),
            ScoreSpec("predicted_ciws", ("CIWS_mod1a", "CIWS_mod1b")),
        ),
    ),
}


def _from_mapping(mode: str, columns: Mapping[str, Sequence[str]]) -> EnsembleSpec:
    scores = tuple(ScoreSpec(str(column), tuple(names)) for column, names in columns.items())
    if not scores:
        raise ValueError(f"Ensemble override for {mode!r} defines no score columns.")
    return EnsembleSpec(mode, scores)


def available_modes(overrides: Mapping[str, Mapping[str, Sequence[str]]] | None = None) -> tuple[str, ...]:
    modes = list(DEFAULT_ENSEMBLES)
    for mode in overrides or {}:
        if mode not in modes:
            modes.append(mode)
    return tuple(modes)


def resolve_ensemble(
    mode: str,
    overrides: Mapping[str, Mapping[str, Sequence[str]]] | None = None,
) -> EnsembleSpec:
    """Return the ensemble for ``mode`` (or one of its legacy aliases).

    ``overrides`` maps a mode to ``{column: [model names]}`` and replaces or
    adds to the built-in ensembles. Unknown modes raise ``ValueError``.
    """

    overrides = overrides or {}
    canonical = MODE_ALIASES.get(mode, mode)
    if canonical in overrides:
        return _from_mapping(canonical, overrides[canonical])
    try:
        return DEFAULT_ENSEMBLES[canonical]
    except KeyError:
        accepted = [*available_modes(overrides), *MODE_ALIASES]
        raise ValueError(
            f"Unknown scoring mode {mode!r}. Expected one of: {', '.join(accepted)}"
        ) from None


__all__ = [
    "READERBENCH_QUALITY",
    "COHMETRIX_QUALITY",
    "MERGED_CWS_CIWS",
    "MODE_ALIASES",
    "ScoreSpec",
    "EnsembleSpec",
    "DEFAULT_ENSEMBLES",
    "available_modes",
    "resolve_ensemble",
]
