# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Classifier capability interface and its gradient-boosted implementation.

The rest of the package only depends on :class:`TextClassifier` and
:class:`FittedModel`: a classifier is fitted on a sequence of
:class:`~sentimentai.schemas.SentimentIssue` and the fitted model turns
issues into :class:`~sentimentai.schemas.SentimentPrediction`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Protocol, Sequence

import numpy as np
import sklearn
from sklearn.ensemble import GradientBoostingClassifier
from sklearn.pipeline import Pipeline

from .config import DEFAULT_THRESHOLD, SentimentConfig
from .errors import TrainingError
from .features import build_featurizer
from .schemas import SentimentIssue, SentimentPrediction

logger = logging.getLogger(__name__)


class FittedModel(Protocol):
    threshold: float

    def predict(self, issue: SentimentIssue) -> SentimentPrediction: ...

    def predict_many(self, issues: Sequence[SentimentIssue]) -> list[SentimentPrediction]: ...


class TextClassifier(Protocol):
    def fit(self, issues: Sequence[SentimentIssue]) -> FittedModel: ...


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


@dataclass
class FittedSentimentModel:
    pipeline: Any
    threshold: float = DEFAULT_THRESHOLD
    metadata: dict[str, Any] = field(default_factory=dict)

    def probabilities(self, texts: Sequence[str]) -> np.ndarray:
        proba = np.asarray(self.pipeline.predict_proba(list(texts)), dtype=np.float64)
        return np.clip(proba[:, 1], 0.0, 1.0)

    def scores(self, texts: Sequence[str], probabilities: np.ndarray | None = None) -> np.ndarray:
        if hasattr(self.pipeline, "decision_function"):
            return np.asarray(self.pipeline.decision_function(list(texts)), dtype=np.float64).ravel()
        if probabilities is None:
            probabilities = self.probabilities(texts)
        clipped = np.clip(probabilities, 1e-12, 1.0 - 1e-12)
        return np.log(clipped / (1.0 - clipped))

    def predict_many(self, issues: Sequence[SentimentIssue]) -> list[SentimentPrediction]:
        if not issues:
            return []
        texts = [issue.text for issue in issues]
        probs = self.probabilities(texts)
        scores = self.scores(texts, probs)
        return [
            SentimentPrediction(
                predicted_label=bool(prob >= self.threshold),
                probability=float(prob),
                score=float(score),
            )
            for prob, score in zip(probs, scores)
        ]

    def predict(self, issue: SentimentIssue) -> SentimentPrediction:
        return self.predict_many([issue])[0]


@dataclass
class GradientBoostedTextClassifier:
    max_features: int = 20000
    ngram_max: int = 2
    n_estimators: int = 100
    learning_rate: float = 0.2
    max_depth: int = 3
    seed: int = 1
    threshold: float = DEFAULT_THRESHOLD

    @classmethod
    def from_config(cls, config: SentimentConfig) -> "GradientBoostedTextClassifier":
        return cls(
            max_features=config.max_features,
            ngram_max=config.ngram_max,
            n_estimators=config.n_estimators,
            learning_rate=config.learning_rate,
            max_depth=config.max_depth,
            seed=config.seed,
            threshold=config.threshold,
        )

    def build_pipeline(self) -> Pipeline:
        return Pipeline(
            steps=[
                ("featurizer", build_featurizer(max_features=self.max_features, ngram_max=self.ngram_max)),
                (
                    "clf",
                    GradientBoostingClassifier(
                        n_estimators=self.n_estimators,
                        learning_rate=self.learning_rate,
                        max_depth=self.max_depth,
                        random_state=self.seed,
                    ),
                ),
            ]
        )

    def fit(self, issues: Sequence[SentimentIssue]) -> FittedSentimentModel:
        texts = [issue.text for issue in issues]
        labels = np.array([int(issue.label) for issue in issues], dtype=np.int64)
        if len(set(labels.tolist())) < 2:
            raise TrainingError(f"Training split needs both labels, got {sorted(set(labels.tolist()))} over {len(labels)} rows")

        pipeline = self.build_pipeline()
        logger.info("Fitting gradient boosted pipeline on %d rows", len(texts))
        try:
            pipeline.fit(texts, labels)
        except ValueError as exc:
            # e.g. "empty vocabulary" when every text is blank or a stop word.
            raise TrainingError(f"Pipeline fit failed: {exc}") from exc

        positives = int(labels.sum())
        metadata = {
            "created_at_utc": _utc_now(),
            "estimator": "tfidf+gradient_boosting",
            "train_rows": int(len(labels)),
            "labels_positive": positives,
            "labels_negative": int(len(labels) - positives),
            "seed": int(self.seed),
            "vocabulary_size": int(len(pipeline.named_steps["featurizer"].vocabulary_)),
            "sklearn_version": sklearn.__version__,
        }
        return FittedSentimentModel(pipeline=pipeline, threshold=float(self.threshold), metadata=metadata)
