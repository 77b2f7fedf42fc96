# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import numpy as np
from sklearn.metrics import accuracy_score, confusion_matrix, f1_score, log_loss, precision_score, recall_score, roc_auc_score

from ..config import SentimentConfig
from ..model import FittedModel, GradientBoostedTextClassifier, TextClassifier
from ..schemas import SentimentIssue
from .dataset import load_dataset, split_dataset

logger = logging.getLogger(__name__)


@dataclass
class TrainingResult:
    model: FittedModel
    metrics: dict[str, float]


def _safe_auc(y_true: np.ndarray, y_prob: np.ndarray) -> float:
    if len(np.unique(y_true)) < 2:
        return 0.0
    value = float(roc_auc_score(y_true, y_prob))
    if value != value:  # NaN
        return 0.0
    return value


def compute_metrics(y_true: Sequence[int], y_prob: Sequence[float], *, threshold: float = 0.5) -> dict[str, float]:
    truth = np.asarray(y_true, dtype=np.int64)
    probs = np.asarray(y_prob, dtype=np.float64)
    y_pred = (probs >= threshold).astype(np.int64)
    tn, fp, fn, tp = confusion_matrix(truth, y_pred, labels=[0, 1]).ravel()
    return {
        "accuracy": float(accuracy_score(truth, y_pred)),
        "auc": _safe_auc(truth, probs),
        "f1": float(f1_score(truth, y_pred, zero_division=0)),
        "precision": float(precision_score(truth, y_pred, zero_division=0)),
        "recall": float(recall_score(truth, y_pred, zero_division=0)),
        "log_loss": float(log_loss(truth, np.clip(probs, 1e-15, 1 - 1e-15), labels=[0, 1])),
        "tn": float(tn),
        "fp": float(fp),
        "fn": float(fn),
        "tp": float(tp),
    }


def evaluate_model(model: FittedModel, issues: Sequence[SentimentIssue]) -> dict[str, float]:
    predictions = model.predict_many(issues)
    y_true = [int(issue.label) for issue in issues]
    y_prob = [prediction.probability for prediction in predictions]
    metrics = compute_metrics(y_true, y_prob, threshold=model.threshold)
    metrics["test_rows"] = float(len(issues))
    return metrics


class Trainer:
    def __init__(self, config: SentimentConfig, classifier: TextClassifier | None = None) -> None:
        self.config = config
        self.classifier = classifier or GradientBoostedTextClassifier.from_config(config)

    def train(self, dataset_path: Path | None = None) -> TrainingResult:
        path = Path(dataset_path) if dataset_path is not None else self.config.dataset_path
        issues = load_dataset(path)
        train_set, test_set = split_dataset(issues, test_fraction=self.config.test_fraction, seed=self.config.seed)
        logger.info("Split %d rows into %d train / %d test (seed=%d)", len(issues), len(train_set), len(test_set), self.config.seed)

        model = self.classifier.fit(train_set)

        logger.info("Evaluating model on %d held-out rows", len(test_set))
        metrics = evaluate_model(model, test_set)
        metrics["train_rows"] = float(len(train_set))
        return TrainingResult(model=model, metrics=metrics)


def train(dataset_path: Path, *, config: SentimentConfig | None = None) -> TrainingResult:
    return Trainer(config or SentimentConfig()).train(dataset_path)
