# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import pytest

from sentimentai.errors import DataLoadError, TrainingError
from sentimentai.model import FittedSentimentModel, GradientBoostedTextClassifier
from sentimentai.schemas import SentimentIssue
from sentimentai.training.dataset import load_dataset, split_dataset
from sentimentai.training.trainer import Trainer, compute_metrics, train

from .conftest import write_tsv

BOUNDED_METRICS = ("accuracy", "auc", "f1", "precision", "recall")


def test_train_returns_model_and_bounded_metrics(config):
    result = Trainer(config).train()
    assert isinstance(result.model, FittedSentimentModel)
    for key in BOUNDED_METRICS:
        assert 0.0 <= result.metrics[key] <= 1.0, key
    assert result.metrics["train_rows"] == 48
    assert result.metrics["test_rows"] == 12
    assert result.metrics["tn"] + result.metrics["fp"] + result.metrics["fn"] + result.metrics["tp"] == 12


def test_test_set_probabilities_are_bounded(config):
    result = Trainer(config).train()
    _, test_set = split_dataset(load_dataset(config.dataset_path), test_fraction=config.test_fraction, seed=config.seed)
    for prediction in result.model.predict_many(test_set):
        assert 0.0 <= prediction.probability <= 1.0
        assert prediction.predicted_label == (prediction.probability >= 0.5)


def test_model_separates_obvious_examples(config):
    model = Trainer(config).train().model
    assert model.predict(SentimentIssue(text="you stupid idiot moron")).predicted_label is True
    assert model.predict(SentimentIssue(text="thanks for the citation on the talk page")).predicted_label is False


def test_training_is_deterministic_for_a_fixed_seed(config):
    first = Trainer(config).train().metrics
    second = Trainer(config).train().metrics
    assert first == second


def test_module_level_train_uses_given_path(config):
    result = train(config.dataset_path, config=config)
    assert result.metrics["test_rows"] == 12
    assert result.model.metadata["train_rows"] == 48


def test_single_class_dataset_raises_training_error(tmp_path, config):
    path = write_tsv(tmp_path / "one_class.tsv", [(0, f"nice edit number {idx}") for idx in range(20)])
    with pytest.raises(TrainingError, match="both labels"):
        Trainer(config).train(path)


def test_blank_texts_raise_training_error():
    issues = [SentimentIssue(text="", label=bool(idx % 2)) for idx in range(10)]
    with pytest.raises(TrainingError, match="fit failed"):
        GradientBoostedTextClassifier(n_estimators=5).fit(issues)


def test_missing_dataset_raises_data_load_error(tmp_path, config):
    with pytest.raises(DataLoadError):
        Trainer(config).train(tmp_path / "nope.tsv")


def test_compute_metrics_perfect_and_single_class():
    perfect = compute_metrics([0, 1, 1, 0], [0.1, 0.8, 0.9, 0.4])
    assert perfect["accuracy"] == 1.0
    assert perfect["auc"] == 1.0
    assert perfect["tp"] == 2.0
    single = compute_metrics([1, 1], [0.7, 0.2])
    assert single["auc"] == 0.0
    assert single["accuracy"] == 0.5
