# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Toxic comment classifier: training, persistence and interactive scoring."""

from .config import SentimentConfig
from .errors import ArtifactIOError, CorruptArtifactError, DataLoadError, SentimentError, TrainingError
from .inference.predictor import SentimentPredictor, load_predictor
from .persistence import load_model, save_model
from .schemas import SentimentIssue, SentimentPrediction
from .training.trainer import Trainer, TrainingResult, train

__all__ = [
    "SentimentConfig",
    "SentimentIssue",
    "SentimentPrediction",
    "SentimentPredictor",
    "Trainer",
    "TrainingResult",
    "train",
    "save_model",
    "load_model",
    "load_predictor",
    "SentimentError",
    "DataLoadError",
    "TrainingError",
    "ArtifactIOError",
    "CorruptArtifactError",
]
