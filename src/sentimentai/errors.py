# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Exceptions raised by the training and inference pipeline."""
from __future__ import annotations


class SentimentError(Exception):
    """Base class for every error raised by sentimentai."""


class DataLoadError(SentimentError):
    """The dataset is missing, empty or does not match the expected columns."""


class TrainingError(SentimentError):
    """The pipeline could not be fitted on the training split."""


class ArtifactIOError(SentimentError, OSError):
    """The model artifact could not be read from or written to disk."""


class CorruptArtifactError(SentimentError):
    """The model artifact exists but is not a valid fitted model."""
