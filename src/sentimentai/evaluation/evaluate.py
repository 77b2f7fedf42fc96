# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path

from ..persistence import load_model
from ..training.dataset import load_dataset
from ..training.trainer import evaluate_model


def evaluate_saved_model(*, model_path: Path, dataset_path: Path) -> dict[str, float]:
    model = load_model(model_path)
    metrics = evaluate_model(model, load_dataset(dataset_path))
    metrics["threshold"] = float(model.threshold)
    return metrics


__all__ = ["evaluate_saved_model"]
