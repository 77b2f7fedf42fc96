# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_DATASET_PATH = PROJECT_ROOT / "data" / "wikiDetoxAnnotated40kRows.tsv"
DEFAULT_MODEL_PATH = PROJECT_ROOT / "models" / "SentimentModel.joblib"

DEFAULT_SEED = 1
DEFAULT_TEST_FRACTION = 0.2
DEFAULT_THRESHOLD = 0.5


def get_env(name: str, default: str | None = None) -> str | None:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_int_env(name: str, default: int) -> int:
    raw = get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class SentimentConfig:
    dataset_path: Path = DEFAULT_DATASET_PATH
    model_path: Path = DEFAULT_MODEL_PATH
    seed: int = DEFAULT_SEED
    test_fraction: float = DEFAULT_TEST_FRACTION
    threshold: float = DEFAULT_THRESHOLD
    # Featurizer / booster settings.
    max_features: int = 20000
    ngram_max: int = 2
    n_estimators: int = 100
    learning_rate: float = 0.2
    max_depth: int = 3

    @classmethod
    def from_env(cls) -> "SentimentConfig":
        dataset = get_env("SENTIMENT_DATASET_PATH")
        model = get_env("SENTIMENT_MODEL_PATH")
        return cls(
            dataset_path=Path(dataset) if dataset else DEFAULT_DATASET_PATH,
            model_path=Path(model) if model else DEFAULT_MODEL_PATH,
            seed=get_int_env("SENTIMENT_SEED", DEFAULT_SEED),
        )

    def with_overrides(
        self,
        *,
        dataset_path: str | Path | None = None,
        model_path: str | Path | None = None,
        seed: int | None = None,
    ) -> "SentimentConfig":
        changes: dict[str, object] = {}
        if dataset_path is not None:
            changes["dataset_path"] = Path(dataset_path)
        if model_path is not None:
            changes["model_path"] = Path(model_path)
        if seed is not None:
            changes["seed"] = int(seed)
        return replace(self, **changes) if changes else self

    @property
    def metrics_path(self) -> Path:
        return self.model_path.with_name("metrics.json")
