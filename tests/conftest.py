# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import itertools
from pathlib import Path

import pytest

from sentimentai.config import SentimentConfig

TOXIC_TEMPLATES = [
    "you are a stupid idiot {name}",
    "shut up {name} you moron",
    "{name} is a worthless loser and I hate you",
    "go away idiot, nobody wants your garbage {name}",
    "what a pathetic stupid edit {name}",
]
CLEAN_TEMPLATES = [
    "thanks {name} for fixing the references",
    "I added a citation to the history section {name}",
    "{name}, the article looks great after your cleanup",
    "please see the talk page discussion {name}",
    "good catch {name}, I reverted the typo",
]
NAMES = ["alice", "bob", "carol", "dave", "erin", "frank"]


def _rows() -> list[tuple[int, str]]:
    rows: list[tuple[int, str]] = []
    for template, name in itertools.product(TOXIC_TEMPLATES, NAMES):
        rows.append((1, template.format(name=name)))
    for template, name in itertools.product(CLEAN_TEMPLATES, NAMES):
        rows.append((0, template.format(name=name)))
    # Interleave so the split is not ordered by label.
    return [row for pair in zip(rows[: len(rows) // 2], rows[len(rows) // 2 :]) for row in pair]


def write_tsv(path: Path, rows: list[tuple[object, str]], *, header: str = "Label\trev_id\tcomment\tyear") -> Path:
    lines = [header]
    for idx, (label, text) in enumerate(rows):
        lines.append(f"{label}\t{1000 + idx}\t{text}\t2015")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def dataset_path(tmp_path: Path) -> Path:
    return write_tsv(tmp_path / "detox.tsv", _rows())


@pytest.fixture
def config(tmp_path: Path, dataset_path: Path) -> SentimentConfig:
    return SentimentConfig(
        dataset_path=dataset_path,
        model_path=tmp_path / "models" / "SentimentModel.joblib",
        max_features=500,
        n_estimators=25,
    )


class StubPipeline:
    """Stands in for a fitted sklearn pipeline with a fixed toxic probability."""

    def __init__(self, probability: float) -> None:
        self.probability = probability

    def predict_proba(self, texts):
        return [[1.0 - self.probability, self.probability] for _ in texts]
