# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import pytest

from sentimentai.errors import DataLoadError
from sentimentai.schemas import SentimentIssue
from sentimentai.training.dataset import load_dataset, parse_label, split_dataset

from .conftest import write_tsv


def test_load_dataset_reads_label_and_text_by_position(tmp_path):
    path = write_tsv(tmp_path / "data.tsv", [(1, "you idiot"), (0, "thanks for the fix")])
    issues = load_dataset(path)
    assert issues == [
        SentimentIssue(text="you idiot", label=True),
        SentimentIssue(text="thanks for the fix", label=False),
    ]


def test_load_dataset_ignores_header_names(tmp_path):
    path = write_tsv(tmp_path / "data.tsv", [("true", "a"), ("False", "b")], header="x\ty\tz\tw")
    assert [issue.label for issue in load_dataset(path)] == [True, False]


def test_missing_text_becomes_empty_string(tmp_path):
    path = tmp_path / "data.tsv"
    path.write_text("Label\trev_id\tcomment\n1\t10\t\n", encoding="utf-8")
    assert load_dataset(path) == [SentimentIssue(text="", label=True)]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("0", False), ("1.0", True), ("0.0", False), ("TRUE", True), ("no", False), (" yes ", True)],
)
def test_parse_label(raw, expected):
    assert parse_label(raw) is expected


@pytest.mark.parametrize("raw", ["", "maybe", None, float("nan")])
def test_parse_label_rejects_garbage(raw):
    with pytest.raises(DataLoadError):
        parse_label(raw)


def test_missing_file(tmp_path):
    with pytest.raises(DataLoadError, match="not found"):
        load_dataset(tmp_path / "absent.tsv")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.tsv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(DataLoadError, match="empty"):
        load_dataset(path)


def test_header_only(tmp_path):
    path = tmp_path / "header.tsv"
    path.write_text("Label\trev_id\tcomment\n", encoding="utf-8")
    with pytest.raises(DataLoadError, match="no rows"):
        load_dataset(path)


def test_too_few_columns(tmp_path):
    path = tmp_path / "narrow.tsv"
    path.write_text("Label\tcomment\n1\tyou idiot\n", encoding="utf-8")
    with pytest.raises(DataLoadError, match="columns"):
        load_dataset(path)


def test_bad_label_value(tmp_path):
    path = write_tsv(tmp_path / "data.tsv", [("toxic-ish", "hmm")])
    with pytest.raises(DataLoadError, match="label"):
        load_dataset(path)


def test_split_is_eighty_twenty_and_reproducible():
    issues = [SentimentIssue(text=f"row {idx}", label=bool(idx % 2)) for idx in range(50)]
    train, test = split_dataset(issues, test_fraction=0.2, seed=1)
    assert len(train) == 40
    assert len(test) == 10
    assert set(train).isdisjoint(test)
    again_train, again_test = split_dataset(issues, test_fraction=0.2, seed=1)
    assert again_train == train
    assert again_test == test


def test_split_rejects_bad_fraction():
    with pytest.raises(ValueError):
        split_dataset([SentimentIssue(text="a"), SentimentIssue(text="b")], test_fraction=1.5, seed=1)
