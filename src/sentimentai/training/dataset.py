# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import csv
import logging
import math
from pathlib import Path

import pandas as pd
from sklearn.model_selection import train_test_split

from ..errors import DataLoadError
from ..schemas import SentimentIssue

logger = logging.getLogger(__name__)

# Column positions in the wikiDetox export: Label, rev_id, comment, ...
LABEL_COLUMN = 0
TEXT_COLUMN = 2

TRUE_WORDS = {"true", "yes", "toxic"}
FALSE_WORDS = {"false", "no", "non toxic", "non-toxic"}


def parse_label(value: object) -> bool:
    text = _safe_text(value).strip().lower()
    if text in TRUE_WORDS:
        return True
    if text in FALSE_WORDS:
        return False
    try:
        number = float(text)
    except ValueError as exc:
        raise DataLoadError(f"Unparseable label value: {value!r}") from exc
    if math.isnan(number):
        raise DataLoadError(f"Unparseable label value: {value!r}")
    return number != 0.0


def _safe_text(value: object) -> str:
    if value is None or (isinstance(value, float) and value != value):
        return ""
    return str(value)


def read_dataset_frame(path: Path) -> pd.DataFrame:
    path = Path(path)
    if not path.is_file():
        raise DataLoadError(f"Dataset not found: {path}")
    try:
        frame = pd.read_csv(
            path,
            sep="\t",
            header=0,
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError as exc:
        raise DataLoadError(f"Dataset is empty: {path}") from exc
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"Cannot parse dataset {path}: {exc}") from exc
    except OSError as exc:
        raise DataLoadError(f"Cannot read dataset {path}: {exc}") from exc

    if frame.shape[1] <= max(LABEL_COLUMN, TEXT_COLUMN):
        raise DataLoadError(
            f"Dataset {path} has {frame.shape[1]} columns, expected at least {max(LABEL_COLUMN, TEXT_COLUMN) + 1}"
        )
    if frame.empty:
        raise DataLoadError(f"Dataset has a header but no rows: {path}")
    return frame


def to_issues(frame: pd.DataFrame) -> list[SentimentIssue]:
    labels = frame.iloc[:, LABEL_COLUMN]
    texts = frame.iloc[:, TEXT_COLUMN]
    return [SentimentIssue(text=_safe_text(text), label=parse_label(label)) for label, text in zip(labels, texts)]


def load_dataset(path: Path) -> list[SentimentIssue]:
    frame = read_dataset_frame(path)
    issues = to_issues(frame)
    positives = sum(1 for issue in issues if issue.label)
    logger.info("Loaded %d rows from %s (%d toxic, %d non toxic)", len(issues), path, positives, len(issues) - positives)
    return issues


def split_dataset(
    issues: list[SentimentIssue], *, test_fraction: float, seed: int
) -> tuple[list[SentimentIssue], list[SentimentIssue]]:
    if not 0.0 < test_fraction < 1.0:
        raise ValueError(f"test_fraction must be in (0, 1), got {test_fraction}")
    if len(issues) < 2:
        raise DataLoadError(f"Need at least 2 rows to split, got {len(issues)}")
    train, test = train_test_split(issues, test_size=test_fraction, random_state=seed, shuffle=True)
    return list(train), list(test)

