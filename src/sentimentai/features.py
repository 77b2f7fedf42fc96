# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

URL_RE = re.compile(r"https?://[^\s<>\"']+|www\.[^\s<>\"']+", flags=re.IGNORECASE)
REPEATED_CHAR_RE = re.compile(r"(.)\1{4,}")
WIKI_MARKUP_RE = re.compile(r"NEWLINE_TOKEN|TAB_TOKEN|`{2,}|={2,}")
WHITESPACE_RE = re.compile(r"\s+")


def _safe_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value != value:  # NaN
        return ""
    return str(value)


def normalize_text(value: object) -> str:
    text = WIKI_MARKUP_RE.sub(" ", _safe_text(value)).lower()
    text = URL_RE.sub(" urltoken ", text)
    # "loooooool" and "lool" should share features.
    text = REPEATED_CHAR_RE.sub(r"\1\1\1", text)
    return WHITESPACE_RE.sub(" ", text).strip()


def build_featurizer(*, max_features: int, ngram_max: int) -> TfidfVectorizer:
    return TfidfVectorizer(
        analyzer="word",
        preprocessor=normalize_text,
        ngram_range=(1, max(ngram_max, 1)),
        max_features=max_features,
        sublinear_tf=True,
        dtype=np.float32,
    )
