# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass

TOXIC_LABEL = "Toxic"
NON_TOXIC_LABEL = "Non Toxic"


@dataclass(frozen=True, slots=True)
class SentimentIssue:
    text: str
    label: bool = False


@dataclass(frozen=True, slots=True)
class SentimentPrediction:
    predicted_label: bool
    probability: float
    score: float

    @property
    def label_text(self) -> str:
        return TOXIC_LABEL if self.predicted_label else NON_TOXIC_LABEL
