# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from ..config import SentimentConfig
from ..console import MLConsole
from ..model import FittedModel
from ..persistence import load_model
from ..schemas import SentimentIssue, SentimentPrediction

logger = logging.getLogger(__name__)

PROMPT = "Please enter a sentence: "
EXIT_COMMANDS = {"exit", "quit"}
RELOAD_COMMAND = ":reload"


class SentimentPredictor:
    def __init__(self, *, model_path: Path, model: FittedModel | None = None, reload_each_call: bool = False) -> None:
        self.model_path = Path(model_path)
        self.reload_each_call = reload_each_call
        self.model: FittedModel = model if model is not None else load_model(self.model_path)

    def reload(self) -> None:
        self.model = load_model(self.model_path)
        logger.info("Reloaded model from %s", self.model_path)

    @property
    def metadata(self) -> dict[str, Any]:
        return dict(getattr(self.model, "metadata", {}) or {})

    def predict(self, text: str) -> SentimentPrediction:
        if self.reload_each_call:
            self.reload()
        return self.model.predict(SentimentIssue(text=text or ""))


def load_predictor(config: SentimentConfig | None = None, *, reload_each_call: bool = False) -> SentimentPredictor:
    config = config or SentimentConfig.from_env()
    return SentimentPredictor(model_path=config.model_path, reload_each_call=reload_each_call)


def run_prediction_loop(
    predictor: SentimentPredictor,
    console: MLConsole,
    *,
    read_line: Callable[[str], str] = input,
) -> int:
    """Prompt for sentences until ``exit``/``quit``, EOF or Ctrl-C.

    ``:reload`` re-reads the model artifact from disk. Returns the number
    of sentences scored.
    """
    scored = 0
    while True:
        try:
            text = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.info("Input closed, leaving prediction loop.")
            break
        command = text.strip().lower()
        if command in EXIT_COMMANDS:
            break
        if command == RELOAD_COMMAND:
            predictor.reload()
            console.success(f"Model reloaded from {predictor.model_path}")
            continue
        console.prediction(text, predictor.predict(text))
        scored += 1
    return scored
