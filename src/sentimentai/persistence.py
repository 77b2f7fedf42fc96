# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import joblib

from .errors import ArtifactIOError, CorruptArtifactError
from .model import FittedSentimentModel

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1
ARTIFACT_KIND = "sentimentai.model"


def save_model(model: FittedSentimentModel, path: Path) -> Path:
    path = Path(path)
    payload = {
        "kind": ARTIFACT_KIND,
        "format_version": FORMAT_VERSION,
        "pipeline": model.pipeline,
        "threshold": float(model.threshold),
        "metadata": dict(model.metadata),
    }
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        os.close(fd)
        joblib.dump(payload, tmp_name, compress=3)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        raise ArtifactIOError(f"Cannot write model artifact to {path}: {exc}") from exc
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
    logger.info("Model saved to %s", path)
    return path


def _validate_payload(payload: Any, path: Path) -> FittedSentimentModel:
    if not isinstance(payload, dict) or payload.get("kind") != ARTIFACT_KIND:
        raise CorruptArtifactError(f"{path} is not a sentimentai model artifact")
    version = payload.get("format_version")
    if version != FORMAT_VERSION:
        raise CorruptArtifactError(f"{path} has unsupported format version {version!r} (expected {FORMAT_VERSION})")
    pipeline = payload.get("pipeline")
    if pipeline is None or not hasattr(pipeline, "predict_proba"):
        raise CorruptArtifactError(f"{path} does not contain a fitted pipeline")
    try:
        threshold = float(payload.get("threshold", 0.5))
    except (TypeError, ValueError) as exc:
        raise CorruptArtifactError(f"{path} has an invalid threshold") from exc
    metadata = payload.get("metadata")
    return FittedSentimentModel(
        pipeline=pipeline,
        threshold=threshold,
        metadata=dict(metadata) if isinstance(metadata, dict) else {},
    )


def load_model(path: Path) -> FittedSentimentModel:
    path = Path(path)
    if not path.is_file():
        raise ArtifactIOError(f"Model artifact not found: {path}")
    try:
        payload = joblib.load(path)
    except OSError as exc:
        raise ArtifactIOError(f"Cannot read model artifact {path}: {exc}") from exc
    except Exception as exc:
        # Unpickling arbitrary bytes can raise almost anything.
        raise CorruptArtifactError(f"Cannot parse model artifact {path}: {exc}") from exc
    model = _validate_payload(payload, path)
    logger.debug("Loaded model from %s (metadata=%s)", path, model.metadata)
    return model


def write_metrics(metrics: dict[str, float], path: Path) -> Path:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(metrics, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ArtifactIOError(f"Cannot write metrics to {path}: {exc}") from exc
    return path
