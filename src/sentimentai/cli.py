# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from .config import SentimentConfig
from .console import MLConsole
from .errors import SentimentError
from .evaluation.evaluate import evaluate_saved_model
from .inference.predictor import SentimentPredictor, run_prediction_loop
from .persistence import save_model, write_metrics
from .training.trainer import Trainer


def _config_from_args(args: argparse.Namespace) -> SentimentConfig:
    return SentimentConfig.from_env().with_overrides(
        dataset_path=getattr(args, "dataset", None),
        model_path=args.model,
        seed=getattr(args, "seed", None),
    )


def cmd_train(args: argparse.Namespace, console: MLConsole) -> int:
    config = _config_from_args(args)
    console.header("Training the model")
    console.info(f"Dataset: {config.dataset_path}")
    result = Trainer(config).train()
    console.header("Evaluating model's accuracy with test data")
    console.metrics_table(result.metrics, title="Held-out metrics")
    save_model(result.model, config.model_path)
    console.success(f"The model is saved to {config.model_path}")
    if not args.no_metrics:
        metrics_path = write_metrics(result.metrics, config.metrics_path)
        console.info(f"Metrics written to {metrics_path}")
    console.header("End of training process")
    return 0


def cmd_evaluate(args: argparse.Namespace, console: MLConsole) -> int:
    config = _config_from_args(args)
    metrics = evaluate_saved_model(model_path=config.model_path, dataset_path=config.dataset_path)
    console.metrics_table(metrics, title=f"Metrics on {config.dataset_path.name}")
    return 0


def cmd_predict(args: argparse.Namespace, console: MLConsole, read_line: Callable[[str], str] = input) -> int:
    config = _config_from_args(args)
    predictor = SentimentPredictor(model_path=config.model_path, reload_each_call=args.reload_each_call)
    console.info(f"Model loaded from {config.model_path} (type 'exit' to quit, ':reload' to reload)")
    if args.text:
        for text in args.text:
            console.prediction(text, predictor.predict(text))
        return 0
    run_prediction_loop(predictor, console, read_line=read_line)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sentimentai", description="Train and query a toxic comment classifier.")
    parser.add_argument("--model", default=None, help="Path of the model artifact (joblib)")
    parser.add_argument("--plain", action="store_true", help="Disable rich console rendering")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    train_parser = sub.add_parser("train", help="Train, evaluate and save a model")
    train_parser.add_argument("--dataset", default=None, help="TSV dataset with a header row")
    train_parser.add_argument("--seed", type=int, default=None, help="Random seed for the split and the booster")
    train_parser.add_argument("--no-metrics", action="store_true", help="Do not write metrics.json next to the model")
    train_parser.set_defaults(func=cmd_train)

    eval_parser = sub.add_parser("evaluate", help="Score a saved model against a dataset")
    eval_parser.add_argument("--dataset", default=None, help="TSV dataset with a header row")
    eval_parser.set_defaults(func=cmd_evaluate)

    predict_parser = sub.add_parser("predict", help="Classify sentences interactively")
    predict_parser.add_argument("text", nargs="*", help="Sentences to classify; prompts interactively when omitted")
    predict_parser.add_argument(
        "--reload-each-call",
        action="store_true",
        help="Reload the model artifact before every prediction",
    )
    predict_parser.set_defaults(func=cmd_predict)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console = MLConsole(enabled=not args.plain)
    console.banner()
    try:
        return args.func(args, console)
    except SentimentError as exc:
        console.error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
