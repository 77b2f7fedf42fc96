# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .schemas import SentimentPrediction

ASCII_BANNER = r"""
 ____             _   _                      _
/ ___|  ___ _ __ | |_(_)_ __ ___   ___ _ __ | |_
\___ \ / _ \ '_ \| __| | '_ ` _ \ / _ \ '_ \| __|
 ___) |  __/ | | | |_| | | | | | |  __/ | | | |_
|____/ \___|_| |_|\__|_|_| |_| |_|\___|_| |_|\__|
"""

PREDICTION_HEADER = "=============== Single Prediction ==============="
RULE = "=" * len(PREDICTION_HEADER)


def format_prediction(text: str, prediction: SentimentPrediction) -> str:
    return f"Text: {text} | Prediction: {prediction.label_text} sentiment | Probability: {prediction.probability:.6f}"


@dataclass
class MLConsole:
    enabled: bool = True
    file: Any = None

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True, file=self.file) if self.enabled else None

    def _plain(self, text: str) -> None:
        print(text, file=self.file)

    def banner(self) -> None:
        if self._console:
            self._console.print(Panel.fit(ASCII_BANNER.strip("\n"), title="Sentiment ML", border_style="cyan"))
            return
        self._plain(ASCII_BANNER)

    def header(self, text: str) -> None:
        line = f"=============== {text} ==============="
        if self._console:
            self._console.print(f"[bold magenta]{escape(line)}[/bold magenta]")
        else:
            self._plain(line)

    def info(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold cyan]INFO[/bold cyan] {escape(text)}")
        else:
            self._plain(f"[INFO] {text}")

    def warn(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold yellow]WARN[/bold yellow] {escape(text)}")
        else:
            self._plain(f"[WARN] {text}")

    def error(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold red]ERROR[/bold red] {escape(text)}")
        else:
            self._plain(f"[ERROR] {text}")

    def success(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold green]OK[/bold green] {escape(text)}")
        else:
            self._plain(f"[OK] {text}")

    def metrics_table(self, metrics: dict[str, float], *, title: str) -> None:
        if self._console:
            table = Table(title=title, show_lines=True)
            table.add_column("Metric", style="bold")
            table.add_column("Value", justify="right")
            for key in sorted(metrics.keys()):
                table.add_row(key, f"{float(metrics[key]):.4f}")
            self._console.print(table)
            return

        self._plain(title)
        for key in sorted(metrics.keys()):
            self._plain(f"- {key}: {float(metrics[key]):.4f}")

    def prediction(self, text: str, prediction: SentimentPrediction) -> None:
        line = format_prediction(text, prediction)
        if self._console:
            style = "bold red" if prediction.predicted_label else "bold green"
            self._console.print(PREDICTION_HEADER, markup=False)
            self._console.print(f"[{style}]{escape(line)}[/{style}]")
            self._console.print(RULE, markup=False)
            return
        self._plain(PREDICTION_HEADER)
        self._plain(line)
        self._plain(RULE)
