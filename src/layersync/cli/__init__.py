"""Command-line interface for layersync."""

from __future__ import annotations

from layersync.cli.app import main as main
from layersync.cli.commands.replay import format_replay_summary as format_replay_summary
from layersync.cli.commands.replay import run_replay as run_replay
from layersync.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "format_replay_summary", "main", "run_replay"]
