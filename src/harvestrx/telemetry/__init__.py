"""Diagnostic record helpers."""

from .jsonl import append_jsonl, log_rounded_intervals

__all__ = ["append_jsonl", "log_rounded_intervals"]
