"""Hot issue classification, tag reconciliation and the triage pipeline."""

from .classifier import classify_hot_issues, is_hot
from .pipeline import PipelineResult, run_pipeline, write_reports
from .reconciler import ReconciliationResult, TagReconciler

__all__ = [
    "PipelineResult",
    "ReconciliationResult",
    "TagReconciler",
    "classify_hot_issues",
    "is_hot",
    "run_pipeline",
    "write_reports",
]
