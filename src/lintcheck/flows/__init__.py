from .annotations import build_verdict, chunk_annotations, to_annotation, to_annotations
from .check_run import CheckRunDriver, CheckRunStateError, CheckRunStatus
from .report import render_check_text
from .run import publish_report, run_pipeline
from .scan import collect_findings
from .scope import filter_findings, resolve_changed_files

__all__ = [
    "build_verdict",
    "chunk_annotations",
    "to_annotation",
    "to_annotations",
    "CheckRunDriver",
    "CheckRunStateError",
    "CheckRunStatus",
    "render_check_text",
    "publish_report",
    "run_pipeline",
    "collect_findings",
    "filter_findings",
    "resolve_changed_files",
]
