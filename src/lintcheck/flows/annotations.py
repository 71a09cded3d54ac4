from __future__ import annotations

from typing import Dict, List, Sequence

from lintcheck.contracts import Annotation, AnnotationLevel, Batch, Finding, Verdict


SEVERITY_LEVELS: Dict[str, AnnotationLevel] = {
    "warning": "warning",
    "error": "failure",
}


def to_annotation(finding: Finding) -> Annotation:
    return Annotation(
        path=finding.file,
        start_line=finding.start_line,
        end_line=finding.end_line,
        annotation_level=SEVERITY_LEVELS.get(finding.severity, "notice"),
        message=f"[{finding.rule}] {finding.message}",
    )


def to_annotations(findings: Sequence[Finding]) -> List[Annotation]:
    return [to_annotation(f) for f in findings]


def build_verdict(annotations: Sequence[Annotation]) -> Verdict:
    errors = len([a for a in annotations if a.annotation_level == "failure"])
    warnings = len([a for a in annotations if a.annotation_level == "warning"])
    return Verdict(
        error_count=errors,
        warning_count=warnings,
        conclusion="failure" if errors > 0 else "success",
        summary=f"{errors} error(s), {warnings} warning(s) found",
    )


def chunk_annotations(annotations: Sequence[Annotation], capacity: int) -> List[Batch]:
    """Split annotations into consecutive batches of at most ``capacity``.

    Every batch but the last is full; no annotations means no batches.
    """
    if capacity <= 0:
        raise ValueError(f"Batch capacity must be positive, got {capacity}")
    return [
        list(annotations[start : start + capacity])
        for start in range(0, len(annotations), capacity)
    ]
