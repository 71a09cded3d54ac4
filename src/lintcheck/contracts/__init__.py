from .models import (
    Annotation,
    AnnotationLevel,
    Batch,
    CheckRunOutput,
    Conclusion,
    Finding,
    RunContext,
    RunInputs,
    Verdict,
)

__all__ = [
    "Annotation",
    "AnnotationLevel",
    "Batch",
    "CheckRunOutput",
    "Conclusion",
    "Finding",
    "RunContext",
    "RunInputs",
    "Verdict",
]
