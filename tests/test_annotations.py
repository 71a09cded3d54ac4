"""Tests for annotation projection, verdict aggregation and batching."""

from __future__ import annotations

import pytest

from lintcheck.flows.annotations import (
    build_verdict,
    chunk_annotations,
    to_annotation,
    to_annotations,
)
from tests.helpers import make_annotation, make_finding


def test_severity_maps_to_annotation_level():
    assert to_annotation(make_finding("a.py", "error")).annotation_level == "failure"
    assert to_annotation(make_finding("a.py", "warning")).annotation_level == "warning"


def test_unknown_severity_defaults_to_notice():
    assert to_annotation(make_finding("a.py", "info")).annotation_level == "notice"
    assert to_annotation(make_finding("a.py", "off")).annotation_level == "notice"


def test_annotation_carries_location_and_rule():
    finding = make_finding("pkg/mod.py", "error", line=12, rule="E501")
    annotation = to_annotation(finding)
    assert annotation.path == "pkg/mod.py"
    assert annotation.start_line == 12
    assert annotation.end_line == 12
    assert annotation.message == "[E501] E501 in pkg/mod.py"


def test_to_annotations_keeps_finding_order():
    findings = [make_finding(f"f{i}.py") for i in range(5)]
    assert [a.path for a in to_annotations(findings)] == [f"f{i}.py" for i in range(5)]


def test_verdict_counts_errors_and_warnings():
    annotations = [make_annotation(i, "failure") for i in range(3)]
    annotations += [make_annotation(i, "warning") for i in range(3, 5)]
    annotations.append(make_annotation(5, "notice"))
    verdict = build_verdict(annotations)
    assert verdict.error_count == 3
    assert verdict.warning_count == 2
    assert verdict.conclusion == "failure"
    assert verdict.summary == "3 error(s), 2 warning(s) found"


def test_verdict_without_errors_succeeds():
    verdict = build_verdict([make_annotation(0, "warning")])
    assert verdict.conclusion == "success"
    assert verdict.summary == "0 error(s), 1 warning(s) found"


def test_verdict_for_no_annotations():
    verdict = build_verdict([])
    assert verdict.conclusion == "success"
    assert verdict.summary == "0 error(s), 0 warning(s) found"


def test_chunk_sizes_for_partial_last_batch():
    annotations = [make_annotation(i) for i in range(120)]
    batches = chunk_annotations(annotations, 50)
    assert [len(b) for b in batches] == [50, 50, 20]
    assert [a for b in batches for a in b] == annotations


def test_chunk_exact_multiple_of_capacity():
    annotations = [make_annotation(i) for i in range(100)]
    batches = chunk_annotations(annotations, 50)
    assert [len(b) for b in batches] == [50, 50]
    assert batches[1][0] == annotations[50]


def test_chunk_smaller_than_capacity():
    annotations = [make_annotation(i) for i in range(3)]
    assert chunk_annotations(annotations, 50) == [annotations]


def test_chunk_empty_gives_no_batches():
    assert chunk_annotations([], 50) == []


@pytest.mark.parametrize("capacity", [0, -1])
def test_chunk_rejects_non_positive_capacity(capacity):
    with pytest.raises(ValueError):
        chunk_annotations([make_annotation(0)], capacity)
