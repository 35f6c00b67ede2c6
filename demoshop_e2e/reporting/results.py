# demoshop_e2e/reporting/results.py

import csv
import json
import logging
import os
from collections import Counter
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

CSV_HEADER = ["Test File", "Test Name", "Status", "Duration (ms)", "Start Time", "Retries", "Error"]


@dataclass
class RunResult:
    """Outcome of one executed test."""

    test_file: str
    test_name: str
    status: str  # passed | failed | skipped
    duration_ms: int
    start_time: str
    retries: int = 0
    error: str = ""


def _status_of(report) -> Optional[str]:
    """Maps a pytest TestReport to a final status, or None if this phase decides nothing."""
    if report.when == "call":
        return "passed" if report.passed else ("skipped" if report.skipped else "failed")
    if report.when == "setup" and not report.passed:
        return "skipped" if report.skipped else "failed"
    if report.when == "teardown" and report.failed:
        return "failed"
    return None


def _error_text(report) -> str:
    if report.passed:
        return ""
    if report.skipped and isinstance(report.longrepr, tuple):
        return str(report.longrepr[2])
    crash = getattr(report.longrepr, "reprcrash", None)
    if crash is not None:
        return crash.message
    return report.longreprtext or ""


class ResultCollector:
    """Accumulates one RunResult per test while the session runs."""

    def __init__(self):
        self.results: List[RunResult] = []
        self._attempts: Counter = Counter()
        self._by_nodeid: Dict[str, RunResult] = {}

    def record(self, report) -> Optional[RunResult]:
        status = _status_of(report)
        if status is None:
            return None

        existing = self._by_nodeid.get(report.nodeid)
        if report.when == "teardown":
            # A teardown error turns an already recorded result into a failure
            if existing is not None:
                existing.status = "failed"
                existing.error = existing.error or _error_text(report)
            return existing

        self._attempts[report.nodeid] += 1
        start = getattr(report, "start", None)
        started_at = datetime.fromtimestamp(start, tz=timezone.utc) if start else datetime.now(timezone.utc)
        file_path, _, test_name = report.nodeid.partition("::")
        result = RunResult(
            test_file=file_path.replace("\\", "/"),
            test_name=test_name or report.nodeid,
            status=status,
            duration_ms=int(round(report.duration * 1000)),
            start_time=started_at.isoformat(),
            retries=self._attempts[report.nodeid] - 1,
            error=_error_text(report),
        )
        if existing is not None:
            # A re-run replaces the earlier attempt
            self.results[self.results.index(existing)] = result
        else:
            self.results.append(result)
        self._by_nodeid[report.nodeid] = result
        return result


def generate_test_summary(results: Iterable[RunResult]) -> Dict[str, object]:
    results = list(results)
    total = len(results)
    passed = sum(1 for r in results if r.status == "passed")
    failed = sum(1 for r in results if r.status == "failed")
    skipped = sum(1 for r in results if r.status == "skipped")
    return {
        "total": total,
        "passed": passed,
        "failed": failed,
        "skipped": skipped,
        "pass_rate": f"{passed / total * 100:.2f}%" if total else "0%",
    }


def write_csv_report(results: Iterable[RunResult], path: str) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, quoting=csv.QUOTE_NONNUMERIC)
        writer.writerow(CSV_HEADER)
        for r in results:
            writer.writerow([r.test_file, r.test_name, r.status, r.duration_ms, r.start_time, r.retries, r.error])
    logger.info(f"CSV report generated: {path}")
    return path


def write_json_report(results: Iterable[RunResult], path: str) -> str:
    results = list(results)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    payload = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "summary": generate_test_summary(results),
        "tests": [asdict(r) for r in results],
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    logger.info(f"JSON report generated: {path}")
    return path
