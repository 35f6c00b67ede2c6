# demoshop_e2e/reporting/plugin.py
#
# pytest plugin: collects one result per test and writes the CSV and JSON
# reports once, when the session finishes.

import os

from demoshop_e2e.config.config import CSV_REPORT_FILE, JSON_REPORT_FILE, REPORT_DIR
from demoshop_e2e.utils.logging_config import setup_logging

from .results import ResultCollector, generate_test_summary, write_csv_report, write_json_report


class ResultReporter:
    """Registered on the plugin manager for the duration of one session."""

    def __init__(self, report_dir: str, write_files: bool = True):
        self.report_dir = report_dir
        self.write_files = write_files
        self.collector = ResultCollector()

    @property
    def results(self):
        return self.collector.results

    def pytest_runtest_logreport(self, report):
        self.collector.record(report)

    def pytest_sessionfinish(self, session, exitstatus):
        if not self.write_files:
            return
        write_csv_report(self.results, os.path.join(self.report_dir, CSV_REPORT_FILE))
        write_json_report(self.results, os.path.join(self.report_dir, JSON_REPORT_FILE))

    def pytest_terminal_summary(self, terminalreporter, exitstatus, config):
        if not self.results:
            return
        summary = generate_test_summary(self.results)
        terminalreporter.section("demoshop test summary")
        terminalreporter.write_line(f"Total: {summary['total']}")
        terminalreporter.write_line(f"Passed: {summary['passed']}")
        terminalreporter.write_line(f"Failed: {summary['failed']}")
        terminalreporter.write_line(f"Skipped: {summary['skipped']}")
        terminalreporter.write_line(f"Pass rate: {summary['pass_rate']}")
        if self.write_files:
            terminalreporter.write_line(f"Result files written to {self.report_dir}")


def pytest_addoption(parser):
    group = parser.getgroup("demoshop-reports")
    group.addoption("--report-dir", action="store", default=REPORT_DIR,
                    help="Directory for the CSV and JSON result files (default: %(default)s)")
    group.addoption("--no-result-files", action="store_true", default=False,
                    help="Do not write the CSV and JSON result files")


def pytest_configure(config):
    # Console output comes from pytest's live logging (log_cli); the suite logger only adds the file
    setup_logging(console=False)
    reporter = ResultReporter(config.getoption("--report-dir"),
                              write_files=not config.getoption("--no-result-files"))
    config.pluginmanager.register(reporter, "demoshop-result-reporter")


def pytest_unconfigure(config):
    reporter = config.pluginmanager.get_plugin("demoshop-result-reporter")
    if reporter is not None:
        config.pluginmanager.unregister(reporter)
