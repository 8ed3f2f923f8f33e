"""Report exporters that persist audit reports with timestamps."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol
from urllib.parse import urlparse

from seo_audit.models import AuditReport

logger = logging.getLogger(__name__)


class ReportExporter(Protocol):
    """Anything that can persist a report and say where it went."""

    def export(self, report: AuditReport) -> Path:
        ...


class JsonReportExporter:
    """Writes each report as JSON in its own timestamped directory.

    Example structure:
        reports/
        └── example.com/
            ├── 2026-10-17_143022/
            │   ├── report.json
            │   └── summary.txt
            └── latest -> 2026-10-17_143022
    """

    def __init__(self, base_output_dir: str = "reports"):
        """Initialize the exporter.

        Args:
            base_output_dir: Base directory for all report outputs
        """
        self.base_output_dir = Path(base_output_dir)

    def create_report_directory(self, url: str, timestamp: Optional[datetime] = None) -> Path:
        """Create ``<base>/<domain>/<YYYY-MM-DD_HHMMSS>`` for a report.

        Args:
            url: The audited URL
            timestamp: Optional timestamp (defaults to now)

        Returns:
            Path to the created directory
        """
        if timestamp is None:
            timestamp = datetime.now()

        # Clean domain for filesystem
        domain = urlparse(url).netloc.replace(":", "_").replace("/", "_")
        timestamp_str = timestamp.strftime("%Y-%m-%d_%H%M%S")

        report_dir = self.base_output_dir / domain / timestamp_str
        report_dir.mkdir(parents=True, exist_ok=True)
        return report_dir

    def export(self, report: AuditReport, timestamp: Optional[datetime] = None) -> Path:
        """Save a report.

        Args:
            report: The report to save
            timestamp: Optional timestamp for the directory name

        Returns:
            Path to the written report.json
        """
        report_dir = self.create_report_directory(report.url, timestamp)
        report_path = report_dir / "report.json"

        data = report.to_dict()
        data["exportedAt"] = (timestamp or datetime.now()).isoformat()
        self._save_json(report_path, data)
        self._save_summary(report_dir / "summary.txt", report)
        self._create_latest_link(report_dir)

        logger.info(f"Report for {report.url} saved to {report_path}")
        return report_path

    def _save_json(self, filepath: Path, data: dict) -> None:
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def _save_summary(self, filepath: Path, report: AuditReport) -> None:
        """Save human-readable summary.

        Args:
            filepath: Path to save to
            report: The report to summarize
        """
        with open(filepath, "w", encoding="utf-8") as f:
            f.write("=" * 60 + "\n")
            f.write("SEO AUDIT SUMMARY\n")
            f.write("=" * 60 + "\n\n")

            f.write(f"URL: {report.url}\n")
            f.write(f"Score: {report.overall_score:.1f}\n")
            f.write(f"Checks passed: {report.passed_checks}/{len(report.checks)}\n")
            f.write(f"Analysis time: {report.analysis_time_ms}ms\n\n")

            f.write("ISSUES\n")
            f.write("-" * 60 + "\n")
            for issue in report.issues:
                f.write(f"[{issue.severity.value}] {issue.message}\n")

            f.write("\nSUGGESTIONS\n")
            f.write("-" * 60 + "\n")
            for suggestion in report.suggestions:
                f.write(f"- {suggestion}\n")

    def _create_latest_link(self, report_dir: Path) -> None:
        """Create/update 'latest' symlink to this report directory.

        Args:
            report_dir: Directory for this report
        """
        latest_link = report_dir.parent / "latest"

        if latest_link.exists() or latest_link.is_symlink():
            latest_link.unlink()

        try:
            latest_link.symlink_to(report_dir.name)
        except (OSError, NotImplementedError):
            # Symlinks might not work on all systems (Windows)
            with open(report_dir.parent / "latest.txt", "w") as f:
                f.write(str(report_dir.name))
