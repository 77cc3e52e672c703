"""JSON report generator."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.grader import GradeResult
from ..utils.config import GradingConfig
from ..utils.logging import get_logger


class JSONReporter:
    """Write grading results in the grading service's response shape."""

    @staticmethod
    def build(result: GradeResult, config: GradingConfig) -> Dict[str, Any]:
        """
        Build the report envelope.

        Returns:
            ``{success, score, report, timestamp, config}``
        """
        return {
            'success': result.success,
            'score': result.score,
            'report': result.report.to_dict(),
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'config': config.to_dict(),
        }

    @staticmethod
    def generate(
        result: GradeResult,
        config: GradingConfig,
        output_path: Optional[Path] = None,
        pretty: bool = True
    ) -> Path:
        """
        Generate JSON report.

        Args:
            result: Grading result
            config: Configuration the run used
            output_path: Output file path
            pretty: Pretty print JSON

        Returns:
            Path to generated report
        """
        if output_path is None:
            output_path = Path.cwd() / 'i18n_report.json'

        report = JSONReporter.build(result, config)

        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            if pretty:
                json.dump(report, f, indent=2, ensure_ascii=False)
            else:
                json.dump(report, f, ensure_ascii=False)

        get_logger().success(f"JSON report: {output_path}")

        return output_path

    @staticmethod
    def load(report_path: Path) -> dict:
        """Load a JSON report from file."""
        with open(report_path, 'r', encoding='utf-8') as f:
            return json.load(f)
