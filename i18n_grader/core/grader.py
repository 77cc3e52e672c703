"""Language implementation grader."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set

from ..scanners.base import (
    BaseScanner,
    HardcodedFinding,
    MalformedKeyFinding,
    UsageFinding,
)
from ..scanners.react_native import ReactNativeScanner
from ..utils.config import GradingConfig
from ..utils.file_discovery import (
    FileAccessError,
    SourceRecord,
    find_source_files,
    read_source_record,
)
from ..utils.logging import get_logger
from ..utils.validators import MALFORMED_KEY_ISSUE, is_malformed_key, should_flag_as_hardcoded
from .key_paths import extract_all_keys, has_key
from .score_model import ScoreModel
from .translation_loader import ConfigurationError, load_translations

logger = get_logger()

THREADING_THRESHOLD = 20
MAX_WORKERS = 4


class GraderState(Enum):
    """Stages of a grading run."""
    LOADING_TRANSLATIONS = 'loading_translations'
    SCANNING = 'scanning'
    CROSS_REFERENCING = 'cross_referencing'
    SCORING = 'scoring'
    DONE = 'done'
    FAILED = 'failed'


@dataclass
class GradeSummary:
    """Counts and score of a finished run."""
    files_scanned: int
    total_keys: int
    used_keys: int
    missing_keys_count: int
    hardcoded_strings_count: int
    unused_keys_count: int
    malformed_keys_count: int
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'filesScanned': self.files_scanned,
            'totalKeys': self.total_keys,
            'usedKeys': self.used_keys,
            'missingKeysCount': self.missing_keys_count,
            'hardcodedStringsCount': self.hardcoded_strings_count,
            'unusedKeysCount': self.unused_keys_count,
            'malformedKeysCount': self.malformed_keys_count,
            'score': self.score,
        }


@dataclass
class Report:
    """Findings of one grading run, or the error that stopped it."""
    missing_keys: List[UsageFinding] = field(default_factory=list)
    hardcoded_strings: List[HardcodedFinding] = field(default_factory=list)
    unused_keys: List[str] = field(default_factory=list)
    malformed_keys: List[MalformedKeyFinding] = field(default_factory=list)
    summary: Optional[GradeSummary] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Render with the field names of the grading service."""
        if self.error is not None:
            return {'error': self.error}

        return {
            'missingKeys': [
                {'file': item.file, 'key': item.key, 'line': item.line}
                for item in self.missing_keys
            ],
            'hardcodedStrings': [
                {'file': item.file, 'text': item.text, 'line': item.line}
                for item in self.hardcoded_strings
            ],
            'unusedKeys': list(self.unused_keys),
            'malformedKeys': [
                {'file': item.file, 'key': item.key, 'issue': item.issue, 'line': item.line}
                for item in self.malformed_keys
            ],
            'summary': self.summary.to_dict() if self.summary else {},
        }


@dataclass
class GradeResult:
    """Top-level outcome of a grading run."""
    success: bool
    score: float
    report: Report

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'score': self.score,
            'report': self.report.to_dict(),
        }


@dataclass
class FileFindings:
    """Findings of a single file, produced independently of other files."""
    usages: List[UsageFinding] = field(default_factory=list)
    missing_keys: List[UsageFinding] = field(default_factory=list)
    malformed_keys: List[MalformedKeyFinding] = field(default_factory=list)
    hardcoded_strings: List[HardcodedFinding] = field(default_factory=list)


class LanguageGrader:
    """
    Grade how completely a project routes its UI text through i18n.

    Run stages (``GraderState``):
    1. LOADING_TRANSLATIONS - parse the translation document; a missing or
       invalid file ends the run in FAILED with score 0
    2. SCANNING - scan every source file for ``i18n.t()`` keys and JSX text;
       unreadable files are logged and skipped
    3. CROSS_REFERENCING - declared keys never referenced become unused keys
    4. SCORING - weighted penalty score, see ``ScoreModel``
    5. DONE
    """

    def __init__(
        self,
        config: Optional[GradingConfig] = None,
        scanner: Optional[BaseScanner] = None,
        project_dir: Optional[Path] = None,
        use_threads: bool = True,
    ):
        """
        Initialize grader.

        Args:
            config: Grading configuration (defaults apply when omitted)
            scanner: Source scanner (default: ReactNativeScanner)
            project_dir: Root that relative paths and globs resolve against
            use_threads: Scan files on a thread pool for larger projects
        """
        self.config = config or GradingConfig()
        self.scanner = scanner or ReactNativeScanner()
        self.project_dir = Path(project_dir) if project_dir is not None else Path.cwd()
        self.use_threads = use_threads
        self.score_model = ScoreModel.from_config(self.config)
        self._state: Optional[GraderState] = None

    @property
    def state(self) -> Optional[GraderState]:
        return self._state

    def _transition(self, state: GraderState):
        logger.debug(f"Grader state: {self._state.value if self._state else 'start'} -> {state.value}")
        self._state = state

    @property
    def translation_path(self) -> Path:
        path = Path(self.config.translation_file)
        return path if path.is_absolute() else self.project_dir / path

    def grade(self) -> GradeResult:
        """
        Run a full grading pass over the project on disk.

        Returns:
            GradeResult; on a configuration failure ``success`` is False,
            ``score`` is 0 and the report only carries ``error``
        """
        self._transition(GraderState.LOADING_TRANSLATIONS)
        try:
            document = load_translations(self.translation_path)
        except ConfigurationError as e:
            self._transition(GraderState.FAILED)
            message = f"Failed to load translation file: {e}"
            logger.fail(message)
            return GradeResult(success=False, score=0.0, report=Report(error=message))

        self._transition(GraderState.SCANNING)
        files = find_source_files(
            self.config.source_pattern,
            self.config.ignore_pattern,
            root=self.project_dir,
        )
        logger.info(f"🔍 Scanning {len(files)} files...")

        results = self._scan_all_files(document, files)
        return self._finish(document, results, files_scanned=len(files))

    def grade_records(self, document: Any, records: Iterable[SourceRecord]) -> GradeResult:
        """
        Grade in-memory source records against an already parsed document.

        Args:
            document: Parsed translation document
            records: Source files as (path, text) records

        Returns:
            GradeResult
        """
        records = list(records)
        self._transition(GraderState.SCANNING)
        results = [self._check_record(document, record) for record in records]
        return self._finish(document, results, files_scanned=len(records))

    def _scan_all_files(self, document: Any, files: List[Path]) -> List[FileFindings]:
        if self.use_threads and len(files) > THREADING_THRESHOLD:
            with ThreadPoolExecutor(max_workers=MAX_WORKERS) as executor:
                results = list(executor.map(lambda f: self._scan_file(document, f), files))
        else:
            results = [self._scan_file(document, f) for f in files]

        return [result for result in results if result is not None]

    def _scan_file(self, document: Any, file_path: Path) -> Optional[FileFindings]:
        """Read and check one file; None when it cannot be read."""
        try:
            record = read_source_record(
                file_path,
                root=self.project_dir,
                max_file_size=self.config.max_file_size,
            )
        except FileAccessError as e:
            logger.warning(f"⚠️  Error scanning file {e.path}: {e.reason}")
            return None

        return self._check_record(document, record)

    def _check_record(self, document: Any, record: SourceRecord) -> FileFindings:
        """Scan one record and classify what the scanner found."""
        scan = self.scanner.scan(record.text)
        findings = FileFindings()

        for usage in scan.usages:
            finding = UsageFinding(file=record.path, key=usage.key, line=usage.line)
            findings.usages.append(finding)

            if not has_key(document, usage.key):
                findings.missing_keys.append(finding)

            if is_malformed_key(usage.key):
                findings.malformed_keys.append(MalformedKeyFinding(
                    file=record.path,
                    key=usage.key,
                    issue=MALFORMED_KEY_ISSUE,
                    line=usage.line,
                ))

        for candidate in scan.candidates:
            if should_flag_as_hardcoded(candidate.text):
                findings.hardcoded_strings.append(HardcodedFinding(
                    file=record.path,
                    text=candidate.text,
                    line=candidate.line,
                ))

        if scan.is_empty:
            logger.debug(f"No i18n usages or JSX text in {record.path}")

        return findings

    def _finish(self, document: Any, results: List[FileFindings], files_scanned: int) -> GradeResult:
        report = Report()
        used_keys: Set[str] = set()

        for result in results:
            used_keys.update(usage.key for usage in result.usages)
            report.missing_keys.extend(result.missing_keys)
            report.malformed_keys.extend(result.malformed_keys)
            report.hardcoded_strings.extend(result.hardcoded_strings)

        self._transition(GraderState.CROSS_REFERENCING)
        all_keys = extract_all_keys(document)
        report.unused_keys = [key for key in all_keys if key not in used_keys]

        self._transition(GraderState.SCORING)
        score = self.score_model.calculate(
            missing_keys=len(report.missing_keys),
            hardcoded_strings=len(report.hardcoded_strings),
            malformed_keys=len(report.malformed_keys),
            unused_keys=len(report.unused_keys),
        )

        report.summary = GradeSummary(
            files_scanned=files_scanned,
            total_keys=len(all_keys),
            used_keys=len(used_keys),
            missing_keys_count=len(report.missing_keys),
            hardcoded_strings_count=len(report.hardcoded_strings),
            unused_keys_count=len(report.unused_keys),
            malformed_keys_count=len(report.malformed_keys),
            score=score,
        )
        self._transition(GraderState.DONE)

        success = score >= self.config.minimum_score
        logger.success(f"Grading complete: score {score:.2f} (minimum {self.config.minimum_score})")

        return GradeResult(success=success, score=score, report=report)
