"""Console report generator."""

from ..core.grader import GradeResult, GradeSummary
from ..core.score_model import ScoreModel
from ..utils.colors import Colors


class ConsoleReporter:
    """Print grading results to the terminal."""

    @staticmethod
    def print_full_report(result: GradeResult, minimum_score: float, show_details: bool = False):
        """
        Print the console report.

        Args:
            result: Grading result
            minimum_score: Pass threshold the run was graded against
            show_details: List individual findings
        """
        ConsoleReporter._print_header()

        report = result.report
        if report.error is not None:
            print(f"\n{Colors.error('❌')} {report.error}")
            print(f"Score: {Colors.error('0.00')} {Colors.error('FAILED')}")
            print("=" * 70)
            return

        ConsoleReporter._print_score(report.summary, result.success, minimum_score)

        if show_details:
            ConsoleReporter._print_missing_keys(report.missing_keys, limit=10)
            ConsoleReporter._print_malformed_keys(report.malformed_keys, limit=10)
            ConsoleReporter._print_hardcoded_strings(report.hardcoded_strings, limit=10)
            ConsoleReporter._print_unused_keys(report.unused_keys, limit=10)

        ConsoleReporter._print_recommendations(report.summary)

    @staticmethod
    def _print_header():
        print("\n" + "=" * 70)
        print(f"{Colors.bold('🌍 LANGUAGE IMPLEMENTATION REPORT')}")
        print("=" * 70)

    @staticmethod
    def _print_score(summary: GradeSummary, success: bool, minimum_score: float):
        """Print score section."""
        print(f"\n{Colors.bold('🏥 SCORE')}")
        print("-" * 70)

        grade = ScoreModel.grade_letter(summary.score)
        grade_color = ScoreModel.get_grade_color(grade)
        status = Colors.success('PASSED') if success else Colors.error('FAILED')
        print(f"Score: {grade_color}{summary.score:.2f} ({grade}){Colors.ENDC} "
              f"{status} (minimum {minimum_score:.2f})")
        print()
        print(f"📄 Files Scanned: {summary.files_scanned}")
        print(f"🔑 Translation Keys: {summary.total_keys} ({summary.used_keys} used in code)")
        print(f"🔴 Missing Keys: {summary.missing_keys_count}")
        print(f"⚠️  Hardcoded Strings: {summary.hardcoded_strings_count}")
        print(f"✏️  Malformed Keys: {summary.malformed_keys_count}")
        print(f"🟡 Unused Keys: {summary.unused_keys_count}")

    @staticmethod
    def _print_missing_keys(missing: list, limit: int = 10):
        if not missing:
            return

        print(f"\n{Colors.bold('🔴 MISSING KEYS (in code but not in translations)')}")
        print("-" * 70)

        for i, item in enumerate(missing[:limit], 1):
            print(f"{i}. {Colors.warning(item.key)}  {item.file}:{item.line}")

        if len(missing) > limit:
            print(f"\n... and {len(missing) - limit} more")

    @staticmethod
    def _print_malformed_keys(malformed: list, limit: int = 10):
        if not malformed:
            return

        print(f"\n{Colors.bold('✏️  MALFORMED KEYS')}")
        print("-" * 70)

        for i, item in enumerate(malformed[:limit], 1):
            print(f"{i}. {Colors.warning(item.key)}  {item.file}:{item.line}")
            print(f"   {item.issue}")

        if len(malformed) > limit:
            print(f"\n... and {len(malformed) - limit} more")

    @staticmethod
    def _print_hardcoded_strings(strings: list, limit: int = 10):
        if not strings:
            return

        print(f"\n{Colors.bold('⚠️  HARDCODED STRINGS')}")
        print("-" * 70)

        for i, item in enumerate(strings[:limit], 1):
            text = item.text if len(item.text) <= 50 else f"{item.text[:50]}..."
            print(f"{i}. {item.file}:{item.line}")
            print(f"   Text: \"{text}\"")

        if len(strings) > limit:
            print(f"\n... and {len(strings) - limit} more")

    @staticmethod
    def _print_unused_keys(unused: list, limit: int = 10):
        if not unused:
            return

        print(f"\n{Colors.bold('🟡 UNUSED KEYS (in translations but not used in code)')}")
        print("-" * 70)

        for i, key in enumerate(unused[:limit], 1):
            print(f"{i}. {key}")

        if len(unused) > limit:
            print(f"\n... and {len(unused) - limit} more")

    @staticmethod
    def _print_recommendations(summary: GradeSummary):
        recommendations = ScoreModel.get_recommendations(summary)

        print(f"\n{Colors.bold('💡 RECOMMENDATIONS')}")
        print("-" * 70)

        for rec in recommendations:
            print(f"   {rec}")

        print()
