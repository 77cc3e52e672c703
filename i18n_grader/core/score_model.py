"""Weighted-penalty localization score."""

from dataclasses import dataclass
from typing import Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .grader import GradeSummary


@dataclass
class ScoreWeights:
    """Penalty per finding, by finding kind."""
    missing_key: float = 0.4
    hardcoded: float = 0.3
    malformed: float = 0.2
    unused_key: float = 0.1


class ScoreModel:
    """
    Turn finding counts into a score in [0, 1].

    ``score = max(0, 1 - sum(count * weight) / NORMALIZATION)``. With the
    default weights, 25 missing keys alone drive the score to zero.
    """

    NORMALIZATION = 10

    # Grade thresholds
    GRADE_THRESHOLDS = {
        'A+': 0.95,
        'A': 0.90,
        'B': 0.80,
        'C': 0.70,
        'D': 0.60,
        'F': 0.0,
    }

    def __init__(self, weights: ScoreWeights = None):
        self.weights = weights or ScoreWeights()

    @classmethod
    def from_config(cls, config) -> 'ScoreModel':
        """Build from a GradingConfig."""
        return cls(ScoreWeights(
            missing_key=config.missing_key_weight,
            hardcoded=config.hardcoded_weight,
            malformed=config.malformed_weight,
            unused_key=config.unused_key_weight,
        ))

    def penalties(
        self,
        missing_keys: int,
        hardcoded_strings: int,
        malformed_keys: int,
        unused_keys: int,
    ) -> Dict[str, float]:
        """Penalty of each finding kind."""
        return {
            'missing_keys': missing_keys * self.weights.missing_key,
            'hardcoded_strings': hardcoded_strings * self.weights.hardcoded,
            'malformed_keys': malformed_keys * self.weights.malformed,
            'unused_keys': unused_keys * self.weights.unused_key,
        }

    def calculate(
        self,
        missing_keys: int,
        hardcoded_strings: int,
        malformed_keys: int,
        unused_keys: int,
    ) -> float:
        """
        Calculate the score.

        Args:
            missing_keys: Number of unresolved key usages
            hardcoded_strings: Number of flagged text spans
            malformed_keys: Number of bracket-notation key literals
            unused_keys: Number of declared but unreferenced keys

        Returns:
            Score between 0 and 1
        """
        total_penalty = sum(self.penalties(
            missing_keys, hardcoded_strings, malformed_keys, unused_keys
        ).values())
        return max(0.0, 1.0 - total_penalty / self.NORMALIZATION)

    @classmethod
    def grade_letter(cls, score: float) -> str:
        """Convert score to letter grade."""
        for grade, threshold in cls.GRADE_THRESHOLDS.items():
            if score >= threshold:
                return grade
        return 'F'

    @classmethod
    def get_grade_color(cls, grade: str) -> str:
        """Get color code for grade."""
        from ..utils.colors import Colors

        grade_colors = {
            'A+': Colors.OKGREEN,
            'A': Colors.OKGREEN,
            'B': Colors.OKCYAN,
            'C': Colors.WARNING,
            'D': Colors.WARNING,
            'F': Colors.FAIL,
        }
        return grade_colors.get(grade, Colors.ENDC)

    @classmethod
    def get_recommendations(cls, summary: 'GradeSummary') -> List[str]:
        """
        Improvement advice for a finished run.

        Args:
            summary: GradeSummary of the run

        Returns:
            List of recommendations, most severe first
        """
        recommendations = []

        if summary.missing_keys_count > 0:
            recommendations.append(
                f"🔍 Add {summary.missing_keys_count} missing key(s) to the translation file"
            )

        if summary.hardcoded_strings_count > 0:
            recommendations.append(
                f"🔧 Wrap {summary.hardcoded_strings_count} hardcoded string(s) in i18n.t()"
            )

        if summary.malformed_keys_count > 0:
            recommendations.append(
                f"✏️  Rewrite {summary.malformed_keys_count} bracket-notation key(s) "
                f"with dot notation (items.0.title)"
            )

        if summary.unused_keys_count > 0:
            recommendations.append(
                f"🧹 Remove {summary.unused_keys_count} unused key(s) to reduce clutter"
            )

        if not recommendations:
            recommendations.append(
                "✨ Excellent localization! Maintain this standard for new code"
            )

        return recommendations
