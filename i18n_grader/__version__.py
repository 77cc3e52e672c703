"""Version information for i18n-grader."""

__version__ = "0.4.0"
__author__ = "i18n-grader contributors"
__description__ = "Localization coverage grader for React Native projects"

# Changelog:
# 0.4.0 - YAML translation documents (.yml/.yaml) alongside JSON
#       - max_file_size guard, oversized sources are skipped with a warning
#       - `keys` command for listing and resolving key paths
#
# 0.3.0 - Multi-threaded scanning for projects with more than 20 files
#       - Per-file read failures are logged and skipped instead of aborting
#
# 0.2.0 - Structured logging (i18n_grader.utils.logging)
#       - .i18n-grader.yml configuration with validation
#       - JSON envelope report compatible with the grading service
#
# 0.1.0 - Initial language grader: missing, unused, malformed keys and
#         hardcoded JSX text with weighted score
