"""Command-line interface for i18n-grader."""

import sys
import argparse
from pathlib import Path
from typing import Any, Dict, Optional

from .__version__ import __version__
from .utils.colors import Colors
from .utils.config import CONFIG_FILE_NAME, Config, ConfigValidationError, create_default_config
from .utils.logging import configure_logging, get_logger
from .scanners import get_scanner
from .core.grader import LanguageGrader
from .core.key_paths import extract_all_keys, has_key, resolve_key
from .core.translation_loader import ConfigurationError, load_translations
from .reports.json_reporter import JSONReporter
from .reports.console_reporter import ConsoleReporter


def load_and_validate_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
    validate: bool = True,
    verbose: bool = False,
) -> Config:
    """
    Load configuration, apply command-line overrides and validate.

    Args:
        config_path: Config file (default: ./.i18n-grader.yml when present)
        overrides: GradingConfig fields to replace; None values are ignored
        validate: Whether to validate the config
        verbose: Whether to print warnings

    Returns:
        Loaded Config object

    Raises:
        ConfigValidationError: If validation fails with errors
    """
    config = Config.from_file(config_path)

    for name, value in (overrides or {}).items():
        if value is not None:
            setattr(config.grading, name, value)

    if validate:
        errors, warnings = config.validate()

        if verbose and warnings:
            for warning in warnings:
                print(f"{Colors.warning('⚠️')}  Config warning: {warning}")

        if errors:
            print(f"{Colors.error('❌')} Configuration errors:")
            for error in errors:
                print(f"   • {error}")
            raise ConfigValidationError(errors)

    return config


def _config_path(args) -> Optional[Path]:
    path = getattr(args, 'config', None)
    return Path(path) if path else None


def cmd_init(args):
    """Initialize configuration file."""
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not args.force:
        print(f"{Colors.error('❌')} Config already exists: {config_path}")
        print(f"   Use --force to overwrite")
        return 1

    config = create_default_config(project_name=args.name or Path.cwd().name)
    config.save(config_path)

    print(f"{Colors.success('✅')} Created: {config_path}")
    print(f"\n{Colors.bold('Next steps:')}")
    print(f"1. Point grading.translation_file at your translation JSON")
    print(f"2. Run: i18n-grader grade")

    return 0


def cmd_grade(args):
    """Grade the project's language implementation."""
    try:
        config = load_and_validate_config(
            config_path=_config_path(args),
            overrides={
                'translation_file': args.translation_file,
                'source_pattern': args.source_pattern,
                'ignore_pattern': args.ignore_pattern,
                'minimum_score': args.min_score,
            },
            verbose=args.verbose,
        )
    except ConfigValidationError:
        return 1

    configure_logging(
        verbose=args.verbose,
        quiet=args.quiet,
        log_file=Path(args.log_file) if args.log_file else None,
    )

    grader = LanguageGrader(
        config=config.grading,
        scanner=get_scanner(config.project.scanner),
        project_dir=Path(config.project.root),
        use_threads=not args.no_threads,
    )
    result = grader.grade()

    if 'json' in config.reports.formats or args.json:
        JSONReporter.generate(
            result=result,
            config=config.grading,
            output_path=Path(args.json) if args.json else Path(config.reports.output) / 'report.json'
        )

    if ('console' in config.reports.formats or args.verbose) and not args.quiet:
        ConsoleReporter.print_full_report(
            result=result,
            minimum_score=config.grading.minimum_score,
            show_details=args.verbose
        )

    if not result.success and result.report.error is None and not args.verbose:
        get_logger().hint("Run with --verbose to list every finding")

    return 0 if result.success else 1


def cmd_keys(args):
    """List or resolve translation keys."""
    try:
        config = load_and_validate_config(
            config_path=_config_path(args),
            overrides={'translation_file': args.translation_file},
        )
    except ConfigValidationError:
        return 1

    translation_path = Path(config.grading.translation_file)
    if not translation_path.is_absolute():
        translation_path = Path(config.project.root) / translation_path

    try:
        document = load_translations(translation_path)
    except ConfigurationError as e:
        print(f"{Colors.error('❌')} {e}")
        return 1

    if args.check:
        unresolved = 0
        for key in args.check:
            if not has_key(document, key):
                unresolved += 1
                print(f"{Colors.error('✗')} {key}")
                continue

            value = resolve_key(document, key)
            if isinstance(value, (dict, list)):
                print(f"{Colors.warning('•')} {key} -> {type(value).__name__} "
                      f"({len(extract_all_keys(value))} keys)")
            else:
                print(f"{Colors.success('✓')} {key} = {value!r}")
        return 1 if unresolved else 0

    keys = extract_all_keys(document)
    for key in keys:
        print(key)
    print(f"\n{Colors.info('ℹ')} {len(keys)} keys in {translation_path}")

    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='i18n-grader',
        description='Grade the localization coverage of React Native projects',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', metavar='PATH', help=f'Config file (default: {CONFIG_FILE_NAME})')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # init command
    init_parser = subparsers.add_parser('init', help='Initialize configuration file')
    init_parser.add_argument('--name', help='Project name (default: current directory name)')
    init_parser.add_argument('--force', action='store_true', help='Overwrite existing config')

    # grade command
    grade_parser = subparsers.add_parser('grade', help='Grade language implementation')
    grade_parser.add_argument('--translation-file', metavar='PATH', help='Translation JSON/YAML file')
    grade_parser.add_argument('--source-pattern', metavar='GLOB', help='Source files to scan')
    grade_parser.add_argument('--ignore-pattern', metavar='GLOB', help='Source files to skip')
    grade_parser.add_argument('--min-score', type=float, metavar='SCORE',
                              help='Minimum passing score between 0 and 1')
    grade_parser.add_argument('--json', metavar='PATH', help='Output JSON report')
    grade_parser.add_argument('--verbose', action='store_true', help='Show detailed output')
    grade_parser.add_argument('--quiet', action='store_true', help='Minimal output')
    grade_parser.add_argument('--no-threads', action='store_true', help='Disable multi-threading')
    grade_parser.add_argument('--log-file', metavar='PATH', help='Also write logs to this file')

    # keys command
    keys_parser = subparsers.add_parser('keys', help='List or resolve translation keys')
    keys_parser.add_argument('--translation-file', metavar='PATH', help='Translation JSON/YAML file')
    keys_parser.add_argument('--check', metavar='KEY', nargs='+', help='Resolve the given key paths')

    args = parser.parse_args(argv)

    if args.command == 'init':
        return cmd_init(args)
    elif args.command == 'grade':
        return cmd_grade(args)
    elif args.command == 'keys':
        return cmd_keys(args)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
