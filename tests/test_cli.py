"""Tests for CLI commands."""

import pytest
import tempfile
import yaml
import json
from pathlib import Path
from unittest.mock import patch
from argparse import Namespace

from i18n_grader.cli import (
    cmd_init,
    cmd_keys,
    load_and_validate_config,
    main,
)
from i18n_grader.utils.config import ConfigValidationError
from i18n_grader.utils.logging import reset_logger


def create_project(tmpdir, translations, sources, **grading):
    """Create a project and a config file pointing at it."""
    project_dir = Path(tmpdir)

    (project_dir / 'store').mkdir()
    (project_dir / 'store' / 'en.json').write_text(json.dumps(translations), encoding='utf-8')

    for name, text in sources.items():
        path = project_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')

    config_path = project_dir / '.i18n-grader.yml'
    config_path.write_text(yaml.dump({
        'project': {'name': 'Test', 'root': str(project_dir)},
        'grading': dict({
            'translation_file': 'store/en.json',
            'source_pattern': 'src/**/*.{js,tsx}',
        }, **grading),
        'reports': {'formats': ['console']},
    }))

    return project_dir, config_path


LOCALIZED_SOURCE = "<Text>{i18n.t('home.title')}</Text>\n"


class TestCmdInit:
    """Test cases for cmd_init command."""

    def test_init_creates_config_file(self):
        """init should write a default config file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch('i18n_grader.cli.Path.cwd', return_value=Path(tmpdir)):
                args = Namespace(name='MyApp', force=False)
                result = cmd_init(args)

                assert result == 0
                config_path = Path(tmpdir) / '.i18n-grader.yml'
                assert config_path.exists()

                with open(config_path, 'r') as f:
                    config_data = yaml.safe_load(f)
                assert config_data['project']['name'] == 'MyApp'
                assert config_data['project']['scanner'] == 'react-native'
                assert config_data['grading']['minimum_score'] == 0.8
                assert config_data['reports']['formats'] == ['console', 'json']

    def test_init_defaults_name_to_directory(self):
        """Without --name the directory name is used."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch('i18n_grader.cli.Path.cwd', return_value=Path(tmpdir)):
                result = cmd_init(Namespace(name=None, force=False))

                assert result == 0
                config_data = yaml.safe_load((Path(tmpdir) / '.i18n-grader.yml').read_text())
                assert config_data['project']['name'] == Path(tmpdir).name

    def test_init_fails_without_force_if_exists(self):
        """An existing config should not be overwritten without --force."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / '.i18n-grader.yml'
            config_path.write_text('existing: config')

            with patch('i18n_grader.cli.Path.cwd', return_value=Path(tmpdir)):
                result = cmd_init(Namespace(name=None, force=False))

                assert result == 1
                assert config_path.read_text() == 'existing: config'

    def test_init_overwrites_with_force(self):
        """--force should overwrite an existing config."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / '.i18n-grader.yml'
            config_path.write_text('old: config')

            with patch('i18n_grader.cli.Path.cwd', return_value=Path(tmpdir)):
                result = cmd_init(Namespace(name=None, force=True))

                assert result == 0
                with open(config_path, 'r') as f:
                    config_data = yaml.safe_load(f)
                assert 'old' not in config_data


class TestLoadAndValidateConfig:
    """Test cases for load_and_validate_config."""

    def test_overrides_applied(self):
        """Non-None overrides should replace grading fields."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(tmpdir, {}, {})

            config = load_and_validate_config(
                config_path,
                overrides={'minimum_score': 0.5, 'source_pattern': None},
            )

            assert config.grading.minimum_score == 0.5
            assert config.grading.source_pattern == 'src/**/*.{js,tsx}'

    def test_invalid_override_raises(self, capsys):
        """Invalid overrides should raise after printing the errors."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(tmpdir, {}, {})

            with pytest.raises(ConfigValidationError):
                load_and_validate_config(config_path, overrides={'minimum_score': 2.0})

            assert 'minimum_score' in capsys.readouterr().out


class TestCmdGrade:
    """Test cases for the grade command."""

    def teardown_method(self):
        """Drop handlers configured by the command."""
        reset_logger()

    def test_grade_passes(self, capsys):
        """A fully localized project should exit 0."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(
                tmpdir, {'home': {'title': 'Home'}}, {'src/Home.js': LOCALIZED_SOURCE},
            )

            result = main(['--config', str(config_path), 'grade'])

            assert result == 0
            out = capsys.readouterr().out
            assert 'LANGUAGE IMPLEMENTATION REPORT' in out
            assert 'PASSED' in out

    def test_grade_fails_below_minimum(self):
        """A score below --min-score should exit 1."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(
                tmpdir, {'home': {'title': 'Home'}}, {'src/Home.js': "i18n.t('home.other')\n"},
            )

            assert main(['--config', str(config_path), 'grade', '--quiet']) == 0
            assert main(['--config', str(config_path), 'grade', '--quiet', '--min-score', '0.99']) == 1

    def test_failing_grade_suggests_verbose(self, capsys):
        """A failing grade without --verbose should point at --verbose."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(
                tmpdir, {'home': {'title': 'Home'}}, {'src/Home.js': "i18n.t('home.other')\n"},
            )

            assert main(['--config', str(config_path), 'grade', '--min-score', '0.99']) == 1
            assert 'Run with --verbose' in capsys.readouterr().out

    def test_passing_grade_has_no_hint(self, capsys):
        """A passing grade should not print the --verbose hint."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(
                tmpdir, {'home': {'title': 'Home'}}, {'src/Home.js': LOCALIZED_SOURCE},
            )

            assert main(['--config', str(config_path), 'grade']) == 0
            assert 'Run with --verbose' not in capsys.readouterr().out

    def test_grade_writes_json(self):
        """--json should write the report envelope."""
        with tempfile.TemporaryDirectory() as tmpdir:
            project_dir, config_path = create_project(
                tmpdir, {'home': {'title': 'Home'}}, {'src/Home.js': LOCALIZED_SOURCE},
            )
            output = project_dir / 'out' / 'report.json'

            result = main(['--config', str(config_path), 'grade', '--quiet', '--json', str(output)])

            assert result == 0
            data = json.loads(output.read_text(encoding='utf-8'))
            assert data['success'] is True
            assert data['score'] == 1.0
            assert data['report']['summary']['filesScanned'] == 1
            assert data['config']['translation_file'] == 'store/en.json'

    def test_grade_missing_translation_file(self, capsys):
        """A missing translation file should exit 1 and report the error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(tmpdir, {}, {'src/Home.js': LOCALIZED_SOURCE})

            result = main([
                '--config', str(config_path), 'grade', '--translation-file', 'store/missing.json',
            ])

            assert result == 1
            assert 'Translation file not found' in capsys.readouterr().out

    def test_grade_invalid_config(self):
        """An invalid --min-score should exit 1 before grading."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(tmpdir, {}, {})

            assert main(['--config', str(config_path), 'grade', '--min-score', '1.5']) == 1

    def test_grade_log_file(self):
        """--log-file should capture the run's log."""
        with tempfile.TemporaryDirectory() as tmpdir:
            project_dir, config_path = create_project(
                tmpdir, {'home': {'title': 'Home'}}, {'src/Home.js': LOCALIZED_SOURCE},
            )
            log_file = project_dir / 'logs' / 'grade.log'

            main(['--config', str(config_path), 'grade', '--quiet', '--log-file', str(log_file)])
            reset_logger()

            content = log_file.read_text(encoding='utf-8')
            assert 'Scanning 1 files' in content
            assert 'Grading complete' in content


class TestCmdKeys:
    """Test cases for the keys command."""

    def test_list_keys(self, capsys):
        """keys should list every key path."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(
                tmpdir, {'home': {'title': 'Home'}, 'items': ['a', 'b']}, {},
            )

            result = main(['--config', str(config_path), 'keys'])

            assert result == 0
            out = capsys.readouterr().out
            for key in ['home.title', 'items.0', 'items.1']:
                assert key in out
            assert '3 keys' in out

    def test_check_keys(self, capsys):
        """--check should resolve each key and fail on unresolved ones."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(tmpdir, {'home': {'title': 'Home'}}, {})

            assert main(['--config', str(config_path), 'keys', '--check', 'home.title', 'home']) == 0
            out = capsys.readouterr().out
            assert "home.title = 'Home'" in out
            assert 'home -> dict (1 keys)' in out

            assert main(['--config', str(config_path), 'keys', '--check', 'home.missing']) == 1

    def test_check_null_leaf(self, capsys):
        """--check should accept a declared key whose value is null."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(tmpdir, {'home': {'title': None}}, {})

            assert main(['--config', str(config_path), 'keys', '--check', 'home.title']) == 0
            assert 'home.title = None' in capsys.readouterr().out

    def test_missing_translation_file(self, capsys):
        """keys should exit 1 when the translation file is missing."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, config_path = create_project(tmpdir, {}, {})
            args = Namespace(config=str(config_path), translation_file='nope.json', check=None)

            assert cmd_keys(args) == 1
            assert 'Translation file not found' in capsys.readouterr().out


class TestMain:
    """Test cases for the main entry point."""

    def test_no_command_prints_help(self, capsys):
        """Without a command, help is printed."""
        assert main([]) == 0
        assert 'usage' in capsys.readouterr().out.lower()

    def test_version(self):
        """--version should exit cleanly."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--version'])
        assert exc_info.value.code == 0
