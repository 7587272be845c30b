"""Tests for chroma_schemes.core.env: .env loading and the settings it feeds."""

import os
from pathlib import Path

import pytest
from chroma_schemes.core.env import _find_dotenv, _parse_dotenv, load_env, log_level, output_style


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('CHROMA_OUTPUT_STYLE=compressed\n')
        assert _parse_dotenv(f) == {'CHROMA_OUTPUT_STYLE': 'compressed'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert _parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_and_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_no_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').mkdir()
        subdir = repo / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        assert _find_dotenv(repo) is None


class TestLoadEnv:
    def test_explicit_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('CHROMA_TEST_KEY', raising=False)
        f = tmp_path / 'custom.env'
        f.write_text('CHROMA_TEST_KEY=from_file\n')
        assert load_env(str(f)) == f
        assert os.environ['CHROMA_TEST_KEY'] == 'from_file'
        monkeypatch.delenv('CHROMA_TEST_KEY')

    def test_does_not_overwrite(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CHROMA_TEST_KEY', 'from_os')
        f = tmp_path / '.env'
        f.write_text('CHROMA_TEST_KEY=from_file\n')
        load_env(str(f))
        assert os.environ['CHROMA_TEST_KEY'] == 'from_os'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(str(tmp_path / 'nope.env')) is None

    def test_walks_up_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('CHROMA_TEST_KEY', raising=False)
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('CHROMA_TEST_KEY=walked\n')
        subdir = tmp_path / 'a' / 'b'
        subdir.mkdir(parents=True)
        monkeypatch.chdir(subdir)
        assert load_env() == tmp_path / '.env'
        assert os.environ['CHROMA_TEST_KEY'] == 'walked'
        monkeypatch.delenv('CHROMA_TEST_KEY')


class TestSettings:
    def test_output_style_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('CHROMA_OUTPUT_STYLE', raising=False)
        assert output_style() == 'expanded'

    def test_output_style_normalised(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CHROMA_OUTPUT_STYLE', ' Compressed ')
        assert output_style() == 'compressed'

    def test_output_style_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CHROMA_OUTPUT_STYLE', 'nested')
        with pytest.raises(ValueError, match='CHROMA_OUTPUT_STYLE'):
            output_style()

    def test_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('CHROMA_LOG_LEVEL', raising=False)
        assert log_level() == 'WARNING'
        monkeypatch.setenv('CHROMA_LOG_LEVEL', 'debug')
        assert log_level() == 'DEBUG'
