"""Tests for the wcagcontrast command line and command registry."""

import json
import os
from pathlib import Path

import pytest
from wcagcontrast import registry
from wcagcontrast.__main__ import main
from wcagcontrast.core.env import PRECISION_VAR
from wcagcontrast.core.types import Command, Report


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty repo root so no stray .env is picked up."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(PRECISION_VAR, raising=False)
    return tmp_path


class TestRegistry:
    def test_discovers_all_commands(self):
        assert set(registry.all_commands()) == {'luminance', 'matrix', 'ratio'}

    def test_get(self):
        assert registry.get('ratio').name == 'ratio'

    def test_unknown_command(self):
        with pytest.raises(KeyError):
            registry.get('classify')

    def test_command_without_run(self):
        with pytest.raises(RuntimeError):
            Command(name='empty').execute([], Report(), None)


class TestRatio:
    def test_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['ratio', '#000000', '#ffffff'])
        assert capsys.readouterr().out.strip() == '#000000 on #ffffff  contrast 21.00:1'

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['ratio', '#FFFFFF', '#000000', '--json'])
        parsed = json.loads(capsys.readouterr().out)
        assert parsed['command'] == 'ratio'
        assert parsed['results'] == [{'colors': ['#ffffff', '#000000'], 'ratio': 21.0}]

    def test_needs_two_colours(self):
        with pytest.raises(SystemExit) as excinfo:
            main(['ratio', '#000000'])
        assert excinfo.value.code == 2


class TestLuminance:
    def test_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['luminance', '#000000', '#ffffff'])
        assert capsys.readouterr().out.splitlines() == [
            '#000000  luminance 0.00',
            '#ffffff  luminance 1.00',
        ]

    def test_precision_from_env(self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(PRECISION_VAR, '3')
        main(['luminance', '#777777'])
        assert capsys.readouterr().out.strip() == '#777777  luminance 0.184'

    def test_precision_from_dotenv(
        self, capsys: pytest.CaptureFixture[str], isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        # load_env writes straight into os.environ
        monkeypatch.setattr(os, 'environ', dict(os.environ))
        dotenv = isolated_cwd / '.env'
        dotenv.write_text(f'{PRECISION_VAR}=1\n')
        main(['luminance', '#ffffff'])
        captured = capsys.readouterr()
        assert captured.out.strip() == '#ffffff  luminance 1.0'
        assert 'wcagcontrast: loaded' in captured.err


class TestMatrix:
    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['matrix', '#000000', '#ffffff', '--json'])
        parsed = json.loads(capsys.readouterr().out)
        assert parsed['results'][0]['matrix'] == [[1.0, 21.0], [21.0, 1.0]]

    def test_text_grid(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['matrix', '#000000', '#ffffff'])
        lines = capsys.readouterr().out.splitlines()
        assert lines[1].split() == ['#000000', '1.00', '21.00']


class TestErrors:
    def test_invalid_colour(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(['ratio', '#GGGGGG', '#000000'])
        assert excinfo.value.code == 1
        assert 'Error: invalid colour' in capsys.readouterr().err

    def test_too_short_colour(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(['luminance', '#12'])
        assert excinfo.value.code == 1

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 1


class TestHelp:
    def test_lists_commands(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help'])
        out = capsys.readouterr().out
        for name in ('luminance', 'matrix', 'ratio'):
            assert name in out

    def test_command_docs(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help', 'ratio'])
        assert 'Contrast ratio between two colours.' in capsys.readouterr().out

    def test_unknown_topic(self):
        with pytest.raises(SystemExit) as excinfo:
            main(['help', 'classify'])
        assert excinfo.value.code == 1
