"""Tests for chroma_schemes.core.report against the sample scheme file."""

import json
import os

import pytest
from chroma_schemes.api import Chroma
from chroma_schemes.core.report import (
    describe_scheme,
    format_json,
    format_kss_markup,
    format_kss_styles,
    format_text,
)
from chroma_schemes.core.types import ColourDefinition, Reference

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')
SAMPLE = os.path.join(FIXTURES_DIR, 'sample.chroma')


@pytest.fixture
def chroma() -> Chroma:
    chroma = Chroma(output_style='expanded')
    chroma.load_file(SAMPLE)
    return chroma


def _rows(data: dict) -> dict:
    return {row['name']: row for row in data['colours']}


class TestLoadedSample:
    def test_scheme_names(self, chroma: Chroma) -> None:
        assert chroma.schemes.names() == ['Base', 'alt', 'print']

    def test_resolved_values(self, chroma: Chroma) -> None:
        assert str(chroma.colour('link', 'alt')) == '#00f'
        assert str(chroma.colour('heading', 'print')) == '#0e71b8'
        assert str(chroma.colour('link', 'alt', 'hover')) == 'color-mix(in srgb, #00f, black 20%)'


class TestDescribeScheme:
    def test_default_scheme(self, chroma: Chroma) -> None:
        data = describe_scheme(chroma, 'default')
        assert data['name'] == 'Base'
        assert data['default'] is True
        assert data['parent'] is None
        rows = _rows(data)
        assert rows['link']['value'] == '#0e71b8'
        assert rows['link']['reference'] is True
        assert rows['link']['definition'] == 'blue'
        assert rows['link']['variants'] == {
            'hover': 'color-mix(in srgb, #0e71b8, black 20%)',
            'faded': 'rgb(from #0e71b8 r g b / 0.5)',
        }
        assert rows['blue']['referenced_by'] == ['Base.link', 'print.heading']
        assert rows['grey']['value'] == 'lightslategray'

    def test_child_scheme_order_and_inheritance(self, chroma: Chroma) -> None:
        data = describe_scheme(chroma, 'alt')
        names = [row['name'] for row in data['colours']]
        assert names[0] == 'blue'
        assert names.count('blue') == 1
        rows = _rows(data)
        assert rows['blue']['inherited'] is False
        assert rows['link']['inherited'] is True
        assert rows['link']['scheme'] == 'Base'
        assert rows['link']['value'] == '#00f'
        assert rows['link-visited']['value'] == '#00f'

    def test_error_row(self, chroma: Chroma) -> None:
        chroma.schemes.default.colours['broken'] = ColourDefinition('broken', Reference('ghost'))
        row = _rows(describe_scheme(chroma, 'default'))['broken']
        assert 'ghost' in row['error']
        assert 'value' not in row


class TestFormatText:
    def test_header(self, chroma: Chroma) -> None:
        out = format_text(chroma, source=SAMPLE)
        assert out.splitlines()[0] == 'chroma-tool: 3 scheme(s) — sample.chroma'

    def test_sections(self, chroma: Chroma) -> None:
        out = format_text(chroma)
        assert '── Base  The base palette' in out
        assert '── print  Print palette  (extends alt)' in out

    def test_reference_and_inherited_markers(self, chroma: Chroma) -> None:
        out = format_text(chroma, scheme='alt')
        link = next(line for line in out.splitlines() if line.strip().startswith('link '))
        assert '#00f' in link
        assert '→ blue' in link
        assert '[Base]' in link
        assert '    hover: color-mix(in srgb, #00f, black 20%)' in out


class TestFormatJson:
    def test_structure(self, chroma: Chroma) -> None:
        obj = json.loads(format_json(chroma))
        assert obj['output_style'] == 'expanded'
        assert obj['active_scheme'] == 'Base'
        assert [s['name'] for s in obj['schemes']] == ['Base', 'alt', 'print']

    def test_single_scheme(self, chroma: Chroma) -> None:
        obj = json.loads(format_json(chroma, scheme='print'))
        assert len(obj['schemes']) == 1
        heading = _rows(obj['schemes'][0])['heading']
        assert heading['definition'] == 'default.blue'
        assert heading['value'] == '#0e71b8'


class TestKss:
    def test_markup(self, chroma: Chroma) -> None:
        out = format_kss_markup(chroma, 'alt')
        assert out.startswith('<div class="chroma-kss" data-scheme="alt">')
        assert '<div class="chroma-kss__swatch chroma-kss__swatch--link-visited"></div>' in out
        assert '<div class="chroma-kss__variant">faded: rgb(from #00f r g b / 0.5)</div>' in out
        assert out.endswith('</div>')

    def test_markup_defaults_to_active_scheme(self, chroma: Chroma) -> None:
        assert 'data-scheme="Base"' in format_kss_markup(chroma)

    def test_styles(self, chroma: Chroma) -> None:
        out = format_kss_styles(chroma)
        assert '.chroma-kss__swatch--blue {\n  background-color: #0e71b8;\n}' in out
        assert '.chroma-kss__swatch--overlay {\n  background-color: rgb(0 0 0 / 50%);\n}' in out
