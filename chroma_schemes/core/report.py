"""Report builder: text, JSON and KSS style-guide output for loaded schemes."""

from __future__ import annotations

import html
import json
import os
import re
from typing import TYPE_CHECKING, Any

from chroma_schemes.core.errors import ChromaError
from chroma_schemes.core.types import css_text

if TYPE_CHECKING:
    from chroma_schemes.api import Chroma


def describe_scheme(chroma: Chroma, scheme: str) -> dict[str, Any]:
    """Every colour visible from `scheme`, resolved in that scheme."""
    record = chroma.schemes.get_scheme(scheme)
    colours: list[dict[str, Any]] = []
    seen: set[str] = set()
    for holder in chroma.schemes.ancestry_of(record.name):
        for name, definition in chroma.schemes.get_scheme(holder).colours.items():
            if name in seen:
                continue
            seen.add(name)
            row: dict[str, Any] = {
                'name': name,
                'scheme': holder,
                'inherited': holder != record.name,
                'definition': css_text(definition.value),
                'reference': definition.is_reference,
                'referenced_by': sorted(definition.referenced_by),
            }
            try:
                row['value'] = css_text(chroma.resolver.resolve(record.name, name))
                row['variants'] = {
                    variant: css_text(chroma.resolver.resolve(record.name, name, variant))
                    for variant in definition.functions
                }
            except ChromaError as e:
                row['error'] = str(e)
            colours.append(row)
    return {
        'name': record.name,
        'description': record.description,
        'parent': record.parent,
        'default': record is chroma.schemes.default,
        'colours': colours,
    }


def format_text(chroma: Chroma, source: str | None = None, scheme: str | None = None) -> str:
    """Format schemes as human-readable text."""
    names = [scheme] if scheme else chroma.schemes.names()
    lines = []
    header = f'chroma-tool: {len(names)} scheme(s)'
    if source:
        header += f' \u2014 {os.path.basename(source)}'
    lines.append(header)
    lines.append('')

    for name in names:
        data = describe_scheme(chroma, name)
        title = f'\u2500\u2500 {data["name"]}'
        if data['description']:
            title += f'  {data["description"]}'
        if data['parent']:
            title += f'  (extends {data["parent"]})'
        lines.append(title)

        width = max((len(row['name']) for row in data['colours']), default=0)
        for row in data['colours']:
            if 'error' in row:
                lines.append(f'  {row["name"]:<{width}}  error: {row["error"]}')
                continue
            line = f'  {row["name"]:<{width}}  {row["value"]}'
            if row['reference']:
                line += f'  \u2192 {row["definition"]}'
            if row['inherited']:
                line += f'  [{row["scheme"]}]'
            lines.append(line)
            for variant, value in row['variants'].items():
                lines.append(f'    {variant}: {value}')
        lines.append('')

    return '\n'.join(lines)


def format_json(chroma: Chroma, scheme: str | None = None) -> str:
    """Format schemes as JSON."""
    names = [scheme] if scheme else chroma.schemes.names()
    obj = {
        'output_style': chroma.output_style,
        'active_scheme': chroma.active_scheme,
        'schemes': [describe_scheme(chroma, name) for name in names],
    }
    return json.dumps(obj, indent=2)


def _class_name(name: str) -> str:
    return re.sub(r'[^a-z0-9-]+', '-', name.lower()).strip('-')


def format_kss_markup(chroma: Chroma, scheme: str | None = None) -> str:
    """HTML swatch list for a KSS style guide section."""
    data = describe_scheme(chroma, scheme or chroma.active_scheme)
    out = [f'<div class="chroma-kss" data-scheme="{html.escape(data["name"])}">']
    for row in data['colours']:
        if 'error' in row:
            continue
        slug = _class_name(row['name'])
        out.append('  <div class="chroma-kss__item">')
        out.append(f'    <div class="chroma-kss__swatch chroma-kss__swatch--{slug}"></div>')
        out.append(f'    <div class="chroma-kss__name">{html.escape(row["name"])}</div>')
        out.append(f'    <div class="chroma-kss__value">{html.escape(row["value"])}</div>')
        if row['reference']:
            out.append(f'    <div class="chroma-kss__reference">{html.escape(row["definition"])}</div>')
        for variant, value in row['variants'].items():
            out.append(
                f'    <div class="chroma-kss__variant">{html.escape(variant)}: {html.escape(value)}</div>'
            )
        out.append('  </div>')
    out.append('</div>')
    return '\n'.join(out)


def format_kss_styles(chroma: Chroma, scheme: str | None = None) -> str:
    """CSS rules giving each swatch in format_kss_markup() its colour."""
    data = describe_scheme(chroma, scheme or chroma.active_scheme)
    rules = []
    for row in data['colours']:
        if 'error' in row:
            continue
        slug = _class_name(row['name'])
        rules.append(f'.chroma-kss__swatch--{slug} {{\n  background-color: {row["value"]};\n}}')
    return '\n\n'.join(rules)
