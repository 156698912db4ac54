#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ******************************************************************************
# Project: GeoTIFF Bounds Reader (GeoBounds)
# Author: Eric Robeck <robeckgeo@gmail.com>
#
# Copyright (c) 2025, Eric Robeck
# Licensed under the MIT License
# ******************************************************************************

"""
Report Formatters for GeoBounds Results.

Renders a GeoTiffMetadata result, or the error that prevented one, as plain
text, a Markdown table row, or a JSON object. JSON output is one compact
object per line (JSON Lines).
"""
import json
from typing import List
from geobounds.utils.data_models import GeoTiffMetadata

MARKDOWN_HEADER = [
    "| File | West | North | East | South | Name |",
    "|---|---|---|---|---|---|",
]


def _coord(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"

def _escape_md(text: str) -> str:
    return text.replace('|', '\\|').replace('\n', ' ')

def format_metadata(file_path: str, metadata: GeoTiffMetadata, fmt: str = 'text', precision: int = 6) -> str:
    """
    Render the result for one file.

    Args:
        file_path: The file the metadata was read from.
        metadata: The parsed result.
        fmt: 'text', 'md' or 'json'.
        precision: Decimal places for coordinates (text and md only).
    """
    bbox = metadata.bounding_box
    if fmt == 'json':
        return json.dumps({'file': file_path, **metadata.to_dict()})
    if fmt == 'md':
        cells = [
            _escape_md(file_path),
            _coord(bbox.west, precision),
            _coord(bbox.north, precision),
            _coord(bbox.east, precision),
            _coord(bbox.south, precision),
            _escape_md(metadata.name),
        ]
        return "| " + " | ".join(cells) + " |"
    lines = [
        f"{file_path}:",
        f"  Top left:     ({_coord(bbox.west, precision)}, {_coord(bbox.north, precision)})",
        f"  Bottom right: ({_coord(bbox.east, precision)}, {_coord(bbox.south, precision)})",
        f"  Name:         {metadata.name}",
    ]
    return "\n".join(lines)

def format_error(file_path: str, message: str, fmt: str = 'text') -> str:
    """Render a failure for one file."""
    if fmt == 'json':
        return json.dumps({'file': file_path, 'error': message})
    if fmt == 'md':
        return f"| {_escape_md(file_path)} | | | | | Error: {_escape_md(message)} |"
    return f"{file_path}: Error: {message}"

def report_header(fmt: str) -> List[str]:
    """Lines printed once before the per-file results."""
    return list(MARKDOWN_HEADER) if fmt == 'md' else []
