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
IFD Reader.

Scans one Image File Directory in file order and routes the values of the
georeferencing tags into a GeoAccumulator:

- 256 (ImageWidth): last element -> width
- 257 (ImageLength): last element -> height
- 270 (ImageDescription): last string -> description
- 33550 (ModelPixelScaleTag): [0] -> pixel width, [1] -> pixel height
- 33922 (ModelTiepointTag): [3] -> longitude, [4] -> latitude

Every other entry is read to keep the scan aligned and then dropped. When a
tag appears more than once, the later entry wins.
"""

import logging
import warnings
from typing import BinaryIO, Optional
from geobounds.utils.byte_decoder import read_exact, read_u16, read_u64
from geobounds.utils.config_loader import config
from geobounds.utils.data_models import DecodedValue, GeoAccumulator, ValueKind
from geobounds.utils.exceptions import TooManyEntriesWarning
from geobounds.utils.ifd_entry import fetch_value_bytes, read_entry, seek_to
from geobounds.utils.value_decoder import decode_values
from geobounds.utils.tiff_constants import (
    DEFAULT_MAX_IFD_ENTRIES,
    GEO_TAGS,
    TAG_IMAGE_DESCRIPTION,
    TAG_IMAGE_LENGTH,
    TAG_IMAGE_WIDTH,
    TAG_MODEL_PIXEL_SCALE,
    TAG_MODEL_TIEPOINT,
    ByteOrder,
    tag_name,
)

logger = logging.getLogger(__name__)

_NUMERIC_KINDS = (ValueKind.UNSIGNED, ValueKind.DOUBLE)


def resolve_max_entries(max_entries: Optional[int] = None) -> int:
    """Return the entry cap: the explicit value, else the configured one."""
    if max_entries is not None:
        return max_entries
    return int(config.get("reader.max_ifd_entries", DEFAULT_MAX_IFD_ENTRIES))


def _element(value: DecodedValue, index: int, tag: int):
    """Element `index` of a numeric value, or None when it is not available."""
    if value.kind not in _NUMERIC_KINDS:
        logger.debug(f"{tag_name(tag)}: ignoring {value.kind.value} value")
        return None
    try:
        return value.values[index]
    except IndexError:
        logger.debug(f"{tag_name(tag)}: no element {index} in {len(value)} values")
        return None


def apply_tag(acc: GeoAccumulator, tag: int, value: DecodedValue) -> None:
    """Route one decoded tag value into the accumulator."""
    if tag == TAG_IMAGE_WIDTH:
        width = _element(value, -1, tag)
        if width is not None:
            acc.width = int(width)
    elif tag == TAG_IMAGE_LENGTH:
        height = _element(value, -1, tag)
        if height is not None:
            acc.height = int(height)
    elif tag == TAG_IMAGE_DESCRIPTION:
        if value.kind is ValueKind.STRING and not value.is_empty():
            acc.description = value.strings()[-1]
    elif tag == TAG_MODEL_PIXEL_SCALE:
        scale_x = _element(value, 0, tag)
        scale_y = _element(value, 1, tag)
        if scale_x is not None and scale_y is not None:
            acc.pixel_width = float(scale_x)
            acc.pixel_height = float(scale_y)
    elif tag == TAG_MODEL_TIEPOINT:
        longitude = _element(value, 3, tag)
        latitude = _element(value, 4, tag)
        if longitude is not None and latitude is not None:
            acc.longitude = float(longitude)
            acc.latitude = float(latitude)


def read_ifd(
    source: BinaryIO,
    offset: int,
    byte_order: ByteOrder,
    big_tiff: bool = False,
    max_entries: Optional[int] = None,
) -> GeoAccumulator:
    """
    Read the directory at `offset` and collect its georeferencing tags.

    Args:
        source: A readable, seekable binary source.
        offset: Absolute offset of the directory.
        byte_order: Byte order of the file.
        big_tiff: Use BigTIFF field widths (8-byte count and value block).
        max_entries: Maximum number of entries to process. Defaults to the
            `reader.max_ifd_entries` configuration value.

    Returns:
        GeoAccumulator: The fields found; unseen fields stay zero.

    Raises:
        SeekFailureError: The directory or a value offset cannot be reached.
        TruncatedDataError: The source ends inside the directory.
    """
    cap = resolve_max_entries(max_entries)
    seek_to(source, offset)
    if big_tiff:
        declared = read_u64(read_exact(source, 8, 'entry count'), byte_order)
    else:
        declared = read_u16(read_exact(source, 2, 'entry count'), byte_order)
    logger.debug(f"IFD at {offset} declares {declared} entries")

    entry_count = declared
    if declared > cap:
        logger.warning(f"IFD at {offset} declares {declared} entries; reading the first {cap}")
        warnings.warn(TooManyEntriesWarning(declared, cap), stacklevel=2)
        entry_count = cap

    acc = GeoAccumulator()
    for _ in range(entry_count):
        entry = read_entry(source, byte_order, big_tiff)
        if entry.tag not in GEO_TAGS:
            continue
        payload = fetch_value_bytes(source, entry, byte_order, big_tiff)
        value = decode_values(payload, entry.type_code, entry.count, byte_order)
        logger.debug(f"{tag_name(entry.tag)} ({entry.tag}): {value.values}")
        apply_tag(acc, entry.tag, value)
    return acc
