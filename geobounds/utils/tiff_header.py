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
TIFF Header Parser.

Reads the 8-byte classic TIFF header: the byte order marker, the version
number and the offset of the first Image File Directory.
"""

import logging
from typing import BinaryIO
from geobounds.utils.byte_decoder import read_u16, read_u32
from geobounds.utils.data_models import TiffHeader
from geobounds.utils.exceptions import InvalidFormatError, UnsupportedVariantError
from geobounds.utils.tiff_constants import (
    BIG_TIFF_VERSION,
    CLASSIC_TIFF_VERSION,
    HEADER_SIZE,
    ByteOrder,
)

logger = logging.getLogger(__name__)


def read_header(source: BinaryIO) -> TiffHeader:
    """
    Parse the TIFF header at the start of `source`.

    Args:
        source: A readable, seekable binary source. It is rewound to offset 0.

    Returns:
        TiffHeader: The parsed header. The source is left positioned just
        after the header.

    Raises:
        InvalidFormatError: Short header, unknown magic or unknown version.
        UnsupportedVariantError: The file is a BigTIFF.
    """
    source.seek(0)
    raw = source.read(HEADER_SIZE)
    if raw is None or len(raw) < HEADER_SIZE:
        raise InvalidFormatError("Invalid tiff file")

    magic = raw[:2]
    if magic == ByteOrder.LITTLE.value:
        byte_order = ByteOrder.LITTLE
    elif magic == ByteOrder.BIG.value:
        byte_order = ByteOrder.BIG
    else:
        raise InvalidFormatError("Invalid tiff file")

    version = read_u16(raw, byte_order, 2)
    if version == BIG_TIFF_VERSION:
        raise UnsupportedVariantError("BigTIFF files are not supported")
    if version != CLASSIC_TIFF_VERSION:
        raise InvalidFormatError(f"Invalid tiff file: Unknown version {version}")

    first_ifd_offset = read_u32(raw, byte_order, 4)
    logger.debug(f"TIFF header: byte order {byte_order.name}, first IFD at {first_ifd_offset}")
    return TiffHeader(
        byte_order=byte_order,
        version=version,
        first_ifd_offset=first_ifd_offset,
        raw_bytes=bytes(raw),
    )
