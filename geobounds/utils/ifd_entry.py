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
IFD Entry Reader.

Reads fixed-size Image File Directory entries and fetches their value bytes,
either from the inline value block or from the offset it points to.
"""

import io
import logging
from typing import BinaryIO
from geobounds.utils.byte_decoder import read_exact, read_offset, read_u16, read_u32, read_u64
from geobounds.utils.data_models import IfdEntry
from geobounds.utils.exceptions import SeekFailureError, TruncatedDataError
from geobounds.utils.tiff_constants import ByteOrder, inline_size

logger = logging.getLogger(__name__)


def seek_to(source: BinaryIO, offset: int) -> int:
    """
    Seek `source` to an absolute offset inside the data.

    Returns:
        int: The size of the source, in bytes.

    Raises:
        SeekFailureError: The offset is negative, lies past the end of the
            source, or the source refused the seek.
    """
    if offset < 0:
        raise SeekFailureError(offset, "negative offset")
    try:
        end = source.seek(0, io.SEEK_END)
        if offset > end:
            raise SeekFailureError(offset, f"beyond end of data ({end} bytes)")
        source.seek(offset, io.SEEK_SET)
    except (OSError, ValueError) as e:
        raise SeekFailureError(offset, str(e)) from e
    return end


def read_entry(source: BinaryIO, byte_order: ByteOrder, big_tiff: bool = False) -> IfdEntry:
    """
    Read one directory entry at the current position of `source`.

    The value block is kept verbatim; it is interpreted later by
    `fetch_value_bytes`. The source advances by exactly one entry
    (12 bytes classic, 20 bytes BigTIFF).
    """
    position = source.tell()
    tag = read_u16(read_exact(source, 2, 'entry tag'), byte_order)
    type_code = read_u16(read_exact(source, 2, 'entry type'), byte_order)
    if big_tiff:
        count = read_u64(read_exact(source, 8, 'entry count'), byte_order)
    else:
        count = read_u32(read_exact(source, 4, 'entry count'), byte_order)
    raw_value = read_exact(source, inline_size(big_tiff), 'entry value')
    return IfdEntry(
        tag=tag,
        type_code=type_code,
        count=count,
        raw_value=raw_value,
        position=position,
    )


def fetch_value_bytes(source: BinaryIO, entry: IfdEntry, byte_order: ByteOrder, big_tiff: bool = False) -> bytes:
    """
    Return the payload bytes of `entry`.

    Payloads that fit in the inline block are sliced from it without touching
    the source. Larger payloads are read from the offset stored in the block,
    after which the source is put back where it was so the directory scan
    can continue.

    Raises:
        SeekFailureError: The value offset cannot be reached.
        TruncatedDataError: The source ends before the payload does.
    """
    byte_size = entry.byte_size
    if byte_size == 0:
        return b''
    if byte_size <= inline_size(big_tiff):
        return entry.raw_value[:byte_size]

    value_offset = read_offset(entry.raw_value, byte_order, big_tiff)
    logger.debug(f"Tag {entry.tag}: reading {byte_size} bytes at offset {value_offset}")
    resume_at = source.tell()
    end = seek_to(source, value_offset)
    if value_offset + byte_size > end:
        raise TruncatedDataError(
            f"File read error: tag {entry.tag} value needs {byte_size} bytes at offset {value_offset}, "
            f"data ends at {end}"
        )
    payload = read_exact(source, byte_size, f"tag {entry.tag} value")
    source.seek(resume_at)
    return payload
