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
Typed Value Decoder.

Turns the payload bytes of a directory entry into a DecodedValue. Only the
ASCII, SHORT and DOUBLE field types are interpreted; every other type,
including unknown codes, decodes to an empty UNSUPPORTED value so that a
directory scan never stops on a field it does not understand.
"""

import logging
from typing import Tuple
from geobounds.utils.byte_decoder import read_f64, read_u16
from geobounds.utils.data_models import DecodedValue, ValueKind
from geobounds.utils.tiff_constants import ByteOrder, DataType, data_type_for

logger = logging.getLogger(__name__)


def split_ascii(payload: bytes) -> Tuple[str, ...]:
    """
    Split an ASCII payload into its NUL-terminated strings.

    A trailing terminator does not produce an extra empty string, and a
    payload without a final NUL still yields its last segment.

    Example:
        >>> split_ascii(b'A\\x00BC\\x00')
        ('A', 'BC')
    """
    segments = payload.split(b'\x00')
    if segments and segments[-1] == b'':
        segments = segments[:-1]
    strings = []
    for segment in segments:
        try:
            strings.append(segment.decode('ascii'))
        except UnicodeDecodeError:
            strings.append(segment.decode('latin-1'))
    return tuple(strings)


def decode_values(payload: bytes, type_code: int, count: int, byte_order: ByteOrder) -> DecodedValue:
    """
    Decode an entry payload.

    Args:
        payload: Value bytes, already fetched from the inline block or the file.
        type_code: TIFF field type code.
        count: Number of elements declared by the entry.
        byte_order: Byte order of the file.

    Returns:
        DecodedValue: UNSIGNED for SHORT, DOUBLE for DOUBLE, STRING for ASCII,
        UNSUPPORTED otherwise.

    Raises:
        TruncatedDataError: The payload holds fewer than `count` elements.
    """
    data_type = data_type_for(type_code)

    if data_type is DataType.ASCII:
        return DecodedValue(ValueKind.STRING, split_ascii(payload))

    if data_type is DataType.SHORT:
        values = tuple(read_u16(payload, byte_order, i * 2) for i in range(count))
        return DecodedValue(ValueKind.UNSIGNED, values)

    if data_type is DataType.DOUBLE:
        values = tuple(read_f64(payload, byte_order, i * 8) for i in range(count))
        return DecodedValue(ValueKind.DOUBLE, values)

    logger.debug(f"Skipping decode of field type {type_code}")
    return DecodedValue.unsupported()
