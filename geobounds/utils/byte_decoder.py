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
Byte Decoder.

Stateless helpers that interpret raw byte spans as integers and floats under
an explicit TIFF byte order, plus a strict `read_exact` for binary sources.
"""
import struct
from typing import BinaryIO
from geobounds.utils.exceptions import TruncatedDataError
from geobounds.utils.tiff_constants import ByteOrder


def _unpack(fmt: str, data: bytes, byte_order: ByteOrder, offset: int):
    size = struct.calcsize(fmt)
    if offset < 0 or len(data) - offset < size:
        raise TruncatedDataError(
            f"Need {size} bytes at offset {offset}, have {max(len(data) - offset, 0)}"
        )
    return struct.unpack_from(byte_order.struct_prefix + fmt, data, offset)[0]

def read_u16(data: bytes, byte_order: ByteOrder, offset: int = 0) -> int:
    return _unpack('H', data, byte_order, offset)

def read_u32(data: bytes, byte_order: ByteOrder, offset: int = 0) -> int:
    return _unpack('I', data, byte_order, offset)

def read_u64(data: bytes, byte_order: ByteOrder, offset: int = 0) -> int:
    return _unpack('Q', data, byte_order, offset)

def read_offset(data: bytes, byte_order: ByteOrder, big_tiff: bool = False) -> int:
    """Decode a file offset: 32-bit for classic TIFF, 64-bit for BigTIFF."""
    if big_tiff:
        return read_u64(data, byte_order)
    return read_u32(data, byte_order)

def read_f64(data: bytes, byte_order: ByteOrder, offset: int = 0) -> float:
    """
    Decode an IEEE-754 double.

    Big-endian payloads are reversed and then reinterpreted as little-endian,
    which is the same as reading them big-endian.
    """
    chunk = data[offset:offset + 8]
    if offset < 0 or len(chunk) < 8:
        raise TruncatedDataError(f"Need 8 bytes at offset {offset}, have {len(chunk)}")
    if byte_order is ByteOrder.BIG:
        chunk = chunk[::-1]
    return struct.unpack('<d', chunk)[0]

def read_exact(source: BinaryIO, size: int, what: str = 'field') -> bytes:
    """Read exactly `size` bytes from `source` or raise TruncatedDataError."""
    data = source.read(size)
    if data is None or len(data) != size:
        got = 0 if data is None else len(data)
        raise TruncatedDataError(f"File read error: {what} needs {size} bytes, got {got}")
    return data
