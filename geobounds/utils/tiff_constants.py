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
Shared TIFF Constants and Enumerations.

This module centralizes the binary layout constants used by the GeoBounds
reader: byte order markers, TIFF versions, directory entry sizes, the TIFF
field data types with their element widths, and the tag numbers that carry
georeferencing information.

Classes:
    ByteOrder: Enum for the two TIFF byte orders.
    DataType: Enum for TIFF field data types (TIFF 6.0 plus BigTIFF additions).
"""
from enum import Enum, IntEnum
from typing import Optional

# --- Header ---

HEADER_SIZE = 8
CLASSIC_TIFF_VERSION = 42
BIG_TIFF_VERSION = 43

# --- Directory entries ---

CLASSIC_ENTRY_SIZE = 12
BIG_TIFF_ENTRY_SIZE = 20
CLASSIC_INLINE_SIZE = 4
BIG_TIFF_INLINE_SIZE = 8

DEFAULT_MAX_IFD_ENTRIES = 100

# --- GeoTIFF tags ---

TAG_IMAGE_WIDTH = 256
TAG_IMAGE_LENGTH = 257
TAG_IMAGE_DESCRIPTION = 270
TAG_MODEL_PIXEL_SCALE = 33550
TAG_MODEL_TIEPOINT = 33922

GEO_TAGS = frozenset({
    TAG_IMAGE_WIDTH,
    TAG_IMAGE_LENGTH,
    TAG_IMAGE_DESCRIPTION,
    TAG_MODEL_PIXEL_SCALE,
    TAG_MODEL_TIEPOINT,
})

TAG_NAMES = {
    TAG_IMAGE_WIDTH: 'ImageWidth',
    TAG_IMAGE_LENGTH: 'ImageLength',
    TAG_IMAGE_DESCRIPTION: 'ImageDescription',
    TAG_MODEL_PIXEL_SCALE: 'ModelPixelScaleTag',
    TAG_MODEL_TIEPOINT: 'ModelTiepointTag',
}


# --- Enumerations ---

class ByteOrder(Enum):
    """Byte order of a TIFF file, keyed by its two-byte magic marker."""
    LITTLE = b'II'
    BIG = b'MM'

    @property
    def struct_prefix(self) -> str:
        """The `struct` format prefix for this byte order."""
        return '<' if self is ByteOrder.LITTLE else '>'


class DataType(IntEnum):
    """TIFF field data types (TIFF 6.0 codes 1-12, BigTIFF codes 13-16)."""
    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    SBYTE = 6
    UNDEFINED = 7
    SSHORT = 8
    SLONG = 9
    SRATIONAL = 10
    FLOAT = 11
    DOUBLE = 12
    IFD = 13
    LONG8 = 14
    SLONG8 = 15
    IFD8 = 16


TYPE_WIDTHS = {
    DataType.BYTE: 1,
    DataType.ASCII: 1,
    DataType.SHORT: 2,
    DataType.LONG: 4,
    DataType.RATIONAL: 8,
    DataType.SBYTE: 1,
    DataType.UNDEFINED: 1,
    DataType.SSHORT: 2,
    DataType.SLONG: 4,
    DataType.SRATIONAL: 8,
    DataType.FLOAT: 4,
    DataType.DOUBLE: 8,
    DataType.IFD: 4,
    DataType.LONG8: 8,
    DataType.SLONG8: 8,
    DataType.IFD8: 8,
}


# --- Helper Accessors ---

def data_type_for(type_code: int) -> Optional[DataType]:
    """Return the DataType for a raw type code, or None if the code is unknown."""
    try:
        return DataType(type_code)
    except ValueError:
        return None

def type_width(type_code: int) -> int:
    """Element width in bytes for a raw type code; 0 for unknown codes."""
    data_type = data_type_for(type_code)
    if data_type is None:
        return 0
    return TYPE_WIDTHS[data_type]

def inline_size(big_tiff: bool) -> int:
    return BIG_TIFF_INLINE_SIZE if big_tiff else CLASSIC_INLINE_SIZE

def entry_size(big_tiff: bool) -> int:
    return BIG_TIFF_ENTRY_SIZE if big_tiff else CLASSIC_ENTRY_SIZE

def tag_name(tag: int) -> str:
    return TAG_NAMES.get(tag, f'UnknownTag ({tag})')
