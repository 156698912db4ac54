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
Data Models for GeoBounds.

This module defines strongly-typed data classes for the values that flow
through the reader pipeline. These classes provide type safety,
self-documentation, and clear contracts between modules.

Binary structure classes:
    TiffHeader: The 8-byte TIFF header
    IfdEntry: One fixed-size Image File Directory entry
    DecodedValue: Tagged union of decoded tag values

Working state:
    GeoAccumulator: Georeferencing fields collected during a directory scan

Result classes:
    GeoCoordinate: A longitude/latitude pair
    GeoRectangle: An axis-aligned geographic rectangle
    GeoTiffMetadata: Bounding box plus name, the result of a successful read
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple
from geobounds.utils.tiff_constants import (
    BIG_TIFF_VERSION,
    ByteOrder,
    DataType,
    data_type_for,
    type_width,
)


# ============================================================================
# Binary structure classes
# ============================================================================

@dataclass(frozen=True)
class TiffHeader:
    """
    The TIFF file header.

    Attributes:
        byte_order: Byte order detected from the magic marker
        version: 42 for classic TIFF, 43 for BigTIFF
        first_ifd_offset: Offset of the first Image File Directory (unvalidated)
        raw_bytes: The header bytes as read from the file
    """
    byte_order: ByteOrder
    version: int
    first_ifd_offset: int
    raw_bytes: bytes = b''

    @property
    def is_big_tiff(self) -> bool:
        return self.version == BIG_TIFF_VERSION


@dataclass(frozen=True)
class IfdEntry:
    """
    A single Image File Directory entry, before its value is interpreted.

    Attributes:
        tag: The numeric TIFF tag code (e.g., 256 for ImageWidth)
        type_code: The raw field type code (see DataType)
        count: Number of elements of that type
        raw_value: The inline value-or-offset block (4 bytes classic, 8 BigTIFF)
        position: File offset at which the entry record starts

    Example:
        >>> entry = IfdEntry(tag=256, type_code=3, count=1, raw_value=b'\\x64\\x00\\x00\\x00')
        >>> entry.byte_size
        2
    """
    tag: int
    type_code: int
    count: int
    raw_value: bytes
    position: int = 0

    @property
    def data_type(self) -> Optional[DataType]:
        return data_type_for(self.type_code)

    @property
    def byte_size(self) -> int:
        """Total payload size; 0 for unknown data types."""
        return type_width(self.type_code) * self.count


class ValueKind(Enum):
    """The variants of DecodedValue."""
    UNSIGNED = 'unsigned'
    DOUBLE = 'double'
    STRING = 'string'
    UNSUPPORTED = 'unsupported'


@dataclass(frozen=True)
class DecodedValue:
    """
    Decoded tag value: a sequence of unsigned integers, doubles, or strings.

    Data types this reader does not interpret decode to the UNSUPPORTED kind
    with no values. The typed accessors raise TypeError when called on a
    value of a different kind.
    """
    kind: ValueKind
    values: Tuple[Any, ...] = ()

    @classmethod
    def unsupported(cls) -> 'DecodedValue':
        return cls(ValueKind.UNSUPPORTED, ())

    def _expect(self, kind: ValueKind) -> Tuple[Any, ...]:
        if self.kind is not kind:
            raise TypeError(f"Value is {self.kind.value}, not {kind.value}")
        return self.values

    def unsigned(self) -> Tuple[int, ...]:
        return self._expect(ValueKind.UNSIGNED)

    def doubles(self) -> Tuple[float, ...]:
        return self._expect(ValueKind.DOUBLE)

    def strings(self) -> Tuple[str, ...]:
        return self._expect(ValueKind.STRING)

    def is_empty(self) -> bool:
        return len(self.values) == 0

    def __len__(self) -> int:
        return len(self.values)


# ============================================================================
# Working state
# ============================================================================

@dataclass
class GeoAccumulator:
    """
    Georeferencing fields collected while scanning a directory.

    A value of zero (or an empty description) means the tag has not been
    seen. Fields are overwritten each time their tag is encountered.
    """
    width: int = 0
    height: int = 0
    longitude: float = 0.0
    latitude: float = 0.0
    pixel_width: float = 0.0
    pixel_height: float = 0.0
    description: str = ''


# ============================================================================
# Result classes
# ============================================================================

@dataclass(frozen=True)
class GeoCoordinate:
    """A geographic coordinate in decimal degrees."""
    longitude: float
    latitude: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.longitude, self.latitude)


@dataclass(frozen=True)
class GeoRectangle:
    """
    An axis-aligned rectangle in geographic coordinates.

    No reprojection or datum handling is applied; the corners are in the
    model space of the source file.

    Attributes:
        top_left: (longitude, latitude) of the upper-left corner
        bottom_right: (longitude, latitude) of the lower-right corner

    Example:
        >>> rect = GeoRectangle(GeoCoordinate(10.0, 50.0), GeoCoordinate(10.99, 49.51))
        >>> rect.west, rect.north
        (10.0, 50.0)
    """
    top_left: GeoCoordinate
    bottom_right: GeoCoordinate

    @property
    def west(self) -> float:
        return self.top_left.longitude

    @property
    def east(self) -> float:
        return self.bottom_right.longitude

    @property
    def north(self) -> float:
        return self.top_left.latitude

    @property
    def south(self) -> float:
        return self.bottom_right.latitude

    def width(self) -> float:
        """Longitudinal extent in degrees."""
        return self.east - self.west

    def height(self) -> float:
        """Latitudinal extent in degrees."""
        return self.north - self.south

    def center(self) -> GeoCoordinate:
        return GeoCoordinate(
            (self.west + self.east) / 2.0,
            (self.north + self.south) / 2.0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'top_left': {'longitude': self.west, 'latitude': self.north},
            'bottom_right': {'longitude': self.east, 'latitude': self.south},
        }


@dataclass(frozen=True)
class GeoTiffMetadata:
    """
    Georeferencing metadata extracted from a GeoTIFF file.

    Attributes:
        bounding_box: Geographic extent of the image
        name: Image description (tag 270), or an empty string
    """
    bounding_box: GeoRectangle
    name: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'bounding_box': self.bounding_box.to_dict(),
            'name': self.name,
        }
