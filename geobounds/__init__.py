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
GeoTIFF Bounds Reader (GeoBounds).

Extracts the geographic bounding box and name of GeoTIFF files, such as
aviation charts, by reading their TIFF header and first image file directory.
The raster data is never decoded.

Example:
    >>> from geobounds import read_geotiff_metadata
    >>> with open('EDKA.tiff', 'rb') as f:
    ...     meta = read_geotiff_metadata(f)
    >>> meta.bounding_box.top_left
"""
from geobounds.utils.data_models import GeoCoordinate, GeoRectangle, GeoTiffMetadata
from geobounds.utils.exceptions import (
    GeoTiffError,
    InvalidFormatError,
    MissingTagError,
    SeekFailureError,
    TooManyEntriesWarning,
    TruncatedDataError,
    UnsupportedVariantError,
)
from geobounds.utils.geotiff_reader import GeoTiffFile, read_coordinates, read_geotiff_metadata

__version__ = '1.0.0'

__all__ = [
    'GeoCoordinate',
    'GeoRectangle',
    'GeoTiffMetadata',
    'GeoTiffError',
    'InvalidFormatError',
    'MissingTagError',
    'SeekFailureError',
    'TooManyEntriesWarning',
    'TruncatedDataError',
    'UnsupportedVariantError',
    'GeoTiffFile',
    'read_coordinates',
    'read_geotiff_metadata',
]
