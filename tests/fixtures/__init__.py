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
Test fixtures and mock data factories for GeoBounds tests.

This package contains:
- MockGeoTIFF: Factory for writing classic TIFF files with GeoTIFF tags
- filler_tags: Helper for padding a directory with unrelated entries
- SpyStream: BytesIO that records seeks and reads
"""

from tests.fixtures.mock_geotiff_factory import MockGeoTIFF, filler_tags
from tests.fixtures.spy_stream import SpyStream

__all__ = ['MockGeoTIFF', 'SpyStream', 'filler_tags']
