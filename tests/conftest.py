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
Pytest configuration and shared fixtures for the GeoBounds test suite.

This module provides:
- Shared fixtures for common test files
- A spy stream that records seeks and reads
- Configuration isolation between tests

Example:
    >>> def test_using_fixture(mock_geotiff_basic):
    ...     '''Test using the mock_geotiff_basic fixture.'''
    ...     assert mock_geotiff_basic.width == 100
"""

import pytest

from tests.fixtures.mock_geotiff_factory import MockGeoTIFF
from tests.fixtures.spy_stream import SpyStream
from geobounds.utils.config_loader import config


# =============================================================================
# Function-scope Fixtures (Created for each test)
# =============================================================================

@pytest.fixture(autouse=True)
def restore_config():
    """Reload the configuration after each test that modifies it."""
    yield
    config.reload()


@pytest.fixture
def mock_geotiff_basic():
    """
    A little-endian 100x50 GeoTIFF at (10.0, 50.0) with 0.01 degree pixels.

    Returns:
        MockGeoTIFF: Configured mock GeoTIFF object
    """
    return MockGeoTIFF(
        width=100,
        height=50,
        pixel_scale=(0.01, 0.01, 0.0),
        tie_point=(0.0, 0.0, 0.0, 10.0, 50.0, 0.0),
    )


@pytest.fixture
def mock_geotiff_named():
    """
    A big-endian GeoTIFF with an ImageDescription, close to a real chart.

    Returns:
        MockGeoTIFF: Configured mock GeoTIFF with tag 270
    """
    return MockGeoTIFF(
        width=64,
        height=32,
        pixel_scale=(0.0021, 0.0013, 0.0),
        tie_point=(0.0, 0.0, 0.0, 6.11667, 50.8549, 0.0),
        description='EDKA Aachen-Merzbrueck',
        byte_order='MM',
    )


@pytest.fixture
def geotiff_path(tmp_path, mock_geotiff_basic):
    """The basic mock GeoTIFF saved to disk."""
    return mock_geotiff_basic.save_to_file(tmp_path / "basic.tif")


@pytest.fixture
def spy_stream_factory():
    """Build a SpyStream from raw bytes."""
    return SpyStream
