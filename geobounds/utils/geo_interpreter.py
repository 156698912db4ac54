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
GeoTIFF Interpreter.

Validates the collected georeferencing fields and computes the bounding box
of the image from the tie point, pixel scale and raster size.

Note:
    A field equal to zero is treated as "tag not present". A file whose tie
    point sits exactly on the equator or prime meridian is therefore
    rejected with MissingTagError(33922).
"""

import logging
from geobounds.utils.data_models import GeoAccumulator, GeoCoordinate, GeoRectangle, GeoTiffMetadata
from geobounds.utils.exceptions import MissingTagError
from geobounds.utils.tiff_constants import (
    TAG_IMAGE_LENGTH,
    TAG_IMAGE_WIDTH,
    TAG_MODEL_PIXEL_SCALE,
    TAG_MODEL_TIEPOINT,
)

logger = logging.getLogger(__name__)


def check_required_tags(acc: GeoAccumulator) -> None:
    """Raise MissingTagError for the first required field still at zero."""
    if acc.width == 0:
        raise MissingTagError(TAG_IMAGE_WIDTH)
    if acc.height == 0:
        raise MissingTagError(TAG_IMAGE_LENGTH)
    if acc.longitude == 0 or acc.latitude == 0:
        raise MissingTagError(TAG_MODEL_TIEPOINT)
    if acc.pixel_width == 0 or acc.pixel_height == 0:
        raise MissingTagError(TAG_MODEL_PIXEL_SCALE)


def compute_bounding_box(acc: GeoAccumulator) -> GeoRectangle:
    """
    Corner coordinates of the image.

    The top-left corner is the tie point. The bottom-right corner lies
    (width - 1) pixels east and (height - 1) pixels south of it; a negative
    pixel height is added rather than subtracted.
    """
    top_left = GeoCoordinate(acc.longitude, acc.latitude)
    right = acc.longitude + (acc.width - 1) * acc.pixel_width
    if acc.pixel_height > 0:
        bottom = acc.latitude - (acc.height - 1) * acc.pixel_height
    else:
        bottom = acc.latitude + (acc.height - 1) * acc.pixel_height
    return GeoRectangle(top_left, GeoCoordinate(right, bottom))


def interpret(acc: GeoAccumulator) -> GeoTiffMetadata:
    """
    Build the GeoTiffMetadata result from a populated accumulator.

    Raises:
        MissingTagError: A required tag (256, 257, 33922 or 33550) is unset.
    """
    check_required_tags(acc)
    bbox = compute_bounding_box(acc)
    logger.debug(f"Bounding box: {bbox.top_left.as_tuple()} - {bbox.bottom_right.as_tuple()}")
    return GeoTiffMetadata(bounding_box=bbox, name=acc.description)
