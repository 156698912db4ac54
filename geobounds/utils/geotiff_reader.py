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
GeoTIFF Metadata Reader.

Entry points for extracting a bounding box and name from a GeoTIFF without
reading its raster data.

- `read_geotiff_metadata`: runs header -> first IFD -> interpretation on a
  borrowed binary source and raises GeoTiffError on any failure.
- `GeoTiffFile`: opens a path, reads it, closes it, and keeps either the
  result or the error message.
- `read_coordinates`: returns the bounding box of a path, or None.

GeoTIFF is a large standard and this reader only handles the subset that
appears in real-world aviation charts: classic TIFF, georeferenced through a
single tie point and a pixel scale.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union
from geobounds.utils.data_models import GeoRectangle, GeoTiffMetadata
from geobounds.utils.exceptions import GeoTiffError
from geobounds.utils.geo_interpreter import interpret
from geobounds.utils.ifd_reader import read_ifd
from geobounds.utils.tiff_header import read_header

logger = logging.getLogger(__name__)


def read_geotiff_metadata(source: BinaryIO, max_entries: Optional[int] = None) -> GeoTiffMetadata:
    """
    Extract georeferencing metadata from a TIFF byte source.

    The source is borrowed: it is read and repositioned but never closed.

    Args:
        source: A readable, seekable binary source starting with a TIFF header.
        max_entries: Cap on the number of directory entries processed.

    Returns:
        GeoTiffMetadata: Bounding box and image description.

    Raises:
        GeoTiffError: Any failure; no partial result is produced.
    """
    header = read_header(source)
    acc = read_ifd(
        source,
        header.first_ifd_offset,
        header.byte_order,
        big_tiff=header.is_big_tiff,
        max_entries=max_entries,
    )
    return interpret(acc)


class GeoTiffFile:
    """
    A GeoTIFF file on disk, analyzed on construction.

    Construction opens the file, reads the header and first directory, and
    closes the file again. It does not raise for unreadable or malformed
    files; check `is_valid` and `error` instead.

    Example:
        >>> chart = GeoTiffFile('EDKA.tiff')
        >>> if chart.is_valid:
        ...     print(chart.bounding_box.top_left, chart.name)
    """

    MIME_TYPES = ('image/tiff',)

    def __init__(self, file_path: Union[str, Path], max_entries: Optional[int] = None):
        self.file_path = Path(file_path)
        self._metadata: Optional[GeoTiffMetadata] = None
        self._error = ''

        try:
            with open(self.file_path, 'rb') as f:
                self._metadata = read_geotiff_metadata(f, max_entries=max_entries)
        except OSError as e:
            self._error = e.strerror or str(e)
        except GeoTiffError as e:
            self._error = str(e)

        if self._error:
            logger.debug(f"{self.file_path}: {self._error}")

    @property
    def is_valid(self) -> bool:
        return self._metadata is not None

    @property
    def error(self) -> str:
        """Error message, or an empty string if the file was read successfully."""
        return self._error

    @property
    def metadata(self) -> Optional[GeoTiffMetadata]:
        return self._metadata

    @property
    def name(self) -> str:
        """The image description, or an empty string if none is specified."""
        return self._metadata.name if self._metadata else ''

    @property
    def bounding_box(self) -> Optional[GeoRectangle]:
        return self._metadata.bounding_box if self._metadata else None


def read_coordinates(file_path: Union[str, Path]) -> Optional[GeoRectangle]:
    """
    Read the corner coordinates of a georeferenced image file.

    Args:
        file_path: Path to a GeoTIFF file.

    Returns:
        The bounding box, or None if no valid georeferencing data was found.
    """
    geotiff = GeoTiffFile(file_path)
    if not geotiff.is_valid:
        logger.warning(f"{file_path}: {geotiff.error}")
        return None
    return geotiff.bounding_box
