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
File and Directory Path Utilities for GeoBounds.

This module provides helper functions for locating TIFF files, either a
single file or every TIFF found recursively beneath a directory.
"""
import logging
import os
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ('.tif', '.tiff')
TIFF_MAGICS = (b'II*\x00', b'MM\x00*', b'II+\x00', b'MM\x00+')


def is_tiff(file_path: Union[str, Path]) -> bool:
    """
    Check whether a file starts with a TIFF (or BigTIFF) signature.

    BigTIFF files are included so that the reader can report them as
    unsupported instead of silently skipping them.
    """
    try:
        with open(file_path, 'rb') as f:
            return f.read(4) in TIFF_MAGICS
    except OSError as e:
        logger.debug(f"Cannot open {file_path}: {e}")
        return False

def get_geotiff_files(input_path: Union[str, Path]) -> List[str]:
    """
    Get a list of TIFF files from an input path (file or directory).

    A single file is returned as-is, whatever its signature, so that the
    reader can report why it is not usable. Directory scans keep only files
    with a TIFF extension and signature.

    Args:
        input_path: The path to a single file or a directory.

    Returns:
        List[str]: Sorted absolute paths.
    """
    input_path = str(input_path)
    geotiff_files = []
    if os.path.isdir(input_path):
        for root, _, files in os.walk(input_path):
            for file in files:
                if file.lower().endswith(SUPPORTED_EXTENSIONS):
                    filepath = os.path.join(root, file)
                    if is_tiff(filepath):
                        geotiff_files.append(os.path.abspath(filepath))
                    else:
                        logger.debug(f"Skipping {filepath}: not a TIFF file")
    elif os.path.isfile(input_path):
        geotiff_files.append(os.path.abspath(input_path))
    return sorted(geotiff_files)
