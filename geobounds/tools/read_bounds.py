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
GeoTIFF Bounds Reading Tool for GeoBounds.

This module powers the 'read' command. It reads the bounding box and name of
one GeoTIFF, or of every TIFF below a directory, and prints the results. A
file that cannot be read is reported and the batch moves on.
"""

import logging
import warnings
from typing import Dict
from geobounds.utils.exceptions import TooManyEntriesWarning
from geobounds.utils.geotiff_reader import GeoTiffFile
from geobounds.utils.path_helpers import get_geotiff_files
from geobounds.utils.report_formatters import format_error, format_metadata, report_header
from geobounds.utils.script_arguments import ReadArguments

logger = logging.getLogger('read_bounds')


def read_bounds(args: ReadArguments) -> Dict[str, GeoTiffFile]:
    """
    Read and print the bounds of every file named by `args.input_path`.

    Args:
        args: Validated read arguments.

    Returns:
        Mapping of file path to its GeoTiffFile. Check `is_valid` on each.
    """
    files = get_geotiff_files(args.input_path)
    if not files:
        logger.error(f"No TIFF files found in {args.input_path}")
        return {}

    for line in report_header(args.report_format):
        print(line)

    results: Dict[str, GeoTiffFile] = {}
    for file_path in files:
        with warnings.catch_warnings():
            # The reader already logs capped directories
            warnings.simplefilter('ignore', TooManyEntriesWarning)
            geotiff = GeoTiffFile(file_path, max_entries=args.max_entries)
        results[file_path] = geotiff
        if geotiff.is_valid:
            print(format_metadata(file_path, geotiff.metadata, args.report_format, args.precision))
        else:
            logger.debug(f"Failed to read {file_path}: {geotiff.error}")
            print(format_error(file_path, geotiff.error, args.report_format))

    failed = sum(1 for g in results.values() if not g.is_valid)
    logger.debug(f"Read {len(results) - failed} of {len(results)} files")
    return results
