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
Command-line interface for the GeoTIFF Bounds Reader (GeoBounds).

This script provides the main entry point for the `geobounds` command,
parsing user arguments and dispatching them to the appropriate tool.
"""
import argparse
import logging
import sys
from pathlib import Path
from geobounds.utils.config_loader import config
from geobounds.utils.log_helpers import setup_logger, shutdown_logger
from geobounds.utils.script_arguments import REPORT_FORMATS, ReadArguments

def positive_int(value: str) -> int:
    """Validate that the value is an integer of at least 1."""
    try:
        ivalue = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got '{value}'")
    if ivalue < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got '{ivalue}'")
    return ivalue

def main(argv=None):
    """
    Main function to parse arguments and call the appropriate tool.
    """
    parser = argparse.ArgumentParser(
        description='GeoBounds',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    subparsers = parser.add_subparsers(dest='tool', help='Available tools')
    subparsers.required = True

    # --- Read Bounds Tool ---
    read_parser = subparsers.add_parser(
        'read',
        help='Read the bounding box and name of a GeoTIFF file or of every TIFF in a directory.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    read_parser.add_argument('-i', '--input', required=True, type=Path, dest='input_path', help='Path to a GeoTIFF file or a directory of GeoTIFFs.')
    read_parser.add_argument('-f', '--report-format', type=str.lower, default=config.get('output.format', 'text'), choices=REPORT_FORMATS, dest='report_format', help='Output format.')
    read_parser.add_argument('-p', '--precision', type=int, default=config.get('output.precision', 6), dest='precision', help='Decimal places for coordinates in text and md output.')
    read_parser.add_argument('-m', '--max-entries', type=positive_int, default=None, dest='max_entries', help='Maximum number of IFD entries to read (default: reader.max_ifd_entries from config.toml).')
    read_parser.add_argument('--log-file', type=Path, default=config.get('logging.file') or None, dest='log_file', help='Path to a log file for debugging.')
    read_parser.add_argument('-v', '--verbose', action='store_true', dest='verbose', help='Enable verbose logging.')

    args = parser.parse_args(argv)
    tool = args.tool
    args_dict = vars(args)
    args_dict.pop('tool', None)

    # --- Logger Setup ---
    log_level = logging.DEBUG if args.verbose else config.get('logging.level', 'INFO')
    log_file = str(args.log_file) if args.log_file else None
    logger = setup_logger(log_file=log_file, level=log_level)

    exit_code = 0
    try:
        if tool == 'read':
            from geobounds.tools.read_bounds import read_bounds
            try:
                script_args = ReadArguments(**args_dict)
            except ValueError:
                # ReadArguments has already logged the reason
                script_args = None
                exit_code = 1
            if script_args is not None:
                results = read_bounds(script_args)
                if not results or not all(g.is_valid for g in results.values()):
                    exit_code = 1
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}", exc_info=True)
        exit_code = 1
    finally:
        shutdown_logger(logger)
    sys.exit(exit_code)

if __name__ == "__main__":
    main()
