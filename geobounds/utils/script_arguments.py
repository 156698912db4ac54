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
Dataclass-based Argument Models for GeoBounds Tools.

This module defines strongly-typed dataclasses for the command-line arguments
of each tool. It uses `__post_init__` for validation and for resolving
defaults from the configuration, so the tool logic receives clean inputs.

Classes:
    BaseArguments: A base dataclass for common script arguments.
    ReadArguments: Arguments for the read_bounds tool.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from geobounds.utils.config_loader import config
from geobounds.utils.tiff_constants import DEFAULT_MAX_IFD_ENTRIES

logger = logging.getLogger(__name__)

REPORT_FORMATS = ('text', 'md', 'json')


@dataclass
class BaseArguments:
    """A base dataclass for common script arguments."""
    input_path: Optional[Path] = None
    log_file: Optional[Path] = None
    verbose: bool = False

    def __post_init__(self):
        """Coerce path-like arguments to Path objects."""
        if self.input_path and isinstance(self.input_path, str):
            self.input_path = Path(self.input_path)
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

    def handle_error(self, message: str):
        """Logs an error and raises ValueError."""
        logger.error(message)
        raise ValueError(message)


@dataclass
class ReadArguments(BaseArguments):
    """Arguments for the read_bounds tool."""
    report_format: Optional[str] = None
    precision: Optional[int] = None
    max_entries: Optional[int] = None

    def __post_init__(self):
        """Validation and config defaults for read_bounds arguments."""
        super().__post_init__()
        if self.report_format is None:
            self.report_format = str(config.get('output.format', 'text')).lower()
        if self.precision is None:
            self.precision = int(config.get('output.precision', 6))
        if self.max_entries is None:
            self.max_entries = int(config.get('reader.max_ifd_entries', DEFAULT_MAX_IFD_ENTRIES))
        try:
            self._validate_read()
        except ValueError as e:
            self.handle_error(str(e))

    def _validate_read(self):
        """Perform validation checks for read_bounds arguments."""
        if not self.input_path:
            raise ValueError("An input file or directory is required.")
        if not self.input_path.exists():
            raise ValueError(f"Input path not found: {self.input_path}")
        if self.report_format not in REPORT_FORMATS:
            raise ValueError(f"Unknown report format '{self.report_format}'. Choose from {', '.join(REPORT_FORMATS)}.")
        if self.precision < 0:
            raise ValueError(f"Precision must be zero or positive, got {self.precision}")
        if self.max_entries < 1:
            raise ValueError(f"Max entries must be at least 1, got {self.max_entries}")
