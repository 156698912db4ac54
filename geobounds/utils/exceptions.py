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
Custom Exceptions Module.

A centralized module for custom exceptions used throughout GeoBounds.
"""
from typing import Optional


class GeoTiffError(Exception):
    """Base exception for any failure while reading GeoTIFF metadata."""
    pass

class InvalidFormatError(GeoTiffError):
    """The source is not a TIFF file (bad magic, unknown version, short header)."""
    pass

class UnsupportedVariantError(GeoTiffError):
    """The source is a TIFF variant this reader does not implement (BigTIFF)."""
    pass

class TruncatedDataError(GeoTiffError):
    """Fewer bytes were available than the current field requires."""
    pass

class SeekFailureError(GeoTiffError):
    """A seek to a directory or an out-of-line value could not be performed."""

    def __init__(self, offset: int, reason: Optional[str] = None):
        self.offset = offset
        message = f"Fail to seek pos: {offset}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

class MissingTagError(GeoTiffError):
    """A required GeoTIFF tag was absent or decoded to zero."""

    def __init__(self, tag: int):
        self.tag = tag
        super().__init__(f"Tag {tag} is not set")

class TooManyEntriesWarning(UserWarning):
    """An image file directory declared more entries than the reader will process."""

    def __init__(self, declared: int, cap: int):
        self.declared = declared
        self.cap = cap
        super().__init__(
            f"IFD declares {declared} entries; only the first {cap} were read"
        )
