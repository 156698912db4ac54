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
A binary stream that records the seeks and reads made on it.

Used to check when the reader touches the source, for example that inline
tag values are taken from the entry without any seek.
"""

import io
from typing import List, Tuple


class SpyStream(io.BytesIO):
    """A BytesIO that records every seek and read made on it."""

    def __init__(self, data: bytes):
        super().__init__(data)
        self.seeks: List[Tuple[int, int]] = []
        self.reads: List[int] = []

    def seek(self, offset, whence=io.SEEK_SET):
        self.seeks.append((offset, whence))
        return super().seek(offset, whence)

    def read(self, size=-1):
        data = super().read(size)
        self.reads.append(len(data))
        return data
