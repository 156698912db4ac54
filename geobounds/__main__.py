#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ******************************************************************************
# Project: GeoTIFF Bounds Reader (GeoBounds)
# Author: Eric Robeck <robeckgeo@gmail.com>
#
# Copyright (c) 2025, Eric Robeck
# Licensed under the MIT License
# ******************************************************************************

"""Allow running GeoBounds with `python -m geobounds`."""
from geobounds.main import main

if __name__ == "__main__":
    main()
