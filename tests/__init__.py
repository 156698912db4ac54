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
GeoBounds Test Suite.

This package contains tests for GeoBounds components including:
- Unit tests for individual functions and classes
- Integration tests for the full reader pipeline on fixture files
- End-to-end tests for CLI commands
"""
