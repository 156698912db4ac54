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
Integration tests for the metadata reading workflow.

These tests verify that the header reader, IFD reader and interpreter work
together to extract a bounding box and name from complete TIFF files.
"""

import struct
import pytest
from tests.fixtures.mock_geotiff_factory import MockGeoTIFF, filler_tags
from tests.fixtures.spy_stream import SpyStream
from geobounds.utils.exceptions import (
    GeoTiffError,
    InvalidFormatError,
    MissingTagError,
    SeekFailureError,
    TooManyEntriesWarning,
    TruncatedDataError,
    UnsupportedVariantError,
)
from geobounds.utils.geotiff_reader import GeoTiffFile, read_coordinates, read_geotiff_metadata


class TestReadGeoTiffMetadata:
    """Test the complete pipeline on an in-memory source."""

    @pytest.mark.parametrize('byte_order', ['II', 'MM'])
    def test_bounding_box_in_both_byte_orders(self, byte_order):
        """Both byte orders give the same result."""
        mock = MockGeoTIFF(byte_order=byte_order)

        metadata = read_geotiff_metadata(mock.to_stream())

        bbox = metadata.bounding_box
        assert bbox.top_left.as_tuple() == (10.0, 50.0)
        assert bbox.bottom_right.longitude == pytest.approx(10.99)
        assert bbox.bottom_right.latitude == pytest.approx(49.51)
        assert metadata.name == ''

    def test_named_chart(self, mock_geotiff_named):
        metadata = read_geotiff_metadata(mock_geotiff_named.to_stream())

        assert metadata.name == 'EDKA Aachen-Merzbrueck'
        assert metadata.bounding_box.bottom_right.longitude == pytest.approx(6.11667 + 63 * 0.0021)
        assert metadata.bounding_box.bottom_right.latitude == pytest.approx(50.8549 - 31 * 0.0013)

    def test_negative_pixel_height(self):
        mock = MockGeoTIFF(pixel_scale=(0.01, -0.02, 0.0))
        metadata = read_geotiff_metadata(mock.to_stream())
        assert metadata.bounding_box.bottom_right.latitude == pytest.approx(49.02)

    def test_source_is_borrowed_not_closed(self, mock_geotiff_basic):
        stream = mock_geotiff_basic.to_stream()
        read_geotiff_metadata(stream)
        assert not stream.closed

    def test_only_needed_bytes_are_read(self, mock_geotiff_basic):
        """The pixel strip is never read."""
        source = SpyStream(mock_geotiff_basic.to_bytes())
        read_geotiff_metadata(source)
        assert sum(source.reads) < mock_geotiff_basic.pixel_data.nbytes

    @pytest.mark.parametrize('tag', [256, 257, 33550, 33922])
    def test_missing_required_tag(self, tag):
        mock = MockGeoTIFF(omit_tags=[tag])
        with pytest.raises(MissingTagError) as excinfo:
            read_geotiff_metadata(mock.to_stream())
        assert excinfo.value.tag == tag

    def test_oversized_directory_still_reads_leading_tags(self):
        mock = MockGeoTIFF(extra_tags=filler_tags(150, first_tag=40000))
        with pytest.warns(TooManyEntriesWarning):
            metadata = read_geotiff_metadata(mock.to_stream())
        assert metadata.bounding_box.top_left.as_tuple() == (10.0, 50.0)

    def test_oversized_directory_loses_trailing_tags(self):
        mock = MockGeoTIFF(extra_tags=filler_tags(150, first_tag=100))
        with pytest.warns(TooManyEntriesWarning):
            with pytest.raises(MissingTagError, match='Tag 256'):
                read_geotiff_metadata(mock.to_stream())

    def test_explicit_entry_cap(self, mock_geotiff_basic):
        with pytest.warns(TooManyEntriesWarning):
            with pytest.raises(MissingTagError, match='33922'):
                read_geotiff_metadata(mock_geotiff_basic.to_stream(), max_entries=10)


class TestMalformedSources:
    """Every failure surfaces as a GeoTiffError subclass."""

    def test_not_a_tiff(self):
        with pytest.raises(InvalidFormatError, match='Invalid tiff file'):
            read_geotiff_metadata(SpyStream(b'\x89PNG\r\n\x1a\n' + b'\x00' * 32))

    def test_empty_source(self):
        with pytest.raises(InvalidFormatError):
            read_geotiff_metadata(SpyStream(b''))

    def test_big_tiff(self):
        data = b'II' + struct.pack('<HHHQ', 43, 8, 0, 16) + b'\x00' * 16
        with pytest.raises(UnsupportedVariantError):
            read_geotiff_metadata(SpyStream(data))

    def test_ifd_offset_past_end(self):
        data = b'II' + struct.pack('<HI', 42, 4096)
        with pytest.raises(SeekFailureError, match='Fail to seek pos: 4096'):
            read_geotiff_metadata(SpyStream(data))

    def test_file_truncated_inside_directory(self, mock_geotiff_basic):
        data = mock_geotiff_basic.to_bytes()
        cut = mock_geotiff_basic.ifd_offset() + 2 + 12 * 3 + 5
        with pytest.raises(TruncatedDataError):
            read_geotiff_metadata(SpyStream(data[:cut]))

    def test_value_offset_past_end(self):
        mock = MockGeoTIFF(
            omit_tags=[33922],
            extra_raw_entries=[(33922, 12, 6, struct.pack('<I', 0x7FFFFFF0))],
        )
        with pytest.raises(SeekFailureError):
            read_geotiff_metadata(mock.to_stream())

    def test_all_failures_share_a_base_class(self):
        with pytest.raises(GeoTiffError):
            read_geotiff_metadata(SpyStream(b'MM\x00+'))


class TestGeoTiffFile:
    """Test the path-based wrapper."""

    def test_valid_file(self, geotiff_path):
        geotiff = GeoTiffFile(geotiff_path)

        assert geotiff.is_valid
        assert geotiff.error == ''
        assert geotiff.name == ''
        assert geotiff.bounding_box.top_left.as_tuple() == (10.0, 50.0)
        assert geotiff.metadata.bounding_box == geotiff.bounding_box

    def test_named_file(self, tmp_path, mock_geotiff_named):
        path = mock_geotiff_named.save_to_file(tmp_path / 'EDKA.tiff')
        assert GeoTiffFile(str(path)).name == 'EDKA Aachen-Merzbrueck'

    def test_missing_file(self, tmp_path):
        geotiff = GeoTiffFile(tmp_path / 'missing.tif')

        assert not geotiff.is_valid
        assert geotiff.error
        assert geotiff.bounding_box is None
        assert geotiff.name == ''

    def test_invalid_file(self, tmp_path):
        path = tmp_path / 'broken.tif'
        path.write_bytes(b'not a tiff at all')

        geotiff = GeoTiffFile(path)

        assert not geotiff.is_valid
        assert geotiff.error == 'Invalid tiff file'

    def test_missing_tag_message(self, tmp_path):
        path = MockGeoTIFF(omit_tags=[257]).save_to_file(tmp_path / 'noheight.tif')
        assert GeoTiffFile(path).error == 'Tag 257 is not set'

    def test_corrupt_value_count_is_reported(self, tmp_path):
        """A geo tag claiming 4 billion doubles fails cleanly instead of allocating them."""
        mock = MockGeoTIFF(
            tie_point=None,
            extra_raw_entries=[(33922, 12, 0xFFFFFFFF, struct.pack('<I', 8))],
        )
        path = mock.save_to_file(tmp_path / 'corrupt_count.tif')

        geotiff = GeoTiffFile(path)

        assert not geotiff.is_valid
        assert geotiff.error.startswith('File read error: tag 33922')

    def test_mime_types(self):
        assert GeoTiffFile.MIME_TYPES == ('image/tiff',)


class TestReadCoordinates:
    """Test the convenience function."""

    def test_valid_file(self, geotiff_path):
        bbox = read_coordinates(geotiff_path)
        assert bbox.bottom_right.longitude == pytest.approx(10.99)

    def test_invalid_file_returns_none(self, tmp_path, caplog):
        path = tmp_path / 'broken.tif'
        path.write_bytes(b'II*\x00')

        assert read_coordinates(path) is None
        assert 'broken.tif' in caplog.text
