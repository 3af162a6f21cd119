"""
Pytest configuration and shared fixtures for Coat of Arms Core tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest

from heraldry_fakes import build_asset_library


@pytest.fixture
def asset_library(tmp_path):
    """
    Provide an asset library with a bicolor and a solid ordinary, one
    shield shape, and one real plus one blank charge.

    Returns:
        Path to the library's base directory
    """
    return build_asset_library(tmp_path / "assets")


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (128, 128, 128, 255),  # Gray
    ]
