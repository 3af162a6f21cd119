"""
COA_Libs - Coat of Arms Library Modules

This package contains core functionality for procedural coat of arms
generation, organized into specialized sub-packages:

- ImageEditingLib: Color remapping, resizing, compositing and watermarking
- HeraldryLib: Tincture palette, asset providers and the generation pipeline
- ExportLib: File extension handling and image encoding
"""

__version__ = "0.1.0"
