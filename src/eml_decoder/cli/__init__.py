"""
CLI module for email decoding.

Provides the command-line demonstration tool for decoding .eml files.
"""

from eml_decoder.cli.decode import main as decode_main

__all__ = ["decode_main"]
