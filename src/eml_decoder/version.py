"""
Version constants for the email decoder.

The decoder version is bumped whenever decoding behaviour changes so that stored
decode results can be traced back to the code that produced them.
"""

# Package version
API_VERSION = "1.0.0"

# Decoder version (update when decoding behaviour changes)
DECODER_VERSION = "eml-decoder-1.0.0"
