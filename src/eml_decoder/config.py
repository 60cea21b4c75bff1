"""
Decoder configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from pydantic_settings import BaseSettings


class DecoderSettings(BaseSettings):
    """
    Decoder configuration from environment variables.

    All settings can be overridden via environment variables prefixed with
    ``EML_DECODER_`` (e.g. ``EML_DECODER_DEFAULT_CHARSET``).
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Defaults applied when a part does not declare them
    default_charset: str = "UTF-8"
    default_transfer_encoding: str = "7bit"

    # Charset guessing for parts with no declared charset
    detect_undeclared_charset: bool = False

    # Multipart handling
    unfold_part_headers: bool = False  # Sub-part headers are parsed line by line
    max_nesting_depth: int = 32  # Deeper multiparts are decoded as leaves

    model_config = {
        "env_prefix": "EML_DECODER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Global settings instance
settings = DecoderSettings()
