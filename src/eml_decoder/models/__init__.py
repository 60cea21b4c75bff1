# Data models for the email decoder

from .email_part import EmailPart

__all__ = ["EmailPart"]
