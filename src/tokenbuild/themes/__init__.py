"""CSS output formats for flattened tokens."""

from .css_generator import FORMATTERS, FormatContext, generate_css, reference_mode_for

__all__ = ["FORMATTERS", "FormatContext", "generate_css", "reference_mode_for"]
