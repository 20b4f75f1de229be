"""patterncss -- rule-based layout CSS generation for parsed block trees."""

__version__ = "0.1.0"
