"""Auxiliary JSON processors."""

from .comment_remover import CommentRemover
from .csv_converter import JSONToCSVConverter
from .path_helper import JSONPathHelper
from .unicode_converter import UnicodeConverter
from .xml_converter import JSONToXMLConverter

__all__ = [
    "CommentRemover",
    "JSONPathHelper",
    "JSONToCSVConverter",
    "JSONToXMLConverter",
    "UnicodeConverter",
]
