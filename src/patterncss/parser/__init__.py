"""Block tree loading."""

from patterncss.errors import BlockTreeError
from patterncss.parser.loader import load_blocks, load_blocks_file

__all__ = ["BlockTreeError", "load_blocks", "load_blocks_file"]
