from .sct2 import Sct2Document, SECTION_SEPARATOR, airport_line, vor_line, fix_line

__all__ = ['Sct2Document', 'SECTION_SEPARATOR', 'airport_line', 'vor_line', 'fix_line']
