#!/usr/bin/env python3
"""
parsers package
---------------
File format parsers for molecular structure files.
"""

from .base_parser import StructureParser
from .mol2_parser import Mol2Parser, Mol2ParseError, parse_mol2

PARSERS = [Mol2Parser]


def get_parser(file_path):
    """
    Return the first parser class that claims `file_path`.

    Raises:
        ValueError: no registered parser accepts the file.
    """
    for parser_class in PARSERS:
        if parser_class.can_parse(file_path):
            return parser_class
    raise ValueError(f"No parser available for {file_path}")


__all__ = ['StructureParser', 'Mol2Parser', 'Mol2ParseError', 'parse_mol2',
           'PARSERS', 'get_parser']
