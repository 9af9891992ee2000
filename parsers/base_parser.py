#!/usr/bin/env python3
"""
base_parser.py
--------------
Abstract base class for structure parsers.
Contains the StructureParser interface that all parsers must implement.
"""

import os
from abc import ABC, abstractmethod


class StructureParser(ABC):
    """
    Abstract base class for structure parsers.
    Each parser class should implement methods to check file compatibility
    and parse text content into a molecule.
    """

    # File extensions this parser claims, lower-case with the leading dot.
    extensions = ()

    @classmethod
    @abstractmethod
    def can_parse(cls, file_path):
        """
        Determines if this parser can handle the given file

        Parameters:
            file_path (str): Path to the file to check

        Returns:
            bool: True if this parser can handle the file
        """
        pass

    @classmethod
    @abstractmethod
    def parse_text(cls, text):
        """
        Parse raw file content into a molecule

        Parameters:
            text (str): The whole file content

        Returns:
            A molecule container with `atoms` and `bonds`
        """
        pass

    @classmethod
    def parse_file(cls, file_path):
        """Read `file_path` and parse its content."""
        return cls.parse_text(cls.read_file_content(file_path))

    @classmethod
    def has_extension(cls, file_path):
        return any(file_path.lower().endswith(ext) for ext in cls.extensions)

    @staticmethod
    def read_file_content(file_path):
        """Helper method to read file content"""
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, 'r') as f:
            return f.read()
