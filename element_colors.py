#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
element_colors.py

Provides a class `ElementColors` with classmethods for lookups:

  - element(atom_type)        "C.ar" -> "C"
  - color(atom_type)          hex string, fallback for unknown elements
  - rgb(atom_type)            (R, G, B) tuple
  - is_known(symbol)

Data references:
  - ELEMENT_COLORS keyed by upper-case element symbol. H, C, N and O use the
    viewer's own palette, the remaining entries follow Jmol.
"""

from config import ATOM_STYLE

# #############################################################################
# 1) Color table
# #############################################################################
ELEMENT_COLORS = {
    'H': '#ffffff',
    'HE': '#d9ffff',
    'LI': '#cc80ff',
    'BE': '#c2ff00',
    'B': '#ffb5b5',
    'C': '#a0a0a0',
    'N': '#2060ff',
    'O': '#ee2010',
    'F': '#90e050',
    'NE': '#b3e3f5',
    'NA': '#ab5cf2',
    'MG': '#8aff00',
    'AL': '#bfa6a6',
    'SI': '#f0c8a0',
    'P': '#ff8000',
    'S': '#ffff30',
    'CL': '#1ff01f',
    'AR': '#80d1e3',
    'K': '#8f40d4',
    'CA': '#3dff00',
    'TI': '#bfc2c7',
    'V': '#a6a6ab',
    'CR': '#8a99c7',
    'MN': '#9c7ac7',
    'FE': '#e06633',
    'CO': '#f090a0',
    'NI': '#50d050',
    'CU': '#c88033',
    'ZN': '#7d80b0',
    'GA': '#c28f8f',
    'GE': '#668f8f',
    'AS': '#bd80e3',
    'SE': '#ffa100',
    'BR': '#a62929',
    'KR': '#5cb8d1',
    'RB': '#702eb0',
    'SR': '#00ff00',
    'RU': '#248f8f',
    'RH': '#0a7d8c',
    'PD': '#006985',
    'AG': '#c0c0c0',
    'CD': '#ffd98f',
    'SN': '#668080',
    'SB': '#9e63b5',
    'TE': '#d47a00',
    'I': '#940094',
    'XE': '#429eb0',
    'CS': '#57178f',
    'BA': '#00c900',
    'PT': '#d0d0e0',
    'AU': '#ffd123',
    'HG': '#b8b8d0',
    'PB': '#575961',
}


# --------------------------------------------------------------------
# 2) Helpers
# --------------------------------------------------------------------
def hex_to_rgb(hex_color):
    """
    Convert a hex color string (e.g. "#FF0000") to an (R,G,B) tuple.
    """
    if not (hex_color.startswith('#') and len(hex_color) == 7):
        return (200, 200, 200)
    r = int(hex_color[1:3], 16)
    g = int(hex_color[3:5], 16)
    b = int(hex_color[5:7], 16)
    return (r, g, b)


def _element_of(atom_type: str) -> str:
    return atom_type.split('.')[0].strip().upper()


# --------------------------------------------------------------------
# 3) ElementColors class
# --------------------------------------------------------------------
class ElementColors:
    @classmethod
    def element(cls, atom_type: str) -> str:
        """Element symbol of a dotted MOL2 atom type, upper-cased."""
        return _element_of(atom_type)

    @classmethod
    def is_known(cls, symbol: str) -> bool:
        return _element_of(symbol) in ELEMENT_COLORS

    @classmethod
    def color(cls, atom_type: str) -> str:
        """
        Return the hex color for the element of `atom_type`.
        Unknown elements get ATOM_STYLE["fallback_color"].
        """
        return ELEMENT_COLORS.get(_element_of(atom_type), ATOM_STYLE["fallback_color"])

    @classmethod
    def rgb(cls, atom_type: str):
        return hex_to_rgb(cls.color(atom_type))
