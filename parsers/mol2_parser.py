#!/usr/bin/env python3
"""
mol2_parser.py
--------------
Parser for Tripos MOL2 files.

Only the ATOM and BOND sections are interpreted; every other `@<...>` tag
ends the current section. The first data line of the MOLECULE section is
kept as the molecule name.

Atom lines:  id name x y z type [subst_id subst_name charge [highlight]]
Bond lines:  id start_atom end_atom bond_type [highlight]

A trailing highlight column counts as set whenever it is present, whatever
its text.
"""

import math
import re

from .base_parser import StructureParser
from mol2_molecule import Mol2Atom, Mol2Bond, Mol2Molecule

SECTION_RE = re.compile(r"^@<[^>]*>(\w+)$")

SECTION_ATOM = "atom"
SECTION_BOND = "bond"
SECTION_OTHER = "other"

ATOM_HIGHLIGHT_COLUMN = 9
BOND_HIGHLIGHT_COLUMN = 4


class Mol2ParseError(ValueError):
    """Raised for MOL2 content that cannot be turned into a molecule."""

    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


def _to_float(token):
    if token is None:
        return math.nan
    try:
        return float(token)
    except ValueError:
        return math.nan


def _column(tokens, index):
    return tokens[index] if index < len(tokens) else None


def section_of(line):
    """
    Return the section a tag line switches to: SECTION_ATOM, SECTION_BOND,
    or SECTION_OTHER for any other `@` line.
    """
    match = SECTION_RE.match(line)
    if match is not None:
        tag = match.group(1)
        if tag == "ATOM":
            return SECTION_ATOM
        if tag == "BOND":
            return SECTION_BOND
    return SECTION_OTHER


class Mol2Parser(StructureParser):
    """Parser for single-molecule MOL2 files"""

    extensions = ('.mol2', '.ml2')

    @classmethod
    def can_parse(cls, file_path):
        """Check the extension, otherwise sniff for a Tripos tag."""
        if cls.has_extension(file_path):
            return True
        try:
            with open(file_path, 'r') as f:
                for _ in range(50):
                    line = f.readline()
                    if not line:
                        break
                    if line.strip().startswith("@<TRIPOS>"):
                        return True
        except (OSError, UnicodeDecodeError):
            return False
        return False

    @classmethod
    def parse_text(cls, text):
        """
        Parse MOL2 text into a Mol2Molecule.

        Records are keyed by their own id; a repeated id replaces the earlier
        record but keeps its position in the output.

        Raises:
            Mol2ParseError: a bond references an atom id that has not been
                            defined before it.
        """
        atoms = {}
        bonds = {}
        name = None
        section = SECTION_OTHER
        in_molecule_header = False

        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.strip()
            if not line:
                continue

            if line.startswith("@"):
                section = section_of(line)
                in_molecule_header = line.endswith(">MOLECULE") and name is None
                continue

            if in_molecule_header:
                name = line
                in_molecule_header = False
                continue

            tokens = line.split()
            if section == SECTION_ATOM:
                atom_id = tokens[0]
                atoms[atom_id] = Mol2Atom(
                    atom_id=atom_id,
                    name=_column(tokens, 1),
                    x=_to_float(_column(tokens, 2)),
                    y=_to_float(_column(tokens, 3)),
                    z=_to_float(_column(tokens, 4)),
                    atom_type=_column(tokens, 5),
                    highlight=bool(_column(tokens, ATOM_HIGHLIGHT_COLUMN)),
                )
            elif section == SECTION_BOND:
                bond_id = tokens[0]
                start_id = _column(tokens, 1)
                end_id = _column(tokens, 2)
                for atom_id in (start_id, end_id):
                    if atom_id not in atoms:
                        raise Mol2ParseError(
                            f"bond {bond_id} references atom {atom_id} "
                            f"which is not defined before it",
                            line_number,
                        )
                bonds[bond_id] = Mol2Bond(
                    bond_id=bond_id,
                    start=atoms[start_id],
                    end=atoms[end_id],
                    bond_type=_column(tokens, 3),
                    highlight=bool(_column(tokens, BOND_HIGHLIGHT_COLUMN)),
                )

        molecule = Mol2Molecule(name=name)
        for atom in atoms.values():
            molecule.add_atom(atom)
        for bond in bonds.values():
            # An atom redefined after this bond was read replaces the old record.
            bond.start = atoms[bond.start.atom_id]
            bond.end = atoms[bond.end.atom_id]
            molecule.add_bond(bond)
        return molecule


def parse_mol2(text):
    """
    Parse MOL2 text and return `(atoms, bonds)` as lists.
    """
    molecule = Mol2Parser.parse_text(text)
    return molecule.atoms, molecule.bonds
