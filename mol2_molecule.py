# mol2_molecule.py

from element_colors import ElementColors


class Mol2Atom:
    """
    Represents a single atom record of a MOL2 file.
    Stores the record id, the atom name, its x, y, z coordinates,
    the dotted Tripos atom type and the highlight flag.
    """
    def __init__(self, atom_id, name, x, y, z, atom_type, highlight=False):
        self.atom_id = atom_id
        self.name = name
        self.x = x
        self.y = y
        self.z = z
        self.atom_type = atom_type
        self.highlight = highlight

    @property
    def element(self):
        return ElementColors.element(self.atom_type or "")

    @property
    def position(self):
        return (self.x, self.y, self.z)

    def __repr__(self):
        return (f"Mol2Atom({self.atom_id!r}, {self.atom_type!r}, "
                f"{self.x:.3f}, {self.y:.3f}, {self.z:.3f}, highlight={self.highlight})")


class Mol2Bond:
    """
    A bond record. `start` and `end` reference Mol2Atom objects that may be
    shared with other bonds.
    """
    def __init__(self, bond_id, start, end, bond_type=None, highlight=False):
        self.bond_id = bond_id
        self.start = start
        self.end = end
        self.bond_type = bond_type
        self.highlight = highlight

    @property
    def is_highlighted(self):
        """Flagged explicitly, or both endpoint atoms are highlighted."""
        return self.highlight or (self.start.highlight and self.end.highlight)

    def __repr__(self):
        return (f"Mol2Bond({self.bond_id!r}, {self.start.atom_id!r}-{self.end.atom_id!r}, "
                f"highlight={self.highlight})")


class Mol2Molecule:
    """
    A container for the atoms and bonds parsed from one MOL2 file.
    """
    def __init__(self, name=None):
        self.name = name
        self.atoms = []
        self.bonds = []

    def add_atom(self, atom):
        self.atoms.append(atom)

    def add_bond(self, bond):
        self.bonds.append(bond)

    def highlighted_atoms(self):
        return [atom for atom in self.atoms if atom.highlight]

    def highlighted_bonds(self):
        return [bond for bond in self.bonds if bond.is_highlighted]
