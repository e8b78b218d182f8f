#!/usr/bin/env python3
"""Example: Annotating structures with molattr.

This example demonstrates how to attach angles, torsions, comments and a
crystallographic unit cell to a structure and read them back by kind.
"""

import math
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import molattr
from molattr import DataKind, Structure
from molattr.config import load_config_from_file


def build_ethane() -> Structure:
    """Staggered ethane with its bond graph."""
    coords = [(0.0, 0.0, 0.765), (0.0, 0.0, -0.765)]
    for z, start in ((1.165, 0), (-1.165, 60)):
        for k in range(3):
            theta = math.radians(start + 120 * k)
            coords.append((1.02 * math.cos(theta), 1.02 * math.sin(theta), z))

    structure = Structure(["C", "C"] + ["H"] * 6, coords, comment="Ethane")
    structure.add_bond(0, 1)
    for h in (2, 3, 4):
        structure.add_bond(0, h)
    for h in (5, 6, 7):
        structure.add_bond(1, h)
    return structure


def example_angles_and_torsions():
    """Example 1: Perceive angles and torsions and attach them."""
    print("=== Example 1: Angles and torsions of ethane ===")

    cfg = load_config_from_file("config.json")
    structure = molattr.annotate_structure(build_ethane(), cfg)

    angles = structure.get_first(DataKind.ANGLE)
    torsions = structure.get_first(DataKind.TORSION)
    print(f"  Angles: {angles.size}")
    for vertex, a, b in angles.fill_angle_array()[:3]:
        print(f"    {a}-{vertex}-{b}")

    for torsion in torsions.torsions:
        print(f"  Torsion around bond {torsion.get_bond_index()} "
              f"({torsion.size} dihedrals, proton rotor: {torsion.is_proton_rotor()})")
        for i in range(torsion.size):
            print(f"    {math.degrees(torsion.get_angle(i)):8.2f} deg")


def example_unit_cell():
    """Example 2: Fractional coordinates in a monoclinic cell."""
    print("\n=== Example 2: Unit cell transforms ===")

    cell = molattr.UnitCell()
    cell.set_data(5.43, 6.12, 7.80, math.pi / 2, math.radians(104.5), math.pi / 2)
    cell.space_group = "P 1 21/c 1"

    print(f"  Lattice type: {cell.get_lattice_type().value}")
    print(f"  Volume: {cell.get_cell_volume():.3f} A^3")
    for name, vec in zip(("v1", "v2", "v3"), cell.get_cell_vectors()):
        print(f"  {name} = {vec.round(4).tolist()}")

    structure = Structure(["Na"], [(12.0, -1.5, 3.0)])
    structure.attach(cell)
    structure.attach(molattr.CommentAttribute("  wrapped into the home cell  "))
    molattr.wrap_into_cell(structure)

    print(f"  Wrapped position: {[round(x, 4) for x in structure.coordinates[0]]}")
    print(f"  Comment: {structure.get_first('Comment').data!r}")


if __name__ == "__main__":
    print("molattr - Annotation Examples")
    print("=" * 70)

    example_angles_and_torsions()
    example_unit_cell()

    print("\n" + "=" * 70)
    print("Examples completed!")
