"""
Embedded element list: (number, symbol, name, atomic mass, category).

Categories are spelled the way the Bowserinator PeriodicTableJSON
document spells them, so the embedded and remote sources normalize
identically. Masses of elements without stable isotopes are the mass
number of the longest-lived isotope.
"""

PERIODIC_TABLE = [
    (1, "H", "Hydrogen", 1.008, "diatomic nonmetal"),
    (2, "He", "Helium", 4.0026022, "noble gas"),
    (3, "Li", "Lithium", 6.94, "alkali metal"),
    (4, "Be", "Beryllium", 9.0121831, "alkaline earth metal"),
    (5, "B", "Boron", 10.81, "metalloid"),
    (6, "C", "Carbon", 12.011, "polyatomic nonmetal"),
    (7, "N", "Nitrogen", 14.007, "diatomic nonmetal"),
    (8, "O", "Oxygen", 15.999, "diatomic nonmetal"),
    (9, "F", "Fluorine", 18.998403163, "diatomic nonmetal"),
    (10, "Ne", "Neon", 20.1797, "noble gas"),
    (11, "Na", "Sodium", 22.98976928, "alkali metal"),
    (12, "Mg", "Magnesium", 24.305, "alkaline earth metal"),
    (13, "Al", "Aluminium", 26.9815385, "post-transition metal"),
    (14, "Si", "Silicon", 28.085, "metalloid"),
    (15, "P", "Phosphorus", 30.973761998, "polyatomic nonmetal"),
    (16, "S", "Sulfur", 32.06, "polyatomic nonmetal"),
    (17, "Cl", "Chlorine", 35.45, "diatomic nonmetal"),
    (18, "Ar", "Argon", 39.948, "noble gas"),
    (19, "K", "Potassium", 39.0983, "alkali metal"),
    (20, "Ca", "Calcium", 40.078, "alkaline earth metal"),
    (21, "Sc", "Scandium", 44.955908, "transition metal"),
    (22, "Ti", "Titanium", 47.867, "transition metal"),
    (23, "V", "Vanadium", 50.9415, "transition metal"),
    (24, "Cr", "Chromium", 51.9961, "transition metal"),
    (25, "Mn", "Manganese", 54.938044, "transition metal"),
    (26, "Fe", "Iron", 55.845, "transition metal"),
    (27, "Co", "Cobalt", 58.933194, "transition metal"),
    (28, "Ni", "Nickel", 58.6934, "transition metal"),
    (29, "Cu", "Copper", 63.546, "transition metal"),
    (30, "Zn", "Zinc", 65.38, "transition metal"),
    (31, "Ga", "Gallium", 69.723, "post-transition metal"),
    (32, "Ge", "Germanium", 72.630, "metalloid"),
    (33, "As", "Arsenic", 74.921595, "metalloid"),
    (34, "Se", "Selenium", 78.971, "polyatomic nonmetal"),
    (35, "Br", "Bromine", 79.904, "diatomic nonmetal"),
    (36, "Kr", "Krypton", 83.798, "noble gas"),
    (37, "Rb", "Rubidium", 85.4678, "alkali metal"),
    (38, "Sr", "Strontium", 87.62, "alkaline earth metal"),
    (39, "Y", "Yttrium", 88.90584, "transition metal"),
    (40, "Zr", "Zirconium", 91.224, "transition metal"),
    (41, "Nb", "Niobium", 92.90637, "transition metal"),
    (42, "Mo", "Molybdenum", 95.95, "transition metal"),
    (43, "Tc", "Technetium", 98, "transition metal"),
    (44, "Ru", "Ruthenium", 101.07, "transition metal"),
    (45, "Rh", "Rhodium", 102.90550, "transition metal"),
    (46, "Pd", "Palladium", 106.42, "transition metal"),
    (47, "Ag", "Silver", 107.8682, "transition metal"),
    (48, "Cd", "Cadmium", 112.414, "transition metal"),
    (49, "In", "Indium", 114.818, "post-transition metal"),
    (50, "Sn", "Tin", 118.710, "post-transition metal"),
    (51, "Sb", "Antimony", 121.760, "metalloid"),
    (52, "Te", "Tellurium", 127.60, "metalloid"),
    (53, "I", "Iodine", 126.90447, "diatomic nonmetal"),
    (54, "Xe", "Xenon", 131.293, "noble gas"),
    (55, "Cs", "Cesium", 132.90545196, "alkali metal"),
    (56, "Ba", "Barium", 137.327, "alkaline earth metal"),
    (57, "La", "Lanthanum", 138.90547, "lanthanide"),
    (58, "Ce", "Cerium", 140.116, "lanthanide"),
    (59, "Pr", "Praseodymium", 140.90766, "lanthanide"),
    (60, "Nd", "Neodymium", 144.242, "lanthanide"),
    (61, "Pm", "Promethium", 145, "lanthanide"),
    (62, "Sm", "Samarium", 150.36, "lanthanide"),
    (63, "Eu", "Europium", 151.964, "lanthanide"),
    (64, "Gd", "Gadolinium", 157.25, "lanthanide"),
    (65, "Tb", "Terbium", 158.92535, "lanthanide"),
    (66, "Dy", "Dysprosium", 162.500, "lanthanide"),
    (67, "Ho", "Holmium", 164.93033, "lanthanide"),
    (68, "Er", "Erbium", 167.259, "lanthanide"),
    (69, "Tm", "Thulium", 168.93422, "lanthanide"),
    (70, "Yb", "Ytterbium", 173.045, "lanthanide"),
    (71, "Lu", "Lutetium", 174.9668, "lanthanide"),
    (72, "Hf", "Hafnium", 178.49, "transition metal"),
    (73, "Ta", "Tantalum", 180.94788, "transition metal"),
    (74, "W", "Tungsten", 183.84, "transition metal"),
    (75, "Re", "Rhenium", 186.207, "transition metal"),
    (76, "Os", "Osmium", 190.23, "transition metal"),
    (77, "Ir", "Iridium", 192.217, "transition metal"),
    (78, "Pt", "Platinum", 195.084, "transition metal"),
    (79, "Au", "Gold", 196.966569, "transition metal"),
    (80, "Hg", "Mercury", 200.592, "transition metal"),
    (81, "Tl", "Thallium", 204.38, "post-transition metal"),
    (82, "Pb", "Lead", 207.2, "post-transition metal"),
    (83, "Bi", "Bismuth", 208.98040, "post-transition metal"),
    (84, "Po", "Polonium", 209, "post-transition metal"),
    (85, "At", "Astatine", 210, "metalloid"),
    (86, "Rn", "Radon", 222, "noble gas"),
    (87, "Fr", "Francium", 223, "alkali metal"),
    (88, "Ra", "Radium", 226, "alkaline earth metal"),
    (89, "Ac", "Actinium", 227, "actinide"),
    (90, "Th", "Thorium", 232.0377, "actinide"),
    (91, "Pa", "Protactinium", 231.03588, "actinide"),
    (92, "U", "Uranium", 238.02891, "actinide"),
    (93, "Np", "Neptunium", 237, "actinide"),
    (94, "Pu", "Plutonium", 244, "actinide"),
    (95, "Am", "Americium", 243, "actinide"),
    (96, "Cm", "Curium", 247, "actinide"),
    (97, "Bk", "Berkelium", 247, "actinide"),
    (98, "Cf", "Californium", 251, "actinide"),
    (99, "Es", "Einsteinium", 252, "actinide"),
    (100, "Fm", "Fermium", 257, "actinide"),
    (101, "Md", "Mendelevium", 258, "actinide"),
    (102, "No", "Nobelium", 259, "actinide"),
    (103, "Lr", "Lawrencium", 266, "actinide"),
    (104, "Rf", "Rutherfordium", 267, "transition metal"),
    (105, "Db", "Dubnium", 268, "transition metal"),
    (106, "Sg", "Seaborgium", 269, "transition metal"),
    (107, "Bh", "Bohrium", 270, "transition metal"),
    (108, "Hs", "Hassium", 269, "transition metal"),
    (109, "Mt", "Meitnerium", 278, "unknown, probably transition metal"),
    (110, "Ds", "Darmstadtium", 281, "unknown, probably transition metal"),
    (111, "Rg", "Roentgenium", 282, "unknown, probably transition metal"),
    (112, "Cn", "Copernicium", 285, "transition metal"),
    (113, "Nh", "Nihonium", 286, "unknown, probably transition metal"),
    (114, "Fl", "Flerovium", 289, "post-transition metal"),
    (115, "Mc", "Moscovium", 289, "unknown, probably post-transition metal"),
    (116, "Lv", "Livermorium", 293, "unknown, probably post-transition metal"),
    (117, "Ts", "Tennessine", 294, "unknown, probably metalloid"),
    (118, "Og", "Oganesson", 294, "unknown, predicted to be noble gas"),
]

FIELDS = ("number", "symbol", "name", "atomic_mass", "category")


def records():
    """The embedded table as source-style dicts."""
    return [dict(zip(FIELDS, row)) for row in PERIODIC_TABLE]
