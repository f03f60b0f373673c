"""Static layout of the Arceuus library.

The library has 3 floors split into rooms. Each bookcase that can ever
hold a book has one dense index used to shelve the sequences; a handful of
bookcases in the south-west corner of the top floor are reachable under
two indices.
"""

from __future__ import annotations

from typing import NamedTuple


class WorldPoint(NamedTuple):
    """Tile coordinates of a bookcase."""

    x: int
    y: int
    plane: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.plane})"


# (name, plane)
FLOORS: tuple[tuple[str, int], ...] = (
    ("Ground", 0),
    ("Middle", 1),
    ("Top", 2),
)

# (name, min_x, max_x, min_y, max_y, plane)
ROOMS: tuple[tuple[str, int, int, int, int, int], ...] = (
    ("Northwest", 1607, 1626, 3814, 3831, 0),
    ("Northeast", 1639, 1658, 3814, 3831, 0),
    ("Southwest", 1607, 1626, 3784, 3801, 0),
    ("Northwest", 1607, 1624, 3816, 3831, 1),
    ("Northeast", 1641, 1658, 3816, 3831, 1),
    ("Center", 1625, 1640, 3800, 3815, 1),
    ("Southwest", 1607, 1624, 3784, 3799, 1),
    ("Northwest", 1607, 1624, 3816, 3831, 2),
    ("Northeast", 1641, 1658, 3816, 3831, 2),
    ("Center", 1625, 1640, 3800, 3815, 2),
    ("Southwest", 1607, 1624, 3784, 3799, 2),
)

# (x, y, plane, index) in index order
BOOKCASE_PLACEMENTS: tuple[tuple[int, int, int, int], ...] = (
    (1626, 3795, 0, 0),
    (1625, 3793, 0, 1),
    (1623, 3793, 0, 2),
    (1620, 3792, 0, 3),
    (1624, 3792, 0, 4),
    (1626, 3788, 0, 5),
    (1626, 3787, 0, 6),
    (1624, 3784, 0, 7),
    (1623, 3784, 0, 8),
    (1621, 3784, 0, 9),
    (1615, 3785, 0, 10),
    (1615, 3788, 0, 11),
    (1615, 3790, 0, 12),
    (1614, 3790, 0, 13),
    (1614, 3788, 0, 14),
    (1614, 3786, 0, 15),
    (1612, 3784, 0, 16),
    (1610, 3784, 0, 17),
    (1609, 3784, 0, 18),
    (1607, 3786, 0, 19),
    (1607, 3789, 0, 20),
    (1607, 3795, 0, 21),
    (1607, 3796, 0, 22),
    (1607, 3799, 0, 23),
    (1610, 3801, 0, 24),
    (1612, 3801, 0, 25),
    (1618, 3801, 0, 26),
    (1620, 3801, 0, 27),
    (1620, 3814, 0, 28),
    (1618, 3814, 0, 29),
    (1617, 3814, 0, 30),
    (1615, 3816, 0, 31),
    (1615, 3817, 0, 32),
    (1615, 3820, 0, 33),
    (1614, 3820, 0, 34),
    (1614, 3817, 0, 35),
    (1614, 3816, 0, 36),
    (1612, 3814, 0, 37),
    (1610, 3814, 0, 38),
    (1607, 3816, 0, 39),
    (1607, 3817, 0, 40),
    (1607, 3820, 0, 41),
    (1607, 3826, 0, 42),
    (1607, 3828, 0, 43),
    (1609, 3831, 0, 44),
    (1612, 3831, 0, 45),
    (1614, 3831, 0, 46),
    (1619, 3831, 0, 47),
    (1621, 3831, 0, 48),
    (1624, 3831, 0, 49),
    (1626, 3829, 0, 50),
    (1626, 3827, 0, 51),
    (1624, 3823, 0, 52),
    (1622, 3823, 0, 53),
    (1620, 3823, 0, 54),
    (1621, 3822, 0, 55),
    (1624, 3822, 0, 56),
    (1626, 3820, 0, 57),
    (1639, 3821, 0, 58),
    (1639, 3822, 0, 59),
    (1639, 3827, 0, 60),
    (1639, 3829, 0, 61),
    (1642, 3831, 0, 62),
    (1645, 3831, 0, 63),
    (1646, 3829, 0, 64),
    (1646, 3827, 0, 65),
    (1646, 3826, 0, 66),
    (1647, 3827, 0, 67),
    (1647, 3829, 0, 68),
    (1647, 3830, 0, 69),
    (1652, 3831, 0, 70),
    (1653, 3831, 0, 71),
    (1656, 3831, 0, 72),
    (1658, 3829, 0, 73),
    (1658, 3826, 0, 74),
    (1658, 3825, 0, 75),
    (1658, 3820, 0, 76),
    (1658, 3819, 0, 77),
    (1658, 3816, 0, 78),
    (1655, 3814, 0, 79),
    (1654, 3814, 0, 80),
    (1651, 3817, 0, 81),
    (1651, 3819, 0, 82),
    (1651, 3820, 0, 83),
    (1650, 3821, 0, 84),
    (1650, 3819, 0, 85),
    (1650, 3816, 0, 86),
    (1648, 3814, 0, 87),
    (1646, 3814, 0, 88),
    (1645, 3814, 0, 89),
    (1607, 3820, 1, 90),
    (1607, 3821, 1, 91),
    (1609, 3822, 1, 92),
    (1612, 3823, 1, 93),
    (1611, 3823, 1, 94),
    (1607, 3824, 1, 95),
    (1607, 3825, 1, 96),
    (1607, 3827, 1, 97),
    (1611, 3831, 1, 98),
    (1612, 3831, 1, 99),
    (1613, 3831, 1, 100),
    (1617, 3831, 1, 101),
    (1618, 3831, 1, 102),
    (1620, 3831, 1, 103),
    (1624, 3831, 1, 104),
    (1624, 3829, 1, 105),
    (1624, 3825, 1, 106),
    (1624, 3824, 1, 107),
    (1624, 3819, 1, 108),
    (1624, 3817, 1, 109),
    (1623, 3816, 1, 110),
    (1621, 3816, 1, 111),
    (1617, 3816, 1, 112),
    (1616, 3816, 1, 113),
    (1611, 3816, 1, 114),
    (1609, 3816, 1, 115),
    (1620, 3820, 1, 116),
    (1620, 3822, 1, 117),
    (1620, 3824, 1, 118),
    (1620, 3825, 1, 119),
    (1620, 3827, 1, 120),
    (1621, 3826, 1, 121),
    (1621, 3822, 1, 122),
    (1621, 3820, 1, 123),
    (1607, 3788, 1, 124),
    (1607, 3789, 1, 125),
    (1609, 3790, 1, 126),
    (1611, 3790, 1, 127),
    (1613, 3790, 1, 128),
    (1614, 3789, 1, 129),
    (1615, 3788, 1, 130),
    (1615, 3790, 1, 131),
    (1614, 3791, 1, 132),
    (1613, 3791, 1, 133),
    (1610, 3791, 1, 134),
    (1609, 3791, 1, 135),
    (1608, 3791, 1, 136),
    (1607, 3793, 1, 137),
    (1607, 3794, 1, 138),
    (1608, 3799, 1, 139),
    (1610, 3799, 1, 140),
    (1615, 3799, 1, 141),
    (1616, 3799, 1, 142),
    (1621, 3799, 1, 143),
    (1623, 3799, 1, 144),
    (1624, 3798, 1, 145),
    (1624, 3796, 1, 146),
    (1624, 3792, 1, 147),
    (1624, 3791, 1, 148),
    (1623, 3789, 1, 149),
    (1621, 3789, 1, 150),
    (1620, 3788, 1, 151),
    (1621, 3788, 1, 152),
    (1624, 3787, 1, 153),
    (1624, 3786, 1, 154),
    (1619, 3784, 1, 155),
    (1618, 3784, 1, 156),
    (1616, 3784, 1, 157),
    (1612, 3784, 1, 158),
    (1611, 3784, 1, 159),
    (1625, 3801, 1, 160),
    (1625, 3802, 1, 161),
    (1625, 3803, 1, 162),
    (1625, 3804, 1, 163),
    (1625, 3806, 1, 164),
    (1625, 3807, 1, 165),
    (1625, 3808, 1, 166),
    (1625, 3809, 1, 167),
    (1625, 3811, 1, 168),
    (1625, 3812, 1, 169),
    (1625, 3813, 1, 170),
    (1625, 3814, 1, 171),
    (1626, 3815, 1, 172),
    (1627, 3815, 1, 173),
    (1631, 3815, 1, 174),
    (1632, 3815, 1, 175),
    (1633, 3815, 1, 176),
    (1634, 3815, 1, 177),
    (1638, 3815, 1, 178),
    (1639, 3815, 1, 179),
    (1640, 3814, 1, 180),
    (1640, 3813, 1, 181),
    (1640, 3803, 1, 182),
    (1640, 3802, 1, 183),
    (1640, 3801, 1, 184),
    (1639, 3800, 1, 185),
    (1638, 3800, 1, 186),
    (1634, 3800, 1, 187),
    (1633, 3800, 1, 188),
    (1632, 3800, 1, 189),
    (1631, 3800, 1, 190),
    (1627, 3800, 1, 191),
    (1626, 3800, 1, 192),
    (1641, 3817, 1, 193),
    (1641, 3818, 1, 194),
    (1641, 3819, 1, 195),
    (1641, 3824, 1, 196),
    (1641, 3825, 1, 197),
    (1641, 3829, 1, 198),
    (1645, 3831, 1, 199),
    (1646, 3831, 1, 200),
    (1647, 3831, 1, 201),
    (1648, 3831, 1, 202),
    (1649, 3830, 1, 203),
    (1649, 3828, 1, 204),
    (1650, 3829, 1, 205),
    (1652, 3831, 1, 206),
    (1653, 3831, 1, 207),
    (1658, 3827, 1, 208),
    (1658, 3826, 1, 209),
    (1658, 3823, 1, 210),
    (1658, 3822, 1, 211),
    (1658, 3821, 1, 212),
    (1658, 3820, 1, 213),
    (1656, 3816, 1, 214),
    (1655, 3816, 1, 215),
    (1651, 3816, 1, 216),
    (1649, 3816, 1, 217),
    (1648, 3816, 1, 218),
    (1644, 3816, 1, 219),
    (1643, 3816, 1, 220),
    (1607, 3785, 2, 221),
    (1607, 3786, 2, 222),
    (1607, 3796, 2, 223),
    (1607, 3797, 2, 224),
    (1608, 3799, 2, 225),
    (1610, 3799, 2, 226),
    (1611, 3799, 2, 227),
    (1618, 3799, 2, 228),
    (1621, 3799, 2, 229),
    (1624, 3797, 2, 230),
    (1624, 3795, 2, 231),
    (1624, 3794, 2, 232),
    (1624, 3792, 2, 233),
    (1623, 3791, 2, 234),
    (1622, 3791, 2, 235),
    (1618, 3792, 2, 236),
    (1618, 3793, 2, 237),
    (1618, 3794, 2, 238),
    (1617, 3793, 2, 239),
    (1617, 3792, 2, 240),
    (1618, 3790, 2, 241),
    (1620, 3790, 2, 242),
    (1622, 3790, 2, 243),
    (1624, 3789, 2, 244),
    (1624, 3788, 2, 245),
    (1624, 3786, 2, 246),
    (1624, 3785, 2, 247),
    (1623, 3784, 2, 248),
    (1621, 3784, 2, 249),
    (1611, 3784, 2, 250),
    (1609, 3784, 2, 251),
    (1612, 3789, 2, 252),
    (1612, 3791, 2, 253),
    (1612, 3794, 2, 254),
    (1613, 3793, 2, 255),
    (1613, 3792, 2, 256),
    (1613, 3791, 2, 257),
    (1617, 3791, 2, 258),
    (1617, 3793, 2, 259),
    (1618, 3794, 2, 260),
    (1618, 3792, 2, 261),
    (1619, 3791, 2, 262),
    (1623, 3791, 2, 263),
    (1623, 3790, 2, 264),
    (1622, 3790, 2, 265),
    (1619, 3790, 2, 266),
    (1611, 3816, 2, 267),
    (1610, 3816, 2, 268),
    (1609, 3816, 2, 269),
    (1607, 3817, 2, 270),
    (1607, 3819, 2, 271),
    (1607, 3829, 2, 272),
    (1608, 3831, 2, 273),
    (1610, 3831, 2, 274),
    (1611, 3831, 2, 275),
    (1622, 3831, 2, 276),
    (1623, 3831, 2, 277),
    (1624, 3829, 2, 278),
    (1624, 3828, 2, 279),
    (1624, 3821, 2, 280),
    (1624, 3819, 2, 281),
    (1622, 3816, 2, 282),
    (1620, 3816, 2, 283),
    (1618, 3816, 2, 284),
    (1615, 3821, 2, 285),
    (1617, 3821, 2, 286),
    (1619, 3822, 2, 287),
    (1619, 3824, 2, 288),
    (1618, 3826, 2, 289),
    (1617, 3826, 2, 290),
    (1615, 3827, 2, 291),
    (1616, 3827, 2, 292),
    (1618, 3827, 2, 293),
    (1620, 3826, 2, 294),
    (1620, 3824, 2, 295),
    (1620, 3822, 2, 296),
    (1620, 3821, 2, 297),
    (1619, 3820, 2, 298),
    (1617, 3820, 2, 299),
    (1615, 3820, 2, 300),
    (1641, 3818, 2, 301),
    (1641, 3820, 2, 302),
    (1641, 3821, 2, 303),
    (1641, 3829, 2, 304),
    (1643, 3831, 2, 305),
    (1644, 3831, 2, 306),
    (1654, 3831, 2, 307),
    (1656, 3831, 2, 308),
    (1658, 3830, 2, 309),
    (1658, 3828, 2, 310),
    (1658, 3818, 2, 311),
    (1658, 3817, 2, 312),
    (1656, 3816, 2, 313),
    (1655, 3816, 2, 314),
    (1652, 3816, 2, 315),
    (1648, 3817, 2, 316),
    (1648, 3819, 2, 317),
    (1648, 3821, 2, 318),
    (1649, 3823, 2, 319),
    (1650, 3823, 2, 320),
    (1652, 3823, 2, 321),
    (1654, 3822, 2, 322),
    (1654, 3820, 2, 323),
    (1655, 3820, 2, 324),
    (1655, 3821, 2, 325),
    (1655, 3823, 2, 326),
    (1653, 3824, 2, 327),
    (1652, 3824, 2, 328),
    (1649, 3824, 2, 329),
    (1648, 3824, 2, 330),
    (1647, 3822, 2, 331),
    (1647, 3820, 2, 332),
    (1647, 3818, 2, 333),
    (1645, 3816, 2, 334),
    (1644, 3816, 2, 335),
    (1625, 3802, 2, 336),
    (1625, 3804, 2, 337),
    (1625, 3811, 2, 338),
    (1625, 3812, 2, 339),
    (1627, 3815, 2, 340),
    (1628, 3815, 2, 341),
    (1635, 3815, 2, 342),
    (1637, 3815, 2, 343),
    (1638, 3815, 2, 344),
    (1640, 3813, 2, 345),
    (1640, 3811, 2, 346),
    (1640, 3810, 2, 347),
    (1638, 3800, 2, 348),
    (1632, 3800, 2, 349),
    (1630, 3800, 2, 350),
    (1629, 3800, 2, 351),
    (1627, 3800, 2, 352),
)
