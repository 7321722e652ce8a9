"""Map Olson time zone names to POSIX TZ strings.

The lookup table is keyed on a truncated FNV-1a hash of the zone name and
was built from tzdb version 2021a. Names not in that release may collide
with a listed zone and return its rule.
"""

from __future__ import annotations

from bisect import bisect_right

__all__ = ["fnv_hash", "posix_tz_for_olson"]

_FNV_PRIME = 16777619
_OFFSET_BASIS = 2166136261
_HASH_MASK = 0x1FFFFF

_POSIX = (
    "GMT0",
    "EAT-3",
    "CET-1",
    "WAT-1",
    "CAT-2",
    "EET-2",
    "<+01>-1",
    "CET-1CEST,M3.5.0,M10.5.0/3",
    "SAST-2",
    "HST10HDT,M3.2.0,M11.1.0",
    "AKST9AKDT,M3.2.0,M11.1.0",
    "AST4",
    "<-03>3",
    "<-04>4<-03>,M10.1.0/0,M3.4.0/0",
    "EST5",
    "CST6CDT,M4.1.0,M10.5.0",
    "CST6",
    "<-04>4",
    "<-05>5",
    "MST7MDT,M3.2.0,M11.1.0",
    "CST6CDT,M3.2.0,M11.1.0",
    "MST7MDT,M4.1.0,M10.5.0",
    "MST7",
    "EST5EDT,M3.2.0,M11.1.0",
    "PST8PDT,M3.2.0,M11.1.0",
    "AST4ADT,M3.2.0,M11.1.0",
    "<-03>3<-02>,M3.5.0/-2,M10.5.0/-1",
    "CST5CDT,M3.2.0/0,M11.1.0/1",
    "<-03>3<-02>,M3.2.0,M11.1.0",
    "<-02>2",
    "<-04>4<-03>,M9.1.6/24,M4.1.6/24",
    "<-01>1<+00>,M3.5.0/0,M10.5.0/1",
    "NST3:30NDT,M3.2.0,M11.1.0",
    "<+11>-11",
    "<+07>-7",
    "<+10>-10",
    "AEST-10AEDT,M10.1.0,M4.1.0/3",
    "<+05>-5",
    "NZST-12NZDT,M9.5.0,M4.1.0/3",
    "<+03>-3",
    "<+00>0<+02>-2,M3.5.0/1,M10.5.0/3",
    "<+06>-6",
    "EET-2EEST,M3.5.4/24,M10.5.5/1",
    "<+12>-12",
    "<+04>-4",
    "EET-2EEST,M3.5.0/0,M10.5.0/0",
    "<+08>-8",
    "IST-5:30",
    "<+09>-9",
    "CST-8",
    "<+0530>-5:30",
    "EET-2EEST,M3.5.5/0,M10.5.5/0",
    "EET-2EEST,M3.5.0/3,M10.5.0/4",
    "EET-2EEST,M3.4.4/48,M10.4.4/49",
    "HKT-8",
    "WIB-7",
    "WIT-9",
    "IST-2IDT,M3.4.4/26,M10.5.0",
    "<+0430>-4:30",
    "PKT-5",
    "<+0545>-5:45",
    "WITA-8",
    "PST-8",
    "KST-9",
    "<+0630>-6:30",
    "<+0330>-3:30<+0430>,J79/24,J263/24",
    "JST-9",
    "WET0WEST,M3.5.0/1,M10.5.0",
    "<-01>1",
    "ACST-9:30ACDT,M10.1.0,M4.1.0/3",
    "AEST-10",
    "ACST-9:30",
    "<+0845>-8:45",
    "<+1030>-10:30<+11>-11,M10.1.0,M4.1.0",
    "AWST-8",
    "<-06>6<-05>,M9.1.6/22,M4.1.6/22",
    "IST-1GMT0,M10.5.0,M3.5.0/1",
    "<-10>10",
    "<-11>11",
    "<-12>12",
    "<-06>6",
    "<-07>7",
    "<-08>8",
    "<-09>9",
    "<+13>-13",
    "<+14>-14",
    "<+02>-2",
    "UTC0",
    "GMT0BST,M3.5.0/1,M10.5.0",
    "EET-2EEST,M3.5.0,M10.5.0/3",
    "MSK-3",
    "<-00>0",
    "HST10",
    "MET-1MEST,M3.5.0,M10.5.0/3",
    "<+1245>-12:45<+1345>,M9.5.0/2:45,M4.1.0/3:45",
    "<+13>-13<+14>,M9.5.0/3,M4.1.0/4",
    "<+12>-12<+13>,M11.2.0,M1.2.3/99",
    "ChST-10",
    "<-0930>9:30",
    "SST11",
    "<+11>-11<+12>,M10.1.0,M4.1.0/3",
)

# (masked name hash, index into _POSIX), sorted by hash.
_ZONES = (
    (3052, 0), (3177, 12), (5424, 77), (6596, 29), (8404, 99),
    (16206, 88), (23764, 7), (25742, 70), (28550, 52), (33699, 41),
    (34704, 88), (39895, 97), (43289, 19), (43535, 43), (45558, 17),
    (46140, 12), (47414, 54), (47637, 9), (56581, 16), (57398, 78),
    (61482, 53), (63824, 22), (75452, 23), (75610, 11), (77251, 11),
    (77667, 35), (80762, 18), (83533, 34), (91050, 11), (92809, 12),
    (93028, 23), (97827, 52), (98146, 35), (98189, 24), (100383, 45),
    (102841, 14), (104536, 48), (109229, 43), (110344, 5), (121092, 12),
    (124286, 0), (136540, 90), (138335, 11), (153557, 55), (156843, 52),
    (160344, 37), (161461, 65), (165199, 20), (166924, 33), (172026, 3),
    (186333, 7), (190474, 87), (191305, 93), (193306, 7), (195711, 97),
    (196047, 92), (200499, 49), (201322, 0), (201945, 52), (208700, 48),
    (210977, 49), (221293, 46), (222990, 38), (226052, 16), (232294, 33),
    (241713, 40), (245936, 7), (250998, 36), (251033, 23), (262983, 1),
    (267738, 34), (270075, 23), (274113, 29), (276475, 7), (277285, 84),
    (279399, 61), (281938, 19), (285314, 88), (288178, 94), (288555, 73),
    (289636, 25), (290785, 12), (296680, 62), (300125, 20), (303007, 19),
    (303455, 41), (307480, 37), (309993, 44), (310155, 12), (318936, 85),
    (320548, 35), (320951, 33), (321354, 43), (321757, 84), (322216, 36),
    (325064, 14), (329953, 15), (335595, 21), (337525, 23), (344612, 20),
    (346512, 49), (349954, 0), (350456, 1), (362265, 90), (367282, 12),
    (375886, 12), (379069, 34), (384126, 23), (385136, 3), (392475, 12),
    (395160, 67), (398176, 36), (402710, 43), (407955, 44), (419965, 16),
    (421329, 38), (427478, 10), (429402, 49), (431351, 41), (431659, 0),
    (431737, 19), (431765, 7), (445829, 0), (448725, 6), (456379, 60),
    (457803, 24), (459497, 23), (461661, 61), (461663, 15), (464955, 4),
    (467586, 67), (492113, 88), (492850, 88), (498759, 22), (501621, 12),
    (512398, 0), (513033, 12), (513738, 37), (516616, 99), (516962, 49),
    (519199, 12), (520109, 91), (525358, 41), (526318, 89), (529695, 63),
    (529783, 15), (532919, 49), (537346, 21), (540603, 1), (556011, 2),
    (562127, 11), (569631, 0), (569859, 11), (570340, 10), (573129, 44),
    (583325, 35), (586628, 11), (587591, 10), (595614, 20), (601710, 1),
    (604958, 36), (609925, 57), (611845, 7), (614930, 0), (621209, 11),
    (626509, 59), (627717, 98), (639134, 11), (639738, 33), (645690, 64),
    (648563, 0), (653866, 77), (657702, 8), (657734, 1), (661560, 46),
    (663785, 33), (671411, 12), (675419, 39), (679096, 7), (681504, 14),
    (683109, 35), (685444, 41), (685809, 23), (688338, 19), (690567, 11),
    (692618, 30), (692891, 7), (695903, 46), (696273, 7), (697408, 46),
    (702292, 21), (703920, 37), (707873, 33), (711703, 23), (711788, 41),
    (711799, 38), (712423, 4), (712988, 7), (716645, 1), (717463, 12),
    (730803, 43), (732255, 37), (736937, 41), (737384, 7), (737794, 39),
    (745820, 19), (746366, 66), (746788, 48), (749066, 5), (751039, 37),
    (765182, 41), (770053, 48), (778195, 0), (779608, 14), (790313, 74),
    (790984, 44), (794645, 52), (796867, 48), (803253, 0), (809639, 1),
    (819359, 20), (820461, 17), (820802, 3), (820968, 92), (825000, 5),
    (825021, 71), (827251, 12), (827271, 67), (827378, 33), (828715, 20),
    (833473, 23), (836835, 11), (845698, 35), (845934, 32), (853628, 5),
    (853804, 19), (857365, 39), (857780, 23), (861210, 20), (874038, 33),
    (876028, 0), (876382, 87), (877492, 25), (881218, 95), (883583, 12),
    (884797, 43), (889468, 79), (890274, 77), (890677, 78), (891082, 0),
    (893463, 67), (901474, 57), (904171, 16), (906508, 3), (911377, 52),
    (913956, 0), (920547, 10), (934775, 7), (938682, 12), (939645, 87),
    (943222, 44), (949217, 18), (951063, 17), (965414, 85), (971533, 39),
    (973205, 23), (975038, 23), (980806, 18), (981204, 90), (981929, 14),
    (985401, 24), (987190, 44), (992722, 39), (994235, 47), (997374, 11),
    (999887, 7), (1000699, 66), (1003911, 58), (1005304, 63), (1007821, 44),
    (1014376, 10), (1020394, 22), (1021091, 67), (1027658, 52), (1028352, 16),
    (1029516, 6), (1039495, 36), (1043921, 34), (1046837, 33), (1051310, 18),
    (1052350, 70), (1056374, 12), (1060994, 11), (1061054, 52), (1062928, 11),
    (1063980, 49), (1064998, 37), (1068205, 12), (1072445, 4), (1075218, 89),
    (1084768, 3), (1085336, 0), (1086799, 69), (1089024, 12), (1089427, 29),
    (1089830, 68), (1090111, 4), (1090233, 0), (1090636, 81), (1091039, 80),
    (1091442, 18), (1091845, 17), (1093054, 83), (1093457, 82), (1094261, 0),
    (1097463, 69), (1104071, 14), (1109219, 0), (1109996, 88), (1110416, 29),
    (1112624, 44), (1112853, 9), (1114572, 23), (1115282, 4), (1118334, 42),
    (1129135, 4), (1130380, 7), (1132822, 52), (1138217, 7), (1138914, 55),
    (1147945, 12), (1153584, 3), (1153793, 37), (1153929, 0), (1162475, 52),
    (1164709, 26), (1166382, 41), (1171420, 0), (1173424, 24), (1174363, 0),
    (1175981, 12), (1180279, 17), (1181500, 23), (1185412, 15), (1186379, 7),
    (1194669, 11), (1196657, 36), (1198798, 12), (1199087, 39), (1200829, 71),
    (1203125, 52), (1204987, 11), (1208470, 54), (1209491, 41), (1210986, 72),
    (1213061, 12), (1215578, 17), (1217188, 7), (1217254, 25), (1220402, 7),
    (1221000, 24), (1226645, 12), (1228331, 27), (1229346, 20), (1229493, 96),
    (1233986, 22), (1235835, 39), (1236962, 23), (1238271, 92), (1241695, 1),
    (1241995, 4), (1247746, 19), (1248438, 23), (1252962, 63), (1254429, 0),
    (1255107, 4), (1256032, 52), (1258171, 7), (1263939, 7), (1270740, 20),
    (1271679, 19), (1279015, 3), (1283805, 20), (1292061, 19), (1296096, 25),
    (1296855, 2), (1303250, 37), (1304112, 23), (1306975, 43), (1308115, 7),
    (1316301, 3), (1319533, 18), (1337063, 87), (1337990, 83), (1338312, 1),
    (1342523, 23), (1344460, 12), (1351228, 7), (1361407, 34), (1365325, 7),
    (1368647, 19), (1369907, 7), (1371911, 69), (1372423, 67), (1377039, 12),
    (1377848, 30), (1379920, 68), (1395088, 23), (1405309, 12), (1408594, 8),
    (1411942, 100), (1416215, 8), (1417058, 15), (1417591, 22), (1419250, 36),
    (1419657, 23), (1425345, 99), (1429596, 7), (1429753, 82), (1433103, 94),
    (1436375, 20), (1438897, 0), (1446971, 35), (1448104, 31), (1453728, 4),
    (1454891, 16), (1456669, 56), (1458268, 23), (1459791, 34), (1462267, 75),
    (1475245, 11), (1475507, 0), (1485189, 20), (1495084, 28), (1504159, 22),
    (1505373, 34), (1510870, 92), (1520618, 39), (1525516, 37), (1530094, 11),
    (1532373, 11), (1535924, 7), (1540528, 12), (1540992, 25), (1544434, 13),
    (1551375, 7), (1556415, 22), (1557856, 4), (1559064, 31), (1568759, 24),
    (1570889, 9), (1571112, 18), (1578023, 41), (1582037, 24), (1598908, 80),
    (1600593, 50), (1601819, 60), (1603047, 11), (1604820, 24), (1606619, 67),
    (1607248, 33), (1607370, 22), (1608844, 27), (1609737, 18), (1610087, 17),
    (1610980, 75), (1612262, 3), (1614075, 7), (1617001, 25), (1617113, 34),
    (1618683, 87), (1628048, 36), (1628566, 84), (1628682, 22), (1632083, 7),
    (1632914, 36), (1651585, 49), (1651622, 7), (1654743, 39), (1658833, 43),
    (1660911, 46), (1664872, 20), (1672213, 74), (1674610, 16), (1675410, 84),
    (1676415, 17), (1685232, 34), (1692325, 11), (1694433, 12), (1698695, 3),
    (1701688, 12), (1708083, 4), (1710030, 20), (1713796, 46), (1716755, 23),
    (1719069, 43), (1721181, 44), (1722440, 0), (1722853, 20), (1726451, 5),
    (1733838, 23), (1734054, 20), (1736591, 7), (1738905, 19), (1741247, 0),
    (1742182, 16), (1746506, 0), (1749527, 69), (1749682, 46), (1756562, 20),
    (1769420, 70), (1774546, 23), (1776375, 52), (1778258, 39), (1781122, 44),
    (1784482, 44), (1786941, 39), (1788281, 7), (1798337, 46), (1798422, 76),
    (1802468, 24), (1803694, 14), (1832626, 12), (1841914, 76), (1847810, 37),
    (1850225, 23), (1853077, 43), (1857751, 32), (1861199, 34), (1862715, 39),
    (1863529, 34), (1863787, 1), (1871852, 87), (1884018, 52), (1884747, 17),
    (1894052, 7), (1894752, 35), (1901000, 87), (1902986, 34), (1904373, 10),
    (1905218, 23), (1906241, 46), (1917776, 49), (1921672, 16), (1938433, 11),
    (1942188, 10), (1946378, 12), (1951927, 39), (1958859, 11), (1959517, 33),
    (1961627, 25), (1962619, 87), (1967285, 37), (1968744, 38), (1968987, 7),
    (1970831, 11), (1981568, 22), (1987977, 14), (2000737, 34), (2006054, 1),
    (2006408, 99), (2009827, 43), (2013536, 17), (2015747, 51), (2016109, 26),
    (2017028, 33), (2019445, 12), (2019448, 36), (2023156, 88), (2026282, 3),
    (2028182, 52), (2033048, 64), (2062776, 7), (2068042, 37), (2070769, 12),
    (2071245, 73), (2071733, 12), (2072709, 47), (2074130, 65), (2075568, 37),
    (2075971, 44), (2076374, 34), (2076777, 41), (2077180, 6), (2077265, 53),
    (2077583, 0), (2077986, 39), (2078389, 86), (2080404, 48), (2080807, 46),
    (2087116, 64), (2088323, 37), (2089285, 44), (2090334, 57), (2094940, 41),
)

_HASHES = tuple(hash_value for hash_value, _ in _ZONES)


def fnv_hash(text: str) -> int:
    """Return the 32-bit FNV-1a hash of the UTF-8 bytes of ``text``."""
    value = _OFFSET_BASIS
    for byte in text.encode("utf-8"):
        value ^= byte
        value = (value * _FNV_PRIME) & 0xFFFFFFFF
    return value


def posix_tz_for_olson(olson: str) -> str:
    """Return the POSIX TZ rule for an Olson zone name such as ``Australia/Melbourne``.

    Raises KeyError when the name's hash is not in the table.
    """
    wanted = fnv_hash(olson) & _HASH_MASK
    position = bisect_right(_HASHES, wanted) - 1
    if position >= 0 and _HASHES[position] == wanted:
        return _POSIX[_ZONES[position][1]]
    raise KeyError(olson)