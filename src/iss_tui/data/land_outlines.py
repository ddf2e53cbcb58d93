"""Coarse land mass outlines (lat, lon), good enough for a terminal-sized map.

Rings are hand-simplified from Natural Earth coastlines. Inland seas are
ignored and polygons crossing the antimeridian are clipped at +/-180.
"""

LAND_MASSES = [
    # North America
    [(71, -156), (70, -141), (69, -135), (70, -128), (68, -115), (68, -100), (72, -95), (67, -87),
     (62, -94), (58, -93), (55, -82), (52, -79), (58, -77), (61, -78), (62, -73), (58, -68),
     (60, -64), (55, -60), (52, -56), (47, -53), (47, -60), (44, -66), (42, -70), (41, -72),
     (39, -74), (35, -76), (32, -80), (27, -80), (25, -80.5), (29, -83), (30, -85), (30, -89),
     (29, -94), (26, -97), (22, -97.8), (19, -96), (18, -94), (21, -90), (21, -87), (16, -88),
     (15, -84), (11, -83.7), (9, -79), (8, -77.5), (7, -78), (8, -80), (9, -85), (12, -87),
     (15, -92), (16, -95), (20, -105), (23, -106), (28, -112), (31, -114), (24, -110), (23, -110),
     (28, -115), (32, -117), (35, -121), (38, -123), (42, -124), (46, -124), (48, -125), (50, -128),
     (54, -131), (58, -136), (60, -141), (60, -147), (59, -152), (57, -158), (55, -163), (58, -158),
     (59, -162), (61, -165), (64, -166), (66, -168), (68, -166)],
    # Greenland
    [(83, -35), (82, -20), (78, -18), (72, -22), (70, -22), (65, -37), (60, -43), (63, -50),
     (68, -53), (72, -55), (76, -66), (78, -72), (80, -67), (82, -60)],
    # Baffin Island
    [(73.5, -80), (72, -72), (68, -66), (66, -62), (63, -65), (62.5, -70), (65, -73), (66, -73),
     (70, -78), (70.5, -86)],
    # Victoria Island
    [(73, -105), (72, -118), (69, -118), (68.5, -108), (69.5, -101)],
    # Ellesmere Island
    [(83, -75), (81, -62), (78, -74), (76.5, -80), (77, -90), (80, -95)],
    # Cuba
    [(23, -84), (23.2, -80.5), (22, -77.5), (20.2, -74.2), (19.8, -77.5), (21.8, -81), (21.8, -84.5)],
    # Hispaniola
    [(19.8, -72.8), (19.8, -69.9), (18.4, -68.4), (18.2, -71.4), (18.5, -74.4)],
    # South America
    [(12, -72), (11, -64), (10, -62), (8, -60), (6, -56), (4, -52), (0, -50), (-2, -44),
     (-5, -36), (-8, -35), (-13, -38.5), (-18, -39.5), (-23, -42), (-25, -48), (-29, -49), (-34, -53),
     (-35, -57), (-39, -62), (-41, -63), (-43, -65), (-47, -67), (-51, -69), (-55, -68), (-54, -72),
     (-50, -75), (-45, -74), (-40, -73.5), (-35, -72.5), (-30, -71.5), (-25, -70.5), (-18, -70.3),
     (-14, -76), (-6, -81), (-3, -80.5), (1, -80), (4, -77.5), (8, -77), (9, -76), (11, -75)],
    # Africa
    [(37, 10), (33, 11), (32, 20), (31, 25), (31, 32), (27, 34), (22, 37), (15, 39.5),
     (12, 43), (11, 51), (5, 48), (0, 42.5), (-5, 39), (-10, 40), (-15, 40.5), (-20, 35),
     (-25, 33), (-30, 31), (-34, 26), (-34.8, 20), (-34, 18.5), (-29, 16.5), (-22, 14), (-17, 11.8),
     (-12, 13.7), (-6, 12), (-1, 9), (4, 9.5), (4.5, 6), (6, 1), (5, -4), (4.5, -7.5),
     (7, -12), (10, -15), (15, -17.5), (21, -17), (26, -14.5), (28, -13), (31, -10), (34, -7),
     (35.8, -6), (36, 0)],
    # Madagascar
    [(-12, 49.3), (-16, 50.5), (-25, 47), (-25, 44), (-21, 43.5), (-16, 44.5)],
    # Eurasia
    [(36, -6), (37, -9), (43, -9), (43.5, -2), (46, -1.5), (48, -4.5), (49, 0), (51, 2),
     (53, 5), (54, 8.5), (57, 8.5), (57, 10.5), (54.5, 10), (54.5, 14), (55, 21), (59, 23.5),
     (60, 30), (64, 35), (68, 40), (68, 44), (68, 55), (70, 60), (72, 68), (73, 80),
     (76, 88), (77, 105), (74, 112), (73, 127), (72, 140), (71, 152), (70, 160), (69, 170),
     (66, 180), (62, 178), (60, 170), (60, 163), (57, 163), (51, 156.5), (56, 155.5), (59, 155),
     (62, 160), (61, 152), (59, 143), (54, 137), (53, 141), (48, 140), (43, 135), (42, 130),
     (38, 129.5), (35, 129), (34.5, 126.5), (37.5, 126.5), (39, 125), (40, 124), (39, 121.5), (41, 121),
     (40, 119), (38, 118), (37, 120.5), (35, 119.5), (32, 121.5), (30, 122), (27, 120.5), (23, 117),
     (22, 114), (21.5, 110), (20, 110), (21.5, 108), (19, 105.7), (16.5, 107.5), (12.5, 109.3), (10.5, 107),
     (8.6, 104.8), (10.5, 104.5), (13.5, 100.5), (12.5, 100), (8, 100.5), (6, 101.5), (2, 104), (1.3, 103.5),
     (4, 100.5), (7, 100), (8, 98.3), (12, 98.6), (16.5, 97.5), (16, 95), (19, 94), (22, 92),
     (22, 90), (21.5, 88), (20, 86.5), (16, 81.5), (13, 80.2), (10, 79.8), (8, 77.5), (10, 76),
     (15, 74), (20, 72.8), (22, 69), (24.5, 67.5), (25, 61.5), (26.5, 57), (24, 56.4), (22.5, 59.8),
     (18, 56), (16.5, 52), (13, 45), (12.6, 43.3), (15, 42.7), (20, 40), (24, 38), (28, 34.8),
     (29.5, 34.9), (31.5, 34.3), (33, 35), (35.5, 35.8), (36.5, 35), (36.7, 30.5), (36.5, 28), (39, 26.3),
     (40.5, 26.2), (40.5, 23), (38, 24), (36.5, 22.5), (38.5, 21), (40, 20), (42, 19), (44, 15.5),
     (45.7, 13.6), (44, 12.4), (42, 14.5), (40.5, 18), (40, 18.5), (39.5, 16.5), (38, 15.7), (40, 15.5),
     (41.5, 13), (42.5, 11), (44, 9.5), (43.5, 7.5), (43, 5), (43.5, 3.5), (42, 3.2), (41, 1),
     (39.5, -0.3), (38, -0.5), (36.7, -2), (36.7, -4.5)],
    # Scandinavia and Finland
    [(56, 12.5), (58, 11.5), (59, 10), (58, 6), (60, 5), (62, 5), (64, 9), (67, 13),
     (70, 19), (71, 26), (70, 31), (69, 33), (67, 41), (66, 33), (64, 35), (61, 30),
     (60, 25), (61, 21.5), (63.5, 22), (65.7, 24.5), (65, 21.5), (62, 17.5), (60, 19), (59, 18),
     (57, 16.5), (56, 16)],
    # Great Britain
    [(50, -5.5), (51.5, -3), (51, 1.3), (53, 1.7), (55, -1.5), (57.5, -1.8), (58.6, -3), (58.5, -5),
     (56, -6), (54.5, -3.5), (53.3, -4.5), (52, -4.8), (51.5, -5)],
    # Ireland
    [(51.5, -10), (54, -10), (55.3, -7.5), (54, -6), (52, -6.2)],
    # Iceland
    [(63.5, -22), (66.5, -23), (66.5, -15), (65, -13.5), (63.5, -18)],
    # Svalbard
    [(80, 10), (80, 27), (77, 23), (76.5, 16), (78, 13)],
    # Novaya Zemlya
    [(76.5, 68), (75, 55), (71, 52), (70.5, 57), (73, 55)],
    # Sakhalin
    [(54.3, 142.5), (51, 143.5), (46, 142), (46.5, 141.9), (51, 142)],
    # Japan
    [(31, 130.5), (33.5, 129.5), (35.5, 133), (37, 137), (41, 140), (45.5, 141.8), (44, 145.3), (42.5, 143.5),
     (41.5, 141.3), (40, 142), (37, 141), (35, 140.5), (34.5, 138.5), (33.5, 135.5), (32.5, 132)],
    # Philippines
    [(18.5, 121), (14, 124), (10, 126), (6, 126), (7, 122), (11, 119.5), (15, 120)],
    # Sri Lanka
    [(9.8, 80), (6, 81.8), (6.5, 79.9)],
    # Borneo
    [(7, 117), (4, 118), (1, 119), (-3.5, 116), (-4, 111), (-3, 110), (1, 109), (2, 111), (4.5, 114)],
    # Sumatra
    [(5.5, 95.3), (4, 98), (1, 104), (-3.5, 106), (-6, 105.7), (-3.5, 102), (0, 99), (2.5, 96)],
    # Java
    [(-6, 106), (-6.8, 111), (-7.7, 114.5), (-8.7, 114.5), (-8, 110), (-7, 106)],
    # Sulawesi
    [(1.5, 125), (0.5, 120), (-3, 119), (-5.5, 119.5), (-5.5, 122), (-3, 122), (-1, 121.5), (0.5, 123.5)],
    # New Guinea
    [(-0.8, 131), (-2.5, 134), (-2.5, 138), (-3, 141), (-5.5, 146), (-8, 147.5), (-10.5, 150.5), (-9, 146.5),
     (-8, 143.5), (-9, 141), (-7.5, 138.5), (-4.5, 135), (-4, 132)],
    # Australia
    [(-11, 136), (-12, 131), (-14.5, 129.5), (-15, 125), (-17.5, 122), (-20, 118), (-22, 114), (-26, 113.5),
     (-31, 115), (-34.5, 115), (-35, 118), (-33.8, 123.5), (-31.6, 131), (-32.5, 134), (-35, 135.8), (-34.5, 138),
     (-37.5, 140), (-38.5, 145), (-37.8, 149.9), (-33, 151.8), (-28.5, 153.6), (-25, 153), (-22, 149.5), (-19, 146.3),
     (-15, 145.3), (-10.7, 142.5), (-14, 141.6), (-17.5, 140.8), (-16, 137), (-12, 136.8)],
    # Tasmania
    [(-40.8, 144.7), (-40.9, 148.3), (-43.2, 148), (-43.5, 146)],
    # New Zealand, North Island
    [(-34.5, 172.7), (-37.5, 176), (-37.7, 178.5), (-39.5, 177.8), (-41.5, 175.3), (-39.5, 174), (-37, 174.5)],
    # New Zealand, South Island
    [(-40.5, 172.7), (-41.7, 174.2), (-44, 173), (-46.5, 169), (-46.2, 166.5), (-44, 168.2)],
    # Antarctica
    [(-78, -180), (-75, -140), (-73, -100), (-72, -75), (-65, -64), (-63.5, -58), (-69, -62), (-75, -60),
     (-78, -45), (-74, -20), (-70, 0), (-69, 30), (-67, 50), (-67, 80), (-66, 100), (-66, 120),
     (-67, 140), (-70, 160), (-72, 170), (-78, 180), (-90, 180), (-90, -180)],
]
