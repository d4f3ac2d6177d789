# viz/renderer_colors.py
BG = (18, 18, 18)
WALL = (90, 90, 90)
FOOD = (220, 60, 60)
HEAD = (120, 230, 120)
BODY = (50, 170, 50)
TEXT = (235, 235, 235)
