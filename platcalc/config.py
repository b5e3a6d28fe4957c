# platcalc/config.py

CURRENT_VERSION = "1.2.0"

# Pontos por volta no perfil de corte da curva segmentada
CURVE_STEPS = 24

# Amostragem dos arcos nos contornos (por arco)
ARC_STEPS = 90

# Diferença mínima entre diâmetros de um cone (abaixo disso é um cilindro)
CYLINDER_TOLERANCE_MM = 0.1

# Resolução mínima do DXF, suficiente para corte a plasma/tesoura
DXF_MIN_POINT_DISTANCE_MM = 0.05

# Valores iniciais dos formulários (mm / graus)
DEFAULT_INPUTS = {
    "square_to_round": {"base_width": 200.0, "base_depth": 200.0, "top_diameter": 100.0, "height": 150.0},
    "cone": {"large_dia": 200.0, "small_dia": 100.0, "height": 150.0},
    "segment_bend": {"diameter": 100.0, "radius": 150.0, "angle": 90.0, "segments": 3},
    "profile": {"legs": [(15.0, 0.0), (100.0, 100.0), (30.0, 90.0), (10.0, 135.0)]},
}

# Cores padrão de chapa (nome -> hex)
SHEET_COLORS = {
    "Black (015)": "#262626",
    "Dark grey (087)": "#4a4a4a",
    "Silver (045)": "#a3a3a3",
    "White (001)": "#f0f0f0",
    "Brick red (742)": "#8b3a3a",
    "Dark red (758)": "#5c1a1a",
    "Brown (434)": "#4e342e",
    "Green (874)": "#2e4e3e",
    "Dark blue (524)": "#1e3a5f",
    "Aluzinc": "#8e9eab",
}
