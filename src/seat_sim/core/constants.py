"""Hardware constants and default values for the seat pad simulator."""

# Sensor matrix geometry
MATRIX_SIZE = 15
MATRIX_CELLS = MATRIX_SIZE * MATRIX_SIZE  # 225 sensors

# 10-bit ADC range
MIN_PRESSURE = 0
MAX_PRESSURE = 1023

# Multiplexer addressing (74HC4067: 4 select lines, 16 channels, 15 used)
MUX_SELECT_LINES = 4
MUX_CHANNELS = 2**MUX_SELECT_LINES

# Pressure thresholds (raw ADC units)
PRESSURE_THRESHOLD_WARNING = 700
PRESSURE_THRESHOLD_CRITICAL = 900

# Minimum total pressure before a center of pressure is reported
COP_ACTIVATION_THRESHOLD = 100

# Cells above this value count as "active" in the stats bar
ACTIVE_CELL_THRESHOLD = 50

# Static pressure monitoring
STATIC_PRESSURE_TIME_LIMIT_MS = 5000  # 5 s for demo purposes (real world would be minutes)
CRITICAL_ZONE_COUNT = 5

# Scan cadence profiles (ms per tick)
SCAN_INTERVALS_MS = {
    "analysis": 200,  # slow enough to trace the multiplexer logic
    "realtime": 5,  # approximates continuous hardware scanning
}

# Brush model
BRUSH_RADIUS = 1
BRUSH_INTENSITY = 200

# Frame recorder
RECORDING_INTERVAL_MS = 200  # 5 frames per second
DEFAULT_RECORDING_LABEL = "Neutral_Sit"

# Posture analyzer
POSTURE_NOISE_FLOOR = 20
POSTURE_MIN_ACTIVE_CELLS = 5
POSTURE_MIN_TOTAL_PRESSURE = 100
LATERAL_LEFT_RATIO = 0.55
LATERAL_RIGHT_RATIO = 0.45
SAGITTAL_FORWARD_RATIO = 0.60
SAGITTAL_RECLINED_RATIO = 0.30
PEAK_REPOSITION_THRESHOLD = 850
CONCENTRATED_MAX_CELLS = 20
CONCENTRATED_MIN_TOTAL = 2000

SUPPORTED_LANGUAGES = ("en", "es", "zh")
