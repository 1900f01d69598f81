SEAT_BASE = '/api/seat'

SEAT_MAP = f'{SEAT_BASE}/map'
SEAT_TOGGLE = f'{SEAT_BASE}/{{row}}/{{col}}/toggle'
SEAT_COMMIT = f'{SEAT_BASE}/commit'
SEAT_CLEAR = f'{SEAT_BASE}/clear'
SEAT_RESET = f'{SEAT_BASE}/reset'

HEALTH = '/health'
