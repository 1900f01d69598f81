from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Local booking state directory (file store backend)
BOOKING_STATE_DIR = BASE_DIR / 'booking_state'
