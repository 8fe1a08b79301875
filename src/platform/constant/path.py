from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Sample listings loaded on first start
SAMPLE_TICKETS_FILE = BASE_DIR / 'script' / 'sample_tickets.json'
