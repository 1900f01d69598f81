"""Fixed venue shape and booking limits."""

ROWS = 8
SEATS_PER_ROW = 10

MAX_SEATS_PER_BOOKING = 8
