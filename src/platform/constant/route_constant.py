# API Route Constants

# Base API
API_BASE = '/api'

# User routes
USER_BASE = f'{API_BASE}/user'
USER_CREATE = USER_BASE
USER_LOGIN = f'{USER_BASE}/login'
USER_LOGOUT = f'{USER_BASE}/logout'
USER_ME = USER_BASE
USER_PROFILE = f'{USER_BASE}/profile'

# Schedule routes
SCHEDULE_BASE = f'{API_BASE}/schedule'
SCHEDULE_CREATE = SCHEDULE_BASE
SCHEDULE_LIST = SCHEDULE_BASE
SCHEDULE_GET = f'{SCHEDULE_BASE}/{{schedule_id}}'
SCHEDULE_DELETE = f'{SCHEDULE_BASE}/{{schedule_id}}'
SCHEDULE_SEAT_MAP = (
    f'{SCHEDULE_BASE}/{{schedule_id}}/classes/{{travel_class}}/carriages/{{carriage}}/seats'
)

# Booking routes
BOOKING_BASE = f'{API_BASE}/booking'
BOOKING_CREATE = BOOKING_BASE

# Health
HEALTH = '/health'
