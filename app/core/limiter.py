"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limit strings live here.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Each call may reach the remote translation backend.
TRANSLATE_LIMIT = "60/minute"

limit_translate = limiter.limit(TRANSLATE_LIMIT)
