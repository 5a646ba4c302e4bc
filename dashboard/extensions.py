from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Global limiter instance; storage and default limits come from app config
limiter = Limiter(
    key_func=get_remote_address,
    strategy="fixed-window",
)
