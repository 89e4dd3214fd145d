"""Flask extensions initialization."""
from flask_wtf.csrf import CSRFProtect

# CSRF protection (JSON API blueprint is exempted in the factory)
csrf = CSRFProtect()
