from .check import SmokeCheckError, check_endpoint, resolve_url
