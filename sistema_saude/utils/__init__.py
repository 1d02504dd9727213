from .decorators import autenticar, require_role, get_current_user
from .cors import init_cors
from .http import get_json_body

__all__ = [
    "autenticar",
    "require_role",
    "get_current_user",
    "init_cors",
    "get_json_body",
]
