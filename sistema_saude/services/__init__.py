from .inventory import derive_status, apply_quantity
from .tokens import issue_token, verify_token

__all__ = ["derive_status", "apply_quantity", "issue_token", "verify_token"]
