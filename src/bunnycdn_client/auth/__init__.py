"""Authentication strategies for BunnyCDN."""
from .access_key import ACCESS_KEY_HEADER, AccessKeyAuth
from .base import AuthStrategy

__all__ = ["ACCESS_KEY_HEADER", "AccessKeyAuth", "AuthStrategy"]
