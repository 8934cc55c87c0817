import hashlib
import secrets

from src.app.services.token_generator import ITokenGenerator


class SecureTokenGenerator(ITokenGenerator):
    """Session ids are the hex SHA-256 digest of 32 CSPRNG bytes"""

    def new_session_id(self) -> str:
        return hashlib.sha256(secrets.token_bytes(32)).hexdigest()
