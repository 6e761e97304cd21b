import bcrypt
from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_password_hasher import IPasswordHasher


# bcrypt only looks at the first 72 bytes and newer releases reject longer input
BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """Concrete bcrypt implementation of IPasswordHasher"""

    @staticmethod
    def _to_bytes(plain_password: SecretStr) -> bytes:
        return plain_password.get_secret_value().encode('utf-8')[:BCRYPT_MAX_BYTES]

    @Logger.io
    def hash_password(self, *, plain_password: SecretStr) -> str:
        hashed = bcrypt.hashpw(self._to_bytes(plain_password), bcrypt.gensalt())
        return hashed.decode('utf-8')

    @Logger.io
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(self._to_bytes(plain_password), hashed_password.encode('utf-8'))
        except ValueError:
            # Malformed stored hash
            return False
