# scanconsole/core/encryption.py
"""
Field-level encryption for registry secrets
Fernet key derived from the configured master key and salt
"""

from cryptography.fernet import Fernet
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
import base64

from scanconsole.core.config import settings


class EncryptionService:
    """Encrypt sensitive database fields"""

    def __init__(self, master_key: str = None, salt: str = None):
        master_key = master_key or settings.MASTER_ENCRYPTION_KEY
        salt = salt or settings.ENCRYPTION_SALT

        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=salt.encode(),
            iterations=100000,
        )
        key = base64.urlsafe_b64encode(kdf.derive(master_key.encode()))
        self.cipher = Fernet(key)

    def encrypt(self, data: str) -> str:
        """Encrypt sensitive data"""
        return self.cipher.encrypt(data.encode()).decode()

    def decrypt(self, encrypted_data: str) -> str:
        """Decrypt sensitive data"""
        return self.cipher.decrypt(encrypted_data.encode()).decode()
