from .credential_service import CredentialService

__all__ = ["CredentialService"]
