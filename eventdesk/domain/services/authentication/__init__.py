from .user_authentication_service import AdminAuthenticationService, UserAuthenticationService
from .user_registration_service import UserRegistrationService

__all__ = ["UserRegistrationService", "UserAuthenticationService", "AdminAuthenticationService"]
