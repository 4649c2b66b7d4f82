from .repositories import (
    IAdminRepository,
    IConsultationRepository,
    IContactInquiryRepository,
    IUserRepository,
)
from .services import IPasswordResetEmailService

__all__ = [
    "IUserRepository",
    "IAdminRepository",
    "IConsultationRepository",
    "IContactInquiryRepository",
    "IPasswordResetEmailService",
]
