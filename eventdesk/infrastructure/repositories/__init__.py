from .consultation_repository import ConsultationRepository, ContactInquiryRepository
from .memory import (
    InMemoryAdminRepository,
    InMemoryConsultationRepository,
    InMemoryContactInquiryRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from .user_repository import AdminRepository, UserRepository

__all__ = [
    "UserRepository",
    "AdminRepository",
    "ConsultationRepository",
    "ContactInquiryRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryAdminRepository",
    "InMemoryConsultationRepository",
    "InMemoryContactInquiryRepository",
]
