"""Export domain entities for use across the application.

Importing this package registers every table on ``SQLModel.metadata``.
"""

from .admin import Admin
from .consultation import Consultation
from .contact_inquiry import ContactInquiry
from .user import Role, User

__all__ = ["User", "Role", "Admin", "Consultation", "ContactInquiry"]
