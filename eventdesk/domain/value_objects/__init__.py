from .principal import Principal, PrincipalKind, TokenClaims
from .reset_token import ResetToken
from .status import ConsultationStatus, ContactStatus, PaymentStatus, parse_status

__all__ = [
    "Principal",
    "PrincipalKind",
    "TokenClaims",
    "ResetToken",
    "ConsultationStatus",
    "ContactStatus",
    "PaymentStatus",
    "parse_status",
]
