"""SQLAlchemy models for the tables read from the managed backend."""

from advisory.models.base import Base
from advisory.models.payment_status import PaymentStatusDefinition
from advisory.models.profile import Advisor, Profile, UserRoleAssignment
from advisory.models.proposal_version import ProposalVersion

__all__ = [
    "Advisor",
    "Base",
    "PaymentStatusDefinition",
    "Profile",
    "ProposalVersion",
    "UserRoleAssignment",
]
