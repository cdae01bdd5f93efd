"""Payment status definition model module."""

from __future__ import annotations

from sqlalchemy import JSON, Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from advisory.core.enums import SignatureType
from advisory.models.base import AuditMixin, Base, new_id


class PaymentStatusDefinition(Base, AuditMixin):
    __tablename__ = "payment_status_definitions"
    __table_args__ = (Index("idx_payment_status_active_order", "is_active", "display_order"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    code: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    name_en: Mapped[str | None] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text)
    color: Mapped[str] = mapped_column(String(16), default="#6B7280", nullable=False)
    icon: Mapped[str | None] = mapped_column(String(64))
    is_system: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_terminal: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    notify_on_enter: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    notify_roles: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    email_template_key: Mapped[str | None] = mapped_column(String(128))
    requires_signature: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    signature_type: Mapped[str] = mapped_column(String(16), default=SignatureType.NONE.value, nullable=False)
