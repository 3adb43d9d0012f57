from datetime import datetime
from typing import List, Optional
import uuid

from sqlmodel import Field, Relationship, SQLModel


class PartnerBase(SQLModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str
    is_active: bool = Field(default=True)
    number_issued_promo_codes: int = Field(default=0)


# Database model, database table inferred from class name
class Partner(PartnerBase, table=True):
    __tablename__ = "partners"

    partner_limits: List["PartnerPromoCodeLimit"] = Relationship(
        back_populates="partner",
        sa_relationship_kwargs={
            "order_by": "PartnerPromoCodeLimit.create_date",
            "lazy": "selectin",
        },
    )

    @property
    def active_limit(self) -> Optional["PartnerPromoCodeLimit"]:
        for limit in self.partner_limits:
            if limit.cancel_date is None:
                return limit
        return None


class PartnerPromoCodeLimit(SQLModel, table=True):
    __tablename__ = "partner_promo_code_limits"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    partner_id: uuid.UUID = Field(foreign_key="partners.id", index=True)
    limit: int
    create_date: datetime
    end_date: datetime | None = None
    cancel_date: datetime | None = None

    partner: Optional[Partner] = Relationship(back_populates="partner_limits")
