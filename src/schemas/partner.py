from typing import List
import uuid
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime

from models.partners import Partner, PartnerPromoCodeLimit
from utils.formatting import as_utc, format_date


class SetPartnerPromoCodeLimitRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    limit: int
    end_date: datetime | None = Field(default=None, alias="endDate")

    @field_validator("end_date")
    def end_date_as_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class PartnerPromoCodeLimitResponse(BaseModel):
    id: uuid.UUID
    partner_id: uuid.UUID
    limit: int
    create_date: str | None = None
    end_date: str | None = None
    cancel_date: str | None = None

    @classmethod
    def from_limit(cls, limit: PartnerPromoCodeLimit) -> "PartnerPromoCodeLimitResponse":
        return cls(
            id=limit.id,
            partner_id=limit.partner_id,
            limit=limit.limit,
            create_date=format_date(limit.create_date),
            end_date=format_date(limit.end_date),
            cancel_date=format_date(limit.cancel_date),
        )


# Properties to return to client
class PartnerResponse(BaseModel):
    id: uuid.UUID
    name: str
    is_active: bool
    number_issued_promo_codes: int
    partner_limits: List[PartnerPromoCodeLimitResponse] = []

    @classmethod
    def from_partner(cls, partner: Partner) -> "PartnerResponse":
        return cls(
            id=partner.id,
            name=partner.name,
            is_active=partner.is_active,
            number_issued_promo_codes=partner.number_issued_promo_codes,
            partner_limits=[
                PartnerPromoCodeLimitResponse.from_limit(limit)
                for limit in partner.partner_limits
            ],
        )
