from typing import List
import uuid

from fastapi import APIRouter, Request, Response, status

import schemas
from api.api_v1.deps import PartnerLimitManagerDep

router = APIRouter()


@router.get("", response_model=List[schemas.PartnerResponse])
async def get_partners(manager: PartnerLimitManagerDep):
    partners = manager.get_partners()
    return [schemas.PartnerResponse.from_partner(partner) for partner in partners]


@router.get(
    "/{partner_id}/limits/{limit_id}",
    response_model=schemas.PartnerPromoCodeLimitResponse,
)
async def get_partner_limit(
    manager: PartnerLimitManagerDep, partner_id: uuid.UUID, limit_id: uuid.UUID
):
    limit = manager.get_limit(partner_id, limit_id)
    return schemas.PartnerPromoCodeLimitResponse.from_limit(limit)


@router.post(
    "/{partner_id}/limits",
    response_model=schemas.PartnerPromoCodeLimitResponse,
    status_code=status.HTTP_201_CREATED,
)
async def set_partner_promo_code_limit(
    request: Request,
    response: Response,
    manager: PartnerLimitManagerDep,
    partner_id: uuid.UUID,
    limit_request: schemas.SetPartnerPromoCodeLimitRequest,
):
    new_limit = manager.set_limit(
        partner_id, limit_request.limit, limit_request.end_date
    )
    response.headers["Location"] = str(
        request.url_for(
            "get_partner_limit", partner_id=str(partner_id), limit_id=str(new_limit.id)
        )
    )
    return schemas.PartnerPromoCodeLimitResponse.from_limit(new_limit)


@router.post(
    "/{partner_id}/canceledLimits",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def cancel_partner_promo_code_limit(
    manager: PartnerLimitManagerDep, partner_id: uuid.UUID
):
    manager.cancel_active_limit(partner_id)
