from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from core.db import engine
from models.partners import Partner
from repositories import SqlModelRepository
from services.partner_limits import PartnerLimitManager


def get_db() -> Generator:
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db)]


def get_partner_limit_manager(session: SessionDep) -> PartnerLimitManager:
    return PartnerLimitManager(SqlModelRepository(session, Partner))


PartnerLimitManagerDep = Annotated[PartnerLimitManager, Depends(get_partner_limit_manager)]
