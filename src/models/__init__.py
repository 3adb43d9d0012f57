from sqlmodel import Field, Relationship, SQLModel
from .partners import Partner, PartnerBase, PartnerPromoCodeLimit
