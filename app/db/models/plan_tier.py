"""PlanTier model: subscription plan definitions shown on the pricing page."""

from sqlalchemy import JSON, Boolean, Column, Integer, String

from app.db.base import Base


class PlanTier(Base):
    __tablename__ = "plan_tiers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(50), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(255), nullable=False, default="")

    # Pricing (pence)
    price_monthly_pence = Column(Integer, nullable=False, default=0)
    price_yearly_pence = Column(Integer, nullable=False, default=0)

    # Feature bullets: ["Basic pregnancy tracking", ...]
    features = Column(JSON, nullable=False, default=list)
    popular = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)
