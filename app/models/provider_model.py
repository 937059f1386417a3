# app/models/provider_model.py
from sqlalchemy import Column, Integer, String
from app.core.database import Base

class Provider(Base):
    __tablename__ = "providers"

    # never projected by the directory queries
    provider_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    provider_specialty = Column(String(100))
