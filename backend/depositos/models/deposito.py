# depositos/models/deposito.py
from sqlalchemy import Column, Integer, String, DateTime, Numeric, Text
from sqlalchemy.sql import func
from depositos.database import Base


class Deposito(Base):
    __tablename__ = "depositos"

    id = Column(Integer, primary_key=True, autoincrement=True)

    nombre = Column(String, nullable=False)   # sender display name
    monto = Column(Numeric(12, 2), nullable=False)
    moneda = Column(String, nullable=False)   # BOB / S/ / USD
    origen = Column(String, nullable=True)    # qr / número
    dominio = Column(String, nullable=True, index=True)  # yape / bcp
    mensaje = Column(Text, nullable=False, default="")
    canal = Column(String, nullable=False)
    hash = Column(String, nullable=False, index=True)  # dedup is done upstream by the ingestion service

    creado_en = Column(DateTime(timezone=True), server_default=func.now(), index=True)
