# depositos/store/sql.py
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from depositos.core.errors import FetchError
from depositos.database import SessionLocal
from depositos.models.deposito import Deposito


class SqlDepositoStore:
    """Reads the depositos table through SQLAlchemy. Blocking; run it off the event loop."""

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    def select_all(self) -> list[Deposito]:
        db: Session = self.session_factory()
        try:
            return (
                db.query(Deposito)
                .order_by(Deposito.creado_en.desc(), Deposito.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            raise FetchError("Could not list depositos", cause=e) from e
        finally:
            db.close()

    def select_one(self, deposito_id: int) -> Deposito | None:
        db: Session = self.session_factory()
        try:
            return db.query(Deposito).filter(Deposito.id == deposito_id).first()
        except SQLAlchemyError as e:
            raise FetchError(f"Could not fetch deposito {deposito_id}", cause=e) from e
        finally:
            db.close()
