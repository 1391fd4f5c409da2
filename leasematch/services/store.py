"""
Record store: the generic fetch / update client every route and the scoring
pipeline go through.

Reads return plain dicts (no detached ORM instances leak out of a session).
Missing records raise NotFound; failed writes are rolled back and raised as
StoreError.
"""
import logging
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError

from leasematch import database
from leasematch.scoring.errors import NotFound, StoreError

logger = logging.getLogger('services.store')


class RecordStore:

    def __init__(self, session_factory=None):
        self._session_factory = session_factory

    def _session(self):
        if self._session_factory is not None:
            return self._session_factory()
        return database.get_session()

    # ── Reads ────────────────────────────────────────────────────────────

    def fetch_one(self, model, record_id) -> Dict[str, Any]:
        """Exactly one record by primary key."""
        session = self._session()
        try:
            row = session.get(model, record_id)
            if row is None:
                raise NotFound(model.__tablename__, record_id)
            return row.to_dict()
        finally:
            session.close()

    def fetch_first(self, model) -> Dict[str, Any]:
        """First row of the collection (by primary key), no filter."""
        session = self._session()
        try:
            pk = model.__mapper__.primary_key[0]
            row = session.query(model).order_by(pk).first()
            if row is None:
                raise NotFound(model.__tablename__)
            return row.to_dict()
        finally:
            session.close()

    def list_records(self, model, order_by=None) -> List[Dict[str, Any]]:
        session = self._session()
        try:
            query = session.query(model)
            if order_by is not None:
                query = query.order_by(*order_by) if isinstance(order_by, (list, tuple)) else query.order_by(order_by)
            return [row.to_dict() for row in query.all()]
        finally:
            session.close()

    # ── Writes ───────────────────────────────────────────────────────────

    def insert(self, model, fields: Dict[str, Any]) -> Dict[str, Any]:
        session = self._session()
        try:
            row = model(**fields)
            session.add(row)
            session.commit()
            session.refresh(row)
            return row.to_dict()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Insert into %s failed: %s", model.__tablename__, e)
            raise StoreError(f"Could not insert into '{model.__tablename__}'", detail=str(e))
        finally:
            session.close()

    def upsert(self, model, key: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Insert, or update the row whose `key` column equals fields[key]."""
        session = self._session()
        try:
            row = session.query(model).filter_by(**{key: fields[key]}).first()
            if row is None:
                row = model(**fields)
                session.add(row)
            else:
                for name, value in fields.items():
                    setattr(row, name, value)
            session.commit()
            session.refresh(row)
            return row.to_dict()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Upsert into %s failed: %s", model.__tablename__, e)
            raise StoreError(f"Could not save '{model.__tablename__}'", detail=str(e))
        finally:
            session.close()

    def update_fields(self, model, record_id, fields: Dict[str, Any]) -> None:
        """
        Set `fields` on one record in a single UPDATE statement.

        Either every field changes or none does. Zero matched rows (e.g. the
        record was deleted since it was read) is a StoreError.
        """
        session = self._session()
        try:
            pk = model.__mapper__.primary_key[0]
            matched = (
                session.query(model)
                .filter(pk == record_id)
                .update(fields, synchronize_session='fetch')
            )
            if matched == 0:
                session.rollback()
                raise StoreError(f"Record '{record_id}' not found in '{model.__tablename__}'")
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Update of %s %s failed: %s", model.__tablename__, record_id, e)
            raise StoreError(f"Could not update '{model.__tablename__}'", detail=str(e))
        finally:
            session.close()

    def delete(self, model, record_id) -> None:
        session = self._session()
        try:
            row = session.get(model, record_id)
            if row is None:
                raise NotFound(model.__tablename__, record_id)
            session.delete(row)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(f"Could not delete from '{model.__tablename__}'", detail=str(e))
        finally:
            session.close()

    def delete_all(self, model) -> int:
        session = self._session()
        try:
            deleted = session.query(model).delete(synchronize_session=False)
            session.commit()
            return deleted
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(f"Could not delete from '{model.__tablename__}'", detail=str(e))
        finally:
            session.close()
