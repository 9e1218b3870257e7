"""Row-level relational store.

Exposes per-table insert/update/delete/select operations. Every call runs in
its own transaction; there is no way to group calls on different tables into
one transaction, and callers must not assume one.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import PersistenceError, DuplicateLinerCodeError, ProductNotFoundError
from ..utils import generate_uuid
from .models import TABLES, Product
from .session import SessionManager

Row = Dict[str, Any]

def _is_duplicate_liner_code(error: IntegrityError) -> bool:
    """Check whether an integrity error is the product liner code unique key."""
    message = str(error.orig).lower()
    if 'products_code_liner_key' in message:
        return True
    if 'products.code_liner' in message:  # SQLite: UNIQUE constraint failed
        return True
    return 'duplicate key' in message and 'code_liner' in message

class RelationalStore:
    """Per-table row operations backed by SQLAlchemy."""
    
    def __init__(self, session_manager: SessionManager):
        """Initialize store.
        
        Args:
            session_manager: Session manager for the target database
        """
        self.session_manager = session_manager
        self.logger = logging.getLogger(self.__class__.__name__)
    
    def _model(self, table: str):
        try:
            return TABLES[table]
        except KeyError:
            raise PersistenceError(table, 'resolve', f"unknown table {table!r}")
    
    def _translate(self, table: str, operation: str, error: SQLAlchemyError,
                   rows: Sequence[Row] = ()) -> PersistenceError:
        """Map a SQLAlchemy error to the store error taxonomy."""
        if table == Product.__tablename__ and isinstance(error, IntegrityError) \
                and _is_duplicate_liner_code(error):
            code = rows[0].get('code_liner') if rows else None
            return DuplicateLinerCodeError(code, str(error.orig))
        reason = str(error.orig) if hasattr(error, 'orig') and error.orig is not None else str(error)
        return PersistenceError(table, operation, reason)
    
    def insert(self, table: str, rows: Iterable[Row]) -> List[Row]:
        """Insert rows and return them with their generated identifiers.
        
        Args:
            table: Table name
            rows: Row dictionaries keyed by model attribute names
            
        Returns:
            Inserted rows, in input order, including ``id``
            
        Raises:
            PersistenceError: If the insert fails; nothing from this call is kept
        """
        model = self._model(table)
        rows = [dict(row) for row in rows]
        if not rows:
            return []
        
        for row in rows:
            row.setdefault('id', generate_uuid())
        
        self.logger.debug(f"Inserting {len(rows)} rows into {table}")
        try:
            with self.session_manager as session:
                instances = [model(**row) for row in rows]
                session.add_all(instances)
                session.flush()
                inserted = [instance.to_dict() for instance in instances]
        except SQLAlchemyError as e:
            raise self._translate(table, 'insert', e, rows) from e
        return inserted
    
    def update(self, table: str, row_id: str, patch: Row) -> Row:
        """Update one row in place.
        
        Args:
            table: Table name
            row_id: Primary key of the row
            patch: Attributes to change
            
        Returns:
            The updated row
            
        Raises:
            ProductNotFoundError: If no row has this id
            PersistenceError: If the update fails
        """
        model = self._model(table)
        self.logger.debug(f"Updating {table} row {row_id}")
        try:
            with self.session_manager as session:
                instance = session.get(model, row_id)
                if instance is None:
                    raise ProductNotFoundError(table, row_id)
                for key, value in patch.items():
                    if key == 'id':
                        continue
                    setattr(instance, key, value)
                if hasattr(model, 'updated_at') and 'updated_at' not in patch:
                    instance.updated_at = datetime.utcnow()
                session.flush()
                updated = instance.to_dict()
        except SQLAlchemyError as e:
            raise self._translate(table, 'update', e, [patch]) from e
        return updated
    
    def delete(self, table: str, filter: Row) -> int:
        """Delete all rows matching an equality filter.
        
        Returns:
            Number of deleted rows
        """
        model = self._model(table)
        if not filter:
            raise PersistenceError(table, 'delete', "refusing to delete without a filter")
        self.logger.debug(f"Deleting from {table} where {filter}")
        try:
            with self.session_manager as session:
                count = session.query(model).filter_by(**filter).delete(synchronize_session=False)
        except SQLAlchemyError as e:
            raise self._translate(table, 'delete', e) from e
        return count
    
    def select_all(
        self,
        table: str,
        filter: Optional[Row] = None,
        order_by: Union[str, Sequence[str], None] = None
    ) -> List[Row]:
        """Select rows matching an equality filter.
        
        Args:
            table: Table name
            filter: Equality conditions on model attributes
            order_by: Attribute name(s); prefix with ``-`` for descending
            
        Returns:
            Matching rows as dictionaries
        """
        model = self._model(table)
        if isinstance(order_by, str):
            order_by = [order_by]
        try:
            with self.session_manager as session:
                query = session.query(model)
                if filter:
                    query = query.filter_by(**filter)
                for name in order_by or []:
                    column = getattr(model, name.lstrip('-'))
                    query = query.order_by(column.desc() if name.startswith('-') else column.asc())
                rows = [instance.to_dict() for instance in query.all()]
        except SQLAlchemyError as e:
            raise self._translate(table, 'select', e) from e
        return rows
    
    def get(self, table: str, row_id: str) -> Row:
        """Fetch one row by id.
        
        Raises:
            ProductNotFoundError: If no row has this id
        """
        rows = self.select_all(table, {'id': row_id})
        if not rows:
            raise ProductNotFoundError(table, row_id)
        return rows[0]
