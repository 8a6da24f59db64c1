"""Base Repository: shared connection handling for all repositories.

Provides query_one(), query_all(), execute(), execute_many() that handle
get_conn()/get_cursor()/release() and try/finally automatically.

Usage:
    class MyRepo(BaseRepository):
        def get_thing(self, id):
            return self.query_one('SELECT * FROM things WHERE id = %s', (id,))

        def save_thing(self, name):
            return self.execute(
                'INSERT INTO things (name) VALUES (%s) RETURNING *',
                (name,), returning=True
            )

        def complex_op(self):
            def _work(cursor):
                cursor.execute('UPDATE ...')
                cursor.execute('INSERT ...')
                return cursor.fetchone()
            return self.execute_many(_work)
"""

from showroom.database import get_cursor, dict_from_row


class BaseRepository:

    def __init__(self, db):
        self.db = db

    def query_one(self, sql, params=None):
        """Execute a SELECT and return a single row as dict, or None."""
        conn = self.db.get_conn()
        try:
            cursor = get_cursor(conn)
            cursor.execute(sql, params or ())
            row = cursor.fetchone()
            return dict_from_row(row) if row else None
        finally:
            self.db.release(conn)

    def query_all(self, sql, params=None):
        """Execute a SELECT and return all rows as list of dicts."""
        conn = self.db.get_conn()
        try:
            cursor = get_cursor(conn)
            cursor.execute(sql, params or ())
            return [dict_from_row(r) for r in cursor.fetchall()]
        finally:
            self.db.release(conn)

    def execute(self, sql, params=None, returning=False):
        """Execute an INSERT/UPDATE/DELETE with auto-commit.

        Returns:
            dict if returning=True, else int (rowcount)
        """
        conn = self.db.get_conn()
        try:
            cursor = get_cursor(conn)
            cursor.execute(sql, params or ())
            if returning:
                result = cursor.fetchone()
                conn.commit()
                return dict_from_row(result) if result else None
            conn.commit()
            return cursor.rowcount
        except Exception:
            conn.rollback()
            raise
        finally:
            self.db.release(conn)

    def execute_many(self, callback):
        """Execute multiple statements in a single transaction.

        Args:
            callback: Function that receives (cursor) and returns a result.
                      All statements within callback share one connection/transaction.

        Returns:
            Whatever callback returns
        """
        with self.db.transaction() as conn:
            return callback(get_cursor(conn))
