"""Showroom Database Module.

Wraps the PostgreSQL connection pool in a ``Database`` object that is built
once by ``create_app()`` and handed to every repository, instead of living
in module globals.
"""
import logging
import threading
from contextlib import contextmanager

import psycopg2
from psycopg2 import pool
from psycopg2.extras import RealDictCursor

logger = logging.getLogger('showroom.database')


class Database:
    """Lazily created, thread-safe psycopg2 connection pool."""

    def __init__(self, dsn, min_conn=1, max_conn=8, sslmode=None):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self.sslmode = sslmode
        self._pool = None
        self._pool_lock = threading.Lock()

    def _get_pool(self):
        """Get or create the connection pool (lazy initialization, thread-safe)."""
        if self._pool is None:
            with self._pool_lock:
                if self._pool is None:
                    kwargs = dict(
                        keepalives=1,
                        keepalives_idle=30,
                        keepalives_interval=10,
                        keepalives_count=5,
                        connect_timeout=5,
                    )
                    if self.sslmode:
                        kwargs['sslmode'] = self.sslmode
                    self._pool = pool.ThreadedConnectionPool(
                        minconn=self.min_conn,
                        maxconn=self.max_conn,
                        dsn=self.dsn,
                        **kwargs,
                    )
                    logger.info(f'Connection pool created: min={self.min_conn}, max={self.max_conn}')
        return self._pool

    def get_conn(self):
        """Get a connection from the pool.

        Validates connection health before returning. If the connection is
        stale (closed by server), it's discarded and a fresh one is obtained.
        Retries up to 3 times.
        """
        max_retries = 3
        last_error = None

        for attempt in range(max_retries):
            conn = self._get_pool().getconn()
            try:
                with conn.cursor() as cur:
                    cur.execute('SELECT 1')
                conn.rollback()
                conn.autocommit = True
                return conn
            except (psycopg2.OperationalError, psycopg2.InterfaceError, psycopg2.DatabaseError) as e:
                last_error = e
                logger.warning(f'Stale connection discarded (attempt {attempt + 1}/{max_retries}): {e}')
                self._discard(conn)

        raise psycopg2.OperationalError(f"Failed to get valid connection after {max_retries} attempts: {last_error}")

    def release(self, conn):
        """Return connection to pool, closing it if it is broken."""
        if not conn or self._pool is None:
            return
        if conn.closed:
            self._discard(conn)
            return
        try:
            conn.autocommit = False
            self._pool.putconn(conn)
        except psycopg2.Error:
            self._discard(conn)

    def _discard(self, conn):
        try:
            self._get_pool().putconn(conn, close=True)
        except psycopg2.Error as e:
            logger.warning(f'Failed to close broken connection: {e}')

    @contextmanager
    def transaction(self):
        """Context manager for atomic database transactions.

        Usage:
            with db.transaction() as conn:
                cursor = get_cursor(conn)
                cursor.execute('INSERT INTO ...')
                cursor.execute('INSERT INTO ...')
            # Auto-commits on success, auto-rollbacks on exception
        """
        conn = self.get_conn()
        try:
            conn.autocommit = False
            yield conn
            conn.commit()
            logger.debug('Transaction committed successfully')
        except Exception as e:
            conn.rollback()
            logger.warning(f'Transaction rolled back: {e}')
            raise
        finally:
            self.release(conn)

    def ping(self):
        """Return True if the database answers a trivial query."""
        try:
            conn = self.get_conn()
        except psycopg2.Error as e:
            logger.error(f'Database ping failed: {e}')
            return False
        try:
            with conn.cursor() as cur:
                cur.execute('SELECT 1')
            return True
        except psycopg2.Error as e:
            logger.error(f'Database ping failed: {e}')
            return False
        finally:
            self.release(conn)

    def close(self):
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None


def get_cursor(conn):
    """Get cursor with dict row factory."""
    return conn.cursor(cursor_factory=RealDictCursor)


def dict_from_row(row):
    """Convert a database row to a dictionary with ISO-formatted dates."""
    if row is None:
        return None
    result = dict(row)
    for key, value in result.items():
        if hasattr(value, 'isoformat'):
            result[key] = value.isoformat()
    return result


def init_db(db):
    """Create tables and indexes if the schema is not there yet."""
    with db.transaction() as conn:
        cursor = get_cursor(conn)
        cursor.execute("""
            SELECT EXISTS (
                SELECT FROM information_schema.tables
                WHERE table_schema = 'public' AND table_name = 'motorcycles'
            )
        """)
        if cursor.fetchone()['exists']:
            logger.info('Database schema already initialized, skipping init_db()')
            return

        from showroom.migrations.init_schema import create_schema
        create_schema(cursor)
        logger.info('Database schema initialized successfully')
