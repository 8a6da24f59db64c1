"""Database schema initialization.

Contains all CREATE TABLE and CREATE INDEX statements for the showroom
database. Called by database.init_db() at startup.
"""


def create_schema(cursor):
    """Create all database tables and indexes.

    Args:
        cursor: Database cursor from get_cursor(conn), inside a transaction
    """
    cursor.execute('''
        CREATE TABLE IF NOT EXISTS motorcycles (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            price TEXT,
            description TEXT,
            year INTEGER,
            mileage TEXT,
            location TEXT,
            featured BOOLEAN DEFAULT TRUE,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS motorcycle_images (
            id SERIAL PRIMARY KEY,
            motorcycle_id INTEGER NOT NULL REFERENCES motorcycles(id) ON DELETE CASCADE,
            url TEXT NOT NULL,
            original_name TEXT,
            size INTEGER,
            uploaded_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            is_primary BOOLEAN DEFAULT FALSE
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS testimonials (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            location TEXT,
            text TEXT NOT NULL,
            color TEXT DEFAULT 'orange',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS inquiries (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            phone TEXT NOT NULL,
            model TEXT,
            year TEXT,
            details TEXT,
            photos_count INTEGER DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS admin_users (
            id SERIAL PRIMARY KEY,
            username TEXT NOT NULL UNIQUE,
            password_hash TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    # Feed and export filters
    cursor.execute('''
        CREATE INDEX IF NOT EXISTS idx_motorcycles_visible
        ON motorcycles (created_at DESC) WHERE deleted_at IS NULL
    ''')
    cursor.execute('''
        CREATE INDEX IF NOT EXISTS idx_motorcycle_images_motorcycle
        ON motorcycle_images (motorcycle_id)
    ''')
    cursor.execute('''
        CREATE INDEX IF NOT EXISTS idx_testimonials_visible
        ON testimonials (created_at DESC) WHERE deleted_at IS NULL
    ''')
