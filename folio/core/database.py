import os
import sqlite3
from .config import Config


class Database:

    @staticmethod
    def connect(path):
        return sqlite3.connect(path)

    @staticmethod
    def ensure_dir(path):
        """Create the directory holding a database file (only if there's a directory component)"""
        db_dir = os.path.dirname(path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    @staticmethod
    def init_collection_table(conn, table):
        """Create a document table: one JSON document per row"""
        cursor = conn.cursor()
        cursor.execute(f'''
            CREATE TABLE IF NOT EXISTS {table} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                data TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')

    @staticmethod
    def init_store_tables(db_path):
        """Initialize all collection tables in the content database"""
        Database.ensure_dir(db_path)
        try:
            with Database.connect(db_path) as conn:
                for table in Config.COLLECTION_TABLES.values():
                    Database.init_collection_table(conn, table)
                conn.commit()
        except sqlite3.Error as e:
            print(f"Error initializing content database: {e}")
            raise

    @staticmethod
    def init_admin_table(db_path):
        """Initialize admin table if it doesn't exist. Returns the number of admins."""
        Database.ensure_dir(db_path)
        with Database.connect(db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(f'''
                CREATE TABLE IF NOT EXISTS {Config.ADMIN_TABLE} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    email TEXT UNIQUE NOT NULL,
                    password_hash TEXT NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            ''')
            conn.commit()

            cursor.execute(f"SELECT COUNT(*) FROM {Config.ADMIN_TABLE}")
            return cursor.fetchone()[0]
