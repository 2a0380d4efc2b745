import logging
import sqlite3
from typing import Optional

from config.settings import get_settings


logger = logging.getLogger("students.database")



# Database Connection

def get_db_connection(db_path: Optional[str] = None):
    conn = sqlite3.connect(db_path or get_settings().database_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def create_database(db_path: Optional[str] = None):
    """Open the students database and make sure its schema exists.

    Requests are served from the in-memory store; the table is created so the
    file is ready for a persistent backend, but nothing reads or writes it yet.
    """
    db_path = db_path or get_settings().database_path
    conn = get_db_connection(db_path)

    try:
        cursor = conn.cursor()

        # Students table
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS students (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT,
                age INTEGER,
                email TEXT
            )
        ''')

        conn.commit()
    except sqlite3.Error:
        conn.close()
        raise

    logger.info("Opened student database at %s", db_path)
    return conn


if __name__ == "__main__":
    create_database().close()
