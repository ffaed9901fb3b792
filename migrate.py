"""
Database migration script to set up the game session schema.
"""
import os

from dotenv import load_dotenv
from sqlalchemy import create_engine, text

# Load environment variables
load_dotenv()

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "sqlite:///./tictactoe.db"
)

def run_migrations():
    """Run database migrations."""
    engine = create_engine(DATABASE_URL)

    with engine.connect() as conn:
        conn.execute(text("""
            CREATE TABLE IF NOT EXISTS game_sessions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                mode VARCHAR(20) NOT NULL DEFAULT 'classic'
                    CHECK (mode IN ('classic', 'relax', 'daily')),
                difficulty VARCHAR(20) NOT NULL DEFAULT 'soft'
                    CHECK (difficulty IN ('soft', 'smart', 'unbeatable')),
                status VARCHAR(20) NOT NULL DEFAULT 'playing'
                    CHECK (status IN ('playing', 'win', 'lose', 'draw')),
                board TEXT,
                move_count INTEGER NOT NULL DEFAULT 0 CHECK (move_count BETWEEN 0 AND 16),
                player_score INTEGER NOT NULL DEFAULT 0,
                computer_score INTEGER NOT NULL DEFAULT 0,
                highlight_line TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """))

        conn.execute(text("""
            CREATE INDEX IF NOT EXISTS idx_game_sessions_status
            ON game_sessions(status)
        """))

        conn.commit()
        print("Migrations completed successfully!")


if __name__ == "__main__":
    run_migrations()
