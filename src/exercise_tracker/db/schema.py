"""Database schema for users and exercise entries."""

SCHEMA = """
-- Registered users; username uniqueness is enforced here
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    username TEXT NOT NULL UNIQUE,
    created_at TEXT DEFAULT CURRENT_TIMESTAMP
);

-- Exercise entries; user_id is not a foreign key, an entry may outlive a failed lookup
CREATE TABLE IF NOT EXISTS exercises (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    description TEXT NOT NULL,
    duration REAL NOT NULL,
    date TEXT,  -- local ISO timestamp, NULL for an invalid date
    created_at TEXT DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_exercises_user_date ON exercises(user_id, date);
"""
