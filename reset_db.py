# reset_db.py
from moodgarden.models import database
from moodgarden.models import *  # registers mood_entries, kindness_messages, user_progress
from moodgarden.models.database import engine

if __name__ == "__main__":
    tables = ", ".join(sorted(database.Base.metadata.tables))
    print(f"⚠️ Dropping tables: {tables}")
    database.Base.metadata.drop_all(bind=engine)

    print("✅ Recreating tables from models...")
    database.Base.metadata.create_all(bind=engine)

    print("✅ MoodGarden database reset complete.")
