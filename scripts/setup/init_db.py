"""
Initialize a development database: creates any missing parking tables.
Production tables are loaded by the data pipeline; only run this against a local DB.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.database import create_tables, engine
from app.config import settings
from sqlalchemy import inspect, text


def main():
    print("🗄️  Parking API DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}")

    # Test connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        print("\nCheck DB_HOST / DB_PORT / DB_USER / DB_PASSWORD in .env")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()
    print("✅ All tables present")

    tables = sorted(inspect(engine).get_table_names())
    print(f"\n📊 Tables in database ({len(tables)} total):")
    for t in tables:
        print(f"   ✓ {t}")

    print("\n🎉 Database ready! You can now start the API:")
    print(f"   uvicorn app.main:app --host 0.0.0.0 --port {settings.PORT} --reload")


if __name__ == "__main__":
    main()
