"""데모 데이터 생성 (마이그레이션 후 실행). --reset 시 전체 테이블 재생성"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mineralwater.config import get_settings
from mineralwater.database import Database
from mineralwater.logging_config import configure_logging
from mineralwater.seed import has_users, seed_demo_data


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="모든 테이블 삭제 후 다시 생성")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)
    database = Database(settings.database_url)
    try:
        if args.reset:
            database.drop_all()
            database.create_all()
        with database.session() as db:
            if has_users(db):
                print("사용자가 이미 존재합니다. --reset 으로 초기화할 수 있습니다.")
                return
            seed_demo_data(db)
        print("데모 데이터 생성 완료 (admin@example.com / adminpass)")
    finally:
        database.dispose()


if __name__ == "__main__":
    main()
