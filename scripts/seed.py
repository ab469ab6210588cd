"""Seed the content database with sample category pages."""
import asyncio
import argparse
import time

from app.database import engine, async_session, Base
from app.exceptions import ConflictError
from app.schemas import ContentCreate
from app.services.content_service import ContentService
import app.models  # noqa: F401

SAMPLES = [
    ("Tin tức", "Tin tức mới nhất", "Tổng hợp tin tức trong ngày."),
    ("Thể thao", "Bóng đá, tennis và nhiều hơn nữa", "Kết quả và lịch thi đấu."),
    ("Giới thiệu", "Về chúng tôi", "Thông tin giới thiệu công ty."),
    ("Đào tạo", "Khoá học và chương trình", "Danh sách khoá học đang mở."),
    ("News", "Latest headlines", "Daily news roundup."),
    ("Events", None, "Upcoming events calendar."),
]


async def seed(reset: bool = False):
    start = time.perf_counter()

    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    created = skipped = 0
    async with async_session() as session:
        service = ContentService(session)
        for name, summary, body in SAMPLES:
            try:
                content = await service.create(
                    ContentCreate(category_name=name, summarize_content=summary, content=body)
                )
            except ConflictError:
                print(f"  Skipped {name!r}: already exists")
                skipped += 1
                continue
            print(f"  Created {content.category_name!r} -> /{content.slug}")
            created += 1
        await session.commit()

    await engine.dispose()
    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s: {created} created, {skipped} skipped")


def main():
    parser = argparse.ArgumentParser(description="Seed the content database")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate tables first")
    args = parser.parse_args()
    asyncio.run(seed(reset=args.reset))


if __name__ == "__main__":
    main()
