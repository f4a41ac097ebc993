"""Database seeder: fills MongoDB with categories and articles for local development."""
import argparse
import asyncio
import random
import time
from datetime import timedelta

from blogcms.database import create_client, get_database
from blogcms.handlers import CreateArticleHandler, CreateCategoryHandler
from blogcms.logging_config import setup_logging
from blogcms.models import Article, Category, utcnow
from blogcms.repositories import MongoArticleRepository, MongoCategoryRepository
from blogcms.repositories.article_repository import COLLECTION_NAME as ARTICLES
from blogcms.repositories.category_repository import COLLECTION_NAME as CATEGORIES

ROOT_CATEGORIES = {
    "Technology": ["Python", "Databases", "DevOps"],
    "Science": ["Physics", "Biology"],
    "Culture": ["Books", "Film", "Music"],
}

TAGS = ["python", "fastapi", "mongodb", "redis", "docker", "kubernetes",
        "testing", "performance", "security", "async", "design", "tutorial"]

AUTHORS = ["Ada", "Grace", "Linus", "Barbara", "Ken", "Margaret"]


def _slug(text: str) -> str:
    return "-".join(text.lower().split())


async def seed(small: bool = False, drop: bool = True):
    num_articles = 50 if small else 2000

    print(f"Seeding: {sum(len(v) + 1 for v in ROOT_CATEGORIES.values())} categories, {num_articles} articles")
    start = time.perf_counter()

    client = create_client()
    db = get_database(client)
    try:
        if drop:
            await db.drop_collection(ARTICLES)
            await db.drop_collection(CATEGORIES)

        create_category = CreateCategoryHandler(MongoCategoryRepository(db))
        create_article = CreateArticleHandler(MongoArticleRepository(db))

        leaf_ids: list[str] = []
        for order, (name, children) in enumerate(ROOT_CATEGORIES.items()):
            root = await create_category.handle(
                Category(name=name, slug=_slug(name), display_order=order)
            )
            if root.is_failure:
                raise SystemExit(f"Could not create category {name!r}: {root.error}")
            for child_order, child in enumerate(children):
                sub = await create_category.handle(
                    Category(
                        name=child,
                        slug=_slug(child),
                        parent_id=root.value.id,
                        display_order=child_order,
                    )
                )
                if sub.is_failure:
                    raise SystemExit(f"Could not create category {child!r}: {sub.error}")
                leaf_ids.append(sub.value.id)
        print(f"  Created {len(ROOT_CATEGORIES)} root categories, {len(leaf_ids)} subcategories")

        failed = 0
        for i in range(num_articles):
            topic = random.choice(TAGS)
            published = random.random() > 0.1  # 90% published
            result = await create_article.handle(
                Article(
                    title=f"Article {i}: Working with {topic}",
                    slug=f"article-{i}-working-with-{topic}",
                    summary=f"A practical look at {topic} in production.",
                    content=f"This is the full content of article {i}. " * 20,
                    author=random.choice(AUTHORS),
                    category_id=random.choice(leaf_ids),
                    tags=random.sample(TAGS, k=random.randint(1, 4)),
                    is_published=published,
                    published_at=utcnow() - timedelta(days=random.randint(0, 365)) if published else None,
                    view_count=random.randint(0, 10000),
                )
            )
            if result.is_failure:
                failed += 1
            if (i + 1) % 500 == 0:
                print(f"  {i + 1} articles processed")
    finally:
        client.close()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Articles: {num_articles - failed} created, {failed} failed")


def main():
    parser = argparse.ArgumentParser(description="Seed the blog database")
    parser.add_argument("--small", action="store_true", help="Use small dataset (50 articles)")
    parser.add_argument("--keep", action="store_true", help="Keep existing collections")
    args = parser.parse_args()
    setup_logging()
    asyncio.run(seed(small=args.small, drop=not args.keep))


if __name__ == "__main__":
    main()
