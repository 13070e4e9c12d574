"""
Behaviour every DbClient must share. Mixed into one TestCase per backend.
"""

from __future__ import annotations

import time

from hub.db import DuplicateUserError, OwnerNotFoundError
from hub.schemas import (
    NewsArticleCreate,
    NewsArticleUpdate,
    ScriptCreate,
    ScriptUpdate,
    SystemStatsCreate,
    UserCreate,
)


def make_script(name: str, category: str = "fishing", **overrides) -> ScriptCreate:
    data = {
        "name": name,
        "description": f"{name} description",
        "category": category,
        "code": "F1::Send {Space}",
    }
    data.update(overrides)
    return ScriptCreate(**data)


def make_user(username: str = "zezima", email: str = "zezima@mail.com") -> UserCreate:
    return UserCreate(username=username, email=email, password="hunter22")


class StorageContract:
    def make_db(self, seed: bool = True):
        raise NotImplementedError

    def setUp(self):
        self.db = self.make_db()

    # Users

    def test_create_and_fetch_user(self):
        user = self.db.create_user(make_user())
        self.assertNotEqual(user.password_hash, "hunter22")
        self.assertEqual(self.db.get_user(user.id).username, "zezima")
        self.assertEqual(self.db.get_user_by_username("zezima").id, user.id)
        self.assertEqual(self.db.get_user_by_email("zezima@mail.com").id, user.id)
        self.assertIsNone(self.db.get_user("missing"))
        self.assertNotIn("password_hash", user.as_dict())

    def test_duplicate_username_rejected_without_state_change(self):
        self.db.create_user(make_user())
        with self.assertRaises(DuplicateUserError) as ctx:
            self.db.create_user(make_user(email="other@mail.com"))
        self.assertEqual(ctx.exception.field, "username")
        self.assertIsNone(self.db.get_user_by_email("other@mail.com"))

    def test_duplicate_email_rejected_without_state_change(self):
        self.db.create_user(make_user())
        with self.assertRaises(DuplicateUserError) as ctx:
            self.db.create_user(make_user(username="lynx_titan"))
        self.assertEqual(ctx.exception.field, "email")
        self.assertIsNone(self.db.get_user_by_username("lynx_titan"))

    def test_username_comparison_is_exact(self):
        self.db.create_user(make_user())
        other = self.db.create_user(make_user(username="Zezima", email="z2@mail.com"))
        self.assertEqual(self.db.get_user_by_username("Zezima").id, other.id)

    def test_verify_password(self):
        user = self.db.create_user(make_user())
        self.assertTrue(self.db.verify_password(user, "hunter22"))
        self.assertFalse(self.db.verify_password(user, "hunter23"))

    # Scripts

    def test_seeded_catalog_sorted_by_popularity(self):
        scripts = self.db.list_scripts()
        self.assertEqual(len(scripts), 55)
        counts = [s.execution_count for s in scripts]
        self.assertEqual(counts, sorted(counts, reverse=True))

    def test_unseeded_backend_is_empty(self):
        db = self.make_db(seed=False)
        self.assertEqual(db.list_scripts(), [])
        self.assertEqual(db.list_news(), [])
        self.assertIsNone(db.get_current_stats())
        self.assertEqual(db.get_stats_history(), [])

    def test_create_script_defaults(self):
        script = self.db.create_script(make_script("Barbarian Fishing"))
        self.assertEqual(script.author, "User")
        self.assertTrue(script.is_public)
        self.assertEqual(script.is_favorite, 0)
        self.assertEqual(script.execution_count, 0)
        self.assertIsNone(script.last_executed)
        self.assertIsNone(script.user_id)
        self.assertEqual(self.db.get_script(script.id).name, "Barbarian Fishing")

    def test_create_script_with_unknown_owner_rejected(self):
        with self.assertRaises(OwnerNotFoundError):
            self.db.create_script(make_script("Orphan", user_id="nobody"))

    def test_create_script_with_owner(self):
        user = self.db.create_user(make_user())
        script = self.db.create_script(make_script("Mine", user_id=user.id, is_public=False))
        self.assertEqual(script.user_id, user.id)
        self.assertFalse(script.is_public)

    def test_list_by_category(self):
        scripts = self.db.list_scripts_by_category("magic")
        self.assertTrue(scripts)
        self.assertTrue(all(s.category == "magic" for s in scripts))
        counts = [s.execution_count for s in scripts]
        self.assertEqual(counts, sorted(counts, reverse=True))
        self.assertEqual(self.db.list_scripts_by_category("nonexistent"), [])

    def test_update_script_applies_only_set_fields(self):
        script = self.db.create_script(make_script("Before"))
        updated = self.db.update_script(script.id, ScriptUpdate(name="After"))
        self.assertEqual(updated.name, "After")
        self.assertEqual(updated.description, script.description)
        self.assertEqual(updated.code, script.code)
        self.assertEqual(self.db.get_script(script.id).name, "After")

    def test_update_script_can_clear_owner(self):
        user = self.db.create_user(make_user())
        script = self.db.create_script(make_script("Owned", user_id=user.id))
        updated = self.db.update_script(script.id, ScriptUpdate(user_id=None))
        self.assertIsNone(updated.user_id)

    def test_update_missing_script_returns_none(self):
        self.assertIsNone(self.db.update_script("missing", ScriptUpdate(name="x")))

    def test_delete_returns_true_exactly_once(self):
        script = self.db.create_script(make_script("Doomed"))
        self.assertTrue(self.db.delete_script(script.id))
        self.assertFalse(self.db.delete_script(script.id))
        self.assertFalse(self.db.delete_script("never-existed"))
        self.assertIsNone(self.db.get_script(script.id))

    def test_increment_execution_counts_every_call(self):
        script = self.db.get_script("10")
        before = time.time()
        for _ in range(3):
            self.db.increment_execution("10")
        after = self.db.get_script("10")
        self.assertEqual(after.execution_count, script.execution_count + 3)
        self.assertIsNotNone(after.last_executed)
        self.assertGreaterEqual(after.last_executed, before - 1)

    def test_increment_missing_script_is_noop(self):
        self.db.increment_execution("missing")
        self.assertIsNone(self.db.get_script("missing"))

    def test_toggle_favorite_pair_restores_value(self):
        original = self.db.get_script("4").is_favorite
        self.db.toggle_favorite("4")
        self.assertEqual(self.db.get_script("4").is_favorite, 1 - original)
        self.db.toggle_favorite("4")
        self.assertEqual(self.db.get_script("4").is_favorite, original)
        self.db.toggle_favorite("missing")

    def test_search_is_case_insensitive_and_complete(self):
        results = self.db.search_scripts("FISH")
        ids = {s.id for s in results}
        expected = {
            s.id
            for s in self.db.list_scripts()
            if "fish" in s.name.lower()
            or "fish" in s.description.lower()
            or "fish" in s.code.lower()
        }
        self.assertTrue(expected)
        self.assertEqual(ids, expected)
        self.assertEqual(self.db.search_scripts("zzz-no-such-text"), [])

    def test_returned_records_are_detached(self):
        script = self.db.get_script("1")
        script.execution_count = -5
        script.name = "mutated"
        fresh = self.db.get_script("1")
        self.assertNotEqual(fresh.name, "mutated")
        self.assertGreaterEqual(fresh.execution_count, 0)

    def test_popularity_order_follows_execution(self):
        db = self.make_db(seed=False)
        fishing = db.create_script(make_script("Elite Fishing Bot Pro"))
        combat = db.create_script(make_script("Combat Trainer", category="combat"))
        for _ in range(5):
            db.increment_execution(combat.id)

        self.assertEqual(db.list_scripts()[0].name, "Combat Trainer")

        for _ in range(6):
            db.increment_execution(fishing.id)

        top = db.list_scripts()[0]
        self.assertEqual(top.name, "Elite Fishing Bot Pro")
        self.assertEqual(top.execution_count, 6)
        self.assertIsNotNone(top.last_executed)

    # News

    def test_news_sorted_newest_first(self):
        articles = self.db.list_news()
        self.assertEqual(len(articles), 2)
        published = [a.published_at for a in articles]
        self.assertEqual(published, sorted(published, reverse=True))

    def test_news_create_defaults_published_at(self):
        before = time.time()
        article = self.db.create_news_article(
            NewsArticleCreate(
                title="Varlamore Part Two",
                content="New region.",
                summary="New region",
                source="Jagex",
                category="update",
            )
        )
        self.assertGreaterEqual(article.published_at, before - 1)
        self.assertIsNone(article.image_url)
        self.assertEqual(self.db.list_news()[0].id, article.id)
        self.assertEqual(
            [a.id for a in self.db.list_news_by_category("update")][0], article.id
        )

    def test_news_update_keeps_published_at(self):
        article = self.db.list_news()[0]
        updated = self.db.update_news_article(
            article.id, NewsArticleUpdate(title="Renamed", image_url=None)
        )
        self.assertEqual(updated.title, "Renamed")
        self.assertEqual(updated.published_at, article.published_at)
        self.assertIsNone(updated.image_url)
        self.assertIsNone(self.db.update_news_article("missing", NewsArticleUpdate(title="x")))

    def test_news_delete(self):
        article = self.db.list_news()[0]
        self.assertTrue(self.db.delete_news_article(article.id))
        self.assertFalse(self.db.delete_news_article(article.id))
        self.assertIsNone(self.db.get_news_article(article.id))

    # System stats

    def test_seeded_stats_are_current_and_in_history(self):
        current = self.db.get_current_stats()
        self.assertIsNotNone(current)
        history = self.db.get_stats_history()
        self.assertEqual(history[-1].id, current.id)

    def test_record_stats_becomes_current(self):
        recorded = self.db.record_stats(
            SystemStatsCreate(cpu_usage=10, gpu_usage=20, ram_usage=30, fps=90)
        )
        self.assertEqual(self.db.get_current_stats().id, recorded.id)
        self.assertEqual(self.db.get_stats_history()[-1].fps, 90)

    def test_stats_history_is_bounded_and_evicts_oldest(self):
        db = self.make_db(seed=False)
        for i in range(105):
            db.record_stats(
                SystemStatsCreate(cpu_usage=1, gpu_usage=1, ram_usage=1, fps=i)
            )
        history = db.get_stats_history()
        self.assertEqual(len(history), 100)
        self.assertEqual([s.fps for s in history], list(range(5, 105)))
        self.assertEqual(db.get_current_stats().fps, 104)
