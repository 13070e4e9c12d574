import unittest

from pydantic import ValidationError

from hub.config import Settings
from hub.schemas import (
    LoginRequest,
    NewsArticleUpdate,
    ScriptCreate,
    ScriptResponse,
    ScriptUpdate,
    SystemStatsCreate,
    UserCreate,
    field_errors,
)


class UserCreateTests(unittest.TestCase):
    def test_valid_user(self):
        user = UserCreate(username="Iron_Man_99", email="iron@mail.com", password="secret1")
        self.assertEqual(user.username, "Iron_Man_99")

    def test_username_rules(self):
        for username in ("ab", "a" * 21, "has space", "dash-name"):
            with self.subTest(username=username):
                with self.assertRaises(ValidationError):
                    UserCreate(username=username, email="iron@mail.com", password="secret1")

    def test_email_and_password_rules(self):
        with self.assertRaises(ValidationError):
            UserCreate(username="ironman", email="not-an-email", password="secret1")
        with self.assertRaises(ValidationError):
            UserCreate(username="ironman", email="iron@mail.com", password="short")

    def test_password_limited_to_bcrypt_input_size(self):
        UserCreate(username="ironman", email="iron@mail.com", password="a" * 72)
        with self.assertRaises(ValidationError) as ctx:
            UserCreate(username="ironman", email="iron@mail.com", password="a" * 73)
        self.assertIn("password", field_errors(ctx.exception.errors()))
        # Multi-byte characters count by their encoded size.
        with self.assertRaises(ValidationError):
            UserCreate(username="ironman", email="iron@mail.com", password="\u00e9" * 37)

    def test_login_email_normalized_like_registration(self):
        registered = UserCreate(username="ironman", email="Iron@Mail.COM", password="secret1")
        login = LoginRequest(email="Iron@Mail.COM", password="secret1")
        self.assertEqual(login.email, registered.email)
        self.assertEqual(login.email, "Iron@mail.com")


class ScriptSchemaTests(unittest.TestCase):
    def test_accepts_camel_case_input(self):
        script = ScriptCreate.model_validate(
            {
                "name": "Lobster Fisher",
                "description": "Catches lobsters",
                "category": "fishing",
                "code": "F1::Click",
                "isPublic": False,
                "userId": "u1",
            }
        )
        self.assertFalse(script.is_public)
        self.assertEqual(script.user_id, "u1")
        self.assertEqual(script.category, "fishing")

    def test_unknown_category_rejected(self):
        with self.assertRaises(ValidationError):
            ScriptCreate(name="x", description="x", category="sailing", code="x")

    def test_patch_changes_only_include_sent_fields(self):
        self.assertEqual(ScriptUpdate(name="New").changes(), {"name": "New"})
        self.assertEqual(ScriptUpdate().changes(), {})

    def test_patch_null_applies_only_to_nullable_fields(self):
        self.assertEqual(ScriptUpdate(user_id=None).changes(), {"user_id": None})
        self.assertEqual(NewsArticleUpdate(image_url=None).changes(), {"image_url": None})

    def test_patch_null_rejected_for_required_columns(self):
        with self.assertRaises(ValidationError) as ctx:
            ScriptUpdate.model_validate({"name": None})
        self.assertIn("name", field_errors(ctx.exception.errors()))
        with self.assertRaises(ValidationError):
            NewsArticleUpdate.model_validate({"title": None})

    def test_news_patch_ignores_published_at(self):
        patch = NewsArticleUpdate.model_validate({"title": "t", "publishedAt": 1.0})
        self.assertEqual(patch.changes(), {"title": "t"})

    def test_response_serializes_camel_case(self):
        response = ScriptResponse(
            id="1",
            name="n",
            description="d",
            category="combat",
            code="c",
            author="a",
            is_public=True,
            is_favorite=1,
            execution_count=3,
            created_at=1.0,
        )
        dumped = response.model_dump(by_alias=True)
        self.assertEqual(dumped["executionCount"], 3)
        self.assertEqual(dumped["isFavorite"], 1)
        self.assertIn("lastExecuted", dumped)


class StatsSchemaTests(unittest.TestCase):
    def test_percentages_bounded(self):
        with self.assertRaises(ValidationError):
            SystemStatsCreate(cpu_usage=101, gpu_usage=0, ram_usage=0, fps=60)
        with self.assertRaises(ValidationError):
            SystemStatsCreate(cpu_usage=0, gpu_usage=0, ram_usage=0, fps=-1)


class FieldErrorsTests(unittest.TestCase):
    def test_groups_by_field_and_strips_location(self):
        errors = [
            {"loc": ("body", "username"), "msg": "too short"},
            {"loc": ("body", "username"), "msg": "bad pattern"},
            {"loc": ("query", "category"), "msg": "bad"},
            {"loc": ("body",), "msg": "missing body"},
        ]
        self.assertEqual(
            field_errors(errors),
            {
                "username": ["too short", "bad pattern"],
                "category": ["bad"],
                "__root__": ["missing body"],
            },
        )


class SettingsTests(unittest.TestCase):
    def test_database_url_is_unquoted(self):
        settings = Settings(database_url=' "sqlite+pysqlite:///:memory:" ')
        self.assertEqual(settings.database_url, "sqlite+pysqlite:///:memory:")

    def test_blank_database_url_means_in_memory(self):
        self.assertIsNone(Settings(database_url="  ").database_url)


if __name__ == "__main__":
    unittest.main()
