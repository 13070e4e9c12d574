import unittest

import jwt

from hub.security import (
    ALGORITHM,
    create_access_token,
    decode_access_token,
    get_secret_key,
    hash_password,
    verify_password,
)


class PasswordTests(unittest.TestCase):
    def test_hash_round_trip(self):
        digest = hash_password("rune-scimitar")
        self.assertNotEqual(digest, "rune-scimitar")
        self.assertTrue(digest.startswith("$2"))
        self.assertTrue(verify_password(digest, "rune-scimitar"))
        self.assertFalse(verify_password(digest, "dragon-scimitar"))

    def test_same_password_hashes_differently(self):
        self.assertNotEqual(hash_password("abcdef"), hash_password("abcdef"))

    def test_unrecognised_digest_is_rejected(self):
        self.assertFalse(verify_password("not-a-bcrypt-digest", "abcdef"))

    def test_non_string_password_raises(self):
        with self.assertRaises(TypeError):
            hash_password(None)

    def test_passwords_sharing_bcrypt_prefix_do_not_match(self):
        prefix = "a" * 72
        digest = hash_password(prefix)
        self.assertTrue(verify_password(digest, prefix))
        self.assertFalse(verify_password(digest, prefix + "x"))
        self.assertFalse(verify_password(digest, prefix + "y"))

    def test_password_longer_than_bcrypt_input_is_refused(self):
        with self.assertRaises(ValueError):
            hash_password("a" * 72 + "x")


class AccessTokenTests(unittest.TestCase):
    def test_round_trip(self):
        token = create_access_token("user-1")
        self.assertEqual(decode_access_token(token), "user-1")

    def test_expired_token_is_rejected(self):
        token = create_access_token("user-1", expires_minutes=-1)
        self.assertIsNone(decode_access_token(token))

    def test_token_signed_with_other_key_is_rejected(self):
        token = jwt.encode({"sub": "user-1"}, "some-other-key", algorithm=ALGORITHM)
        self.assertIsNone(decode_access_token(token))

    def test_garbage_token_is_rejected(self):
        self.assertIsNone(decode_access_token("definitely.not.a-token"))

    def test_token_without_subject_is_rejected(self):
        token = jwt.encode({"foo": "bar"}, get_secret_key(), algorithm=ALGORITHM)
        self.assertIsNone(decode_access_token(token))


if __name__ == "__main__":
    unittest.main()
