import threading
import unittest

from hub.db import InMemoryDbClient
from hub.schemas import SystemStatsCreate
from hub.tests.storage_contract import StorageContract, make_script


class InMemoryDbClientTests(StorageContract, unittest.TestCase):
    def make_db(self, seed: bool = True):
        return InMemoryDbClient(seed=seed)

    def test_ties_keep_insertion_order(self):
        db = self.make_db(seed=False)
        first = db.create_script(make_script("First"))
        second = db.create_script(make_script("Second"))
        third = db.create_script(make_script("Third"))
        self.assertEqual(
            [s.id for s in db.list_scripts()], [first.id, second.id, third.id]
        )

    def test_new_ids_do_not_collide_with_fixture_ids(self):
        script = self.db.create_script(make_script("Fresh"))
        self.assertNotIn(script.id, {str(i) for i in range(1, 56)})
        self.assertEqual(len(self.db.list_scripts()), 56)

    def test_reset_reloads_fixtures(self):
        self.db.create_script(make_script("Temporary"))
        self.db.delete_script("1")
        self.db.reset()
        self.assertEqual(len(self.db.list_scripts()), 55)
        self.assertIsNotNone(self.db.get_script("1"))
        self.assertEqual(len(self.db.get_stats_history()), 1)

    def test_concurrent_increments_are_not_lost(self):
        before = self.db.get_script("38").execution_count

        def run():
            for _ in range(50):
                self.db.increment_execution("38")

        threads = [threading.Thread(target=run) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual(self.db.get_script("38").execution_count, before + 400)

    def test_custom_stats_limit(self):
        db = InMemoryDbClient(seed=False, stats_limit=3)
        for fps in range(5):
            db.record_stats(SystemStatsCreate(cpu_usage=0, gpu_usage=0, ram_usage=0, fps=fps))
        self.assertEqual([s.fps for s in db.get_stats_history()], [2, 3, 4])


if __name__ == "__main__":
    unittest.main()
