import threading
import unittest
import uuid
from datetime import datetime

from reflectkit.infrastructure import ABSENT, ClassFieldScanner, InMemoryFieldCache
from tests.deferred_models import Crate, Ticket
from tests.models import Account, Counter, Point, Premium, Status, Unrelated


class CountingScanner(ClassFieldScanner):
    def __init__(self):
        self.finds = []
        self.listings = []

    def find(self, owner, name):
        self.finds.append((owner, name))
        return super().find(owner, name)

    def declared_fields(self, owner):
        self.listings.append(owner)
        return super().declared_fields(owner)


class FieldCacheTests(unittest.TestCase):
    def setUp(self):
        self.scanner = CountingScanner()
        self.cache = InMemoryFieldCache(self.scanner)

    def test_resolve_returns_same_descriptor_and_scans_once(self):
        first = self.cache.resolve(Account, "owner")
        second = self.cache.resolve(Account, "owner")

        self.assertIs(first, second)
        self.assertEqual(self.scanner.finds, [(Account, "owner")])
        self.assertIs(first.owner, Account)
        self.assertIs(first.declared_type, str)
        self.assertTrue(first.immutable)

    def test_missing_field_is_cached_as_absent(self):
        self.assertIsNone(self.cache.resolve(Account, "nope"))
        self.assertIsNone(self.cache.resolve(Account, "nope"))

        self.assertEqual(self.scanner.finds, [(Account, "nope")])
        self.assertIs(self.cache._entries[(Account, "nope")], ABSENT)

    def test_keys_include_the_owning_class(self):
        account_owner = self.cache.resolve(Account, "owner")
        unrelated_owner = self.cache.resolve(Unrelated, "owner")

        self.assertIsNot(account_owner, unrelated_owner)
        self.assertIs(account_owner.declared_type, str)
        self.assertIs(unrelated_owner.declared_type, int)
        self.assertEqual(len(self.cache), 2)

    def test_inherited_fields_are_not_declared_on_subclass(self):
        self.assertIsNone(self.cache.resolve(Premium, "owner"))
        self.assertIsNotNone(self.cache.resolve(Premium, "tier"))

    def test_class_vars_and_unannotated_attributes_are_skipped(self):
        self.assertIsNone(self.cache.resolve(Account, "kind"))
        self.assertIsNone(self.cache.resolve(Counter, "calls"))

    def test_optional_and_final_are_unwrapped(self):
        birthday = self.cache.resolve(Account, "birthday")
        limit = self.cache.resolve(Counter, "limit")

        self.assertEqual(birthday.declared_type.__name__, "date")
        self.assertIs(limit.declared_type, int)
        self.assertTrue(limit.immutable)
        self.assertFalse(self.cache.resolve(Counter, "label").immutable)

    def test_status_enum_declared_type(self):
        self.assertIs(self.cache.resolve(Account, "status").declared_type, Status)

    def test_slots_are_declared_fields(self):
        descriptor = self.cache.resolve(Point, "x")

        self.assertIsNotNone(descriptor)
        self.assertIs(descriptor.declared_type, object)

    def test_string_annotations_are_evaluated(self):
        code = self.cache.resolve(Ticket, "code")
        opened_at = self.cache.resolve(Ticket, "opened_at")
        seats = self.cache.resolve(Ticket, "seats")
        price = self.cache.resolve(Ticket, "price")

        self.assertIs(code.declared_type, uuid.UUID)
        self.assertIs(opened_at.declared_type, datetime)
        self.assertTrue(seats.immutable)
        self.assertIs(price.declared_type, object)
        self.assertEqual(price.annotation, "Decimal")

    def test_unresolved_name_leaves_sibling_annotations_resolved(self):
        lid = self.cache.resolve(Crate, "lid")
        label = self.cache.resolve(Crate, "label")
        weight = self.cache.resolve(Crate, "weight")

        self.assertIs(lid.declared_type, Crate.Lid)
        self.assertIs(label.declared_type, str)
        self.assertEqual(weight.annotation, "Decimal")
        self.assertIs(weight.declared_type, object)

    def test_fields_lists_declared_fields_in_order_and_seeds_cache(self):
        listed = self.cache.fields(Account)

        self.assertEqual(
            [descriptor.name for descriptor in listed],
            ["id", "owner", "status", "created_at", "birthday", "balance", "visits", "tags", "payload"],
        )
        self.assertIs(self.cache.resolve(Account, "owner"), listed[1])
        self.assertEqual(self.scanner.finds, [])
        self.assertIs(self.cache.fields(Account), listed)
        self.assertEqual(self.scanner.listings, [Account])

    def test_fields_reuses_descriptors_resolved_earlier(self):
        resolved = self.cache.resolve(Account, "status")

        listed = self.cache.fields(Account)

        self.assertIs(listed[2], resolved)

    def test_concurrent_resolves_converge(self):
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(self.cache.resolve(Account, "created_at"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(results), 8)
        self.assertTrue(all(result is results[0] for result in results))


if __name__ == "__main__":
    unittest.main()
