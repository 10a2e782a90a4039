# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for the RecordStore — CRUD, uniqueness rules and snapshot isolation.
"""

import threading

import pytest

from conftest import SAMPLE_PROFILES, SAMPLE_RESIDENTS, SAMPLE_STATIONS, profile, resident, station
from safetynet.core.errors import ConflictError
from safetynet.repositories.record_store import RecordStore, split_duplicate_assignments


# ============================================
# Residents
# ============================================
class TestResidents:
    def test_add_resident(self, store):
        store.add_resident(resident("Jacob", "Boyd", "1509 Culver St"))
        assert store.find_resident("Jacob", "Boyd").address == "1509 Culver St"

    def test_exact_duplicate_rejected(self, store):
        with pytest.raises(ConflictError) as exc_info:
            store.add_resident(resident("John", "Boyd", "1509 Culver St"))
        assert exc_info.value.http_status == 409

    def test_same_name_other_address_allowed(self, store):
        store.add_resident(resident("John", "Boyd", "29 15th St"))
        assert len([r for r in store.snapshot().residents if r.identity == ("John", "Boyd")]) == 2

    def test_update_first_match_only(self, store):
        store.add_resident(resident("John", "Boyd", "29 15th St"))
        updated = store.update_resident("John", "Boyd", {"phone": "841-000-0000"})
        assert updated.phone == "841-000-0000"
        phones = [r.phone for r in store.snapshot().residents if r.identity == ("John", "Boyd")]
        assert phones == ["841-000-0000", "841-874-6512"]

    def test_update_unknown_returns_none(self, store):
        version = store.version
        assert store.update_resident("No", "Body", {"phone": "x"}) is None
        assert store.version == version

    def test_delete_removes_every_match(self, store):
        store.add_resident(resident("John", "Boyd", "29 15th St"))
        assert store.delete_resident("John", "Boyd") == 2
        assert store.find_resident("John", "Boyd") is None

    def test_delete_unknown_returns_zero(self, store):
        assert store.delete_resident("No", "Body") == 0

    def test_name_match_is_exact(self, store):
        assert store.find_resident("john", "boyd") is None


# ============================================
# Station assignments
# ============================================
class TestStations:
    def test_add_station(self, store):
        store.add_station(station("908 73rd St", 1))
        assert store.find_station("908 73rd St").station == 1

    def test_address_already_assigned_rejected(self, store):
        with pytest.raises(ConflictError) as exc_info:
            store.add_station(station("1509 Culver St", 7))
        assert exc_info.value.details == {"address": "1509 Culver St"}
        assert store.find_station("1509 Culver St").station == 3

    def test_update_station(self, store):
        updated = store.update_station("1509 Culver St", 5)
        assert updated.station == 5
        assert store.find_station("1509 Culver St").station == 5

    def test_update_unmapped_returns_none(self, store):
        assert store.update_station("1 Nowhere Rd", 5) is None

    def test_delete_by_address(self, store):
        assert store.delete_station_by_address("1509 Culver St") == 1
        assert store.find_station("1509 Culver St") is None

    def test_delete_by_number_reports_count(self, store):
        assert store.delete_stations_by_number(2) == 2
        assert all(s.station != 2 for s in store.snapshot().stations)

    def test_delete_unknown_number_is_zero(self, store):
        version = store.version
        assert store.delete_stations_by_number(99) == 0
        assert store.version == version


# ============================================
# Medical profiles
# ============================================
class TestProfiles:
    def test_duplicate_identity_allowed(self, store):
        store.add_profile(profile("John", "Boyd", "01/01/2000"))
        assert len([p for p in store.snapshot().profiles if p.identity == ("John", "Boyd")]) == 2

    def test_profile_without_resident_allowed(self, store):
        store.add_profile(profile("No", "Body", "01/01/2000"))
        assert store.find_profile("No", "Body") is not None

    def test_update_replaces_lists(self, store):
        updated = store.update_profile(
            "John", "Boyd", {"medications": ["ibupurin:200mg"], "allergies": []}
        )
        assert updated.medications == ("ibupurin:200mg",)
        assert updated.allergies == ()
        assert updated.birthdate.year == 1984

    def test_update_birthdate_string(self, store):
        updated = store.update_profile("John", "Boyd", {"birthdate": "12/31/1990"})
        assert (updated.birthdate.month, updated.birthdate.day) == (12, 31)

    def test_delete_profile(self, store):
        assert store.delete_profile("John", "Boyd") == 1
        assert store.find_profile("John", "Boyd") is None


# ============================================
# Snapshots
# ============================================
class TestSnapshots:
    def test_every_write_bumps_version(self, store):
        before = store.version
        store.add_station(station("908 73rd St", 1))
        store.delete_resident("John", "Boyd")
        assert store.version == before + 2

    def test_old_snapshot_unchanged_by_writes(self, store):
        before = store.snapshot()
        store.delete_stations_by_number(3)
        store.add_resident(resident("Jacob", "Boyd", "1509 Culver St"))
        assert any(s.station == 3 for s in before.stations)
        assert len(before.residents) == len(SAMPLE_RESIDENTS)

    def test_counts(self, store):
        assert store.snapshot().counts() == {
            "persons": len(SAMPLE_RESIDENTS),
            "firestations": len(SAMPLE_STATIONS),
            "medicalrecords": len(SAMPLE_PROFILES),
        }
        assert store.count() == sum(store.snapshot().counts().values())

    def test_replace_with_nothing_empties_store(self, store):
        store.replace_all([], [], [])
        assert store.count() == 0

    def test_replace_all_drops_duplicate_addresses(self):
        s = RecordStore()
        dropped = s.replace_all(
            [], [station("1 Main St", 1), station("1 Main St", 2), station("2 Main St", 2)], []
        )
        assert [(d.address, d.station) for d in dropped] == [("1 Main St", 2)]
        assert s.find_station("1 Main St").station == 1
        assert len(s.snapshot().stations) == 2

    def test_split_keeps_first_per_address(self):
        kept, dropped = split_duplicate_assignments(
            [station("a", 1), station("b", 1), station("a", 3)]
        )
        assert [s.address for s in kept] == ["a", "b"]
        assert [s.station for s in dropped] == [3]


# ============================================
# Concurrency
# ============================================
class TestConcurrentWrites:
    def test_concurrent_delete_by_station_counted_once(self):
        s = RecordStore()
        s.replace_all([], [station(f"{i} Main St", 1) for i in range(50)], [])
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(s.delete_stations_by_number(1))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(results) == [0] * 7 + [50]
        assert s.snapshot().stations == ()

    def test_concurrent_adds_all_applied(self):
        s = RecordStore()
        barrier = threading.Barrier(10)

        def worker(i):
            barrier.wait()
            for j in range(20):
                s.add_resident(resident(f"P{i}", f"L{j}", "1 Main St"))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(s.snapshot().residents) == 200
        assert s.version == 200
