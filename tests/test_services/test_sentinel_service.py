"""Тесты служебных записей (Reserve / Unemployed / Intern)."""
from app.core.sentinels import SentinelKey
from app.models.department import Department, DepartmentPosition
from app.models.position import Position
from app.models.specialization import Specialization
from app.services.sentinel_service import SentinelService


class TestEnsureSentinels:
    """Идемпотентное создание служебных записей."""

    def test_creates_all_sentinels(self, db_session):
        reserve, unemployed, intern = SentinelService(db_session).ensure_sentinels()
        assert reserve.name == "Reserve"
        assert reserve.system_key == SentinelKey.reserve.value
        assert unemployed.title == "Unemployed"
        assert intern.name == "Intern"

    def test_links_unemployed_to_reserve(self, db_session):
        reserve, unemployed, _ = SentinelService(db_session).ensure_sentinels()
        link = db_session.get(DepartmentPosition, (reserve.id, unemployed.id))
        assert link is not None

    def test_second_run_creates_no_duplicates(self, db_session):
        service = SentinelService(db_session)
        first = service.ensure_sentinels()
        second = service.ensure_sentinels()

        assert [row.id for row in first] == [row.id for row in second]
        assert db_session.query(Department).count() == 1
        assert db_session.query(Position).count() == 1
        assert db_session.query(Specialization).count() == 1
        assert db_session.query(DepartmentPosition).count() == 1

    def test_adopts_legacy_reserve_name(self, db_session):
        legacy = Department(name="Резерв")
        db_session.add(legacy)
        db_session.commit()

        reserve, _, _ = SentinelService(db_session).ensure_sentinels()

        assert reserve.id == legacy.id
        assert reserve.name == "Reserve"
        assert reserve.is_sentinel
        assert db_session.query(Department).count() == 1

    def test_adopts_legacy_position_and_specialization(self, db_session):
        db_session.add_all([Position(title="Без Посади"), Specialization(name="Без Спец.")])
        db_session.commit()

        _, unemployed, intern = SentinelService(db_session).ensure_sentinels()

        assert unemployed.title == "Unemployed"
        assert intern.name == "Intern"
        assert db_session.query(Position).count() == 1
        assert db_session.query(Specialization).count() == 1

    def test_canonical_name_preferred_over_legacy(self, db_session):
        db_session.add_all([Department(name="Unassigned"), Department(name="Reserve")])
        db_session.commit()

        reserve, _, _ = SentinelService(db_session).ensure_sentinels()

        assert reserve.name == "Reserve"
        unassigned = db_session.query(Department).filter_by(name="Unassigned").one()
        assert unassigned.system_key is None

    def test_lookup_creates_missing_sentinel(self, db_session):
        intern = SentinelService(db_session).intern_specialization()
        assert intern.id is not None
        assert intern.system_key == SentinelKey.intern.value


class TestConcurrentCreation:
    """Служебная запись создана параллельным процессом."""

    def test_conflict_rolls_back_and_rereads(self, db_session, monkeypatch):
        existing = Department(name="Reserve", system_key=SentinelKey.reserve.value)
        db_session.add(existing)
        db_session.commit()

        original_find = SentinelService._find_by_key
        missed = []

        def find_after_race(self, key):
            # Первый поиск Reserve не видит запись другого процесса
            if key is SentinelKey.reserve and not missed:
                missed.append(key)
                return None
            return original_find(self, key)

        monkeypatch.setattr(SentinelService, "_find_by_key", find_after_race)

        reserve, unemployed, _ = SentinelService(db_session).ensure_sentinels()

        assert missed == [SentinelKey.reserve]
        assert reserve.id == existing.id
        assert db_session.query(Department).count() == 1
        assert db_session.query(Position).count() == 1
        assert db_session.query(Specialization).count() == 1
        assert db_session.get(DepartmentPosition, (reserve.id, unemployed.id)) is not None
