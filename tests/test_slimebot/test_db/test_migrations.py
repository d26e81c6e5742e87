from alembic.script import ScriptDirectory
from pytest import fixture, mark, raises
from sqlalchemy import BigInteger, inspect, text
from sqlalchemy.exc import DatabaseError, IntegrityError

from slimebot.db import create_engine
from slimebot.db.migrate import current_revision, downgrade, get_config, upgrade

BASE = "3f1c2b7a9d10"
SURROGATE_KEY = "8a4e6d2c1b57"
GUILD_KEY = "c5d91e0f7a23"
NARROW = "1b7f3a9e6c48"
WIDE = "e2a8c4f05d91"
REVISIONS = [BASE, SURROGATE_KEY, GUILD_KEY, NARROW, WIDE]
TABLE = "admin_bot_spam_channel"


@fixture
def url(tmp_path):
    return f"sqlite:///{tmp_path / 'migrations.db'}"


@fixture
def engine(url):
    engine = create_engine(url)
    yield engine
    engine.dispose()


def snapshot(engine):
    """Collect everything about the schema a revision may touch."""
    inspector = inspect(engine)
    tables = {}

    for table in inspector.get_table_names():
        if table == "alembic_version":
            continue

        pk = inspector.get_pk_constraint(table)
        tables[table] = {
            "columns": {
                c["name"]: (type(c["type"]).__name__, c["nullable"])
                for c in inspector.get_columns(table)
            },
            "pk": (pk["name"], tuple(pk["constrained_columns"])),
            "unique": sorted(
                (u["name"], tuple(u["column_names"]))
                for u in inspector.get_unique_constraints(table)
            ),
            "fks": sorted(
                (
                    fk["name"],
                    tuple(fk["constrained_columns"]),
                    fk["referred_table"],
                    tuple(fk["referred_columns"]),
                    fk["options"].get("ondelete"),
                )
                for fk in inspector.get_foreign_keys(table)
            ),
        }

    return tables


def test_linear_history(url):
    script = ScriptDirectory.from_config(get_config(url))
    revisions = [rev.revision for rev in script.walk_revisions("base", "heads")]

    assert list(reversed(revisions)) == REVISIONS
    assert script.get_heads() == [WIDE]


def test_current_revision(url):
    assert current_revision(url) is None

    upgrade(url, GUILD_KEY)
    assert current_revision(url) == GUILD_KEY

    upgrade(url)
    assert current_revision(url) == WIDE

    downgrade(url, "base")
    assert current_revision(url) is None


@mark.parametrize("revision", REVISIONS, ids=lambda r: r)
def test_round_trip(engine, revision, url):
    script = ScriptDirectory.from_config(get_config(url))
    previous = script.get_revision(revision).down_revision

    if previous:
        upgrade(url, previous)

    before = snapshot(engine)
    upgrade(url, revision)
    assert snapshot(engine) != before

    downgrade(url, previous or "base")
    assert snapshot(engine) == before


class TestShapes:
    def test_surrogate_key(self, engine, url):
        upgrade(url, SURROGATE_KEY)
        table = snapshot(engine)[TABLE]

        assert table["columns"] == {
            "id": ("INTEGER", False),
            "channel_id": ("BIGINT", False),
            "guild_id": ("BIGINT", False),
        }
        assert table["pk"] == ("admin_bot_spam_channel_pkey", ("id",))
        assert table["unique"] == [("admin_bot_spam_channel_guild_id_key", ("guild_id",))]
        assert table["fks"] == [("fk_guild", ("guild_id",), "guilds", ("guild_id",), "CASCADE")]

    def test_guild_key(self, engine, url):
        upgrade(url, GUILD_KEY)
        table = snapshot(engine)[TABLE]

        assert table["columns"] == {
            "channel_id": ("BIGINT", False),
            "guild_id": ("BIGINT", False),
        }
        assert table["pk"] == ("admin_bot_spam_channel_pkey", ("guild_id",))
        assert table["unique"] == [("admin_bot_spam_channel_guild_id_key", ("guild_id",))]
        assert table["fks"] == [("fk_guild", ("guild_id",), "guilds", ("guild_id",), "CASCADE")]

    def test_narrow(self, engine, url):
        upgrade(url, NARROW)
        table = snapshot(engine)[TABLE]

        assert table["columns"] == {
            "channel_id": ("INTEGER", False),
            "guild_id": ("INTEGER", False),
        }
        assert table["pk"] == ("admin_bot_spam_channel_pkey", ("guild_id",))
        assert table["fks"] == [("fk_guild", ("guild_id",), "guilds", ("guild_id",), "CASCADE")]

    def test_head_matches_guild_key(self, engine, url):
        upgrade(url, GUILD_KEY)
        expected = snapshot(engine)

        upgrade(url)
        assert snapshot(engine) == expected

    def test_head_columns_are_bigint(self, engine, url):
        upgrade(url)

        for column in inspect(engine).get_columns(TABLE):
            assert isinstance(column["type"], BigInteger)


def test_spam_channel_requires_guilds(engine, url):
    upgrade(url, BASE)
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE guilds"))

    # SQLite only checks the referenced table once rows are written
    upgrade(url, SURROGATE_KEY)
    with raises(DatabaseError):
        with engine.begin() as conn:
            conn.execute(
                text(f"INSERT INTO {TABLE} (id, channel_id, guild_id) VALUES (1, 42, 1)")
            )


@mark.parametrize("revision", [SURROGATE_KEY, GUILD_KEY, NARROW, WIDE], ids=lambda r: r)
def test_data_survives_later_revisions(engine, revision, url):
    upgrade(url, revision)
    with engine.begin() as conn:
        conn.execute(text("INSERT INTO guilds (guild_id) VALUES (1)"))
        if revision == SURROGATE_KEY:
            conn.execute(text(f"INSERT INTO {TABLE} (id, channel_id, guild_id) VALUES (1, 42, 1)"))
        else:
            conn.execute(text(f"INSERT INTO {TABLE} (channel_id, guild_id) VALUES (42, 1)"))

    upgrade(url)

    with engine.connect() as conn:
        rows = conn.execute(text(f"SELECT channel_id, guild_id FROM {TABLE}")).all()

    assert [tuple(row) for row in rows] == [(42, 1)]


def test_surrogate_key_restored_for_rows(engine, url):
    upgrade(url, GUILD_KEY)
    with engine.begin() as conn:
        conn.execute(text("INSERT INTO guilds (guild_id) VALUES (1), (2)"))
        conn.execute(text(f"INSERT INTO {TABLE} (channel_id, guild_id) VALUES (42, 1), (43, 2)"))

    downgrade(url, SURROGATE_KEY)

    with engine.connect() as conn:
        rows = conn.execute(
            text(f"SELECT id, channel_id, guild_id FROM {TABLE} ORDER BY guild_id")
        ).all()

    assert [tuple(row) for row in rows] == [(1, 42, 1), (2, 43, 2)]


@mark.parametrize("revision", [SURROGATE_KEY, GUILD_KEY, NARROW, WIDE], ids=lambda r: r)
class TestConstraints:
    """One mapping per guild, referential integrity and cascade at every revision."""

    @fixture
    def insert(self, engine, revision, url):
        upgrade(url, revision)
        ids = iter(range(1, 100))

        def _insert(channel_id, guild_id):
            with engine.begin() as conn:
                if revision == SURROGATE_KEY:
                    conn.execute(
                        text(f"INSERT INTO {TABLE} (id, channel_id, guild_id) VALUES (:id, :c, :g)"),
                        {"id": next(ids), "c": channel_id, "g": guild_id},
                    )
                else:
                    conn.execute(
                        text(f"INSERT INTO {TABLE} (channel_id, guild_id) VALUES (:c, :g)"),
                        {"c": channel_id, "g": guild_id},
                    )

        with engine.begin() as conn:
            conn.execute(text("INSERT INTO guilds (guild_id) VALUES (1), (2)"))

        return _insert

    def count(self, engine, guild_id=None):
        query = f"SELECT COUNT(*) FROM {TABLE}"
        params = {}
        if guild_id is not None:
            query += " WHERE guild_id = :g"
            params["g"] = guild_id

        with engine.connect() as conn:
            return conn.execute(text(query), params).scalar()

    def test_cascade(self, engine, insert):
        insert(42, 1)
        insert(43, 2)
        assert self.count(engine) == 2

        with engine.begin() as conn:
            conn.execute(text("DELETE FROM guilds WHERE guild_id = 1"))

        assert self.count(engine, 1) == 0
        assert self.count(engine, 2) == 1

    def test_duplicate_guild(self, engine, insert):
        insert(42, 1)

        with raises(IntegrityError):
            insert(43, 1)

        assert self.count(engine, 1) == 1

    def test_unknown_guild(self, engine, insert):
        with raises(IntegrityError):
            insert(42, 3)

        assert self.count(engine) == 0

    def test_channel_not_null(self, engine, insert):
        with raises(IntegrityError):
            insert(None, 1)

        assert self.count(engine) == 0
