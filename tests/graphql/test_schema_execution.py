"""
Schema-level tests of record operations against a SQLite store.
"""

import pytest

from menagerie.graphql.schema import schema

CREATE = """
mutation Create($name: String!, $category: String!, $accessory: String) {
  createRecord(name: $name, category: $category, accessory: $accessory) {
    id name category accessory
  }
}
"""

GET = """
query Get($id: ID!) {
  record(id: $id) { id name category accessory }
}
"""

DELETE = """
mutation Delete($id: ID!) {
  deleteRecord(id: $id) { id name }
}
"""

UPDATE = """
mutation Update($id: ID!, $accessory: String) {
  updateRecord(id: $id, accessory: $accessory) { id name category accessory }
}
"""


async def record_count(store) -> int:
    return len(await store.get_all())


@pytest.mark.integration
@pytest.mark.requires_db
class TestRecordOperations:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name, category, accessory",
        [("Pip", "Mouse", "Hat"), ("Ünï", "Çat", "Bell"), ("A", "B", "C")],
    )
    async def test_create_then_get(self, sql_store, context_factory, name, category, accessory):
        variables = {"name": name, "category": category, "accessory": accessory}
        created = await schema.execute(
            CREATE, variable_values=variables, context_value=context_factory(sql_store)
        )
        assert created.errors is None
        record = created.data["createRecord"]

        fetched = await schema.execute(
            GET, variable_values={"id": record["id"]}, context_value=context_factory(sql_store)
        )

        assert fetched.errors is None
        assert fetched.data["record"] == {"id": record["id"], **variables}

    @pytest.mark.asyncio
    async def test_created_ids_are_unique(self, sql_store, context_factory):
        ids = set()
        for _ in range(3):
            result = await schema.execute(
                CREATE,
                variable_values={"name": "Pip", "category": "Mouse", "accessory": "Hat"},
                context_value=context_factory(sql_store),
            )
            ids.add(result.data["createRecord"]["id"])

        assert len(ids) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "variables, missing",
        [
            ({"name": "", "category": "Mouse", "accessory": "Hat"}, "name"),
            ({"name": "Pip", "category": "", "accessory": "Hat"}, "category"),
            ({"name": "Pip", "category": "Mouse"}, "accessory"),
        ],
    )
    async def test_invalid_create_adds_nothing(
        self, seeded_store, context_factory, variables, missing
    ):
        before = await record_count(seeded_store)

        result = await schema.execute(
            CREATE, variable_values=variables, context_value=context_factory(seeded_store)
        )

        assert result.data is None
        assert "All fields are required" in result.errors[0].message
        assert missing in result.errors[0].message
        assert await record_count(seeded_store) == before

    @pytest.mark.asyncio
    async def test_get_absent_is_null(self, sql_store, context_factory):
        result = await schema.execute(
            GET, variable_values={"id": "404"}, context_value=context_factory(sql_store)
        )

        assert result.errors is None
        assert result.data == {"record": None}

    @pytest.mark.asyncio
    async def test_out_of_range_id_is_null(self, seeded_store, context_factory):
        huge = {"id": "99999999999999999999"}

        fetched = await schema.execute(
            GET, variable_values=huge, context_value=context_factory(seeded_store)
        )
        deleted = await schema.execute(
            DELETE,
            variable_values=huge,
            context_value=context_factory(seeded_store, credential="Ralph"),
        )

        assert fetched.errors is None
        assert fetched.data == {"record": None}
        assert deleted.errors is None
        assert deleted.data == {"deleteRecord": None}
        assert await record_count(seeded_store) == 6

    @pytest.mark.asyncio
    async def test_list_records(self, seeded_store, context_factory):
        result = await schema.execute(
            "{ records { name } }", context_value=context_factory(seeded_store)
        )

        names = [r["name"] for r in result.data["records"]]
        assert names == ["Ralph", "Evelina", "Otto", "Mayo", "Kaaaarl", "Lulu"]

    @pytest.mark.asyncio
    async def test_unauthorized_delete_keeps_record(self, seeded_store, context_factory):
        target = await seeded_store.get_by_name("Otto")

        result = await schema.execute(
            DELETE,
            variable_values={"id": str(target.id)},
            context_value=context_factory(seeded_store, credential="Lulu"),
        )

        assert result.errors[0].message == "You are not authorized to delete this record"
        assert await seeded_store.get_by_id(target.id) == target

    @pytest.mark.asyncio
    async def test_admin_delete_removes_record(self, seeded_store, context_factory):
        target = await seeded_store.get_by_name("Otto")

        result = await schema.execute(
            DELETE,
            variable_values={"id": str(target.id)},
            context_value=context_factory(seeded_store, credential="Ralph"),
        )

        assert result.errors is None
        assert result.data["deleteRecord"] == {"id": str(target.id), "name": "Otto"}

        fetched = await schema.execute(
            GET, variable_values={"id": str(target.id)}, context_value=context_factory(seeded_store)
        )
        assert fetched.data == {"record": None}

    @pytest.mark.asyncio
    async def test_update_only_accessory(self, seeded_store, context_factory):
        target = await seeded_store.get_by_name("Mayo")

        result = await schema.execute(
            UPDATE,
            variable_values={"id": str(target.id), "accessory": "Raincoat"},
            context_value=context_factory(seeded_store),
        )

        assert result.errors is None
        assert result.data["updateRecord"] == {
            "id": str(target.id),
            "name": "Mayo",
            "category": "Dog",
            "accessory": "Raincoat",
        }

    @pytest.mark.asyncio
    async def test_update_missing_record(self, sql_store, context_factory):
        result = await schema.execute(
            UPDATE,
            variable_values={"id": "77", "accessory": "Raincoat"},
            context_value=context_factory(sql_store),
        )

        assert result.errors[0].message == "Record 77 not found"

    @pytest.mark.asyncio
    async def test_record_by_identity_empty_name(self, mock_store, context_factory):
        result = await schema.execute(
            '{ recordByIdentity(name: "") { id } }', context_value=context_factory(mock_store)
        )

        assert result.errors[0].message == "User must be logged in"
        mock_store.get_by_name.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_login(self, seeded_store, context_factory):
        context = context_factory(seeded_store)

        result = await schema.execute(
            'mutation { login(username: "Lulu", password: "asdf") { name category } }',
            context_value=context,
        )

        assert result.errors is None
        assert result.data["login"] == {"name": "Lulu", "category": "Dog"}
        assert "Lulu" in context["response"].headers["set-cookie"]

    @pytest.mark.asyncio
    async def test_login_rejected(self, seeded_store, context_factory):
        result = await schema.execute(
            'mutation { login(username: "Lulu", password: "nope") { name } }',
            context_value=context_factory(seeded_store),
        )

        assert result.errors[0].message == "Invalid username or password"
