"""Test the sync pipeline wiring."""
from unittest.mock import MagicMock, patch

from enumwarp.sync import build_enum_tables, sync_commit


class TestBuildEnumTables:

    def test_filters_non_enum_and_empty_sources(self, status_source):
        sources = [
            status_source,
            "public class User { String name; }",
            "enum Empty { ; }",
            "public enum DayOfWeek { MONDAY, TUESDAY; }",
        ]

        tables = build_enum_tables(sources)

        assert [t.table_id for t in tables] == ['status', 'day_of_week']
        assert tables[0].rows[0] == {'key': 'OK', 'code': '0', 'label': 'Green'}

    def test_no_sources(self):
        assert build_enum_tables([]) == []


class TestSyncCommit:

    def test_fetch_parse_load(self, settings, status_source):
        client = MagicMock()
        with patch('enumwarp.sync.get_sources', return_value=[status_source, 'class X {}']) as get_sources, \
                patch('enumwarp.sync.load_tables', return_value=[('status', 2)]) as load_tables:
            results = sync_commit('acme', 'backend', 'abc123', settings=settings, client=client)

        assert results == [('status', 2)]
        get_sources.assert_called_once_with(client, 'acme', 'backend', 'abc123', settings.source_pattern)
        tables, schema_name = load_tables.call_args.args
        assert [t.table_id for t in tables] == ['status']
        assert schema_name == 'enums'
