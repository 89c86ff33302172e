"""
Tests for rendering configurations back to YAML.
"""

import yaml

from wls_exporter.configuration import ConfigSerializer, ExporterConfig, MBeanSelector

from conftest import SERVLET_CONFIG, WORK_MANAGER_CONFIG, load_from_string


class TestToDocument:

    def test_default_configuration_emits_host_and_port_only(self):
        document = ConfigSerializer.to_document(ExporterConfig.load_config(None))

        assert document == {"host": "localhost", "port": 7001}

    def test_non_default_settings_are_emitted(self):
        config = ExporterConfig.load_config({
            "username": "weblogic",
            "password": "welcome1",
            "startDelaySeconds": "5",
        })

        document = ConfigSerializer.to_document(config)

        assert document["username"] == "weblogic"
        assert document["password"] == "welcome1"
        assert document["startDelaySeconds"] == 5

    def test_matches_source_document(self, servlet_config):
        assert ConfigSerializer.to_document(servlet_config) == yaml.safe_load(SERVLET_CONFIG)

    def test_reserved_keys_precede_nested_selectors(self):
        selector = MBeanSelector(
            name="componentRuntimes",
            key="name",
            prefix="webapp_config_",
            type="WebAppComponentRuntime",
            values=["contextRoot"],
            nested_selectors={"servlets": MBeanSelector(name="servlets")},
        )

        document = ConfigSerializer.selector_to_document(selector)

        assert list(document) == ["type", "prefix", "key", "values", "servlets"]
        assert document["servlets"] == {}

    def test_config_to_document_delegates(self, servlet_config):
        assert servlet_config.to_document() == ConfigSerializer.to_document(servlet_config)


class TestDump:

    def test_starts_with_document_marker(self, servlet_config):
        assert ConfigSerializer.dump(servlet_config).startswith("---")

    def test_values_written_inline(self, servlet_config):
        text = ConfigSerializer.dump(servlet_config)

        assert "values: [invocationTotalCount, executionTimeTotal]" in text

    def test_long_value_lists_are_not_wrapped(self, servlet_config):
        lines = ConfigSerializer.dump(servlet_config).splitlines()

        assert any(line.strip().startswith("values: [deploymentState") and line.endswith("]") for line in lines)

    def test_round_trip(self, servlet_config, work_manager_config):
        servlet_config.append(work_manager_config)

        reloaded = ExporterConfig.load_config(yaml.safe_load(ConfigSerializer.dump(servlet_config)))

        assert reloaded == servlet_config
        assert [q.query_name for q in reloaded.queries] == ["applicationRuntimes", "applicationRuntimes"]

    def test_round_trip_with_credentials_and_empty_selectors(self):
        config = ExporterConfig.load_config({
            "host": "wls.example.com",
            "port": "7002",
            "username": "weblogic",
            "password": 12345,
            "startDelaySeconds": 10,
            "queries": [{"JVMRuntime": None}, {"serverRuntime": {"key": "name", "threadPoolRuntime": {}}}],
        })

        assert load_from_string(str(config)) == config

    def test_whitespace_insensitive_match_with_input(self, work_manager_config):
        text = str(work_manager_config)

        assert "".join(text.split()) == "".join(WORK_MANAGER_CONFIG.split())
