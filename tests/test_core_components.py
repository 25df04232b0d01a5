"""
Unit tests for core todoapp components.

Tests the pieces that do not talk to the network: configuration management,
the record and request models, the result type and the operation registry.
"""

import os
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from todoapp.config import ConfigManager
from todoapp.models import (
    entities,
    Err,
    Goal,
    GoalData,
    GoalDataStatusKind,
    GoalDependency,
    NamedEntityKind,
    Ok,
    TodoAppError,
    TodoAppErrorCode,
)
from todoapp.models.requests import (
    GoalDataViewProps,
    GoalDependencyNewProps,
    GoalNewProps,
    NamedEntityDataViewProps,
    UserGeneratedCodeNewProps,
)
from todoapp.api.registry import OperationRegistry, OperationSpec
from todoapp.models.entities import Info
from todoapp.models.requests import InfoProps


class TestConfigManager(unittest.TestCase):
    """Test configuration management functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = Path(self.temp_dir) / "test_config.yaml"

    def tearDown(self):
        """Clean up test fixtures."""
        if self.config_path.exists():
            self.config_path.unlink()
        os.rmdir(self.temp_dir)

    def test_config_creation_with_defaults(self):
        """Test config manager falls back to defaults when file missing."""
        config = ConfigManager(str(self.config_path))

        self.assertEqual(config.url_convention, "api")
        self.assertEqual(config.api_url, "http://localhost:8080/api/")
        self.assertEqual(config.service_prefix, "todo_app/")
        self.assertEqual(config.static_url, "http://localhost:8080/")
        self.assertEqual(config.decode_strategy, "envelope")
        self.assertFalse(config.validate_responses)
        self.assertEqual(config.timeout, 30.0)

    def test_config_loading_from_file(self):
        """Test loading configuration from YAML file."""
        test_config = """
api:
  url_convention: static
  static_url: "https://todo.example.com/"
  decode_strategy: status
  timeout: 5
"""
        with open(self.config_path, 'w') as f:
            f.write(test_config)

        config = ConfigManager(str(self.config_path))

        self.assertEqual(config.url_convention, "static")
        self.assertEqual(config.static_url, "https://todo.example.com/")
        self.assertEqual(config.decode_strategy, "status")
        self.assertEqual(config.timeout, 5.0)
        # Keys missing from the file keep their defaults
        self.assertEqual(config.api_url, "http://localhost:8080/api/")
        self.assertFalse(config.validate_responses)

    def test_dot_notation_access(self):
        """Test accessing config values with dot notation."""
        config = ConfigManager(str(self.config_path))

        self.assertEqual(config.get("api.decode_strategy"), "envelope")
        self.assertEqual(config.get("logging.level"), "INFO")
        self.assertEqual(config.get("nonexistent.key", "default"), "default")
        self.assertIn("api_url", config.get_section("api"))
        self.assertEqual(config.get_section("missing"), {})

    def test_config_reload(self):
        """Test configuration reloading."""
        with open(self.config_path, 'w') as f:
            f.write("api:\n  decode_strategy: 'envelope'")

        config = ConfigManager(str(self.config_path))
        self.assertEqual(config.decode_strategy, "envelope")

        with open(self.config_path, 'w') as f:
            f.write("api:\n  decode_strategy: 'status'")

        config.reload()
        self.assertEqual(config.decode_strategy, "status")

    def test_broken_config_falls_back_to_defaults(self):
        """Test that unparseable YAML does not prevent startup."""
        with open(self.config_path, 'w') as f:
            f.write("api: [unclosed")

        config = ConfigManager(str(self.config_path))
        self.assertEqual(config.api_url, "http://localhost:8080/api/")


class TestEntityModels(unittest.TestCase):
    """Test record models read from backend responses."""

    def setUp(self):
        """Set up test fixtures."""
        self.goal = {"goalId": 1, "creationTime": 1000, "creatorUserId": 9}
        self.goal_data = {
            "goalDataId": 4,
            "creationTime": 1000,
            "creatorUserId": 9,
            "goal": self.goal,
            "name": "Ship report",
            "durationEstimate": None,
            "timeUtilityFunction": {
                "timeUtilityFunctionId": 7,
                "creationTime": 900,
                "creatorUserId": 9,
                "startTimes": [0, 86400000],
                "utils": [10, 0],
            },
            "status": "PENDING",
        }

    def test_goal_data_from_wire(self):
        """Test camelCase wire fields map to snake_case attributes."""
        data = GoalData.model_validate(self.goal_data)

        self.assertEqual(data.goal_data_id, 4)
        self.assertEqual(data.goal.goal_id, 1)
        self.assertIsNone(data.goal.intent)
        self.assertIsNone(data.duration_estimate)
        self.assertEqual(data.time_utility_function.start_times, [0, 86400000])
        self.assertEqual(data.status, GoalDataStatusKind.PENDING)

    def test_to_wire_round_trip(self):
        """Test a record dumps back to the shape it was read from."""
        data = GoalData.model_validate(self.goal_data)
        self.assertEqual(data.to_wire(), self.goal_data)

    def test_goal_with_intent(self):
        """Test a goal promoted from an intent."""
        goal = Goal.model_validate({
            **self.goal,
            "intent": {"goalIntentId": 3, "creationTime": 500, "creatorUserId": 9},
        })
        self.assertEqual(goal.intent.goal_intent_id, 3)

    def test_goal_dependency_keeps_snake_case_field(self):
        """Test the dependent goal is read from and written to its wire name."""
        dependency = GoalDependency.model_validate({
            "goalDependencyId": 2,
            "creationTime": 1000,
            "creatorUserId": 9,
            "goal": self.goal,
            "dependent_goal": {"goalId": 5, "creationTime": 1000, "creatorUserId": 9},
            "active": True,
        })

        self.assertEqual(dependency.dependent_goal.goal_id, 5)
        self.assertIn("dependent_goal", dependency.to_wire())

    def test_unknown_status_rejected(self):
        """Test the status enumeration is closed."""
        with self.assertRaises(ValidationError):
            GoalData.model_validate({**self.goal_data, "status": "DONE"})

    def test_enumerations(self):
        """Test the closed enumerations."""
        self.assertEqual(
            [s.value for s in GoalDataStatusKind],
            ["SUCCEED", "FAIL", "CANCEL", "PENDING"]
        )
        self.assertEqual(len(NamedEntityKind), 11)
        self.assertEqual(NamedEntityKind("PROPN"), NamedEntityKind.PROPN)

    def test_info_optional_href(self):
        """Test service metadata without an authenticator link."""
        info = Info.model_validate({
            "service": "todo-app",
            "versionMajor": 0,
            "versionMinor": 1,
            "versionRev": 2,
            "appPubOrigin": "https://todo.example.com",
            "authPubOrigin": "https://auth.example.com",
        })
        self.assertEqual(info.version_rev, 2)
        self.assertIsNone(info.auth_authenticator_href)


class TestRequestModels(unittest.TestCase):
    """Test request parameter validation and serialization."""

    def test_absent_optional_fields_are_omitted(self):
        """Test optional fields that were not given are not sent as null."""
        props = GoalNewProps(name="Ship report", time_utility_function_id=7, api_key="k")

        self.assertEqual(props.to_body(), {
            "name": "Ship report",
            "timeUtilityFunctionId": 7,
            "apiKey": "k",
        })

    def test_all_fields_serialize(self):
        """Test every supplied field reaches the body under its wire name."""
        props = GoalNewProps(
            name="Ship report",
            duration_estimate=3600000,
            time_utility_function_id=7,
            goal_intent_id=3,
            time_span=(1000, 2000),
            api_key="k",
        )

        self.assertEqual(props.to_body(), {
            "name": "Ship report",
            "durationEstimate": 3600000,
            "timeUtilityFunctionId": 7,
            "goalIntentId": 3,
            "timeSpan": [1000, 2000],
            "apiKey": "k",
        })

    def test_wire_names_accepted(self):
        """Test props can be built from the backend's field names."""
        props = GoalDependencyNewProps.model_validate({
            "goalId": 1,
            "dependentGoalId": 2,
            "active": True,
            "apiKey": "k",
        })
        self.assertEqual(props.dependent_goal_id, 2)

    def test_view_filters(self):
        """Test list and range filters of a view."""
        props = GoalDataViewProps(
            api_key="k",
            only_recent=True,
            status=[GoalDataStatusKind.PENDING, "SUCCEED"],
            min_duration_estimate=0,
        )

        self.assertEqual(props.to_body(), {
            "apiKey": "k",
            "onlyRecent": True,
            "status": ["PENDING", "SUCCEED"],
            "minDurationEstimate": 0,
        })

    def test_enum_list_filter(self):
        """Test named entity kinds are validated."""
        props = NamedEntityDataViewProps(api_key="k", only_recent=False, kind=["PERSON"])
        self.assertEqual(props.to_body()["kind"], ["PERSON"])

        with self.assertRaises(ValidationError):
            NamedEntityDataViewProps(api_key="k", only_recent=False, kind=["ANIMAL"])

    def test_only_recent_required(self):
        """Test revisioned views require onlyRecent."""
        with self.assertRaises(ValidationError):
            GoalDataViewProps(api_key="k")

    def test_api_key_required(self):
        """Test every request requires an API key."""
        with self.assertRaises(ValidationError):
            GoalNewProps(name="Ship report", time_utility_function_id=7)

    def test_unknown_fields_rejected(self):
        """Test a misspelled filter is an error rather than silently dropped."""
        with self.assertRaises(ValidationError):
            GoalDataViewProps.model_validate({"apiKey": "k", "onlyRecent": True, "goalIds": [1]})

    def test_wasm_cache_required(self):
        """Test code cannot be submitted without its compiled cache."""
        with self.assertRaises(ValidationError):
            UserGeneratedCodeNewProps(source_code="fn main() {}", source_lang="rust", api_key="k")

        props = UserGeneratedCodeNewProps(source_code="fn main() {}", source_lang="rust", wasm_cache=[], api_key="k")
        self.assertEqual(props.to_body()["wasmCache"], [])

    def test_info_has_empty_body(self):
        """Test the info request sends no parameters."""
        self.assertEqual(InfoProps().to_body(), {})


class TestResults(unittest.TestCase):
    """Test the Ok/Err result type."""

    def test_error_code_parse(self):
        """Test raw error payloads map onto the closed set."""
        self.assertEqual(TodoAppErrorCode.parse("GOAL_FORMS_CYCLE"), TodoAppErrorCode.GOAL_FORMS_CYCLE)
        self.assertEqual(TodoAppErrorCode.parse("SOMETHING_NEW"), TodoAppErrorCode.UNKNOWN)
        self.assertEqual(TodoAppErrorCode.parse(None), TodoAppErrorCode.UNKNOWN)
        self.assertEqual(TodoAppErrorCode.parse({"nested": 1}), TodoAppErrorCode.UNKNOWN)
        self.assertEqual(len(TodoAppErrorCode), 21)

    def test_error_code_compares_to_string(self):
        """Test error codes can be compared with their wire strings."""
        self.assertEqual(TodoAppErrorCode.NETWORK, "NETWORK")

    def test_ok(self):
        """Test a successful result."""
        result = Ok({"goalId": 1})

        self.assertTrue(result.is_ok)
        self.assertFalse(result.is_err)
        self.assertEqual(result.unwrap(), {"goalId": 1})
        self.assertEqual(result.to_envelope(), {"Ok": {"goalId": 1}})

    def test_err(self):
        """Test a failed result."""
        result = Err(TodoAppErrorCode.NO_CAPABILITY)

        self.assertTrue(result.is_err)
        self.assertFalse(result.is_ok)
        self.assertEqual(result.to_envelope(), {"Err": "NO_CAPABILITY"})

        with self.assertRaises(TodoAppError) as ctx:
            result.unwrap()
        self.assertEqual(ctx.exception.code, TodoAppErrorCode.NO_CAPABILITY)

    def test_ok_envelope_dumps_records(self):
        """Test records inside a result are dumped to wire form."""
        goal = Goal(goal_id=1, creation_time=1000, creator_user_id=9)

        self.assertEqual(
            Ok([goal]).to_envelope(),
            {"Ok": [{"goalId": 1, "creationTime": 1000, "creatorUserId": 9}]}
        )


class TestOperationRegistry(unittest.TestCase):
    """Test the operation table."""

    def setUp(self):
        """Set up test fixtures."""
        self.registry = OperationRegistry()

    def test_default_operations(self):
        """Test every entity has a new and a view operation, plus info."""
        operations = self.registry.list_operations()

        self.assertEqual(len(operations), 35)
        self.assertIn("goal_new", operations)
        self.assertIn("goal_entity_tag_view", operations)
        self.assertIn("info", operations)

    def test_paths(self):
        """Test operation paths."""
        self.assertEqual(self.registry.get_operation("goal_new").path, "goal/new")
        self.assertEqual(self.registry.get_operation("named_entity_pattern_new").path, "named_entity_pattern/new")
        self.assertEqual(self.registry.get_operation("goal_entity_tag_view").path, "goal_entity_tag/view")
        self.assertEqual(self.registry.get_operation("info").path, "info")

    def test_view_operations_return_lists(self):
        """Test view operations are flagged as returning many records."""
        for name in self.registry.list_operations():
            spec = self.registry.get_operation(name)
            self.assertEqual(spec.many, name.endswith("_view"), name)

    def test_response_shapes(self):
        """Test the record each new operation answers with."""
        expected = {
            "external_event_new": entities.ExternalEventData,
            "external_event_data_new": entities.ExternalEventData,
            "goal_intent_new": entities.GoalIntentData,
            "goal_intent_data_new": entities.GoalIntentData,
            "goal_new": GoalData,
            "goal_data_new": GoalData,
            "goal_event_new": entities.GoalEvent,
            "goal_dependency_new": GoalDependency,
            "goal_entity_tag_new": entities.GoalEntityTag,
            "time_utility_function_new": entities.TimeUtilityFunction,
            "user_generated_code_new": entities.UserGeneratedCode,
            "goal_template_new": entities.GoalTemplateData,
            "goal_template_data_new": entities.GoalTemplateData,
            "goal_template_pattern_new": entities.GoalTemplatePattern,
            # identity record, not its first revision
            "named_entity_new": entities.NamedEntity,
            "named_entity_data_new": entities.NamedEntityData,
            "named_entity_pattern_new": entities.NamedEntityPattern,
        }

        new_operations = [name for name in self.registry.list_operations() if name.endswith("_new")]
        self.assertCountEqual(new_operations, expected.keys())
        for name, record in expected.items():
            self.assertIs(self.registry.get_operation(name).response_model, record, name)

    def test_view_response_shapes(self):
        """Test view operations answer with lists of the record they filter."""
        self.assertIs(self.registry.get_operation("goal_view").response_model, Goal)
        self.assertIs(self.registry.get_operation("goal_intent_view").response_model, entities.GoalIntent)
        self.assertIs(self.registry.get_operation("named_entity_view").response_model, entities.NamedEntity)
        self.assertIs(self.registry.get_operation("goal_template_view").response_model, entities.GoalTemplate)
        self.assertIs(self.registry.get_operation("external_event_view").response_model, entities.ExternalEvent)

    def test_register_operation(self):
        """Test adding an operation."""
        self.registry.register_operation(OperationSpec(
            name="custom",
            path="custom/view",
            request_model=InfoProps,
            response_model=Info,
        ))

        self.assertEqual(self.registry.get_operation("custom").path, "custom/view")
        self.assertIsNone(self.registry.get_operation("missing"))


if __name__ == '__main__':
    unittest.main()
