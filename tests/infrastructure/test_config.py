"""
Tests for the stack config loader and env file output.
"""

import json

import pytest

from tracer_iac.configs import DatabaseStackConfig
from tracer_iac.configs.environment import get_config
from tracer_iac.exceptions import MissingRequiredParameter, TypeMismatch
from tracer_iac.utils.outputs import format_env_value, write_outputs_to_env


class TestGetConfig:
    """Tests for get_config()."""

    def test_defaults_with_stack_config(self, stack_config):
        """Stack config supplies the required values, defaults fill the rest."""
        config = get_config(stack_config=stack_config({
            "vpc_id": "vpc-1",
            "security_group_ids": '["sg-1", "sg-2"]',
        }))

        assert config == DatabaseStackConfig(
            region="us-east-1",
            db_instance_class="db.t3.micro",
            db_username="tracer_user",
            db_name="tracer_db",
            security_group_ids=("sg-1", "sg-2"),
            vpc_id="vpc-1",
            subnet_ids=(),
        )
        assert not config.has_subnets

    def test_environment_and_files(self, monkeypatch, tmp_path):
        """Environment and variable files feed the resolution."""
        monkeypatch.setenv("TF_VAR_vpc_id", "vpc-env")
        path = tmp_path / "prod.yaml"
        path.write_text("security_group_ids: [sg-1]\nsubnet_ids: [subnet-a, subnet-b]\n")

        config = get_config(variable_files=[path], use_stack_config=False)

        assert config.vpc_id == "vpc-env"
        assert config.subnet_ids == ("subnet-a", "subnet-b")
        assert config.has_subnets

    def test_missing_required(self):
        """Without vpc_id the stack cannot be configured."""
        with pytest.raises(MissingRequiredParameter) as exc_info:
            get_config(
                overrides={"security_group_ids": ["sg-1"]},
                use_stack_config=False,
            )
        assert exc_info.value.name == "vpc_id"

    def test_type_mismatch_from_file(self, tmp_path):
        """A wrongly typed file value fails resolution."""
        path = tmp_path / "vars.json"
        path.write_text(json.dumps({"vpc_id": "vpc-1", "security_group_ids": ["sg-1"], "db_name": 5}))

        with pytest.raises(TypeMismatch) as exc_info:
            get_config(variable_files=[path], use_stack_config=False)

        assert exc_info.value.name == "db_name"
        assert exc_info.value.actual == "integer"

    def test_as_outputs(self, required_overrides):
        """as_outputs() returns plain lists for hand-off."""
        config = get_config(overrides=required_overrides, use_stack_config=False)

        outputs = config.as_outputs()

        assert outputs["security_group_ids"] == ["sg-1"]
        assert outputs["subnet_ids"] == []
        assert outputs["region"] == "us-east-1"

    def test_config_is_frozen(self, required_overrides):
        """Resolved configs are immutable."""
        config = get_config(overrides=required_overrides, use_stack_config=False)
        with pytest.raises(AttributeError):
            config.region = "eu-west-1"


class TestWriteOutputsToEnv:
    """Tests for the env file writer."""

    def test_writes_upper_cased_keys(self, tmp_path):
        """Each output becomes one KEY=value line."""
        path = write_outputs_to_env(
            {"vpc_id": "vpc-1", "subnet_ids": ["subnet-a", "subnet-b"], "db_name": "tracer_db"},
            tmp_path / "infrastructure.env",
        )

        assert path.read_text().splitlines() == [
            "VPC_ID=vpc-1",
            "SUBNET_IDS=subnet-a,subnet-b",
            "DB_NAME=tracer_db",
        ]

    def test_empty_list_value(self):
        """An empty list renders as an empty value."""
        assert format_env_value([]) == ""
