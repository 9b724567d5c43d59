"""
Pulumi program entry point for the tracer database stack variables.

Steps:
1. Configure logging
2. Resolve variables from env, variable files and stack config
3. Export resolved values and write them to an env file

Provisioning of the database itself is done by the downstream engine
reading these outputs.
"""

from pathlib import Path

import pulumi

from tracer_iac.configs.constants import OUTPUTS_ENV_FILE
from tracer_iac.configs.environment import get_config
from tracer_iac.sources import discover_variable_files, stack_variable_files
from tracer_iac.utils.logger import configure_logging
from tracer_iac.utils.outputs import write_outputs_to_env


def main() -> None:
    """Resolve and export the database stack variables."""
    configure_logging()

    pulumi_config = pulumi.Config()
    variable_files = discover_variable_files(Path.cwd())
    # Extra files can be listed in stack config as a JSON array
    variable_files.extend(stack_variable_files(pulumi_config))

    config = get_config(
        variable_files=variable_files,
        stack_config=pulumi_config,
    )
    outputs = config.as_outputs()

    # Write outputs to .env file for the provisioning engine
    write_outputs_to_env(outputs, OUTPUTS_ENV_FILE)

    for key, value in outputs.items():
        pulumi.export(key, value)

    pulumi.log.info(f"✓ Resolved {len(outputs)} database stack variables")


# Execute
main()
