"""
Stack configuration constants for the tracer database.

Contains environment prefixes, file names and variable file formats.
"""

from typing import Final

# Terraform-compatible environment variable prefix (TF_VAR_vpc_id, ...)
ENV_PREFIX: Final[str] = "TF_VAR_"

# Dotenv file read alongside the process environment
ENV_FILE: Final[str] = ".env"

# Env file written for the downstream provisioning engine
OUTPUTS_ENV_FILE: Final[str] = "infrastructure.env"

# Variable files picked up automatically from the working directory
DEFAULT_VARIABLE_FILE: Final[str] = "terraform.tfvars.json"
AUTO_VARIABLE_FILE_GLOB: Final[str] = "*.auto.tfvars.json"

# Variable file suffix to parser name
VARIABLE_FILE_FORMATS: Final[dict[str, str]] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}
