"""
Input variables for the tracer database stack.

Declares the region, instance class, credentials and network identifiers
consumed when provisioning the tracer RDS database.
"""

from tracer_iac.schema.declaration import ParameterDeclaration
from tracer_iac.schema.resolver import ConfigurationSchema
from tracer_iac.schema.types import ParameterType

DATABASE_STACK_VARIABLES = ConfigurationSchema([
    ParameterDeclaration(
        name="region",
        description="AWS region to deploy the database in",
        default="us-east-1",
    ),
    ParameterDeclaration(
        name="db_instance_class",
        description="RDS instance class",
        default="db.t3.micro",
    ),
    ParameterDeclaration(
        name="db_username",
        description="Master username for the database",
        default="tracer_user",
    ),
    ParameterDeclaration(
        name="db_name",
        description="Name of the database to create",
        default="tracer_db",
    ),
    # No default: the caller must pass the groups attached to the instance
    ParameterDeclaration(
        name="security_group_ids",
        description="Security group IDs attached to the database",
        type=ParameterType.LIST_OF_STRING,
    ),
    ParameterDeclaration(
        name="vpc_id",
        description="VPC the database is deployed into",
    ),
    ParameterDeclaration(
        name="subnet_ids",
        description="Subnet IDs for the database subnet group",
        type=ParameterType.LIST_OF_STRING,
        default=[],
    ),
])
