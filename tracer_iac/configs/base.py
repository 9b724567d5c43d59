"""
Resolved configuration dataclass for the tracer database stack.

Provides a type-safe view over resolved parameter values.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class DatabaseStackConfig:
    """
    Resolved inputs for provisioning the tracer database.

    Attributes:
        region: AWS region
        db_instance_class: RDS instance class
        db_username: Master username
        db_name: Database name
        security_group_ids: Security groups attached to the instance
        vpc_id: VPC the database lives in
        subnet_ids: Subnets for the DB subnet group (may be empty)
    """
    region: str
    db_instance_class: str
    db_username: str
    db_name: str
    security_group_ids: tuple[str, ...]
    vpc_id: str
    subnet_ids: tuple[str, ...] = ()

    @classmethod
    def from_resolved(cls, values: Mapping[str, Any]) -> "DatabaseStackConfig":
        """Build from the output of ConfigurationSchema.resolve()."""
        return cls(
            region=values["region"],
            db_instance_class=values["db_instance_class"],
            db_username=values["db_username"],
            db_name=values["db_name"],
            security_group_ids=tuple(values["security_group_ids"]),
            vpc_id=values["vpc_id"],
            subnet_ids=tuple(values["subnet_ids"]),
        )

    @property
    def has_subnets(self) -> bool:
        """Check whether explicit subnets were supplied."""
        return bool(self.subnet_ids)

    def as_outputs(self) -> dict[str, Any]:
        """Get values as plain data (tuples become lists) for hand-off."""
        return {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in asdict(self).items()
        }
