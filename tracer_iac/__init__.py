"""
Stack variables for the tracer database infrastructure.

This package defines the input surface of the database template:
- Parameter declarations and the resolving schema
- Override sources (TF_VAR_ environment, variable files, Pulumi stack config)
- A frozen, typed config handed to the provisioning engine
"""
