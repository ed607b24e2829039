"""Go client tooling driven by the REST OpenAPI spec."""
